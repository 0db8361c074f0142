"""Build a configured ESClient and clear out leftovers from previous runs."""

from __future__ import annotations

from typing import Any, Optional

import requests

from esharness.client.client import ESClient
from esharness.client.decoder import install_decoder
from esharness.client.errors import DecodeError, ElasticError, IndexNotFoundError
from esharness.fixtures.mapping import FIXTURE_INDICES

from .config import HarnessSettings, resolve_settings
from .deprecations import DeprecationPolicy, deprecation_observer
from .reporting import FatalReporter
from .state import FixtureRun, ProvisioningState


def new_client(t: FatalReporter, settings: HarnessSettings, **options: Any) -> ESClient:
    """Construct the client; any construction failure is fatal."""

    kwargs = settings.client_options()
    kwargs.update(options)
    try:
        return ESClient(**kwargs)
    except (ElasticError, requests.RequestException, TypeError, ValueError) as exc:
        t.fatal(f"cannot create client for {kwargs.get('base_url')}: {exc}")


def clean_fixture_indices(t: FatalReporter, client: ESClient) -> None:
    """Drop both fixture indices. A missing index is fine; anything else is fatal."""

    for name in FIXTURE_INDICES:
        try:
            client.delete_index(name)
        except IndexNotFoundError:
            continue
        except (ElasticError, DecodeError) as exc:
            t.fatal(f"cannot delete fixture index {name}: {exc}")


def setup_test_client(
    t: FatalReporter,
    settings: Optional[HarnessSettings] = None,
    run: Optional[FixtureRun] = None,
    **options: Any,
) -> ESClient:
    """Return a client with decoder and deprecation policy applied and no fixture indices."""

    settings = settings or resolve_settings()
    run = run if run is not None else FixtureRun()
    client = new_client(t, settings, **options)

    install_decoder(client, settings.strict_decoder)

    if settings.deprecations is not DeprecationPolicy.OFF:
        client.response_observer = deprecation_observer(t, settings.deprecations)
    run.advance(ProvisioningState.CLIENT_READY)

    clean_fixture_indices(t, client)
    run.advance(ProvisioningState.INDICES_CLEANED)
    return client


__all__ = ["new_client", "clean_fixture_indices", "setup_test_client"]
