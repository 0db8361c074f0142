"""pytest plugin exposing the fixture harness to client integration tests.

Enable it from a conftest with ``pytest_plugins = ["esharness.harness.plugin"]``.
"""

from __future__ import annotations

from typing import Iterator, List, NoReturn

import pytest

from esharness.client.client import ESClient
from esharness.client.errors import ElasticError

from .config import HarnessSettings, add_harness_arguments, resolve_settings
from .factory import setup_test_client
from .provisioner import (
    setup_test_client_and_create_index,
    setup_test_client_and_create_index_and_add_docs,
    setup_test_client_and_create_index_and_add_docs_no_source,
)


class PytestReporter:
    """log prints, error fails the test at teardown, fatal stops it immediately.

    Fatal messages are kept apart from errors: the test has already failed
    with them, so teardown must not report them a second time.
    """

    def __init__(self) -> None:
        self.logs: List[str] = []
        self.errors: List[str] = []
        self.fatals: List[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)
        print(f"[log] {message}")

    def error(self, message: str) -> None:
        self.errors.append(message)
        print(f"[error] {message}")

    def fatal(self, message: str) -> NoReturn:
        self.fatals.append(message)
        pytest.fail(message, pytrace=False)

    def check(self) -> None:
        if self.errors:
            pytest.fail("\n".join(self.errors), pytrace=False)


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("esharness", "Elasticsearch fixture harness")
    add_harness_arguments(group.addoption)


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "integration: needs a reachable Elasticsearch cluster")


@pytest.fixture(scope="session")
def harness_settings(pytestconfig: pytest.Config) -> HarnessSettings:
    return resolve_settings(pytestconfig.option)


def cluster_unavailable(settings: HarnessSettings, message: str) -> NoReturn:
    """Skip locally; on CI fail, naming the toolchain the job runs."""

    if settings.ci:
        pytest.fail(f"{message} (CI, python {settings.ci_version or 'unknown'})", pytrace=False)
    pytest.skip(message)


def require_cluster(settings: HarnessSettings) -> str:
    """Return the cluster URL, or skip (locally) or fail (on CI) when it cannot be reached."""

    try:
        ESClient(**settings.client_options())
    except (ElasticError, ValueError) as exc:
        cluster_unavailable(settings, f"Elasticsearch not available at {settings.es_url}: {exc}")
    return settings.es_url


@pytest.fixture(scope="session")
def es_cluster(harness_settings: HarnessSettings) -> str:
    return require_cluster(harness_settings)


@pytest.fixture
def reporter() -> Iterator[PytestReporter]:
    t = PytestReporter()
    yield t
    t.check()


@pytest.fixture
def es_client(es_cluster: str, reporter: PytestReporter, harness_settings: HarnessSettings) -> ESClient:
    return setup_test_client(reporter, harness_settings)


@pytest.fixture
def es_client_with_index(
    es_cluster: str, reporter: PytestReporter, harness_settings: HarnessSettings
) -> ESClient:
    return setup_test_client_and_create_index(reporter, harness_settings)


@pytest.fixture
def es_seeded_client(
    es_cluster: str, reporter: PytestReporter, harness_settings: HarnessSettings
) -> ESClient:
    return setup_test_client_and_create_index_and_add_docs(reporter, harness_settings)


@pytest.fixture
def es_seeded_client_nosource(
    es_cluster: str, reporter: PytestReporter, harness_settings: HarnessSettings
) -> ESClient:
    return setup_test_client_and_create_index_and_add_docs_no_source(reporter, harness_settings)
