"""Entry point wiring configuration, the client factory and fixture seeding."""

from __future__ import annotations

import sys
from typing import List, Optional

from .config import parse_args, resolve_settings
from .provisioner import (
    setup_test_client_and_create_index,
    setup_test_client_and_create_index_and_add_docs,
    setup_test_client_and_create_index_and_add_docs_no_source,
)
from .reporting import ConsoleReporter, SetupError
from .state import FixtureRun

SEEDERS = {
    "none": setup_test_client_and_create_index,
    "full": setup_test_client_and_create_index_and_add_docs,
    "nosource": setup_test_client_and_create_index_and_add_docs_no_source,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Provision the fixture indices on the configured cluster; 0 on success."""

    args = parse_args(argv)
    settings = resolve_settings(args)
    reporter = ConsoleReporter()
    run = FixtureRun()
    options = {"trace_log": print} if args.trace else {}

    print(f"[fixtures] {settings.es_url} seed={args.seed} "
          f"strict={settings.strict_decoder} deprecations={settings.deprecations.value}")
    try:
        SEEDERS[args.seed](reporter, settings, run=run, **options)
    except SetupError:
        print(f"[fixtures] aborted at state {run.state.name}", file=sys.stderr)
        return 1

    print(f"[fixtures] reached {run.state.name}; wrote {len(run.documents)} documents")
    if reporter.failed:
        print(f"[fixtures] {len(reporter.errors)} deprecation warning(s) reported", file=sys.stderr)
        return 1
    return 0


__all__ = ["SEEDERS", "main"]
