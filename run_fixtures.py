"""Convenience shim to provision the fixture indices from the command line."""

from __future__ import annotations

import sys

from esharness.harness.runner import main as fixtures_main


if __name__ == "__main__":
    sys.exit(fixtures_main(sys.argv[1:]))
