"""Reporting capabilities the harness depends on, plus a console implementation."""

from __future__ import annotations

from typing import List, NoReturn, Protocol


class SetupError(RuntimeError):
    """Raised by ConsoleReporter.fatal: the fixture setup cannot continue."""


class Recorder(Protocol):
    def log(self, message: str) -> None:
        """Informational output."""

    def error(self, message: str) -> None:
        """Record a failure without stopping the run."""


class FatalReporter(Recorder, Protocol):
    def fatal(self, message: str) -> NoReturn:
        """Record a failure and abort the run; never returns."""


class ConsoleReporter:
    """Print-based reporter used by the CLI runner and by unit tests."""

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet
        self.logs: List[str] = []
        self.errors: List[str] = []

    @property
    def failed(self) -> bool:
        return bool(self.errors)

    def log(self, message: str) -> None:
        self.logs.append(message)
        if not self.quiet:
            print(f"[log] {message}")

    def error(self, message: str) -> None:
        self.errors.append(message)
        if not self.quiet:
            print(f"[error] {message}")

    def fatal(self, message: str) -> NoReturn:
        self.error(message)
        raise SetupError(message)


__all__ = ["SetupError", "Recorder", "FatalReporter", "ConsoleReporter"]
