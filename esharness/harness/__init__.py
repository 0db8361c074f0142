"""Client factory, fixture provisioner and their configuration."""

from .config import HarnessSettings, resolve_settings
from .deprecations import DeprecationPolicy, deprecation_observer
from .factory import setup_test_client
from .provisioner import (
    setup_test_client_and_create_index,
    setup_test_client_and_create_index_and_add_docs,
    setup_test_client_and_create_index_and_add_docs_no_source,
    setup_test_client_and_create_index_and_log,
)
from .reporting import ConsoleReporter, FatalReporter, Recorder, SetupError
from .state import FixtureRun, ProvisioningState

__all__ = [
    "HarnessSettings",
    "resolve_settings",
    "DeprecationPolicy",
    "deprecation_observer",
    "setup_test_client",
    "setup_test_client_and_create_index",
    "setup_test_client_and_create_index_and_add_docs",
    "setup_test_client_and_create_index_and_add_docs_no_source",
    "setup_test_client_and_create_index_and_log",
    "ConsoleReporter",
    "FatalReporter",
    "Recorder",
    "SetupError",
    "FixtureRun",
    "ProvisioningState",
]
