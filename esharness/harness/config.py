"""Configuration for the fixture harness: defaults, settings file, env and CLI."""

from __future__ import annotations

import argparse
import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from esharness.client.client import DEFAULT_URL

from .deprecations import DeprecationPolicy

SETTINGS_FILE_ENV = "HARNESS_SETTINGS_FILE"
DEFAULT_SETTINGS_FILE = Path(__file__).resolve().parents[2] / "local_settings.json"
DEPRECATION_CHOICES = ("off", "log", "fail", "error")
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class HarnessSettings:
    """Resolved, immutable settings handed to the client factory."""

    es_url: str = DEFAULT_URL
    username: Optional[str] = None
    password: Optional[str] = None
    api_key: Optional[str] = None
    verify_tls: bool = True
    deprecations: DeprecationPolicy = DeprecationPolicy.OFF
    strict_decoder: bool = False
    ci: bool = False
    ci_version: Optional[str] = None

    def client_options(self) -> Dict[str, Any]:
        """Keyword arguments for ESClient derived from these settings."""

        return {
            "base_url": self.es_url,
            "username": self.username,
            "password": self.password,
            "api_key": self.api_key,
            "verify_tls": self.verify_tls,
        }


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def is_ci(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return bool(env.get("CI") or env.get("TRAVIS"))


def ci_toolchain_version(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    env = os.environ if environ is None else environ
    return env.get("TRAVIS_PYTHON_VERSION") or env.get("PYTHON_VERSION") or None


def load_settings_section(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """The ``elasticsearch`` block of the local settings file, or {} if there is none.

    The file is looked up at ``path``, then $HARNESS_SETTINGS_FILE, then
    ``local_settings.json`` at the repository root. A file that cannot be read
    or parsed is reported and skipped so env and flags still apply.
    """

    env = os.environ if environ is None else environ
    settings_path = Path(path or env.get(SETTINGS_FILE_ENV) or DEFAULT_SETTINGS_FILE).expanduser()
    if not settings_path.exists():
        return {}
    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        print(f"[settings] ignoring unreadable {settings_path}: {exc}")
        return {}
    section = data.get("elasticsearch") if isinstance(data, dict) else None
    return section if isinstance(section, dict) else {}


def settings_from_file(section: Optional[Mapping[str, Any]] = None) -> HarnessSettings:
    """Defaults overlaid with the ``elasticsearch`` block of the local settings file."""

    data = load_settings_section() if section is None else section
    base = HarnessSettings()
    return HarnessSettings(
        es_url=data.get("url", base.es_url),
        username=data.get("username"),
        password=data.get("password"),
        api_key=data.get("api_key") or None,
        verify_tls=_flag(data.get("verify_tls", base.verify_tls)),
        deprecations=DeprecationPolicy.parse(data.get("deprecations", "off")),
        strict_decoder=_flag(data.get("strict_decoder", False)),
    )


def apply_env(settings: HarnessSettings, environ: Optional[Mapping[str, str]] = None) -> HarnessSettings:
    """Overlay ES_* environment variables and CI detection."""

    env = os.environ if environ is None else environ
    changes: Dict[str, Any] = {"ci": is_ci(env), "ci_version": ci_toolchain_version(env)}
    if env.get("ES_URL"):
        changes["es_url"] = env["ES_URL"]
    if env.get("ES_USERNAME"):
        changes["username"] = env["ES_USERNAME"]
    if env.get("ES_PASSWORD"):
        changes["password"] = env["ES_PASSWORD"]
    if env.get("ES_API_KEY"):
        changes["api_key"] = env["ES_API_KEY"]
    if env.get("ES_VERIFY_TLS"):
        changes["verify_tls"] = _flag(env["ES_VERIFY_TLS"])
    if env.get("ES_DEPRECATIONS"):
        changes["deprecations"] = DeprecationPolicy.parse(env["ES_DEPRECATIONS"])
    if env.get("ES_STRICT_DECODER"):
        changes["strict_decoder"] = _flag(env["ES_STRICT_DECODER"])
    return replace(settings, **changes)


def add_harness_arguments(add_argument: Any) -> None:
    """Register the shared flags; works with argparse and pytest's addoption."""

    add_argument("--es-url", default=None, help="Elasticsearch base URL")
    add_argument("--es-username", default=None)
    add_argument("--es-password", default=None)
    add_argument("--es-api-key", default=None)
    add_argument(
        "--deprecations",
        default=None,
        choices=DEPRECATION_CHOICES,
        help="log or fail on deprecation warnings",
    )
    add_argument(
        "--strict-decoder",
        action="store_true",
        default=None,
        help="treat unknown fields in responses as errors",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the fixture runner."""

    parser = argparse.ArgumentParser(
        description="Provision the Elasticsearch fixture indices used by the client tests.",
    )
    add_harness_arguments(parser.add_argument)
    parser.add_argument(
        "--seed",
        default="full",
        choices=("none", "full", "nosource"),
        help="which document set to seed after creating the indices",
    )
    parser.add_argument("--trace", action="store_true", help="print every request and response")
    parser.add_argument("--no-verify-tls", action="store_true")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    parser = build_arg_parser()
    return parser.parse_args(argv)


def apply_args(settings: HarnessSettings, args: Any) -> HarnessSettings:
    """Overlay explicitly passed flags; flags left at None keep the earlier value."""

    changes: Dict[str, Any] = {}
    for attr, name in (
        ("es_url", "es_url"),
        ("es_username", "username"),
        ("es_password", "password"),
        ("es_api_key", "api_key"),
    ):
        value = getattr(args, attr, None)
        if value:
            changes[name] = value
    if getattr(args, "deprecations", None):
        changes["deprecations"] = DeprecationPolicy.parse(args.deprecations)
    if getattr(args, "strict_decoder", None):
        changes["strict_decoder"] = True
    if getattr(args, "no_verify_tls", False):
        changes["verify_tls"] = False
    return replace(settings, **changes)


def resolve_settings(
    args: Optional[Any] = None,
    environ: Optional[Mapping[str, str]] = None,
    section: Optional[Mapping[str, Any]] = None,
) -> HarnessSettings:
    """Defaults < settings file < environment < command-line flags."""

    settings = apply_env(settings_from_file(section), environ)
    if args is not None:
        settings = apply_args(settings, args)
    return settings


__all__ = [
    "SETTINGS_FILE_ENV",
    "DEFAULT_SETTINGS_FILE",
    "DEPRECATION_CHOICES",
    "HarnessSettings",
    "is_ci",
    "ci_toolchain_version",
    "load_settings_section",
    "settings_from_file",
    "apply_env",
    "add_harness_arguments",
    "build_arg_parser",
    "parse_args",
    "apply_args",
    "resolve_settings",
]
