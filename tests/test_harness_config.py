"""Tests for esharness.harness.config covering settings resolution order.

Run with coverage:
    pytest tests/test_harness_config.py --maxfail=1 -v --cov=esharness.harness.config --cov-report=term-missing
"""

import json

import pytest

from esharness.harness import config
from esharness.harness.deprecations import DeprecationPolicy


def test_defaults_without_file_env_or_flags():
    settings = config.resolve_settings(environ={}, section={})
    assert settings == config.HarnessSettings()
    assert settings.deprecations is DeprecationPolicy.OFF
    assert settings.strict_decoder is False
    assert settings.ci is False


def test_settings_file_section_is_applied():
    section = {"url": "http://es:9200", "username": "elastic", "password": "pw", "deprecations": "log",
               "strict_decoder": True, "verify_tls": False}
    settings = config.resolve_settings(environ={}, section=section)
    assert settings.es_url == "http://es:9200"
    assert settings.username == "elastic"
    assert settings.deprecations is DeprecationPolicy.LOG
    assert settings.strict_decoder is True
    assert settings.verify_tls is False


def test_environment_overrides_settings_file():
    env = {"ES_URL": "http://env:9200", "ES_DEPRECATIONS": "error", "ES_STRICT_DECODER": "1",
           "TRAVIS": "true", "TRAVIS_PYTHON_VERSION": "3.12"}
    settings = config.resolve_settings(environ=env, section={"url": "http://file:9200"})
    assert settings.es_url == "http://env:9200"
    assert settings.deprecations is DeprecationPolicy.FAIL
    assert settings.strict_decoder is True
    assert settings.ci is True
    assert settings.ci_version == "3.12"


def test_flags_override_environment():
    args = config.parse_args(["--es-url", "http://cli:9200", "--deprecations", "log", "--strict-decoder",
                              "--no-verify-tls"])
    settings = config.resolve_settings(args, environ={"ES_URL": "http://env:9200", "ES_DEPRECATIONS": "fail"},
                                       section={})
    assert settings.es_url == "http://cli:9200"
    assert settings.deprecations is DeprecationPolicy.LOG
    assert settings.strict_decoder is True
    assert settings.verify_tls is False


def test_unset_flags_keep_earlier_values():
    args = config.parse_args([])
    assert args.seed == "full"
    settings = config.resolve_settings(args, environ={"ES_STRICT_DECODER": "yes"}, section={})
    assert settings.strict_decoder is True
    assert settings.deprecations is DeprecationPolicy.OFF


def test_unknown_deprecation_flag_is_rejected():
    with pytest.raises(SystemExit):
        config.parse_args(["--deprecations", "loud"])


def test_unknown_deprecation_env_value_is_rejected():
    with pytest.raises(ValueError):
        config.resolve_settings(environ={"ES_DEPRECATIONS": "loud"}, section={})


def test_ci_detection():
    assert config.is_ci({"CI": "true"}) is True
    assert config.is_ci({}) is False
    assert config.ci_toolchain_version({"PYTHON_VERSION": "3.11"}) == "3.11"
    assert config.ci_toolchain_version({}) is None


def test_client_options_follow_settings():
    settings = config.HarnessSettings(es_url="http://x:9200", api_key="k", verify_tls=False)
    assert settings.client_options() == {
        "base_url": "http://x:9200",
        "username": None,
        "password": None,
        "api_key": "k",
        "verify_tls": False,
    }


def test_settings_file_is_located_through_env(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"elasticsearch": {"url": "http://file:9200"}}), encoding="utf-8")
    monkeypatch.setenv(config.SETTINGS_FILE_ENV, str(path))
    assert config.load_settings_section() == {"url": "http://file:9200"}
    assert config.resolve_settings(environ={}).es_url == "http://file:9200"


def test_unreadable_settings_file_is_ignored(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text("{broken", encoding="utf-8")
    assert config.load_settings_section(path) == {}
    assert "ignoring unreadable" in capsys.readouterr().out
    assert config.load_settings_section(tmp_path / "missing.json") == {}


def test_settings_file_without_elasticsearch_block(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"github": {"token": "x"}}), encoding="utf-8")
    assert config.load_settings_section(path) == {}
    path.write_text(json.dumps(["not", "an", "object"]), encoding="utf-8")
    assert config.load_settings_section(path) == {}


def test_settings_file_env_is_read_from_given_environ(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"elasticsearch": {"deprecations": "fail"}}), encoding="utf-8")
    section = config.load_settings_section(environ={config.SETTINGS_FILE_ENV: str(path)})
    assert config.settings_from_file(section).deprecations is DeprecationPolicy.FAIL
