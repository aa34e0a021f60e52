"""
Configuration loading tests.
"""

import pytest

from babel_basex.config import Settings, load_settings, DEFAULT_CONFIG_PATH
from babel_basex.core.errors import ConfigError


def test_defaults():
    s = Settings()
    assert s.basex.command == "basex"
    assert s.basex.timeout_sec is None
    assert s.basex.raise_on_error is False
    assert s.basex.default_db is None
    assert s.tempfiles.keep is False
    assert s.logging.level == "INFO"


def test_packaged_config_matches_defaults():
    assert DEFAULT_CONFIG_PATH.exists()
    s = Settings.load_from_file()
    assert s.basex.command == "basex"
    assert s.tempfiles.keep is False


def test_load_from_yaml_ignores_unknown_keys(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text(
        "basex:\n  command: /opt/basex/bin/basex\n  timeout_sec: 30\n  unknown: 1\nhost: {tangle: true}\n",
        encoding="utf-8",
    )
    s = Settings.load_from_file(cfg)
    assert s.basex.command == "/opt/basex/bin/basex"
    assert s.basex.timeout_sec == 30


def test_empty_yaml_gives_defaults(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("", encoding="utf-8")
    assert Settings.load_from_file(cfg).basex.command == "basex"


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Settings.load_from_file(tmp_path / "nope.yaml")


def test_invalid_values_raise_config_error(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("basex:\n  timeout_sec: -5\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        Settings.load_from_file(cfg)


def test_non_mapping_root_raises(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        Settings.load_from_file(cfg)


def test_environment_overrides():
    env = {
        "BABEL_BASEX_COMMAND": "/usr/local/bin/basex",
        "BABEL_BASEX_TIMEOUT": "12",
        "BABEL_BASEX_RAISE_ON_ERROR": "yes",
        "BABEL_BASEX_DB": "factbook",
        "BABEL_BASEX_TMPDIR": "/tmp/bx",
        "BABEL_BASEX_KEEP_TEMP": "1",
        "BABEL_BASEX_LOG_LEVEL": "DEBUG",
    }
    s = load_settings(environ=env)
    assert s.basex.command == "/usr/local/bin/basex"
    assert s.basex.timeout_sec == 12
    assert s.basex.raise_on_error is True
    assert s.basex.default_db == "factbook"
    assert s.tempfiles.directory == "/tmp/bx"
    assert s.tempfiles.keep is True
    assert s.logging.level == "DEBUG"


def test_bad_timeout_env_raises():
    with pytest.raises(ConfigError):
        Settings().load_environment_variables({"BABEL_BASEX_TIMEOUT": "soon"})


@pytest.mark.parametrize("value", ["-5", "0"])
def test_non_positive_timeout_env_raises(value):
    with pytest.raises(ConfigError):
        Settings().load_environment_variables({"BABEL_BASEX_TIMEOUT": value})


def test_assignment_is_validated():
    s = Settings()
    with pytest.raises(ValueError):
        s.basex.timeout_sec = -1
