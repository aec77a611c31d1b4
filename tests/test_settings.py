"""Tests for DatabaseSettings loading."""

import pytest

from neondb.db.settings import DatabaseSettings, load_settings


def test_defaults_from_minimal_env(tmp_path):
    cfg = tmp_path / "db.yaml"
    cfg.write_text("", encoding="utf-8")
    settings = load_settings({"DATABASE_URL": "postgres://u:p@h:5432/d"}, config_path=cfg)
    assert settings == DatabaseSettings(
        database_url="postgres://u:p@h:5432/d",
        app_env="production",
        verify_tls=False,
        timeout=60,
    )
    assert not settings.is_development


def test_explicit_missing_config_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings({}, config_path=tmp_path / "missing.yaml")


def test_app_env_falls_back_to_node_env(tmp_path):
    cfg = tmp_path / "db.yaml"
    cfg.write_text("", encoding="utf-8")
    settings = load_settings({"NODE_ENV": "development"}, config_path=cfg)
    assert settings.is_development
    assert settings.database_url is None


def test_app_env_takes_precedence(tmp_path):
    cfg = tmp_path / "db.yaml"
    cfg.write_text("", encoding="utf-8")
    settings = load_settings({"APP_ENV": "production", "NODE_ENV": "development"}, config_path=cfg)
    assert not settings.is_development


def test_env_overrides_yaml(tmp_path):
    cfg = tmp_path / "db.yaml"
    cfg.write_text("database:\n  verify_tls: false\n  timeout: 15\n", encoding="utf-8")

    from_yaml = load_settings({}, config_path=cfg)
    assert from_yaml.verify_tls is False
    assert from_yaml.timeout == 15

    from_env = load_settings({"DATABASE_VERIFY_TLS": "true", "DATABASE_TIMEOUT": "5"}, config_path=cfg)
    assert from_env.verify_tls is True
    assert from_env.timeout == 5


def test_mode_flag_is_cleaned_but_url_is_raw(tmp_path):
    cfg = tmp_path / "db.yaml"
    cfg.write_text("", encoding="utf-8")
    raw_url = " postgres://u:p@h:5432/d?options=-c%20search_path%3Dapp "
    settings = load_settings({"DATABASE_URL": raw_url, "APP_ENV": " 'Development' "}, config_path=cfg)
    assert settings.database_url == raw_url
    assert settings.is_development


def test_empty_url_is_missing(tmp_path):
    cfg = tmp_path / "db.yaml"
    cfg.write_text("", encoding="utf-8")
    assert load_settings({"DATABASE_URL": ""}, config_path=cfg).database_url is None


@pytest.mark.parametrize(
    "env",
    [{"DATABASE_VERIFY_TLS": "maybe"}, {"DATABASE_TIMEOUT": "soon"}],
)
def test_invalid_values_raise(tmp_path, env):
    cfg = tmp_path / "db.yaml"
    cfg.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        load_settings(env, config_path=cfg)


def test_reads_os_environ_when_env_not_given(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATABASE_URL", "postgres://u:p@h:5432/d")
    monkeypatch.setenv("APP_ENV", "development")
    settings = load_settings()
    assert settings.database_url == "postgres://u:p@h:5432/d"
    assert settings.is_development
