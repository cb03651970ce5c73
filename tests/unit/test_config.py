"""Unit tests for config.py"""

import pytest
from pydantic import ValidationError

from pagesmith.config import Settings, auth_config, load_config
from pagesmith.errors import ConfigurationError


def test_load_config_defaults(tmp_path, monkeypatch):
    """Settings defaults are used when no config.yaml, env var, or override exists."""
    monkeypatch.chdir(tmp_path)
    settings = load_config()
    assert settings.pages_dir == "pages"
    assert settings.output_dir == "public"
    assert settings.default_template == "page.html"
    assert settings.db_url == "sqlite:///pagesmith.db"
    assert settings.secret is None


def test_load_config_uses_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PAGESMITH_OUTPUT_DIR", "dist")
    assert load_config().output_dir == "dist"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """PAGESMITH_* env vars take precedence over config.yaml."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("pages_dir: src\noutput_dir: build\n")
    monkeypatch.setenv("PAGESMITH_OUTPUT_DIR", "dist")
    settings = load_config()
    assert settings.pages_dir == "src"
    assert settings.output_dir == "dist"


def test_load_config_overrides_beat_env(tmp_path, monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PAGESMITH_DB_URL", "sqlite:///env.db")
    assert load_config(overrides={"db_url": "sqlite:///cli.db"}).db_url == "sqlite:///cli.db"
    assert load_config(overrides={"db_url": None}).db_url == "sqlite:///env.db"


def test_load_config_env_session_ttl_coerced(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PAGESMITH_SESSION_TTL", "60")
    assert load_config().session_ttl == 60


def test_load_config_invalid_yaml(tmp_path, monkeypatch):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_settings_rejects_bad_ttl():
    with pytest.raises(ValidationError):
        Settings(session_ttl=0)


def test_auth_config_from_settings():
    config = auth_config(Settings(secret="s", admin_username="admin", admin_password_hash="$h", session_ttl=120))
    assert config.secret == b"s"
    assert config.session_ttl_ms == 120_000
    assert config.max_age == 120
    assert config.cookie_name == "session"


def test_auth_config_lists_missing_fields():
    with pytest.raises(ConfigurationError) as exc:
        auth_config(Settings(admin_username="admin"))
    assert "PAGESMITH_SECRET" in str(exc.value)
    assert "PAGESMITH_ADMIN_PASSWORD_HASH" in str(exc.value)
    assert "PAGESMITH_ADMIN_USERNAME" not in str(exc.value)
