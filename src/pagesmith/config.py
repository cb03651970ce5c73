"""Application configuration: settings schema, config.yaml loader, auth config"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field

from pagesmith.errors import ConfigurationError


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "PAGESMITH_"


class Settings(BaseModel):
    app_name:         str = "pagesmith"
    pages_dir:        str = Field(default="pages",      description="Source tree of .html pages")
    output_dir:       str = Field(default="public",     description="Directory the built site is written to")
    templates_dir:    str = Field(default="templates",  description="Template store")
    components_dir:   str = Field(default="components", description="Component fragment store")
    default_template: str = Field(default="page.html",  description="Template used when front matter names none")
    db_url:           str = "sqlite:///pagesmith.db"
    markdown_preset:  str = Field(default="commonmark", description="MarkdownIt preset for page previews")
    log_level:        str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    session_ttl:      int = Field(default=3600, ge=1, description="Session lifetime in seconds")
    secret:              Optional[str] = Field(default=None, description="HMAC key for session tokens")
    admin_username:      Optional[str] = None
    admin_password_hash: Optional[str] = Field(default=None, description="argon2 or scrypt PHC hash")


@dataclass(frozen=True)
class AuthConfig:
    """Read-only credentials handed to the session codec and login handler."""
    secret: bytes
    admin_username: str
    admin_password_hash: str
    session_ttl_ms: int = 3600 * 1000
    cookie_name: str = "session"

    @property
    def max_age(self) -> int:
        return self.session_ttl_ms // 1000


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then PAGESMITH_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)


def auth_config(settings: Settings) -> AuthConfig:
    """Build AuthConfig from settings. Raises ConfigurationError listing every missing credential."""
    required = ("secret", "admin_username", "admin_password_hash")
    missing = [name for name in required if not getattr(settings, name)]
    if missing:
        names = ", ".join(f"{ENV_PREFIX}{n.upper()}" for n in missing)
        raise ConfigurationError(f"Missing required configuration: {names}")
    return AuthConfig(
        secret=settings.secret.encode("utf-8"),
        admin_username=settings.admin_username,
        admin_password_hash=settings.admin_password_hash,
        session_ttl_ms=settings.session_ttl * 1000,
    )
