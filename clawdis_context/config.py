"""Simplified configuration management."""

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field


def _load_env_file() -> None:
    """Load .env from root directory if present."""
    env_path = Path(__file__).parent.parent / ".env"
    if not env_path.is_file():
        return
    try:
        for line in env_path.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            if stripped and not stripped.startswith("#") and "=" in stripped:
                key, value = stripped.split("=", 1)
                key, value = key.strip(), value.strip().strip("'\"")
                if key and value and key not in os.environ:
                    os.environ[key] = value
    except OSError:
        pass


_load_env_file()


DEFAULT_APP_NAME = "Clawdis Context Service"
DEFAULT_APP_VERSION = "0.1.0"
DEFAULT_KEEP_RECENT_MINUTES = 60


def _env_int(name: str, fallback: int) -> int:
    try:
        return int(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


def _get_port() -> int:
    """Get server port, checking PORT first, then CLAWDIS_PORT."""
    port = os.getenv("PORT") or os.getenv("CLAWDIS_PORT")
    if port:
        try:
            return int(port)
        except ValueError:
            pass
    return 8011


def _get_sessions_dir() -> Path:
    raw = os.getenv("CLAWDIS_SESSIONS_DIR")
    if raw:
        return Path(raw).expanduser()
    return Path.home() / ".clawdis" / "sessions"


def _get_keep_recent_minutes() -> int:
    value = _env_int("CLAWDIS_KEEP_RECENT_MINUTES", DEFAULT_KEEP_RECENT_MINUTES)
    return value if value >= 0 else DEFAULT_KEEP_RECENT_MINUTES


class Settings(BaseModel):
    """Application settings with lightweight env fallbacks."""

    # App metadata
    app_name: str = Field(default=DEFAULT_APP_NAME)
    app_version: str = Field(default=DEFAULT_APP_VERSION)

    # Server runtime
    server_host: str = Field(default=os.getenv("CLAWDIS_HOST", "127.0.0.1"))
    server_port: int = Field(default_factory=_get_port)

    # Context compaction
    sessions_dir: Path = Field(default_factory=_get_sessions_dir)
    keep_recent_minutes: int = Field(default_factory=_get_keep_recent_minutes, ge=0)

    # HTTP behaviour
    cors_allow_origins_raw: str = Field(default=os.getenv("CLAWDIS_CORS_ALLOW_ORIGINS", "*"))
    enable_docs: bool = Field(default=os.getenv("CLAWDIS_ENABLE_DOCS", "1") != "0")
    docs_url: Optional[str] = Field(default=os.getenv("CLAWDIS_DOCS_URL", "/docs"))

    @property
    def cors_allow_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_allow_origins_raw.strip() in {"", "*"}:
            return ["*"]
        return [origin.strip() for origin in self.cors_allow_origins_raw.split(",") if origin.strip()]

    @property
    def resolved_docs_url(self) -> Optional[str]:
        """Return documentation URL when docs are enabled."""
        return (self.docs_url or "/docs") if self.enable_docs else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
