"""Application configuration.

Usage:
    from swimlog.config import get_settings

    settings = get_settings()
    settings.supabase_url

Values are read from the environment and from a ``.env`` file in the working
directory or the project root.
"""

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_env_file() -> Path | None:
    """Locate .env in the working directory, then at the project root."""
    if Path(".env").exists():
        return Path(".env")
    # config.py -> swimlog -> src -> project root
    project_root = Path(__file__).resolve().parent.parent.parent
    env_file = project_root / ".env"
    if env_file.exists():
        return env_file
    return None


class Environment(StrEnum):
    """Deployment environment."""

    LOCAL = "local"
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class LogFormat(StrEnum):
    """Log renderer."""

    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    The Supabase credentials are optional here so that the pure parsing code,
    the CLI ``normalize``/``compare`` commands and the tests work without a
    backend. ``SupabaseClient`` checks them when a client is first needed.
    """

    model_config = SettingsConfigDict(
        env_file=_find_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Environment.LOCAL

    # Supabase
    supabase_url: str | None = Field(default=None, description="Supabase project URL")
    supabase_key: SecretStr | None = Field(default=None, description="Supabase anon/public key")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: LogFormat | None = Field(
        default=None, description="Log output format (default: json in production)"
    )

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def resolved_log_format(self) -> LogFormat:
        """LOG_FORMAT when set, otherwise json in production and console elsewhere."""
        if self.log_format is not None:
            return self.log_format
        return LogFormat.JSON if self.is_production else LogFormat.CONSOLE

    @property
    def has_supabase(self) -> bool:
        """True when both the project URL and the key are configured."""
        return bool(self.supabase_url) and self.supabase_key is not None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings. Call ``get_settings.cache_clear()`` to reload."""
    return Settings()
