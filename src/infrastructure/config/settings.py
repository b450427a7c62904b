"""
Application Settings

Immutable configuration built once at process start from the environment.

Responsibility:
    - Read environment variables (and an optional .env file)
    - Convert and validate numeric values
    - Expose a frozen Settings value passed into create_app()

Architecture Notes:
    - Infrastructure Layer (reads process environment)
    - Settings are never read from os.environ during a request; the API Layer
      gets them from app.state through a dependency
    - A missing webhook URL is NOT fatal here: the app starts, warns, and
      every upload fails with a configuration error

Environment Variables:
    DISCORD_WEBHOOK_URL      Destination webhook (required for uploads)
    MAX_FILE_SIZE_MB         Local upload limit (default 25)
    WEBHOOK_USERNAME         Sender label (default "File Uploader Bot")
    WEBHOOK_TIMEOUT_SECONDS  Outbound timeout (default: httpx default)
    STATIC_DIR               Entry page directory (default <repo>/static)
    HOST / PORT              Bind address (default 0.0.0.0 / 3000)
    LOG_LEVEL                Root log level (default INFO)
    CORS_ALLOW_ORIGINS       Comma-separated origins (default *)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from src.domain.relay.constants import (
    BYTES_PER_MB,
    DEFAULT_WEBHOOK_USERNAME,
    MAX_FILE_SIZE_BYTES,
)

# <repo>/static (this file lives in <repo>/src/infrastructure/config/)
DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[3] / "static"


@dataclass(frozen=True)
class Settings:
    """
    Process-wide, read-only configuration.

    Attributes:
        webhook_url: Secret destination URL (None when not configured)
        max_file_size_bytes: Local upload limit in bytes
        webhook_username: Sender label shown by the webhook
        webhook_timeout_seconds: Outbound timeout; None keeps httpx's default
        static_dir: Directory holding index.html
        host: Bind host for uvicorn
        port: Bind port for uvicorn
        log_level: Root logging level name
        cors_allow_origins: Allowed CORS origins

    Examples:
        >>> settings = Settings(webhook_url="https://discord.com/api/webhooks/1/abc")
        >>> settings.webhook_configured
        True
        >>> Settings().webhook_configured
        False
    """

    webhook_url: Optional[str] = None
    max_file_size_bytes: int = MAX_FILE_SIZE_BYTES
    webhook_username: str = DEFAULT_WEBHOOK_USERNAME
    webhook_timeout_seconds: Optional[float] = None
    static_dir: Path = DEFAULT_STATIC_DIR
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_allow_origins: tuple[str, ...] = field(default=("*",))

    def __post_init__(self) -> None:
        """Validate numeric settings."""
        if self.max_file_size_bytes <= 0:
            raise ValueError(
                f"max_file_size_bytes must be positive, got {self.max_file_size_bytes}"
            )
        if self.webhook_timeout_seconds is not None and self.webhook_timeout_seconds <= 0:
            raise ValueError(
                f"webhook_timeout_seconds must be positive, got {self.webhook_timeout_seconds}"
            )

    @property
    def webhook_configured(self) -> bool:
        """True when a non-blank webhook URL is set."""
        return bool(self.webhook_url and self.webhook_url.strip())

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Build Settings from environment variables.

        Args:
            load_env_file: Load a .env file from the working directory first

        Returns:
            Settings instance

        Raises:
            ValueError: If a numeric variable cannot be parsed
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        max_size_mb = _parse_number(os.getenv("MAX_FILE_SIZE_MB"), "MAX_FILE_SIZE_MB", int)
        timeout = _parse_number(
            os.getenv("WEBHOOK_TIMEOUT_SECONDS"), "WEBHOOK_TIMEOUT_SECONDS", float
        )
        port = _parse_number(os.getenv("PORT"), "PORT", int)

        origins_str = os.getenv("CORS_ALLOW_ORIGINS", "*")
        origins = tuple(o.strip() for o in origins_str.split(",") if o.strip()) or ("*",)

        return cls(
            webhook_url=os.getenv("DISCORD_WEBHOOK_URL") or None,
            max_file_size_bytes=(
                max_size_mb * BYTES_PER_MB if max_size_mb is not None else MAX_FILE_SIZE_BYTES
            ),
            webhook_username=os.getenv("WEBHOOK_USERNAME", DEFAULT_WEBHOOK_USERNAME),
            webhook_timeout_seconds=timeout,
            static_dir=Path(os.getenv("STATIC_DIR", str(DEFAULT_STATIC_DIR))),
            host=os.getenv("HOST", "0.0.0.0"),
            port=port if port is not None else 3000,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            cors_allow_origins=origins,
        )


def _parse_number(raw: Optional[str], name: str, kind: type):
    """Parse an optional numeric env value; blank means unset."""
    if raw is None or not raw.strip():
        return None
    try:
        return kind(raw.strip())
    except ValueError as e:
        raise ValueError(f"{name} must be a {kind.__name__}, got {raw!r}") from e
