"""
Dispatch Configuration

Loads engine settings from environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_BASE_URL = "https://app.notifer.io"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_CREDENTIALS_FILE = "credentials.json"


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class DispatchConfig:
    """Configuration for the dispatch engine and its transport."""

    # Transport settings
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    proxy_url: Optional[str] = field(default=None)

    # Expansion settings
    strict_variables: bool = False

    # Credential store (used by the CLI host)
    credentials_file: str = DEFAULT_CREDENTIALS_FILE

    # Sentry settings
    sentry_dsn: Optional[str] = field(default=None)
    sentry_environment: str = "production"
    sentry_traces_sample_rate: float = 0.0

    # Alert thresholds
    slow_send_warning_seconds: float = 10.0

    def __post_init__(self):
        self.base_url = (self.base_url or "").strip().rstrip("/")
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")
        if self.proxy_url is not None and not self.proxy_url.strip():
            self.proxy_url = None

    @classmethod
    def from_env(cls) -> "DispatchConfig":
        """Create config from environment variables."""
        return cls(
            base_url=os.getenv("NOTIFER_BASE_URL", DEFAULT_BASE_URL),
            timeout_seconds=float(os.getenv("NOTIFER_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))),
            proxy_url=os.getenv("NOTIFER_PROXY_URL"),
            strict_variables=_env_flag("NOTIFER_STRICT_VARIABLES"),
            credentials_file=os.getenv("NOTIFER_CREDENTIALS_FILE", DEFAULT_CREDENTIALS_FILE),
            sentry_dsn=os.getenv("SENTRY_DSN"),
            sentry_environment=os.getenv("SENTRY_ENVIRONMENT", "production"),
            sentry_traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0")),
            slow_send_warning_seconds=float(os.getenv("NOTIFER_SLOW_SEND_WARNING_SECONDS", "10")),
        )

    @property
    def sentry_enabled(self) -> bool:
        """Check if Sentry tracking is configured."""
        return bool(self.sentry_dsn)
