"""Configuration for the task manager service."""
from dataclasses import dataclass
import os

from dotenv import load_dotenv

from task_manager.errors import ConfigurationError

SSL_CERT_REQS_CHOICES = ("none", "optional", "required")


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment (and a local .env file)."""

    redis_url: str
    port: int = 3000
    log_level: str = "INFO"
    redis_ssl_cert_reqs: str = "none"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Build settings from environment variables.

        Raises:
            ConfigurationError: If REDIS_URL is missing or a value is malformed
        """
        if load_env_file:
            load_dotenv()

        redis_url = os.environ.get("REDIS_URL", "").strip()
        if not redis_url:
            raise ConfigurationError("REDIS_URL is not set")

        port_raw = os.environ.get("PORT", "3000")
        try:
            port = int(port_raw)
        except ValueError:
            raise ConfigurationError(f"PORT must be an integer, got {port_raw!r}")

        cert_reqs = os.environ.get("REDIS_SSL_CERT_REQS", "none").lower()
        if cert_reqs not in SSL_CERT_REQS_CHOICES:
            raise ConfigurationError(
                f"REDIS_SSL_CERT_REQS must be one of: {', '.join(SSL_CERT_REQS_CHOICES)}"
            )

        return cls(
            redis_url=redis_url,
            port=port,
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            redis_ssl_cert_reqs=cert_reqs,
        )
