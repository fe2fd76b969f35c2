"""Configuration management for the clip watcher service.

Loads configuration from environment variables with validation and defaults.
"""

import os
from dataclasses import dataclass, field
from typing import List

from .exceptions import ConfigurationError


def _parse_api_keys(raw_keys: str, single_key: str) -> List[str]:
    """Merge the comma-separated key list with the single-key variable.

    Args:
        raw_keys: Value of ``YOUTUBE_API_KEYS``.
        single_key: Value of ``YOUTUBE_API_KEY``.

    Returns:
        List[str]: Ordered, de-duplicated API keys.
    """
    keys: List[str] = []
    for key in raw_keys.split(",") + [single_key]:
        key = key.strip()
        if key and key not in keys:
            keys.append(key)
    return keys


@dataclass
class Config:
    """Configuration for the clip watcher service."""

    # YouTube settings
    channel_id: str
    api_keys: List[str] = field(default_factory=list)

    # Discord webhook
    discord_webhook_url: str = ""

    # Polling and clip settings
    poll_interval_ms: int = 15000
    clip_pad_seconds: int = 30
    clip_cooldown_ms: int = 30000
    command_token: str = "!clip"

    # Service settings
    api_timeout_seconds: float = 10.0
    environment: str = "production"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment.

        Raises:
            ConfigurationError: If required environment variables are missing
                or no API key is supplied.
        """
        required = {
            "CHANNEL_ID": os.getenv("CHANNEL_ID"),
            "DISCORD_WEBHOOK_URL": os.getenv("DISCORD_WEBHOOK_URL"),
        }

        missing = [key for key, value in required.items() if not value]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        api_keys = _parse_api_keys(
            os.getenv("YOUTUBE_API_KEYS", ""), os.getenv("YOUTUBE_API_KEY", "")
        )
        if not api_keys:
            raise ConfigurationError(
                "At least one YouTube API key is required (YOUTUBE_API_KEYS or YOUTUBE_API_KEY)"
            )

        try:
            return cls(
                channel_id=required["CHANNEL_ID"],
                api_keys=api_keys,
                discord_webhook_url=required["DISCORD_WEBHOOK_URL"],
                poll_interval_ms=int(os.getenv("POLL_INTERVAL_MS", "15000")),
                clip_pad_seconds=int(os.getenv("CLIP_PAD_SECONDS", "30")),
                clip_cooldown_ms=int(os.getenv("CLIP_COOLDOWN_MS", "30000")),
                command_token=os.getenv("CLIP_COMMAND", "!clip"),
                api_timeout_seconds=float(os.getenv("API_TIMEOUT_SECONDS", "10")),
                environment=os.getenv("ENVIRONMENT", "production"),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric configuration value: {e}") from e

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ConfigurationError: If configuration values are invalid.
        """
        if not self.channel_id:
            raise ConfigurationError("channel_id cannot be empty")

        if not self.api_keys:
            raise ConfigurationError("At least one YouTube API key is required")

        if not self.discord_webhook_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"Invalid Discord webhook URL: {self.discord_webhook_url!r}"
            )

        if self.poll_interval_ms <= 0:
            raise ConfigurationError(
                f"poll_interval_ms must be > 0, got {self.poll_interval_ms}"
            )

        if self.clip_pad_seconds < 0:
            raise ConfigurationError(
                f"clip_pad_seconds must be >= 0, got {self.clip_pad_seconds}"
            )

        if self.clip_cooldown_ms < 0:
            raise ConfigurationError(
                f"clip_cooldown_ms must be >= 0, got {self.clip_cooldown_ms}"
            )

        if not self.command_token.strip() or " " in self.command_token.strip():
            raise ConfigurationError(
                f"command_token must be a single word, got {self.command_token!r}"
            )

        if self.api_timeout_seconds <= 0:
            raise ConfigurationError(
                f"api_timeout_seconds must be > 0, got {self.api_timeout_seconds}"
            )

    def __repr__(self) -> str:
        """String representation with masked API keys."""
        return (
            f"Config("
            f"channel_id='{self.channel_id}', "
            f"api_keys=[{len(self.api_keys)} masked], "
            f"poll_interval_ms={self.poll_interval_ms}, "
            f"clip_pad_seconds={self.clip_pad_seconds}, "
            f"clip_cooldown_ms={self.clip_cooldown_ms}, "
            f"command_token='{self.command_token}', "
            f"environment='{self.environment}')"
        )
