"""
Configuration management for the notification system.

Handles environment variables for the Discord webhook.
"""

import os
from typing import Optional


class NotificationConfig:
    """Configuration for the notification system."""

    def __init__(self, discord_webhook_url: Optional[str] = None) -> None:
        """
        Initialize configuration from environment variables.

        Args:
            discord_webhook_url: Optional webhook URL overriding DISCORD_WEBHOOK_URL
        """
        # Webhook URL
        self.discord_webhook_url: Optional[str] = discord_webhook_url or os.getenv(
            "DISCORD_WEBHOOK_URL"
        )

        # General settings
        self.enabled: bool = self._get_bool_env("NOTIFICATION_ENABLED", True)
        raw_timeout = os.getenv("NOTIFICATION_TIMEOUT", "5")
        try:
            self.timeout_seconds: int = int(raw_timeout)
        except ValueError as e:
            raise ValueError(f"Invalid NOTIFICATION_TIMEOUT: {raw_timeout!r}") from e

        # Discord-specific settings
        self.discord_username: str = os.getenv("DISCORD_USERNAME", "Clip Bot")
        self.discord_avatar_url: Optional[str] = os.getenv("DISCORD_AVATAR_URL")

    def _get_bool_env(self, key: str, default: bool = False) -> bool:
        """Parse boolean environment variable."""
        value = os.getenv(key, str(default)).lower()
        return value in ("true", "1", "yes", "on")

    def has_webhook_configured(self) -> bool:
        """Check if a webhook is configured."""
        return bool(self.discord_webhook_url)
