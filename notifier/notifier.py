"""
Notification interface for the clip watcher.

Webhook failures are logged and never raised, so a broken channel can not
stall or crash the chat poller.
"""

import logging
from typing import Dict, Optional

from notifier.config import NotificationConfig
from notifier.discord import DiscordClient

logger = logging.getLogger(__name__)


class Notifier:
    """Posts text notifications to the configured webhook."""

    def __init__(self, config: Optional[NotificationConfig] = None):
        """
        Initialize the notifier.

        Args:
            config: Optional configuration. If not provided, uses default config.
        """
        self.config = config or NotificationConfig()
        self.discord_client = DiscordClient(self.config)

        # Statistics
        self.stats = {
            "sent": 0,
            "failed": 0,
            "skipped": 0,
        }

    async def notify(self, message: str) -> bool:
        """
        Post a message to the webhook.

        Args:
            message: Message body

        Returns:
            True if the webhook accepted the message
        """
        if not self.config.enabled:
            logger.debug("Notifications are disabled")
            self.stats["skipped"] += 1
            return False

        if not self.config.has_webhook_configured():
            logger.warning("No webhook configured, cannot send notification")
            self.stats["skipped"] += 1
            return False

        try:
            success = await self.discord_client.send_message(message)
        except Exception as e:
            logger.error(f"❌ Discord webhook error: {e}")
            success = False

        if success:
            self.stats["sent"] += 1
        else:
            self.stats["failed"] += 1
        return success

    def get_stats(self) -> Dict[str, int]:
        """
        Get notification statistics.

        Returns:
            Dictionary with statistics
        """
        return self.stats.copy()

