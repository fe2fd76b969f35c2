"""
Discord webhook client.

Posts plain-text messages to a Discord channel via its webhook URL.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from notifier.config import NotificationConfig

logger = logging.getLogger(__name__)

# Discord caps message content at 2000 characters
MAX_CONTENT_LENGTH = 2000


class DiscordClient:
    """Discord webhook client."""

    def __init__(self, config: NotificationConfig):
        """
        Initialize Discord client.

        Args:
            config: Notification configuration
        """
        self.config = config
        self.webhook_url = config.discord_webhook_url

    def build_payload(
        self,
        content: str,
        username: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Build the webhook JSON body.

        Args:
            content: Message content (text)
            username: Override bot username
            avatar_url: Override bot avatar

        Returns:
            Dictionary ready for JSON serialization
        """
        if len(content) > MAX_CONTENT_LENGTH:
            logger.warning(
                f"Discord message truncated from {len(content)} to {MAX_CONTENT_LENGTH} chars"
            )
            content = content[: MAX_CONTENT_LENGTH - 1] + "…"

        payload: Dict[str, Any] = {"content": content}

        if username or self.config.discord_username:
            payload["username"] = username or self.config.discord_username

        if avatar_url or self.config.discord_avatar_url:
            payload["avatar_url"] = avatar_url or self.config.discord_avatar_url

        return payload

    async def send_message(
        self,
        content: str,
        username: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> bool:
        """
        Send a message to Discord.

        Args:
            content: Message content (text)
            username: Override bot username
            avatar_url: Override bot avatar

        Returns:
            True if successful, False otherwise
        """
        if not self.webhook_url:
            logger.warning("Discord webhook URL not configured")
            return False

        payload = self.build_payload(content, username, avatar_url)

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self.webhook_url,
                    json=payload,
                    timeout=aiohttp.ClientTimeout(total=self.config.timeout_seconds),
                ) as response:
                    if response.status in (200, 204):
                        logger.debug("Discord notification sent successfully")
                        return True
                    elif response.status == 429:
                        # Rate limited by Discord
                        retry_after = (await response.json()).get("retry_after", 1)
                        logger.warning(f"Discord rate limit hit, retry after {retry_after}s")
                        return False
                    else:
                        error_text = await response.text()
                        logger.error(
                            f"Discord notification failed: {response.status} - {error_text}"
                        )
                        return False

        except asyncio.TimeoutError:
            logger.error("Discord notification timed out")
            return False
        except aiohttp.ClientError as e:
            logger.error(f"Discord notification failed: {e}")
            return False
        except Exception as e:
            logger.error(f"Unexpected error sending Discord notification: {e}")
            return False
