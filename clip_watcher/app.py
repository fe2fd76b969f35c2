"""Service entry point: locate the live broadcast, then poll its chat.

Startup errors are fatal and stop the process before polling begins.
"""

import asyncio
import logging
import sys
from typing import Awaitable, Callable, Optional

from logging_module import LoggingConfig, setup_logging
from notifier import NotificationConfig, Notifier

from .config import Config
from .credentials import CredentialRotator
from .locator import BroadcastLocator
from .poller import ChatPoller
from .session import SessionState
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


class ClipWatcher:
    """Wires the components together and sequences startup."""

    def __init__(
        self,
        config: Config,
        client: Optional[YouTubeClient] = None,
        notifier: Optional[Notifier] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize the watcher.

        Args:
            config: Service configuration.
            client: YouTube client; built from config if omitted.
            notifier: Webhook notifier; built from config if omitted.
            sleep: Coroutine used between poll iterations.

        Raises:
            ConfigurationError: If no API keys are configured.
        """
        self.config = config
        self.session = SessionState(poll_interval_ms=config.poll_interval_ms)
        self.rotator = CredentialRotator(config.api_keys)
        self.notifier = notifier or Notifier(
            NotificationConfig(discord_webhook_url=config.discord_webhook_url)
        )
        self.client = client or YouTubeClient(timeout=config.api_timeout_seconds)
        self.locator = BroadcastLocator(self.client, self.rotator, self.session)
        self.poller = ChatPoller(
            self.client,
            self.rotator,
            self.session,
            self.notifier,
            command_token=config.command_token,
            pad_seconds=config.clip_pad_seconds,
            cooldown_ms=config.clip_cooldown_ms,
            sleep=sleep,
        )

    async def start(self, max_iterations: Optional[int] = None) -> int:
        """Locate the broadcast once, then poll chat.

        Args:
            max_iterations: Optional bound on poll iterations.

        Returns:
            int: Process exit code; 1 if startup failed.
        """
        logger.info(
            f"Starting clip watcher for channel {self.config.channel_id} "
            f"({self.config.environment})...",
            extra={"environment": self.config.environment},
        )

        try:
            await self.locator.locate(self.config.channel_id)
        except Exception as e:
            logger.error(f"❌ Bot failed to start: {e}", exc_info=True)
            return 1

        await self.poller.run(max_iterations=max_iterations)
        return 0

    async def aclose(self) -> None:
        await self.client.aclose()


async def run(
    config: Config, notification_config: Optional[NotificationConfig] = None
) -> int:
    """Run the watcher until killed.

    Args:
        config: Validated service configuration.
        notification_config: Webhook settings; read from the environment if omitted.

    Returns:
        int: Process exit code.
    """
    client = YouTubeClient(timeout=config.api_timeout_seconds)
    try:
        watcher = ClipWatcher(
            config,
            client=client,
            notifier=Notifier(
                notification_config
                or NotificationConfig(discord_webhook_url=config.discord_webhook_url)
            ),
        )
        return await watcher.start()
    finally:
        await client.aclose()


def main() -> int:
    """Console entry point.

    Returns:
        int: Process exit code; 1 if any configuration is invalid.
    """
    try:
        setup_logging(LoggingConfig.from_env())
        config = Config.from_env()
        config.validate()
        notification_config = NotificationConfig(
            discord_webhook_url=config.discord_webhook_url
        )
    except ValueError as e:
        # ConfigurationError included
        logger.error(f"❌ Configuration error: {e}")
        return 1

    logger.info(f"Loaded configuration: {config!r}")

    try:
        return asyncio.run(run(config, notification_config))
    except KeyboardInterrupt:
        logger.info("Clip watcher stopped")
        return 0


if __name__ == "__main__":
    sys.exit(main())
