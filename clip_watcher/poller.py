"""Live chat poller that turns clip commands into webhook notifications."""

import asyncio
import logging
import time
from typing import Awaitable, Callable, List, Optional

from notifier import Notifier

from .clips import (
    DEFAULT_COMMAND,
    DEFAULT_PAD_SECONDS,
    ClipRequest,
    build_watch_url,
    compute_clip_window,
    is_clip_command,
    parse_clip_title,
)
from .credentials import CredentialRotator
from .models import ChatMessage
from .session import SessionState
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


class ChatPoller:
    """Polls the bound live chat and announces clip commands.

    One ``poll_once`` call is in flight at a time: ``run`` awaits each
    iteration before sleeping for the session's polling interval.
    """

    def __init__(
        self,
        client: YouTubeClient,
        rotator: CredentialRotator,
        session: SessionState,
        notifier: Notifier,
        command_token: str = DEFAULT_COMMAND,
        pad_seconds: int = DEFAULT_PAD_SECONDS,
        cooldown_ms: int = 30000,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize the poller.

        Args:
            client: YouTube Data API client.
            rotator: Key rotator wrapping every API call.
            session: Session bound by ``BroadcastLocator``.
            notifier: Webhook notifier for honored commands.
            command_token: Chat command that requests a clip.
            pad_seconds: Seconds of padding on each side of a clip.
            cooldown_ms: Minimum wall-clock gap between honored commands.
            clock: Monotonic clock in seconds, used for cooldown.
            sleep: Coroutine used between iterations.
        """
        self.client = client
        self.rotator = rotator
        self.session = session
        self.notifier = notifier
        self.command_token = command_token
        self.pad_seconds = pad_seconds
        self.cooldown_ms = cooldown_ms
        self._clock = clock
        self._sleep = sleep
        self.iterations = 0

    async def run(self, max_iterations: Optional[int] = None) -> None:
        """Poll until the process is killed (or ``max_iterations`` is hit)."""
        logger.info(f"✅ Listening for `{self.command_token}` commands...")

        while True:
            await self.poll_once()
            self.iterations += 1
            if max_iterations is not None and self.iterations >= max_iterations:
                break
            await self._sleep(self.session.poll_interval_ms / 1000)

    async def poll_once(self) -> List[ClipRequest]:
        """Fetch one page of chat and handle any clip commands in it.

        Errors are logged and swallowed so the polling loop never dies.

        Returns:
            List[ClipRequest]: Clips honored during this iteration.
        """
        if not self.session.is_bound:
            logger.debug("Session not bound to a broadcast yet, skipping poll")
            return []

        honored: List[ClipRequest] = []
        try:
            page = await self.rotator.call(
                lambda key: self.client.list_chat_messages(
                    self.session.live_chat_id, key, self.session.page_token
                )
            )

            self.session.page_token = page.next_page_token
            if page.polling_interval_ms:
                self.session.poll_interval_ms = page.polling_interval_ms

            for message in page.messages:
                clip = await self._handle_message(message)
                if clip is not None:
                    honored.append(clip)

        except Exception as e:
            logger.error(f"❌ Error polling chat: {e}", exc_info=True)

        return honored

    async def _handle_message(self, message: ChatMessage) -> Optional[ClipRequest]:
        if not self.session.accept_message_time(message.published_at):
            return None

        if not is_clip_command(message.text, self.command_token):
            return None

        now = self._clock()
        last = self.session.last_clip_issued_at
        if last is not None and (now - last) * 1000 < self.cooldown_ms:
            logger.info(
                f"⏱ Cooldown active, ignoring `{self.command_token}` from {message.author}"
            )
            return None

        self.session.last_clip_issued_at = now

        clip = self.build_clip(message)
        text = clip.to_message()
        logger.info(
            f"Clip requested by {clip.author}: {clip.title} "
            f"({clip.window.formatted_start} - {clip.window.formatted_end})",
            extra={"clip_url": clip.url, "clip_author": clip.author},
        )
        await self.notifier.notify(text)
        return clip

    def build_clip(self, message: ChatMessage) -> ClipRequest:
        """Compute the clip window, deep link and title for a command."""
        window = compute_clip_window(
            message.published_at, self.session.stream_start_time, self.pad_seconds
        )
        return ClipRequest(
            author=message.author,
            title=parse_clip_title(message.text),
            window=window,
            url=build_watch_url(self.session.video_id, window.start_seconds),
        )
