"""Mutable per-run session state shared by the locator and the poller."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class SessionState:
    """State for one continuous session bound to one live broadcast.

    Written only on the single polling control path.
    """

    poll_interval_ms: int = 15000

    # Set once by BroadcastLocator
    live_chat_id: Optional[str] = None
    stream_start_time: Optional[datetime] = None
    video_id: Optional[str] = None
    stream_title: Optional[str] = None

    # Advanced by ChatPoller
    last_message_time: Optional[datetime] = None
    page_token: Optional[str] = None
    last_clip_issued_at: Optional[float] = None

    @property
    def is_bound(self) -> bool:
        """Whether a broadcast has been located for this session."""
        return bool(self.live_chat_id and self.stream_start_time and self.video_id)

    def bind(
        self,
        video_id: str,
        live_chat_id: str,
        stream_start_time: datetime,
        stream_title: Optional[str] = None,
    ) -> None:
        """Attach the session to a located broadcast."""
        self.video_id = video_id
        self.live_chat_id = live_chat_id
        self.stream_start_time = stream_start_time
        self.stream_title = stream_title

    def accept_message_time(self, published_at: datetime) -> bool:
        """Advance the watermark if ``published_at`` is newer.

        Returns:
            bool: False if the message is not newer than the watermark.
        """
        if self.last_message_time is not None and published_at <= self.last_message_time:
            return False
        self.last_message_time = published_at
        return True
