"""Locates the channel's live broadcast and binds it to the session."""

import logging

from .credentials import CredentialRotator
from .exceptions import MissingStreamDetails, NoLiveBroadcast
from .models import LiveVideo
from .session import SessionState
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


class BroadcastLocator:
    """One-shot lookup of the active live broadcast for a channel."""

    def __init__(
        self,
        client: YouTubeClient,
        rotator: CredentialRotator,
        session: SessionState,
    ):
        self.client = client
        self.rotator = rotator
        self.session = session

    async def locate(self, channel_id: str) -> LiveVideo:
        """Find the live broadcast and commit its chat and start time.

        Does not wait for a stream to go live; that is the caller's policy.

        Args:
            channel_id: YouTube channel ID.

        Returns:
            LiveVideo: The located broadcast.

        Raises:
            NoLiveBroadcast: If the channel is not live.
            MissingStreamDetails: If the broadcast has no active chat or
                start time.
        """
        video = await self.rotator.call(
            lambda key: self.client.search_live_video(channel_id, key)
        )
        if video is None or not video.video_id:
            raise NoLiveBroadcast(channel_id)

        details = await self.rotator.call(
            lambda key: self.client.get_stream_details(video.video_id, key)
        )
        if details is None:
            raise MissingStreamDetails(video.video_id, "video not found")
        if not details.live_chat_id:
            raise MissingStreamDetails(video.video_id, "activeLiveChatId")
        if details.actual_start_time is None:
            raise MissingStreamDetails(video.video_id, "actualStartTime")

        self.session.bind(
            video_id=video.video_id,
            live_chat_id=details.live_chat_id,
            stream_start_time=details.actual_start_time,
            stream_title=video.title,
        )

        logger.info(
            f"🎥 Live broadcast located: {video.video_id} - {video.title} "
            f"(started {details.actual_start_time.isoformat()})",
            extra={
                "video_id": video.video_id,
                "stream_title": video.title,
                "stream_started_at": details.actual_start_time.isoformat(),
            },
        )
        return video
