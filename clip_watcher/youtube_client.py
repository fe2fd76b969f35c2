"""Thin async client for the YouTube Data API v3.

Every request takes the API key explicitly so that key rotation stays in
``CredentialRotator``.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .exceptions import QuotaExceededError, YouTubeAPIError
from .models import ChatPage, LiveVideo, StreamDetails

logger = logging.getLogger(__name__)

YOUTUBE_API_URL = "https://www.googleapis.com/youtube/v3"

# Error reasons YouTube uses for exhausted or throttled keys
QUOTA_REASONS = frozenset(
    {
        "quotaExceeded",
        "rateLimitExceeded",
        "dailyLimitExceeded",
        "userRateLimitExceeded",
    }
)


class YouTubeClient:
    """Async YouTube Data API client."""

    def __init__(
        self,
        timeout: float = 10.0,
        base_url: str = YOUTUBE_API_URL,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize YouTube client.

        Args:
            timeout: Request timeout in seconds.
            base_url: API root URL.
            http_client: Optional pre-built client (mainly for tests).
        """
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "YouTubeClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if we created it."""
        if self._owns_client:
            await self._client.aclose()

    async def search_live_video(self, channel_id: str, api_key: str) -> Optional[LiveVideo]:
        """Find the channel's current live video.

        Args:
            channel_id: YouTube channel ID.
            api_key: API key to authenticate with.

        Returns:
            LiveVideo or None when the channel is not live.
        """
        data = await self._get(
            "/search",
            {
                "part": "snippet",
                "channelId": channel_id,
                "eventType": "live",
                "type": "video",
                "maxResults": 1,
            },
            api_key,
        )
        items = data.get("items") or []
        if not items:
            return None
        return LiveVideo.from_search_item(items[0])

    async def get_stream_details(self, video_id: str, api_key: str) -> Optional[StreamDetails]:
        """Fetch ``liveStreamingDetails`` for a video.

        Returns:
            StreamDetails or None if the video is not found.
        """
        data = await self._get(
            "/videos",
            {"part": "liveStreamingDetails", "id": video_id},
            api_key,
        )
        items = data.get("items") or []
        if not items:
            return None
        return StreamDetails.from_video_item(items[0])

    async def list_chat_messages(
        self,
        live_chat_id: str,
        api_key: str,
        page_token: Optional[str] = None,
    ) -> ChatPage:
        """Fetch the next page of live chat messages.

        Args:
            live_chat_id: Chat ID from the broadcast's streaming details.
            api_key: API key to authenticate with.
            page_token: Continuation token from the previous page.

        Returns:
            ChatPage: Messages, next token and suggested polling interval.
        """
        params: Dict[str, Any] = {
            "liveChatId": live_chat_id,
            "part": "snippet,authorDetails",
        }
        if page_token:
            params["pageToken"] = page_token

        data = await self._get("/liveChat/messages", params, api_key)
        return ChatPage.from_response(data)

    async def _get(self, path: str, params: Dict[str, Any], api_key: str) -> Dict[str, Any]:
        """Issue a GET request and decode the JSON body.

        Raises:
            QuotaExceededError: If the key is out of quota or throttled.
            YouTubeAPIError: For any other error response.
            httpx.HTTPError: For transport failures.
        """
        response = await self._client.get(
            f"{self.base_url}{path}", params={**params, "key": api_key}
        )

        if response.status_code >= 400:
            raise self._error_from_response(response)

        return response.json()

    @staticmethod
    def _error_from_response(response: httpx.Response) -> YouTubeAPIError:
        """Map an error response to the matching exception."""
        message = response.text
        reason = None
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            error = body["error"]
            message = error.get("message", message)
            errors = error.get("errors") or []
            if errors and isinstance(errors[0], dict):
                reason = errors[0].get("reason")

        if response.status_code in (403, 429) and reason in QUOTA_REASONS:
            return QuotaExceededError(response.status_code, message, reason)
        if response.status_code == 429:
            return QuotaExceededError(response.status_code, message, reason or "rateLimitExceeded")

        logger.debug(f"YouTube API returned {response.status_code}: {message}")
        return YouTubeAPIError(response.status_code, message, reason)
