"""Pydantic models for the parts of YouTube Data API payloads we consume."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_STREAM_TITLE = "Untitled Stream"
DEFAULT_AUTHOR = "Unknown"


class LiveVideo(BaseModel):
    """A live video found by channel search."""

    video_id: str = Field(..., description="YouTube video ID")
    title: str = Field(DEFAULT_STREAM_TITLE, description="Broadcast title")

    @classmethod
    def from_search_item(cls, item: Dict[str, Any]) -> "LiveVideo":
        snippet = item.get("snippet") or {}
        return cls(
            video_id=(item.get("id") or {}).get("videoId", ""),
            title=snippet.get("title") or DEFAULT_STREAM_TITLE,
        )


class StreamDetails(BaseModel):
    """``liveStreamingDetails`` of a video."""

    live_chat_id: Optional[str] = Field(None, description="Active live chat ID")
    actual_start_time: Optional[datetime] = Field(None, description="When the stream went live")

    @classmethod
    def from_video_item(cls, item: Dict[str, Any]) -> "StreamDetails":
        details = item.get("liveStreamingDetails") or {}
        return cls(
            live_chat_id=details.get("activeLiveChatId") or None,
            actual_start_time=details.get("actualStartTime") or None,
        )


class ChatMessage(BaseModel):
    """A single live chat message."""

    published_at: datetime
    text: str = ""
    author: str = DEFAULT_AUTHOR

    @classmethod
    def from_api_item(cls, item: Dict[str, Any]) -> "ChatMessage":
        snippet = item.get("snippet") or {}
        author_details = item.get("authorDetails") or {}
        text = snippet.get("displayMessage")
        if text is None:
            text = (snippet.get("textMessageDetails") or {}).get("messageText", "")
        return cls(
            published_at=snippet["publishedAt"],
            text=text,
            author=author_details.get("displayName") or DEFAULT_AUTHOR,
        )


class ChatPage(BaseModel):
    """One page of ``liveChatMessages.list`` results."""

    messages: List[ChatMessage] = Field(default_factory=list)
    next_page_token: Optional[str] = None
    polling_interval_ms: Optional[int] = None

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "ChatPage":
        messages = []
        for item in data.get("items") or []:
            if not (item.get("snippet") or {}).get("publishedAt"):
                logger.debug(f"Skipping chat item without publishedAt: {item.get('id')}")
                continue
            messages.append(ChatMessage.from_api_item(item))

        return cls(
            messages=messages,
            next_page_token=data.get("nextPageToken"),
            polling_interval_ms=data.get("pollingIntervalMillis"),
        )
