"""
Pytest configuration and shared fixtures for all tests
"""

import os
import sys
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add project root to Python path
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.dirname(project_root))

from clip_watcher.session import SessionState  # noqa: E402

STREAM_START = datetime(2025, 11, 3, 12, 0, 0, tzinfo=timezone.utc)


def iso(dt: datetime) -> str:
    """Render a datetime the way the YouTube API does."""
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def chat_item(text, offset_seconds, author="Viewer", stream_start=STREAM_START):
    """Build a raw ``liveChatMessages`` item published ``offset_seconds`` after start."""
    item = {
        "id": f"msg-{offset_seconds}-{abs(hash(text)) % 10000}",
        "snippet": {
            "publishedAt": iso(stream_start + timedelta(seconds=offset_seconds)),
            "displayMessage": text,
        },
        "authorDetails": {},
    }
    if author is not None:
        item["authorDetails"]["displayName"] = author
    return item


class FakeClock:
    """Monotonic clock the tests advance by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(scope="session")
def test_env_vars():
    """Provide test environment variables."""
    return {
        "CHANNEL_ID": "UC-test-channel",
        "DISCORD_WEBHOOK_URL": "https://discord.com/api/webhooks/test",
        "YOUTUBE_API_KEYS": "key-one,key-two",
        "YOUTUBE_API_KEY": "",
        "LOG_LEVEL": "DEBUG",
        "ENVIRONMENT": "testing",
    }


@pytest.fixture
def mock_env(monkeypatch, test_env_vars):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def stream_start():
    """Stream start time shared by the chat fixtures."""
    return STREAM_START


@pytest.fixture
def make_chat_item():
    """Factory for raw chat items: ``make_chat_item(text, offset_seconds, author=...)``."""
    return chat_item


@pytest.fixture
def bound_session():
    """Session already bound to a located broadcast."""
    session = SessionState(poll_interval_ms=15000)
    session.bind(
        video_id="vid123",
        live_chat_id="chat-abc",
        stream_start_time=STREAM_START,
        stream_title="Test Stream",
    )
    return session


@pytest.fixture
def fake_clock():
    """Hand-advanced monotonic clock."""
    return FakeClock()


@pytest.fixture
def mock_notifier():
    """Notifier whose webhook post always succeeds."""
    notifier = MagicMock()
    notifier.notify = AsyncMock(return_value=True)
    return notifier


@pytest.fixture
def mock_youtube_client():
    """YouTube client with every API call mocked."""
    client = MagicMock()
    client.search_live_video = AsyncMock()
    client.get_stream_details = AsyncMock()
    client.list_chat_messages = AsyncMock()
    client.aclose = AsyncMock()
    return client
