"""Clip command parsing and clip window computation.

A clip is never rendered; it is a pair of timestamps around the moment the
command was sent plus a deep link into the broadcast.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from .time_format import format_time

DEFAULT_COMMAND = "!clip"
DEFAULT_CLIP_TITLE = "Untitled Clip"
DEFAULT_PAD_SECONDS = 30
WATCH_URL_BASE = "https://youtu.be"


def is_clip_command(text: str, command: str = DEFAULT_COMMAND) -> bool:
    """Case-insensitive prefix match of the command token."""
    return text.lower().startswith(command.lower())


def parse_clip_title(text: str) -> str:
    """Return the words after the command, or the default title."""
    words = text.strip().split()
    return " ".join(words[1:]) or DEFAULT_CLIP_TITLE


def build_watch_url(video_id: str, start_seconds: int) -> str:
    """Deep link into the broadcast at ``start_seconds``."""
    return f"{WATCH_URL_BASE}/{video_id}?t={start_seconds}"


@dataclass(frozen=True)
class ClipWindow:
    """Clip boundaries in seconds since the stream started."""

    elapsed_seconds: int
    start_seconds: int
    end_seconds: int

    @property
    def formatted_start(self) -> str:
        return format_time(self.start_seconds)

    @property
    def formatted_end(self) -> str:
        return format_time(self.end_seconds)


def compute_clip_window(
    message_time: datetime,
    stream_start: datetime,
    pad_seconds: int = DEFAULT_PAD_SECONDS,
) -> ClipWindow:
    """Pad the command's elapsed stream time on both sides.

    The start is clamped at zero; the end is not clamped to stream length.

    Args:
        message_time: When the command was published.
        stream_start: When the broadcast actually started.
        pad_seconds: Seconds to include before and after the command.

    Returns:
        ClipWindow: Computed boundaries.
    """
    elapsed = (message_time - stream_start) // timedelta(seconds=1)
    return ClipWindow(
        elapsed_seconds=elapsed,
        start_seconds=max(elapsed - pad_seconds, 0),
        end_seconds=elapsed + pad_seconds,
    )


@dataclass(frozen=True)
class ClipRequest:
    """A honored clip command, ready to be announced."""

    author: str
    title: str
    window: ClipWindow
    url: str

    def to_message(self) -> str:
        """Render the webhook notification text."""
        return (
            "🎬 **Clip Requested!**\n"
            f"👤 By: {self.author}\n"
            f"📺 Title: **{self.title}**\n"
            f"⏱ From: `{self.window.formatted_start}` to `{self.window.formatted_end}`\n"
            f"🔗 [Watch Clip]({self.url})"
        )
