"""Clip Watcher Service for YouTube live streams.

This module polls a live broadcast's chat for clip commands, computes a time
window around each command and announces it on a Discord webhook.

Version: 1.0.0
"""

__version__ = "1.0.0"

from .clips import ClipRequest, ClipWindow, compute_clip_window
from .config import Config
from .credentials import CredentialRotator
from .exceptions import (
    ClipWatcherError,
    ConfigurationError,
    MissingStreamDetails,
    NoLiveBroadcast,
    QuotaExceededError,
    QuotaExhausted,
    YouTubeAPIError,
)
from .session import SessionState
from .time_format import format_time

__all__ = [
    "ClipRequest",
    "ClipWindow",
    "ClipWatcherError",
    "Config",
    "ConfigurationError",
    "CredentialRotator",
    "MissingStreamDetails",
    "NoLiveBroadcast",
    "QuotaExceededError",
    "QuotaExhausted",
    "SessionState",
    "YouTubeAPIError",
    "compute_clip_window",
    "format_time",
]
