"""Exception hierarchy for the clip watcher service.

Startup errors (configuration, broadcast lookup) halt the process. Errors
raised while polling are contained to the current poll iteration.
"""

from typing import Optional


class ClipWatcherError(Exception):
    """Base class for all clip watcher errors."""


class ConfigurationError(ClipWatcherError, ValueError):
    """Raised when required configuration is missing or invalid."""


class NoLiveBroadcast(ClipWatcherError):
    """Raised when the configured channel has no live broadcast."""

    def __init__(self, channel_id: str):
        self.channel_id = channel_id
        super().__init__(f"No live broadcast found for channel {channel_id}")


class MissingStreamDetails(ClipWatcherError):
    """Raised when a broadcast has no active chat or no recorded start time."""

    def __init__(self, video_id: str, missing: str):
        self.video_id = video_id
        self.missing = missing
        super().__init__(f"Missing live stream details for video {video_id}: {missing}")


class YouTubeAPIError(ClipWatcherError):
    """Non-quota error response from the YouTube Data API."""

    def __init__(self, status_code: int, message: str, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"YouTube API error {status_code} ({reason or 'unknown'}): {message}")


class QuotaExceededError(YouTubeAPIError):
    """A single API call was rejected because its key ran out of quota."""


class QuotaExhausted(ClipWatcherError):
    """Every configured API key has been rejected for quota."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"All {attempts} API credentials exhausted their quota")
