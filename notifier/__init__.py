"""
Notification System for the YouTube clip watcher.

This module posts clip announcements to a Discord channel through its webhook.
Delivery failures are logged and swallowed.

Main components:
- Notifier: Notification interface used by the chat poller
- DiscordClient: Discord webhook client
- NotificationConfig: Configuration management

Example:
    from notifier import Notifier

    notifier = Notifier()
    await notifier.notify("🎬 **Clip Requested!**")
"""

from .config import NotificationConfig
from .notifier import Notifier

__version__ = "1.0.0"
__all__ = ["Notifier", "NotificationConfig"]
