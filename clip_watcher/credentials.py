"""API key rotation for quota-limited YouTube Data API calls."""

import logging
from typing import Awaitable, Callable, List, Sequence, TypeVar

from .exceptions import ConfigurationError, QuotaExceededError, QuotaExhausted

logger = logging.getLogger(__name__)

T = TypeVar("T")


def mask_key(key: str) -> str:
    """Mask an API key for logging, keeping the last four characters."""
    if len(key) <= 4:
        return "***"
    return f"***{key[-4:]}"


class CredentialRotator:
    """Runs API calls with the active key, rotating on quota exhaustion.

    Each call is retried at most once per configured key. Only
    ``QuotaExceededError`` triggers a rotation; every other exception
    propagates to the caller on the first attempt.

    Example:
        >>> rotator = CredentialRotator(["key-a", "key-b"])
        >>> page = await rotator.call(
        ...     lambda key: client.list_chat_messages(chat_id, key)
        ... )
    """

    def __init__(self, credentials: Sequence[str]):
        """Initialize the rotator.

        Args:
            credentials: Ordered API keys; the first one is active initially.

        Raises:
            ConfigurationError: If no credentials are supplied.
        """
        if not credentials:
            raise ConfigurationError("CredentialRotator requires at least one API credential")

        self._credentials: List[str] = list(credentials)
        self.active_index = 0

    def __len__(self) -> int:
        return len(self._credentials)

    @property
    def active_credential(self) -> str:
        """The key that the next call will use."""
        return self._credentials[self.active_index]

    def rotate(self) -> str:
        """Advance to the next key, wrapping around, and return it."""
        self.active_index = (self.active_index + 1) % len(self._credentials)
        return self.active_credential

    async def call(self, operation: Callable[[str], Awaitable[T]]) -> T:
        """Invoke ``operation`` with the active key, rotating on quota errors.

        Args:
            operation: Coroutine function taking an API key.

        Returns:
            Whatever ``operation`` returns on its first successful attempt.

        Raises:
            QuotaExhausted: If every key was rejected for quota.
        """
        attempts = 0
        while attempts < len(self._credentials):
            key = self.active_credential
            attempts += 1
            try:
                return await operation(key)
            except QuotaExceededError as e:
                next_key = self.rotate()
                logger.warning(
                    f"API key {mask_key(key)} hit quota ({e.reason}), "
                    f"rotating to {mask_key(next_key)} "
                    f"(attempt {attempts}/{len(self._credentials)})"
                )

        raise QuotaExhausted(attempts)
