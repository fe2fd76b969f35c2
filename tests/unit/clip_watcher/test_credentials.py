"""Unit tests for API key rotation."""

from unittest.mock import AsyncMock

import pytest

from clip_watcher.credentials import CredentialRotator, mask_key
from clip_watcher.exceptions import (
    ConfigurationError,
    QuotaExceededError,
    QuotaExhausted,
    YouTubeAPIError,
)


def quota_error():
    return QuotaExceededError(403, "The request cannot be completed", "quotaExceeded")


class TestCredentialRotator:
    """Test CredentialRotator."""

    def test_empty_credentials_rejected(self):
        """Test that an empty key list is a configuration error."""
        with pytest.raises(ConfigurationError):
            CredentialRotator([])

    def test_initial_state(self):
        """Test that the first key is active initially."""
        rotator = CredentialRotator(["a", "b", "c"])

        assert len(rotator) == 3
        assert rotator.active_index == 0
        assert rotator.active_credential == "a"

    def test_rotate_wraps(self):
        """Test that rotation wraps around the list."""
        rotator = CredentialRotator(["a", "b"])

        assert rotator.rotate() == "b"
        assert rotator.rotate() == "a"
        assert rotator.active_index == 0

    @pytest.mark.asyncio
    async def test_call_success_first_key(self):
        """Test that a successful call uses the active key once."""
        rotator = CredentialRotator(["a", "b", "c"])
        operation = AsyncMock(return_value="page")

        assert await rotator.call(operation) == "page"
        operation.assert_awaited_once_with("a")
        assert rotator.active_index == 0

    @pytest.mark.asyncio
    async def test_call_rotates_to_third_key(self):
        """Test that keys one and two hitting quota fall through to key three."""
        rotator = CredentialRotator(["a", "b", "c"])
        operation = AsyncMock(side_effect=[quota_error(), quota_error(), "page"])

        result = await rotator.call(operation)

        assert result == "page"
        assert operation.await_count == 3
        assert [c.args[0] for c in operation.await_args_list] == ["a", "b", "c"]
        assert rotator.active_index == 2

    @pytest.mark.asyncio
    async def test_call_all_keys_exhausted(self):
        """Test that exhausting every key raises QuotaExhausted."""
        rotator = CredentialRotator(["a", "b", "c"])
        operation = AsyncMock(side_effect=quota_error())

        with pytest.raises(QuotaExhausted) as exc_info:
            await rotator.call(operation)

        assert exc_info.value.attempts == 3
        assert operation.await_count == 3

    @pytest.mark.asyncio
    async def test_rotation_persists_between_calls(self):
        """Test that the next call starts from the last working key."""
        rotator = CredentialRotator(["a", "b"])
        await rotator.call(AsyncMock(side_effect=[quota_error(), "ok"]))

        operation = AsyncMock(return_value="ok")
        await rotator.call(operation)

        operation.assert_awaited_once_with("b")

    @pytest.mark.asyncio
    async def test_other_errors_not_retried(self):
        """Test that non-quota errors propagate on the first attempt."""
        rotator = CredentialRotator(["a", "b", "c"])
        operation = AsyncMock(side_effect=YouTubeAPIError(404, "Not found", "notFound"))

        with pytest.raises(YouTubeAPIError):
            await rotator.call(operation)

        operation.assert_awaited_once_with("a")
        assert rotator.active_index == 0

    @pytest.mark.asyncio
    async def test_unexpected_errors_propagate(self):
        """Test that arbitrary exceptions propagate unchanged."""
        rotator = CredentialRotator(["a", "b"])

        with pytest.raises(RuntimeError):
            await rotator.call(AsyncMock(side_effect=RuntimeError("network down")))


class TestMaskKey:
    """Test mask_key()."""

    def test_long_key(self):
        assert mask_key("AIzaSyABCDEFG1234") == "***1234"

    def test_short_key(self):
        assert mask_key("abc") == "***"
