"""
Unit tests for retry_async.
"""

import pytest

from ircline.errors import NetworkError, is_retryable_error
from ircline.utils.retry import RetryExhaustedError, retry_async


class TestRetryAsync:
    """Test retry_async behaviour."""

    @pytest.mark.asyncio
    async def test_returns_first_success(self):
        """Test a successful first attempt is returned directly."""
        attempts = []

        async def operation(attempt):
            attempts.append(attempt)
            return "ok"

        result = await retry_async(operation, multiplier=0)

        assert result == "ok"
        assert attempts == [1]

    @pytest.mark.asyncio
    async def test_retries_retryable_errors(self):
        """Test network errors are retried with increasing attempt numbers."""
        attempts = []

        async def operation(attempt):
            attempts.append(attempt)
            if attempt < 3:
                raise NetworkError("flaky")
            return attempt

        result = await retry_async(operation, max_attempts=3, multiplier=0)

        assert result == 3
        assert attempts == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_exhausted(self):
        """Test RetryExhaustedError carries the attempt count and last error."""
        last_error = ConnectionRefusedError("refused")

        async def operation(attempt):
            raise last_error

        with pytest.raises(RetryExhaustedError) as exc_info:
            await retry_async(
                operation, max_attempts=2, multiplier=0, operation_name="connect"
            )

        assert exc_info.value.attempts == 2
        assert exc_info.value.final_exception is last_error
        assert "connect failed after 2 attempts" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_non_retryable_propagates(self):
        """Test other exceptions propagate on the first attempt."""
        attempts = []

        async def operation(attempt):
            attempts.append(attempt)
            raise KeyError("nope")

        with pytest.raises(KeyError):
            await retry_async(operation, max_attempts=5, multiplier=0)

        assert attempts == [1]

    @pytest.mark.asyncio
    async def test_custom_retry_on(self):
        """Test the retryable exception types can be narrowed or widened."""
        attempts = []

        async def operation(attempt):
            attempts.append(attempt)
            raise LookupError("again")

        with pytest.raises(RetryExhaustedError):
            await retry_async(
                operation, max_attempts=3, multiplier=0, retry_on=(LookupError,)
            )

        assert attempts == [1, 2, 3]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [NetworkError("down"), ConnectionResetError(), TimeoutError(), ValueError()],
    )
    async def test_default_matches_is_retryable_error(self, error):
        """Test the default retry policy agrees with is_retryable_error."""
        attempts = []

        async def operation(attempt):
            attempts.append(attempt)
            raise error

        with pytest.raises((RetryExhaustedError, ValueError)):
            await retry_async(operation, max_attempts=2, multiplier=0)

        expected = 2 if is_retryable_error(error) else 1
        assert len(attempts) == expected
