"""Test retry strategy."""

from unittest.mock import Mock

import pytest

from batchrvt.shared.retry import RetryStrategy


def test_returns_first_success():
    """Test no retry when the call succeeds."""
    func = Mock(return_value="ok")
    strategy = RetryStrategy(max_attempts=3, sleep=Mock())

    assert strategy.execute(func, 1, key="v") == "ok"
    func.assert_called_once_with(1, key="v")


def test_retries_then_succeeds():
    """Test failures are retried until success."""
    func = Mock(side_effect=[ValueError("a"), ValueError("b"), "ok"])
    sleep = Mock()
    strategy = RetryStrategy(max_attempts=3, sleep=sleep)

    assert strategy.execute(func) == "ok"
    assert func.call_count == 3
    assert sleep.call_count == 2


def test_raises_after_max_attempts():
    """Test the last exception is raised."""
    func = Mock(side_effect=[ValueError("a"), ValueError("last")])
    strategy = RetryStrategy(max_attempts=2, sleep=Mock())

    with pytest.raises(ValueError, match="last"):
        strategy.execute(func)


def test_unlisted_exceptions_not_retried():
    """Test exceptions outside the retry list propagate at once."""
    func = Mock(side_effect=KeyError("boom"))
    strategy = RetryStrategy(max_attempts=5, exceptions=(ValueError,), sleep=Mock())

    with pytest.raises(KeyError):
        strategy.execute(func)
    assert func.call_count == 1


def test_exponential_backoff_capped():
    """Test exponential backoff without jitter respects max_backoff."""
    strategy = RetryStrategy(backoff_seconds=1.0, jitter=False, max_backoff=3.0)

    assert strategy._calculate_backoff(1) == 1.0
    assert strategy._calculate_backoff(2) == 2.0
    assert strategy._calculate_backoff(3) == 3.0


def test_fixed_interval():
    """Test non-exponential backoff is a constant interval."""
    strategy = RetryStrategy(backoff_seconds=0.5, exponential=False, jitter=False)

    assert strategy._calculate_backoff(1) == 0.5
    assert strategy._calculate_backoff(4) == 0.5


def test_invalid_attempts():
    """Test at least one attempt is required."""
    with pytest.raises(ValueError):
        RetryStrategy(max_attempts=0)
