"""Bounded retry with a fixed delay and a non-retryable fast path."""

import logging
import time
from collections.abc import Callable
from typing import TypeVar

import requests
from tenacity import RetryCallState, Retrying, retry_if_exception, stop_after_attempt, wait_fixed

from lexilookup.exceptions import ProviderError

T = TypeVar("T")

# Statuses that will not change on a retry (forbidden, URI too long)
NON_RETRYABLE_STATUS_CODES = frozenset({403, 414})


def is_retryable_error(error: BaseException) -> bool:
    """Default retry predicate.

    Args:
        error: Exception raised by the wrapped operation

    Returns:
        False for errors that will fail the same way again, True otherwise
    """
    if isinstance(error, ProviderError):
        return error.retryable

    if isinstance(error, requests.HTTPError) and error.response is not None:
        return error.response.status_code not in NON_RETRYABLE_STATUS_CODES

    return True


class RetryExecutor:
    """Run an operation with a bounded number of retries (stateless service)."""

    def __init__(
        self,
        sleep: Callable[[float], None] = time.sleep,
        logger: logging.Logger | None = None,
    ):
        """Initialize the retry executor.

        Args:
            sleep: Function used to wait between attempts
            logger: Logger for retry messages (defaults to the module logger)
        """
        self._sleep = sleep
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    def run(
        self,
        operation: Callable[[], T],
        max_retries: int,
        delay: float,
        is_retryable: Callable[[BaseException], bool] = is_retryable_error,
        description: str = "operation",
    ) -> T:
        """Run ``operation`` up to ``max_retries + 1`` times.

        Args:
            operation: Zero-argument callable to run
            max_retries: Retries allowed after the first attempt
            delay: Seconds to wait between attempts
            is_retryable: Predicate deciding whether an error may be retried
            description: Label used in log messages

        Returns:
            The operation's return value

        Raises:
            Exception: The last error once attempts are exhausted, or the first
                non-retryable error
        """
        retrying = Retrying(
            stop=stop_after_attempt(max_retries + 1),
            wait=wait_fixed(delay),
            retry=retry_if_exception(is_retryable),
            sleep=self._sleep,
            before_sleep=lambda state: self._log_retry(state, max_retries, description),
            reraise=True,
        )
        return retrying(operation)

    def _log_retry(self, state: RetryCallState, max_retries: int, description: str) -> None:
        error = state.outcome.exception() if state.outcome else None
        self._logger.info(
            f"Retrying {description} (attempt {state.attempt_number}/{max_retries}) after error: {error}"
        )
