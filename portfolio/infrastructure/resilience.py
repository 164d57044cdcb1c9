# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Timeouts, retries and a circuit breaker for calls leaving the process."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, TypeVar

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from portfolio.shared.config import load_config
from portfolio.shared.logging import logger

T = TypeVar("T")


class CircuitOpenError(RuntimeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"circuit '{name}' is open")
        self.name = name


class BreakerState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half_open"


class CircuitBreaker:
    """Counts consecutive failures against one upstream and refuses calls while open.

    After ``reset_timeout`` seconds the breaker lets a single trial call through
    (half-open); its outcome closes or re-opens the circuit.
    """

    def __init__(
        self,
        failure_threshold: int,
        reset_timeout: float,
        *,
        name: str = "upstream",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.failure_threshold = failure_threshold
        self.reset_timeout = reset_timeout
        self.name = name
        self._clock = clock
        self._failures = 0
        self._opened_at: float | None = None

    @classmethod
    def from_config(cls, name: str = "upstream") -> CircuitBreaker:
        resilience = load_config().resilience
        return cls(
            failure_threshold=resilience.circuit_fail_threshold,
            reset_timeout=resilience.circuit_reset_timeout,
            name=name,
        )

    @property
    def state(self) -> BreakerState:
        if self._opened_at is None:
            return BreakerState.CLOSED
        if self._clock() - self._opened_at >= self.reset_timeout:
            return BreakerState.HALF_OPEN
        return BreakerState.OPEN

    def before_call(self) -> None:
        state = self.state
        if state is BreakerState.OPEN:
            logger.warning(f"breaker[{self.name}]: open, refusing call")
            raise CircuitOpenError(self.name)
        if state is BreakerState.HALF_OPEN:
            logger.info(f"breaker[{self.name}]: half-open, allowing a trial call")

    def record_success(self) -> None:
        if self._opened_at is not None:
            logger.info(f"breaker[{self.name}]: closed again")
        self._failures = 0
        self._opened_at = None

    def record_failure(self) -> None:
        self._failures += 1
        if self.state is BreakerState.HALF_OPEN or self._failures >= self.failure_threshold:
            self._opened_at = self._clock()
            logger.error(f"breaker[{self.name}]: opened after {self._failures} failure(s)")


async def resilient_call(  # noqa: UP047
    func: Callable[..., Awaitable[T]],
    *args: Any,
    breaker: CircuitBreaker | None = None,
    timeout: float | None = None,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
    max_retries: int | None = None,
    **kwargs: Any,
) -> T:
    """Await ``func(*args, **kwargs)`` with a per-attempt timeout.

    Only ``retry_on`` errors are retried. Once attempts run out the last error
    is re-raised as is and counted once against the breaker.
    """

    resilience = load_config().resilience
    breaker = breaker or CircuitBreaker.from_config()
    breaker.before_call()

    attempts = (resilience.max_retries if max_retries is None else max_retries) + 1
    per_attempt = timeout or resilience.default_timeout
    name = getattr(func, "__name__", repr(func))

    retrying = AsyncRetrying(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=resilience.backoff_base, max=resilience.backoff_cap),
        retry=retry_if_exception_type(retry_on),
        reraise=True,
    )

    try:
        async for attempt in retrying:
            with attempt:
                logger.debug(
                    f"resilience: {name} attempt {attempt.retry_state.attempt_number}/{attempts}"
                )
                result = await asyncio.wait_for(func(*args, **kwargs), timeout=per_attempt)
    except Exception as exc:
        logger.warning(f"resilience: {name} gave up ({type(exc).__name__})")
        breaker.record_failure()
        raise

    breaker.record_success()
    return result


__all__ = ["BreakerState", "CircuitBreaker", "CircuitOpenError", "resilient_call"]
