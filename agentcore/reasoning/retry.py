"""Retry bookkeeping with capped exponential backoff."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

_U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class RetryState:
    """The current attempt and delay, with the limits that govern them."""

    attempt: int
    delay_ms: int
    max_attempts: int
    base_delay_ms: int
    max_delay_ms: int

    def next_retry(self) -> Optional[RetryState]:
        """Return the state after one more attempt, or None once exhausted.

        The delay doubles each time and is capped at ``max_delay_ms``.
        """
        if self.attempt >= self.max_attempts:
            return None
        doubled = min(self.delay_ms * 2, _U32_MAX)
        return replace(
            self,
            attempt=self.attempt + 1,
            delay_ms=min(doubled, self.max_delay_ms),
        )

    def should_retry(self) -> bool:
        """Is another retry allowed?"""
        return self.attempt < self.max_attempts


def initial_retry_state(max_attempts: int, base_delay_ms: int, max_delay_ms: int) -> RetryState:
    """Create the starting state: attempt 0, delay equal to the base."""
    return RetryState(
        attempt=0,
        delay_ms=base_delay_ms,
        max_attempts=max_attempts,
        base_delay_ms=base_delay_ms,
        max_delay_ms=max_delay_ms,
    )