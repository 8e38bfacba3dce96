# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Stopping policies that decide whether another invocation may be launched."""

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Callable

from curlperf.common.config import RunConfig

logger = logging.getLogger(__name__)

__all__ = [
    "CountStopPolicy",
    "DurationStopPolicy",
    "StopPolicy",
    "create_stop_policy",
]


class StopPolicy(ABC):
    """Base class for stopping policies.

    A policy hands out launch permits. Every successful :meth:`try_acquire` counts
    as one launched invocation; once it returns False the run stops dispatching.
    Policies are used from a single event loop and need no locking.
    """

    def __init__(self) -> None:
        self._launched = 0

    @property
    def launched(self) -> int:
        """Number of launches granted so far."""
        return self._launched

    def start(self) -> None:  # noqa: B027
        """Mark the start of the run. Time-based policies start their clock here."""
        pass

    def try_acquire(self) -> bool:
        """Claim one launch if the stopping condition has not been reached."""
        if self.is_exhausted:
            return False
        self._launched += 1
        return True

    @property
    @abstractmethod
    def is_exhausted(self) -> bool:
        """True once no further launches will be granted."""
        pass

    @abstractmethod
    def remaining(self) -> int | None:
        """Launches still to be granted, or None when not known in advance."""
        pass

    def seconds_until_deadline(self) -> float | None:
        """Seconds until the policy stops granting launches, or None without a deadline."""
        return None


class CountStopPolicy(StopPolicy):
    """Grants exactly ``repeat_count`` launches."""

    def __init__(self, repeat_count: int) -> None:
        if repeat_count < 1:
            raise ValueError(
                f"Invalid repeat count: {repeat_count}. At least one invocation is required."
            )
        super().__init__()
        self.repeat_count = repeat_count

    @property
    def is_exhausted(self) -> bool:
        return self._launched >= self.repeat_count

    def remaining(self) -> int:
        return self.repeat_count - self._launched


class DurationStopPolicy(StopPolicy):
    """Grants launches until ``time_budget`` seconds have passed since :meth:`start`."""

    def __init__(
        self, time_budget: float, clock: Callable[[], float] = time.perf_counter
    ) -> None:
        if time_budget <= 0:
            raise ValueError(
                f"Invalid time budget: {time_budget} seconds. The budget must be positive."
            )
        super().__init__()
        self.time_budget = time_budget
        self._clock = clock
        self._started_at: float | None = None

    def start(self) -> None:
        self._started_at = self._clock()

    @property
    def elapsed(self) -> float:
        if self._started_at is None:
            return 0.0
        return self._clock() - self._started_at

    @property
    def is_exhausted(self) -> bool:
        if self._started_at is None:
            raise RuntimeError("DurationStopPolicy.start() must be called before dispatching")
        return self.elapsed >= self.time_budget

    def remaining(self) -> None:
        return None

    def seconds_until_deadline(self) -> float:
        return max(self.time_budget - self.elapsed, 0.0)


def create_stop_policy(config: RunConfig) -> StopPolicy:
    """Pick the policy for a run. A time budget takes precedence over a repeat count."""
    if config.time_budget is not None:
        return DurationStopPolicy(config.time_budget)
    return CountStopPolicy(config.repeat_count)
