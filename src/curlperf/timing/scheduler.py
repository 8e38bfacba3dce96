# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Invocation scheduler.

The scheduler runs a fixed number of concurrency slots. Each slot repeatedly asks
the stopping policy for a launch permit, runs one invocation, submits the outcome
to the aggregator, and then idles for the configured wait before asking again.
Separating "may we launch?" (the policy) from "how many at once?" (the slots)
lets count-bound and time-bound runs share one dispatch loop.
"""

import asyncio
import contextlib
import logging
import time
from collections.abc import Callable

from curlperf.aggregation.aggregator import OutcomeAggregator
from curlperf.common.config import RunConfig
from curlperf.common.enums import SchedulerState
from curlperf.common.environment import Environment
from curlperf.common.models import InvocationOutcome
from curlperf.invocation.curl_runner import elapsed_millis
from curlperf.invocation.protocols import InvocationRunnerProtocol
from curlperf.timing.stop_policies import StopPolicy, create_stop_policy

logger = logging.getLogger(__name__)

__all__ = [
    "Scheduler",
]


class Scheduler:
    """Drives all invocations of a run through a pool of concurrency slots.

    States move ``IDLE -> DISPATCHING -> DRAINING -> DONE``. Dispatching stops when
    the stopping policy is exhausted or :meth:`cancel` is called; invocations that
    are already running always complete and are counted.
    """

    def __init__(
        self,
        config: RunConfig,
        runner: InvocationRunnerProtocol,
        aggregator: OutcomeAggregator,
        on_outcome: Callable[[InvocationOutcome], None] | None = None,
        policy: StopPolicy | None = None,
    ) -> None:
        self.config = config
        self.runner = runner
        self.aggregator = aggregator
        self.policy = policy or create_stop_policy(config)
        self._on_outcome = on_outcome

        self._state = SchedulerState.IDLE
        self._cancel_event = asyncio.Event()
        self._in_flight = 0
        self._max_in_flight = 0
        self._completed = 0

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def launched(self) -> int:
        return self.policy.launched

    @property
    def completed(self) -> int:
        return self._completed

    @property
    def in_flight(self) -> int:
        return self._in_flight

    @property
    def max_in_flight(self) -> int:
        """Highest number of simultaneously running invocations observed."""
        return self._max_in_flight

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def effective_slots(self) -> int:
        """Number of concurrency slots for this run.

        A non-zero parallelism is used as is, but a count-bound run never gets more
        slots than invocations. Parallelism 0 means one slot per required invocation
        for count-bound runs and ``Environment.SCHEDULER.MAX_UNBOUNDED_SLOTS`` for
        time-bound runs, whose total is not known in advance.
        """
        remaining = self.policy.remaining()
        if self.config.parallelism > 0:
            if remaining is None:
                return self.config.parallelism
            return min(self.config.parallelism, remaining)
        if remaining is None:
            return Environment.SCHEDULER.MAX_UNBOUNDED_SLOTS
        return remaining

    def cancel(self) -> None:
        """Stop launching new invocations. In-flight invocations are awaited, not killed."""
        if self._cancel_event.is_set():
            return
        logger.warning(
            f"Cancellation requested: no new invocations will be launched, "
            f"waiting for {self._in_flight} in-flight invocation(s)"
        )
        self._cancel_event.set()
        self._begin_draining()

    async def run(self) -> None:
        """Run until the stopping condition fires and every launched invocation is done.

        Raises:
            RuntimeError: If the scheduler has already been run.
        """
        if self._state != SchedulerState.IDLE:
            raise RuntimeError(f"Scheduler cannot be run from state '{self._state}'")

        self.policy.start()
        num_slots = self.effective_slots()
        self._state = SchedulerState.DISPATCHING
        if self.cancelled:
            self._state = SchedulerState.DRAINING

        logger.debug(f"Dispatching with {num_slots} slot(s), policy={self.policy.__class__.__name__}")
        started_at = time.perf_counter()
        try:
            await asyncio.gather(
                *(self._run_slot(slot_index) for slot_index in range(num_slots))
            )
        finally:
            self._state = SchedulerState.DONE

        logger.debug(
            f"All slots finished: {self._completed}/{self.launched} invocation(s) completed "
            f"in {time.perf_counter() - started_at:.3f}s, max in flight {self._max_in_flight}"
        )

    async def _run_slot(self, slot_index: int) -> None:
        while not self.cancelled and self.policy.try_acquire():
            await self._invoke_once(slot_index)
            if self.config.wait_between_ms > 0 and not self.policy.is_exhausted:
                await self._idle()
        self._begin_draining()

    async def _invoke_once(self, slot_index: int) -> None:
        self._in_flight += 1
        self._max_in_flight = max(self._max_in_flight, self._in_flight)
        start_ns = time.perf_counter_ns()
        try:
            outcome = await self.runner.execute(self.config.passthrough_args)
        except Exception as e:
            logger.exception(f"Runner raised in slot {slot_index}; recording a failed invocation")
            outcome = InvocationOutcome.failure(elapsed_ms=elapsed_millis(start_ns), error=str(e))
        finally:
            self._in_flight -= 1

        self._completed += 1
        self.aggregator.submit(outcome)
        if self._on_outcome is not None:
            self._on_outcome(outcome)

    async def _idle(self) -> None:
        """Wait between invocations of one slot, cut short by cancellation or the deadline."""
        timeout = self.config.wait_between_seconds
        until_deadline = self.policy.seconds_until_deadline()
        if until_deadline is not None:
            timeout = min(timeout, until_deadline)
        with contextlib.suppress(asyncio.TimeoutError):
            await asyncio.wait_for(self._cancel_event.wait(), timeout=timeout)

    def _begin_draining(self) -> None:
        if self._state == SchedulerState.DISPATCHING:
            logger.debug("Stopping condition reached, draining in-flight invocations")
            self._state = SchedulerState.DRAINING
