# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""In-process stand-ins for the invocation runners."""

import asyncio
from collections import deque
from collections.abc import Iterable, Sequence

from curlperf.common.config import RunConfig
from curlperf.common.models import InvocationOutcome


def ok(elapsed_ms: int, status_code: str = "200") -> InvocationOutcome:
    return InvocationOutcome.success(elapsed_ms=elapsed_ms, status_code=status_code)


def failed(elapsed_ms: int = 0, error: str = "executor unreachable") -> InvocationOutcome:
    return InvocationOutcome.failure(elapsed_ms=elapsed_ms, error=error)


def make_config(**kwargs) -> RunConfig:
    """Create a RunConfig with sensible defaults for testing."""
    kwargs.setdefault("passthrough_args", ["http://localhost/"])
    return RunConfig(**kwargs)


class FakeRunner:
    """Runner that returns scripted outcomes after an optional simulated latency.

    Once the script is used up it keeps returning successful '200' outcomes.
    Tracks the arguments of every call and the peak number of concurrent calls.
    """

    def __init__(
        self,
        outcomes: Iterable[InvocationOutcome] = (),
        delay: float = 0.0,
    ) -> None:
        self._outcomes = deque(outcomes)
        self.delay = delay
        self.calls: list[list[str]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def execute(self, args: Sequence[str]) -> InvocationOutcome:
        self.calls.append(list(args))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1
        if self._outcomes:
            return self._outcomes.popleft()
        return ok(round(self.delay * 1000))

    @property
    def call_count(self) -> int:
        return len(self.calls)


class RaisingRunner(FakeRunner):
    """Runner that breaks its contract by raising on every call."""

    async def execute(self, args: Sequence[str]) -> InvocationOutcome:
        await super().execute(args)
        raise RuntimeError("runner exploded")
