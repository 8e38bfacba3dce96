# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Progress display on stderr while a run is in progress."""

import time

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from curlperf.common.config import RunConfig
from curlperf.common.environment import Environment
from curlperf.common.models import InvocationOutcome


class RunProgress:
    """Shows completed invocations against the run's stopping policy.

    Count-bound runs show ``completed/total``; time-bound runs show the elapsed
    share of the time budget plus a running count. Nothing is drawn when
    disabled or when the console is not a terminal.

    Usage:
        with RunProgress(config, console) as progress:
            scheduler = Scheduler(..., on_outcome=progress.advance)
    """

    def __init__(self, config: RunConfig, console: Console, enabled: bool = True) -> None:
        self.config = config
        self.enabled = enabled and console.is_terminal
        self.completed = 0
        self.errors = 0
        self._started_at = time.perf_counter()
        self._task_id: TaskID | None = None
        self._progress = Progress(
            TextColumn("{task.description}"),
            BarColumn(),
            MofNCompleteColumn() if not config.is_time_bound else TextColumn(""),
            TimeElapsedColumn(),
            console=console,
            transient=True,
            refresh_per_second=Environment.UI.PROGRESS_REFRESH_PER_SECOND,
            disable=not self.enabled,
        )

    def __enter__(self) -> "RunProgress":
        self._started_at = time.perf_counter()
        self._progress.start()
        total = self.config.time_budget if self.config.is_time_bound else self.config.repeat_count
        self._task_id = self._progress.add_task(self._describe(), total=total)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._progress.stop()

    def advance(self, outcome: InvocationOutcome) -> None:
        self.completed += 1
        if outcome.failed:
            self.errors += 1
        if self._task_id is None:
            return
        if self.config.is_time_bound:
            elapsed = min(time.perf_counter() - self._started_at, self.config.time_budget)
            self._progress.update(self._task_id, completed=elapsed, description=self._describe())
        else:
            self._progress.update(self._task_id, advance=1, description=self._describe())

    def _describe(self) -> str:
        if self.config.is_time_bound:
            return f"running... {self.completed} done, {self.errors} failed"
        return f"running... {self.errors} failed"
