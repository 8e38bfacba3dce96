# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Streaming collection of invocation outcomes into a run summary."""

import logging
import threading
from collections import Counter
from collections.abc import Iterable, Sequence

import numpy as np

from curlperf.common.constants import MIN_QUARTILE_SAMPLES
from curlperf.common.models import InvocationOutcome, RunSummary

logger = logging.getLogger(__name__)

__all__ = [
    "OutcomeAggregator",
    "compute_run_summary",
]


class OutcomeAggregator:
    """Collects outcomes from concurrently completing invocations.

    Status and failure counts are kept as running totals. Elapsed times of
    successful invocations are retained because exact quartiles need the whole
    sample. Aggregation does not depend on submission order.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._elapsed_ms: list[int] = []
        self._status_count: Counter[str] = Counter()
        self._error_count = 0

    def submit(self, outcome: InvocationOutcome) -> None:
        """Record one outcome. Safe to call from multiple threads or tasks."""
        with self._lock:
            if outcome.failed:
                self._error_count += 1
            else:
                self._elapsed_ms.append(outcome.elapsed_ms)
                self._status_count[str(outcome.status_code)] += 1

    def submit_all(self, outcomes: Iterable[InvocationOutcome]) -> None:
        for outcome in outcomes:
            self.submit(outcome)

    @property
    def success_count(self) -> int:
        with self._lock:
            return len(self._elapsed_ms)

    @property
    def error_count(self) -> int:
        with self._lock:
            return self._error_count

    @property
    def total_count(self) -> int:
        with self._lock:
            return len(self._elapsed_ms) + self._error_count

    def finalize(self) -> RunSummary:
        """Compute the summary of everything submitted so far.

        Does not consume the collected data, so calling it again without new
        submissions yields an identical summary.
        """
        with self._lock:
            samples = list(self._elapsed_ms)
            status_count = dict(self._status_count)
            error_count = self._error_count

        summary = compute_run_summary(samples, status_count, error_count)
        logger.debug(f"Finalized summary over {len(samples) + error_count} outcome(s): {summary}")
        return summary


def compute_run_summary(
    elapsed_ms: Sequence[int], status_count: dict[str, int], error_count: int
) -> RunSummary:
    """Compute timing statistics over successful elapsed times.

    - mean: arithmetic mean
    - variance: population variance (mean squared deviation from the mean)
    - quartiles: linear interpolation between order statistics, the
      ``numpy.percentile(..., method="linear")`` definition, only with at least
      ``MIN_QUARTILE_SAMPLES`` samples

    All values are rounded to whole milliseconds. With no samples every timing
    field is left unset.
    """
    if not elapsed_ms:
        return RunSummary(status_count=status_count, error_count=error_count)

    # Sorting first makes the floating point reductions independent of arrival order.
    samples = np.sort(np.asarray(elapsed_ms, dtype=np.float64))

    quartile_25 = quartile_75 = None
    if samples.size >= MIN_QUARTILE_SAMPLES:
        q25, q75 = np.percentile(samples, [25, 75], method="linear")
        quartile_25 = _round_millis(q25)
        quartile_75 = _round_millis(q75)

    return RunSummary(
        mean_time=_round_millis(samples.mean()),
        max_time=_round_millis(samples[-1]),
        min_time=_round_millis(samples[0]),
        variance_time=_round_millis(samples.var()),
        quartile_25=quartile_25,
        quartile_75=quartile_75,
        status_count=status_count,
        error_count=error_count,
    )


def _round_millis(value: float) -> int:
    return int(round(float(value)))
