# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Property-based tests for outcome aggregation."""

from hypothesis import given
from hypothesis import strategies as st

from curlperf.aggregation import OutcomeAggregator
from tests.harness import failed, ok

outcomes_strategy = st.lists(
    st.one_of(
        st.builds(ok, st.integers(0, 60_000), st.sampled_from(["200", "301", "404", "503"])),
        st.builds(failed, st.integers(0, 60_000)),
    ),
    max_size=60,
)


def summarize(outcomes):
    aggregator = OutcomeAggregator()
    aggregator.submit_all(outcomes)
    return aggregator.finalize()


@given(outcomes=outcomes_strategy, data=st.data())
def test_summary_does_not_depend_on_order(outcomes, data) -> None:
    shuffled = data.draw(st.permutations(outcomes))
    assert summarize(outcomes) == summarize(shuffled)


@given(outcomes=outcomes_strategy)
def test_every_outcome_is_counted_once(outcomes) -> None:
    summary = summarize(outcomes)
    assert summary.error_count == sum(1 for o in outcomes if o.failed)
    assert summary.error_count + sum(summary.status_count.values()) == len(outcomes)


@given(outcomes=outcomes_strategy)
def test_timing_bounds(outcomes) -> None:
    summary = summarize(outcomes)
    successes = [o.elapsed_ms for o in outcomes if not o.failed]
    if not successes:
        assert summary.mean_time is None
        return
    assert summary.min_time == min(successes)
    assert summary.max_time == max(successes)
    assert summary.min_time <= summary.mean_time <= summary.max_time
    assert summary.variance_time >= 0
    if len(successes) >= 2:
        assert summary.min_time <= summary.quartile_25 <= summary.quartile_75 <= summary.max_time
    else:
        assert summary.quartile_25 is None
