# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import threading

import pytest

from curlperf.aggregation import OutcomeAggregator, compute_run_summary
from tests.harness import failed, ok


class TestOutcomeAggregator:
    def test_empty_run(self, aggregator: OutcomeAggregator) -> None:
        summary = aggregator.finalize()
        assert summary.mean_time is None
        assert summary.status_count == {}
        assert summary.error_count == 0
        assert summary.to_json_dict() == {"status_count": {}, "error_count": 0}

    def test_single_sample(self, aggregator: OutcomeAggregator) -> None:
        aggregator.submit(ok(50, "200"))
        summary = aggregator.finalize()
        assert summary.mean_time == 50
        assert summary.max_time == 50
        assert summary.min_time == 50
        assert summary.variance_time == 0
        assert summary.quartile_25 is None
        assert summary.quartile_75 is None
        assert summary.status_count == {"200": 1}

    def test_three_samples(self, aggregator: OutcomeAggregator) -> None:
        aggregator.submit_all([ok(30), ok(10), ok(20)])
        summary = aggregator.finalize()
        assert summary.mean_time == 20
        assert summary.min_time == 10
        assert summary.max_time == 30
        # (100 + 0 + 100) / 3
        assert summary.variance_time == 67
        assert summary.quartile_25 == 15
        assert summary.quartile_75 == 25

    def test_failures_excluded_from_timing(self, aggregator: OutcomeAggregator) -> None:
        aggregator.submit_all([ok(10), failed(elapsed_ms=9_000), ok(30)])
        summary = aggregator.finalize()
        assert summary.error_count == 1
        assert summary.status_count == {"200": 2}
        assert summary.mean_time == 20
        assert summary.max_time == 30

    def test_only_failures(self, aggregator: OutcomeAggregator) -> None:
        aggregator.submit_all([failed(), failed(), failed()])
        summary = aggregator.finalize()
        assert summary.error_count == 3
        assert summary.status_count == {}
        for field in ("mean_time", "max_time", "min_time", "variance_time"):
            assert getattr(summary, field) is None
        assert summary.to_json_dict() == {"status_count": {}, "error_count": 3}

    def test_non_success_status_codes_are_not_errors(self, aggregator: OutcomeAggregator) -> None:
        aggregator.submit_all([ok(5, "200"), ok(7, "404"), ok(9, "500"), ok(11, "404")])
        summary = aggregator.finalize()
        assert summary.error_count == 0
        assert summary.status_count == {"200": 1, "404": 2, "500": 1}
        assert summary.mean_time == 8

    def test_counts(self, aggregator: OutcomeAggregator) -> None:
        aggregator.submit_all([ok(1), failed(), ok(2), failed()])
        assert aggregator.success_count == 2
        assert aggregator.error_count == 2
        assert aggregator.total_count == 4

    def test_finalize_is_repeatable(self, aggregator: OutcomeAggregator) -> None:
        aggregator.submit_all([ok(3), ok(9), failed()])
        assert aggregator.finalize() == aggregator.finalize()

    def test_submit_after_finalize_is_included(self, aggregator: OutcomeAggregator) -> None:
        aggregator.submit(ok(10))
        first = aggregator.finalize()
        aggregator.submit(ok(30))
        second = aggregator.finalize()
        assert first.mean_time == 10
        assert second.mean_time == 20

    def test_concurrent_submissions(self, aggregator: OutcomeAggregator) -> None:
        num_threads, per_thread = 8, 500

        def worker(index: int) -> None:
            for i in range(per_thread):
                if i % 10 == 0:
                    aggregator.submit(failed())
                else:
                    aggregator.submit(ok(index + i, "200"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(num_threads)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        summary = aggregator.finalize()
        assert summary.error_count == num_threads * per_thread // 10
        assert summary.status_count == {"200": num_threads * per_thread * 9 // 10}
        assert summary.total_count == num_threads * per_thread


class TestComputeRunSummary:
    @pytest.mark.parametrize(
        "samples,expected",
        [
            ([1, 2], {"mean_time": 2, "variance_time": 0, "quartile_25": 1, "quartile_75": 2}),
            ([5, 5, 5, 5], {"mean_time": 5, "variance_time": 0, "quartile_25": 5, "quartile_75": 5}),
            ([0, 100], {"mean_time": 50, "variance_time": 2500, "quartile_25": 25, "quartile_75": 75}),
            ([10, 20, 30, 40], {"mean_time": 25, "variance_time": 125, "quartile_25": 18, "quartile_75": 32}),
        ],
    )  # fmt: skip
    def test_statistics(self, samples: list[int], expected: dict[str, int]) -> None:
        summary = compute_run_summary(samples, {"200": len(samples)}, 0)
        for field, value in expected.items():
            assert getattr(summary, field) == value, field

    def test_passes_counts_through(self) -> None:
        summary = compute_run_summary([7], {"204": 1}, 4)
        assert summary.status_count == {"204": 1}
        assert summary.error_count == 4

    def test_input_is_not_modified(self) -> None:
        samples = [30, 10, 20]
        compute_run_summary(samples, {"200": 3}, 0)
        assert samples == [30, 10, 20]
