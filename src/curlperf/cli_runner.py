# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import asyncio
import contextlib
import logging
import signal
import time
from collections.abc import Callable, Iterator
from pathlib import Path

from curlperf.aggregation import OutcomeAggregator
from curlperf.common.config import RunConfig
from curlperf.common.enums import ExecutorType
from curlperf.common.logging import get_stderr_console
from curlperf.common.models import InvocationOutcome, RunSummary
from curlperf.exporters import (
    ConsoleSummaryExporter,
    ExporterConfig,
    SummaryCsvExporter,
    SummaryJsonExporter,
)
from curlperf.invocation import (
    BuiltinInvocationRunner,
    CurlInvocationRunner,
    InvocationRunnerProtocol,
    parse_builtin_request,
    resolve_curl_binary,
)
from curlperf.timing import Scheduler
from curlperf.ui import RunProgress

logger = logging.getLogger(__name__)

_CANCEL_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def build_runner(config: RunConfig, curl_binary: str | None = None) -> InvocationRunnerProtocol:
    """Create the runner for the configured executor, validating it before the run.

    Raises:
        ConfigurationError: If the built-in executor cannot parse the pass-through arguments.
        ExecutorNotFoundError: If curl is selected but cannot be found.
    """
    if config.executor == ExecutorType.BUILTIN:
        # Parse once up front so bad arguments fail the run instead of every invocation.
        request = parse_builtin_request(config.passthrough_args)
        logger.debug(f"Built-in executor request: {request}")
        return BuiltinInvocationRunner()

    binary = resolve_curl_binary(curl_binary)
    logger.debug(f"Using curl executable: {binary}")
    return CurlInvocationRunner(binary)


@contextlib.contextmanager
def _cancel_on_signals(scheduler: Scheduler) -> Iterator[None]:
    """Turn SIGINT/SIGTERM into a scheduler cancellation for the duration of the run."""
    loop = asyncio.get_running_loop()
    installed = []
    for sig in _CANCEL_SIGNALS:
        # Not available on Windows event loops or outside the main thread.
        with contextlib.suppress(NotImplementedError, RuntimeError, ValueError):
            loop.add_signal_handler(sig, scheduler.cancel)
            installed.append(sig)
    try:
        yield
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)


async def execute_run(
    config: RunConfig,
    runner: InvocationRunnerProtocol,
    on_outcome: Callable[[InvocationOutcome], None] | None = None,
) -> RunSummary:
    """Schedule every invocation of the run and return the finalized summary."""
    aggregator = OutcomeAggregator()
    scheduler = Scheduler(config, runner, aggregator, on_outcome=on_outcome)

    with _cancel_on_signals(scheduler):
        await scheduler.run()

    if scheduler.cancelled:
        logger.warning(f"Run was cancelled after {scheduler.launched} invocation(s)")
    return aggregator.finalize()


async def export_artifacts(summary: RunSummary, output_dir: Path) -> tuple[Path, Path]:
    """Write the JSON and CSV summary files concurrently.

    Returns:
        Tuple of (json_path, csv_path)
    """
    exporter_config = ExporterConfig(summary=summary, output_dir=output_dir)
    json_path, csv_path = await asyncio.gather(
        SummaryJsonExporter(exporter_config).export(),
        SummaryCsvExporter(exporter_config).export(),
    )
    return json_path, csv_path


def run_benchmark(
    config: RunConfig,
    runner: InvocationRunnerProtocol | None = None,
    output_dir: Path | None = None,
    show_progress: bool = False,
) -> RunSummary:
    """Run a complete benchmark: schedule, aggregate, and print the summary to stdout.

    Per-invocation failures never fail the run; they are counted in ``error_count``.

    Raises:
        ConfigurationError: If the configuration is rejected before any invocation.
        ExecutorNotFoundError: If curl is selected but cannot be found.
    """
    runner = runner or build_runner(config)

    logger.info(
        f"Starting {config.stop_policy_description} run with "
        f"parallelism={config.parallelism or 'unbounded'}, wait={config.wait_between_ms}ms, "
        f"executor={config.executor}"
    )
    started_at = time.perf_counter()
    with RunProgress(config, get_stderr_console(), enabled=show_progress) as progress:
        summary = asyncio.run(execute_run(config, runner, on_outcome=progress.advance))
    logger.info(
        f"Run complete: {summary.total_count} invocation(s), "
        f"{summary.error_count} failed, {time.perf_counter() - started_at:.2f}s"
    )

    ConsoleSummaryExporter(ExporterConfig(summary=summary)).export()

    if output_dir is not None:
        json_path, csv_path = asyncio.run(export_artifacts(summary, Path(output_dir)))
        logger.info(f"Summary JSON written to: {json_path}")
        logger.info(f"Summary CSV written to: {csv_path}")

    return summary
