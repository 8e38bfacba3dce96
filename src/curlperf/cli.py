# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line entry point.

Usage:
    curlperf --repeat 100 --parallel 4 -- https://example.com/ -H "Accept: text/html"
    curlperf --time 30 --parallel 0 -- https://example.com/
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from pydantic import ValidationError

from curlperf import __version__
from curlperf.cli_runner import run_benchmark
from curlperf.cli_utils import raise_startup_error_and_exit
from curlperf.common.config import RunConfig, RunDefaults
from curlperf.common.constants import (
    EXIT_CODE_CONFIGURATION_ERROR,
    EXIT_CODE_EXECUTOR_NOT_FOUND,
    EXIT_CODE_SUCCESS,
)
from curlperf.common.enums import ExecutorType
from curlperf.common.environment import Environment
from curlperf.common.exceptions import ConfigurationError, ExecutorNotFoundError
from curlperf.common.logging import setup_rich_logging
from curlperf.invocation import prepare_curl_args

logger = logging.getLogger(__name__)

app = App(
    name="curlperf",
    help="Invoke curl repeatedly and report latency and status statistics as JSON.",
    version=__version__,
)


def build_run_config(
    curl_args: list[str],
    repeat: int | None = None,
    time_budget: float | None = None,
    wait: int = RunDefaults.WAIT_BETWEEN_MS,
    parallel: int = RunDefaults.PARALLELISM,
    use_builtin: bool = False,
    raw_args: bool = RunDefaults.RAW_ARGS,
) -> RunConfig:
    """Translate command line values into a RunConfig.

    Raises:
        ValidationError: If any value is out of range.
    """
    executor = ExecutorType.BUILTIN if use_builtin else ExecutorType.CURL
    passthrough_args = list(curl_args)
    if executor == ExecutorType.CURL:
        if not passthrough_args:
            logger.warning("No arguments given for curl after '--'; invocations will likely fail")
        if not raw_args:
            passthrough_args = prepare_curl_args(passthrough_args)

    if time_budget is not None and repeat is not None:
        logger.warning("--repeat is ignored because --time is set")

    values = {
        "time_budget": time_budget,
        "wait_between_ms": wait,
        "parallelism": parallel,
        "passthrough_args": passthrough_args,
        "executor": executor,
    }
    if repeat is not None:
        values["repeat_count"] = repeat
    return RunConfig(**values)


@app.default
def profile(
    *curl_args: Annotated[
        str, Parameter(help="Arguments forwarded verbatim to curl. Place them after '--'.")
    ],
    repeat: Annotated[
        int | None,
        Parameter(
            name=["--repeat", "-r"],
            help="Number of times to invoke curl. Defaults to 1. Ignored when --time is set.",
        ),
    ] = None,
    time_budget: Annotated[
        float | None,
        Parameter(
            name=["--time", "-t"],
            help="Repeat for this many seconds, launching as many invocations as fit. Overrides --repeat.",
        ),
    ] = None,
    wait: Annotated[
        int,
        Parameter(
            name=["--wait", "-w"],
            help="Milliseconds each parallel slot waits between its invocations.",
        ),
    ] = RunDefaults.WAIT_BETWEEN_MS,
    parallel: Annotated[
        int,
        Parameter(
            name=["--parallel", "-p"],
            help="Number of invocations run concurrently. 0 runs as many as possible.",
        ),
    ] = RunDefaults.PARALLELISM,
    use_builtin: Annotated[
        bool,
        Parameter(
            name="--use-builtin",
            negative="",
            help="Send requests with the built-in HTTP client instead of curl. "
            "Supports only URL, -d/--data, -A/--user-agent and -H/--header.",
        ),
    ] = False,
    raw_args: Annotated[
        bool,
        Parameter(
            name="--raw-args",
            negative="",
            help="Do not add '-s -o <null> -w %{http_code}' to the curl arguments.",
        ),
    ] = RunDefaults.RAW_ARGS,
    output_dir: Annotated[
        Path | None,
        Parameter(
            name="--output-dir",
            help="Also write the summary as JSON and CSV files into this directory.",
        ),
    ] = None,
    log_level: Annotated[
        str,
        Parameter(name="--log-level", help="Log level for messages on stderr."),
    ] = Environment.LOGGING.LEVEL,
    progress: Annotated[
        bool,
        Parameter(name="--progress", help="Show a progress bar on stderr when it is a terminal."),
    ] = RunDefaults.SHOW_PROGRESS,
) -> int:
    """Invoke curl repeatedly and print a JSON summary of latency and status codes."""
    try:
        setup_rich_logging(log_level)
    except ValueError as e:
        raise_startup_error_and_exit(
            str(e), title="Configuration Error", exit_code=EXIT_CODE_CONFIGURATION_ERROR
        )

    try:
        config = build_run_config(
            list(curl_args),
            repeat=repeat,
            time_budget=time_budget,
            wait=wait,
            parallel=parallel,
            use_builtin=use_builtin,
            raw_args=raw_args,
        )
    except ValidationError as e:
        raise_startup_error_and_exit(
            str(e), title="Configuration Error", exit_code=EXIT_CODE_CONFIGURATION_ERROR
        )
    logger.debug(f"Run configuration: {config!r}")

    try:
        run_benchmark(config, output_dir=output_dir, show_progress=progress)
    except ConfigurationError as e:
        raise_startup_error_and_exit(
            str(e), title="Configuration Error", exit_code=EXIT_CODE_CONFIGURATION_ERROR
        )
    except ExecutorNotFoundError as e:
        raise_startup_error_and_exit(
            str(e), title="Executor Not Found", exit_code=EXIT_CODE_EXECUTOR_NOT_FOUND
        )
    return EXIT_CODE_SUCCESS


def main(argv: list[str] | None = None) -> None:
    sys.exit(app(argv))
