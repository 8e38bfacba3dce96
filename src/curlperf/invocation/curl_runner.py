# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Invocation runner that shells out to curl."""

import asyncio
import logging
import re
import shutil
import subprocess
import time
from collections.abc import Sequence

from curlperf.common.constants import CURL_NO_RESPONSE_CODE, NANOS_PER_MILLIS
from curlperf.common.environment import Environment
from curlperf.common.exceptions import ExecutorNotFoundError
from curlperf.common.models import InvocationOutcome

logger = logging.getLogger(__name__)

__all__ = [
    "CurlInvocationRunner",
    "resolve_curl_binary",
]

# Only the tail of stderr is kept on a failed outcome.
_MAX_ERROR_CHARS = 2000

# curl prints %{http_code} as exactly three digits.
_STATUS_CODE_PATTERN = re.compile(r"\d{3}")


def resolve_curl_binary(binary: str | None = None) -> str:
    """Locate the curl executable.

    Raises:
        ExecutorNotFoundError: If the executable is not on PATH.
    """
    binary = binary or Environment.RUNNER.CURL_BINARY
    resolved = shutil.which(binary)
    if resolved is None:
        raise ExecutorNotFoundError(binary)
    return resolved


def elapsed_millis(start_ns: int) -> int:
    return round((time.perf_counter_ns() - start_ns) / NANOS_PER_MILLIS)


class CurlInvocationRunner:
    """Runs the curl executable once per invocation and reads the status code from stdout.

    The arguments are passed to curl exactly as given. Callers that want curl to
    print only the status code use :func:`curlperf.invocation.curl_args.prepare_curl_args`
    once, before the run.
    """

    def __init__(self, binary: str | None = None) -> None:
        self.binary = binary or Environment.RUNNER.CURL_BINARY

    async def execute(self, args: Sequence[str]) -> InvocationOutcome:
        logger.debug(f"Invoking {self.binary} with {list(args)}")

        start_ns = time.perf_counter_ns()
        try:
            process = await asyncio.create_subprocess_exec(
                self.binary,
                *args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                # Keep terminal interrupts away from in-flight requests.
                start_new_session=True,
            )
            stdout, stderr = await process.communicate()
        except OSError as e:
            elapsed_ms = elapsed_millis(start_ns)
            logger.debug(f"Failed to start {self.binary}: {e!r}")
            return InvocationOutcome.failure(
                elapsed_ms=elapsed_ms, error=f"Failed to start {self.binary}: {e}"
            )
        elapsed_ms = elapsed_millis(start_ns)

        exit_status = process.returncode
        status_text = stdout.decode("utf-8", errors="replace").strip()
        error_text = stderr.decode("utf-8", errors="replace").strip()[-_MAX_ERROR_CHARS:]
        logger.debug(
            f"{self.binary} exited with {exit_status} after {elapsed_ms}ms "
            f"(stdout={status_text!r}, stderr={error_text!r})"
        )

        if exit_status != 0:
            return InvocationOutcome.failure(
                elapsed_ms=elapsed_ms,
                exit_status=exit_status,
                error=error_text or f"{self.binary} exited with status {exit_status}",
            )
        if not status_text or status_text == CURL_NO_RESPONSE_CODE:
            return InvocationOutcome.failure(
                elapsed_ms=elapsed_ms,
                exit_status=exit_status,
                error=f"{self.binary} reported no status code",
            )
        if not _STATUS_CODE_PATTERN.fullmatch(status_text):
            return InvocationOutcome.failure(
                elapsed_ms=elapsed_ms,
                exit_status=exit_status,
                error=f"{self.binary} reported a malformed status code: {status_text[:80]!r}",
            )
        return InvocationOutcome.success(
            elapsed_ms=elapsed_ms, status_code=status_text, exit_status=exit_status
        )
