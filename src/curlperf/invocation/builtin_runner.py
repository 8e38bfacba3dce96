# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Invocation runner that sends the request in-process with aiohttp."""

import asyncio
import logging
import time
from collections.abc import Sequence

import aiohttp

from curlperf.common.environment import Environment
from curlperf.common.exceptions import ConfigurationError
from curlperf.common.models import InvocationOutcome
from curlperf.invocation.curl_args import parse_builtin_request
from curlperf.invocation.curl_runner import elapsed_millis

logger = logging.getLogger(__name__)

__all__ = [
    "BuiltinInvocationRunner",
]


class BuiltinInvocationRunner:
    """Sends one HTTP request per invocation without spawning curl.

    Understands only a subset of curl's options (URL, -d, -A, -H). A fresh client
    session is opened for every invocation so that each measurement includes
    connection setup, the same as a separate curl process would.
    """

    def __init__(self, timeout_seconds: float | None = None) -> None:
        self.timeout_seconds = timeout_seconds or Environment.RUNNER.BUILTIN_REQUEST_TIMEOUT

    async def execute(self, args: Sequence[str]) -> InvocationOutcome:
        logger.debug(f"Sending built-in request with {list(args)}")

        start_ns = time.perf_counter_ns()
        try:
            request = parse_builtin_request(args)
        except ConfigurationError as e:
            return InvocationOutcome.failure(elapsed_ms=elapsed_millis(start_ns), error=str(e))

        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(
                    request.method,
                    request.url,
                    data=request.data,
                    headers=request.headers,
                ) as response:
                    await response.read()
                    status_code = str(response.status)
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError, ValueError) as e:
            elapsed_ms = elapsed_millis(start_ns)
            logger.debug(f"Built-in request to {request.url} failed after {elapsed_ms}ms: {e!r}")
            return InvocationOutcome.failure(
                elapsed_ms=elapsed_ms, error=str(e) or e.__class__.__name__
            )
        elapsed_ms = elapsed_millis(start_ns)

        logger.debug(f"Built-in request to {request.url} returned {status_code} in {elapsed_ms}ms")
        return InvocationOutcome.success(elapsed_ms=elapsed_ms, status_code=status_code)
