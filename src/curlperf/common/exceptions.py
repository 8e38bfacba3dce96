# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class CurlPerfError(Exception):
    """Base class for all curlperf errors."""


class ConfigurationError(CurlPerfError):
    """Raised when the run configuration is invalid. Reported before any invocation."""


class ExecutorNotFoundError(CurlPerfError):
    """Raised when the external request executor cannot be located at all."""

    def __init__(self, executable: str) -> None:
        super().__init__(
            f"Request executor '{executable}' was not found on PATH. "
            "Install curl, set CURLPERF_RUNNER_CURL_BINARY to its location, "
            "or use --use-builtin to send requests without curl."
        )
        self.executable = executable
