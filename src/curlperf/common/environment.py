# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven settings.

Each group is a Pydantic Settings class with its own prefix, so for example
``Environment.RUNNER.CURL_BINARY`` is read from ``CURLPERF_RUNNER_CURL_BINARY``.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _RunnerSettings(BaseSettings):
    """Settings for the invocation runners."""

    model_config = SettingsConfigDict(env_prefix="CURLPERF_RUNNER_")

    CURL_BINARY: str = Field(
        default="curl",
        description="Name or path of the curl executable invoked for each request.",
    )
    BUILTIN_REQUEST_TIMEOUT: float = Field(
        default=300.0,
        gt=0,
        description="Total timeout in seconds for one request sent by the built-in executor.",
    )


class _SchedulerSettings(BaseSettings):
    """Settings for the invocation scheduler."""

    model_config = SettingsConfigDict(env_prefix="CURLPERF_SCHEDULER_")

    MAX_UNBOUNDED_SLOTS: int = Field(
        default=1024,
        ge=1,
        description="Number of concurrent slots used for a time-bound run with --parallel 0.",
    )


class _UISettings(BaseSettings):
    """Settings for the terminal progress display."""

    model_config = SettingsConfigDict(env_prefix="CURLPERF_UI_")

    PROGRESS_REFRESH_PER_SECOND: float = Field(
        default=4.0,
        gt=0,
        description="Refresh rate of the progress bar shown on stderr.",
    )


class _LoggingSettings(BaseSettings):
    """Settings for log output."""

    model_config = SettingsConfigDict(env_prefix="CURLPERF_LOGGING_")

    LEVEL: str = Field(
        default="INFO",
        description="Default log level when --log-level is not given.",
    )


class _Environment:
    RUNNER = _RunnerSettings()
    SCHEDULER = _SchedulerSettings()
    UI = _UISettings()
    LOGGING = _LoggingSettings()


Environment = _Environment()
