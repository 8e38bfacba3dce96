# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field, model_validator

from curlperf.common.config.base_config import BaseConfig
from curlperf.common.config.config_defaults import RunDefaults
from curlperf.common.constants import MILLIS_PER_SECOND
from curlperf.common.enums import ExecutorType


class RunConfig(BaseConfig):
    """Everything the scheduler needs to drive one load-generation run.

    Exactly one stopping policy is active: when ``time_budget`` is set the run is
    time-bound and ``repeat_count`` is ignored, otherwise ``repeat_count`` governs.
    """

    repeat_count: Annotated[
        int,
        Field(
            ge=1,
            description="Number of invocations to launch. Ignored when time_budget is set.",
        ),
    ] = RunDefaults.REPEAT_COUNT

    time_budget: Annotated[
        float | None,
        Field(
            gt=0,
            description="Wall-clock budget in seconds. New invocations are launched until it elapses; "
            "in-flight invocations are allowed to finish.",
        ),
    ] = RunDefaults.TIME_BUDGET

    wait_between_ms: Annotated[
        int,
        Field(
            ge=0,
            description="Idle time in milliseconds a concurrency slot waits after an invocation "
            "completes before it launches its next one.",
        ),
    ] = RunDefaults.WAIT_BETWEEN_MS

    parallelism: Annotated[
        int,
        Field(
            ge=0,
            description="Number of invocations running concurrently. 0 means as many as possible, "
            "never more than the invocations still required.",
        ),
    ] = RunDefaults.PARALLELISM

    passthrough_args: Annotated[
        list[str],
        Field(
            default_factory=list,
            description="Arguments forwarded verbatim to the request executor.",
        ),
    ]

    executor: Annotated[
        ExecutorType,
        Field(
            description="Request executor: the external curl command or the built-in HTTP client.",
        ),
    ] = RunDefaults.EXECUTOR

    @model_validator(mode="after")
    def validate_builtin_has_url(self) -> "RunConfig":
        """The built-in executor needs at least the URL to request.

        Raises:
            ValueError: If the built-in executor is selected without pass-through arguments.
        """
        if self.executor == ExecutorType.BUILTIN and not self.passthrough_args:
            raise ValueError(
                "--use-builtin requires at least a URL after '--'. "
                "Example: curlperf --use-builtin -- http://localhost:8080/"
            )
        return self

    @property
    def is_time_bound(self) -> bool:
        return self.time_budget is not None

    @property
    def wait_between_seconds(self) -> float:
        return self.wait_between_ms / MILLIS_PER_SECOND

    @property
    def stop_policy_description(self) -> str:
        if self.is_time_bound:
            return f"time-bound ({self.time_budget:g}s)"
        return f"count-bound ({self.repeat_count} invocations)"
