# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Per-invocation outcomes and the end-of-run summary."""

from typing import Any

from pydantic import ConfigDict, Field, model_validator

from curlperf.common.models.base_models import CurlPerfBaseModel


class InvocationOutcome(CurlPerfBaseModel):
    """Result of a single invocation of the request executor.

    A completed request carries a status code and ``failed=False``. A hard failure
    (executor could not start, exited abnormally, or reported no status) carries
    ``failed=True`` and no status code.
    """

    model_config = ConfigDict(frozen=True)

    elapsed_ms: int = Field(ge=0, description="Wall-clock time of the invocation in milliseconds")
    status_code: str | None = Field(
        default=None, description="Status code reported by the executor (e.g. '200')"
    )
    failed: bool = Field(default=False, description="Whether the invocation failed")
    exit_status: int | None = Field(
        default=None, description="Exit status of the executor process, when one was spawned"
    )
    error: str | None = Field(
        default=None, description="Diagnostic message for failed invocations"
    )

    @model_validator(mode="after")
    def validate_status_matches_failure(self) -> "InvocationOutcome":
        if self.failed and self.status_code is not None:
            raise ValueError("A failed invocation cannot carry a status code")
        if not self.failed and self.status_code is None:
            raise ValueError("A successful invocation must carry a status code")
        return self

    @classmethod
    def success(cls, elapsed_ms: int, status_code: str, **kwargs) -> "InvocationOutcome":
        return cls(elapsed_ms=elapsed_ms, status_code=status_code, failed=False, **kwargs)

    @classmethod
    def failure(cls, elapsed_ms: int, error: str | None = None, **kwargs) -> "InvocationOutcome":
        return cls(elapsed_ms=elapsed_ms, failed=True, error=error, **kwargs)


class RunSummary(CurlPerfBaseModel):
    """Aggregate statistics over all outcomes of a run.

    All timing fields are integer milliseconds computed over successful invocations
    only. They are ``None`` (and omitted from exports) when nothing succeeded;
    the quartiles are also omitted when there are too few samples.
    """

    model_config = ConfigDict(frozen=True)

    mean_time: int | None = Field(default=None, description="Arithmetic mean of elapsed times")
    max_time: int | None = Field(default=None, description="Largest elapsed time")
    min_time: int | None = Field(default=None, description="Smallest elapsed time")
    variance_time: int | None = Field(
        default=None, description="Population variance of elapsed times"
    )
    quartile_25: int | None = Field(default=None, description="25th percentile of elapsed times")
    quartile_75: int | None = Field(default=None, description="75th percentile of elapsed times")
    status_count: dict[str, int] = Field(
        default_factory=dict, description="Occurrences of each status code"
    )
    error_count: int = Field(default=0, ge=0, description="Number of failed invocations")

    @property
    def success_count(self) -> int:
        return sum(self.status_count.values())

    @property
    def total_count(self) -> int:
        return self.success_count + self.error_count

    def to_json_dict(self) -> dict[str, Any]:
        """Export form: absent fields dropped, status codes in sorted order."""
        data = self.model_dump(mode="json", exclude_none=True)
        data["status_count"] = dict(sorted(self.status_count.items()))
        return data
