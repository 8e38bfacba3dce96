# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from enum import Enum


class CaseInsensitiveStrEnum(str, Enum):
    """String enum whose members can be looked up regardless of case."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


class ExecutorType(CaseInsensitiveStrEnum):
    """Which request executor each invocation delegates to."""

    CURL = "curl"
    BUILTIN = "builtin"


class SchedulerState(CaseInsensitiveStrEnum):
    """Lifecycle of a single scheduler run."""

    IDLE = "idle"
    DISPATCHING = "dispatching"
    DRAINING = "draining"
    DONE = "done"
