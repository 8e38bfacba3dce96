# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from curlperf.common.models import InvocationOutcome


@runtime_checkable
class InvocationRunnerProtocol(Protocol):
    """Protocol for runners that execute one request and time it.

    Implementations never raise for per-invocation problems; they report them
    as a failed outcome instead.
    """

    async def execute(self, args: Sequence[str]) -> InvocationOutcome: ...
