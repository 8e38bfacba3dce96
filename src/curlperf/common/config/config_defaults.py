# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from dataclasses import dataclass

from curlperf.common.enums import ExecutorType


@dataclass(frozen=True)
class RunDefaults:
    REPEAT_COUNT = 1
    TIME_BUDGET = None
    WAIT_BETWEEN_MS = 0
    PARALLELISM = 1
    EXECUTOR = ExecutorType.CURL
    RAW_ARGS = False
    SHOW_PROGRESS = True
