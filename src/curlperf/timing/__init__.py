# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from curlperf.timing.scheduler import Scheduler
from curlperf.timing.stop_policies import (
    CountStopPolicy,
    DurationStopPolicy,
    StopPolicy,
    create_stop_policy,
)

__all__ = [
    "CountStopPolicy",
    "DurationStopPolicy",
    "Scheduler",
    "StopPolicy",
    "create_stop_policy",
]
