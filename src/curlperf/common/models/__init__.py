# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from curlperf.common.models.base_models import CurlPerfBaseModel
from curlperf.common.models.outcome_models import InvocationOutcome, RunSummary

__all__ = [
    "CurlPerfBaseModel",
    "InvocationOutcome",
    "RunSummary",
]
