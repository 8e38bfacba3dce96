# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Aggregation of invocation outcomes."""

from curlperf.aggregation.aggregator import OutcomeAggregator, compute_run_summary

__all__ = [
    "OutcomeAggregator",
    "compute_run_summary",
]
