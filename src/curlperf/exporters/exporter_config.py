# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration for summary exporters."""

from dataclasses import dataclass
from pathlib import Path

from curlperf.common.models import RunSummary


@dataclass(slots=True)
class ExporterConfig:
    """Configuration for summary exporters.

    Attributes:
        summary: RunSummary to export
        output_dir: Directory where file exporters write; unused by the console exporter
    """

    summary: RunSummary
    output_dir: Path | None = None
