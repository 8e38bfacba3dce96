# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exporters for the run summary."""

from curlperf.exporters.base_exporter import SummaryBaseExporter
from curlperf.exporters.console_exporter import ConsoleSummaryExporter
from curlperf.exporters.exporter_config import ExporterConfig
from curlperf.exporters.summary_csv_exporter import SummaryCsvExporter
from curlperf.exporters.summary_json_exporter import SummaryJsonExporter

__all__ = [
    "ConsoleSummaryExporter",
    "ExporterConfig",
    "SummaryBaseExporter",
    "SummaryCsvExporter",
    "SummaryJsonExporter",
]
