# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CSV exporter for the run summary."""

import csv
import io

from curlperf.exporters.base_exporter import SummaryBaseExporter

_TIMING_FIELDS = (
    "mean_time",
    "max_time",
    "min_time",
    "variance_time",
    "quartile_25",
    "quartile_75",
)


class SummaryCsvExporter(SummaryBaseExporter):
    """Exports the run summary as ``metric,value`` rows.

    Timing fields come first (empty value when not computed), then one
    ``status_<code>`` row per observed status code, then ``error_count``.
    """

    def get_file_name(self) -> str:
        return "curlperf_summary.csv"

    def _generate_content(self) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf)

        writer.writerow(["metric", "value"])
        for field_name in _TIMING_FIELDS:
            value = getattr(self._summary, field_name)
            writer.writerow([field_name, "" if value is None else value])
        for status_code, count in sorted(self._summary.status_count.items()):
            writer.writerow([f"status_{status_code}", count])
        writer.writerow(["error_count", self._summary.error_count])

        return buf.getvalue()
