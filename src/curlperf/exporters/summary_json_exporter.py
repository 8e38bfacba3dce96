# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""JSON exporter for the run summary."""

import orjson

from curlperf.exporters.base_exporter import SummaryBaseExporter


class SummaryJsonExporter(SummaryBaseExporter):
    """Exports the run summary as an indented JSON object.

    Field names match the console record: mean_time, max_time, min_time,
    variance_time, quartile_25, quartile_75, status_count, error_count.
    Fields that could not be computed are left out.
    """

    def get_file_name(self) -> str:
        return "curlperf_summary.json"

    def _generate_content(self) -> str:
        return orjson.dumps(
            self._summary.to_json_dict(), option=orjson.OPT_INDENT_2
        ).decode("utf-8")
