# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import sys
from typing import TextIO

import orjson

from curlperf.exporters.exporter_config import ExporterConfig


class ConsoleSummaryExporter:
    """Prints the run summary as one compact JSON line, for scripts reading stdout."""

    def __init__(self, config: ExporterConfig, stream: TextIO | None = None) -> None:
        self._summary = config.summary
        self._stream = stream

    def format(self) -> str:
        return orjson.dumps(self._summary.to_json_dict()).decode("utf-8")

    def export(self) -> None:
        stream = self._stream or sys.stdout
        stream.write(self.format() + "\n")
        stream.flush()
