# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Base class for exporters that write the run summary to a file."""

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from curlperf.exporters.exporter_config import ExporterConfig

logger = logging.getLogger(__name__)


class SummaryBaseExporter(ABC):
    """Writes the content produced by a subclass to ``output_dir / get_file_name()``."""

    def __init__(self, config: ExporterConfig) -> None:
        if config.output_dir is None:
            raise ValueError(f"{self.__class__.__name__} requires an output directory")
        self._summary = config.summary
        self._output_dir = Path(config.output_dir)

    @abstractmethod
    def get_file_name(self) -> str:
        """Return the name of the file written inside the output directory."""
        pass

    @abstractmethod
    def _generate_content(self) -> str:
        """Return the full file content."""
        pass

    async def export(self) -> Path:
        """Write the export file and return its path."""
        path = self._output_dir / self.get_file_name()
        content = self._generate_content()
        await asyncio.to_thread(self._output_dir.mkdir, parents=True, exist_ok=True)
        await asyncio.to_thread(path.write_text, content, encoding="utf-8")
        logger.debug(f"{self.__class__.__name__} wrote {path}")
        return path
