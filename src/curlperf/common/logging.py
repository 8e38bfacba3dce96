# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Rich-based logging setup. Logs go to stderr so stdout carries only the summary."""

import logging
from functools import cache

from rich.console import Console
from rich.logging import RichHandler

_LOG_FORMAT = "%(message)s"
_ROOT_LOGGER_NAME = "curlperf"


@cache
def get_stderr_console() -> Console:
    """Console shared by the log handler and the progress display."""
    return Console(stderr=True)


def setup_rich_logging(level: str | int = "INFO") -> None:
    """Route all curlperf loggers through a single RichHandler on stderr."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(
                f"Invalid log level: '{level}'. "
                "Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL."
            )
        level = resolved

    handler = RichHandler(
        console=get_stderr_console(),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
