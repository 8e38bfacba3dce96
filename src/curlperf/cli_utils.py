# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import sys
from typing import NoReturn

from rich.panel import Panel

from curlperf.common.logging import get_stderr_console


def raise_startup_error_and_exit(
    message: str, title: str = "Error", exit_code: int = 1
) -> NoReturn:
    """Show a startup failure on stderr and terminate with ``exit_code``."""
    get_stderr_console().print(
        Panel(message, title=title, title_align="left", border_style="red")
    )
    sys.exit(exit_code)
