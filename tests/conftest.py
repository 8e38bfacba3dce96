# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from curlperf.aggregation import OutcomeAggregator


@pytest.fixture
def aggregator() -> OutcomeAggregator:
    return OutcomeAggregator()


@pytest.fixture
def fake_curl(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing an executable Python script that stands in for curl.

    Usage:
        binary = fake_curl("import sys; sys.stdout.write('200')")
    """
    if sys.platform == "win32":
        pytest.skip("fake curl scripts rely on a POSIX shebang")

    def _write(body: str, name: str = "fake-curl") -> Path:
        script = tmp_path / name
        script.write_text(f"#!{sys.executable}\n{body}\n", encoding="utf-8")
        script.chmod(0o755)
        return script

    return _write
