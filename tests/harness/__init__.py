# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from tests.harness.fake_runner import FakeRunner, RaisingRunner, make_config, ok, failed

__all__ = [
    "FakeRunner",
    "RaisingRunner",
    "failed",
    "make_config",
    "ok",
]
