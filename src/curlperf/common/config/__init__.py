# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from curlperf.common.config.base_config import BaseConfig
from curlperf.common.config.config_defaults import RunDefaults
from curlperf.common.config.run_config import RunConfig

__all__ = [
    "BaseConfig",
    "RunConfig",
    "RunDefaults",
]
