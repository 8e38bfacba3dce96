# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict


class CurlPerfBaseModel(BaseModel):
    """Base model for curlperf data records."""

    model_config = ConfigDict(extra="forbid")
