# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

MILLIS_PER_SECOND = 1_000
NANOS_PER_MILLIS = 1_000_000

# Fewer successful samples than this and the quartile fields are omitted.
MIN_QUARTILE_SAMPLES = 2

# curl writes this for %{http_code} when no response was received.
CURL_NO_RESPONSE_CODE = "000"

EXIT_CODE_SUCCESS = 0
EXIT_CODE_EXECUTOR_NOT_FOUND = 1
EXIT_CODE_CONFIGURATION_ERROR = 2
