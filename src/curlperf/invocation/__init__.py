# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from curlperf.invocation.builtin_runner import BuiltinInvocationRunner
from curlperf.invocation.curl_args import (
    BuiltinRequest,
    parse_builtin_request,
    prepare_curl_args,
)
from curlperf.invocation.curl_runner import CurlInvocationRunner, resolve_curl_binary
from curlperf.invocation.protocols import InvocationRunnerProtocol

__all__ = [
    "BuiltinInvocationRunner",
    "BuiltinRequest",
    "CurlInvocationRunner",
    "InvocationRunnerProtocol",
    "parse_builtin_request",
    "prepare_curl_args",
    "resolve_curl_binary",
]
