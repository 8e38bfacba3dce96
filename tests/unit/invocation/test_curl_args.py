# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import os

import pytest

from curlperf.common.exceptions import ConfigurationError
from curlperf.invocation.curl_args import parse_builtin_request, prepare_curl_args


class TestPrepareCurlArgs:
    def test_adds_status_code_options(self):
        assert prepare_curl_args(["http://localhost/"]) == [
            "http://localhost/",
            "-s",
            "-o",
            os.devnull,
            "-w",
            "%{http_code}",
        ]

    @pytest.mark.parametrize(
        "user_args,expected",
        [
            (["-s", "http://x/"], ["-s", "http://x/", "-o", os.devnull, "-w", "%{http_code}"]),
            (["-o", "out.html", "http://x/"], ["-o", "out.html", "http://x/", "-s", "-w", "%{http_code}"]),
            (["-w", "%{time_total}", "http://x/"], ["-w", "%{time_total}", "http://x/", "-s", "-o", os.devnull]),
        ],
    )  # fmt: skip
    def test_keeps_user_supplied_flags(self, user_args, expected):
        assert prepare_curl_args(user_args) == expected

    @pytest.mark.parametrize(
        "user_args,expected",
        [
            (["--silent", "--output", "x", "http://x/"], ["--silent", "--output", "x", "http://x/", "-w", "%{http_code}"]),
            (["--write-out", "%{time_total}", "http://x/"], ["--write-out", "%{time_total}", "http://x/", "-s", "-o", os.devnull]),
            (["-sS", "http://x/"], ["-sS", "http://x/", "-o", os.devnull, "-w", "%{http_code}"]),
            (["-ox", "http://x/"], ["-ox", "http://x/", "-s", "-w", "%{http_code}"]),
            (["-sSo", "page.html", "http://x/"], ["-sSo", "page.html", "http://x/", "-w", "%{http_code}"]),
        ],
    )  # fmt: skip
    def test_recognizes_long_and_bundled_options(self, user_args, expected):
        assert prepare_curl_args(user_args) == expected

    @pytest.mark.parametrize(
        "user_args",
        [
            ["-H", "X-Mode: -s", "http://x/"],
            ["-Hwhatever-so", "http://x/"],
            ["-d", "-o", "http://x/"],
        ],
    )  # fmt: skip
    def test_option_values_are_not_mistaken_for_options(self, user_args):
        assert prepare_curl_args(user_args)[len(user_args):] == [
            "-s", "-o", os.devnull, "-w", "%{http_code}",
        ]  # fmt: skip

    def test_does_not_mutate_input(self):
        args = ["http://localhost/"]
        prepare_curl_args(args)
        assert args == ["http://localhost/"]


class TestParseBuiltinRequest:
    def test_get_request(self):
        request = parse_builtin_request(["http://localhost:8080/health"])
        assert request.url == "http://localhost:8080/health"
        assert request.method == "GET"
        assert request.data is None
        assert request.headers == {}

    def test_post_with_data_and_headers(self):
        request = parse_builtin_request(
            [
                "localhost",
                "--data", "string-data",
                "-A", "custom/user-agent",
                "-H", "Content-Type: application/json",
                "-H", "Cookie: 123456789",
            ]
        )  # fmt: skip
        assert request.method == "POST"
        assert request.data == "string-data"
        assert request.headers == {
            "Content-Type": "application/json",
            "Cookie": "123456789",
            "User-Agent": "custom/user-agent",
        }

    def test_data_defaults_to_form_content_type(self):
        request = parse_builtin_request(["http://x/", "-d", "a=1"])
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"

    def test_explicit_content_type_is_case_insensitive(self):
        request = parse_builtin_request(["http://x/", "-d", "{}", "-H", "content-type: application/json"])
        assert request.headers == {"content-type": "application/json"}

    def test_missing_url_raises(self):
        with pytest.raises(ConfigurationError, match="built-in executor"):
            parse_builtin_request([])

    def test_unsupported_option_raises(self):
        with pytest.raises(ConfigurationError, match="built-in executor"):
            parse_builtin_request(["http://x/", "--compressed"])

    def test_unexpected_positional_raises(self):
        with pytest.raises(ConfigurationError, match="built-in executor"):
            parse_builtin_request(["http://x/", "http://y/"])

    def test_long_option_names(self):
        request = parse_builtin_request(
            ["http://x/", "--header", "Accept: */*", "--user-agent", "bench/1", "--data", "a=1"]
        )
        assert request.method == "POST"
        assert request.headers["Accept"] == "*/*"
        assert request.headers["User-Agent"] == "bench/1"

    def test_malformed_header_raises(self):
        with pytest.raises(ConfigurationError, match="Invalid header"):
            parse_builtin_request(["http://x/", "-H", "no-colon-here"])
