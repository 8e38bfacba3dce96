# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Argument handling for the two request executors."""

import os
from collections.abc import Iterable, Sequence
from typing import Annotated

from cyclopts import App, CycloptsError, Parameter
from pydantic import Field

from curlperf.common.exceptions import ConfigurationError
from curlperf.common.models import CurlPerfBaseModel

NULL_DEVICE = os.devnull
STATUS_CODE_FORMAT = "%{http_code}"

# curl's single-letter options that take a value, either attached ("-ofile") or as the next token.
_SHORT_OPTIONS_WITH_VALUE = frozenset("AbcCdDeEFHKmoPQrtTuUwxXyYz")

_LONG_OPTION_LETTERS = {
    "--silent": "s",
    "--output": "o",
    "--write-out": "w",
}


def _given_short_options(args: Iterable[str]) -> set[str]:
    """Letters of the ``-s``/``-o``/``-w`` style options present in a curl argv.

    Understands bundles (``-sS``), attached values (``-ofile``) and the long
    spellings of the options that :func:`prepare_curl_args` manages.
    """
    given: set[str] = set()
    tokens = iter(args)
    for token in tokens:
        if token in _LONG_OPTION_LETTERS:
            letter = _LONG_OPTION_LETTERS[token]
            given.add(letter)
            if letter in _SHORT_OPTIONS_WITH_VALUE:
                next(tokens, None)
            continue
        if token.startswith("--") or not token.startswith("-") or token == "-":
            continue
        for index, letter in enumerate(token[1:], start=1):
            given.add(letter)
            if letter in _SHORT_OPTIONS_WITH_VALUE:
                if index == len(token) - 1:
                    next(tokens, None)
                break
    return given


def prepare_curl_args(args: Sequence[str]) -> list[str]:
    """Append the options that make curl print only the response status code.

    Adds ``-s``, ``-o <null device>`` and ``-w %{http_code}`` unless the user already
    passed those options, in short, long (``--silent``, ``--output``, ``--write-out``)
    or bundled (``-sS``, ``-ofile``) form. The user's own arguments are kept as
    given and in order.
    """
    prepared = list(args)
    given = _given_short_options(prepared)
    if "s" not in given:
        prepared.append("-s")
    if "o" not in given:
        prepared.extend(["-o", NULL_DEVICE])
    if "w" not in given:
        prepared.extend(["-w", STATUS_CODE_FORMAT])
    return prepared


class BuiltinRequest(CurlPerfBaseModel):
    """A request described by the curl-like arguments of the built-in executor."""

    url: str
    method: str = "GET"
    data: str | None = None
    headers: dict[str, str] = Field(default_factory=dict)


_builtin_app = App(name="curl", help_flags=[], version_flags=[])


@_builtin_app.default
def _builtin_request(
    url: Annotated[str, Parameter(help="URL to request")],
    *,
    data: Annotated[
        str | None, Parameter(name=["--data", "-d"], help="HTTP POST data")
    ] = None,
    user_agent: Annotated[
        str | None,
        Parameter(name=["--user-agent", "-A"], help="Send User-Agent <name> to server"),
    ] = None,
    header: Annotated[
        list[str] | None,
        Parameter(
            name=["--header", "-H"], negative="", help="Pass custom header(s) to server"
        ),
    ] = None,
) -> BuiltinRequest:
    headers: dict[str, str] = {}
    for raw_header in header or []:
        name, sep, value = raw_header.partition(":")
        if not sep or not name.strip():
            raise ConfigurationError(
                f"Invalid header: '{raw_header}'. Headers must look like 'Name: value'."
            )
        headers[name.strip()] = value.strip()
    if user_agent is not None:
        headers["User-Agent"] = user_agent
    if data is not None:
        if not any(name.lower() == "content-type" for name in headers):
            headers["Content-Type"] = "application/x-www-form-urlencoded"

    return BuiltinRequest(
        url=url,
        method="POST" if data is not None else "GET",
        data=data,
        headers=headers,
    )


def parse_builtin_request(args: Sequence[str]) -> BuiltinRequest:
    """Parse the curl option subset understood by the built-in executor.

    Raises:
        ConfigurationError: If the arguments use unsupported options, miss the URL,
            or contain a malformed header.
    """
    try:
        command, bound, _ = _builtin_app.parse_args(
            list(args), exit_on_error=False, print_error=False
        )
    except CycloptsError as e:
        raise ConfigurationError(f"Invalid arguments for the built-in executor: {e}") from e
    return command(*bound.args, **bound.kwargs)
