# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Response handler contract and a default seedable response.

The manager only reads message_type() and message() from responses, to
tell a usable error response from a broken one.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class ResponseLike(Protocol):
    def message_type(self) -> Any: ...
    def message(self) -> Any: ...


class ResponseHandler(Protocol):
    """A response class: constructible from a raw response or a seed."""

    def __call__(self, raw: Any) -> ResponseLike: ...


class Response:
    """Wraps a raw response.

    A mapping carrying "message_type" / "message" keys is read as a seed,
    which is how synthetic error responses are built. Anything else is kept
    as the raw payload with a "success" message type.
    """

    def __init__(self, raw: Any = None):
        self._raw = raw
        self._message_type = "success"
        self._message = ""
        if isinstance(raw, Mapping):
            self._message_type = raw.get("message_type", self._message_type)
            self._message = raw.get("message", self._message)

    def raw(self) -> Any:
        return self._raw

    def message_type(self) -> str:
        return self._message_type

    def message(self) -> str:
        return self._message

    def okay(self) -> bool:
        return self._message_type != "error"

    def __repr__(self) -> str:
        return f"Response(message_type={self._message_type!r}, message={self._message!r})"
