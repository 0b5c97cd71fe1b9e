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

"""Transport engine contract.

The manager never talks to the network itself: an injected engine performs
the request and later publishes "success" or "error" with the response.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal, Protocol, runtime_checkable

Method = Literal["GET", "POST"]
Payload = dict[str, str]


@runtime_checkable
class TransportEngine(Protocol):
    """Minimal interface a transport engine must provide."""

    def fetch(self, endpoint: str, payload: Payload) -> Any:
        """Blocking request; returns the response."""
        ...

    def start(self, endpoint: str, payload: Payload) -> Any:
        """Non-blocking request; returns an opaque handle."""
        ...

    def method(self, verb: Method) -> Any:
        """Set the HTTP method used by the next request."""
        ...

    def register(self, event: str, callback: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Subscribe to the engine's own "success" / "error" events."""
        ...
