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

"""Callback registry with named event channels.

Callbacks run by descending priority; equal priorities keep registration
order, so with the default priority callbacks fire in the order they were
registered.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from sparql_manager.exceptions import UnknownEventError
from sparql_manager.logger import get_logger

log = get_logger(__name__)

Callback = Callable[..., Any]


@dataclass(frozen=True, slots=True)
class _Entry:
    handler_id: str
    callback: Callback
    priority: int


class Registry:
    """Publish/subscribe facility over a fixed set of event names."""

    def __init__(self, events: Iterable[str]):
        self._channels: dict[str, list[_Entry]] = {event: [] for event in events}

    def _channel(self, event: str) -> list[_Entry]:
        try:
            return self._channels[event]
        except KeyError:
            raise UnknownEventError(event, list(self._channels)) from None

    @property
    def events(self) -> list[str]:
        return list(self._channels)

    def register(
        self,
        event: str,
        callback: Callback,
        priority: int = 0,
        handler_id: str | None = None,
    ) -> str:
        """Add a callback to an event channel and return its handler id."""
        channel = self._channel(event)
        handler_id = handler_id or uuid.uuid4().hex
        channel.append(_Entry(handler_id=handler_id, callback=callback, priority=priority))
        log.debug("Registered %s on '%s' (priority %d)", handler_id, event, priority)
        return handler_id

    def unregister(self, event: str, handler_id: str) -> bool:
        """Remove a callback by id. Returns False when nothing matched."""
        channel = self._channel(event)
        kept = [entry for entry in channel if entry.handler_id != handler_id]
        if len(kept) == len(channel):
            return False
        channel[:] = kept
        return True

    def is_registered(self, event: str, handler_id: str) -> bool:
        return any(entry.handler_id == handler_id for entry in self._channel(event))

    def get_callbacks(self, event: str) -> list[Callback]:
        # sorted() is stable: ties stay in registration order
        ordered = sorted(self._channel(event), key=lambda entry: -entry.priority)
        return [entry.callback for entry in ordered]

    def apply_callbacks(self, event: str, args: Iterable[Any] = ()) -> list[Any]:
        """Invoke every callback on the channel with args, in order."""
        args = tuple(args)
        callbacks = self.get_callbacks(event)
        log.debug("Applying %d callback(s) for '%s'", len(callbacks), event)
        return [callback(*args) for callback in callbacks]

    # ── Explicit subscription interface ─────────────────────────

    def on_success(self, callback: Callback, priority: int = 0) -> str:
        """Subscribe to the "success" channel."""
        return self.register("success", callback, priority=priority)

    def on_error(self, callback: Callback, priority: int = 0) -> str:
        """Subscribe to the "error" channel."""
        return self.register("error", callback, priority=priority)
