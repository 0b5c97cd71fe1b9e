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

"""Query manager — composes SPARQL strings and hands them to an engine.

Two flavours:

    TemplateRenderer — no engine; template() returns the rendered string
    QueryManager     — engine + response handler; template() and query()
                       dispatch, and engine events are relayed to the
                       manager's own "success" / "error" channels

create_manager() picks one from the collaborators it is given.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal

from sparql_manager.engine import TransportEngine
from sparql_manager.exceptions import ConfigurationError, TemplateFormatError
from sparql_manager.logger import get_logger
from sparql_manager.query import compose_query, select_method
from sparql_manager.registry import Registry
from sparql_manager.response import ResponseHandler
from sparql_manager.result import unwrap
from sparql_manager.template import parse_template, render

log = get_logger(__name__)

Mode = Literal["sync", "async"]
MODES: tuple[str, ...] = ("sync", "async")
EVENTS: tuple[str, ...] = ("success", "error")

ERROR_SEED = {"message_type": "error", "message": "deep manager error"}


class TemplateRenderer(Registry):
    """Holds endpoint and prefixes and renders templates without dispatch."""

    def __init__(self, endpoint: str, prefixes: Sequence[Sequence[str]] | None = None):
        super().__init__(EVENTS)
        self._endpoint = endpoint
        self._prefixes: list[Sequence[str]] = []
        if isinstance(prefixes, (list, tuple)):
            self._prefixes = list(prefixes)

    def endpoint(self, endpoint: str | None = None) -> str:
        """Get/set the endpoint URL."""
        if endpoint and isinstance(endpoint, str):
            self._endpoint = endpoint
        return self._endpoint

    def prefixes(self, prefixes: Sequence[Sequence[str]] | None = None) -> list[Sequence[str]]:
        """Get/set the (name, expansion) pairs added to every query."""
        if isinstance(prefixes, (list, tuple)):
            self._prefixes = list(prefixes)
        return self._prefixes

    def add_prefix(self, prefix: str, expansion: str) -> list[Sequence[str]]:
        """Append one (prefix, expansion) pair. Duplicates are kept."""
        if prefix and isinstance(prefix, str) and expansion and isinstance(expansion, str):
            self._prefixes.append((prefix, expansion))
        return self._prefixes

    def query(self, query: str) -> Any:
        raise ConfigurationError(
            "This manager was not provided any engine or response handler, "
            "so cannot query (no engine configured)."
        )

    def _assemble(self, template: Any, bindings: Any) -> str:
        source = unwrap(parse_template(template), TemplateFormatError)
        return render(source, bindings)

    def template(self, template: Any, bindings: Any = None) -> Any:
        """Render a template (raw string, YAML descriptor or mapping)."""
        return self._assemble(template, bindings)


class QueryManager(TemplateRenderer):
    """Dispatches queries through a transport engine and relays its events.

    Args:
        endpoint: SPARQL endpoint URL.
        prefixes: (name, expansion) pairs prepended to every query.
        response_handler: response class, used to synthesize error responses.
        engine: transport engine performing the request.
        mode: "sync" calls engine.fetch, "async" calls engine.start.
    """

    def __init__(
        self,
        endpoint: str,
        prefixes: Sequence[Sequence[str]] | None,
        response_handler: ResponseHandler,
        engine: TransportEngine,
        mode: Mode = "async",
    ):
        if engine is None or response_handler is None:
            raise ConfigurationError("QueryManager needs both an engine and a response handler")
        if mode not in MODES:
            raise ConfigurationError(f"Invalid mode {mode!r}, expected one of {', '.join(MODES)}")

        super().__init__(endpoint, prefixes)
        self._response_handler = response_handler
        self._engine = engine
        self._mode = mode

        self._engine.register("error", self._on_fail)
        self._engine.register("success", self._on_nominal_success)

    @property
    def mode(self) -> Mode:
        return self._mode

    def _run(self, endpoint: str, payload: dict[str, str]) -> Any:
        if self._mode == "sync":
            return self._engine.fetch(endpoint, payload)
        return self._engine.start(endpoint, payload)

    def query(self, query: str) -> Any:
        """Prepend prefixes, pick GET/POST by length and dispatch.

        Returns whatever the engine returns: a response in sync mode, an
        opaque handle in async mode.
        """
        qstr = compose_query(self._prefixes, query)
        method = select_method(qstr)
        self._engine.method(method)

        log.info("SPARQL %s → %s (%d chars, %s)", method, self._endpoint, len(qstr), self._mode)
        return self._run(self._endpoint, {"query": qstr})

    def template(self, template: Any, bindings: Any = None) -> Any:
        """Render a template and dispatch it through query()."""
        return self.query(self._assemble(template, bindings))

    # ── Engine event relays ─────────────────────────────────────

    def _usable(self, resp: Any) -> bool:
        if resp is None:
            return False
        message_type = getattr(resp, "message_type", None)
        message = getattr(resp, "message", None)
        if not callable(message_type) or not callable(message):
            return False
        try:
            return bool(message_type()) and bool(message())
        except Exception as exc:
            log.warning("Error response accessors failed: %s: %s", type(exc).__name__, exc)
            return False

    def _on_fail(self, resp: Any = None, engine: Any = None) -> Any:
        synthesized = None
        if not self._usable(resp):
            log.warning("Unusable error response from engine: %r", resp)
            synthesized = self._response_handler(dict(ERROR_SEED))
            resp = synthesized
        log.debug("Relaying engine error")
        self.apply_callbacks("error", [resp, self])
        return synthesized

    def _on_nominal_success(self, resp: Any = None, engine: Any = None) -> Any:
        log.debug("Relaying engine success")
        self.apply_callbacks("success", [resp, self])
        return resp


def create_manager(
    endpoint: str,
    prefixes: Sequence[Sequence[str]] | None = None,
    response_handler: ResponseHandler | None = None,
    engine: TransportEngine | None = None,
    mode: Mode = "async",
) -> TemplateRenderer:
    """Full QueryManager when both collaborators are given, else a TemplateRenderer."""
    if engine is None or response_handler is None:
        log.debug("No engine or response handler: template-only manager")
        return TemplateRenderer(endpoint, prefixes)
    return QueryManager(endpoint, prefixes, response_handler, engine, mode)
