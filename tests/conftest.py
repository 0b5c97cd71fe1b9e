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

"""Shared fixtures: a recording transport engine and managers built on it."""

from __future__ import annotations

from typing import Any

import pytest

from sparql_manager import QueryManager, Registry, Response, TemplateRenderer

ENDPOINT = "https://query.wikidata.org/sparql"
WDT = ("wdt", "<http://www.wikidata.org/prop/direct/>")
WD = ("wd", "<http://www.wikidata.org/entity/>")


class FakeEngine(Registry):
    """Records every call; fire() publishes an event like a real engine would."""

    def __init__(self) -> None:
        super().__init__(["success", "error"])
        self.methods: list[str] = []
        self.calls: list[tuple[str, str, dict[str, str]]] = []

    def method(self, verb: str) -> None:
        self.methods.append(verb)

    def fetch(self, endpoint: str, payload: dict[str, str]) -> Any:
        self.calls.append(("fetch", endpoint, payload))
        return Response({"message_type": "success", "message": "fetched"})

    def start(self, endpoint: str, payload: dict[str, str]) -> Any:
        self.calls.append(("start", endpoint, payload))
        return f"handle-{len(self.calls)}"

    def fire(self, event: str, resp: Any) -> list[Any]:
        return self.apply_callbacks(event, [resp, self])

    @property
    def last_query(self) -> str:
        return self.calls[-1][2]["query"]


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def manager(engine: FakeEngine) -> QueryManager:
    return QueryManager(ENDPOINT, [WDT], Response, engine, "async")


@pytest.fixture
def sync_manager(engine: FakeEngine) -> QueryManager:
    return QueryManager(ENDPOINT, [], Response, engine, "sync")


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer(ENDPOINT)
