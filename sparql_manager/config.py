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

"""Loads a manager definition YAML into a typed dataclass.

    endpoint: https://query.wikidata.org/sparql
    mode: async
    prefixes:
      - [wdt, "<http://www.wikidata.org/prop/direct/>"]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from sparql_manager.engine import TransportEngine
from sparql_manager.manager import MODES, Mode, TemplateRenderer, create_manager
from sparql_manager.response import ResponseHandler
from sparql_manager.result import Fail, Ok, Result


@dataclass(frozen=True, slots=True)
class ManagerConfig:
    endpoint: str
    mode: Mode = "async"
    prefixes: list[tuple[str, str]] = field(default_factory=list)

    def build(
        self,
        response_handler: ResponseHandler | None = None,
        engine: TransportEngine | None = None,
    ) -> TemplateRenderer:
        """Create a manager from this config and the given collaborators."""
        return create_manager(
            self.endpoint,
            list(self.prefixes),
            response_handler=response_handler,
            engine=engine,
            mode=self.mode,
        )


def _build_prefixes(raw: Any) -> list[tuple[str, str]]:
    if not isinstance(raw, list):
        raise TypeError(f"'prefixes' must be a list, got {type(raw).__name__}")

    pairs: list[tuple[str, str]] = []
    for entry in raw:
        if isinstance(entry, dict):
            name, expansion = entry["prefix"], entry["expansion"]
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            name, expansion = entry
        else:
            raise TypeError(f"prefix entry must be a [name, expansion] pair or a mapping: {entry!r}")
        pairs.append((str(name), str(expansion)))
    return pairs


def load_config(path: Path) -> Result[ManagerConfig]:
    """Load a manager YAML into ManagerConfig."""
    if not path.exists():
        return Fail(error=f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        return Fail(error=f"Config file is not valid UTF-8: {exc}", context=str(path))
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path))

    if not isinstance(raw, dict):
        return Fail(error="Config structure error: top level must be a mapping", context=str(path))

    try:
        config = ManagerConfig(
            endpoint=raw["endpoint"],
            mode=raw.get("mode", "async"),
            prefixes=_build_prefixes(raw.get("prefixes") or []),
        )
    except (KeyError, TypeError, ValueError) as exc:
        return Fail(error=f"Config structure error: {exc}", context=str(path))

    if config.mode not in MODES:
        return Fail(error=f"Config error: invalid mode {config.mode!r}", context=str(path))

    return Ok(data=config)
