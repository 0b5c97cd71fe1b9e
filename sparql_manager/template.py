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

"""Template input resolution and mustache rendering.

Template input is resolved up front into one of two variants:

    RawQuery   — the whole input is a mustache query template
    Descriptor — a parsed {query, prefixes} template descriptor

Resolution returns a Result; only the caller decides whether a Fail is
an exception.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import chevron
import yaml

from sparql_manager.exceptions import TemplateFormatError
from sparql_manager.logger import get_logger
from sparql_manager.query import descriptor_prefix_line
from sparql_manager.result import Fail, Ok, Result

log = get_logger(__name__)

UNSUPPORTED_OBJECT = "does not support this object format"
UNSUPPORTED_TEMPLATE = "does not support this template format"


@dataclass(frozen=True, slots=True)
class RawQuery:
    """A plain query template string."""

    query: str


@dataclass(frozen=True, slots=True)
class Descriptor:
    """A template descriptor: mustache query plus optional prefix records."""

    query: str
    prefixes: tuple[dict[str, str], ...] = field(default_factory=tuple)


TemplateSource = RawQuery | Descriptor


def _descriptor_from_mapping(raw: Mapping[str, Any]) -> Result[Descriptor]:
    prefixes = raw.get("prefixes") or []
    if not isinstance(prefixes, (list, tuple)):
        return Fail(error=UNSUPPORTED_OBJECT, context="'prefixes' must be a list")

    records: list[dict[str, str]] = []
    for entry in prefixes:
        if not isinstance(entry, Mapping) or "prefix" not in entry or "expansion" not in entry:
            return Fail(
                error=UNSUPPORTED_OBJECT,
                context=f"prefix entry needs 'prefix' and 'expansion': {entry!r}",
            )
        records.append({"prefix": str(entry["prefix"]), "expansion": str(entry["expansion"])})

    query = raw["query"]
    if not isinstance(query, str):
        return Fail(error=UNSUPPORTED_OBJECT, context=f"'query' must be a string, got {type(query).__name__}")

    return Ok(data=Descriptor(query=query, prefixes=tuple(records)))


def _parse_string(text: str) -> Result[TemplateSource]:
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError:
        log.debug("Template is not YAML, using it as a raw query")
        return Ok(data=RawQuery(query=text))

    if isinstance(parsed, Mapping) and parsed.get("query"):
        return _descriptor_from_mapping(parsed)
    return Ok(data=RawQuery(query=text))


def parse_template(source: Any) -> Result[TemplateSource]:
    """Resolve template input into a RawQuery or a Descriptor.

    Strings are tried as YAML first and fall back to a raw query. Mappings
    need a "query" field. Anything else is a Fail.
    """
    if isinstance(source, (RawQuery, Descriptor)):
        return Ok(data=source)
    if isinstance(source, str):
        return _parse_string(source)
    if isinstance(source, Mapping):
        if source.get("query"):
            return _descriptor_from_mapping(source)
        return Fail(error=UNSUPPORTED_OBJECT, context=sorted(map(str, source)))
    if isinstance(source, (list, tuple)):
        return Fail(error=UNSUPPORTED_OBJECT, context=type(source).__name__)
    return Fail(error=UNSUPPORTED_TEMPLATE, context=type(source).__name__)


def render(source: TemplateSource, bindings: Any = None) -> str:
    """Fill the query with bindings and put descriptor prefixes in front."""
    try:
        filled = chevron.render(source.query, bindings if bindings is not None else {})
    except chevron.ChevronError as exc:
        raise TemplateFormatError(f"Malformed mustache template: {exc}") from exc
    if isinstance(source, Descriptor):
        return descriptor_prefix_line(source.prefixes) + filled
    return filled
