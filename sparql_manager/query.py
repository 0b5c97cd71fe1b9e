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
"""SPARQL query string builders.

Prefix serialization, query composition and the GET/POST heuristic.
Pure string work: no SPARQL parsing, no I/O.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from sparql_manager.engine import Method

# Longer queries go out as GET, shorter ones as POST.
METHOD_THRESHOLD = 1024

PrefixPair = Sequence[str]


def prefix_block(prefixes: Iterable[PrefixPair]) -> str:
    """Serialize (name, expansion) pairs, one PREFIX line each."""
    return "".join(f"PREFIX {name}:{expansion}\n" for name, expansion in prefixes)


def descriptor_prefix_line(prefixes: Iterable[Mapping[str, str]]) -> str:
    """Serialize {prefix, expansion} records on a single space-separated line."""
    return "".join(f"PREFIX {p['prefix']}:{p['expansion']} " for p in prefixes)


def compose_query(prefixes: Iterable[PrefixPair], query: str) -> str:
    """Prepend the prefix block to a raw query string."""
    return prefix_block(prefixes) + query


def select_method(query: str) -> Method:
    """GET above the threshold, POST at or below it."""
    return "GET" if len(query) > METHOD_THRESHOLD else "POST"
