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
"""SPARQL query manager — template rendering and callback-relayed dispatch."""

from sparql_manager.exceptions import (
    ConfigurationError,
    SparqlManagerError,
    TemplateFormatError,
    UnknownEventError,
)
from sparql_manager.manager import QueryManager, TemplateRenderer, create_manager
from sparql_manager.registry import Registry
from sparql_manager.response import Response

__all__ = [
    "ConfigurationError",
    "QueryManager",
    "Registry",
    "Response",
    "SparqlManagerError",
    "TemplateFormatError",
    "TemplateRenderer",
    "UnknownEventError",
    "create_manager",
]
