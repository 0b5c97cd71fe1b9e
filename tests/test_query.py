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

"""
Unit tests for query string builders.
"""

from sparql_manager.query import (
    METHOD_THRESHOLD,
    compose_query,
    descriptor_prefix_line,
    prefix_block,
    select_method,
)
from tests.conftest import WD, WDT


class TestPrefixSerialization:
    def test_empty_prefixes_give_empty_block(self) -> None:
        assert prefix_block([]) == ""
        assert descriptor_prefix_line([]) == ""

    def test_block_keeps_order_one_line_each(self) -> None:
        assert prefix_block([WDT, WD]) == (
            "PREFIX wdt:<http://www.wikidata.org/prop/direct/>\n"
            "PREFIX wd:<http://www.wikidata.org/entity/>\n"
        )

    def test_duplicates_are_not_collapsed(self) -> None:
        assert prefix_block([WD, WD]).count("PREFIX wd:") == 2

    def test_descriptor_prefixes_are_space_separated(self) -> None:
        records = [
            {"prefix": "wd", "expansion": "<http://www.wikidata.org/entity/>"},
            {"prefix": "p", "expansion": "<http://www.wikidata.org/prop/>"},
        ]
        assert descriptor_prefix_line(records) == (
            "PREFIX wd:<http://www.wikidata.org/entity/> "
            "PREFIX p:<http://www.wikidata.org/prop/> "
        )

    def test_compose_prepends_block(self) -> None:
        query = "SELECT ?x WHERE { ?x wdt:P31 wd:Q5 }"
        assert compose_query([WDT, WD], query) == prefix_block([WDT, WD]) + query


class TestSelectMethod:
    def test_threshold_value(self) -> None:
        assert METHOD_THRESHOLD == 1024

    def test_short_query_posts(self) -> None:
        assert select_method("ASK {}") == "POST"

    def test_boundary(self) -> None:
        assert select_method("x" * 1024) == "POST"
        assert select_method("x" * 1025) == "GET"
