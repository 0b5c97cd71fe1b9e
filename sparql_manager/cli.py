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

"""sparql-template — render a SPARQL template file offline.

Reads a plain query or a YAML template descriptor, fills it with the
given bindings and prints the result. With --config, the manager's
prefix block is prepended the way a dispatch would.

Usage:
    sparql-template templates/compounds.yaml --bind taxon=Q157115
    sparql-template query.rq --bindings vars.yaml --config manager.yaml
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import yaml

from sparql_manager.config import load_config
from sparql_manager.exceptions import TemplateFormatError
from sparql_manager.logger import get_logger
from sparql_manager.query import compose_query, select_method
from sparql_manager.result import Fail, Ok, Result
from sparql_manager.template import parse_template, render

log = get_logger("sparql-template")


def _parse_bind(values: list[str]) -> Result[dict[str, str]]:
    bindings: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            return Fail(error=f"Invalid --bind '{item}', expected KEY=VALUE")
        bindings[key] = value
    return Ok(data=bindings)


def _load_bindings(path: Path) -> Result[dict[str, Any]]:
    if not path.exists():
        return Fail(error=f"Bindings file not found: {path}")
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except UnicodeDecodeError as exc:
        return Fail(error=f"Bindings file is not valid UTF-8: {exc}", context=str(path))
    except yaml.YAMLError as exc:
        return Fail(error=f"YAML parse error: {exc}", context=str(path))
    if not isinstance(raw, dict):
        return Fail(error="Bindings file must hold a mapping", context=str(path))
    return Ok(data=raw)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sparql-template",
        description="Render a SPARQL template (plain or YAML descriptor) with bindings",
    )
    parser.add_argument("template", type=Path, help="Template file")
    parser.add_argument(
        "--bind",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Binding for a template variable (repeatable)",
    )
    parser.add_argument("--bindings", type=Path, help="YAML file with bindings")
    parser.add_argument(
        "--config",
        type=Path,
        help="Manager YAML whose prefixes are prepended to the output",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    template_path: Path = args.template.resolve()
    if not template_path.exists():
        log.error("Template file not found: %s", template_path)
        return 1

    bindings: dict[str, Any] = {}
    if args.bindings:
        file_result = _load_bindings(args.bindings.resolve())
        if not file_result.ok:
            log.error(file_result.error)
            return 1
        bindings.update(file_result.data)

    bind_result = _parse_bind(args.bind)
    if not bind_result.ok:
        log.error(bind_result.error)
        return 1
    bindings.update(bind_result.data)

    try:
        text = template_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        log.error("Template file is not valid UTF-8: %s", exc)
        return 1

    source_result = parse_template(text)
    if not source_result.ok:
        log.error("Template error: %s", source_result.error)
        return 1

    try:
        output = render(source_result.data, bindings)
    except TemplateFormatError as exc:
        log.error("Render failed: %s", exc)
        return 1

    if args.config:
        cfg_result = load_config(args.config.resolve())
        if not cfg_result.ok:
            log.error(cfg_result.error)
            return 1
        output = compose_query(cfg_result.data.prefixes, output)
        log.info("Endpoint: %s", cfg_result.data.endpoint)
        log.info("Method: %s (%d chars)", select_method(output), len(output))

    sys.stdout.write(output)
    if not output.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
