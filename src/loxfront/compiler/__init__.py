# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Front-end pipeline for Lox source: scanning, parsing, and rendering."""

from loxfront.compiler.artifact import ARTIFACT_FORMAT_VERSION, deserialize, serialize
from loxfront.compiler.diagnostics import Diagnostic, Diagnostics
from loxfront.compiler.parser import DEFAULT_MAX_DEPTH, ParseError, Parser, ParseResult, parse, parse_source
from loxfront.compiler.printer import render, unparse
from loxfront.compiler.scanner import scan

__all__ = [
    "scan",
    "parse",
    "parse_source",
    "Parser",
    "ParseError",
    "ParseResult",
    "DEFAULT_MAX_DEPTH",
    "Diagnostic",
    "Diagnostics",
    "render",
    "unparse",
    "serialize",
    "deserialize",
    "ARTIFACT_FORMAT_VERSION",
]
