# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for diagnostic reporting."""

import io

from loxfront.compiler.diagnostics import Diagnostic, Diagnostics
from loxfront.model.tokens import Token, TokenType


def test_format_without_location() -> None:
    """A plain error has an empty location."""
    assert Diagnostic(3, "", "Unexpected character.").format() == "[line 3] Error : Unexpected character."


def test_error_records_diagnostic() -> None:
    """error() records a diagnostic with no location."""
    diagnostics = Diagnostics()
    diagnostics.error(2, "Unterminated string.")
    assert list(diagnostics) == [Diagnostic(line=2, location="", message="Unterminated string.")]
    assert diagnostics.had_error


def test_token_error_at_end() -> None:
    """Errors at the EOF token are located 'at end'."""
    diagnostics = Diagnostics()
    diagnostics.token_error(Token(TokenType.EOF, "", None, 4), "Expect expression.")
    assert diagnostics.messages() == ["[line 4] Error  at end : Expect expression."]


def test_token_error_at_lexeme() -> None:
    """Errors at other tokens quote the lexeme."""
    diagnostics = Diagnostics()
    diagnostics.token_error(Token(TokenType.RIGHT_PAREN, ")", None, 1), "Expect expression.")
    assert diagnostics.messages() == ["[line 1] Error at ')': Expect expression."]


def test_empty_collector() -> None:
    """A fresh collector has no errors."""
    diagnostics = Diagnostics()
    assert not diagnostics.had_error
    assert len(diagnostics) == 0
    assert diagnostics.messages() == []


def test_diagnostics_accumulate_in_order() -> None:
    """Every report is kept in report order."""
    diagnostics = Diagnostics()
    diagnostics.error(1, "first")
    diagnostics.error(5, "second")
    diagnostics.report(2, "somewhere", "third")
    assert [d.message for d in diagnostics] == ["first", "second", "third"]
    assert len(diagnostics) == 3


def test_stream_receives_each_line() -> None:
    """A collector with a stream echoes each diagnostic as it is reported."""
    stream = io.StringIO()
    diagnostics = Diagnostics(stream)
    diagnostics.error(1, "one")
    diagnostics.error(2, "two")
    assert stream.getvalue() == "[line 1] Error : one\n[line 2] Error : two\n"
