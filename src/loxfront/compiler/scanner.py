# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for Lox source text.

Converts raw source text into a sequence of tokens for subsequent parsing.
Malformed input never raises: each problem is reported to the diagnostics
collector and scanning resumes at the next character.
"""

import math

from loxfront.compiler.diagnostics import Diagnostics
from loxfront.model.tokens import Token, TokenType, keyword_type

# ###############
# Public Interface
# ###############


def scan(source: str, diagnostics: Diagnostics | None = None) -> list[Token]:
    """Scan Lox source text into a sequence of tokens.

    Comments and whitespace are consumed and not included in the output.

    Args:
        source: The full text to scan.
        diagnostics: Collector receiving lexical errors. A private collector is
            used when omitted.

    Returns:
        A list of Token objects ending with a single EOF token.
    """
    return _Scanner(source, diagnostics if diagnostics is not None else Diagnostics()).scan()


# ################
# Implementation
# ################

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that become a two-character token when followed by '='.
_EQUAL_SUFFIX_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def _is_alphanumeric(ch: str) -> bool:
    return _is_alpha(ch) or _is_digit(ch)


class _Scanner:
    """Internal scanner state machine."""

    def __init__(self, source: str, diagnostics: Diagnostics) -> None:
        self._source = source
        self._diagnostics = diagnostics
        self._start = 0
        self._pos = 0
        self._line = 1
        self._start_line = 1
        self._tokens: list[Token] = []

    def scan(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        while not self._at_end():
            self._start = self._pos
            self._start_line = self._line
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update line tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
        return ch

    def _match(self, expected: str) -> bool:
        """Consume the current character only if it equals *expected*."""
        if self._current() != expected:
            return False
        self._advance()
        return True

    def _add_token(self, token_type: TokenType, literal: str | float | None = None) -> None:
        lexeme = self._source[self._start : self._pos]
        self._tokens.append(Token(token_type, lexeme, literal, self._start_line))

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Dispatch to the appropriate handler based on the next character."""
        ch = self._advance()

        if ch in " \t\r\n":
            return
        if ch in _SINGLE_CHAR_TOKENS:
            self._add_token(_SINGLE_CHAR_TOKENS[ch])
        elif ch in _EQUAL_SUFFIX_TOKENS:
            short, long = _EQUAL_SUFFIX_TOKENS[ch]
            self._add_token(long if self._match("=") else short)
        elif ch == "/":
            self._scan_slash()
        elif ch == '"':
            self._scan_string()
        elif _is_digit(ch):
            self._scan_number()
        elif _is_alpha(ch):
            self._scan_identifier_or_keyword()
        else:
            self._diagnostics.error(self._start_line, "Unexpected character.")

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _scan_slash(self) -> None:
        """Handle '/', which starts a line comment, a block comment, or a division."""
        if self._match("/"):
            while not self._at_end() and self._current() != "\n":
                self._advance()
        elif self._match("*"):
            self._skip_block_comment()
        else:
            self._add_token(TokenType.SLASH)

    def _skip_block_comment(self) -> None:
        """Consume the body of a block comment through the closing '*/'."""
        while not self._at_end():
            if self._current() == "*" and self._peek() == "/":
                self._advance()  # *
                self._advance()  # /
                return
            self._advance()
        self._diagnostics.error(self._start_line, "Unterminated block comment.")

    # ------------------------------------------------------------------
    # Literal scanners
    # ------------------------------------------------------------------

    def _scan_string(self) -> None:
        """Scan a double-quoted string literal; the payload is the raw interior text."""
        while not self._at_end() and self._current() != '"':
            if self._advance() == "\\" and not self._at_end():
                self._advance()

        if self._at_end():
            self._diagnostics.error(self._start_line, "Unterminated string.")
            self._add_token(TokenType.STRING, self._source[self._start + 1 : self._pos])
            return

        self._advance()  # closing "
        self._add_token(TokenType.STRING, self._source[self._start + 1 : self._pos - 1])

    def _scan_number(self) -> None:
        """Scan a number literal.

        A fractional part requires at least one digit after the decimal point;
        a trailing '.' is left for the next token.
        """
        while _is_digit(self._current()):
            self._advance()

        if self._current() == "." and _is_digit(self._peek()):
            self._advance()  # consume the '.'
            while _is_digit(self._current()):
                self._advance()

        value = float(self._source[self._start : self._pos])
        if not math.isfinite(value):
            self._diagnostics.error(self._start_line, "Invalid number.")
            value = 0.0
        self._add_token(TokenType.NUMBER, value)

    def _scan_identifier_or_keyword(self) -> None:
        """Scan an identifier and map it to a keyword token type if applicable."""
        while _is_alphanumeric(self._current()):
            self._advance()
        self._add_token(keyword_type(self._source[self._start : self._pos]))
