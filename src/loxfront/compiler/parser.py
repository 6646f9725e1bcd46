# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for Lox expressions.

Converts a token stream produced by the scanner into an expression tree.
The grammar, from lowest to highest precedence::

    expression -> equality
    equality   -> comparison ( ( "!=" | "==" ) comparison )*
    comparison -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       -> factor ( ( "-" | "+" ) factor )*
    factor     -> unary ( ( "/" | "*" ) unary )*
    unary      -> ( "!" | "-" ) unary | primary
    primary    -> NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"

Every decision uses exactly one token of lookahead.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from loxfront.compiler.diagnostics import Diagnostic, Diagnostics
from loxfront.compiler.scanner import scan
from loxfront.model.expressions import (
    LITERAL_TYPES,
    BinaryExpr,
    Expression,
    GroupingExpr,
    LiteralExpr,
    UnaryExpr,
)
from loxfront.model.tokens import Token, TokenType

# ###############
# Public Interface
# ###############

DEFAULT_MAX_DEPTH = 50


class ParseError(Exception):
    """A grammar rule failed to reduce.

    Attributes:
        token: The token the parser was looking at when the rule failed.
        message: Description of what was expected.
    """

    def __init__(self, token: Token, message: str) -> None:
        super().__init__(f"Line {token.line}: {message}")
        self.token = token
        self.message = message


@dataclass(frozen=True)
class ParseResult:
    """Everything produced by running the scanner and parser over one source text.

    Attributes:
        tokens: The scanned tokens, ending with EOF.
        expression: The parsed expression, or None if no expression could be built.
        diagnostics: Every lexical and syntax diagnostic, in report order.
    """

    tokens: list[Token]
    expression: Expression | None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if an expression was built and nothing was reported."""
        return self.expression is not None and not self.diagnostics


def parse(
    tokens: list[Token],
    diagnostics: Diagnostics | None = None,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    allow_trailing: bool = False,
) -> Expression | None:
    """Parse a token sequence into a single expression.

    Args:
        tokens: Tokens produced by :func:`~loxfront.compiler.scanner.scan`.
        diagnostics: Collector receiving syntax errors. A private collector is
            used when omitted.
        max_depth: Maximum nesting of groupings and unary operators.
        allow_trailing: Accept tokens left over after a complete expression
            instead of reporting them.

    Returns:
        The expression tree, or None if no expression could be built.

    Raises:
        ValueError: If *tokens* is not terminated by an EOF token.
    """
    sink = diagnostics if diagnostics is not None else Diagnostics()
    return Parser(tokens, sink, max_depth=max_depth, allow_trailing=allow_trailing).parse()


def parse_source(
    source: str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    allow_trailing: bool = False,
) -> ParseResult:
    """Scan and parse Lox source text, collecting every diagnostic."""
    diagnostics = Diagnostics()
    tokens = scan(source, diagnostics)
    expression = parse(tokens, diagnostics, max_depth=max_depth, allow_trailing=allow_trailing)
    return ParseResult(tokens=tokens, expression=expression, diagnostics=list(diagnostics))


class Parser:
    """Recursive-descent parser over one token sequence.

    Args:
        tokens: Token sequence ending with EOF.
        diagnostics: Collector receiving syntax errors.
        max_depth: Maximum nesting of groupings and unary operators.
        allow_trailing: Accept tokens left over after a complete expression.
    """

    def __init__(
        self,
        tokens: list[Token],
        diagnostics: Diagnostics,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        allow_trailing: bool = False,
    ) -> None:
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("Token sequence must end with an EOF token")
        self._tokens = tokens
        self._diagnostics = diagnostics
        self._max_depth = max_depth
        self._allow_trailing = allow_trailing
        self._pos = 0
        self._depth = 0

    @property
    def current(self) -> Token:
        """The current (un-consumed) token."""
        return self._tokens[self._pos]

    def parse(self) -> Expression | None:
        """Parse one expression from the current position.

        Syntax errors are reported to the diagnostics collector; a failed
        reduction discards tokens up to the next statement boundary and
        yields None.
        """
        try:
            expr = self._expression()
        except ParseError:
            self.synchronize()
            return None
        if not self._allow_trailing and not self._at_end():
            self._diagnostics.token_error(self.current, "Expect end of expression.")
        return expr

    def synchronize(self) -> None:
        """Discard tokens until a statement boundary.

        Stops just after a ';', before a keyword that starts a statement, or at EOF.
        """
        self._advance()
        while not self._at_end():
            if self._previous().type == TokenType.SEMICOLON:
                return
            if self.current.type in _STATEMENT_KEYWORDS:
                return
            self._advance()

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        """Return True if the current token is the EOF token."""
        return self.current.type == TokenType.EOF

    def _previous(self) -> Token:
        return self._tokens[self._pos - 1]

    def _advance(self) -> Token:
        """Consume and return the current token, stopping at EOF."""
        tok = self._tokens[self._pos]
        if not self._at_end():
            self._pos += 1
        return tok

    def _check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types (without consuming)."""
        return self.current.type in types

    def _consume(self, token_type: TokenType, message: str) -> Token | None:
        """Consume a token of *token_type*, or report *message* and continue."""
        if self._check(token_type):
            return self._advance()
        self._diagnostics.token_error(self.current, message)
        return None

    def _error(self, token: Token, message: str) -> ParseError:
        """Report a syntax error at *token* and return the exception to raise."""
        self._diagnostics.token_error(token, message)
        return ParseError(token, message)

    @contextmanager
    def _nested(self) -> Iterator[None]:
        """Track one level of grouping or unary nesting."""
        if self._depth >= self._max_depth:
            raise self._error(self.current, "Expression nesting too deep.")
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    # ------------------------------------------------------------------
    # Grammar rules
    # ------------------------------------------------------------------

    def _expression(self) -> Expression:
        return self._equality()

    def _equality(self) -> Expression:
        return self._left_associative(self._comparison, _EQUALITY_OPERATORS)

    def _comparison(self) -> Expression:
        return self._left_associative(self._term, _COMPARISON_OPERATORS)

    def _term(self) -> Expression:
        return self._left_associative(self._factor, _TERM_OPERATORS)

    def _factor(self) -> Expression:
        return self._left_associative(self._unary, _FACTOR_OPERATORS)

    def _left_associative(
        self,
        operand: Callable[[], Expression],
        operators: frozenset[TokenType],
    ) -> Expression:
        """Parse: operand ( <operator> operand )*, folding to the left."""
        expr = operand()
        while self.current.type in operators:
            operator = self._advance()
            right = operand()
            expr = BinaryExpr(left=expr, operator=operator, right=right)
        return expr

    def _unary(self) -> Expression:
        """Parse: ( "!" | "-" ) unary | primary"""
        if self._check(TokenType.BANG, TokenType.MINUS):
            with self._nested():
                operator = self._advance()
                operand = self._unary()
            return UnaryExpr(operator=operator, operand=operand)
        return self._primary()

    def _primary(self) -> Expression:
        """Parse a literal or a parenthesized expression."""
        if self.current.type in LITERAL_TYPES:
            return LiteralExpr(token=self._advance())
        if self._check(TokenType.LEFT_PAREN):
            with self._nested():
                self._advance()  # consume (
                inner = self._expression()
            self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return GroupingExpr(expression=inner)
        raise self._error(self.current, "Expect expression.")


# ################
# Implementation
# ################

_EQUALITY_OPERATORS: frozenset[TokenType] = frozenset({TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL})

_COMPARISON_OPERATORS: frozenset[TokenType] = frozenset(
    {TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL}
)

_TERM_OPERATORS: frozenset[TokenType] = frozenset({TokenType.MINUS, TokenType.PLUS})

_FACTOR_OPERATORS: frozenset[TokenType] = frozenset({TokenType.SLASH, TokenType.STAR})

_STATEMENT_KEYWORDS: frozenset[TokenType] = frozenset(
    {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }
)
