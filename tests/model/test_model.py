# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how to construct tokens and expression trees."""

import dataclasses

import pytest
from pydantic import ValidationError

from loxfront.model import (
    KEYWORDS,
    BinaryExpr,
    GroupingExpr,
    LiteralExpr,
    Token,
    TokenType,
    UnaryExpr,
    keyword_type,
)


def _token(token_type: TokenType, lexeme: str, literal: str | float | None = None) -> Token:
    return Token(token_type, lexeme, literal, 1)


# -------- tokens --------


def test_token_is_immutable() -> None:
    """Tokens cannot be modified after the scanner creates them."""
    token = _token(TokenType.NUMBER, "1", 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.lexeme = "2"  # type: ignore[misc]


def test_token_str() -> None:
    """str() shows the type name, lexeme, and literal payload."""
    assert str(_token(TokenType.AND, "and")) == "AND and"
    assert str(_token(TokenType.NUMBER, "123", 123.0)) == "NUMBER 123 123.0"
    assert str(_token(TokenType.STRING, '"hi"', "hi")) == 'STRING "hi" hi'
    assert str(Token(TokenType.EOF, "", None, 1)) == "EOF"


def test_token_equality_is_by_value() -> None:
    """Two tokens with the same fields are equal."""
    assert _token(TokenType.PLUS, "+") == _token(TokenType.PLUS, "+")


def test_token_type_count() -> None:
    """The token category set is closed: 11 single, 8 one-or-two, 3 literal, 16 keyword, EOF."""
    assert len(TokenType) == 39


# -------- keywords --------


def test_keyword_table_has_sixteen_entries() -> None:
    """All reserved words are in the table."""
    assert len(KEYWORDS) == 16
    assert all(KEYWORDS[text].value == text for text in KEYWORDS)


def test_keyword_table_is_read_only() -> None:
    """The table cannot be modified at runtime."""
    with pytest.raises(TypeError):
        KEYWORDS["let"] = TokenType.VAR  # type: ignore[index]


def test_keyword_type_lookup() -> None:
    """keyword_type() falls back to IDENTIFIER."""
    assert keyword_type("while") == TokenType.WHILE
    assert keyword_type("whilst") == TokenType.IDENTIFIER


# -------- expressions --------


def test_literal_expression() -> None:
    """A literal wraps a number, string, or keyword token."""
    literal = LiteralExpr(token=_token(TokenType.NUMBER, "1", 1.0))
    assert literal.kind == "literal"
    assert literal.token.literal == 1.0


@pytest.mark.parametrize("token_type", [TokenType.IDENTIFIER, TokenType.PLUS, TokenType.EOF])
def test_literal_rejects_non_literal_tokens(token_type: TokenType) -> None:
    """Only NUMBER, STRING, true, false, and nil tokens form literals."""
    with pytest.raises(ValidationError):
        LiteralExpr(token=_token(token_type, "x"))


def test_unary_expression() -> None:
    """A unary node holds its operator token and one operand."""
    operand = LiteralExpr(token=_token(TokenType.TRUE, "true"))
    unary = UnaryExpr(operator=_token(TokenType.BANG, "!"), operand=operand)
    assert unary.kind == "unary"
    assert unary.operand is operand


def test_unary_rejects_binary_only_operator() -> None:
    """'*' is not a prefix operator."""
    operand = LiteralExpr(token=_token(TokenType.NUMBER, "1", 1.0))
    with pytest.raises(ValidationError):
        UnaryExpr(operator=_token(TokenType.STAR, "*"), operand=operand)


def test_binary_expression() -> None:
    """A binary node holds two operands around its operator."""
    left = LiteralExpr(token=_token(TokenType.NUMBER, "1", 1.0))
    right = LiteralExpr(token=_token(TokenType.NUMBER, "2", 2.0))
    binary = BinaryExpr(left=left, operator=_token(TokenType.PLUS, "+"), right=right)
    assert binary.kind == "binary"
    assert binary.left is left
    assert binary.right is right


def test_binary_rejects_bang() -> None:
    """'!' is not an infix operator."""
    one = LiteralExpr(token=_token(TokenType.NUMBER, "1", 1.0))
    with pytest.raises(ValidationError):
        BinaryExpr(left=one, operator=_token(TokenType.BANG, "!"), right=one)


def test_grouping_expression() -> None:
    """A grouping wraps one inner expression."""
    inner = LiteralExpr(token=_token(TokenType.NIL, "nil"))
    assert GroupingExpr(expression=inner).expression is inner


def test_nodes_are_frozen() -> None:
    """Nodes are never mutated after construction."""
    grouping = GroupingExpr(expression=LiteralExpr(token=_token(TokenType.NIL, "nil")))
    with pytest.raises(ValidationError):
        grouping.expression = LiteralExpr(token=_token(TokenType.TRUE, "true"))  # type: ignore[misc]


def test_children_can_be_shared() -> None:
    """The same child node can appear under several parents."""
    shared = LiteralExpr(token=_token(TokenType.NUMBER, "2", 2.0))
    a = UnaryExpr(operator=_token(TokenType.MINUS, "-"), operand=shared)
    b = GroupingExpr(expression=shared)
    assert a.operand is b.expression
