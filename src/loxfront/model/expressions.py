# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Expression tree nodes produced by the Lox parser."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

from loxfront.model.tokens import Token, TokenType

# ###############
# Public Interface
# ###############

LITERAL_TYPES: frozenset[TokenType] = frozenset(
    {TokenType.NUMBER, TokenType.STRING, TokenType.TRUE, TokenType.FALSE, TokenType.NIL}
)

UNARY_OPERATORS: frozenset[TokenType] = frozenset({TokenType.BANG, TokenType.MINUS})

BINARY_OPERATORS: frozenset[TokenType] = frozenset(
    {
        TokenType.BANG_EQUAL,
        TokenType.EQUAL_EQUAL,
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
        TokenType.MINUS,
        TokenType.PLUS,
        TokenType.SLASH,
        TokenType.STAR,
    }
)


class LiteralExpr(BaseModel):
    """A number, string, true, false or nil literal."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    token: Token

    @field_validator("token")
    @classmethod
    def _check_token(cls, token: Token) -> Token:
        if token.type not in LITERAL_TYPES:
            raise ValueError(f"{token.type.name} token cannot form a literal")
        return token


class UnaryExpr(BaseModel):
    """A prefix operator applied to one operand."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unary"] = "unary"
    operator: Token
    operand: Expression

    @field_validator("operator")
    @classmethod
    def _check_operator(cls, operator: Token) -> Token:
        if operator.type not in UNARY_OPERATORS:
            raise ValueError(f"{operator.type.name} is not a unary operator")
        return operator


class BinaryExpr(BaseModel):
    """An infix operator applied to two operands."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["binary"] = "binary"
    left: Expression
    operator: Token
    right: Expression

    @field_validator("operator")
    @classmethod
    def _check_operator(cls, operator: Token) -> Token:
        if operator.type not in BINARY_OPERATORS:
            raise ValueError(f"{operator.type.name} is not a binary operator")
        return operator


class GroupingExpr(BaseModel):
    """A parenthesized sub-expression."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["grouping"] = "grouping"
    expression: Expression


# An expression node — one of the four closed variants.
# The `kind` discriminator keeps deserialization unambiguous.
Expression = Annotated[
    LiteralExpr | UnaryExpr | BinaryExpr | GroupingExpr,
    _Field(discriminator="kind"),
]


# Resolve forward references for the recursive nodes.
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()
GroupingExpr.model_rebuild()
