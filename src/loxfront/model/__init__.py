# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token and expression model for Lox (tokens, keywords, AST nodes)."""

from loxfront.model.expressions import (
    BINARY_OPERATORS,
    LITERAL_TYPES,
    UNARY_OPERATORS,
    BinaryExpr,
    Expression,
    GroupingExpr,
    LiteralExpr,
    UnaryExpr,
)
from loxfront.model.tokens import KEYWORDS, Token, TokenType, keyword_type

__all__ = [
    # Tokens
    "TokenType",
    "Token",
    "KEYWORDS",
    "keyword_type",
    # Expressions
    "LITERAL_TYPES",
    "UNARY_OPERATORS",
    "BINARY_OPERATORS",
    "LiteralExpr",
    "UnaryExpr",
    "BinaryExpr",
    "GroupingExpr",
    "Expression",
]
