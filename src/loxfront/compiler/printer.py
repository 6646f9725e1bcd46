# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Textual renderings of expression trees.

:func:`render` produces the canonical fully parenthesized prefix form used for
debugging and as the test oracle. :func:`unparse` produces Lox source text
that parses back to the same tree.

Both walk the tree with an explicit stack, so long operator chains such as
``1 + 1 + ... + 1`` render without touching the interpreter recursion limit.
"""

from collections.abc import Callable

from loxfront.model.expressions import BinaryExpr, Expression, GroupingExpr, LiteralExpr, UnaryExpr
from loxfront.model.tokens import TokenType

# ###############
# Public Interface
# ###############


def render(expr: Expression) -> str:
    """Render *expr* in parenthesized prefix form, e.g. ``(+ 1 (* 2 3))``.

    Raises:
        TypeError: If *expr* is not an expression node.
    """
    return _fold(expr, _prefix_form, "render")


def unparse(expr: Expression) -> str:
    """Render *expr* as Lox source text, e.g. ``1 + (2 * 3)``.

    Parentheses appear only where the tree has a grouping node, so parsing the
    result of unparsing a parsed tree rebuilds an equivalent tree.

    Raises:
        TypeError: If *expr* is not an expression node.
    """
    return _fold(expr, _source_form, "unparse")


# ################
# Implementation
# ################

_Combine = Callable[[Expression, list[str]], str]


def _fold(expr: Expression, combine: _Combine, action: str) -> str:
    """Post-order walk of *expr*, combining each node with its children's text."""
    results: list[str] = []
    # (node, children already pushed)
    stack: list[tuple[Expression, bool]] = [(expr, False)]
    while stack:
        node, expanded = stack.pop()
        children = _children(node, action)
        if expanded or not children:
            count = len(children)
            parts = results[len(results) - count :]
            del results[len(results) - count :]
            results.append(combine(node, parts))
            continue
        stack.append((node, True))
        for child in reversed(children):
            stack.append((child, False))
    return results[0]


def _children(expr: Expression, action: str) -> tuple[Expression, ...]:
    if isinstance(expr, BinaryExpr):
        return (expr.left, expr.right)
    if isinstance(expr, UnaryExpr):
        return (expr.operand,)
    if isinstance(expr, GroupingExpr):
        return (expr.expression,)
    if isinstance(expr, LiteralExpr):
        return ()
    raise TypeError(f"Cannot {action} {type(expr).__name__!r} as an expression")


def _prefix_form(expr: Expression, parts: list[str]) -> str:
    if isinstance(expr, LiteralExpr):
        return _literal_text(expr)
    name = "group" if isinstance(expr, GroupingExpr) else expr.operator.lexeme
    return f"({' '.join([name, *parts])})"


def _source_form(expr: Expression, parts: list[str]) -> str:
    if isinstance(expr, BinaryExpr):
        return f"{parts[0]} {expr.operator.lexeme} {parts[1]}"
    if isinstance(expr, UnaryExpr):
        return f"{expr.operator.lexeme}{parts[0]}"
    if isinstance(expr, GroupingExpr):
        return f"({parts[0]})"
    return _literal_text(expr)


def _literal_text(expr: LiteralExpr) -> str:
    # nil has a single spelling regardless of the token it was built from.
    if expr.token.type == TokenType.NIL:
        return "nil"
    return expr.token.lexeme
