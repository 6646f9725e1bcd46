# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of parsed expression trees.

Trees are stored as compact JSON for consumers outside this package (for
example a separate evaluator). The format is versioned so future schema
changes can be detected.

The tree is written as a flat node table in post-order: every node refers to
its children by their index in ``nodes``, children always precede their
parent, and the last entry is the root. Neither writing nor reading a table
recurses, so arbitrarily long operator chains round-trip.
"""

from __future__ import annotations

import json
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from loxfront.model.expressions import BinaryExpr, Expression, GroupingExpr, LiteralExpr, UnaryExpr
from loxfront.model.tokens import Token

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "2"


def serialize(expr: Expression) -> str:
    """Serialize an expression tree to a compact JSON string.

    Raises:
        TypeError: If *expr* is not an expression node.
    """
    payload = {"v": ARTIFACT_FORMAT_VERSION, "nodes": _TABLE.dump_python(_flatten(expr), mode="json")}
    return json.dumps(payload, separators=(",", ":"))


def deserialize(data: str) -> Expression:
    """Deserialize an expression tree from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed expression tree.

    Raises:
        ValueError: If the artifact format version is not recognised or the
            payload is not a valid expression tree.
    """
    obj = json.loads(data)
    version = obj.get("v") if isinstance(obj, dict) else None
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    records = _TABLE.validate_python(obj.get("nodes"))
    if not records:
        raise ValueError("Artifact contains no expression nodes")
    return _rebuild(records)


# ################
# Implementation
# ################


class _LiteralRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    token: Token


class _UnaryRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["unary"] = "unary"
    operator: Token
    operand: int


class _BinaryRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["binary"] = "binary"
    left: int
    operator: Token
    right: int


class _GroupingRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["grouping"] = "grouping"
    expression: int


_Record = Annotated[
    _LiteralRecord | _UnaryRecord | _BinaryRecord | _GroupingRecord,
    Field(discriminator="kind"),
]

_TABLE: TypeAdapter[list[_Record]] = TypeAdapter(list[_Record])


def _flatten(expr: Expression) -> list[_Record]:
    """Lay out *expr* as a post-order node table."""
    records: list[_Record] = []
    # Indices of finished subtrees, consumed by their parent.
    finished: list[int] = []
    stack: list[tuple[Expression, bool]] = [(expr, False)]
    while stack:
        node, expanded = stack.pop()
        if isinstance(node, LiteralExpr):
            records.append(_LiteralRecord(token=node.token))
        elif not expanded:
            stack.append((node, True))
            for child in reversed(_children(node)):
                stack.append((child, False))
            continue
        elif isinstance(node, BinaryExpr):
            right = finished.pop()
            left = finished.pop()
            records.append(_BinaryRecord(left=left, operator=node.operator, right=right))
        elif isinstance(node, UnaryExpr):
            records.append(_UnaryRecord(operator=node.operator, operand=finished.pop()))
        else:
            records.append(_GroupingRecord(expression=finished.pop()))
        finished.append(len(records) - 1)
    return records


def _children(expr: Expression) -> tuple[Expression, ...]:
    if isinstance(expr, BinaryExpr):
        return (expr.left, expr.right)
    if isinstance(expr, UnaryExpr):
        return (expr.operand,)
    if isinstance(expr, GroupingExpr):
        return (expr.expression,)
    raise TypeError(f"Cannot serialize {type(expr).__name__!r} as an expression")


def _rebuild(records: list[_Record]) -> Expression:
    """Build the expression tree described by a post-order node table."""
    built: list[Expression] = []

    def ref(position: int, index: int) -> Expression:
        if not 0 <= index < position:
            raise ValueError(f"Node {position} refers to node {index}, which does not precede it")
        return built[index]

    for position, record in enumerate(records):
        if isinstance(record, _LiteralRecord):
            built.append(LiteralExpr(token=record.token))
        elif isinstance(record, _UnaryRecord):
            built.append(UnaryExpr(operator=record.operator, operand=ref(position, record.operand)))
        elif isinstance(record, _BinaryRecord):
            left = ref(position, record.left)
            right = ref(position, record.right)
            built.append(BinaryExpr(left=left, operator=record.operator, right=right))
        else:
            built.append(GroupingExpr(expression=ref(position, record.expression)))
    return built[-1]
