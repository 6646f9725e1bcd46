# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Property-based tests for the scanner and parser invariants."""

from hypothesis import given, settings
from hypothesis import strategies as st

from loxfront.compiler.artifact import deserialize, serialize
from loxfront.compiler.diagnostics import Diagnostics
from loxfront.compiler.parser import parse
from loxfront.compiler.printer import render, unparse
from loxfront.compiler.scanner import scan
from loxfront.model.tokens import TokenType

# ###############
# Strategies
# ###############

_NUMBERS = st.from_regex(r"\A[0-9]{1,6}(\.[0-9]{1,4})?\Z")

_STRING_BODIES = st.text(
    alphabet=st.characters(blacklist_characters='"\\', blacklist_categories=["Cs"]),
    max_size=20,
)

_BINARY_OPERATORS = ["!=", "==", ">", ">=", "<", "<=", "-", "+", "/", "*"]


def _expressions(depth: int = 4) -> st.SearchStrategy[str]:
    """Well-formed expression source text nested at most *depth* levels."""
    leaves = st.one_of(
        _NUMBERS,
        _STRING_BODIES.map(lambda body: f'"{body}"'),
        st.sampled_from(["true", "false", "nil"]),
    )
    if depth == 0:
        return leaves
    sub = _expressions(depth - 1)
    return st.one_of(
        leaves,
        st.builds(lambda op, operand: f"{op}{operand}", st.sampled_from(["-", "!"]), sub),
        st.builds(lambda left, op, right: f"{left} {op} {right}", sub, st.sampled_from(_BINARY_OPERATORS), sub),
        sub.map(lambda inner: f"({inner})"),
    )


# ###############
# Scanner Properties
# ###############


@given(st.text())  # type: ignore[misc]
def test_scan_always_ends_with_single_eof(source: str) -> None:
    tokens = scan(source)
    assert tokens[-1].type == TokenType.EOF
    assert [t.type for t in tokens].count(TokenType.EOF) == 1


@given(st.text())  # type: ignore[misc]
def test_non_eof_tokens_have_lexemes_and_positive_lines(source: str) -> None:
    for token in scan(source)[:-1]:
        assert token.lexeme
        assert token.line >= 1


@given(_NUMBERS)  # type: ignore[misc]
def test_number_literal_payload_is_float_value(text: str) -> None:
    diagnostics = Diagnostics()
    tokens = scan(text, diagnostics)
    assert [t.type for t in tokens] == [TokenType.NUMBER, TokenType.EOF]
    assert tokens[0].lexeme == text
    assert tokens[0].literal == float(text)
    assert not diagnostics.had_error


@given(_STRING_BODIES)  # type: ignore[misc]
def test_string_payload_and_line_counting(body: str) -> None:
    tokens = scan(f'"{body}" x')
    assert tokens[0].type == TokenType.STRING
    assert tokens[0].literal == body
    assert tokens[0].line == 1
    assert tokens[1].line == 1 + body.count("\n")


@given(_STRING_BODIES)  # type: ignore[misc]
def test_unterminated_string_reports_exactly_once(body: str) -> None:
    diagnostics = Diagnostics()
    tokens = scan(f'1 + "{body}', diagnostics)
    assert tokens[-1].type == TokenType.EOF
    assert tokens[-2].type == TokenType.STRING
    assert diagnostics.messages() == ["[line 1] Error : Unterminated string."]


# ###############
# Parser Properties
# ###############


@given(_expressions())  # type: ignore[misc]
def test_well_formed_expressions_parse_cleanly(source: str) -> None:
    diagnostics = Diagnostics()
    expr = parse(scan(source, diagnostics), diagnostics)
    assert expr is not None
    assert not diagnostics.had_error


@given(_expressions())  # type: ignore[misc]
def test_rendering_is_stable_through_source_text(source: str) -> None:
    expr = parse(scan(source))
    assert expr is not None
    reparsed = parse(scan(unparse(expr)))
    assert reparsed is not None
    assert render(reparsed) == render(expr)


@given(st.text(max_size=60))  # type: ignore[misc]
def test_parse_never_raises_on_arbitrary_text(source: str) -> None:
    diagnostics = Diagnostics()
    parse(scan(source, diagnostics), diagnostics)


@given(  # type: ignore[misc]
    st.lists(st.tuples(st.sampled_from(_BINARY_OPERATORS), _NUMBERS), min_size=1, max_size=6),
    st.integers(min_value=400, max_value=600),
)
@settings(max_examples=10, deadline=None)  # type: ignore[misc]
def test_long_operator_chains_render_and_round_trip(pattern: list[tuple[str, str]], repeat: int) -> None:
    rest = pattern * repeat
    source = "1" + "".join(f" {op} {operand}" for op, operand in rest)
    expr = parse(scan(source))
    assert expr is not None
    assert render(expr).count("(") == len(rest)
    reparsed = parse(scan(unparse(expr)))
    assert reparsed is not None
    assert render(reparsed) == render(expr)
    assert render(deserialize(serialize(expr))) == render(expr)
