# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line-addressed error reporting for the scanner and parser.

Diagnostics are advisory: reporting one never raises and never stops the
caller. A :class:`Diagnostics` collector is passed explicitly through the
scanner and parser so callers can inspect exactly what was reported.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

from loxfront.model.tokens import Token, TokenType

# ###############
# Public Interface
# ###############

AT_END = " at end "


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem in the source.

    Attributes:
        line: 1-based line number the problem was reported on.
        location: Location description: empty, ``" at end "``, or ``"at '<lexeme>'"``.
        message: Human-readable description of the problem.
    """

    line: int
    location: str
    message: str

    def format(self) -> str:
        """Return the diagnostic as a single ``[line N] Error ...`` line."""
        return f"[line {self.line}] Error {self.location}: {self.message}"


class Diagnostics:
    """Collector for diagnostics emitted while scanning and parsing.

    Args:
        stream: Optional text stream every diagnostic is echoed to as it is
            reported (for example ``sys.stderr``).
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._items: list[Diagnostic] = []

    def report(self, line: int, location: str, message: str) -> None:
        """Record a diagnostic and echo it to the stream, if any."""
        diagnostic = Diagnostic(line=line, location=location, message=message)
        self._items.append(diagnostic)
        if self._stream is not None:
            print(diagnostic.format(), file=self._stream)

    def error(self, line: int, message: str) -> None:
        """Report a problem that is not tied to a particular token."""
        self.report(line, "", message)

    def token_error(self, token: Token, message: str) -> None:
        """Report a problem located at *token*."""
        if token.type == TokenType.EOF:
            self.report(token.line, AT_END, message)
        else:
            self.report(token.line, f"at '{token.lexeme}'", message)

    @property
    def had_error(self) -> bool:
        """True once at least one diagnostic has been reported."""
        return bool(self._items)

    def messages(self) -> list[str]:
        """Return every diagnostic formatted as a line, in report order."""
        return [d.format() for d in self._items]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
