"""Polynomial terms written as ``(coef,exp)`` groups, and their printed form."""

from __future__ import annotations

import re
from dataclasses import dataclass

_GROUP = r"\(\s*([+-]?\d+)\s*,\s*([+-]?\d+)\s*\)"
_TERM = re.compile(_GROUP)
_WHOLE = re.compile(rf"(?:\s*{_GROUP})*\s*")


@dataclass(frozen=True)
class Term:
    """One term ``coef * X^exp`` of a polynomial."""

    coef: int
    exp: int

    def __str__(self) -> str:
        if self.exp == 0:
            return str(self.coef)
        if self.exp == 1:
            return f"{self.coef}X"
        return f"{self.coef}X^{self.exp}"


def parse_terms(text):
    """Parse a run of ``(coef,exp)`` groups into terms, in the given order.

    Raises ValueError if the text holds anything other than such groups and
    whitespace.
    """
    if not _WHOLE.fullmatch(text):
        raise ValueError(f"malformed term list: {text!r}")
    return [Term(int(c), int(e)) for c, e in _TERM.findall(text)]


def format_terms(terms):
    """Render terms as ``cX^e`` pieces joined by their signs; ``0`` when empty.

    The coefficient is always written, ``X`` alone stands for exponent 1 and
    exponent 0 prints the coefficient only.
    """
    terms = list(terms)
    if not terms:
        return "0"
    pieces = []
    for position, term in enumerate(terms):
        if term.coef > 0 and position:
            pieces.append("+")
        pieces.append(str(term))
    return "".join(pieces)