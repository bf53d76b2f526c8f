"""Differentiation of polynomials given as ``(coef,exp)`` term lists."""

from __future__ import annotations

import argparse
import re
import sys

from algoshelf.polyterms import Term, format_terms, parse_terms

_COUNT = re.compile(r"\s*([+-]?\d+)")


def derivative(terms):
    """Differentiate each term: the coefficient takes the exponent, which drops by one.

    Leading terms whose new exponent is negative are dropped; if no term keeps
    a non-negative exponent, every differentiated term is returned.
    """
    result = [Term(t.coef * t.exp, t.exp - 1) for t in terms]
    start = next((i for i, t in enumerate(result) if t.exp >= 0), 0)
    return result[start:]


def differentiate_text(text):
    """Parse ``(coef,exp)`` groups, differentiate them and format the result."""
    return format_terms(derivative(parse_terms(text)))


def main(argv=None) -> int:
    """Read a count n and then n+1 ``(coef,exp)`` groups from stdin; print the derivative."""
    parser = argparse.ArgumentParser(
        description="Differentiate a polynomial read from stdin as n followed by n+1 (coef,exp) groups."
    )
    parser.parse_args(argv)
    data = sys.stdin.read()
    match = _COUNT.match(data)
    if match is None:
        print("missing term count", file=sys.stderr)
        return 1
    count = int(match.group(1)) + 1
    try:
        terms = parse_terms(data[match.end():])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    if len(terms) < count:
        print(f"expected {count} terms, got {len(terms)}", file=sys.stderr)
        return 1
    print(format_terms(derivative(terms[:count])))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())