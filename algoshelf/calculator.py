"""Arithmetic expression tools: validation, infix-to-postfix, and evaluation.

Expressions use ``+ - * /``, parentheses, decimal points and spaces.
"""

from __future__ import annotations

import argparse
import re
import sys

_DIGITS = "0123456789"
_ALLOWED = _DIGITS + "+-*/()." + " "
_INTEGER = re.compile(r"-?[0-9]+")
_END = "\0"


class ExpressionError(ValueError):
    """Raised when an expression or token sequence is malformed."""


def _is_digit(ch: str) -> bool:
    return len(ch) == 1 and ch in _DIGITS


def remove_blanks(text):
    """Return ``text`` with every space character removed."""
    return text.replace(" ", "")


def _pop(stack):
    try:
        return stack.pop()
    except IndexError:
        raise ExpressionError("missing operand") from None


def _truncating_div(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def eval_rpn(tokens):
    """Evaluate postfix integer tokens; division truncates toward zero."""
    stack: list[int] = []
    for token in tokens:
        if token in ("+", "-", "*", "/"):
            right = _pop(stack)
            left = _pop(stack)
            if token == "+":
                stack.append(left + right)
            elif token == "-":
                stack.append(left - right)
            elif token == "*":
                stack.append(left * right)
            else:
                stack.append(_truncating_div(left, right))
        elif _INTEGER.fullmatch(token):
            stack.append(int(token))
        else:
            raise ExpressionError(f"not a number: {token!r}")
    if not stack:
        raise ExpressionError("empty expression")
    return stack[-1]


def priority(op):
    """Binding strength of an operator: 2 for ``* /``, 1 for ``+ -``, otherwise 0."""
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return 0


def infix_to_suffix(text):
    """Convert an infix expression to postfix without token separators.

    Blanks are removed first. A ``-`` not preceded by a digit or a decimal
    point is treated as a sign and copied straight to the output.
    """
    s = remove_blanks(text)
    out: list[str] = []
    stack: list[str] = []
    for i, ch in enumerate(s):
        if ch == "-" and (i == 0 or not (_is_digit(s[i - 1]) or s[i - 1] == ".")):
            out.append(ch)
        elif _is_digit(ch) or ch == ".":
            out.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                out.append(stack.pop())
            if not stack:
                raise ExpressionError("Brackets do not match")
            stack.pop()
        elif not stack or ch == "(" or priority(ch) > priority(stack[-1]):
            stack.append(ch)
        else:
            while stack and priority(ch) <= priority(stack[-1]):
                out.append(stack.pop())
            stack.append(ch)
    out.extend(reversed(stack))
    return "".join(out)


def _apply(stack: list[float], op: str, num: float) -> None:
    if op == "+":
        stack.append(num)
    elif op == "-":
        stack.append(-num)
    elif op == "*":
        stack.append(_pop(stack) * num)
    elif op == "/":
        stack.append(_pop(stack) / num)


def _evaluate(s: str, pos: int) -> tuple[float, int]:
    """Evaluate from ``pos`` until a closing bracket or the end; return value and stop index."""
    stack: list[float] = []
    op = "+"
    num = 0.0
    integral = True
    point = 0
    n = len(s)
    i = pos
    while i < n:
        ch = s[i]
        if ch == ".":
            integral = False
            point = i
            i += 1
            continue
        if _is_digit(ch):
            if integral:
                num = num * 10 + int(ch)
            else:
                num += int(ch) * 0.1 ** (i - point)
        else:
            integral = True
        if ch == "(":
            num, i = _evaluate(s, i + 1)
            i += 1
            ch = s[i] if i < n else _END
        if not _is_digit(ch) or i == n - 1:
            _apply(stack, op, num)
            op = ch
            num = 0.0
        if ch == ")":
            break
        i += 1
    total = 0.0
    for value in reversed(stack):
        total += value
    return total, i


def calculate(text):
    """Evaluate an infix expression with decimals and brackets as a float.

    Raises ZeroDivisionError on division by zero.
    """
    value, _ = _evaluate(remove_blanks(text), 0)
    return value


def validate(text):
    """Check an expression's symbols, brackets and operator placement.

    Raises ExpressionError with a message naming the first problem found.
    """
    if any(ch not in _ALLOWED for ch in text):
        raise ExpressionError("Unknown symbol")
    depth = 0
    last = len(text) - 1
    for i, ch in enumerate(text):
        if ch == "(":
            depth += 1
        elif ch == ")":
            if depth == 0:
                raise ExpressionError("Brackets do not match")
            depth -= 1
        if i == 0:
            if ch not in "+-(" and not _is_digit(ch):
                raise ExpressionError("Operator error")
        elif i == last:
            if ch != ")" and not _is_digit(ch):
                raise ExpressionError("Operator error")
            if ch == ")" and text[i - 1] == "(":
                raise ExpressionError("Operator error")
        else:
            _check_inner(ch, text[i - 1], text[i + 1])


def _check_inner(ch: str, prev: str, nxt: str) -> None:
    if _is_digit(ch):
        if prev == ")" or nxt == "(":
            raise ExpressionError("Operator error")
    elif ch == ".":
        if not _is_digit(prev) or not _is_digit(nxt):
            raise ExpressionError("radix point error")
    elif ch in "*/":
        if (not _is_digit(prev) and prev != ")") or (
            not _is_digit(nxt) and nxt not in "+-("
        ):
            raise ExpressionError("Operator error")
    elif ch in "+-":
        if _is_digit(prev) or prev == ")":
            if not _is_digit(nxt) and nxt not in "+-":
                raise ExpressionError("Operator error")
        elif not _is_digit(nxt):
            raise ExpressionError("Operator error")
    elif ch == "(":
        if _is_digit(prev) or prev == ")" or nxt in "*/)":
            raise ExpressionError("Operator error")
    elif ch == ")":
        if (not _is_digit(prev) and prev != ")") or nxt not in "+-*/)":
            raise ExpressionError("Operator error")


def is_legitimate(text):
    """True if ``validate`` accepts the expression."""
    try:
        validate(text)
    except ExpressionError:
        return False
    return True


def main(argv=None) -> int:
    """Validate and evaluate an expression given as arguments or on stdin."""
    parser = argparse.ArgumentParser(description="Evaluate an arithmetic expression.")
    parser.add_argument("expression", nargs="*", help="expression (read from stdin if absent)")
    args = parser.parse_args(argv)
    text = " ".join(args.expression) if args.expression else sys.stdin.read().strip()
    try:
        validate(text)
        value = calculate(text)
    except (ExpressionError, ZeroDivisionError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"{value:g}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())