import pytest

from algoshelf.calculator import (
    ExpressionError,
    calculate,
    eval_rpn,
    infix_to_suffix,
    is_legitimate,
    main,
    priority,
    remove_blanks,
    validate,
)


def test_remove_blanks_drops_only_spaces():
    assert remove_blanks(" 1 +\t2 ") == "1+\t2"


def test_eval_rpn_example():
    assert eval_rpn(["2", "1", "+", "3", "*"]) == 9


def test_eval_rpn_single_number():
    assert eval_rpn(["-42"]) == -42


def test_eval_rpn_division_truncates_toward_zero():
    assert eval_rpn(["-7", "2", "/"]) == -eval_rpn(["7", "2", "/"])


def test_eval_rpn_missing_operand():
    with pytest.raises(ExpressionError):
        eval_rpn(["1", "+"])


def test_eval_rpn_bad_token():
    with pytest.raises(ExpressionError):
        eval_rpn(["1", "x", "+"])


def test_eval_rpn_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        eval_rpn(["1", "0", "/"])


def test_priority_ordering():
    assert priority("*") == priority("/")
    assert priority("+") == priority("-")
    assert priority("*") > priority("+") > priority("(")


def test_infix_to_suffix_source_example():
    assert infix_to_suffix("-2*(-3+5)+7/1-4") == "-2-35+*71/+4-"


def test_infix_to_suffix_ignores_blanks():
    assert infix_to_suffix("1 + 2 * 3") == infix_to_suffix("1+2*3")


@pytest.mark.parametrize("text", ["1+2)", ")1"])
def test_infix_to_suffix_unmatched_bracket(text):
    with pytest.raises(ExpressionError):
        infix_to_suffix(text)


@pytest.mark.parametrize(
    "expression", ["1+2*3", "(1+2)*3", "9-4-3", "2*3+4*5", "8-(3+1)*2"]
)
def test_suffix_evaluation_agrees_with_calculate(expression):
    suffix = infix_to_suffix(expression)
    assert eval_rpn(list(suffix)) == calculate(expression)


def test_calculate_source_example():
    assert calculate("2.5*3+260.72*3/10") == pytest.approx(85.716)


def test_calculate_brackets_reduce_to_inner_value():
    assert calculate("(-1.05+2.5)*2.25/2.25") == pytest.approx(calculate("-1.05+2.5"))


def test_calculate_ignores_blanks():
    assert calculate(" 1 + 2 ") == calculate("1+2")


def test_calculate_commutative_product():
    assert calculate("1.5*4") == pytest.approx(calculate("4*1.5"))


def test_calculate_leading_minus():
    assert calculate("-3") == -3.0


def test_calculate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate("1/0")


@pytest.mark.parametrize(
    "text", ["2.5*3+260.72*3/10", "(-1.05+2.5)*2.25/2.25", "-2*(-3+5)+7/1-4"]
)
def test_source_expressions_are_legitimate(text):
    assert is_legitimate(text) is True


@pytest.mark.parametrize(
    "text, message",
    [
        ("1+a", "Unknown symbol"),
        ("1+2)", "Brackets do not match"),
        ("*1", "Operator error"),
        ("1+", "Operator error"),
        ("1..2", "radix point error"),
        ("()", "Operator error"),
        ("(1)(2)", "Operator error"),
    ],
)
def test_validate_rejects(text, message):
    with pytest.raises(ExpressionError, match=message):
        validate(text)
    assert is_legitimate(text) is False


def test_main_prints_result(capsys):
    assert main(["1+2"]) == 0
    assert capsys.readouterr().out == f"{calculate('1+2'):g}\n"


def test_main_reports_invalid_expression(capsys):
    assert main(["1+a"]) == 1
    assert "Unknown symbol" in capsys.readouterr().err