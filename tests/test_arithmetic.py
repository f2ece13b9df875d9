import logging
from typing import Optional

import pytest

from rpncalc import Failure, Success, calculate, evaluate
from rpncalc.parser import ParserError
from rpncalc.runtime import CalcRuntimeError
from rpncalc.tokenizer import TokenizerError
from rpncalc.utils import CalculatorError
from rpncalc.validator import ValidationError


@pytest.mark.parametrize(
    "statement, expected_result",
    [
        pytest.param("1", "1"),
        pytest.param("-1", "-1"),
        pytest.param("1+2", "3"),
        pytest.param("(1+2)", "3"),
        pytest.param("-(1+2)", "-3"),
        pytest.param("(((1)))", "1"),
        pytest.param("1*4+5", "9"),
        pytest.param("1+4*5", "21"),
        pytest.param("10/5/2/2", "0.5"),
        pytest.param("10+2*(5+3-1)", "24"),
        pytest.param("1-2-3", "-4"),
        pytest.param("(1+38)*4-5", "151"),
        pytest.param("7*6/2+8", "29"),
        pytest.param("102.12356", "102.1236"),
        pytest.param("2/3", "0.6667"),
        pytest.param("7/6/2000", "0.0006"),
        pytest.param("0.1+0.2", "0.3"),
        pytest.param("1.", "1"),
        pytest.param(".5*2", "1"),
        pytest.param("0/5", "0"),
        pytest.param("-0", "0"),
        pytest.param("(-1)*2", "-2"),
        pytest.param(" 1 + 2 ", "3", id="spaces"),
        # failures
        pytest.param("\t(1 + 38) * 4 - 5\n", None, id="tabs-and-newlines"),
        pytest.param("1\u2003+2", None, id="em-space"),
        pytest.param(None, None),
        pytest.param("", None),
        pytest.param("   ", None),
        pytest.param("-12)1//(", None),
        pytest.param("1/0", None),
        pytest.param("1/(2-2)", None),
        pytest.param("1..2+3", None),
        pytest.param(".", None),
        pytest.param("5+", None),
        pytest.param("((1+2)", None),
        pytest.param("1+2)", None),
        pytest.param("()", None),
        pytest.param("(1)(2)", None),
        pytest.param("1,5", None),
        pytest.param("1e5", None),
        pytest.param("2^3", None),
        pytest.param("x+1", None),
        pytest.param("1+-2", None),
        pytest.param("-+1", None),
        pytest.param("*2", None),
        pytest.param("2*(-1)", None, id="minus-negates-only-a-lone-value"),
        pytest.param("9" * 400, None, id="overflow"),
    ],
)
def test_evaluate(statement: Optional[str], expected_result: Optional[str]) -> None:
    assert evaluate(statement) == expected_result


@pytest.mark.parametrize(
    "statement, expected_error_type",
    [
        pytest.param("", CalculatorError),
        pytest.param("1;2", ValidationError),
        pytest.param("1*/2", ValidationError),
        pytest.param("1..2+3", TokenizerError),
        pytest.param("5+", TokenizerError),
        pytest.param("1+2)", ParserError),
        pytest.param("((1+2)", ParserError),
        pytest.param("1/0", CalcRuntimeError),
        pytest.param("*2", CalcRuntimeError),
    ],
)
def test_calculate_failure(statement: str, expected_error_type: type[CalculatorError]) -> None:
    result = calculate(statement)
    assert isinstance(result, Failure)
    assert isinstance(result.error, expected_error_type)


def test_calculate_success() -> None:
    result = calculate("(1+38)*4-5")
    assert result == Success(151.0)
    assert result.text == "151"
    assert str(result) == "151"


def test_evaluate_is_idempotent() -> None:
    statements = ["(1+38)*4-5", "2/3", "1/0", "1+2)"]
    first = [evaluate(s) for s in statements]
    second = [evaluate(s) for s in statements]
    assert first == second == ["151", "0.6667", None, None]


@pytest.mark.parametrize("statement", ["4/2", "0.5*4", "(1.5+2.5)*3", "-7", "1000000*1000000"])
def test_integral_results_have_no_fractional_part(statement: str) -> None:
    result = evaluate(statement)
    assert result is not None
    assert "." not in result


@pytest.mark.parametrize("char", ["a", ",", "=", "^", "%", "e", "_", "\t", "\n", "\u00a0", "\u2003"])
def test_foreign_characters_are_rejected(char: str) -> None:
    assert evaluate(f"1+2{char}3") is None


def test_spaces_are_removed_before_evaluation() -> None:
    assert evaluate("1+2 3") == "24"


def test_failure_is_logged_with_deferred_arguments(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="rpncalc.calculator"):
        assert evaluate("1/0") is None
    (record,) = caplog.records
    assert record.args == ("1/0", "Division by zero")
    assert record.getMessage() == "Cannot evaluate '1/0': Division by zero"
