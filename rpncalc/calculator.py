import logging
from dataclasses import dataclass
from typing import Optional

from rpncalc.parser import to_postfix
from rpncalc.runtime import evaluate_postfix, format_result, round_result
from rpncalc.tokenizer import tokenize
from rpncalc.utils import CalculatorError
from rpncalc.validator import check_statement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Success:
    value: float

    @property
    def text(self) -> str:
        return format_result(self.value)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Failure:
    error: CalculatorError

    def __str__(self) -> str:
        return str(self.error)


EvaluationResult = Success | Failure


def calculate(statement: Optional[str]) -> EvaluationResult:
    if not statement:
        return Failure(CalculatorError("Empty statement"))
    code = statement.replace(" ", "")
    try:
        check_statement(code)
        tokens = tokenize(code)
        postfix = to_postfix(tokens)
        value = evaluate_postfix(postfix)
    except CalculatorError as e:
        logger.debug("Cannot evaluate %r: %s", statement, e.errmsg)
        return Failure(e)
    return Success(round_result(value))


def evaluate(statement: Optional[str]) -> Optional[str]:
    """Evaluated statement as text (``"151"``, ``"102.1236"``) or None if it can't be evaluated"""
    result = calculate(statement)
    if isinstance(result, Failure):
        return None
    return result.text
