import math
from dataclasses import dataclass
from typing import Callable

from rpncalc.tokenizer import Token, TokenType
from rpncalc.utils import CalculatorError

ROUND_DIGITS = 4


@dataclass
class CalcRuntimeError(CalculatorError):
    def __str__(self) -> str:
        return f"[Runtime error] {self.errmsg}"


BinaryOperationImpl = Callable[[float, float], float]


def _div(a: float, b: float) -> float:
    if b == 0.0:
        raise CalcRuntimeError("Division by zero")
    return a / b


binary_impls: dict[TokenType, BinaryOperationImpl] = {
    TokenType.PLUS: lambda a, b: a + b,
    TokenType.MINUS: lambda a, b: a - b,
    TokenType.STAR: lambda a, b: a * b,
    TokenType.SLASH: _div,
}


def evaluate_postfix(tokens: list[Token]) -> float:
    stack: list[float] = []
    for token in tokens:
        if token.type is TokenType.NUMBER:
            if token.value is None:
                raise CalcRuntimeError(f"Number token without value: {token}")
            stack.append(token.value)
            continue
        impl = binary_impls.get(token.type)
        if impl is None:
            raise CalcRuntimeError(f"Unexpected token in postfix sequence: {token}")
        if not stack:
            raise CalcRuntimeError(f"No operands for {token.lexeme!r}")
        elif len(stack) == 1:
            # a lone minus negates the only value on the stack
            if token.type is not TokenType.MINUS:
                raise CalcRuntimeError(f"Single operand for binary {token.lexeme!r}")
            stack[0] = -stack[0]
        else:
            b = stack.pop()
            a = stack.pop()
            stack.append(impl(a, b))

    if len(stack) != 1:
        raise CalcRuntimeError(f"Expected exactly one result, found {len(stack)} values")
    result = stack[0]
    if not math.isfinite(result):
        raise CalcRuntimeError(f"Result is not a finite number: {result}")
    return result


def round_result(value: float, digits: int = ROUND_DIGITS) -> float:
    """Round half up, i.e. 0.00005 -> 0.0001 and -0.00005 -> 0"""
    if value.is_integer():
        return value
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def format_result(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)
