from dataclasses import dataclass
from typing import Union

from rpncalc.tokenizer import Token, TokenType, untokenize
from rpncalc.utils import CalculatorError, point_at


@dataclass
class ParserError(CalculatorError):
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        error_char_idx = len(untokenize(self.tokens[: self.error_token_idx]))
        return point_at(self.errmsg, untokenize(self.tokens), error_char_idx, kind="Parser")


_PRECEDENCE = {
    "(": 1,
    "+": 2,
    "-": 2,
    "*": 3,
    "/": 3,
}


def get_op_precedence(op: Union[Token, str]) -> int:
    """Higher binds tighter; unknown symbols rank above every operator"""
    symbol = op.lexeme if isinstance(op, Token) else op
    return _PRECEDENCE.get(symbol, 4)


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Shunting-yard: infix tokens to reverse Polish notation"""
    result: list[Token] = []
    # (token, index in the input) pairs, indices point error messages at the culprit
    stack: list[tuple[Token, int]] = []
    for i, token in enumerate(tokens):
        if token.type is TokenType.NUMBER:
            result.append(token)
        elif token.is_operator:
            while stack and get_op_precedence(token) <= get_op_precedence(stack[-1][0]):
                result.append(stack.pop()[0])
            stack.append((token, i))
        elif token.type is TokenType.BRACKET_OPEN:
            stack.append((token, i))
        elif token.type is TokenType.BRACKET_CLOSE:
            while stack and stack[-1][0].type is not TokenType.BRACKET_OPEN:
                result.append(stack.pop()[0])
            if not stack:
                raise ParserError("Unmatched closing bracket", tokens=tokens, error_token_idx=i)
            stack.pop()
        else:
            raise ParserError(f"Unexpected token: {token}", tokens=tokens, error_token_idx=i)

    while stack:
        token, i = stack.pop()
        if not token.is_operator:
            raise ParserError("Unclosed bracket", tokens=tokens, error_token_idx=i)
        result.append(token)
    return result
