import enum
from dataclasses import dataclass
from typing import Optional

from rpncalc.utils import CalculatorError, PrintableEnum, point_at


@dataclass
class TokenizerError(CalculatorError):
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return point_at(self.errmsg, self.code, self.error_char_idx, kind="Tokenizer")


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


OPERATOR_TOKEN_TYPES = frozenset({TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH})


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    value: Optional[float] = None

    @property
    def is_operator(self) -> bool:
        return self.type in OPERATOR_TOKEN_TYPES

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}


def _number_token(lexeme: str, code: str, start_idx: int) -> Token:
    try:
        value = float(lexeme)
    except ValueError:
        raise TokenizerError(f"Malformed number: {lexeme!r}", code=code, error_char_idx=start_idx) from None
    return Token(type=TokenType.NUMBER, lexeme=lexeme, value=value)


def tokenize(code: str) -> list[Token]:
    """Expects a validated statement: anything that is not a single-char token goes into a number"""
    tokens: list[Token] = []
    number_start_idx = 0
    for i, char in enumerate(code):
        if char in SINGLE_CHAR_TOKENS:
            if number_start_idx < i:
                tokens.append(_number_token(code[number_start_idx:i], code, number_start_idx))
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[char], lexeme=char))
            number_start_idx = i + 1
    if number_start_idx < len(code):
        tokens.append(_number_token(code[number_start_idx:], code, number_start_idx))

    if not tokens:
        raise TokenizerError("Empty statement", code=code, error_char_idx=0)
    if tokens[-1].is_operator:
        raise TokenizerError(
            f"Statement ends with operator {tokens[-1].lexeme!r}", code=code, error_char_idx=len(code) - 1
        )
    return tokens


def untokenize(tokens: list[Token], sep: str = "") -> str:
    return sep.join(t.lexeme for t in tokens)
