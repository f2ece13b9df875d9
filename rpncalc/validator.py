from dataclasses import dataclass

from rpncalc.utils import CalculatorError, point_at

PERMITTED_CHARS = "()*+-./0123456789"
OPERATOR_CHARS = "+-*/"


@dataclass
class ValidationError(CalculatorError):
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return point_at(self.errmsg, self.code, self.error_char_idx, kind="Validation")


def check_statement(code: str) -> None:
    """Raises ValidationError on a disallowed character or two operators in a row"""
    for i, char in enumerate(code):
        if char not in PERMITTED_CHARS:
            raise ValidationError(f"Unexpected character: {char!r}", code=code, error_char_idx=i)
        if i > 0 and code[i - 1] in OPERATOR_CHARS and char in OPERATOR_CHARS:
            raise ValidationError(
                f"Operator {char!r} follows operator {code[i - 1]!r}", code=code, error_char_idx=i
            )


def validate(code: str) -> bool:
    try:
        check_statement(code)
    except ValidationError:
        return False
    return True
