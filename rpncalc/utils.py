import enum
from dataclasses import dataclass


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def point_at(errmsg: str, text: str, idx: int, kind: str) -> str:
    """Error message followed by a window of ``text`` with a caret under ``idx``"""
    print_start_idx = max(0, idx - 10)
    print_ellipsis_pre = print_start_idx > 0
    print_end_idx = min(len(text), idx + 10)
    print_ellipsis_post = print_end_idx < len(text)
    return "\n".join(
        [
            f"[{kind} error] {errmsg}",
            (
                ("..." if print_ellipsis_pre else "")
                + f"{text[print_start_idx:print_end_idx]}"
                + ("..." if print_ellipsis_post else "")
            ),
            " " * (idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
        ]
    )


@dataclass
class CalculatorError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return self.errmsg
