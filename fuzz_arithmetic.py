import random
import re
import string
import warnings
from typing import Optional

from rpncalc import evaluate
from rpncalc.runtime import format_result, round_result

warnings.filterwarnings("ignore")


def eval_py(code: str) -> Optional[str]:
    try:
        value = eval(code.replace(" ", ""))
    except Exception:
        return None
    if not isinstance(value, (int, float)):
        return None  # "()" evaluates to a tuple
    return format_result(round_result(float(value)))


if __name__ == "__main__":
    alphabet = string.digits + ".()+-*/ "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)
        stripped = code.replace(" ", "")

        if re.findall(r"[+\-*/]{2}", stripped):
            continue  # consecutive operators are rejected outright, python reads them as unary signs, ** or //

        if re.findall(r"\(-", stripped):
            continue  # unary minus only applies when a single value is on the stack

        if re.findall(r"(^|[^\d.])0\d", stripped):
            continue  # leading zeros are a syntax error in python

        res_py = eval_py(code)
        res_my = evaluate(code)
        if res_py == res_my:
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
