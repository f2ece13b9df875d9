from rpncalc.parser import to_postfix
from rpncalc.runtime import evaluate_postfix, format_result, round_result
from rpncalc.tokenizer import tokenize, untokenize
from rpncalc.utils import CalculatorError
from rpncalc.validator import check_statement

for code in [
    "5",
    "-1",
    "1+1",
    "-1+1",
    "1+-1",
    "4+6*3",
    "(4+6)",
    "(4+6)*3",
    "(1+38)*4-5",
    "7*6/2+8",
    "7/6/2000",
    "102.12356",
    "2*(-1)",
    "1..2+3",
    "((1+2)",
    "1+2)",
    "1/0",
    "5+",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        check_statement(code)
        tokens = tokenize(code)
        print(f"tokens: {' '.join(str(t) for t in tokens)}")
        postfix = to_postfix(tokens)
        print(f"postfix: {untokenize(postfix, sep=' ')}")
        value = evaluate_postfix(postfix)
    except CalculatorError as e:
        print(e)
        continue
    print(f"result: {format_result(round_result(value))}")
