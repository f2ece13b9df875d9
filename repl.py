import logging
import sys

from rpncalc import Failure, calculate


if __name__ == "__main__":
    if "-v" in sys.argv[1:]:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    while True:
        try:
            statement = input("> ")
        except EOFError:
            break

        result = calculate(statement)
        if isinstance(result, Failure):
            print(result.error)
            continue

        print(result)
