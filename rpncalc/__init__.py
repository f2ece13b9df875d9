from rpncalc.calculator import EvaluationResult, Failure, Success, calculate, evaluate
from rpncalc.utils import CalculatorError

__all__ = ["CalculatorError", "EvaluationResult", "Failure", "Success", "calculate", "evaluate"]
