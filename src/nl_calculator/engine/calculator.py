"""Classify-then-evaluate facade over the engine."""
from typing import Union

from nl_calculator.common.errors import CalculationError
from nl_calculator.common.models import EvalFailed, EvalOutcome, ParseFailed
from nl_calculator.engine.classifier import QueryClassifier
from nl_calculator.engine.evaluator import Evaluator


def solve(text: object) -> Union[ParseFailed, EvalOutcome]:
    """
    Run a raw query through the classifier and, on success, the evaluator.

    :param object text: Raw user input

    :return: ParseFailed, EvalFailed or Evaluated
    :rtype: Union[ParseFailed, EvalOutcome]
    """
    parsed = QueryClassifier.classify(text)
    if isinstance(parsed, ParseFailed):
        return parsed
    return Evaluator.evaluate(parsed.operation, parsed.operands)


def calculate(text: object) -> float:
    """
    Compute the numeric answer of a raw query.

    :param object text: Raw user input

    :return: Unrounded result
    :rtype: float
    :raises CalculationError: If the query cannot be classified or evaluated
    """
    outcome = solve(text)
    if isinstance(outcome, (ParseFailed, EvalFailed)):
        raise CalculationError(outcome.message, outcome.kind)
    return outcome.value
