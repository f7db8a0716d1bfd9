"""End-to-end tests from query text to result."""
import pytest

from nl_calculator.common.errors import CalculationError, EvalErrorKind, ParseErrorKind
from nl_calculator.common.formatting import format_result
from nl_calculator.common.models import EvalFailed, Evaluated, OperationKind, ParseFailed, Parsed
from nl_calculator.engine.calculator import calculate, solve
from nl_calculator.engine.classifier import classify
from nl_calculator.engine.evaluator import evaluate


@pytest.mark.parametrize("query,operation,operands,expected", [
    ("add 15 and 27", OperationKind.ADD, [15, 27], 42.0),
    ("subtract 8 from 20", OperationKind.SUBTRACT, [20, 8], 12.0),
    ("multiply 6 by 7", OperationKind.MULTIPLY, [6, 7], 42.0),
    ("divide 100 by 4", OperationKind.DIVIDE, [100, 4], 25.0),
    ("what is 20 percent of 150", OperationKind.PERCENTAGE, [20, 150], 30.0),
    ("average of 10, 20, 30", OperationKind.AVERAGE, [10, 20, 30], 20.0),
    ("square root of 144", OperationKind.SQUARE_ROOT, [144], 12.0),
    ("5 to the power of 3", OperationKind.POWER, [5, 3], 125.0),
])
def test_classify_then_evaluate(query: str, operation: OperationKind, operands: list, expected: float) -> None:
    """Each example query classifies and evaluates to the documented answer."""
    parsed = classify(query)
    assert parsed == Parsed(operation=operation, operands=operands)
    assert evaluate(parsed.operation, parsed.operands) == Evaluated(value=expected)
    assert solve(query) == Evaluated(value=expected)


@pytest.mark.parametrize("query,expected", [
    ("add 1.5 and 2.25", "3.75"),
    ("subtract 10 from -5", "-15"),
    ("divide 10 by 3", "3.3333333333"),
    ("add 0.1 and 0.2", "0.3"),
])
def test_solve_and_format(query: str, expected: str) -> None:
    """Decimal and negative answers survive the whole flow."""
    assert format_result(calculate(query)) == expected


def test_solve_reports_parse_failure() -> None:
    """Unrecognized queries stop before evaluation."""
    outcome = solve("hello world")
    assert isinstance(outcome, ParseFailed)
    assert outcome.kind is ParseErrorKind.UNRECOGNIZED_QUERY


def test_solve_reports_evaluation_failure() -> None:
    """Domain errors of the evaluator are returned as EvalFailed."""
    assert solve("divide 10 by 0") == EvalFailed(
        message="Division by zero is not allowed", kind=EvalErrorKind.DIVISION_BY_ZERO
    )
    assert solve("square root of -4").kind is EvalErrorKind.NEGATIVE_SQUARE_ROOT


@pytest.mark.parametrize("query,kind", [
    ("", ParseErrorKind.EMPTY_QUERY),
    ("what is the weather", ParseErrorKind.UNRECOGNIZED_QUERY),
    ("divide 1 by 0", EvalErrorKind.DIVISION_BY_ZERO),
])
def test_calculate_raises_calculation_error(query: str, kind: object) -> None:
    """calculate raises CalculationError carrying the outcome's message and kind."""
    with pytest.raises(CalculationError) as exc_info:
        calculate(query)
    assert exc_info.value.kind is kind
    assert str(exc_info.value) == exc_info.value.message


def test_calculation_error_is_value_error() -> None:
    """Callers can handle CalculationError as a ValueError."""
    with pytest.raises(ValueError):
        calculate("sqrt of -1")
