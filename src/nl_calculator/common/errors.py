"""Failure taxonomy shared by the classifier, the evaluator and their callers."""
from enum import Enum


class ParseErrorKind(str, Enum):
    """Why a query could not be turned into an operation request."""

    EMPTY_QUERY = "empty_query"
    UNRECOGNIZED_QUERY = "unrecognized_query"


class EvalErrorKind(str, Enum):
    """Why an operation request could not be computed."""

    INVALID_OPERANDS = "invalid_operands"
    NON_NUMERIC_OPERAND = "non_numeric_operand"
    WRONG_ARITY = "wrong_arity"
    DIVISION_BY_ZERO = "division_by_zero"
    NEGATIVE_SQUARE_ROOT = "negative_square_root"
    UNKNOWN_OPERATION = "unknown_operation"


# Fixed user-facing messages, matched verbatim by callers
EMPTY_QUERY_MESSAGE = "Please enter a query"
UNRECOGNIZED_QUERY_MESSAGE = "I couldn't understand that query. Try something like 'add 5 and 10'"
INVALID_OPERANDS_MESSAGE = "Invalid operands provided"
NON_NUMERIC_OPERAND_MESSAGE = "All operands must be valid numbers"
DIVISION_BY_ZERO_MESSAGE = "Division by zero is not allowed"
NEGATIVE_SQUARE_ROOT_MESSAGE = "Cannot calculate square root of a negative number"
UNKNOWN_OPERATION_MESSAGE = "Unknown operation"


class CalculationError(ValueError):
    """
    Raised by the query facade when a query cannot be classified or evaluated.

    :param str message: Failure message, identical to the outcome message
    :param Enum kind: ParseErrorKind or EvalErrorKind describing the failure
    """

    def __init__(self, message: str, kind: Enum) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
