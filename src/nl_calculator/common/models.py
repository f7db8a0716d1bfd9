"""Pydantic models for operation requests and their outcomes."""
from enum import Enum
from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field

from nl_calculator.common.errors import EvalErrorKind, ParseErrorKind


class OperationKind(str, Enum):
    """The eight arithmetic intents a query can be classified into."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    PERCENTAGE = "percentage"
    AVERAGE = "average"
    SQUARE_ROOT = "sqrt"
    POWER = "power"


class Arity(BaseModel):
    """
    Operand count policy of an operation.

    The classifier uses it as a soft requirement (too few operands means the
    matcher falls through), the evaluator as a hard one (reported error).
    """

    model_config = ConfigDict(frozen=True)

    count: int = Field(..., ge=1, description="Exact or minimum number of operands")
    exact: bool = Field(..., description="True if exactly `count` operands are required")
    message: str = Field(..., description="Error reported when the policy is violated")

    def accepts(self, size: int) -> bool:
        """
        Check whether an operand count satisfies the policy.

        :param int size: Number of operands

        :return: True if the count is allowed
        :rtype: bool
        """
        return size == self.count if self.exact else size >= self.count


ARITY: Dict[OperationKind, Arity] = {
    OperationKind.ADD: Arity(count=2, exact=False, message="Addition requires at least two numbers"),
    OperationKind.SUBTRACT: Arity(count=2, exact=True, message="Subtraction requires exactly two numbers"),
    OperationKind.MULTIPLY: Arity(count=2, exact=False, message="Multiplication requires at least two numbers"),
    OperationKind.DIVIDE: Arity(count=2, exact=True, message="Division requires exactly two numbers"),
    OperationKind.PERCENTAGE: Arity(
        count=2, exact=True, message="Percentage calculation requires exactly two numbers"
    ),
    OperationKind.AVERAGE: Arity(
        count=2, exact=False, message="I need at least two numbers to calculate an average"
    ),
    OperationKind.SQUARE_ROOT: Arity(count=1, exact=True, message="Square root requires exactly one number"),
    OperationKind.POWER: Arity(count=2, exact=True, message="Exponentiation requires exactly two numbers"),
}


class Parsed(BaseModel):
    """A query successfully classified into an operation and its canonical operands."""

    model_config = ConfigDict(frozen=True)

    operation: OperationKind = Field(..., description="Classified operation")
    operands: List[float] = Field(..., description="Operands in canonical order")


class ParseFailed(BaseModel):
    """A query that could not be classified."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="User-facing failure message")
    kind: ParseErrorKind = Field(..., description="Failure category")


class Evaluated(BaseModel):
    """Result of a successfully evaluated operation."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Unrounded double-precision result")


class EvalFailed(BaseModel):
    """An operation request rejected by the evaluator."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="User-facing failure message")
    kind: EvalErrorKind = Field(..., description="Failure category")


ParseOutcome = Union[Parsed, ParseFailed]
EvalOutcome = Union[Evaluated, EvalFailed]
