"""Validate and compute operation requests."""
from functools import reduce
import math
import operator
from typing import Callable, Dict, List, Sequence, Union

import numpy as np

from nl_calculator.common.errors import (
    DIVISION_BY_ZERO_MESSAGE,
    EvalErrorKind,
    INVALID_OPERANDS_MESSAGE,
    NEGATIVE_SQUARE_ROOT_MESSAGE,
    NON_NUMERIC_OPERAND_MESSAGE,
    UNKNOWN_OPERATION_MESSAGE,
)
from nl_calculator.common.models import ARITY, EvalFailed, EvalOutcome, Evaluated, OperationKind


# Type alias for operation functions (arity-checked operands -> outcome)
OperationFn = Callable[[List[float]], EvalOutcome]


def _add(operands: List[float]) -> EvalOutcome:
    return Evaluated(value=reduce(operator.add, operands, 0.0))


def _subtract(operands: List[float]) -> EvalOutcome:
    return Evaluated(value=operands[0] - operands[1])


def _multiply(operands: List[float]) -> EvalOutcome:
    return Evaluated(value=reduce(operator.mul, operands, 1.0))


def _divide(operands: List[float]) -> EvalOutcome:
    dividend, divisor = operands
    if divisor == 0:
        return EvalFailed(message=DIVISION_BY_ZERO_MESSAGE, kind=EvalErrorKind.DIVISION_BY_ZERO)
    return Evaluated(value=dividend / divisor)


def _percentage(operands: List[float]) -> EvalOutcome:
    percent, base = operands
    return Evaluated(value=(percent / 100) * base)


def _average(operands: List[float]) -> EvalOutcome:
    return Evaluated(value=reduce(operator.add, operands, 0.0) / len(operands))


def _square_root(operands: List[float]) -> EvalOutcome:
    (number,) = operands
    if number < 0:
        return EvalFailed(message=NEGATIVE_SQUARE_ROOT_MESSAGE, kind=EvalErrorKind.NEGATIVE_SQUARE_ROOT)
    return Evaluated(value=math.sqrt(number))


def _power(operands: List[float]) -> EvalOutcome:
    """
    Raise the base to the exponent with IEEE-754 semantics.

    Python's float ** raises on overflow or returns complex numbers for
    negative bases, so numpy is used to get inf/nan instead.
    """
    base, exponent = operands
    with np.errstate(all="ignore"):
        value = np.float_power(base, exponent)
    return Evaluated(value=float(value))


# Mapping of operations to their implementation, arity is checked beforehand via ARITY
OPERATIONS: Dict[OperationKind, OperationFn] = {
    OperationKind.ADD: _add,
    OperationKind.SUBTRACT: _subtract,
    OperationKind.MULTIPLY: _multiply,
    OperationKind.DIVIDE: _divide,
    OperationKind.PERCENTAGE: _percentage,
    OperationKind.AVERAGE: _average,
    OperationKind.SQUARE_ROOT: _square_root,
    OperationKind.POWER: _power,
}


class Evaluator:
    """
    Compute the result of an operation request.

    Checks, in order:
        1. Operands form a non-empty list or tuple
        2. Every operand is a finite int or float (bool excluded)
        3. The operation is a known OperationKind (or its tag)
        4. The operand count satisfies the operation's arity
        5. Operation-specific domain rules (division by zero, negative root)

    All arithmetic is double precision without intermediate rounding.
    """

    @staticmethod
    def _is_number(value: object) -> bool:
        """
        Determine if an operand is a usable real number.

        :param object value: Operand

        :return: True for finite int/float values, False otherwise
        :rtype: bool
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        try:
            return math.isfinite(value)
        except OverflowError:
            # int too large to be represented as a double
            return False

    @staticmethod
    def evaluate(operation: Union[OperationKind, str], operands: Sequence[float]) -> EvalOutcome:
        """
        Validate operands and compute the operation.

        :param OperationKind operation: Operation to perform, or its string tag
        :param Sequence[float] operands: Operands in canonical order

        :return: Evaluated value or EvalFailed
        :rtype: EvalOutcome
        """
        if not isinstance(operands, (list, tuple)) or not operands:
            return EvalFailed(message=INVALID_OPERANDS_MESSAGE, kind=EvalErrorKind.INVALID_OPERANDS)

        if not all(Evaluator._is_number(value) for value in operands):
            return EvalFailed(message=NON_NUMERIC_OPERAND_MESSAGE, kind=EvalErrorKind.NON_NUMERIC_OPERAND)

        try:
            kind = OperationKind(operation)
        except ValueError:
            return EvalFailed(message=UNKNOWN_OPERATION_MESSAGE, kind=EvalErrorKind.UNKNOWN_OPERATION)

        arity = ARITY[kind]
        if not arity.accepts(len(operands)):
            return EvalFailed(message=arity.message, kind=EvalErrorKind.WRONG_ARITY)

        return OPERATIONS[kind]([float(value) for value in operands])


evaluate = Evaluator.evaluate
