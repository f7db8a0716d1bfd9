"""Classify natural-language arithmetic queries into operation requests."""
import re
from typing import Callable, List, NamedTuple, Optional, Tuple

from nl_calculator.common.errors import ParseErrorKind, UNRECOGNIZED_QUERY_MESSAGE
from nl_calculator.common.models import ARITY, OperationKind, ParseFailed, ParseOutcome, Parsed
from nl_calculator.engine.normalizer import normalize
from nl_calculator.engine.numbers import extract_numbers


# Type alias for operand extractors (normalized query and pattern match -> operands)
ExtractorFn = Callable[[str, re.Match], List[float]]


class MatchRule(NamedTuple):
    """One surface phrasing of an operation and how its operands are read."""

    pattern: re.Pattern
    extract: ExtractorFn


def _all_numbers(query: str, match: re.Match) -> List[float]:
    """Every number of the whole query, in order of appearance."""
    return extract_numbers(query)


def _leading_numbers(count: int) -> ExtractorFn:
    """
    Build an extractor keeping the first `count` numbers of the whole query.

    :param int count: Number of operands to keep

    :return: Extractor function
    :rtype: ExtractorFn
    """

    def extract(query: str, match: re.Match) -> List[float]:
        return extract_numbers(query)[:count]

    return extract


def _group_firsts(*groups: int) -> ExtractorFn:
    """
    Build an extractor taking the first number of each captured group.

    Groups are read in the given order, which is how non-commutative phrasings
    such as "subtract A from B" are turned into the canonical [B, A].

    :param int groups: Capture group indexes, in canonical operand order

    :return: Extractor function, yielding an empty list if any group has no number
    :rtype: ExtractorFn
    """

    def extract(query: str, match: re.Match) -> List[float]:
        operands: List[float] = []
        for group in groups:
            numbers = extract_numbers(match.group(group))
            if not numbers:
                return []
            operands.append(numbers[0])
        return operands

    return extract


def _squared(query: str, match: re.Match) -> List[float]:
    """Base from the span before "squared", exponent fixed to 2."""
    numbers = extract_numbers(match.group(1))
    if not numbers:
        return []
    return [numbers[0], 2.0]


# Matchers in priority order: the first operation whose rule yields enough operands wins
MATCHERS: Tuple[Tuple[OperationKind, Tuple[MatchRule, ...]], ...] = (
    (OperationKind.ADD, (
        MatchRule(re.compile(r"add\s+(.+)"), _all_numbers),
        MatchRule(re.compile(r"sum\s+of\s+(.+)"), _all_numbers),
        MatchRule(re.compile(r"(.+)\s+plus\s+(.+)"), _all_numbers),
    )),
    (OperationKind.SUBTRACT, (
        MatchRule(re.compile(r"subtract\s+(.+?)\s+from\s+(.+)"), _group_firsts(2, 1)),
        MatchRule(re.compile(r"(.+?)\s+minus\s+(.+)"), _group_firsts(1, 2)),
    )),
    (OperationKind.MULTIPLY, (
        MatchRule(re.compile(r"multiply\s+(.+?)\s+by\s+(.+)"), _leading_numbers(2)),
        MatchRule(re.compile(r"(.+?)\s+times\s+(.+)"), _leading_numbers(2)),
    )),
    (OperationKind.DIVIDE, (
        MatchRule(re.compile(r"divide\s+(.+?)\s+by\s+(.+)"), _leading_numbers(2)),
        MatchRule(re.compile(r"(.+?)\s+divided\s+by\s+(.+)"), _leading_numbers(2)),
    )),
    (OperationKind.PERCENTAGE, (
        MatchRule(re.compile(r"(.+?)\s*%?\s*percent\s+of\s+(.+)"), _leading_numbers(2)),
        MatchRule(re.compile(r"(.+?)%\s+of\s+(.+)"), _leading_numbers(2)),
    )),
    (OperationKind.AVERAGE, (
        MatchRule(re.compile(r"average\s+of\s+(.+)"), _all_numbers),
        MatchRule(re.compile(r"find\s+the\s+average\s+of\s+(.+)"), _all_numbers),
    )),
    (OperationKind.SQUARE_ROOT, (
        MatchRule(re.compile(r"square\s+root\s+of\s+(.+)"), _leading_numbers(1)),
        MatchRule(re.compile(r"sqrt\s+of\s+(.+)"), _leading_numbers(1)),
    )),
    (OperationKind.POWER, (
        MatchRule(re.compile(r"(.+?)\s+squared"), _squared),
        MatchRule(re.compile(r"(.+?)\s+to\s+the\s+power\s+of\s+(.+)"), _leading_numbers(2)),
    )),
)


class QueryClassifier:
    """
    Map free-form arithmetic queries to an operation and canonical operands.

    Design constraints:
        - Stateless, every call works on local data only
        - Never raises, failures are returned as ParseFailed

    Algorithm:
        1. Normalize the query (trim, lower-case)
        2. Try each operation's rules in the fixed MATCHERS order
        3. A rule wins when its pattern is found and its extractor yields
           an operand count accepted by the operation's arity
        4. Otherwise fall back to an "unrecognized query" failure

    Patterns are searched, not anchored, so keywords are recognized anywhere
    in the text (e.g. "what is 20 percent of 150").
    """

    @staticmethod
    def match(query: str, operation: OperationKind, rules: Tuple[MatchRule, ...]) -> Optional[Parsed]:
        """
        Try the rules of a single operation against a normalized query.

        :param str query: Normalized query text
        :param OperationKind operation: Operation the rules belong to
        :param tuple rules: Surface phrasings of the operation

        :return: Parsed request, or None if no rule yields enough operands
        :rtype: Optional[Parsed]
        """
        arity = ARITY[operation]
        for rule in rules:
            found = rule.pattern.search(query)
            if found is None:
                continue
            operands = rule.extract(query, found)
            if arity.accepts(len(operands)):
                return Parsed(operation=operation, operands=operands)
        return None

    @staticmethod
    def classify(text: object) -> ParseOutcome:
        """
        Classify a raw query.

        :param object text: Raw user input

        :return: Parsed request or ParseFailed
        :rtype: ParseOutcome
        """
        query = normalize(text)
        if isinstance(query, ParseFailed):
            return query

        for operation, rules in MATCHERS:
            parsed = QueryClassifier.match(query, operation, rules)
            if parsed is not None:
                return parsed

        return ParseFailed(message=UNRECOGNIZED_QUERY_MESSAGE, kind=ParseErrorKind.UNRECOGNIZED_QUERY)


classify = QueryClassifier.classify
