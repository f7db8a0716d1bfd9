"""Normalize raw query text before classification."""
from typing import Union

from nl_calculator.common.errors import EMPTY_QUERY_MESSAGE, ParseErrorKind
from nl_calculator.common.models import ParseFailed


def normalize(query: object) -> Union[str, ParseFailed]:
    """
    Trim and lower-case a raw query.

    Matching downstream is case-insensitive, so case information is dropped here.

    :param object query: Raw user input, expected to be a string

    :return: Normalized text, or ParseFailed if the input is not text or is blank
    :rtype: Union[str, ParseFailed]
    """
    if not isinstance(query, str):
        return ParseFailed(message=EMPTY_QUERY_MESSAGE, kind=ParseErrorKind.EMPTY_QUERY)

    text: str = query.strip().lower()
    if not text:
        return ParseFailed(message=EMPTY_QUERY_MESSAGE, kind=ParseErrorKind.EMPTY_QUERY)
    return text
