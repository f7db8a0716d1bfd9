"""Extract numeric tokens from query text."""
import re
from typing import List

# Optional sign, digits, optional decimal point with optional fraction digits
NUMBER_PATTERN: re.Pattern = re.compile(r"-?\d+\.?\d*", re.ASCII)


def extract_numbers(text: str) -> List[float]:
    """
    Return every number found in the text, left to right.

    Examples:
        - "add 5 and -10.5" -> [5.0, -10.5]
        - "10, 20, 30" -> [10.0, 20.0, 30.0]

    :param str text: Text to scan

    :return: Numbers in order of appearance, empty if none
    :rtype: List[float]
    """
    numbers: List[float] = []
    for token in NUMBER_PATTERN.findall(text):
        try:
            numbers.append(float(token))
        except ValueError:
            continue
    return numbers
