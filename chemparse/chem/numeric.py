import math
import re
from typing import NamedTuple, Optional

from .errors import InvalidQuantity

# digits? ('.' digits)? ([eE] [+-]? digits)? with at least one mantissa digit
_NUMBER_PATTERN = re.compile(r"(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class NumericLiteral(NamedTuple):
    length: int
    value: float


def scan_number(text: str, pos: int = 0) -> Optional[NumericLiteral]:
    """
    Match a numeric literal starting at ``pos``.

    Integers, decimals (``2.5``, ``.5``) and scientific notation
    (``2e-1``, ``1E+3``) are recognized. Characters after the literal are
    never consumed, so ``"2Er"`` yields only ``2``.

    Args:
        text (str): String to scan.
        pos (int): Offset to start matching at.

    Returns:
        Optional[NumericLiteral]: Length of the match and its value,
            or None if no literal starts at ``pos``.

    Raises:
        InvalidQuantity: If the literal overflows to infinity.

    Example:
        >>> scan_number("H2O", 1)
        NumericLiteral(length=1, value=2.0)
        >>> scan_number("H2e-1O", 1)
        NumericLiteral(length=4, value=0.2)
        >>> scan_number(".O") is None
        True
    """
    match = _NUMBER_PATTERN.match(text, pos)
    if match is None:
        return None
    value = float(match.group())
    if not math.isfinite(value):
        raise InvalidQuantity(match.group(), pos)
    return NumericLiteral(match.end() - pos, value)
