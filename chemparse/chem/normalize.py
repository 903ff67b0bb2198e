"""Normalize formula text before charge extraction and segmentation."""

import re
from typing import List

from .constants import HYDRATE_SEPARATOR, HYDRATE_SEPARATOR_ALIASES, SUBSCRIPT_DIGITS

_WHITESPACE = re.compile(r"\s+")
_DECIMAL_COMMA = re.compile(r"(?<=[0-9]),(?=[0-9])")


def normalize(formula: str) -> str:
    """
    Canonicalize a raw formula string.

    Removes whitespace, reads ``1,5`` as ``1.5`` and drops any other comma,
    maps every hydrate separator alias to ``·`` and converts subscript digits
    to ASCII digits.

    Example:
        >>> normalize("CuSO4 * 5H2O")
        'CuSO4·5H2O'
        >>> normalize("C₁,₅O₃")
        'C1.5O3'
    """
    formula = _WHITESPACE.sub("", formula)
    formula = formula.translate(SUBSCRIPT_DIGITS)
    formula = _DECIMAL_COMMA.sub(".", formula)
    formula = formula.replace(",", "")
    for alias in HYDRATE_SEPARATOR_ALIASES:
        formula = formula.replace(alias, HYDRATE_SEPARATOR)
    return formula


def split_segments(formula: str) -> List[str]:
    """Split a normalized formula into its non-empty hydrate segments."""
    return [part for part in formula.split(HYDRATE_SEPARATOR) if part]
