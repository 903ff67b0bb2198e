import logging
from typing import Dict, List

from .constants import CLOSING_BRACKETS, MAX_NESTING_DEPTH, OPENING_BRACKETS
from .elements import is_element
from .errors import (
    InvalidCharacter,
    NestingTooDeep,
    UnknownElementSymbol,
    UnmatchedClosingBracket,
    UnmatchedOpeningBracket,
)
from .numeric import scan_number

logger = logging.getLogger(__name__)


def _merge_into(target: Dict[str, float], source: Dict[str, float], factor: float = 1.0):
    for elem, quantity in source.items():
        target[elem] = target.get(elem, 0.0) + quantity * factor


def parse_segment(segment: str, max_depth: int = MAX_NESTING_DEPTH) -> Dict[str, float]:
    """
    Parse one hydrate segment into element quantities.

    The segment must already have its leading coefficient and any charge
    annotation removed. Each bracket level gets its own accumulator on a
    stack; closing a bracket scales that accumulator by the number that
    follows and folds it into its parent. ``()``, ``[]`` and ``{}`` are
    interchangeable.

    Args:
        segment (str): Segment text, e.g. "K4[Fe(CN)6]".
        max_depth (int): Maximum number of simultaneously open brackets.

    Returns:
        Dict[str, float]: Element symbol to quantity.

    Raises:
        UnknownElementSymbol: A symbol is not a known element.
        UnmatchedClosingBracket: A closing bracket has no opening partner.
        UnmatchedOpeningBracket: A bracket is never closed.
        InvalidCharacter: Any other unexpected character.
        NestingTooDeep: More than ``max_depth`` brackets are open at once.

    Example:
        >>> parse_segment("K4[Fe(CN)6]")
        {'K': 4.0, 'Fe': 1.0, 'C': 6.0, 'N': 6.0}
    """
    stack: List[Dict[str, float]] = [{}]
    i = 0
    n = len(segment)

    while i < n:
        ch = segment[i]

        if ch in OPENING_BRACKETS:
            if len(stack) > max_depth:
                raise NestingTooDeep(i, segment, max_depth)
            stack.append({})
            i += 1

        elif ch in CLOSING_BRACKETS:
            if len(stack) <= 1:
                raise UnmatchedClosingBracket(i, segment)
            i += 1
            multiplier = 1.0
            literal = scan_number(segment, i)
            if literal is not None:
                multiplier = literal.value
                i += literal.length
            group = stack.pop()
            _merge_into(stack[-1], group, multiplier)

        elif ch.isupper():
            start = i
            i += 1
            while i < n and segment[i].islower():
                i += 1
            symbol = segment[start:i]

            count = 1.0
            literal = scan_number(segment, i)
            if literal is not None:
                count = literal.value
                i += literal.length

            if not is_element(symbol):
                raise UnknownElementSymbol(symbol, segment)
            top = stack[-1]
            top[symbol] = top.get(symbol, 0.0) + count

        else:
            raise InvalidCharacter(ch, i, segment)

    if len(stack) != 1:
        raise UnmatchedOpeningBracket(segment)

    logger.debug("Parsed segment %r -> %r", segment, stack[0])
    return stack[0]
