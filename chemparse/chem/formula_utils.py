import logging
from typing import Dict, Union

from .Formula import Formula
from .Tolerance import QuantityTolerance, as_tolerance
from .constants import DEFAULT_COMPARE_TOLERANCE, MAX_NESTING_DEPTH
from .errors import FormulaError

logger = logging.getLogger(__name__)


def parse(formula: str, max_depth: int = MAX_NESTING_DEPTH) -> Formula:
    """
    Parse a formula string into element quantities and an optional charge.

    Args:
        formula (str): Formula such as "CuSO4·5H2O", "K4[Fe(CN)6]" or "SO4^2-".
        max_depth (int): Maximum bracket nesting depth accepted.

    Returns:
        Formula: ``.quantities`` maps element symbols to quantities,
            ``.charge`` is the net charge or None.

    Raises:
        InvalidInputType: If formula is not a string.
        FormulaError: If the formula is malformed.
    """
    return Formula.parse(formula, max_depth=max_depth)


def validate(formula: str) -> bool:
    """
    Return True if the formula parses without error.

    Example:
        >>> validate("Ca(OH)2")
        True
        >>> validate("Ca(OH2")
        False
    """
    try:
        Formula.parse(formula)
    except FormulaError as e:
        logger.debug("Invalid formula %r: %s", formula, e)
        return False
    return True


def compare(
    a: str,
    b: str,
    tolerance: Union[float, QuantityTolerance] = DEFAULT_COMPARE_TOLERANCE,
) -> bool:
    """
    Check whether two formulas describe the same element quantities.

    Both formulas must contain exactly the same elements, and each pair of
    quantities must agree within ``tolerance``. Charges are ignored. A
    formula that fails to parse never compares equal.

    Args:
        a (str): First formula.
        b (str): Second formula.
        tolerance (float | QuantityTolerance): Absolute tolerance, or a
            tolerance object.

    Returns:
        bool: True if the formulas are equivalent.

    Example:
        >>> compare("H2O", "OH2")
        True
        >>> compare("CuSO4·5H2O", "CuSO9H10")
        True
    """
    tol = as_tolerance(tolerance)
    try:
        qa = Formula.parse(a).quantities
        qb = Formula.parse(b).quantities
    except FormulaError as e:
        logger.debug("Cannot compare %r and %r: %s", a, b, e)
        return False

    if qa.keys() != qb.keys():
        return False
    # Check both directions so a relative tolerance stays symmetric
    return all(
        tol.within(qa[elem], qb[elem]) and tol.within(qb[elem], qa[elem])
        for elem in qa
    )


def diff(a: str, b: str) -> Dict[str, float]:
    """
    Element-wise difference ``a - b`` over the union of both element sets.

    Missing elements count as 0 and zero differences are kept.

    Raises:
        FormulaError: If either formula fails to parse.

    Example:
        >>> diff("H2O", "H2O2")
        {'H': 0.0, 'O': -1.0}
    """
    return dict((Formula.parse(a) - Formula.parse(b)).quantities)
