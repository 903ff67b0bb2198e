import logging
import re
from typing import NamedTuple, Optional, Tuple

from .constants import MAX_CHARGE_DIGITS, ChargeNotation, SUPERSCRIPT_CHARGE
from .errors import InvalidCharge

logger = logging.getLogger(__name__)

_CARET_PATTERN = re.compile(r"\^(?:([0-9]*)([+-])|([+-])([0-9]+))$")
_SUPERSCRIPT_RUN_PATTERN = re.compile(r"[⁰¹²³⁴⁵⁶⁷⁸⁹⁺⁻]+$")
_DIGITS_SIGN_PATTERN = re.compile(r"([0-9]*)([+-])")


class ChargeMatch(NamedTuple):
    """A charge annotation found at the end of a formula."""
    notation: ChargeNotation
    sign: int
    magnitude: int

    @property
    def value(self) -> int:
        return self.sign * self.magnitude


def charge_from_str(digits: str, sign: str) -> Tuple[int, int]:
    """
    Convert the digit and sign parts of a charge annotation.

    Args:
        digits (str): Magnitude digits, may be empty (magnitude 1).
        sign (str): "+" or "-".

    Returns:
        Tuple[int, int]: (sign, magnitude), sign being 1 or -1.

    Raises:
        InvalidCharge: If the magnitude has more than MAX_CHARGE_DIGITS digits.
    """
    if sign == "+":
        signum = 1
    elif sign == "-":
        signum = -1
    else:
        raise ValueError(f"Invalid charge sign: {sign}")
    if len(digits) > MAX_CHARGE_DIGITS:
        raise InvalidCharge(digits + sign, f"magnitude exceeds {MAX_CHARGE_DIGITS} digits")
    magnitude = int(digits) if digits else 1
    return signum, magnitude


def _match_caret(formula: str) -> Optional[Tuple[int, ChargeMatch]]:
    match = _CARET_PATTERN.search(formula)
    if match is None:
        return None
    if match.group(2) is not None:
        sign, magnitude = charge_from_str(match.group(1), match.group(2))
    else:
        sign, magnitude = charge_from_str(match.group(4), match.group(3))
    return match.start(), ChargeMatch(ChargeNotation.CARET, sign, magnitude)


def _match_superscript(formula: str) -> Optional[Tuple[int, ChargeMatch]]:
    match = _SUPERSCRIPT_RUN_PATTERN.search(formula)
    if match is None:
        return None
    ascii_run = match.group().translate(SUPERSCRIPT_CHARGE)
    reduced = _DIGITS_SIGN_PATTERN.fullmatch(ascii_run)
    if reduced is None:
        logger.debug("Superscript suffix %r is not a charge, left in formula", match.group())
        return None
    sign, magnitude = charge_from_str(reduced.group(1), reduced.group(2))
    return match.start(), ChargeMatch(ChargeNotation.SUPERSCRIPT, sign, magnitude)


def extract_charge(formula: str) -> Tuple[str, Optional[ChargeMatch]]:
    """
    Strip a trailing ionic charge annotation from a normalized formula.

    Caret notation (``SO4^2-``, ``NH4^+``, ``PO4^-3``) is tried first,
    then Unicode superscripts (``SO4²⁻``). Only the end of the string is
    inspected.

    Args:
        formula (str): Whitespace- and comma-normalized formula.

    Returns:
        Tuple[str, Optional[ChargeMatch]]: The formula without its charge
            suffix, and the charge or None when there is no annotation.

    Example:
        >>> extract_charge("SO4^2-")
        ('SO4', ChargeMatch(notation=<ChargeNotation.CARET: 'caret'>, sign=-1, magnitude=2))
        >>> extract_charge("H2O")
        ('H2O', None)
    """
    for matcher in (_match_caret, _match_superscript):
        found = matcher(formula)
        if found is not None:
            start, charge = found
            return formula[:start], charge
    return formula, None
