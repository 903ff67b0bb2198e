import logging

from .chem.Formula import Formula
from .chem.formula_utils import parse, validate, compare, diff
from .chem.charge import ChargeMatch, extract_charge
from .chem.constants import ChargeNotation
from .chem.elements import ELEMENT_SYMBOLS, is_element
from .chem.Tolerance import QuantityTolerance, AbsoluteTolerance, RelativeTolerance
from .chem.errors import (
    FormulaError,
    InvalidInputType,
    UnknownElementSymbol,
    UnmatchedClosingBracket,
    UnmatchedOpeningBracket,
    InvalidCharacter,
    NestingTooDeep,
    InvalidCharge,
    InvalidQuantity,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "Formula",
    "parse",
    "validate",
    "compare",
    "diff",
    "ChargeMatch",
    "ChargeNotation",
    "extract_charge",
    "ELEMENT_SYMBOLS",
    "is_element",
    "QuantityTolerance",
    "AbsoluteTolerance",
    "RelativeTolerance",
    "FormulaError",
    "InvalidInputType",
    "UnknownElementSymbol",
    "UnmatchedClosingBracket",
    "UnmatchedOpeningBracket",
    "InvalidCharacter",
    "NestingTooDeep",
    "InvalidCharge",
    "InvalidQuantity",
]
