from .Formula import Formula
from .formula_utils import parse, validate, compare, diff
from .charge import ChargeMatch, extract_charge
from .constants import ChargeNotation
from .elements import ELEMENT_SYMBOLS, is_element, atomic_number
from .numeric import NumericLiteral, scan_number
from .segment import parse_segment
from .Tolerance import QuantityTolerance, AbsoluteTolerance, RelativeTolerance
from .errors import (
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
    "atomic_number",
    "NumericLiteral",
    "scan_number",
    "parse_segment",
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
