from enum import Enum

# Disable RDKit logging
from rdkit import RDLogger
lg = RDLogger.logger()
lg.setLevel(RDLogger.CRITICAL)  # Only show critical errors, suppress warnings and other messages


class ChargeNotation(Enum):
    CARET = "caret"
    SUPERSCRIPT = "superscript"


# Canonical separator between hydrate segments, e.g. CuSO4·5H2O
HYDRATE_SEPARATOR = "·"
HYDRATE_SEPARATOR_ALIASES = (
    "_",
    "⋅",  # dot operator
    "∙",  # bullet operator
    "•",  # bullet
    "*",
)

SUBSCRIPT_DIGITS = str.maketrans("₀₁₂₃₄₅₆₇₈₉", "0123456789")
SUPERSCRIPT_CHARGE = str.maketrans("⁰¹²³⁴⁵⁶⁷⁸⁹⁺⁻", "0123456789+-")

OPENING_BRACKETS = "([{"
CLOSING_BRACKETS = ")]}"

DEFAULT_COMPARE_TOLERANCE = 1e-12
MAX_NESTING_DEPTH = 256
MAX_CHARGE_DIGITS = 9
