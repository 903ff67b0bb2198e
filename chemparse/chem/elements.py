"""
Catalog of valid element symbols.
"""
from .errors import UnknownElementSymbol

# Ordered by atomic number: ELEMENT_SYMBOLS[0] is hydrogen (Z=1)
ELEMENT_SYMBOLS = (
    "H",  "He", "Li", "Be", "B",  "C",  "N",  "O",  "F",  "Ne",
    "Na", "Mg", "Al", "Si", "P",  "S",  "Cl", "Ar", "K",  "Ca",
    "Sc", "Ti", "V",  "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
    "Ga", "Ge", "As", "Se", "Br", "Kr", "Rb", "Sr", "Y",  "Zr",
    "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd", "In", "Sn",
    "Sb", "Te", "I",  "Xe", "Cs", "Ba", "La", "Ce", "Pr", "Nd",
    "Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho", "Er", "Tm", "Yb",
    "Lu", "Hf", "Ta", "W",  "Re", "Os", "Ir", "Pt", "Au", "Hg",
    "Tl", "Pb", "Bi", "Po", "At", "Rn", "Fr", "Ra", "Ac", "Th",
    "Pa", "U",  "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es", "Fm",
    "Md", "No", "Lr", "Rf", "Db", "Sg", "Bh", "Hs", "Mt", "Ds",
    "Rg", "Cn", "Nh", "Fl", "Mc", "Lv", "Ts", "Og",
)

_ATOMIC_NUMBERS = {symbol: z for z, symbol in enumerate(ELEMENT_SYMBOLS, start=1)}


def is_element(symbol: str) -> bool:
    """
    Return True if the symbol is a known element symbol.

    Example:
        >>> is_element("Fe")
        True
        >>> is_element("Xx")
        False
    """
    return symbol in _ATOMIC_NUMBERS


def atomic_number(symbol: str) -> int:
    """
    Return the atomic number of an element symbol.

    Raises:
        UnknownElementSymbol: If the symbol is not in the catalog.
    """
    try:
        return _ATOMIC_NUMBERS[symbol]
    except KeyError:
        raise UnknownElementSymbol(symbol) from None
