import logging
import math
import re
from collections import OrderedDict
from numbers import Real
from typing import Dict, Iterable, Optional, Tuple, Union

from rdkit import Chem
from rdkit.Chem import rdMolDescriptors

from .charge import extract_charge
from .constants import MAX_NESTING_DEPTH, ChargeNotation
from .elements import is_element
from .errors import InvalidInputType, InvalidQuantity, UnknownElementSymbol
from .normalize import normalize, split_segments
from .numeric import scan_number
from .segment import parse_segment

logger = logging.getLogger(__name__)


class Formula:
    def __init__(
            self,
            quantities: Dict[str, float],
            charge: Optional[Union[int, float]] = None,
            raw_formula: str = "",
            charge_notation: Optional[ChargeNotation] = None,
            ):
        # OrderedDict to preserve Hill order: C, H, then alphabetical
        self._quantities: OrderedDict[str, float]
        self._charge = charge
        self._raw_formula: str = raw_formula
        self._charge_notation = charge_notation

        for elem in quantities:
            if not is_element(elem):
                raise UnknownElementSymbol(elem)
        self._reorder_quantities({elem: float(q) for elem, q in quantities.items()})

    @property
    def quantities(self) -> Dict[str, float]:
        """
        Return a dictionary of elements and their quantities.
        """
        return OrderedDict(self._quantities)

    @property
    def charge(self) -> Optional[Union[int, float]]:
        """
        Return the net charge, or None if the formula carries no charge annotation.
        """
        return self._charge

    @property
    def charge_notation(self) -> Optional[ChargeNotation]:
        """
        Return the notation the charge was written in, if it was parsed from text.
        """
        return self._charge_notation

    @property
    def raw_formula(self) -> str:
        """
        Return the raw formula string as provided during initialization.
        """
        return self._raw_formula

    @property
    def is_nonnegative(self) -> bool:
        """
        Return True if all element quantities are non-negative (>= 0).

        Example:
            >>> Formula.parse("C6H12O6").is_nonnegative
            True
            >>> (Formula.parse("H2O") - Formula.parse("H2O2")).is_nonnegative
            False
        """
        return all(q >= 0 for q in self._quantities.values())

    def __repr__(self):
        return f"Formula({self.__str__()})"

    def __str__(self) -> str:
        return self.to_string(no_charge=False)

    def __hash__(self) -> int:
        return hash((frozenset(self._quantities.items()), self._charge))

    def __contains__(self, item: Union['Formula', str]) -> bool:
        if not self.is_nonnegative:
            raise ValueError("Containment check is only supported for non-negative formulas.")

        if isinstance(item, str):
            item = Formula.parse(item)
        elif not isinstance(item, Formula):
            raise TypeError(f"Containment check only supports Formula or str, not {type(item)}")

        return all(self._quantities.get(elem, 0.0) >= q for elem, q in item._quantities.items())

    def __eq__(self, other: 'Formula') -> bool:
        if not isinstance(other, Formula):
            return False

        return dict(self._quantities) == dict(other._quantities) and self._charge == other._charge

    def _parse_formula(self, formula: str, max_depth: int = MAX_NESTING_DEPTH):
        """
        Parse a chemical formula into element quantities and an optional charge.
        """
        normalized = normalize(formula)

        # Extract and remove charge
        body, charge = extract_charge(normalized)
        if charge is not None:
            self._charge = charge.value
            self._charge_notation = charge.notation

        totals: Dict[str, float] = {}
        for segment in split_segments(body):
            coefficient = 1.0
            literal = scan_number(segment)
            if literal is not None:
                coefficient = literal.value
                segment = segment[literal.length:]
                if not segment:
                    # Bare multiplier, e.g. the "5" in "CuSO4·5"
                    continue

            for elem, q in parse_segment(segment, max_depth=max_depth).items():
                if not is_element(elem):
                    raise UnknownElementSymbol(elem, segment)
                totals[elem] = totals.get(elem, 0.0) + q * coefficient

        for elem, q in totals.items():
            # Products of finite literals can still overflow
            if not math.isfinite(q):
                raise InvalidQuantity(f"{elem}={q}")

        logger.debug("Parsed formula %r -> %r (charge=%r)", formula, totals, self._charge)
        self._reorder_quantities(totals)

    def __add__(self, other: 'Formula') -> 'Formula':
        combined = dict(self._quantities)

        for elem, q in other._quantities.items():
            combined[elem] = combined.get(elem, 0.0) + q

        return Formula(combined, _combine_charges(self._charge, other._charge, 1))

    def __sub__(self, other: 'Formula') -> 'Formula':
        combined = dict(self._quantities)

        for elem, q in other._quantities.items():
            combined[elem] = combined.get(elem, 0.0) - q

        return Formula(combined, _combine_charges(self._charge, other._charge, -1))

    def __mul__(self, factor: Real) -> "Formula":
        """
        Multiply formula by a real factor.
        Example: H2O * 2 -> H4O2
        """
        if isinstance(factor, bool) or not isinstance(factor, Real):
            raise TypeError(f"Formula can only be multiplied by a real number, not {type(factor)}")

        new_quantities = {elem: q * factor for elem, q in self._quantities.items()}
        new_charge = None
        if self._charge is not None:
            new_charge = _as_int_if_integral(self._charge * factor)
        return Formula(new_quantities, new_charge, self._raw_formula, self._charge_notation)

    def __rmul__(self, factor: Real) -> "Formula":
        """Support reversed multiplication: 2 * Formula(...)"""
        return self.__mul__(factor)

    @property
    def value(self) -> str:
        """
        Return the formula as a string with charge.
        """
        return self.to_string(no_charge=False)

    @property
    def plain(self) -> str:
        """
        Return the formula as a plain string without charge.
        """
        return self.to_string(no_charge=True)

    def _reorder_quantities(self, quantities: Dict[str, float]):
        """Apply Hill system ordering to elements and store as OrderedDict."""
        ordered = Formula._reorder_element_keys(quantities.keys())
        self._quantities = OrderedDict((k, quantities[k]) for k in ordered)

    @staticmethod
    def _reorder_element_keys(elements: Iterable[str]) -> Tuple[str, ...]:
        """
        Reorder elements according to Hill system.
        """
        mol = Chem.RWMol()
        for elem in elements:
            atom = Chem.Atom(elem)
            atom.SetNoImplicit(True)
            mol.AddAtom(atom)
        mol = mol.GetMol()
        mol.UpdatePropertyCache(strict=False)

        formula_str = rdMolDescriptors.CalcMolFormula(mol)
        matches = re.findall(r"([A-Z][a-z]?)(\d*)", formula_str)

        return tuple(m[0] for m in matches)

    def to_string(self, no_charge: bool = False) -> str:
        """
        Render the formula in Hill order.

        Integral quantities are written without decimals and a quantity of 1
        is omitted. Negative quantities are prefixed with "-", zero quantities
        are skipped. The charge is appended in caret notation.

        Example:
            >>> Formula.parse("SO4²⁻").to_string()
            'O4S^2-'
        """
        parts = []
        for elem, q in self._quantities.items():
            if q > 0:
                parts.append(f"{elem}{_format_quantity(q)}")
            elif q < 0:
                parts.append(f"-{elem}{_format_quantity(-q)}")
        formula = "".join(parts)

        if not no_charge and self._charge:
            magnitude = _format_quantity(abs(self._charge))
            formula += f"^{magnitude}{'+' if self._charge > 0 else '-'}"
        return formula

    def copy(self) -> 'Formula':
        return Formula(self._quantities, self._charge, self._raw_formula, self._charge_notation)

    @classmethod
    def parse(cls, formula_str: str, max_depth: int = MAX_NESTING_DEPTH, store_raw: bool = True) -> 'Formula':
        """
        Create a Formula object from a formula string.

        Args:
            formula_str (str): Chemical formula string to parse.
            max_depth (int): Maximum bracket nesting depth accepted.
            store_raw (bool): If True, save the original input string to _raw_formula.
                            If False, _raw_formula will remain an empty string.

        Returns:
            Formula: Parsed Formula object.

        Raises:
            InvalidInputType: If formula_str is not a string.
            FormulaError: If the formula is malformed.

        Example:
            >>> Formula.parse("K4[Fe(CN)6]").quantities
            OrderedDict([('C', 6.0), ('Fe', 1.0), ('K', 4.0), ('N', 6.0)])
            >>> Formula.parse("CH3COO^-").charge
            -1
        """
        if not isinstance(formula_str, str):
            raise InvalidInputType(formula_str)

        f = Formula(quantities={})
        f._parse_formula(formula_str, max_depth=max_depth)
        if store_raw:
            f._raw_formula = formula_str
        return f

    @staticmethod
    def empty() -> 'Formula':
        """
        Return an empty Formula object (no elements, no charge).
        """
        return Formula(quantities={})


def _combine_charges(a, b, sign: int):
    if a is None and b is None:
        return None
    return (a or 0) + sign * (b or 0)


def _as_int_if_integral(value):
    if float(value).is_integer():
        return int(value)
    return value


def _format_quantity(q: float) -> str:
    if float(q).is_integer():
        return "" if q == 1 else str(int(q))
    return repr(float(q))
