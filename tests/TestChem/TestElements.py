import unittest

from rdkit import Chem

from chemparse.chem.elements import ELEMENT_SYMBOLS, atomic_number, is_element
from chemparse.chem.errors import UnknownElementSymbol


class TestElements(unittest.TestCase):
    def test_catalog_size(self):
        self.assertEqual(len(ELEMENT_SYMBOLS), 118)
        self.assertEqual(len(set(ELEMENT_SYMBOLS)), 118)

    def test_symbol_shape(self):
        for symbol in ELEMENT_SYMBOLS:
            self.assertTrue(1 <= len(symbol) <= 2, msg=symbol)
            self.assertTrue(symbol[0].isupper(), msg=symbol)
            self.assertTrue(symbol[1:].islower() or len(symbol) == 1, msg=symbol)

    def test_membership(self):
        self.assertTrue(is_element("H"))
        self.assertTrue(is_element("Og"))
        self.assertFalse(is_element("Xx"))
        self.assertFalse(is_element("h"))
        self.assertFalse(is_element("FE"))

    def test_atomic_number(self):
        self.assertEqual(atomic_number("H"), 1)
        self.assertEqual(atomic_number("Fe"), 26)
        self.assertEqual(atomic_number("Og"), 118)
        with self.assertRaises(UnknownElementSymbol):
            atomic_number("Xx")

    def test_matches_rdkit_periodic_table(self):
        table = Chem.GetPeriodicTable()
        for symbol in ELEMENT_SYMBOLS[:103]:
            self.assertEqual(table.GetAtomicNumber(symbol), atomic_number(symbol),
                             msg=f"Mismatch in atomic number for {symbol}")


if __name__ == "__main__":
    unittest.main()
