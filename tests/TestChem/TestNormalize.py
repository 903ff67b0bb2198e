import unittest

from chemparse.chem.normalize import normalize, split_segments


class TestNormalize(unittest.TestCase):
    def test_whitespace(self):
        self.assertEqual(normalize(" Ca (OH)\t2\n"), "Ca(OH)2")

    def test_decimal_comma(self):
        self.assertEqual(normalize("C1,5O3"), "C1.5O3")
        self.assertEqual(normalize("1,2,3"), "1.2.3")

    def test_other_commas_removed(self):
        self.assertEqual(normalize("Na,Cl"), "NaCl")
        self.assertEqual(normalize("H2,O"), "H2O")

    def test_hydrate_separators(self):
        for text in ("CuSO4·5H2O", "CuSO4_5H2O", "CuSO4⋅5H2O", "CuSO4∙5H2O", "CuSO4•5H2O", "CuSO4*5H2O"):
            self.assertEqual(normalize(text), "CuSO4·5H2O", msg=f"Mismatch for {text}")

    def test_subscripts(self):
        self.assertEqual(normalize("C₆H₁₂O₆"), "C6H12O6")

    def test_superscripts_untouched(self):
        self.assertEqual(normalize("SO₄²⁻"), "SO4²⁻")


class TestSplitSegments(unittest.TestCase):
    def test_split(self):
        self.assertEqual(split_segments("CuSO4·5H2O"), ["CuSO4", "5H2O"])

    def test_drops_empty(self):
        self.assertEqual(split_segments("·H2O··NaCl·"), ["H2O", "NaCl"])
        self.assertEqual(split_segments(""), [])


if __name__ == "__main__":
    unittest.main()
