import unittest

from chemparse.chem.errors import (
    FormulaError,
    InvalidCharacter,
    NestingTooDeep,
    UnknownElementSymbol,
    UnmatchedClosingBracket,
    UnmatchedOpeningBracket,
)
from chemparse.chem.segment import parse_segment


class TestParseSegment(unittest.TestCase):
    def test_simple(self):
        self.assertEqual(parse_segment("H2O"), {"H": 2.0, "O": 1.0})
        self.assertEqual(parse_segment("NaCl"), {"Na": 1.0, "Cl": 1.0})

    def test_repeated_elements_are_summed(self):
        self.assertEqual(parse_segment("CH3COOH"), {"C": 2.0, "H": 4.0, "O": 2.0})

    def test_nested_brackets(self):
        self.assertEqual(
            parse_segment("K4[Fe(CN)6]"),
            {"K": 4.0, "Fe": 1.0, "C": 6.0, "N": 6.0},
        )

    def test_bracket_kinds_are_interchangeable(self):
        expected = {"Ca": 1.0, "O": 2.0, "H": 2.0}
        for segment in ("Ca(OH)2", "Ca[OH]2", "Ca{OH}2", "Ca(OH]2", "Ca[OH}2"):
            self.assertEqual(parse_segment(segment), expected, msg=f"Mismatch for {segment}")

    def test_deep_nesting_multiplies_through(self):
        self.assertEqual(parse_segment("((H)2)3"), {"H": 6.0})

    def test_fractional_multipliers(self):
        result = parse_segment("(C1.5O)2.5e-1")
        self.assertAlmostEqual(result["C"], 0.375, places=12)
        self.assertAlmostEqual(result["O"], 0.25, places=12)

    def test_empty_group(self):
        self.assertEqual(parse_segment("()2H"), {"H": 1.0})

    def test_unknown_symbol(self):
        with self.assertRaises(UnknownElementSymbol) as ctx:
            parse_segment("Xx2O")
        self.assertEqual(ctx.exception.symbol, "Xx")
        self.assertEqual(ctx.exception.segment, "Xx2O")

    def test_symbol_takes_all_lowercase_letters(self):
        with self.assertRaises(UnknownElementSymbol) as ctx:
            parse_segment("Hee")
        self.assertEqual(ctx.exception.symbol, "Hee")

    def test_unmatched_closing(self):
        with self.assertRaises(UnmatchedClosingBracket) as ctx:
            parse_segment("Ca(OH)2]")
        self.assertEqual(ctx.exception.position, 7)
        self.assertEqual(ctx.exception.segment, "Ca(OH)2]")

    def test_unmatched_opening(self):
        with self.assertRaises(UnmatchedOpeningBracket) as ctx:
            parse_segment("Ca(OH2")
        self.assertEqual(ctx.exception.segment, "Ca(OH2")

    def test_invalid_character(self):
        with self.assertRaises(InvalidCharacter) as ctx:
            parse_segment("H2-O")
        self.assertEqual(ctx.exception.character, "-")
        self.assertEqual(ctx.exception.position, 2)

    def test_lowercase_start_is_invalid(self):
        with self.assertRaises(InvalidCharacter) as ctx:
            parse_segment("h2o")
        self.assertEqual(ctx.exception.character, "h")
        self.assertEqual(ctx.exception.position, 0)

    def test_digit_after_opening_bracket_is_invalid(self):
        with self.assertRaises(InvalidCharacter):
            parse_segment("(2H)")

    def test_nesting_limit(self):
        self.assertEqual(parse_segment("((H))", max_depth=2), {"H": 1.0})
        with self.assertRaises(NestingTooDeep) as ctx:
            parse_segment("(((H)))", max_depth=2)
        self.assertEqual(ctx.exception.position, 2)
        self.assertEqual(ctx.exception.max_depth, 2)

    def test_adversarial_depth_is_rejected(self):
        segment = "(" * 10000 + "H" + ")" * 10000
        with self.assertRaises(NestingTooDeep):
            parse_segment(segment)

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            parse_segment("Q")
        self.assertTrue(issubclass(NestingTooDeep, FormulaError))


if __name__ == "__main__":
    unittest.main()
