import unittest

from chembalancer.errors import MalformedEquation, MalformedFormula
from chembalancer.models import ElementCount
from chembalancer.parser import (
    count_element_on_side,
    parse_compound,
    parse_equation,
    parse_formula,
    unique_elements,
)
from chembalancer.validator import element_suggestion


def as_dict(counts):
    return {item.symbol: item.count for item in counts}


class TestFormulaParser(unittest.TestCase):
    def test_simple_formula(self):
        self.assertEqual(parse_formula("H2O"), [ElementCount("H", 2), ElementCount("O", 1)])

    def test_group_multiplier_keeps_first_appearance_order(self):
        counts = parse_formula("Ca(OH)2")
        self.assertEqual([item.symbol for item in counts], ["Ca", "O", "H"])
        self.assertEqual(as_dict(counts), {"Ca": 1, "O": 2, "H": 2})

    def test_group_with_inner_subscripts(self):
        self.assertEqual(as_dict(parse_formula("Al2(SO4)3")), {"Al": 2, "S": 3, "O": 12})

    def test_nested_groups(self):
        self.assertEqual(
            as_dict(parse_formula("Mg3(Fe(CN)6)2")),
            {"Mg": 3, "Fe": 2, "C": 12, "N": 12},
        )

    def test_repeated_symbols_are_summed(self):
        self.assertEqual(as_dict(parse_formula("CH3COOH")), {"C": 2, "H": 4, "O": 2})

    def test_state_suffix_is_ignored(self):
        self.assertEqual(as_dict(parse_formula("H2O(l)")), {"H": 2, "O": 1})
        self.assertEqual(as_dict(parse_formula("NaCl(aq)")), {"Na": 1, "Cl": 1})

    def test_unmatched_open_parenthesis(self):
        with self.assertRaises(MalformedFormula) as ctx:
            parse_formula("Ca(OH2")
        self.assertEqual(ctx.exception.code, "MALFORMED_FORMULA")
        self.assertIsNotNone(ctx.exception.suggestion)

    def test_unmatched_close_parenthesis(self):
        with self.assertRaises(MalformedFormula):
            parse_formula("CaOH)2")

    def test_lowercase_start_is_rejected(self):
        with self.assertRaises(MalformedFormula) as ctx:
            parse_formula("co2")
        self.assertIn("uppercase", ctx.exception.suggestion)

    def test_unexpected_character(self):
        with self.assertRaises(MalformedFormula):
            parse_formula("H2O*")

    def test_zero_group_subscript_is_rejected(self):
        with self.assertRaises(MalformedFormula) as ctx:
            parse_formula("Ca(OH)0")
        self.assertIn("zero subscript", str(ctx.exception))

    def test_zero_element_subscript_is_rejected(self):
        with self.assertRaises(MalformedFormula):
            parse_formula("H0O")

    def test_unicode_subscripts_read_as_digits(self):
        self.assertEqual(as_dict(parse_formula("H₂O")), {"H": 2, "O": 1})
        self.assertEqual(as_dict(parse_formula("Al₂(SO₄)₃")), {"Al": 2, "S": 3, "O": 12})

    def test_other_digit_characters_are_rejected(self):
        with self.assertRaises(MalformedFormula) as ctx:
            parse_formula("H²O")
        self.assertIn("plain digits", ctx.exception.suggestion)

    def test_symbol_hints_match_element_suggestion(self):
        with self.assertRaises(MalformedFormula) as lower:
            parse_formula("co2")
        with self.assertRaises(MalformedFormula) as digit:
            parse_formula("H2(2)")
        self.assertEqual(lower.exception.suggestion, element_suggestion("xy"))
        self.assertEqual(digit.exception.suggestion, element_suggestion("2"))


class TestEquationParser(unittest.TestCase):
    def test_compound_with_coefficient_and_state(self):
        compound = parse_compound("2H2O(l)")
        self.assertEqual(compound.formula, "H2O")
        self.assertEqual(compound.coefficient, 2)
        self.assertEqual(compound.state, "l")
        self.assertEqual(as_dict(compound.elements), {"H": 2, "O": 1})

    def test_subscripted_compound_keeps_plain_formula(self):
        compound = parse_compound("2H₂O")
        self.assertEqual(compound.formula, "H2O")
        self.assertEqual(compound.coefficient, 2)

    def test_default_coefficient(self):
        compound = parse_compound("O2")
        self.assertEqual(compound.coefficient, 1)
        self.assertIsNone(compound.state)

    def test_arrow_variants_are_equivalent(self):
        expected = parse_equation("H2 + O2 -> H2O")
        self.assertEqual(parse_equation("H2 + O2 → H2O"), expected)
        self.assertEqual(parse_equation("H2 + O2 = H2O"), expected)

    def test_sides(self):
        equation = parse_equation("2H2O(l) -> 2H2(g) + O2(g)")
        self.assertEqual([c.formula for c in equation.reactants], ["H2O"])
        self.assertEqual([c.formula for c in equation.products], ["H2", "O2"])
        self.assertEqual([c.state for c in equation.products], ["g", "g"])

    def test_empty_tokens_are_discarded(self):
        equation = parse_equation("H2 + + O2 -> H2O +")
        self.assertEqual(len(equation.reactants), 2)
        self.assertEqual(len(equation.products), 1)

    def test_empty_side_is_left_to_the_validator(self):
        equation = parse_equation("H2 ->")
        self.assertEqual(equation.products, ())

    def test_missing_arrow(self):
        with self.assertRaises(MalformedEquation) as ctx:
            parse_equation("H2 + O2 H2O")
        self.assertEqual(ctx.exception.code, "MISSING_ARROW")

    def test_too_many_arrows(self):
        with self.assertRaises(MalformedEquation) as ctx:
            parse_equation("A -> B -> C")
        self.assertEqual(ctx.exception.code, "INVALID_ARROW_COUNT")

    def test_helpers(self):
        equation = parse_equation("2H2 + O2 -> 2H2O")
        self.assertEqual(unique_elements(equation), ["H", "O"])
        self.assertEqual(count_element_on_side(equation.reactants, "H"), 4)
        self.assertEqual(count_element_on_side(equation.products, "O"), 2)
        self.assertEqual(count_element_on_side(equation.products, "N"), 0)


if __name__ == "__main__":
    unittest.main()
