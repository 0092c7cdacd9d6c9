import unittest

from chembalancer.errors import EquationError
from chembalancer.parser import parse_equation
from chembalancer.validator import (
    Severity,
    element_suggestion,
    validate_equation,
    validate_equation_string,
)


def codes(report):
    return [issue.code for issue in report.issues]


class TestStringValidation(unittest.TestCase):
    def test_empty(self):
        report = validate_equation_string("   ")
        self.assertFalse(report.valid)
        self.assertEqual(report.first_error.code, "EMPTY")
        self.assertTrue(report.first_error.suggestion)

    def test_missing_arrow(self):
        report = validate_equation_string("H2 + O2 H2O")
        self.assertFalse(report.valid)
        self.assertEqual(report.first_error.code, "MISSING_ARROW")

    def test_too_many_arrows(self):
        report = validate_equation_string("A -> B = C")
        self.assertIn("INVALID_ARROW_COUNT", codes(report))

    def test_empty_sides(self):
        self.assertEqual(validate_equation_string("-> H2O").first_error.code, "EMPTY_REACTANTS")
        self.assertEqual(validate_equation_string("H2 + O2 →").first_error.code, "EMPTY_PRODUCTS")

    def test_missing_separator_is_only_a_warning(self):
        report = validate_equation_string("H2  O2 -> H2O")
        self.assertTrue(report.valid)
        self.assertEqual(codes(report), ["MISSING_REACTANT_SEPARATOR"])
        self.assertIs(report.warnings[0].severity, Severity.WARNING)

    def test_valid(self):
        report = validate_equation_string("H2 + O2 → H2O")
        self.assertTrue(report.valid)
        self.assertEqual(report.issues, ())
        report.raise_for_errors()


class TestStructureValidation(unittest.TestCase):
    def test_unknown_element(self):
        report = validate_equation(parse_equation("Xx + O2 → XxO2"))
        self.assertFalse(report.valid)
        self.assertEqual(report.first_error.code, "UNKNOWN_ELEMENT")
        self.assertIn("Xx", report.first_error.message)
        with self.assertRaises(EquationError) as ctx:
            report.raise_for_errors()
        self.assertEqual(ctx.exception.code, "UNKNOWN_ELEMENT")

    def test_one_sided_element_is_a_warning(self):
        report = validate_equation(parse_equation("H2 + O2 -> H2O + N2"))
        self.assertTrue(report.valid)
        self.assertEqual(codes(report), ["ELEMENT_ONLY_IN_PRODUCTS"])

    def test_element_only_in_reactants(self):
        report = validate_equation(parse_equation("NaCl + H2 -> HCl"))
        self.assertEqual(codes(report), ["ELEMENT_ONLY_IN_REACTANTS"])

    def test_zero_coefficient(self):
        report = validate_equation(parse_equation("0H2 + O2 -> H2O"))
        self.assertEqual(report.first_error.code, "ZERO_COEFFICIENT_REACTANT")

    def test_compound_without_elements(self):
        report = validate_equation(parse_equation("2 + O2 -> O2"))
        self.assertEqual(report.first_error.code, "EMPTY_COMPOUND")

    def test_no_products(self):
        report = validate_equation(parse_equation("H2 ->"))
        self.assertIn("NO_PRODUCTS", codes(report))


class TestElementSuggestion(unittest.TestCase):
    def test_case_typo(self):
        self.assertEqual(element_suggestion("FE"), "Did you mean Fe (Iron)?")
        self.assertEqual(element_suggestion("fe"), "Did you mean Fe (Iron)?")

    def test_capitalization_hint(self):
        self.assertEqual(element_suggestion("BR"), "Did you mean Br (Bromine)?")

    def test_number(self):
        self.assertIn("not a number", element_suggestion("12"))

    def test_lowercase(self):
        self.assertIn("uppercase", element_suggestion("xy"))

    def test_valid_first_letter(self):
        self.assertTrue(element_suggestion("Bx").startswith("B is a valid element symbol"))

    def test_fallback(self):
        self.assertIn("Check the spelling", element_suggestion("Xx"))


if __name__ == "__main__":
    unittest.main()
