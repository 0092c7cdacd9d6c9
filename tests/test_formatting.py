import unittest

from chembalancer.formatting import (
    format_chemical_equation,
    format_chemical_formula,
    format_equation,
)
from chembalancer.parser import parse_equation


class TestFormatting(unittest.TestCase):
    def test_equation_omits_unit_coefficients(self):
        equation = parse_equation("2H2(g) + 1O2(g) = 2H2O(l)")
        self.assertEqual(format_equation(equation), "2H2(g) + O2(g) → 2H2O(l)")

    def test_unicode_subscripts(self):
        self.assertEqual(format_chemical_formula("Al2(SO4)3"), "Al₂(SO₄)₃")

    def test_html_subscripts(self):
        self.assertEqual(format_chemical_formula("C12H22O11", html=True), "C<sub>12</sub>H<sub>22</sub>O<sub>11</sub>")

    def test_equation_keeps_coefficients(self):
        self.assertEqual(format_chemical_equation("4Fe + 3O2 → 2Fe2O3"), "4Fe + 3O₂ → 2Fe₂O₃")


if __name__ == "__main__":
    unittest.main()
