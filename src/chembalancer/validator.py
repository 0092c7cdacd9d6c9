"""Two-phase validation of equations.

``validate_equation_string`` inspects the raw text before parsing and
``validate_equation`` inspects the parsed structure before solving. Both
return a :class:`ValidationReport`; the report fails when it holds at least
one ``ERROR`` issue. Warnings are advisory and never stop balancing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from chembalancer.constants import ARROW_TOKENS, LEADING_DIGIT_HINT, LOWERCASE_SYMBOL_HINT
from chembalancer.elements import PERIODIC_TABLE, ElementProvider
from chembalancer.errors import EquationError
from chembalancer.models import ParsedEquation
from chembalancer.parser import split_sides, unique_elements


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class ValidationIssue:
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None

    def to_error(self) -> EquationError:
        return EquationError(self.message, code=self.code, suggestion=self.suggestion)


@dataclass(frozen=True)
class ValidationReport:
    issues: Tuple[ValidationIssue, ...] = ()

    @property
    def errors(self) -> Tuple[ValidationIssue, ...]:
        return self._with(Severity.ERROR)

    @property
    def warnings(self) -> Tuple[ValidationIssue, ...]:
        return self._with(Severity.WARNING)

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def first_error(self) -> Optional[ValidationIssue]:
        errors = self.errors
        return errors[0] if errors else None

    def raise_for_errors(self) -> None:
        """Raise the first error-level issue as an :class:`EquationError`."""
        issue = self.first_error
        if issue is not None:
            raise issue.to_error()

    def _with(self, severity: Severity) -> Tuple[ValidationIssue, ...]:
        return tuple(issue for issue in self.issues if issue.severity is severity)


_MULTIPLE_SPACES = re.compile(r"\s{2,}")

_CASE_TYPOS: Dict[str, str] = {
    "CL": "Did you mean Cl (Chlorine)?",
    "CO": "Did you mean Co (Cobalt) or CO (Carbon monoxide)?",
    "MG": "Did you mean Mg (Magnesium)?",
    "MN": "Did you mean Mn (Manganese)?",
    "AL": "Did you mean Al (Aluminium)?",
    "ZN": "Did you mean Zn (Zinc)?",
    "AG": "Did you mean Ag (Silver)?",
    "AU": "Did you mean Au (Gold)?",
    "FE": "Did you mean Fe (Iron)?",
    "CU": "Did you mean Cu (Copper)?",
    "NA": "Did you mean Na (Sodium)?",
}


def element_suggestion(symbol: str, provider: ElementProvider = PERIODIC_TABLE) -> str:
    """Best-effort hint for a symbol that is not in the periodic table.

    Symbols taken from a parsed equation always start with an uppercase
    letter, since the parser rejects digits and lowercase letters at a symbol
    position with the same hints returned here. The digit and lowercase
    branches serve free-standing lookups such as ``chembalancer element``.
    """
    hint = _CASE_TYPOS.get(symbol.upper())
    if hint is not None:
        return hint
    if symbol.isdigit():
        return LEADING_DIGIT_HINT
    if symbol[:1].islower():
        return LOWERCASE_SYMBOL_HINT
    capitalized = symbol[:1].upper() + symbol[1:].lower()
    if capitalized != symbol and capitalized in provider:
        return f"Did you mean {capitalized} ({provider.require(capitalized).name})?"
    if len(symbol) == 2 and symbol[0] in provider:
        return (
            f"{symbol[0]} is a valid element symbol but {symbol} is not. "
            "Check the spelling or use the periodic table to find the correct symbol"
        )
    return "Check the spelling or use the periodic table to find the correct element symbol"


def validate_equation_string(text: str) -> ValidationReport:
    issues: List[ValidationIssue] = []

    if not text or not text.strip():
        issues.append(
            ValidationIssue(
                Severity.ERROR,
                "EMPTY",
                "Equation cannot be empty",
                "Enter a chemical equation like H2 + O2 → H2O",
            )
        )
        return ValidationReport(tuple(issues))

    has_arrow = any(token in text for token in ARROW_TOKENS)
    if not has_arrow:
        issues.append(
            ValidationIssue(
                Severity.ERROR,
                "MISSING_ARROW",
                "Equation must contain an arrow (→, ->, or =)",
                "Use →, ->, or = to separate reactants from products",
            )
        )

    sides = split_sides(text)
    if has_arrow and len(sides) != 2:
        issues.append(
            ValidationIssue(
                Severity.ERROR,
                "INVALID_ARROW_COUNT",
                "Equation must have exactly one arrow separating reactants and products",
                "Remove extra arrows and use only one (→, ->, or =)",
            )
        )

    if has_arrow and not sides[0].strip():
        issues.append(
            ValidationIssue(
                Severity.ERROR,
                "EMPTY_REACTANTS",
                "Reactants side cannot be empty",
                "Enter at least one reactant before the arrow",
            )
        )
    if len(sides) >= 2 and not sides[1].strip():
        issues.append(
            ValidationIssue(
                Severity.ERROR,
                "EMPTY_PRODUCTS",
                "Products side cannot be empty",
                "Enter at least one product after the arrow",
            )
        )

    if len(sides) == 2:
        reactant_side, product_side = (side.strip() for side in sides)
        if "+" not in reactant_side and _MULTIPLE_SPACES.search(reactant_side):
            issues.append(
                ValidationIssue(
                    Severity.WARNING,
                    "MISSING_REACTANT_SEPARATOR",
                    "Multiple reactants detected without + separator",
                    "Use + to separate compounds, e.g., H2 + O2",
                )
            )
        if "+" not in product_side and _MULTIPLE_SPACES.search(product_side):
            issues.append(
                ValidationIssue(
                    Severity.WARNING,
                    "MISSING_PRODUCT_SEPARATOR",
                    "Multiple products detected without + separator",
                    "Use + to separate compounds, e.g., CO2 + H2O",
                )
            )

    return ValidationReport(tuple(issues))


def validate_equation(
    equation: ParsedEquation,
    provider: ElementProvider = PERIODIC_TABLE,
) -> ValidationReport:
    issues: List[ValidationIssue] = []

    if not equation.reactants:
        issues.append(
            ValidationIssue(
                Severity.ERROR,
                "NO_REACTANTS",
                "Equation must have at least one reactant",
                "Add at least one compound before the arrow",
            )
        )
    if not equation.products:
        issues.append(
            ValidationIssue(
                Severity.ERROR,
                "NO_PRODUCTS",
                "Equation must have at least one product",
                "Add at least one compound after the arrow",
            )
        )

    for compound in equation.compounds:
        if not compound.elements:
            issues.append(
                ValidationIssue(
                    Severity.ERROR,
                    "EMPTY_COMPOUND",
                    f'Compound "{compound.formula or compound.coefficient}" contains no elements',
                    "Write a formula after the coefficient, e.g., 2H2O",
                )
            )

    for symbol in unique_elements(equation):
        if symbol not in provider:
            issues.append(
                ValidationIssue(
                    Severity.ERROR,
                    "UNKNOWN_ELEMENT",
                    f'Unknown element: "{symbol}"',
                    element_suggestion(symbol, provider),
                )
            )

    reactant_symbols = {s for compound in equation.reactants for s in compound.symbols}
    product_symbols = {s for compound in equation.products for s in compound.symbols}

    for symbol in sorted(reactant_symbols - product_symbols):
        issues.append(
            ValidationIssue(
                Severity.WARNING,
                "ELEMENT_ONLY_IN_REACTANTS",
                f'Element "{symbol}" appears in reactants but not in products',
                f'Make sure "{symbol}" is included on both sides of the equation',
            )
        )
    for symbol in sorted(product_symbols - reactant_symbols):
        issues.append(
            ValidationIssue(
                Severity.WARNING,
                "ELEMENT_ONLY_IN_PRODUCTS",
                f'Element "{symbol}" appears in products but not in reactants',
                f'Make sure "{symbol}" is included on both sides of the equation',
            )
        )

    for side, compounds in (("REACTANT", equation.reactants), ("PRODUCT", equation.products)):
        for compound in compounds:
            if compound.coefficient == 0:
                issues.append(
                    ValidationIssue(
                        Severity.ERROR,
                        f"ZERO_COEFFICIENT_{side}",
                        f'{side.title()} "{compound.formula}" has a coefficient of 0',
                        "Remove the leading 0 from the compound",
                    )
                )

    return ValidationReport(tuple(issues))
