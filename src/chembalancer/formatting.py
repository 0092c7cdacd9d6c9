"""Text rendering of formulas and equations."""

from __future__ import annotations

import re

from chembalancer.constants import DISPLAY_ARROW
from chembalancer.models import ParsedCompound, ParsedEquation

SUBSCRIPTS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")

_OPERATORS = re.compile(r"(→|->|=|\+)")


def format_compound(compound: ParsedCompound) -> str:
    coefficient = str(compound.coefficient) if compound.coefficient > 1 else ""
    state = f"({compound.state})" if compound.state else ""
    return f"{coefficient}{compound.formula}{state}"


def format_equation(equation: ParsedEquation) -> str:
    """Render ``equation`` as ``2H2 + O2 → 2H2O``; a coefficient of 1 is omitted."""
    reactants = " + ".join(format_compound(compound) for compound in equation.reactants)
    products = " + ".join(format_compound(compound) for compound in equation.products)
    return f"{reactants} {DISPLAY_ARROW} {products}"


def format_chemical_formula(formula: str, html: bool = False) -> str:
    """Turn formula digits into subscripts, as Unicode or ``<sub>`` tags."""
    if html:
        return re.sub(r"(\d+)", r"<sub>\1</sub>", formula)
    return formula.translate(SUBSCRIPTS)


def format_chemical_equation(text: str, html: bool = False) -> str:
    """Subscript every formula in ``text`` while leaving leading coefficients as-is."""
    parts = []
    for part in _OPERATORS.split(text):
        token = part.strip()
        if not token:
            continue
        if _OPERATORS.fullmatch(token):
            parts.append(token)
            continue
        match = re.match(r"^(\d*)(.*)$", token)
        coefficient, formula = match.group(1), match.group(2)
        parts.append(coefficient + format_chemical_formula(formula, html))
    return " ".join(parts)
