"""End-to-end balancing of chemical equations.

``balance_equation`` runs the whole pipeline:

1. validate the raw string,
2. parse it into reactants and products,
3. validate the parsed structure,
4. build the signed atom matrix and solve for its null space,
5. normalize to the smallest positive integers and apply them,
6. explain the computation as a list of steps,
7. weigh every compound and classify the reaction.

Each call is a pure function of its input; nothing is cached between calls.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Dict, List, Sequence, Tuple

from chembalancer.classifier import classify_reaction
from chembalancer.elements import PERIODIC_TABLE, ElementProvider
from chembalancer.errors import EquationError
from chembalancer.formatting import format_equation
from chembalancer.matrix import (
    DEFAULT_CONFIGURATION,
    AtomMatrix,
    BalancerConfiguration,
    build_atom_matrix,
    solve_coefficients,
)
from chembalancer.models import (
    BalancedResult,
    MolecularWeight,
    ParsedEquation,
    ResultMetadata,
    Step,
)
from chembalancer.parser import count_element_on_side, parse_equation
from chembalancer.validator import (
    ValidationReport,
    validate_equation,
    validate_equation_string,
)
from chembalancer.weights import calculate_molecular_weight

logger = logging.getLogger(__name__)


def apply_coefficients(equation: ParsedEquation, coefficients: Sequence[int]) -> ParsedEquation:
    """Return a copy of ``equation`` with ``coefficients`` in reactant-then-product order."""
    compounds = equation.compounds
    if len(coefficients) != len(compounds):
        raise ValueError(
            f"Expected {len(compounds)} coefficients, got {len(coefficients)}"
        )
    updated = [
        dataclasses.replace(compound, coefficient=int(coefficient))
        for compound, coefficient in zip(compounds, coefficients)
    ]
    split = len(equation.reactants)
    return ParsedEquation(reactants=tuple(updated[:split]), products=tuple(updated[split:]))


def _side_counts(equation: ParsedEquation, elements: Sequence[str]) -> Dict[str, Tuple[int, int]]:
    return {
        symbol: (
            count_element_on_side(equation.reactants, symbol),
            count_element_on_side(equation.products, symbol),
        )
        for symbol in elements
    }


def generate_steps(
    original: ParsedEquation,
    balanced: ParsedEquation,
    matrix: AtomMatrix,
    coefficients: Sequence[int],
) -> Tuple[Step, ...]:
    """Explain a balance as four steps: count, find imbalance, solve, verify."""
    elements = matrix.elements
    before = _side_counts(original, elements)
    after = _side_counts(balanced, elements)
    imbalanced = [symbol for symbol, (left, right) in before.items() if left != right]

    count_lines = "\n".join(
        f"{symbol}: {left} (reactants) vs {right} (products)"
        for symbol, (left, right) in before.items()
    )
    if imbalanced:
        verdict = "The equation is not balanced because atom counts don't match."
    else:
        verdict = "The atom counts already match on both sides."
    steps: List[Step] = [
        Step(
            title="Count atoms on each side",
            description=f"Original equation atom counts:\n{count_lines}\n\n{verdict}",
        )
    ]

    if imbalanced:
        imbalance_lines = "\n".join(
            f"{symbol}: {before[symbol][0]} → {before[symbol][1]}" for symbol in imbalanced
        )
        description = (
            f"Imbalanced elements:\n{imbalance_lines}\n\n"
            "These elements need coefficients to balance."
        )
    else:
        description = "No imbalanced elements. The coefficients are reduced to their smallest whole numbers."
    steps.append(Step(title="Identify imbalanced elements", description=description))

    coefficient_text = ", ".join(str(value) for value in coefficients)
    steps.append(
        Step(
            title="Build atom matrix and solve",
            description=(
                "Atom matrix (reactants positive, products negative):\n"
                f"{matrix.describe()}\n\n"
                f"Solving using Gaussian elimination gives coefficients: [{coefficient_text}]"
            ),
            matrix=matrix.rows,
            coefficients=tuple(coefficients),
        )
    )

    verify_lines = "\n".join(
        f"{symbol}: {left} = {right} ✓" for symbol, (left, right) in after.items()
    )
    steps.append(
        Step(
            title="Verify balance",
            description=(
                f"Final atom counts:\n{verify_lines}\n\n"
                "All atoms are balanced! The equation satisfies the law of conservation of mass."
            ),
        )
    )
    return tuple(steps)


def _log_warnings(report: ValidationReport) -> None:
    for issue in report.warnings:
        logger.warning("%s: %s", issue.code, issue.message)


def molecular_weights(
    equation: ParsedEquation,
    provider: ElementProvider = PERIODIC_TABLE,
) -> Tuple[MolecularWeight, ...]:
    """Weigh every compound, substituting a zero weight where weighing fails."""
    weights: List[MolecularWeight] = []
    for compound in equation.compounds:
        try:
            weights.append(calculate_molecular_weight(compound.formula, provider))
        except EquationError as exc:
            logger.warning("Could not weigh %s: %s", compound.formula, exc)
            weights.append(
                MolecularWeight(compound=compound.formula, weight=0.0, breakdown=compound.elements)
            )
    return tuple(weights)


def balance_equation(
    text: str,
    configuration: BalancerConfiguration = DEFAULT_CONFIGURATION,
    provider: ElementProvider = PERIODIC_TABLE,
) -> BalancedResult:
    """Balance ``text`` and explain how.

    Args:
        text: Equation such as ``"H2 + O2 → H2O"``; ``->`` and ``=`` are accepted arrows.
        configuration: Solver settings.
        provider: Periodic-table data used for validation and weights.

    Returns:
        The balanced equation with coefficients, steps and metadata.

    Raises:
        EquationError: With the code of the first error-level validation
            issue, or a subclass for malformed formulas and unsolvable equations.
    """
    string_report = validate_equation_string(text)
    string_report.raise_for_errors()
    _log_warnings(string_report)

    parsed = parse_equation(text)

    structure_report = validate_equation(parsed, provider)
    structure_report.raise_for_errors()
    _log_warnings(structure_report)

    matrix = build_atom_matrix(parsed)
    coefficients = solve_coefficients(matrix, configuration)
    balanced = apply_coefficients(parsed, coefficients)

    result = BalancedResult(
        original=format_equation(parsed),
        balanced=format_equation(balanced),
        coefficients=tuple(coefficients),
        steps=generate_steps(parsed, balanced, matrix, coefficients),
        metadata=ResultMetadata(
            reaction_type=classify_reaction(parsed).type,
            molecular_weights=molecular_weights(parsed, provider),
        ),
    )
    logger.debug("Balanced %r as %r", text, result.balanced)
    return result
