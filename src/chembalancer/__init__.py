"""chembalancer core package."""

from chembalancer.balancer import apply_coefficients, balance_equation, generate_steps
from chembalancer.classifier import classify_reaction
from chembalancer.errors import (
    EquationError,
    MalformedEquation,
    MalformedFormula,
    UnbalanceableEquation,
    UnknownElement,
)
from chembalancer.matrix import (
    AtomMatrix,
    BalancerConfiguration,
    build_atom_matrix,
    normalize_coefficients,
    solve_coefficients,
    solve_null_space,
)
from chembalancer.models import (
    BalancedResult,
    ElementCount,
    ParsedCompound,
    ParsedEquation,
    ReactionType,
    Step,
)
from chembalancer.parser import parse_equation, parse_formula
from chembalancer.validator import validate_equation, validate_equation_string
from chembalancer.weights import calculate_molecular_weight

__all__ = [
    "AtomMatrix",
    "BalancedResult",
    "BalancerConfiguration",
    "ElementCount",
    "EquationError",
    "MalformedEquation",
    "MalformedFormula",
    "ParsedCompound",
    "ParsedEquation",
    "ReactionType",
    "Step",
    "UnbalanceableEquation",
    "UnknownElement",
    "apply_coefficients",
    "balance_equation",
    "build_atom_matrix",
    "calculate_molecular_weight",
    "classify_reaction",
    "generate_steps",
    "normalize_coefficients",
    "parse_equation",
    "parse_formula",
    "solve_coefficients",
    "solve_null_space",
    "validate_equation",
    "validate_equation_string",
]
