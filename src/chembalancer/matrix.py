"""Atom matrix construction and stoichiometric coefficient solving.

The balanced coefficients ``x`` of an equation are a strictly positive integer
vector in the null space of its atom matrix ``A``:

    A @ x = 0

where ``A[i, j]`` is the number of atoms of element ``i`` in compound ``j``,
positive for reactants and negative for products.

Two solvers are available:
- ``exact``: rational null space via sympy, scaled to integers by the LCM of
  the denominators. Immune to floating-point drift.
- ``svd``: floating-point null space via scipy, converted to integers by the
  tolerance-based multiplier search in :func:`normalize_coefficients`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields
from numbers import Rational
from typing import Any, List, Mapping, Sequence, Tuple

import numpy as np
import sympy as sp
from scipy.linalg import null_space

from chembalancer.constants import (
    INTEGER_TOLERANCE,
    MAX_MULTIPLIER,
    SOLVER_METHODS,
    ZERO_TOLERANCE,
)
from chembalancer.errors import UnbalanceableEquation
from chembalancer.models import ParsedEquation
from chembalancer.parser import unique_elements

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BalancerConfiguration:
    """Numerical settings of the coefficient solver.

    Attributes:
        zero_tolerance: Magnitude below which a float null-space entry is zero.
        integer_tolerance: Distance from an integer accepted as integral.
        max_multiplier: Largest multiplier tried when clearing fractions.
        method: ``"exact"`` (rational arithmetic) or ``"svd"`` (floating point).
    """

    zero_tolerance: float = ZERO_TOLERANCE
    integer_tolerance: float = INTEGER_TOLERANCE
    max_multiplier: int = MAX_MULTIPLIER
    method: str = "exact"

    def __post_init__(self) -> None:
        if self.method not in SOLVER_METHODS:
            raise ValueError(
                f"Unknown solver method: {self.method!r} (expected one of {', '.join(SOLVER_METHODS)})"
            )
        if self.zero_tolerance <= 0 or self.integer_tolerance <= 0:
            raise ValueError("Tolerances must be positive")
        if self.max_multiplier < 1:
            raise ValueError("max_multiplier must be at least 1")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BalancerConfiguration":
        known = {field.name for field in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(
            zero_tolerance=float(data.get("zero_tolerance", ZERO_TOLERANCE)),
            integer_tolerance=float(data.get("integer_tolerance", INTEGER_TOLERANCE)),
            max_multiplier=int(data.get("max_multiplier", MAX_MULTIPLIER)),
            method=str(data.get("method", "exact")).lower(),
        )


DEFAULT_CONFIGURATION = BalancerConfiguration()


@dataclass(frozen=True)
class AtomMatrix:
    """Signed element-by-compound atom count matrix.

    Rows follow ``elements`` (alphabetical); columns follow the reactants and
    then the products of the equation the matrix was built from.
    """

    elements: Tuple[str, ...]
    rows: Tuple[Tuple[int, ...], ...]
    reactant_count: int

    @property
    def shape(self) -> Tuple[int, int]:
        columns = len(self.rows[0]) if self.rows else 0
        return len(self.rows), columns

    def as_array(self) -> np.ndarray:
        """Float copy of ``rows`` for the floating-point solver."""
        return np.array(self.rows, dtype=float).reshape(self.shape)

    def describe(self) -> str:
        return "\n".join(
            f"{symbol}: [{', '.join(str(value) for value in row)}]"
            for symbol, row in zip(self.elements, self.rows)
        )


def build_atom_matrix(equation: ParsedEquation) -> AtomMatrix:
    elements = unique_elements(equation)
    reactant_count = len(equation.reactants)
    rows = tuple(
        tuple(
            compound.count_of(symbol) if column < reactant_count else -compound.count_of(symbol)
            for column, compound in enumerate(equation.compounds)
        )
        for symbol in elements
    )
    return AtomMatrix(elements=tuple(elements), rows=rows, reactant_count=reactant_count)


def _no_solution() -> UnbalanceableEquation:
    return UnbalanceableEquation(
        "Equation cannot be balanced: the atom matrix has no non-trivial solution",
        suggestion="Check that every element appears on both sides and that no compound is missing",
    )


def solve_null_space(
    matrix: AtomMatrix,
    configuration: BalancerConfiguration = DEFAULT_CONFIGURATION,
) -> List[Any]:
    """Return the first null-space basis vector of ``matrix`` with every entry made non-negative.

    With the ``exact`` method the entries are sympy rationals; with ``svd``
    they are floats.

    Raises:
        UnbalanceableEquation: If the null space is trivial, or if it has
            several dimensions and its first basis vector is not a balance.
    """
    rows, columns = matrix.shape
    if rows == 0 or columns == 0:
        raise _no_solution()

    if configuration.method == "svd":
        basis = null_space(matrix.as_array())
        dimension = basis.shape[1]
        vectors = [basis[:, 0]] if dimension else []
        tolerance = configuration.zero_tolerance
    else:
        basis = sp.Matrix([list(row) for row in matrix.rows]).nullspace()
        dimension = len(basis)
        vectors = basis[:1]
        tolerance = 0

    logger.debug(
        "Atom matrix %dx%d has null space of dimension %d (%s)",
        rows,
        columns,
        dimension,
        configuration.method,
    )
    if not vectors:
        raise _no_solution()
    vector = list(vectors[0])
    if dimension > 1:
        # Only a single-signed basis vector is itself a balance.
        signs = {_sign(value, tolerance) for value in vector}
        if signs not in ({1}, {-1}):
            raise _no_unique_solution(dimension)
        logger.warning(
            "Null space has dimension %d; using the first basis vector", dimension
        )

    return [abs(value) for value in vector]


def _sign(value: Any, tolerance: float) -> int:
    if value > tolerance:
        return 1
    if value < -tolerance:
        return -1
    return 0


def _no_unique_solution(dimension: int) -> UnbalanceableEquation:
    return UnbalanceableEquation(
        f"Equation has no unique balance: it combines {dimension} independent reactions",
        suggestion="Split it into separate equations, one per reaction",
    )


def _is_exact(values: Sequence[Any]) -> bool:
    return all(isinstance(value, (int, Rational, sp.Rational)) for value in values)


def _zero_coefficient() -> UnbalanceableEquation:
    return UnbalanceableEquation(
        "Equation cannot be balanced: a compound received a zero coefficient",
        suggestion="Remove compounds that do not take part in the reaction",
    )


def normalize_coefficients(
    raw: Sequence[Any],
    configuration: BalancerConfiguration = DEFAULT_CONFIGURATION,
) -> List[int]:
    """Scale a null-space vector to the smallest strictly positive integers.

    Rational input is scaled exactly by the LCM of its denominators. Float
    input has noise below ``zero_tolerance`` zeroed, is divided by its smallest
    entry and multiplied by the smallest multiplier up to ``max_multiplier``
    that brings every entry within ``integer_tolerance`` of an integer.
    Either way the result is divided by the GCD of its entries.

    Raises:
        UnbalanceableEquation: If any coefficient comes out as zero.
    """
    if not raw:
        return []

    if _is_exact(raw):
        rationals = [sp.Rational(value) for value in raw]
        if any(value == 0 for value in rationals):
            raise _zero_coefficient()
        scale = sp.lcm([value.q for value in rationals])
        integers = [int(abs(value) * scale) for value in rationals]
    else:
        values = np.abs(np.asarray(raw, dtype=float))
        values[values < configuration.zero_tolerance] = 0.0
        if not np.any(values > 0):
            raise _zero_coefficient()

        ratios = values / values[values > 0].min()
        multiplier = None
        for candidate in range(1, configuration.max_multiplier + 1):
            scaled = ratios * candidate
            if np.all(np.abs(scaled - np.rint(scaled)) < configuration.integer_tolerance):
                multiplier = candidate
                break
        if multiplier is None:
            logger.warning(
                "No multiplier up to %d yields integer coefficients; rounding ratios %s",
                configuration.max_multiplier,
                ratios.tolist(),
            )
            multiplier = 1
        else:
            logger.debug("Using multiplier %d for ratios %s", multiplier, ratios.tolist())
        integers = [int(value) for value in np.rint(ratios * multiplier)]

    if any(value == 0 for value in integers):
        raise _zero_coefficient()

    # Python ints throughout: subscripts are unbounded.
    divisor = math.gcd(*integers)
    if divisor > 1:
        integers = [value // divisor for value in integers]
    return integers


def verify_coefficients(matrix: AtomMatrix, coefficients: Sequence[int]) -> bool:
    """True when ``coefficients`` conserve every element of ``matrix``."""
    return all(
        sum(count * coefficient for count, coefficient in zip(row, coefficients)) == 0
        for row in matrix.rows
    )


def solve_coefficients(
    matrix: AtomMatrix,
    configuration: BalancerConfiguration = DEFAULT_CONFIGURATION,
) -> List[int]:
    """Solve and normalize ``matrix``, verifying the result conserves mass.

    Raises:
        UnbalanceableEquation: If no strictly positive integer solution is found.
    """
    coefficients = normalize_coefficients(solve_null_space(matrix, configuration), configuration)
    if not verify_coefficients(matrix, coefficients):
        raise UnbalanceableEquation(
            "Equation cannot be balanced with positive coefficients",
            suggestion="A compound may be on the wrong side of the arrow",
        )
    return coefficients
