"""Data structures for parsed equations and balancing results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ReactionType(str, Enum):
    SYNTHESIS = "synthesis"
    DECOMPOSITION = "decomposition"
    SINGLE_REPLACEMENT = "single-replacement"
    DOUBLE_REPLACEMENT = "double-replacement"
    COMBUSTION = "combustion"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ElementCount:
    symbol: str
    count: int


@dataclass(frozen=True)
class ParsedCompound:
    """One species token of an equation side.

    Attributes:
        formula: Formula text without coefficient or state suffix.
        elements: Atom counts per element, in order of first appearance.
        coefficient: Leading stoichiometric coefficient (1 when omitted).
        state: Physical state marker (``s``, ``l``, ``g`` or ``aq``), if given.
    """

    formula: str
    elements: Tuple[ElementCount, ...]
    coefficient: int = 1
    state: Optional[str] = None

    def count_of(self, symbol: str) -> int:
        for element in self.elements:
            if element.symbol == symbol:
                return element.count
        return 0

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(element.symbol for element in self.elements)


@dataclass(frozen=True)
class ParsedEquation:
    reactants: Tuple[ParsedCompound, ...]
    products: Tuple[ParsedCompound, ...]

    @property
    def compounds(self) -> Tuple[ParsedCompound, ...]:
        """Reactants followed by products, the column order of the atom matrix."""
        return self.reactants + self.products


@dataclass(frozen=True)
class Step:
    title: str
    description: str
    matrix: Optional[Tuple[Tuple[int, ...], ...]] = None
    coefficients: Optional[Tuple[int, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"title": self.title, "description": self.description}
        if self.matrix is not None:
            payload["matrix"] = [list(row) for row in self.matrix]
        if self.coefficients is not None:
            payload["coefficients"] = list(self.coefficients)
        return payload


@dataclass(frozen=True)
class MolecularWeight:
    compound: str
    weight: float
    breakdown: Tuple[ElementCount, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "compound": self.compound,
            "weight": self.weight,
            "breakdown": [
                {"symbol": item.symbol, "count": item.count} for item in self.breakdown
            ],
        }


@dataclass(frozen=True)
class ReactionInfo:
    type: ReactionType
    description: str


@dataclass(frozen=True)
class ResultMetadata:
    reaction_type: ReactionType
    molecular_weights: Tuple[MolecularWeight, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class BalancedResult:
    original: str
    balanced: str
    coefficients: Tuple[int, ...]
    steps: Tuple[Step, ...]
    metadata: ResultMetadata

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable view of the result, used for export."""
        return {
            "original": self.original,
            "balanced": self.balanced,
            "coefficients": list(self.coefficients),
            "steps": [step.to_dict() for step in self.steps],
            "metadata": {
                "reactionType": self.metadata.reaction_type.value,
                "molecularWeights": [
                    weight.to_dict() for weight in self.metadata.molecular_weights
                ],
            },
        }
