"""Molecular weight and mass composition of formulas."""

from __future__ import annotations

from typing import Dict

from chembalancer.elements import PERIODIC_TABLE, ElementProvider
from chembalancer.models import MolecularWeight
from chembalancer.parser import parse_formula


def calculate_molecular_weight(
    formula: str,
    provider: ElementProvider = PERIODIC_TABLE,
) -> MolecularWeight:
    """Sum atomic mass times atom count over every element of ``formula``.

    Raises:
        UnknownElement: If a symbol is missing from ``provider``.
        MalformedFormula: If ``formula`` cannot be parsed.
    """
    breakdown = tuple(parse_formula(formula))
    weight = sum(provider.atomic_mass(item.symbol) * item.count for item in breakdown)
    return MolecularWeight(compound=formula, weight=weight, breakdown=breakdown)


def percent_composition(
    formula: str,
    provider: ElementProvider = PERIODIC_TABLE,
) -> Dict[str, float]:
    """Mass percentage of each element in ``formula``, keyed by symbol."""
    molecular_weight = calculate_molecular_weight(formula, provider)
    if molecular_weight.weight == 0:
        return {}
    return {
        item.symbol: provider.atomic_mass(item.symbol) * item.count / molecular_weight.weight * 100.0
        for item in molecular_weight.breakdown
    }


def format_molecular_weight(weight: float) -> str:
    return f"{weight:.3f} g/mol"
