"""Structural classification of chemical reactions."""

from __future__ import annotations

from chembalancer.models import ParsedEquation, ReactionInfo, ReactionType

DESCRIPTIONS = {
    ReactionType.COMBUSTION: (
        "Combustion reaction - a substance reacts with oxygen to produce "
        "carbon dioxide and water, releasing energy."
    ),
    ReactionType.SYNTHESIS: (
        "Synthesis (Combination) reaction - two or more substances combine "
        "to form a single product."
    ),
    ReactionType.DECOMPOSITION: (
        "Decomposition reaction - a single compound breaks down into two or "
        "more simpler substances."
    ),
    ReactionType.SINGLE_REPLACEMENT: (
        "Single Replacement reaction - one element replaces another element in a compound."
    ),
    ReactionType.DOUBLE_REPLACEMENT: (
        "Double Replacement reaction - the positive and negative ions of two "
        "compounds switch places."
    ),
    ReactionType.UNKNOWN: "Complex or unclassified reaction type.",
}

DISPLAY_NAMES = {
    ReactionType.SYNTHESIS: "Synthesis",
    ReactionType.DECOMPOSITION: "Decomposition",
    ReactionType.SINGLE_REPLACEMENT: "Single Replacement",
    ReactionType.DOUBLE_REPLACEMENT: "Double Replacement",
    ReactionType.COMBUSTION: "Combustion",
    ReactionType.UNKNOWN: "Unknown",
}

WATER_FORMULAS = ("H2O", "HOH")


def _reaction_type(equation: ParsedEquation) -> ReactionType:
    reactants, products = equation.reactants, equation.products

    has_oxygen_reactant = any("O" in compound.symbols for compound in reactants)
    has_co2 = any(compound.formula == "CO2" for compound in products)
    has_water = any(compound.formula in WATER_FORMULAS for compound in products)
    if has_oxygen_reactant and has_co2 and has_water:
        return ReactionType.COMBUSTION

    if len(reactants) >= 2 and len(products) == 1:
        return ReactionType.SYNTHESIS

    if len(reactants) == 1 and len(products) >= 2:
        return ReactionType.DECOMPOSITION

    if len(reactants) == 2 and len(products) == 2:
        single_element = [compound for compound in reactants if len(compound.elements) == 1]
        if len(single_element) == 1:
            return ReactionType.SINGLE_REPLACEMENT
        multi_element = [compound for compound in reactants if len(compound.elements) >= 2]
        if len(multi_element) == 2:
            return ReactionType.DOUBLE_REPLACEMENT

    return ReactionType.UNKNOWN


def classify_reaction(equation: ParsedEquation) -> ReactionInfo:
    """Match the shape of ``equation`` against the reaction taxonomy.

    Rules are checked in order (combustion, synthesis, decomposition, single
    replacement, double replacement) and the first match wins.
    """
    reaction_type = _reaction_type(equation)
    return ReactionInfo(type=reaction_type, description=DESCRIPTIONS[reaction_type])


def format_reaction_type(reaction_type: ReactionType) -> str:
    return DISPLAY_NAMES.get(reaction_type, "Unknown")
