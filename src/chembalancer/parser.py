"""Formula and equation parsing.

Formulas are parsed by recursive descent over nested parenthesised groups:

    formula  := (element | group)*
    element  := Upper lower? digits?
    group    := "(" formula ")" digits?

Element counts are reported in order of first appearance in the formula, so
``Ca(OH)2`` yields ``Ca, O, H``.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Sequence, Tuple

from chembalancer.constants import (
    ARROW_TOKENS,
    CANONICAL_ARROW,
    LEADING_DIGIT_HINT,
    LOWERCASE_SYMBOL_HINT,
    PHYSICAL_STATES,
    SUBSCRIPT_DIGITS,
)
from chembalancer.errors import MalformedEquation, MalformedFormula
from chembalancer.models import ElementCount, ParsedCompound, ParsedEquation

logger = logging.getLogger(__name__)

STATE_SUFFIX = re.compile(r"\((%s)\)\s*$" % "|".join(PHYSICAL_STATES))
LEADING_COEFFICIENT = re.compile(r"^([0-9]+)\s*")


def strip_state(formula: str) -> Tuple[str, str | None]:
    """Split a trailing ``(s)``, ``(l)``, ``(g)`` or ``(aq)`` marker off ``formula``."""
    match = STATE_SUFFIX.search(formula)
    if match is None:
        return formula, None
    return formula[: match.start()].rstrip(), match.group(1)


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _read_digits(text: str, index: int, end: int) -> Tuple[int | None, int]:
    start = index
    while index < end and _is_ascii_digit(text[index]):
        index += 1
    if index == start:
        return None, index
    return int(text[start:index]), index


def normalize_subscripts(text: str) -> str:
    """Replace Unicode subscript digits such as ``₂`` with plain digits."""
    return text.translate(SUBSCRIPT_DIGITS)


def _matching_paren(text: str, open_index: int, end: int) -> int:
    depth = 0
    for index in range(open_index, end):
        if text[index] == "(":
            depth += 1
        elif text[index] == ")":
            depth -= 1
            if depth == 0:
                return index
    raise MalformedFormula(
        f'Unmatched "(" at position {open_index + 1} in "{text}"',
        suggestion="Close every opening parenthesis, e.g. Ca(OH)2",
    )


def _parse_group(
    text: str,
    start: int,
    end: int,
    multiplier: int,
    counts: Dict[str, int],
) -> None:
    index = start
    while index < end:
        char = text[index]
        if char == "(":
            close = _matching_paren(text, index, end)
            group_count, after = _read_digits(text, close + 1, end)
            if group_count == 0:
                raise MalformedFormula(
                    f'Group "{text[index:close + 1]}" has a zero subscript in "{text}"',
                    suggestion="Omit the subscript for a single group instead of writing 0",
                )
            _parse_group(text, index + 1, close, multiplier * (group_count or 1), counts)
            index = after
        elif char.isupper():
            index += 1
            symbol = char
            if index < end and text[index].islower():
                symbol += text[index]
                index += 1
            count, index = _read_digits(text, index, end)
            if count == 0:
                raise MalformedFormula(
                    f'Element "{symbol}" has a zero subscript in "{text}"',
                    suggestion="Omit the subscript for a single atom instead of writing 0",
                )
            counts[symbol] = counts.get(symbol, 0) + (count or 1) * multiplier
        elif char == ")":
            raise MalformedFormula(
                f'Unmatched ")" at position {index + 1} in "{text}"',
                suggestion="Remove the extra closing parenthesis",
            )
        elif char.isspace():
            index += 1
        elif char.islower():
            raise MalformedFormula(
                f'Unexpected lowercase "{char}" in "{text}"',
                suggestion=LOWERCASE_SYMBOL_HINT,
            )
        elif _is_ascii_digit(char):
            raise MalformedFormula(
                f'Unexpected number in "{text}"',
                suggestion=LEADING_DIGIT_HINT,
            )
        elif char.isdigit():
            raise MalformedFormula(
                f'Unexpected digit "{char}" in "{text}"',
                suggestion="Write counts with plain digits 0-9 or subscripts such as H₂O",
            )
        else:
            raise MalformedFormula(
                f'Unexpected character "{char}" in "{text}"',
                suggestion="Use only element symbols, digits and parentheses",
            )


def parse_formula(formula: str) -> List[ElementCount]:
    """Parse ``formula`` into element counts.

    Args:
        formula: Formula such as ``Al2(SO4)3``, ``H2O(l)`` or ``H₂O``. A trailing
            physical-state marker is ignored.

    Returns:
        One :class:`ElementCount` per distinct symbol, in order of first appearance.

    Raises:
        MalformedFormula: On unbalanced parentheses, zero subscripts or
            unexpected characters.
    """
    text, _state = strip_state(normalize_subscripts(formula).strip())
    counts: Dict[str, int] = {}
    _parse_group(text, 0, len(text), 1, counts)
    return [ElementCount(symbol, count) for symbol, count in counts.items()]


def parse_compound(token: str) -> ParsedCompound:
    """Parse one side token like ``2H2O(l)`` into a :class:`ParsedCompound`."""
    formula = normalize_subscripts(token).strip()
    coefficient = 1
    match = LEADING_COEFFICIENT.match(formula)
    if match:
        coefficient = int(match.group(1))
        formula = formula[match.end():]

    formula, state = strip_state(formula)
    elements = parse_formula(formula)
    return ParsedCompound(
        formula=formula,
        elements=tuple(elements),
        coefficient=coefficient,
        state=state,
    )


def normalize_arrows(text: str) -> str:
    for token in ARROW_TOKENS:
        if token != CANONICAL_ARROW:
            text = text.replace(token, CANONICAL_ARROW)
    return text


def split_sides(text: str) -> List[str]:
    """Split an equation on its arrow after normalizing every arrow variant."""
    return normalize_arrows(text).split(CANONICAL_ARROW)


def parse_side(side: str) -> Tuple[ParsedCompound, ...]:
    tokens = [token.strip() for token in side.split("+")]
    return tuple(parse_compound(token) for token in tokens if token)


def parse_equation(text: str) -> ParsedEquation:
    """Parse ``reactants -> products`` into a :class:`ParsedEquation`.

    Either side may come back empty for malformed input; rejecting that is the
    validator's job.
    """
    sides = split_sides(text)
    if len(sides) < 2:
        raise MalformedEquation(
            "Equation must contain an arrow (→, ->, or =)",
            code="MISSING_ARROW",
            suggestion="Use →, ->, or = to separate reactants from products",
        )
    if len(sides) > 2:
        raise MalformedEquation(
            "Equation must have exactly one arrow separating reactants and products",
            code="INVALID_ARROW_COUNT",
            suggestion="Remove extra arrows and use only one (→, ->, or =)",
        )

    reactants_side, products_side = sides
    equation = ParsedEquation(
        reactants=parse_side(reactants_side),
        products=parse_side(products_side),
    )
    logger.debug(
        "Parsed %d reactant(s) and %d product(s) from %r",
        len(equation.reactants),
        len(equation.products),
        text,
    )
    return equation


def unique_elements(equation: ParsedEquation) -> List[str]:
    """All element symbols in ``equation``, sorted alphabetically."""
    return sorted({symbol for compound in equation.compounds for symbol in compound.symbols})


def count_element_on_side(compounds: Sequence[ParsedCompound], symbol: str) -> int:
    """Total atoms of ``symbol`` on one side, weighted by each coefficient."""
    return sum(compound.count_of(symbol) * compound.coefficient for compound in compounds)
