"""Numeric tolerances and lexical tokens shared by the balancing pipeline."""

from __future__ import annotations

# Entries of a floating-point null-space vector below this magnitude are noise.
ZERO_TOLERANCE = 1e-10

# A scaled ratio within this distance of an integer is treated as that integer.
INTEGER_TOLERANCE = 0.01

# Upper bound of the integer multiplier search during normalization.
MAX_MULTIPLIER = 1000

CANONICAL_ARROW = "->"
ARROW_TOKENS = ("→", "->", "=")
DISPLAY_ARROW = "→"

PHYSICAL_STATES = ("s", "l", "g", "aq")

SOLVER_METHODS = ("exact", "svd")

# Unicode subscript digits, as printed by the pretty formatter, read back as plain digits.
SUBSCRIPT_DIGITS = str.maketrans("₀₁₂₃₄₅₆₇₈₉", "0123456789")

LOWERCASE_SYMBOL_HINT = "Element symbols start with an uppercase letter (e.g., H, He, Li)"
LEADING_DIGIT_HINT = "Elements should start with a letter, not a number"
