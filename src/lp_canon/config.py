"""
Global configuration and formatting constants for the constraint writer.

The output grammar is one line per constraint:

    term_list " <= " constant "\n"

where term_list is zero or more "<coefficient> <name>" terms joined by " + ".
"""

from dataclasses import dataclass


# =============================================================================
# Number Formatting
# =============================================================================

SIGNIFICANT_DIGITS = 16
"""Significant digits used for every coefficient and the constant."""

COEFFICIENT_FORMAT = f".{SIGNIFICANT_DIGITS}g"
"""General (%g-style) base-10 format spec for coefficients."""

NON_FINITE_TEXT = {"+inf": "+Inf", "-inf": "-Inf", "nan": "NaN"}
"""Text for infinite and NaN coefficients, which the format spec does not cover."""


# =============================================================================
# Output Grammar
# =============================================================================

TERM_SEPARATOR = " + "
"""Separator placed between consecutive terms."""

NAME_SEPARATOR = " "
"""Separator between a coefficient and its variable name."""

INEQUALITY = " <= "
"""Separator between the term list and the constant."""

LINE_TERMINATOR = "\n"
"""Terminator appended to every constraint line."""

CONSTANT_TERM = 0.0
"""Right-hand constant. Constraints carry no constant offset, so this is always 0."""

ENCODING = "utf-8"
"""Encoding of the output byte stream."""


# =============================================================================
# Benchmark Parameters
# =============================================================================

DEFAULT_N_VARS = 10000
"""Default number of distinct variables in generated benchmark batches."""

DEFAULT_N_CONSTRAINTS = 50000
"""Default number of constraints in generated benchmark batches."""

DEFAULT_SEED = 0
"""Default random seed for generated benchmark batches."""

DEFAULT_REPEATS = 3
"""Default number of timed repetitions per benchmark mode."""

PROGRESS_INTERVAL = 10000
"""Constraints between progress lines in verbose mode."""


# =============================================================================
# Writer Configuration
# =============================================================================

@dataclass
class WriterConfig:
    """Options for a constraint-writing run."""

    reuse_buffers: bool = False
    """Reuse one pair of scratch vectors across all constraints."""

    verbose: bool = False
    """Print progress while writing."""
