"""
Text rendering of dense coefficient vectors.

A vector w over names n renders as

    w0 n0 + w3 n3 + w7 n7

listing only exactly-nonzero positions, in position order. Coefficients use
the general format with 16 significant digits, enough for solver input to
reproduce the float64 values.
"""

import numpy as np
from typing import Sequence

from ..config import (
    COEFFICIENT_FORMAT,
    CONSTANT_TERM,
    INEQUALITY,
    LINE_TERMINATOR,
    NAME_SEPARATOR,
    NON_FINITE_TEXT,
    TERM_SEPARATOR,
)
from ..errors import LengthMismatchError


def format_coefficient(value: float) -> str:
    """
    Format a coefficient in general notation with 16 significant digits.

    Non-finite values render as "+Inf", "-Inf" and "NaN".

    Examples
    --------
    >>> format_coefficient(2.0)
    '2'
    >>> format_coefficient(-0.25)
    '-0.25'
    >>> format_coefficient(1e-5)
    '1e-05'
    >>> format_coefficient(float("inf"))
    '+Inf'
    """
    value = float(value)
    if np.isnan(value):
        return NON_FINITE_TEXT["nan"]
    if np.isinf(value):
        return NON_FINITE_TEXT["+inf" if value > 0 else "-inf"]
    return format(value, COEFFICIENT_FORMAT)


def serialize_terms(weights: np.ndarray, names: Sequence[str]) -> str:
    """
    Render the nonzero entries of `weights` as a term list.

    Zero detection is exact: a coefficient is dropped only when it compares
    equal to 0 (which includes -0.0).

    Parameters
    ----------
    weights : np.ndarray
        Dense coefficient vector.
    names : sequence of str
        Variable names, names[i] labelling weights[i].

    Returns
    -------
    str
        Terms joined by " + ", or "" when every coefficient is zero.

    Raises
    ------
    LengthMismatchError
        If `weights` and `names` differ in length.
    """
    if len(weights) != len(names):
        raise LengthMismatchError(len(names), len(weights), what="weights")

    return TERM_SEPARATOR.join(
        format_coefficient(weights[i]) + NAME_SEPARATOR + names[i]
        for i in np.flatnonzero(weights)
    )


def format_constraint_line(
    weights: np.ndarray,
    names: Sequence[str],
    constant: float = CONSTANT_TERM,
) -> str:
    """Render one full output line, including the trailing newline."""
    return (
        serialize_terms(weights, names)
        + INEQUALITY
        + format_coefficient(constant)
        + LINE_TERMINATOR
    )
