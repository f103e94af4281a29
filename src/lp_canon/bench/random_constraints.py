"""
Random sparse constraint batches for benchmarking the writer.

Each side of each constraint gets int(Exp(1)) + 1 terms, so most sides
have one or two terms and a few have many. Variables are drawn uniformly
from v0 .. v{n_vars-1}, coefficients uniformly from [0, 1).
"""

import numpy as np
from typing import List

from ..config import DEFAULT_SEED
from ..model.terms import Constraint, Term


def _random_side(rng: np.random.Generator, n_vars: int) -> List[Term]:
    n_terms = int(rng.exponential()) + 1
    idx = rng.integers(0, n_vars, size=n_terms)
    values = rng.random(n_terms)
    return [Term(f"v{k}", float(v)) for k, v in zip(idx, values)]


def random_constraints(
    n_vars: int,
    n_constraints: int,
    seed: int = DEFAULT_SEED,
) -> List[Constraint]:
    """
    Generate a reproducible batch of sparse random constraints.

    Parameters
    ----------
    n_vars : int
        Size of the variable pool. Not every variable need appear.
    n_constraints : int
        Number of constraints to generate.
    seed : int
        Seed for numpy's default_rng.

    Returns
    -------
    list of Constraint
        Constraints with 1 or more terms on each side.

    Raises
    ------
    ValueError
        If a count is negative, or n_vars < 1 while n_constraints > 0.
    """
    if n_vars < 0 or n_constraints < 0:
        raise ValueError(
            f"Counts must be non-negative, got n_vars={n_vars}, "
            f"n_constraints={n_constraints}"
        )
    if n_constraints > 0 and n_vars < 1:
        raise ValueError("Need at least one variable to generate constraints")

    rng = np.random.default_rng(seed)
    cons = []
    for _ in range(n_constraints):
        left = _random_side(rng, n_vars)
        right = _random_side(rng, n_vars)
        cons.append(Constraint(left=left, right=right))
    return cons
