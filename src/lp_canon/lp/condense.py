"""
Condensation of sparse terms into dense coefficient vectors.

Each side of a constraint is turned into a float64 vector of length
len(table), where position i holds the net coefficient of table.names[i].
Repeated references to the same variable accumulate. The right-hand vector
is then subtracted from the left so every variable sits on one side:

    w1*v1 + w2*v6 <= w3*v1 + w4*v7   ->   (w1-w3)*v1 + w2*v6 - w4*v7 <= 0

Allocating two vectors per constraint dominates the running time on large
batches. Callers that process constraints one at a time can pass a
Workspace whose vectors are zeroed and refilled in place instead.
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional, Sequence

from ..errors import LengthMismatchError, UnknownVariableError
from ..model.terms import Constraint, Term
from ..model.variables import VariableTable


def allocate_vector(table: VariableTable) -> np.ndarray:
    """Return a zero-filled float64 vector sized to `table`."""
    return np.zeros(len(table), dtype=np.float64)


@dataclass
class Workspace:
    """
    Scratch vectors reused across condense calls.

    A workspace has a single owner and must be used for one constraint at
    a time. The VariableTable it was sized for may be shared freely.
    """
    left: np.ndarray
    right: np.ndarray

    @classmethod
    def for_table(cls, table: VariableTable) -> "Workspace":
        return cls(left=allocate_vector(table), right=allocate_vector(table))

    def __len__(self) -> int:
        return len(self.left)


def condense_terms(
    buffer: Optional[np.ndarray],
    terms: Sequence[Term],
    table: VariableTable,
) -> np.ndarray:
    """
    Sum `terms` into a dense coefficient vector.

    Parameters
    ----------
    buffer : np.ndarray or None
        Scratch float64 vector to reuse. Must have length len(table); it is
        zeroed before use. If None, a new vector is allocated.
    terms : sequence of Term
        Terms to condense.
    table : VariableTable
        Table built from the constraint set the terms belong to.

    Returns
    -------
    np.ndarray
        `buffer` (when supplied) or a new vector, with w[table.index[v]]
        equal to the sum of the values of every term on variable v.

    Raises
    ------
    LengthMismatchError
        If `buffer` does not have length len(table).
    ValueError
        If `buffer` is not float64.
    UnknownVariableError
        If a term's variable is not in `table`.
    """
    n_vars = len(table)
    if buffer is None:
        w = np.zeros(n_vars, dtype=np.float64)
    else:
        if len(buffer) != n_vars:
            raise LengthMismatchError(n_vars, len(buffer), what="scratch buffer")
        if buffer.dtype != np.float64:
            raise ValueError(f"scratch buffer has dtype {buffer.dtype}, expected float64")
        buffer.fill(0.0)
        w = buffer

    index = table.index
    for term in terms:
        idx = index.get(term.variable)
        if idx is None:
            raise UnknownVariableError(term.variable)
        w[idx] += term.value

    return w


def combine(left: np.ndarray, right: np.ndarray) -> np.ndarray:
    """
    Subtract `right` from `left` in place and return `left`.

    Raises
    ------
    LengthMismatchError
        If the vectors differ in length.
    """
    if len(left) != len(right):
        raise LengthMismatchError(len(left), len(right), what="right operand")
    np.subtract(left, right, out=left)
    return left


def condense_constraint(
    constraint: Constraint,
    table: VariableTable,
    workspace: Optional[Workspace] = None,
) -> np.ndarray:
    """
    Move every term of `constraint` to the left-hand side.

    Parameters
    ----------
    constraint : Constraint
        The constraint to condense.
    table : VariableTable
        Table built from the batch containing `constraint`.
    workspace : Workspace, optional
        Scratch vectors to fill in place. The result then aliases
        workspace.left and is overwritten by the next call.

    Returns
    -------
    np.ndarray
        Combined vector: left coefficients minus right coefficients.
    """
    if workspace is None:
        wl = condense_terms(None, constraint.left, table)
        wr = condense_terms(None, constraint.right, table)
    else:
        wl = condense_terms(workspace.left, constraint.left, table)
        wr = condense_terms(workspace.right, constraint.right, table)

    return combine(wl, wr)
