"""
Constraint writer: symbolic constraints -> canonical LP text.

For a batch of constraints this:
1. Indexes every variable once (first-seen order)
2. Condenses each constraint to a single left-hand coefficient vector
3. Renders it as "w0 v0 + w1 v1 ... <= 0", one line per constraint

The right-hand constant is always 0; constraints carry no constant term.

With reuse_buffers=True one Workspace is allocated for the whole batch and
refilled for every constraint, which avoids two vector allocations per
constraint. Both modes produce byte-identical output.
"""

import io
from pathlib import Path
from typing import BinaryIO, Optional, Sequence, Tuple

from ..config import (
    CONSTANT_TERM, ENCODING, INEQUALITY, PROGRESS_INTERVAL, WriterConfig,
)
from ..model.terms import Constraint
from ..model.variables import index_variables
from .condense import Workspace, condense_constraint
from .serialize import format_constraint_line


def _render_constraints(
    constraints: Sequence[Constraint],
    reuse_buffers: bool,
    verbose: bool,
) -> Tuple[str, int]:
    """Render the whole batch to text. Returns (text, n_lines)."""
    table = index_variables(constraints)
    names = table.names
    n_constraints = len(constraints)

    if verbose:
        print(f"Writing {n_constraints} constraints over {len(table)} variables "
              f"(reuse_buffers={reuse_buffers})")

    workspace: Optional[Workspace] = None
    if reuse_buffers:
        workspace = Workspace.for_table(table)

    out = io.StringIO()
    n_empty = 0
    for i, con in enumerate(constraints):
        if verbose and (i % PROGRESS_INTERVAL == 0 or i == n_constraints - 1):
            print(f"  [{i+1}/{n_constraints}]")

        w = condense_constraint(con, table, workspace)
        line = format_constraint_line(w, names, CONSTANT_TERM)
        if line.startswith(INEQUALITY):
            n_empty += 1
        out.write(line)

    if verbose and n_empty > 0:
        print(f"  {n_empty}/{n_constraints} constraints have an empty term list")

    return out.getvalue(), n_constraints


def write_constraints(
    constraints: Sequence[Constraint],
    reuse_buffers: bool = False,
    verbose: bool = False,
) -> bytes:
    """
    Write LP constraints in canonical single-sided form.

    Parameters
    ----------
    constraints : sequence of Constraint
        The batch to write, in output order.
    reuse_buffers : bool
        Reuse one pair of scratch vectors across all constraints.
    verbose : bool
        If True, print progress.

    Returns
    -------
    bytes
        UTF-8 text, one newline-terminated line per constraint.

    Raises
    ------
    UnknownVariableError, LengthMismatchError
        Contract violations; no partial output is produced.

    Examples
    --------
    >>> from lp_canon.model.terms import Constraint
    >>> cons = [Constraint.from_pairs([("a", 1.0), ("b", 2.0)], [("a", 1.0)])]
    >>> write_constraints(cons)
    b'2 b <= 0\\n'
    """
    text, _ = _render_constraints(constraints, reuse_buffers, verbose)
    return text.encode(ENCODING)


def write_constraints_to(
    stream: BinaryIO,
    constraints: Sequence[Constraint],
    reuse_buffers: bool = False,
    verbose: bool = False,
) -> int:
    """
    Write constraints to a binary stream.

    The batch is rendered fully before anything is written, so a contract
    violation leaves `stream` untouched.

    Returns
    -------
    int
        Number of lines written.
    """
    text, n_lines = _render_constraints(constraints, reuse_buffers, verbose)
    stream.write(text.encode(ENCODING))
    return n_lines


def write_constraints_file(
    constraints: Sequence[Constraint],
    output_path: Path,
    config: Optional[WriterConfig] = None,
) -> Path:
    """
    Write constraints to a file, creating parent directories as needed.

    Parameters
    ----------
    constraints : sequence of Constraint
        The batch to write.
    output_path : Path
        Destination file. Overwritten if it exists.
    config : WriterConfig, optional
        Writer options. Uses defaults if not provided.

    Returns
    -------
    Path
        The output_path (for chaining).
    """
    if config is None:
        config = WriterConfig()

    # Render before opening so a contract violation does not truncate the file
    text, n_lines = _render_constraints(
        constraints, config.reuse_buffers, config.verbose
    )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "wb") as f:
        f.write(text.encode(ENCODING))

    if config.verbose:
        print(f"Wrote {n_lines} lines to {output_path}")

    return output_path
