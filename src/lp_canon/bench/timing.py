"""
Timing harness comparing fresh-allocation and buffer-reuse writer modes.

Usage:
    python -m lp_canon.bench.timing \\
        --n-vars 10000 --n-constraints 50000 --repeats 3 --verbose

    python -m lp_canon.bench.timing --n-constraints 1000 \\
        --output data/constraints.lp
"""

import argparse
import time
import numpy as np
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..config import (
    DEFAULT_N_CONSTRAINTS,
    DEFAULT_N_VARS,
    DEFAULT_REPEATS,
    DEFAULT_SEED,
    WriterConfig,
)
from ..model.terms import Constraint
from ..model.variables import index_variables
from ..lp.writer import write_constraints, write_constraints_file
from .random_constraints import random_constraints


@dataclass
class BenchmarkResult:
    """
    Wall-clock timings for one writer mode.

    Attributes
    ----------
    reuse_buffers : bool
        Mode that was timed.
    n_constraints : int
        Constraints in the batch.
    n_vars : int
        Distinct variables in the batch.
    n_bytes : int
        Size of the written output.
    seconds : list of float
        Wall time of each repetition.
    """
    reuse_buffers: bool
    n_constraints: int
    n_vars: int
    n_bytes: int = 0
    seconds: List[float] = field(default_factory=list)

    @property
    def repeats(self) -> int:
        return len(self.seconds)

    @property
    def best(self) -> float:
        return min(self.seconds)

    @property
    def mean(self) -> float:
        return float(np.mean(self.seconds))

    def summary(self) -> str:
        mode = "reuse" if self.reuse_buffers else "fresh"
        return (f"{mode}: best {self.best:.3f}s, mean {self.mean:.3f}s "
                f"over {self.repeats} runs ({self.n_bytes} bytes)")


def time_writer(
    constraints: Sequence[Constraint],
    reuse_buffers: bool,
    repeats: int = DEFAULT_REPEATS,
    verbose: bool = False,
) -> Tuple[BenchmarkResult, bytes]:
    """
    Time write_constraints on a batch.

    Returns
    -------
    result : BenchmarkResult
        Timings for the requested mode.
    output : bytes
        Output of the last repetition.
    """
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")

    result = BenchmarkResult(
        reuse_buffers=reuse_buffers,
        n_constraints=len(constraints),
        n_vars=len(index_variables(constraints)),
    )

    output = b""
    for r in range(repeats):
        t0 = time.time()
        output = write_constraints(constraints, reuse_buffers=reuse_buffers)
        elapsed = time.time() - t0
        result.seconds.append(elapsed)
        if verbose:
            print(f"  [reuse_buffers={reuse_buffers}] run {r+1}/{repeats}: "
                  f"{elapsed:.3f}s")

    result.n_bytes = len(output)
    return result, output


def compare_modes(
    constraints: Sequence[Constraint],
    repeats: int = DEFAULT_REPEATS,
    verbose: bool = False,
) -> Tuple[BenchmarkResult, BenchmarkResult]:
    """
    Time both writer modes and check their outputs agree.

    Returns
    -------
    (fresh, reuse) : tuple of BenchmarkResult

    Raises
    ------
    RuntimeError
        If the two modes produce different bytes.
    """
    fresh, fresh_out = time_writer(constraints, False, repeats, verbose)
    reuse, reuse_out = time_writer(constraints, True, repeats, verbose)

    if fresh_out != reuse_out:
        raise RuntimeError(
            "Buffer reuse changed the output "
            f"({len(fresh_out)} vs {len(reuse_out)} bytes)"
        )

    return fresh, reuse


# =============================================================================
# CLI
# =============================================================================

def main(argv: Optional[List[str]] = None):
    """Command-line entry point for the writer benchmark."""
    parser = argparse.ArgumentParser(
        description="Benchmark the constraint writer with and without buffer reuse"
    )
    parser.add_argument(
        "--n-vars", type=int, default=DEFAULT_N_VARS,
        help=f"Size of the variable pool (default: {DEFAULT_N_VARS})"
    )
    parser.add_argument(
        "--n-constraints", type=int, default=DEFAULT_N_CONSTRAINTS,
        help=f"Number of constraints (default: {DEFAULT_N_CONSTRAINTS})"
    )
    parser.add_argument(
        "--seed", type=int, default=DEFAULT_SEED,
        help=f"Random seed (default: {DEFAULT_SEED})"
    )
    parser.add_argument(
        "--repeats", type=int, default=DEFAULT_REPEATS,
        help=f"Timed runs per mode (default: {DEFAULT_REPEATS})"
    )
    parser.add_argument(
        "--output", type=str, default=None,
        help="Also write the constraints to this file"
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Print progress"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        print(f"Generating {args.n_constraints} constraints over "
              f"{args.n_vars} variables (seed={args.seed}) ...")
    cons = random_constraints(args.n_vars, args.n_constraints, seed=args.seed)

    fresh, reuse = compare_modes(cons, repeats=args.repeats, verbose=args.verbose)
    print(fresh.summary())
    print(reuse.summary())
    print(f"speedup: {fresh.best / reuse.best:.2f}x" if reuse.best > 0
          else "speedup: n/a")

    if args.output:
        path = write_constraints_file(
            cons, Path(args.output),
            WriterConfig(reuse_buffers=True, verbose=args.verbose),
        )
        print(f"Output written to {path}")

    return fresh, reuse


if __name__ == "__main__":
    main()
