"""
Benchmark tooling for the constraint writer.

Implements:
- Reproducible random sparse constraint batches
- Timing of fresh-allocation vs buffer-reuse writer modes
"""

from .random_constraints import random_constraints

from .timing import (
    BenchmarkResult,
    compare_modes,
    time_writer,
)

__all__ = [
    "random_constraints",
    "BenchmarkResult",
    "compare_modes",
    "time_writer",
]
