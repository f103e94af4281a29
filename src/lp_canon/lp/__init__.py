"""
Canonical LP constraint text.

Implements:
- Term condensation into dense coefficient vectors
- Left/right combination (all variables moved to the left-hand side)
- Text serialization of coefficient vectors
- Batch writer with optional scratch-buffer reuse

Main entry points:
- `write_constraints(constraints, reuse_buffers)`: batch -> bytes
- `write_constraints_file(constraints, path)`: batch -> file
- `condense_constraint(constraint, table)`: one constraint -> vector
"""

from .condense import (
    Workspace,
    allocate_vector,
    combine,
    condense_constraint,
    condense_terms,
)

from .serialize import (
    format_coefficient,
    format_constraint_line,
    serialize_terms,
)

from .writer import (
    write_constraints,
    write_constraints_file,
    write_constraints_to,
)

__all__ = [
    # Condensation
    "Workspace",
    "allocate_vector",
    "combine",
    "condense_constraint",
    "condense_terms",
    # Serialization
    "format_coefficient",
    "format_constraint_line",
    "serialize_terms",
    # Writer
    "write_constraints",
    "write_constraints_file",
    "write_constraints_to",
]
