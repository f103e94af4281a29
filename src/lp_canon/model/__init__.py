"""
Constraint data model and variable indexing.

Implements:
- Term and Constraint value types
- VariableTable: first-seen-order name <-> position table
"""

from .terms import Term, Constraint
from .variables import VariableTable, add_name_if_new, index_variables

__all__ = [
    "Term",
    "Constraint",
    "VariableTable",
    "add_name_if_new",
    "index_variables",
]
