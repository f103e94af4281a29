"""
lp_canon: symbolic linear constraints -> canonical LP solver text

Indexes the variables of a constraint batch, moves every term to the
left-hand side, and writes each constraint as "w0 v0 + w1 v1 ... <= 0".
"""

from . import config
from .errors import LengthMismatchError, UnknownVariableError
from .model import Constraint, Term, VariableTable, index_variables
from .lp import write_constraints, write_constraints_file

__version__ = "0.1.0"
__all__ = [
    "config",
    "Constraint",
    "Term",
    "VariableTable",
    "index_variables",
    "write_constraints",
    "write_constraints_file",
    "LengthMismatchError",
    "UnknownVariableError",
]
