"""
Contract violations raised while condensing constraints.

Both conditions mean the caller broke an internal invariant (a table built
from a different constraint set, or a scratch buffer of the wrong size).
They are raised immediately and never caught inside the package.
"""


class UnknownVariableError(LookupError):
    """A term references a variable that is not in the VariableTable."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Variable {variable!r} is not present in the variable table")


class LengthMismatchError(ValueError):
    """A vector does not have the length required by the VariableTable."""

    def __init__(self, expected: int, actual: int, what: str = "vector"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} has length {actual}, expected {expected}")
