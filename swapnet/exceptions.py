"""
SwapNet Exception Hierarchy.

SwapNetError (base, Exception)
├── DimensionMismatchError(SwapNetError, ValueError)   ← wrong-length input or parameters
└── UnknownModelTypeError(SwapNetError, ValueError)    ← (name, arity) not in the registry

Both concrete errors multi-inherit from ValueError so existing
``except ValueError`` blocks keep catching them.
"""

from typing import Optional


class SwapNetError(Exception):
    """Base exception for all SwapNet errors."""


class DimensionMismatchError(SwapNetError, ValueError):
    """
    A vector handed to a model has the wrong length or shape.

    Attributes:
        what: Which vector was rejected ("input" or "parameters")
        expected: Expected number of elements
        actual: Number of elements received
        detail: Optional extra context appended to the message
    """

    def __init__(self, what: str, expected: int, actual: int, detail: Optional[str] = None):
        self.what = what
        self.expected = expected
        self.actual = actual
        self.detail = detail
        message = f"{what} size mismatch: expected {expected} values, got {actual}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def __reduce__(self):
        # args only holds the message; rebuild from the fields instead
        return (type(self), (self.what, self.expected, self.actual, self.detail))


class UnknownModelTypeError(SwapNetError, ValueError):
    """The requested model type is not registered for the requested arity."""

    def __init__(self, name: str, arity: int, message: str):
        self.name = name
        self.arity = arity
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (self.name, self.arity, str(self)))
