"""
Error types raised by the sequence operations

Both concrete errors also derive from the matching built-in exception
(ValueError / IndexError) so callers catching those keep working.
"""
from typing import Any, List, Optional


class NumericsError(Exception):
    """Base class for all numerics errors"""


class InvalidArgumentError(NumericsError, ValueError):
    """
    A required argument is missing or violates a structural precondition

    Attributes:
        argument: Name of the offending parameter
    """

    def __init__(self, argument: str, message: Optional[str] = None):
        self.argument = argument
        super().__init__(message or f"'{argument}' must not be None")


class IndexOutOfRangeError(NumericsError, IndexError):
    """
    A permutation index falls outside the working buffer

    Attributes:
        index: The offending index value
        size: Size of the working buffer
        position: Ordinal of the offending entry in the index list
        partial: Copy of the working buffer when the swap was attempted
    """

    def __init__(self, index: int, size: int, position: int, partial: List[Any]):
        self.index = index
        self.size = size
        self.position = position
        self.partial = partial
        super().__init__(
            f"Index {index} at position {position} is out of range for size {size}"
        )
