"""
exceptions.py
~~~~~~~~~~~~~

Errors raised by the network engine.
"""

from typing import Optional


class DimensionMismatch(ValueError):
    """
    Raised when data does not fit the shape the network was built for.

    Covers input vectors whose length differs from the network's input
    size, and training sets whose inputs and targets differ in length.
    """

    def __init__(
        self,
        message: str,
        expected: Optional[int] = None,
        actual: Optional[int] = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
