"""
Error types for the map style system.

There is a single error kind: a contract violation raised when a caller
hands the style machinery something it cannot interpret. It denotes a
programmer or configuration error and is never recovered from internally.
"""

from __future__ import annotations


class ContractViolation(ValueError):
    """
    Raised when an input matches none of the accepted shapes.

    Attributes:
        code: Stable diagnostic identifier
    """

    def __init__(self, code: int, message: str):
        super().__init__(f"[{code}] {message}")
        self.code = code
        self.message = message
