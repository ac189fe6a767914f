"""Custom exceptions for the editing context."""

from vitae.contexts.document.exceptions import VitaeError


class UnknownOperationError(VitaeError, ValueError):
    """
    Raised when the mutation router is asked for an operation it doesn't know.

    Attributes:
        operation: The rejected operation name
    """

    def __init__(self, operation):
        self.operation = operation
        super().__init__(f"Unknown mutation operation: {operation!r}")
