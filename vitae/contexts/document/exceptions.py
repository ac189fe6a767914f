"""Custom exceptions for the document context."""

from typing import Any, Optional, Sequence


class VitaeError(Exception):
    """Base class for all engine errors."""


class InvalidAddress(VitaeError, LookupError):
    """
    Raised when an address fails to resolve against the current tree snapshot.

    Callers recover by re-deriving a fresh address (e.g., from the node's uuid)
    and retrying. No partial mutation has happened when this is raised.

    Attributes:
        address: The address that failed to resolve
        reason: Why resolution failed (e.g., "no such node", "stale address")
        operation: Operation that was attempted, if any
    """

    def __init__(
        self,
        address: Sequence[Any],
        reason: str = "no such node",
        operation: Optional[str] = None,
    ):
        self.address = tuple(address) if isinstance(address, (list, tuple)) else address
        self.reason = reason
        self.operation = operation

        shown = list(self.address) if isinstance(self.address, tuple) else repr(self.address)
        message = f"Invalid address {shown}: {reason}"
        if operation:
            message += f" (operation: {operation})"

        super().__init__(message)


class DuplicateNodeError(VitaeError, ValueError):
    """
    Raised when a node being inserted carries a uuid that already exists in the tree.

    Attributes:
        uuid: The conflicting uuid
    """

    def __init__(self, uuid: str):
        self.uuid = uuid
        super().__init__(f"Node {uuid} is already part of this document")


class InvalidRecordError(VitaeError, ValueError):
    """
    Raised when a document record doesn't conform to the expected structure.

    Records are plain nested dicts with 'type', 'data', 'hidden', 'children'
    (and optionally 'uuid').
    """

    pass
