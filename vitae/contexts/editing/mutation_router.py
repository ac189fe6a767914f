"""
Mutation Router

Single funnel for every write to a document. Translates (address, operation,
payload) into a NodeStore call, then recomputes ids and refreshes hover and
selection before returning, so any address lookup later in the same event
sees the post-mutation shape.

Addresses issued by the IdAllocator carry their snapshot generation. The
router refuses an issued address from an older snapshot instead of applying
the write to whichever node now occupies that position.

Usage:
    router = MutationRouter(store, allocator, tracker)

    new_id = router.mutate((0,), Operation.ADD, ResumeNode(type="entry"))
    router.mutate(new_id, Operation.UPDATE, ("title", ["Example Corp"]))
    router.mutate(new_id, "toggle_hidden")
"""

from enum import Enum
from typing import Any, Optional, Sequence, Tuple

from vitae.contexts.document.addressing import IdAllocator, as_address, format_address
from vitae.contexts.document.exceptions import VitaeError
from vitae.contexts.document.node import ResumeNode
from vitae.contexts.document.node_store import NodeStore
from vitae.contexts.editing.exceptions import UnknownOperationError
from vitae.contexts.editing.logger import _log_debug, _log_warning
from vitae.contexts.interaction.hover_tracker import HoverSelectTracker
from vitae.utils.event_logging import log_editor_event


class Operation(str, Enum):
    """Write operations accepted by the router, with their payloads."""

    ADD = "add"  # payload: ResumeNode; address is the parent
    UPDATE = "update"  # payload: (key, value)
    TOGGLE_HIDDEN = "toggle_hidden"  # payload: None
    REMOVE = "remove"  # payload: None
    MOVE = "move"  # payload: int offset among siblings

    @property
    def is_structural(self) -> bool:
        return self in STRUCTURAL_OPERATIONS


STRUCTURAL_OPERATIONS = frozenset({Operation.ADD, Operation.REMOVE, Operation.MOVE})


class MutationRouter:
    """
    Routes writes into a NodeStore and keeps ids and interaction state in step.

    Attributes:
        store: Document tree
        allocator: Id allocator for the same store
        tracker: Hover/select tracker to refresh after structural changes (optional)
    """

    def __init__(
        self,
        store: NodeStore,
        allocator: IdAllocator,
        tracker: Optional[HoverSelectTracker] = None,
    ):
        self.store = store
        self.allocator = allocator
        self.tracker = tracker

        self._handlers = {
            Operation.ADD: self._add,
            Operation.UPDATE: self._update,
            Operation.TOGGLE_HIDDEN: self._toggle_hidden,
            Operation.REMOVE: self._remove,
            Operation.MOVE: self._move,
        }

    def mutate(self, address: Sequence[int], operation, payload: Any = None) -> Any:
        """
        Apply one write.

        Args:
            address: Target address (the parent's address for ADD)
            operation: Operation or its string value
            payload: Operation-specific payload (see Operation)

        Returns:
            ADD: address of the new node
            UPDATE: None
            TOGGLE_HIDDEN: new hidden flag
            REMOVE: the detached node
            MOVE: new address of the moved node

        Raises:
            UnknownOperationError: If the operation isn't recognized
            InvalidAddress: If the address doesn't resolve or is stale
            DuplicateNodeError: If an added node is already in the tree
            TypeError: If the payload has the wrong shape
        """
        try:
            operation = Operation(operation)
        except ValueError:
            raise UnknownOperationError(operation) from None

        address = as_address(address)

        try:
            self.allocator.require_current(address, operation=operation.value)
            result = self._handlers[operation](address, payload)
        except VitaeError as e:
            _log_warning(f"{operation.value} at {format_address(address)} rejected: {e}")
            raise

        structural = operation.is_structural
        if operation is Operation.MOVE:
            # A move clamped to its current slot leaves the shape unchanged
            result, structural = result

        self.allocator.recompute(structural=structural)
        if structural and self.tracker is not None:
            self.tracker.on_structure_changed()

        _log_debug(f"{operation.value} at {format_address(address)} (generation {self.allocator.generation})")
        log_editor_event(
            event_type=operation.value,
            source="router",
            address=list(address),
            generation=self.allocator.generation,
            **self._event_fields(operation, payload),
        )

        # Results that name a position are re-derived from the fresh table
        if isinstance(result, ResumeNode) and operation in (Operation.ADD, Operation.MOVE):
            return self.allocator.id_for(result.uuid)
        return result

    # Convenience wrappers

    def add(self, parent_address: Sequence[int], node: ResumeNode):
        return self.mutate(parent_address, Operation.ADD, node)

    def update(self, address: Sequence[int], key: str, value: Any) -> None:
        return self.mutate(address, Operation.UPDATE, (key, value))

    def toggle_hidden(self, address: Sequence[int]) -> bool:
        return self.mutate(address, Operation.TOGGLE_HIDDEN)

    def remove(self, address: Sequence[int]) -> ResumeNode:
        return self.mutate(address, Operation.REMOVE)

    def move(self, address: Sequence[int], offset: int):
        return self.mutate(address, Operation.MOVE, offset)

    # Handlers

    def _add(self, address, payload) -> ResumeNode:
        if not isinstance(payload, ResumeNode):
            raise TypeError(f"add expects a ResumeNode payload, got {type(payload).__name__}")
        self.store.add(address, payload)
        return payload

    def _update(self, address, payload) -> None:
        if not isinstance(payload, (tuple, list)) or len(payload) != 2 or not isinstance(payload[0], str):
            raise TypeError("update expects a (key, value) payload")
        key, value = payload
        self.store.update(address, key, value)

    def _toggle_hidden(self, address, payload) -> bool:
        return self.store.toggle_hidden(address)

    def _remove(self, address, payload) -> ResumeNode:
        return self.store.remove(address)

    def _move(self, address, payload) -> Tuple[ResumeNode, bool]:
        if isinstance(payload, bool) or not isinstance(payload, int):
            raise TypeError("move expects an integer offset payload")
        node = self.store.resolve(address)
        new_index = self.store.move(address, payload)
        return node, new_index != address[-1]

    @staticmethod
    def _event_fields(operation: Operation, payload: Any) -> dict:
        if operation is Operation.UPDATE:
            return {"key": payload[0]}
        if operation is Operation.ADD:
            return {"node_type": payload.type, "uuid": payload.uuid}
        if operation is Operation.MOVE:
            return {"offset": payload}
        return {}
