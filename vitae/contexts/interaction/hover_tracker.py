"""
Hover/Select Tracker

Session-wide state machine for pointer hover, selection and the edit flag.

Pointer-enter events arrive for every node the pointer crosses, innermost
last, so the hover address is always the innermost node under the pointer.
Ancestors of that node are "select-blocked": a click bubbles up through every
node containing the pointer, and only the innermost one may take the selection.

States (see InteractionPhase): IDLE, HOVERING(id), SELECTED(uuid),
SELECTED_AND_HOVERING(uuid, id). In a non-interactive mode (printing,
changing template) the tracker stays IDLE and hover/click calls are no-ops.
"""

from typing import Optional, Sequence

from vitae.contexts.document.addressing import (
    IdAllocator,
    as_address,
    format_address,
    is_descendant,
    is_self_or_descendant,
)
from vitae.contexts.document.exceptions import InvalidAddress
from vitae.contexts.document.node import ResumeNode
from vitae.contexts.document.node_store import NodeStore
from vitae.contexts.interaction.logger import _log_debug, _log_info
from vitae.contexts.interaction.selection_state import (
    EditorMode,
    InteractionPhase,
    SelectionState,
)


class HoverSelectTracker:
    """
    Tracks hover and selection for one open document.

    Selection is stored by uuid, so it follows its node through reorders.
    Hover is stored by address (that's what pointer events carry) plus the
    hovered node's uuid, so the address can be re-derived after the tree
    changes shape.
    """

    def __init__(self, store: NodeStore, allocator: IdAllocator, state: SelectionState = None):
        self.store = store
        self.allocator = allocator
        self.state = state if state is not None else SelectionState()

    # Read side

    @property
    def is_interactive(self) -> bool:
        return self.state.mode.is_interactive

    @property
    def phase(self) -> InteractionPhase:
        self._prune_selection()
        return self.state.phase

    @property
    def hover_id(self):
        return self.state.hover_id

    @property
    def selected_uuid(self) -> Optional[str]:
        """uuid of the selected node; cleared first if that node left the tree."""
        self._prune_selection()
        return self.state.selected_uuid

    @property
    def selected_node(self) -> Optional[ResumeNode]:
        uuid = self.selected_uuid
        return self.store.find(uuid) if uuid else None

    def is_hovering(self, address: Sequence[int]) -> bool:
        """True if the pointer is inside this node's region (on it or on a descendant)."""
        hover = self.state.hover_id
        if hover is None or not self.is_interactive:
            return False
        return is_self_or_descendant(hover, as_address(address))

    def is_select_blocked(self, address: Sequence[int]) -> bool:
        """True if the pointer is over a strict descendant of this node."""
        hover = self.state.hover_id
        if hover is None:
            return False
        return is_descendant(hover, as_address(address))

    def is_selected(self, uuid: str) -> bool:
        return uuid is not None and self.selected_uuid == uuid

    def is_editing(self, uuid: str) -> bool:
        """A node shows its editable form only while selected with the edit flag set."""
        return self.state.editing and self.is_selected(uuid)

    # Pointer events

    def hover_over(self, address: Sequence[int]) -> None:
        """
        Pointer entered the node at address.

        Raises:
            InvalidAddress: If the address doesn't resolve or is stale
        """
        if not self.is_interactive:
            _log_debug(f"Ignoring hover over {list(address)} in {self.state.mode.value} mode")
            return

        node = self._resolve(address, operation="hover_over")
        self.state.hover_id = self.allocator.id_for(node.uuid)
        self.state.hover_uuid = node.uuid

    def hover_out(self, address: Sequence[int]) -> None:
        """
        Pointer left the node at address.

        Only clears hover if it still points at that node: a late leave event
        from a previously hovered sibling must not clobber a newer enter.
        """
        if not self.is_interactive or self.state.hover_id is None:
            return

        address = as_address(address)
        if not self.allocator.is_current(address):
            _log_debug(f"Ignoring stale hover out from {format_address(address)}")
            return

        if tuple(address) == tuple(self.state.hover_id):
            self.state.clear_hover()

    def click(self, address: Sequence[int]) -> bool:
        """
        Select the node at address, unless it is already selected or select-blocked.

        Returns:
            True if the selection changed

        Raises:
            InvalidAddress: If the address doesn't resolve or is stale
        """
        if not self.is_interactive:
            _log_debug(f"Ignoring click on {list(address)} in {self.state.mode.value} mode")
            return False

        node = self._resolve(address, operation="click")
        if self.is_selected(node.uuid) or self.is_select_blocked(address):
            return False

        self._select(node.uuid)
        return True

    set_selected = click

    def update_selected(self, address: Optional[Sequence[int]] = None) -> None:
        """
        Explicitly set the selection, bypassing select-blocking.

        Args:
            address: Node to select; None clears the selection (e.g., a click on empty canvas)

        Raises:
            InvalidAddress: If the address doesn't resolve or is stale
        """
        if address is None:
            if self.state.selected_uuid is not None:
                _log_debug("Selection cleared")
            self.state.clear_selection()
            return

        if not self.is_interactive:
            return

        node = self._resolve(address, operation="update_selected")
        if not self.is_selected(node.uuid):
            self._select(node.uuid)

    def toggle_edit(self) -> bool:
        """
        Flip the global edit flag.

        Returns:
            The new flag value
        """
        if not self.is_interactive:
            return self.state.editing

        self.state.editing = not self.state.editing
        return self.state.editing

    # Session events

    def set_mode(self, mode: EditorMode) -> None:
        """Switch editor mode. Leaving NORMAL mode drops hover, selection and editing."""
        mode = EditorMode(mode)
        if mode is self.state.mode:
            return

        _log_info(f"Editor mode: {self.state.mode.value} -> {mode.value}")
        self.state.mode = mode
        if not mode.is_interactive:
            self.state.clear_hover()
            self.state.clear_selection()

    def on_structure_changed(self) -> None:
        """
        Re-derive state after siblings were inserted, removed or reordered.

        Called by the mutation router after the allocator has recomputed ids.
        """
        self._prune_selection()

        if self.state.hover_uuid is not None:
            hover_id = self.allocator.id_for(self.state.hover_uuid)
            if hover_id is None:
                _log_debug("Hovered node left the tree; hover cleared")
                self.state.clear_hover()
            else:
                self.state.hover_id = hover_id

    # Internals

    def _select(self, uuid: str) -> None:
        _log_debug(f"Selected {uuid}")
        self.state.selected_uuid = uuid
        # The edit flag belongs to the previous selection
        self.state.editing = False

    def _prune_selection(self) -> None:
        uuid = self.state.selected_uuid
        if uuid is not None and not self.store.contains(uuid):
            _log_debug(f"Selected node {uuid} left the tree; selection cleared")
            self.state.clear_selection()

    def _resolve(self, address: Sequence[int], operation: str) -> ResumeNode:
        address = as_address(address)
        self.allocator.require_current(address, operation=operation)
        node = self.store.resolve(address)
        if node is None:
            raise InvalidAddress(address, operation=operation)
        return node
