"""
Editor Session

One open document: the tree, its ids, the hover/selection state and the
mutation funnel, bundled into a single context object that the presentation
layer and toolbar UI hold by reference. Every engine operation they may call
is a method here; no other path writes to the document.

Usage:
    session = EditorSession.from_template("classic")

    for address, node in session.walk():
        view = session.view_state(address)
        ...  # render node with view.class_name

    session.hover_over((1, 0))
    session.click((1, 0))
    for option in session.selected_toolbar_options():
        ...
"""

from typing import Any, Iterator, List, Mapping, Optional, Sequence, Tuple

from vitae.contexts.document.addressing import HierarchicalId, IdAllocator, as_address
from vitae.contexts.document.exceptions import InvalidAddress
from vitae.contexts.document.node import ResumeNode
from vitae.contexts.document.node_store import NodeStore
from vitae.contexts.document.node_types import NodeTypeRegistry
from vitae.contexts.document.records import (
    copy_record,
    document_from_record,
    document_to_record,
    from_record,
    to_record,
)
from vitae.contexts.document.templates import load_template
from vitae.contexts.editing.logger import _log_info
from vitae.contexts.editing.mutation_router import MutationRouter, Operation
from vitae.contexts.editing.toolbar_options import (
    NodeDispatcher,
    ToolbarOption,
    UpdateCallback,
    default_dispatcher,
)
from vitae.contexts.interaction.hover_tracker import HoverSelectTracker
from vitae.contexts.interaction.selection_state import EditorMode, SelectionState
from vitae.contexts.interaction.view_state import NodeViewState, build_view_state


class EditorSession:
    """
    Session context for one open document.

    Attributes:
        tree: The document's NodeStore
        ids: IdAllocator deriving addresses from the tree
        selection: SelectionState (hover, selection, edit flag, mode)
        hover: HoverSelectTracker operating on `selection`
        router: MutationRouter, the only writer of `tree`
        dispatcher: Toolbar resolver registry
        node_types: Node type definitions used by add_new()
        clipboard: Record of the last copied subtree (uuids stripped)
    """

    def __init__(
        self,
        tree: NodeStore = None,
        dispatcher: NodeDispatcher = None,
        node_types: NodeTypeRegistry = None,
        mode: EditorMode = EditorMode.NORMAL,
    ):
        self.tree = tree if tree is not None else NodeStore()
        self.ids = IdAllocator(self.tree)
        self.selection = SelectionState(mode=EditorMode(mode))
        self.hover = HoverSelectTracker(self.tree, self.ids, self.selection)
        self.router = MutationRouter(self.tree, self.ids, self.hover)
        self.dispatcher = dispatcher or default_dispatcher
        self.node_types = node_types or NodeTypeRegistry()
        self.clipboard: Optional[dict] = None

    @classmethod
    def from_template(cls, name: str, templates_path=None, **kwargs) -> "EditorSession":
        """Open a new document from a starter template."""
        session = cls(load_template(name, templates_path), **kwargs)
        _log_info(f"Opened template '{name}' ({len(session.tree)} nodes)")
        return session

    @classmethod
    def from_record(cls, record: Mapping, **kwargs) -> "EditorSession":
        """Open a document from a {"children": [...]} record."""
        return cls(document_from_record(record), **kwargs)

    def to_record(self) -> dict:
        return document_to_record(self.tree)

    # Reads

    def resolve(self, address: Sequence[int]) -> Optional[ResumeNode]:
        return self.tree.resolve(address)

    def address_of(self, uuid: str) -> Optional[HierarchicalId]:
        """Current address of a node, or None if it's not in the document."""
        return self.ids.id_for(uuid)

    def walk(self) -> Iterator[Tuple[HierarchicalId, ResumeNode]]:
        """(address, node) for every node, in render order."""
        return self.ids.walk()

    def view_state(self, address: Sequence[int]) -> NodeViewState:
        """
        Raises:
            InvalidAddress: If the address doesn't resolve
        """
        node = self.tree.resolve(address)
        if node is None:
            raise InvalidAddress(as_address(address), operation="view_state")
        return build_view_state(self.hover, address, node)

    # Writes (all through the router)

    def mutate(self, address: Sequence[int], operation, payload: Any = None) -> Any:
        return self.router.mutate(address, operation, payload)

    def add(self, parent_address: Sequence[int], node: ResumeNode) -> HierarchicalId:
        return self.router.add(parent_address, node)

    def add_new(self, parent_address: Sequence[int], node_type: str, **data: Any) -> HierarchicalId:
        """Create a node with its type's defaults and append it under parent_address."""
        return self.router.add(parent_address, self.node_types.create_node(node_type, **data))

    def update(self, address: Sequence[int], key: str, value: Any) -> None:
        self.router.update(address, key, value)

    def toggle_hidden(self, address: Sequence[int]) -> bool:
        return self.router.toggle_hidden(address)

    def remove(self, address: Sequence[int]) -> ResumeNode:
        return self.router.remove(address)

    def move(self, address: Sequence[int], offset: int) -> HierarchicalId:
        return self.router.move(address, offset)

    # Clipboard

    def copy(self, address: Sequence[int]) -> None:
        """
        Copy the subtree at address to the clipboard.

        Raises:
            InvalidAddress: If the address doesn't resolve
        """
        node = self.tree.resolve(address)
        if node is None:
            raise InvalidAddress(as_address(address), operation="copy")
        self.clipboard = copy_record(to_record(node))

    def paste(self, parent_address: Sequence[int]) -> Optional[HierarchicalId]:
        """
        Append a fresh copy of the clipboard under parent_address.

        Returns:
            Address of the pasted node, or None if the clipboard is empty
        """
        if self.clipboard is None:
            return None
        return self.router.add(parent_address, from_record(self.clipboard))

    # Hover / selection

    def hover_over(self, address: Sequence[int]) -> None:
        self.hover.hover_over(address)

    def hover_out(self, address: Sequence[int]) -> None:
        self.hover.hover_out(address)

    def is_hovering(self, address: Sequence[int]) -> bool:
        return self.hover.is_hovering(address)

    def is_selected(self, uuid: str) -> bool:
        return self.hover.is_selected(uuid)

    def is_select_blocked(self, address: Sequence[int]) -> bool:
        return self.hover.is_select_blocked(address)

    def is_editing(self, uuid: str) -> bool:
        return self.hover.is_editing(uuid)

    def click(self, address: Sequence[int]) -> bool:
        return self.hover.click(address)

    def update_selected(self, address: Optional[Sequence[int]] = None) -> None:
        self.hover.update_selected(address)

    def toggle_edit(self) -> bool:
        return self.hover.toggle_edit()

    def set_mode(self, mode: EditorMode) -> None:
        self.hover.set_mode(mode)

    # Toolbar

    def resolve_toolbar_options(self, node_type: str, node, update: UpdateCallback) -> List[ToolbarOption]:
        return self.dispatcher.resolve(node_type, node, update)

    def toolbar_options_for(self, address: Sequence[int]) -> List[ToolbarOption]:
        """
        Options for the node at address, with actions bound to that address.

        Raises:
            InvalidAddress: If the address doesn't resolve
        """
        node = self.tree.resolve(address)
        if node is None:
            raise InvalidAddress(as_address(address), operation="toolbar_options")

        # Bind an issued id so a late action is rejected as stale after a reshape
        bound = self.ids.id_for(node.uuid)

        def update(key: str, value: Any) -> None:
            self.router.mutate(bound, Operation.UPDATE, (key, value))

        return self.dispatcher.resolve(node.type, node, update)

    def selected_toolbar_options(self) -> List[ToolbarOption]:
        """Options for the selected node; empty when nothing is selected."""
        uuid = self.hover.selected_uuid
        if uuid is None:
            return []
        return self.toolbar_options_for(self.ids.id_for(uuid))
