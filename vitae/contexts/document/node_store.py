"""
Node Store

Owns the resume document tree and provides its structural mutation primitives.

The store is deliberately ignorant of addresses being issued, hover state, or
logging of user intent: those belong to the IdAllocator, the interaction
context, and the MutationRouter respectively. Every write validates fully
before touching the tree, so a failed call leaves the document unchanged.
"""

import copy
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence

from vitae.contexts.document.addressing import as_address
from vitae.contexts.document.exceptions import DuplicateNodeError, InvalidAddress
from vitae.contexts.document.node import ResumeNode


class NodeStore:
    """
    Tree of ResumeNodes with uuid index.

    The document itself is not a node: its top level is the `roots` list,
    addressed by the empty address () when adding.

    Attributes:
        roots: Ordered top-level nodes (sections, headers, rows)
    """

    def __init__(self, roots: Iterable[ResumeNode] = ()):
        self.roots: List[ResumeNode] = []
        self._index: Dict[str, ResumeNode] = {}

        for node in roots:
            self._check_unique(node)
            self._register(node)
            self.roots.append(node)

    # Lookups

    def resolve(self, address: Sequence[int]) -> Optional[ResumeNode]:
        """
        Find the node at an address. Pure lookup.

        Returns:
            The node, or None if the address doesn't resolve (the empty
            address resolves to None: the root list is not a node)
        """
        try:
            address = as_address(address)
        except InvalidAddress:
            return None

        if not address:
            return None

        siblings = self.roots
        node = None
        for index in address:
            if index >= len(siblings):
                return None
            node = siblings[index]
            siblings = node.children

        return node

    def find(self, uuid: str) -> Optional[ResumeNode]:
        """Look up a node by uuid."""
        return self._index.get(uuid)

    def contains(self, uuid: str) -> bool:
        return uuid in self._index

    def iter_nodes(self) -> Iterator[ResumeNode]:
        """Yield every node, depth-first pre-order."""
        for root in self.roots:
            yield from root.iter_subtree()

    def __len__(self) -> int:
        return len(self._index)

    # Structural mutations

    def add(self, parent_address: Sequence[int], node: ResumeNode) -> int:
        """
        Append a node as the last child of the node at parent_address.

        Args:
            parent_address: Address of the new parent; () appends a root
            node: Node to insert (with its subtree)

        Returns:
            Index of the new node among its siblings

        Raises:
            InvalidAddress: If parent_address doesn't resolve
            DuplicateNodeError: If the node (or a descendant) is already in the tree
        """
        siblings = self._children_at(parent_address, operation="add")
        self._check_unique(node)

        siblings.append(node)
        self._register(node)
        return len(siblings) - 1

    def remove(self, address: Sequence[int]) -> ResumeNode:
        """
        Detach the node at address (with its subtree) and return it.

        Raises:
            InvalidAddress: If address doesn't resolve
        """
        node = self._require(address, operation="remove")
        address = as_address(address)
        siblings = self._children_at(address[:-1], operation="remove")

        del siblings[address[-1]]
        for removed in node.iter_subtree():
            self._index.pop(removed.uuid, None)

        return node

    def move(self, address: Sequence[int], offset: int) -> int:
        """
        Move a node among its siblings by offset positions.

        The target position is clamped to the sibling range, so moving the
        first child up is a no-op.

        Returns:
            New index of the node among its siblings

        Raises:
            InvalidAddress: If address doesn't resolve
        """
        node = self._require(address, operation="move")
        address = as_address(address)
        siblings = self._children_at(address[:-1], operation="move")

        current = address[-1]
        target = max(0, min(len(siblings) - 1, current + offset))
        if target != current:
            del siblings[current]
            siblings.insert(target, node)

        return target

    # In-place mutations

    def update(self, address: Sequence[int], key: str, value: Any) -> None:
        """
        Merge a value into data[key] of the node at address.

        Mappings are shallow-merged into an existing mapping; any other value
        replaces the old one. The stored value is a copy, so callers can't
        alias document state.

        Raises:
            InvalidAddress: If address doesn't resolve
        """
        node = self._require(address, operation="update")

        current = node.data.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            node.data[key] = {**current, **copy.deepcopy(dict(value))}
        else:
            node.data[key] = copy.deepcopy(value)

    def toggle_hidden(self, address: Sequence[int]) -> bool:
        """
        Flip the hidden flag of the node at address.

        Returns:
            The new flag value

        Raises:
            InvalidAddress: If address doesn't resolve
        """
        node = self._require(address, operation="toggle_hidden")
        node.hidden = not node.hidden
        return node.hidden

    # Internals

    def _require(self, address: Sequence[int], operation: str) -> ResumeNode:
        normalized = as_address(address)
        node = self.resolve(normalized)
        if node is None:
            raise InvalidAddress(normalized, operation=operation)
        return node

    def _children_at(self, parent_address: Sequence[int], operation: str) -> List[ResumeNode]:
        parent_address = as_address(parent_address)
        if not parent_address:
            return self.roots
        return self._require(parent_address, operation=operation).children

    def _check_unique(self, node: ResumeNode) -> None:
        seen = set()
        for member in node.iter_subtree():
            if member.uuid in self._index or member.uuid in seen:
                raise DuplicateNodeError(member.uuid)
            seen.add(member.uuid)

    def _register(self, node: ResumeNode) -> None:
        for member in node.iter_subtree():
            self._index[member.uuid] = member
