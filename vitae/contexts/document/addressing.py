"""
Hierarchical addressing for resume nodes.

A node's address is the path of sibling indices from the root list down to
the node: roots get (i,), their children (i, j), and so on. Addresses depend
on the current tree shape, so they are recomputed by the IdAllocator after
every mutation. Addresses handed out by the allocator remember the snapshot
(generation) they were derived from, which lets the mutation router reject a
stale address instead of silently hitting whichever node now sits there.

Examples:
    >>> a = HierarchicalId((0, 1))
    >>> is_descendant((0, 1, 2), a)
    True
    >>> is_descendant(a, a)
    False
    >>> format_address(a)
    '0.1'
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from vitae.contexts.document.exceptions import InvalidAddress
from vitae.contexts.document.node import ResumeNode


class HierarchicalId(tuple):
    """
    Tuple of sibling indices identifying a node within one tree snapshot.

    Compares, hashes and sorts like a plain tuple, so HierarchicalId((0, 1)) == (0, 1).
    The generation is metadata only.

    Attributes:
        generation: Snapshot counter this id was derived from (None for
                    caller-constructed ids, which are checked against shape only)
    """

    def __new__(cls, indices: Iterable[int] = (), generation: Optional[int] = None):
        obj = super().__new__(cls, indices)
        obj.generation = generation
        return obj

    def __repr__(self) -> str:
        return f"HierarchicalId({list(self)}, generation={self.generation})"

    @property
    def parent(self) -> "HierarchicalId":
        """Address of the parent; the empty id for roots."""
        return HierarchicalId(self[:-1], self.generation)

    def child(self, index: int) -> "HierarchicalId":
        return HierarchicalId(tuple(self) + (index,), self.generation)


def as_address(value: Sequence[Any]) -> HierarchicalId:
    """
    Normalize a caller-supplied address (list, tuple, HierarchicalId).

    Raises:
        InvalidAddress: If the value is not a sequence of non-negative integers
    """
    if isinstance(value, HierarchicalId):
        return value

    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise InvalidAddress(value, reason="address must be a sequence of sibling indices")

    for index in value:
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise InvalidAddress(value, reason=f"bad sibling index {index!r}")

    return HierarchicalId(value)


def is_descendant(address: Sequence[int], ancestor: Sequence[int]) -> bool:
    """True iff `ancestor` is a strict prefix of `address`."""
    return len(address) > len(ancestor) and tuple(address[: len(ancestor)]) == tuple(ancestor)


def is_self_or_descendant(address: Sequence[int], ancestor: Sequence[int]) -> bool:
    """True iff `ancestor` is a prefix of `address` (equality included)."""
    return len(address) >= len(ancestor) and tuple(address[: len(ancestor)]) == tuple(ancestor)


def format_address(address: Sequence[int]) -> str:
    """Render an address as dotted indices ('0.1.2'); the root list renders as '-'."""
    return ".".join(str(i) for i in address) if len(address) else "-"


def parse_address(text: str) -> HierarchicalId:
    """
    Parse a dotted address ('0.1.2'). '-' and '' parse to the root list.

    Raises:
        InvalidAddress: If any component is not a non-negative integer
    """
    text = text.strip()
    if text in ("", "-"):
        return HierarchicalId()

    try:
        indices = [int(part) for part in text.split(".")]
    except ValueError:
        raise InvalidAddress(text, reason="expected dotted sibling indices like 0.1.2") from None

    return as_address(indices)


def walk_tree(
    roots: List[ResumeNode], generation: Optional[int] = None
) -> Iterator[Tuple[HierarchicalId, ResumeNode]]:
    """Yield (address, node) for every node, depth-first pre-order."""
    stack = [(HierarchicalId((i,), generation), node) for i, node in enumerate(roots)]
    stack.reverse()

    while stack:
        address, node = stack.pop()
        yield address, node
        for i in range(len(node.children) - 1, -1, -1):
            stack.append((address.child(i), node.children[i]))


class IdAllocator:
    """
    Derives positional addresses from the current shape of a NodeStore.

    The full table is rebuilt on every recompute(); documents hold tens of
    nodes, so the O(n) walk is not worth caching around. The generation only
    advances when the shape changed, so field edits don't invalidate
    addresses the renderer already holds.
    """

    def __init__(self, store):
        self.store = store
        self.generation = 0
        self._ids: Dict[str, HierarchicalId] = {}
        self.recompute(structural=False)

    def recompute(self, structural: bool = True) -> None:
        """
        Rebuild the uuid -> address table.

        Args:
            structural: True if siblings were inserted, removed or reordered
                        since the last recompute
        """
        if structural:
            self.generation += 1

        self._ids = {node.uuid: address for address, node in walk_tree(self.store.roots, self.generation)}

    def id_for(self, uuid: str) -> Optional[HierarchicalId]:
        """Current address of the node with this uuid, or None if it's not in the tree."""
        return self._ids.get(uuid)

    def walk(self) -> Iterator[Tuple[HierarchicalId, ResumeNode]]:
        """Yield (address, node) pairs for the current snapshot."""
        return walk_tree(self.store.roots, self.generation)

    def is_current(self, address: Sequence[int]) -> bool:
        """False only for allocator-issued ids from an older snapshot."""
        generation = getattr(address, "generation", None)
        return generation is None or generation == self.generation

    def require_current(self, address: Sequence[int], operation: Optional[str] = None) -> None:
        """
        Raises:
            InvalidAddress: If the address was issued for an older snapshot
        """
        if not self.is_current(address):
            raise InvalidAddress(
                address,
                reason=f"stale address from generation {address.generation} "
                f"(current: {self.generation})",
                operation=operation,
            )

    def __len__(self) -> int:
        return len(self._ids)
