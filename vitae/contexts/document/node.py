"""
Resume Node

Defines the tagged node value that every resume document is built from.
Behavior is not attached to nodes: type-specific logic is looked up by the
node's type discriminator (see vitae.contexts.editing.toolbar_options).
"""

import uuid as uuid_lib
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List


def new_uuid() -> str:
    """Generate a fresh node identity."""
    return uuid_lib.uuid4().hex


@dataclass(eq=False)
class ResumeNode:
    """
    A typed, nestable content node of a resume.

    Nodes compare by identity. The uuid is assigned once at creation and can't
    be reassigned afterwards; everything else is mutable, but only the
    NodeStore should mutate nodes that are part of a document.

    Attributes:
        type: Discriminator selecting type-specific behavior (e.g., "section", "entry")
        data: Field name -> value (text, flag, list of text, or nested mapping)
        children: Ordered child nodes
        hidden: Soft-removal flag
        uuid: Permanent identity
    """

    type: str
    data: Dict[str, Any] = field(default_factory=dict)
    children: List["ResumeNode"] = field(default_factory=list)
    hidden: bool = False
    uuid: str = field(default_factory=new_uuid)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "uuid" and "uuid" in self.__dict__:
            raise AttributeError("uuid is assigned once at creation and cannot change")
        super().__setattr__(name, value)

    @property
    def is_empty(self) -> bool:
        """True if this node has no children."""
        return len(self.children) == 0

    def get(self, key: str, default: Any = None) -> Any:
        """Shortcut for data.get()."""
        return self.data.get(key, default)

    def iter_subtree(self) -> Iterator["ResumeNode"]:
        """Yield this node and all of its descendants in depth-first pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
