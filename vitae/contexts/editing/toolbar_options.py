"""
Toolbar Options

Per-node-type contextual action menus. A NodeDispatcher maps a type
discriminator to a resolver function:

    resolver(data, update) -> list[ToolbarOption]

`data` is a copy of the node's current data and `update(key, value)` is bound
by the caller to the node's current address. Each action calls `update`
exactly once. Adding a node type's menu means registering one function:

    @default_dispatcher.register("paragraph")
    def paragraph_options(data, update):
        return [ToolbarOption("Clear", action=lambda: update("value", ""))]

Types without a resolver get an empty menu.
"""

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from vitae.contexts.document.node import ResumeNode

UpdateCallback = Callable[[str, Any], Any]
ToolbarResolver = Callable[[Dict[str, Any], UpdateCallback], List["ToolbarOption"]]


@dataclass
class ToolbarOption:
    """
    One menu entry: either a leaf with an action or a submenu.

    Attributes:
        label: Text shown in the menu
        action: Zero-argument callable run when the entry is chosen (leaves only)
        submenu: Nested entries (submenus only)
    """

    label: str
    action: Optional[Callable[[], Any]] = None
    submenu: Optional[List["ToolbarOption"]] = None

    def __post_init__(self):
        if (self.action is None) == (self.submenu is None):
            raise ValueError(f"Toolbar option '{self.label}' needs exactly one of action or submenu")

    @property
    def is_leaf(self) -> bool:
        return self.action is not None

    def invoke(self) -> Any:
        if not self.is_leaf:
            raise TypeError(f"'{self.label}' is a submenu and has no action")
        return self.action()

    def to_dict(self) -> Dict[str, Any]:
        """Menu structure without callables, for the toolbar UI."""
        if self.is_leaf:
            return {"label": self.label}
        return {"label": self.label, "submenu": [option.to_dict() for option in self.submenu]}


def find_option(options: Sequence[ToolbarOption], *labels: str) -> Optional[ToolbarOption]:
    """
    Follow a label path through nested menus.

    Example:
        find_option(options, "Title Options", "Add another title field")
    """
    current = None
    entries = options
    for label in labels:
        current = next((option for option in entries or [] if option.label == label), None)
        if current is None:
            return None
        entries = current.submenu
    return current


class NodeDispatcher:
    """Registry of toolbar resolvers keyed by node type."""

    def __init__(self):
        self._resolvers: Dict[str, ToolbarResolver] = {}

    def register(self, node_type: str, resolver: ToolbarResolver = None):
        """
        Register a resolver for a node type. Usable directly or as a decorator.

        A later registration for the same type replaces the earlier one.
        """
        if resolver is not None:
            self._resolvers[node_type] = resolver
            return resolver

        def decorator(func: ToolbarResolver) -> ToolbarResolver:
            self._resolvers[node_type] = func
            return func

        return decorator

    def unregister(self, node_type: str) -> None:
        self._resolvers.pop(node_type, None)

    def is_registered(self, node_type: str) -> bool:
        return node_type in self._resolvers

    @property
    def registered_types(self) -> List[str]:
        return sorted(self._resolvers)

    def resolve(self, node_type: str, node, update: UpdateCallback) -> List[ToolbarOption]:
        """
        Build the option tree for a node.

        Args:
            node_type: Type discriminator selecting the resolver
            node: ResumeNode, or a mapping of its data
            update: Callback writing one data field of the node

        Returns:
            List of options; empty for types without a resolver
        """
        resolver = self._resolvers.get(node_type)
        if resolver is None:
            return []

        data = node.data if isinstance(node, ResumeNode) else node
        # Resolvers get a copy so they can't write around the router
        data = copy.deepcopy(dict(data)) if isinstance(data, Mapping) else {}
        return list(resolver(data, update))


default_dispatcher = NodeDispatcher()


def resolve_toolbar_options(
    node_type: str,
    node,
    update: UpdateCallback,
    dispatcher: NodeDispatcher = None,
) -> List[ToolbarOption]:
    """Resolve options through the given dispatcher (default: built-in resolvers)."""
    return (dispatcher or default_dispatcher).resolve(node_type, node, update)


# Built-in resolvers


def _as_fields(values) -> List[str]:
    # A single field may be stored as a bare string
    if isinstance(values, str):
        return [values]
    return list(values or [])


def _with_blank(values) -> List[str]:
    return _as_fields(values) + [""]


def _without_last(values) -> List[str]:
    return _as_fields(values)[:-1]


@default_dispatcher.register("entry")
def entry_options(data: Dict[str, Any], update: UpdateCallback) -> List[ToolbarOption]:
    """Entries hold parallel lists of title and subtitle fields."""
    titles = _as_fields(data.get("title"))
    subtitles = _as_fields(data.get("subtitle"))

    actions = [
        ToolbarOption("Add another title field", action=lambda: update("title", _with_blank(titles))),
        ToolbarOption("Add another subtitle field", action=lambda: update("subtitle", _with_blank(subtitles))),
    ]

    # An entry always keeps at least one field of each kind
    if len(titles) > 1:
        actions.append(
            ToolbarOption("Remove title field (from right)", action=lambda: update("title", _without_last(titles)))
        )
    if len(subtitles) > 1:
        actions.append(
            ToolbarOption(
                "Remove subtitle field (from right)",
                action=lambda: update("subtitle", _without_last(subtitles)),
            )
        )

    return [ToolbarOption("Title Options", submenu=actions)]


@default_dispatcher.register("section")
def section_options(data: Dict[str, Any], update: UpdateCallback) -> List[ToolbarOption]:
    positions = [("Top", "top"), ("Left", "left")]

    return [
        ToolbarOption(
            "Title Position",
            submenu=[
                ToolbarOption(label, action=lambda value=value: update("title_position", value))
                for label, value in positions
                if value != data.get("title_position", "top")
            ],
        )
    ]


@default_dispatcher.register("header")
def header_options(data: Dict[str, Any], update: UpdateCallback) -> List[ToolbarOption]:
    return [
        ToolbarOption(
            "Orientation",
            submenu=[
                ToolbarOption("Row", action=lambda: update("orientation", "row")),
                ToolbarOption("Column", action=lambda: update("orientation", "column")),
            ],
        )
    ]
