"""
Selection State

The single per-document record of what the pointer is over, which node is
selected, and whether the selected node is being edited.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from vitae.contexts.document.addressing import HierarchicalId


class EditorMode(str, Enum):
    """Mode of the open document. Only NORMAL accepts hover and clicks."""

    NORMAL = "normal"
    PRINTING = "printing"
    CHANGING_TEMPLATE = "changing_template"

    @property
    def is_interactive(self) -> bool:
        return self is EditorMode.NORMAL


class InteractionPhase(str, Enum):
    """Combined hover/selection state, derived from SelectionState."""

    IDLE = "idle"
    HOVERING = "hovering"
    SELECTED = "selected"
    SELECTED_AND_HOVERING = "selected_and_hovering"


@dataclass
class SelectionState:
    """
    Hover/selection state of one open document.

    Attributes:
        selected_uuid: uuid of the selected node (selection survives reordering)
        hover_id: Address of the innermost node under the pointer
        hover_uuid: uuid of that node, used to re-derive hover_id after a structural change
        editing: Global edit flag; only the selected node can be in its editable form
        mode: Current editor mode
    """

    selected_uuid: Optional[str] = None
    hover_id: Optional[HierarchicalId] = None
    hover_uuid: Optional[str] = None
    editing: bool = False
    mode: EditorMode = EditorMode.NORMAL

    @property
    def phase(self) -> InteractionPhase:
        if self.selected_uuid is None:
            return InteractionPhase.IDLE if self.hover_id is None else InteractionPhase.HOVERING
        if self.hover_id is None:
            return InteractionPhase.SELECTED
        return InteractionPhase.SELECTED_AND_HOVERING

    def clear_hover(self) -> None:
        self.hover_id = None
        self.hover_uuid = None

    def clear_selection(self) -> None:
        self.selected_uuid = None
        self.editing = False
