"""
Node View State

Flags the presentation layer needs to draw one node, and the CSS classes
the editor stylesheet keys on.
"""

from dataclasses import dataclass
from typing import List, Sequence

from vitae.contexts.document.node import ResumeNode
from vitae.contexts.interaction.hover_tracker import HoverSelectTracker
from vitae.contexts.interaction.selection_state import EditorMode


@dataclass(frozen=True)
class NodeViewState:
    """
    Attributes:
        is_hovering: Pointer is inside this node's region
        is_select_blocked: Pointer is over one of this node's descendants
        is_selected: Node is selected
        is_editing: Node shows its editable form
        is_hidden: Node is soft-removed
        is_printing: Document is being printed; interaction styling is suppressed
    """

    is_hovering: bool = False
    is_select_blocked: bool = False
    is_selected: bool = False
    is_editing: bool = False
    is_hidden: bool = False
    is_printing: bool = False

    @property
    def css_classes(self) -> List[str]:
        classes = []

        if not self.is_printing:
            if self.is_hovering:
                classes.append("resume-hovering")
                if self.is_select_blocked:
                    classes.append("resume-hovering-over-children")
                else:
                    classes.append("resume-hovering-over-self")

            if self.is_selected:
                classes.append("resume-selected")
                if self.is_editing:
                    classes.append("resume-editing")

        if self.is_hidden:
            classes.append("resume-hidden")

        return classes

    @property
    def class_name(self) -> str:
        return " ".join(self.css_classes)


def build_view_state(tracker: HoverSelectTracker, address: Sequence[int], node: ResumeNode) -> NodeViewState:
    """Compute the view state of a node at a given address."""
    is_printing = tracker.state.mode is EditorMode.PRINTING
    return NodeViewState(
        is_hovering=tracker.is_hovering(address),
        is_select_blocked=tracker.is_select_blocked(address),
        is_selected=tracker.is_selected(node.uuid),
        is_editing=tracker.is_editing(node.uuid),
        is_hidden=node.hidden,
        is_printing=is_printing,
    )
