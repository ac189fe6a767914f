"""
Interaction Context

Responsibilities:
- Tracks hover and selection with select-blocking semantics
- Holds the global edit flag and editor mode
- Computes per-node view state for the presentation layer

Owns: SelectionState
Never: Mutates the document tree
"""

from vitae.contexts.interaction.hover_tracker import HoverSelectTracker
from vitae.contexts.interaction.selection_state import (
    EditorMode,
    InteractionPhase,
    SelectionState,
)
from vitae.contexts.interaction.view_state import NodeViewState, build_view_state

__all__ = [
    "HoverSelectTracker",
    "SelectionState",
    "EditorMode",
    "InteractionPhase",
    "NodeViewState",
    "build_view_state",
]
