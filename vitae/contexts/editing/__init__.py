"""
Editing Context

Responsibilities:
- Routes every write through one funnel (MutationRouter) and re-derives ids after it
- Resolves per-node-type toolbar options (NodeDispatcher)
- Bundles tree, ids, hover/selection and mutation into an EditorSession

Owns: Write ordering, toolbar behavior, clipboard
Never: Emits markup or styles
"""

from vitae.contexts.editing.exceptions import UnknownOperationError
from vitae.contexts.editing.mutation_router import MutationRouter, Operation
from vitae.contexts.editing.session import EditorSession
from vitae.contexts.editing.toolbar_options import (
    NodeDispatcher,
    ToolbarOption,
    default_dispatcher,
    find_option,
    resolve_toolbar_options,
)

__all__ = [
    "EditorSession",
    "MutationRouter",
    "Operation",
    "UnknownOperationError",
    "NodeDispatcher",
    "ToolbarOption",
    "default_dispatcher",
    "find_option",
    "resolve_toolbar_options",
]
