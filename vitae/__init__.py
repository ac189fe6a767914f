"""
VITAE - Visual Interactive Tree Architecture for Editing resumes

A domain-driven engine for an in-browser resume editor. Resumes are trees of
typed, nestable content nodes; the engine owns the tree and the interaction
state, while rendering and styling live outside it.

Architecture:
- Document Context: Node tree ownership, positional addressing, records and templates
- Interaction Context: Hover/selection tracking and per-node view state
- Editing Context: Mutation routing, toolbar options, and the editor session
"""

__version__ = "0.1.0"
