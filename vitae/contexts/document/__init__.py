"""
Document Context

Responsibilities:
- Owns the resume node tree (NodeStore) and its structural mutation primitives
- Derives positional addresses from the current tree shape (IdAllocator)
- Converts trees to and from plain nested records
- Loads node type definitions and starter templates

Owns: Node identity, tree shape, addressing
Never: Tracks pointer state or decides which mutation a user intended
"""

from vitae.contexts.document.addressing import (
    HierarchicalId,
    IdAllocator,
    format_address,
    is_descendant,
    parse_address,
)
from vitae.contexts.document.exceptions import (
    DuplicateNodeError,
    InvalidAddress,
    InvalidRecordError,
    VitaeError,
)
from vitae.contexts.document.node import ResumeNode
from vitae.contexts.document.node_store import NodeStore
from vitae.contexts.document.node_types import NodeTypeRegistry
from vitae.contexts.document.records import (
    document_from_record,
    document_to_record,
    from_record,
    to_record,
)
from vitae.contexts.document.templates import list_templates, load_template

__all__ = [
    # Tree
    "ResumeNode",
    "NodeStore",
    # Addressing
    "HierarchicalId",
    "IdAllocator",
    "format_address",
    "parse_address",
    "is_descendant",
    # Records and templates
    "to_record",
    "from_record",
    "document_to_record",
    "document_from_record",
    "load_template",
    "list_templates",
    "NodeTypeRegistry",
    # Errors
    "VitaeError",
    "InvalidAddress",
    "DuplicateNodeError",
    "InvalidRecordError",
]
