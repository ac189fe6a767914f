"""
Document Records

Converts between the node tree and plain nested dicts, the shape shared with
the persistence and export collaborators:

    {
        "type": "section",
        "uuid": "3f2a...",          # optional on input
        "hidden": false,             # optional on input
        "data": {"title": "Education"},
        "children": [ ... ],
    }

A whole document is {"children": [<root records>]}.
"""

import copy
from collections.abc import Mapping
from typing import Any, Dict, List

from vitae.contexts.document.exceptions import InvalidRecordError
from vitae.contexts.document.node import ResumeNode, new_uuid
from vitae.contexts.document.node_store import NodeStore


def to_record(node: ResumeNode) -> Dict[str, Any]:
    """Convert a node (with its subtree) to a plain nested dict."""
    return {
        "type": node.type,
        "uuid": node.uuid,
        "hidden": node.hidden,
        "data": copy.deepcopy(node.data),
        "children": [to_record(child) for child in node.children],
    }


def from_record(record: Mapping) -> ResumeNode:
    """
    Build a node tree from a record. Missing uuids are freshly assigned.

    Raises:
        InvalidRecordError: If the record (or a nested child) is malformed
    """
    if not isinstance(record, Mapping):
        raise InvalidRecordError(f"Node record must be a mapping, got {type(record).__name__}")

    node_type = record.get("type")
    if not isinstance(node_type, str) or not node_type:
        raise InvalidRecordError(f"Node record is missing its 'type': {dict(record)!r}")

    data = record.get("data") or {}
    if not isinstance(data, Mapping):
        raise InvalidRecordError(f"'data' of {node_type} record must be a mapping")

    children = record.get("children") or []
    if not isinstance(children, list):
        raise InvalidRecordError(f"'children' of {node_type} record must be a list")

    return ResumeNode(
        type=node_type,
        data=copy.deepcopy(dict(data)),
        children=[from_record(child) for child in children],
        hidden=bool(record.get("hidden", False)),
        uuid=record.get("uuid") or new_uuid(),
    )


def copy_record(record: Mapping) -> Dict[str, Any]:
    """
    Deep copy of a record with every uuid stripped.

    Used for clipboard paste: from_record() on the result yields a subtree
    with fresh identities.
    """
    stripped = {key: copy.deepcopy(value) for key, value in record.items() if key not in ("uuid", "children")}
    stripped["children"] = [copy_record(child) for child in record.get("children") or []]
    return stripped


def document_to_record(store: NodeStore) -> Dict[str, List[Dict[str, Any]]]:
    """Convert a whole document to {"children": [...]}."""
    return {"children": [to_record(root) for root in store.roots]}


def document_from_record(record: Mapping) -> NodeStore:
    """
    Build a NodeStore from {"children": [...]}.

    Raises:
        InvalidRecordError: If the document record is malformed
        DuplicateNodeError: If the record repeats a uuid
    """
    if not isinstance(record, Mapping) or "children" not in record:
        raise InvalidRecordError("Document record must contain a 'children' list")

    roots = record["children"] or []
    if not isinstance(roots, list):
        raise InvalidRecordError("Document 'children' must be a list")

    return NodeStore(from_record(root) for root in roots)
