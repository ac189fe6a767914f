"""Unit tests for document record conversion."""

import pytest

from vitae.contexts.document.exceptions import DuplicateNodeError, InvalidRecordError
from vitae.contexts.document.node import ResumeNode
from vitae.contexts.document.node_store import NodeStore
from vitae.contexts.document.records import (
    copy_record,
    document_from_record,
    document_to_record,
    from_record,
    to_record,
)


@pytest.mark.unit
def test_to_record_shape():
    """Test a node converts to a plain nested dict."""
    child = ResumeNode(type="list_item", data={"value": "Python"}, hidden=True)
    node = ResumeNode(type="list", children=[child])

    record = to_record(node)

    assert record == {
        "type": "list",
        "uuid": node.uuid,
        "hidden": False,
        "data": {},
        "children": [
            {"type": "list_item", "uuid": child.uuid, "hidden": True, "data": {"value": "Python"}, "children": []}
        ],
    }


@pytest.mark.unit
def test_from_record_keeps_given_uuid_and_assigns_missing():
    """Test uuids from records are kept; missing ones are generated."""
    node = from_record(
        {
            "type": "section",
            "uuid": "fixed-uuid",
            "data": {"title": "Skills"},
            "children": [{"type": "paragraph"}],
        }
    )

    assert node.uuid == "fixed-uuid"
    assert node.data == {"title": "Skills"}
    assert node.hidden is False
    assert node.children[0].type == "paragraph"
    assert node.children[0].uuid


@pytest.mark.unit
def test_document_record_reload_preserves_identity_and_shape():
    """Test converting a document to a record and back keeps uuids, data and order."""
    store = NodeStore(
        [
            ResumeNode(type="header", data={"value": "Jordan"}),
            ResumeNode(type="section", data={"title": "Skills"}, children=[ResumeNode(type="paragraph")]),
        ]
    )

    reloaded = document_from_record(document_to_record(store))

    assert document_to_record(reloaded) == document_to_record(store)
    assert [node.uuid for node in reloaded.iter_nodes()] == [node.uuid for node in store.iter_nodes()]


@pytest.mark.unit
def test_copy_record_strips_all_uuids():
    """Test clipboard copies have no uuids at any depth."""
    node = ResumeNode(type="entry", data={"title": ["A"]}, children=[ResumeNode(type="list")])

    copied = copy_record(to_record(node))

    assert "uuid" not in copied
    assert "uuid" not in copied["children"][0]
    assert from_record(copied).uuid != node.uuid


@pytest.mark.unit
@pytest.mark.parametrize(
    "record",
    [
        "section",
        {"data": {}},
        {"type": ""},
        {"type": "section", "data": ["not", "a", "mapping"]},
        {"type": "section", "children": {"type": "paragraph"}},
    ],
)
def test_from_record_rejects_malformed(record):
    """Test malformed node records raise InvalidRecordError."""
    with pytest.raises(InvalidRecordError):
        from_record(record)


@pytest.mark.unit
def test_document_from_record_validation():
    """Test document-level validation."""
    with pytest.raises(InvalidRecordError):
        document_from_record({"nodes": []})
    with pytest.raises(InvalidRecordError):
        document_from_record({"children": "section"})

    record = {"children": [{"type": "section", "uuid": "same"}, {"type": "section", "uuid": "same"}]}
    with pytest.raises(DuplicateNodeError):
        document_from_record(record)

    assert len(document_from_record({"children": None})) == 0
