"""Integration tests for loading starter templates."""

import pytest

from vitae.contexts.document.exceptions import InvalidRecordError
from vitae.contexts.document.templates import list_templates, load_template
from vitae.contexts.editing.session import EditorSession


@pytest.mark.integration
def test_packaged_templates_listed():
    """Test the packaged templates are discovered."""
    templates = list_templates()

    assert "classic" in templates
    assert "blank" in templates


@pytest.mark.integration
def test_classic_template_structure():
    """Test the classic template loads into the expected top-level shape."""
    store = load_template("classic")

    assert [node.type for node in store.roots] == ["row", "section", "section", "section"]
    assert [node.data.get("title") for node in store.roots[1:]] == ["Objective", "Education", "Experience"]

    entry = store.resolve([2, 0])
    assert entry.type == "entry"
    assert entry.data["title"] == ["State University"]
    assert store.resolve([2, 0, 0, 0]).type == "list_item"


@pytest.mark.integration
def test_each_load_gets_fresh_uuids():
    """Test two loads of the same template are independent documents."""
    first = {node.uuid for node in load_template("classic").iter_nodes()}
    second = {node.uuid for node in load_template("classic").iter_nodes()}

    assert first.isdisjoint(second)


@pytest.mark.integration
def test_missing_template_raises():
    """Test a helpful error for unknown template names."""
    with pytest.raises(FileNotFoundError, match="Available"):
        load_template("does_not_exist")


@pytest.mark.integration
def test_invalid_template_raises(tmp_path):
    """Test a template that isn't a document record is rejected."""
    (tmp_path / "broken.yaml").write_text("sections:\n  - type: section\n")

    with pytest.raises(InvalidRecordError):
        load_template("broken", templates_path=tmp_path)


@pytest.mark.integration
def test_session_from_template_edit_cycle():
    """Test a realistic editing pass over the classic template."""
    session = EditorSession.from_template("classic")
    experience = session.tree.roots[3]

    entry_address = session.add_new(session.address_of(experience.uuid), "entry")
    session.update(entry_address, "title", ["Startup Inc", "Engineer"])
    session.move(session.address_of(experience.uuid), -1)

    assert session.address_of(experience.uuid) == (2,)
    assert session.resolve((2, 1)).data["title"] == ["Startup Inc", "Engineer"]
