"""Unit tests for NodeDispatcher and the built-in toolbar resolvers."""

import pytest

from vitae.contexts.document.node import ResumeNode
from vitae.contexts.editing.toolbar_options import (
    NodeDispatcher,
    ToolbarOption,
    default_dispatcher,
    find_option,
    resolve_toolbar_options,
)


class RecordingUpdate:
    """Update callback that records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, key, value):
        self.calls.append((key, value))


@pytest.mark.unit
def test_unknown_type_yields_empty_options():
    """Test unregistered types return an empty list instead of raising."""
    update = RecordingUpdate()
    node = ResumeNode(type="unknown-type")

    assert resolve_toolbar_options("unknown-type", node, update) == []
    assert update.calls == []


@pytest.mark.unit
def test_register_as_decorator_and_directly():
    """Test both registration styles."""
    dispatcher = NodeDispatcher()

    @dispatcher.register("paragraph")
    def paragraph_options(data, update):
        return [ToolbarOption("Clear", action=lambda: update("value", ""))]

    dispatcher.register("title", lambda data, update: [])

    assert dispatcher.is_registered("paragraph")
    assert dispatcher.registered_types == ["paragraph", "title"]

    update = RecordingUpdate()
    options = dispatcher.resolve("paragraph", {"value": "text"}, update)
    options[0].invoke()
    assert update.calls == [("value", "")]

    dispatcher.unregister("paragraph")
    assert dispatcher.resolve("paragraph", {}, update) == []


@pytest.mark.unit
def test_resolver_receives_copy_of_data():
    """Test resolvers can't mutate node data behind the router's back."""
    dispatcher = NodeDispatcher()

    @dispatcher.register("entry")
    def greedy(data, update):
        data["title"].append("sneaky")
        return []

    node = ResumeNode(type="entry", data={"title": ["A"]})
    dispatcher.resolve("entry", node, RecordingUpdate())

    assert node.data["title"] == ["A"]


@pytest.mark.unit
def test_option_needs_exactly_one_of_action_or_submenu():
    """Test option shape validation."""
    with pytest.raises(ValueError):
        ToolbarOption("Nothing")
    with pytest.raises(ValueError):
        ToolbarOption("Both", action=lambda: None, submenu=[])

    submenu = ToolbarOption("Menu", submenu=[ToolbarOption("Leaf", action=lambda: 1)])
    assert not submenu.is_leaf
    assert submenu.to_dict() == {"label": "Menu", "submenu": [{"label": "Leaf"}]}
    with pytest.raises(TypeError):
        submenu.invoke()


@pytest.mark.unit
def test_entry_add_title_field():
    """Test the entry menu appends an empty title field with one update call."""
    update = RecordingUpdate()
    node = ResumeNode(type="entry", data={"title": ["Example Corp"], "subtitle": ["2021"]})

    options = default_dispatcher.resolve("entry", node, update)
    find_option(options, "Title Options", "Add another title field").invoke()

    assert update.calls == [("title", ["Example Corp", ""])]
    assert node.data["title"] == ["Example Corp"]


@pytest.mark.unit
def test_entry_treats_bare_string_as_single_field():
    """Test a title stored as a plain string is kept whole when fields are added."""
    update = RecordingUpdate()
    node = ResumeNode(type="entry", data={"title": "Lead", "subtitle": ["2021"]})

    options = default_dispatcher.resolve("entry", node, update)
    find_option(options, "Title Options", "Add another title field").invoke()

    assert update.calls == [("title", ["Lead", ""])]
    assert find_option(options, "Title Options", "Remove title field (from right)") is None


@pytest.mark.unit
def test_entry_add_subtitle_field_when_missing():
    """Test adding a subtitle field to an entry that has none yet."""
    update = RecordingUpdate()

    options = default_dispatcher.resolve("entry", {}, update)
    find_option(options, "Title Options", "Add another subtitle field").invoke()

    assert update.calls == [("subtitle", [""])]


@pytest.mark.unit
def test_entry_remove_options_only_with_spare_fields():
    """Test remove options appear only when more than one field exists."""
    single = default_dispatcher.resolve("entry", {"title": ["A"], "subtitle": ["B"]}, RecordingUpdate())
    assert find_option(single, "Title Options", "Remove title field (from right)") is None

    update = RecordingUpdate()
    double = default_dispatcher.resolve("entry", {"title": ["A", "B"], "subtitle": ["C", "D"]}, update)
    find_option(double, "Title Options", "Remove title field (from right)").invoke()
    find_option(double, "Title Options", "Remove subtitle field (from right)").invoke()

    assert update.calls == [("title", ["A"]), ("subtitle", ["C"])]


@pytest.mark.unit
def test_section_title_position_offers_other_position():
    """Test the section menu offers moving the title away from its current position."""
    update = RecordingUpdate()

    options = default_dispatcher.resolve("section", {"title_position": "top"}, update)

    assert [option.label for option in options[0].submenu] == ["Left"]
    find_option(options, "Title Position", "Left").invoke()
    assert update.calls == [("title_position", "left")]


@pytest.mark.unit
def test_header_orientation():
    """Test the header orientation submenu."""
    update = RecordingUpdate()

    options = default_dispatcher.resolve("header", {"orientation": "column"}, update)
    find_option(options, "Orientation", "Row").invoke()

    assert update.calls == [("orientation", "row")]


@pytest.mark.unit
def test_find_option_missing_path():
    """Test find_option returns None for unknown labels."""
    options = [ToolbarOption("Menu", submenu=[ToolbarOption("Leaf", action=lambda: None)])]

    assert find_option(options, "Menu", "Leaf").label == "Leaf"
    assert find_option(options, "Other") is None
    assert find_option(options, "Menu", "Leaf", "Deeper") is None
