"""Unit tests for hierarchical addresses and the IdAllocator."""

import itertools

import pytest

from vitae.contexts.document.addressing import (
    HierarchicalId,
    IdAllocator,
    as_address,
    format_address,
    is_descendant,
    parse_address,
)
from vitae.contexts.document.exceptions import InvalidAddress
from vitae.contexts.document.node import ResumeNode
from vitae.contexts.document.node_store import NodeStore


def _store_a_b():
    """root = [A(children=[B])]"""
    b = ResumeNode(type="entry")
    a = ResumeNode(type="section", children=[b])
    return NodeStore([a]), a, b


def _wide_store():
    return NodeStore(
        [
            ResumeNode(
                type="section",
                children=[
                    ResumeNode(type="entry", children=[ResumeNode(type="list"), ResumeNode(type="list")]),
                    ResumeNode(type="paragraph"),
                ],
            ),
            ResumeNode(type="row", children=[ResumeNode(type="title"), ResumeNode(type="paragraph")]),
            ResumeNode(type="section"),
        ]
    )


@pytest.mark.unit
def test_addresses_for_nested_tree():
    """Test A=[0], B=[0,0]."""
    store, a, b = _store_a_b()
    allocator = IdAllocator(store)

    assert allocator.id_for(a.uuid) == (0,)
    assert allocator.id_for(b.uuid) == (0, 0)


@pytest.mark.unit
def test_addresses_are_pairwise_distinct():
    """Test every node gets its own address and it resolves back to that node."""
    store = _wide_store()
    allocator = IdAllocator(store)

    pairs = list(allocator.walk())
    addresses = [address for address, _ in pairs]

    assert len(addresses) == len(store) == len(allocator)
    assert len(set(addresses)) == len(addresses)
    for address, node in pairs:
        assert store.resolve(address) is node


@pytest.mark.unit
def test_walk_is_preorder_with_child_extension():
    """Test child ids extend their parent id by the sibling index."""
    store = _wide_store()
    allocator = IdAllocator(store)

    assert [tuple(address) for address, _ in allocator.walk()] == [
        (0,),
        (0, 0),
        (0, 0, 0),
        (0, 0, 1),
        (0, 1),
        (1,),
        (1, 0),
        (1, 1),
        (2,),
    ]


@pytest.mark.unit
def test_is_descendant_is_strict_prefix():
    """Test the descendant predicate."""
    assert is_descendant((0, 0), (0,))
    assert is_descendant([0, 1, 2], [0])
    assert not is_descendant((0,), (0,))
    assert not is_descendant((0,), (0, 0))
    assert not is_descendant((1, 0), (0,))
    assert is_descendant((0,), ())


@pytest.mark.unit
def test_is_descendant_matches_prefix_definition():
    """Test the predicate against every pair of addresses in a tree."""
    allocator = IdAllocator(_wide_store())
    addresses = [address for address, _ in allocator.walk()]

    for a, b in itertools.product(addresses, repeat=2):
        expected = len(b) < len(a) and tuple(a[: len(b)]) == tuple(b)
        assert is_descendant(a, b) == expected


@pytest.mark.unit
def test_ids_compare_lexicographically():
    """Test ordering of ids follows document order."""
    assert HierarchicalId((0, 1)) < HierarchicalId((0, 1, 0)) < HierarchicalId((1,))
    assert HierarchicalId((0, 1), generation=3) == (0, 1)


@pytest.mark.unit
def test_generation_advances_only_on_structural_recompute():
    """Test field edits keep issued ids current; shape changes don't."""
    store, a, b = _store_a_b()
    allocator = IdAllocator(store)
    issued = allocator.id_for(b.uuid)

    allocator.recompute(structural=False)
    assert allocator.is_current(issued)

    store.add([0], ResumeNode(type="entry"))
    allocator.recompute()

    assert not allocator.is_current(issued)
    assert allocator.is_current(allocator.id_for(b.uuid))
    # Caller-built addresses carry no generation and are checked against shape only
    assert allocator.is_current((0, 0))


@pytest.mark.unit
def test_require_current_raises_for_stale_id():
    """Test stale ids are reported with InvalidAddress."""
    store, a, b = _store_a_b()
    allocator = IdAllocator(store)
    issued = allocator.id_for(b.uuid)
    allocator.recompute()

    with pytest.raises(InvalidAddress, match="stale"):
        allocator.require_current(issued)


@pytest.mark.unit
def test_recompute_follows_reorder():
    """Test ids are re-derived after siblings move."""
    store = NodeStore([ResumeNode(type="section"), ResumeNode(type="section")])
    first, second = store.roots
    allocator = IdAllocator(store)

    store.move([0], 1)
    allocator.recompute()

    assert allocator.id_for(first.uuid) == (1,)
    assert allocator.id_for(second.uuid) == (0,)


@pytest.mark.unit
def test_id_for_unknown_uuid():
    """Test id_for() returns None for nodes outside the tree."""
    allocator = IdAllocator(NodeStore())

    assert allocator.id_for("missing") is None
    assert list(allocator.walk()) == []


@pytest.mark.unit
def test_parse_and_format_address():
    """Test dotted address text conversion."""
    assert parse_address("0.1.2") == (0, 1, 2)
    assert parse_address(" 3 ") == (3,)
    assert parse_address("-") == ()
    assert format_address((0, 1, 2)) == "0.1.2"
    assert format_address(()) == "-"

    with pytest.raises(InvalidAddress):
        parse_address("0.a")
    with pytest.raises(InvalidAddress):
        parse_address("0.-1")


@pytest.mark.unit
def test_as_address_validation():
    """Test address normalization rejects non-index values."""
    assert as_address([0, 1]) == (0, 1)
    assert isinstance(as_address((2,)), HierarchicalId)

    for bad in ("01", [True], [1.0], [-2], None):
        with pytest.raises(InvalidAddress):
            as_address(bad)


@pytest.mark.unit
def test_parent_and_child_keep_generation():
    """Test derived ids stay tied to the same snapshot."""
    address = HierarchicalId((1, 2), generation=4)

    assert address.parent == (1,)
    assert address.parent.generation == 4
    assert address.child(0) == (1, 2, 0)
    assert address.child(0).generation == 4
