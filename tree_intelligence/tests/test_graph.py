import pytest

from tree_intelligence.graph import FamilyGraph


def test_build_parent_maps(two_parent_family):
    _, links = two_parent_family
    graph = FamilyGraph.build(links)

    assert graph.children("alice") == {"carol", "dave"}
    assert graph.parents("carol") == {"alice", "bob"}
    assert graph.children("carol") == frozenset()
    assert graph.linked_ids == {"alice", "bob", "carol", "dave"}


def test_spouse_last_link_wins(make_link):
    graph = FamilyGraph.build([
        make_link.spouse("a", "b"),
        make_link.spouse("a", "c"),
    ])
    assert graph.spouse("a") == "c"
    assert graph.spouse("c") == "a"
    # b keeps pointing at a: only the endpoints of the later link are overwritten
    assert graph.spouse("b") == "a"
    assert not graph.has_spouse("d")


def test_direct_pairs_ignore_direction_and_kind(make_link):
    graph = FamilyGraph.build([make_link.parent("a", "b"), make_link.spouse("c", "a")])
    assert graph.are_directly_linked("b", "a")
    assert graph.are_directly_linked("a", "c")
    assert not graph.are_directly_linked("b", "c")


def test_build_accepts_host_records():
    graph = FamilyGraph.build([
        {"id": "l1", "fromUserId": "p", "toUserId": "c", "relationType": "PARENT"},
        {"id": "l2", "fromUserId": "p", "toUserId": "s", "relationType": "SPOUSE"},
    ])
    assert graph.children("p") == {"c"}
    assert graph.spouse("s") == "p"


def test_graph_is_read_only(make_link):
    graph = FamilyGraph.build([make_link.parent("a", "b")])
    with pytest.raises(TypeError):
        graph.children_of["x"] = frozenset()


def test_empty_graph():
    graph = FamilyGraph.build([])
    assert not graph.children_of
    assert not graph.linked_ids
