"""
Unit tests for replaying transpositions on node storages.

These tests exercise swaps between directly related nodes, where the moved
nodes reference each other and naive fix-ups go wrong.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from treesort.graph import link_violations
from treesort.swap import apply_transpositions, apply_transpositions_dag


@dataclass
class Node:
    val: str
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)


@dataclass
class DagNode:
    val: str
    parents: List[int] = field(default_factory=list)
    children: List[int] = field(default_factory=list)


class TestApplyTranspositions:
    """Test suite for the single-parent applicator."""

    def test_no_transpositions(self) -> None:
        """An empty plan leaves the storage unchanged."""
        nodes = [Node("a", children=[1]), Node("b", parent=0)]
        apply_transpositions(nodes, [])
        assert nodes == [Node("a", children=[1]), Node("b", parent=0)]

    def test_self_swap_is_ignored(self) -> None:
        """Swapping a slot with itself is a no-op."""
        nodes = [Node("a", children=[1]), Node("b", parent=0)]
        apply_transpositions(nodes, [(1, 1)])
        assert nodes == [Node("a", children=[1]), Node("b", parent=0)]

    def test_swap_parent_and_child(self) -> None:
        """Exchanging a parent with its own child keeps both links correct."""
        nodes = [
            Node("root", children=[2]),
            Node("leaf", parent=2),
            Node("mid", parent=0, children=[1]),
        ]
        apply_transpositions(nodes, [(1, 2)])
        assert nodes == [
            Node("root", children=[1]),
            Node("mid", parent=0, children=[2]),
            Node("leaf", parent=1),
        ]

    def test_swap_siblings(self) -> None:
        """Exchanging two siblings reorders the parent's children entries."""
        nodes = [
            Node("root", children=[2, 1]),
            Node("second", parent=0, children=[3]),
            Node("first", parent=0),
            Node("grandchild", parent=1),
        ]
        apply_transpositions(nodes, [(1, 2)])
        assert nodes[0].children == [1, 2]
        assert nodes[2] == Node("second", parent=0, children=[3])
        assert nodes[3].parent == 2
        assert link_violations(nodes) == []

    def test_unrelated_nodes_untouched(self) -> None:
        """Nodes outside the moved neighbourhood are not rewritten."""
        far = Node("far", parent=4, children=[])
        nodes = [
            Node("a", children=[1]),
            Node("b", parent=0),
            Node("c"),
            Node("d"),
            Node("e", children=[5]),
            far,
        ]
        apply_transpositions(nodes, [(0, 2)])
        assert nodes[5] is far
        assert far.parent == 4
        assert nodes[2].val == "a"
        assert nodes[1].parent == 2
        assert link_violations(nodes) == []


class TestApplyTranspositionsDag:
    """Test suite for the DAG applicator."""

    def test_shared_child_of_both_swapped(self) -> None:
        """A child shared by both swapped nodes has both parents remapped."""
        nodes = [
            DagNode("p", children=[2]),
            DagNode("q", children=[2]),
            DagNode("x", parents=[0, 1]),
        ]
        apply_transpositions_dag(nodes, [(0, 1)])
        assert [n.val for n in nodes] == ["q", "p", "x"]
        assert nodes[2].parents == [1, 0]
        assert link_violations(nodes, "parents", multi_parent=True) == []

    def test_swap_shared_node_with_parent(self) -> None:
        """Moving a shared node over one of its parents updates all parents."""
        nodes = [
            DagNode("root", children=[2, 1]),
            DagNode("shared", parents=[0, 2]),
            DagNode("other", parents=[0], children=[1]),
        ]
        apply_transpositions_dag(nodes, [(1, 2)])
        assert nodes == [
            DagNode("root", children=[1, 2]),
            DagNode("other", parents=[0], children=[2]),
            DagNode("shared", parents=[0, 1]),
        ]
