"""
In-memory topological sort of trees stored in a list.

Nodes refer to each other by storage index. Sorting rewrites the list in
place so that every child is stored after its parent and siblings keep the
order of their parent's children list:

    Tree            i       i'
    --------------------------
    12              3   =>  0
    |- 2            2   =>  1
    |- 6            1   =>  2
       |- 3         4   =>  3
       |- 2         0   =>  4

The work is split in two phases. `solve` plans the swaps on a permutation
without touching the nodes, then the plan is replayed on the storage with
local index fix-ups after each swap.
"""

from __future__ import annotations

import logging
from typing import Any, MutableSequence

from treesort.accessors import FieldSpec
from treesort.solver import solve
from treesort.swap import apply_transpositions, apply_transpositions_dag

logger = logging.getLogger(__name__)


def sort(
    nodes: MutableSequence[Any],
    parent: FieldSpec = "parent",
    children: FieldSpec = "children",
) -> None:
    """
    Sort a tree or forest in place.

    Args:
        nodes: Node storage, modified in place.
        parent: Accessor for the single optional parent index of a node.
        children: Accessor for the ordered children indices of a node.

    Raises:
        ValueError: If a child index is out of range.
        OrderingCycleError: If the sibling order contradicts the tree shape.
            Nothing is modified in that case.

    Every node must be referenced by at most one parent. Use `sort_dag`
    for shared nodes.
    """
    placement = solve(nodes, children)
    apply_transpositions(nodes, placement.transpositions, parent, children)
    logger.debug(
        "Sorted %d node(s) with %d swap(s)", placement.n_nodes, len(placement)
    )


def sort_dag(
    nodes: MutableSequence[Any],
    parents: FieldSpec = "parents",
    children: FieldSpec = "children",
) -> None:
    """
    Sort a Directed Acyclic Graph encoded as a tree with shared nodes.

    The order of children is preserved, which adds an edge between
    consecutive siblings. If `A` has children `C, B` and `B` has child `C`,
    the graph is therefore not a DAG and `OrderingCycleError` is raised.

    Args:
        nodes: Node storage, modified in place.
        parents: Accessor for the collection of parent indices of a node.
        children: Accessor for the ordered children indices of a node.
    """
    placement = solve(nodes, children)
    apply_transpositions_dag(nodes, placement.transpositions, parents, children)
    logger.debug(
        "Sorted DAG of %d node(s) with %d swap(s)", placement.n_nodes, len(placement)
    )
