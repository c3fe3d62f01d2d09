"""
Replay of planned transpositions on the real node storage.

After two slots are exchanged, every reference to either slot is stale.
Only the moved nodes and their direct relatives can hold such references,
so each swap is fixed up in time proportional to the branching factor
instead of rescanning the whole storage.
"""

from __future__ import annotations

from typing import Any, Iterable, MutableSequence, Set

from treesort.accessors import (
    Children,
    FieldSpec,
    ParentSet,
    References,
    SingleParent,
    exchange,
)
from treesort.solver import Transposition


def _swap_and_fix(
    nodes: MutableSequence[Any],
    i: int,
    j: int,
    parents: References,
    children: References,
) -> None:
    """
    Swap two storage slots and rewrite every reference to either of them.

    Args:
        nodes: Node storage, modified in place.
        i: First slot.
        j: Second slot.
        parents: Reference view over the parent field.
        children: Reference view over the children field.

    Only the two moved nodes and their direct relatives can hold a stale
    reference, and each of them is remapped exactly once.
    """
    if i == j:
        return
    nodes[i], nodes[j] = nodes[j], nodes[i]

    # Relatives are collected at their post-swap positions.
    affected: Set[int] = {i, j}
    for pos in (i, j):
        node = nodes[pos]
        for ref in parents.get_refs(node):
            affected.add(exchange(ref, i, j))
        for ref in children.get_refs(node):
            affected.add(exchange(ref, i, j))

    for pos in affected:
        node = nodes[pos]
        parents.remap(node, i, j)
        children.remap(node, i, j)


def _replay(
    nodes: MutableSequence[Any],
    transpositions: Iterable[Transposition],
    parents: References,
    children: References,
) -> None:
    """Apply transpositions in order, fixing references after each swap."""
    for i, j in transpositions:
        _swap_and_fix(nodes, int(i), int(j), parents, children)


def apply_transpositions(
    nodes: MutableSequence[Any],
    transpositions: Iterable[Transposition],
    parent: FieldSpec = "parent",
    children: FieldSpec = "children",
) -> None:
    """
    Apply transpositions to a tree or forest, keeping references consistent.

    Args:
        nodes: Node storage, modified in place.
        transpositions: Slot pairs as produced by `solve`.
        parent: Accessor for the single optional parent index.
        children: Accessor for the ordered children indices.

    Every node must have at most one parent. With shared nodes the parent
    fields end up inconsistent; use `apply_transpositions_dag` instead.
    """
    _replay(nodes, transpositions, SingleParent(parent), Children(children))


def apply_transpositions_dag(
    nodes: MutableSequence[Any],
    transpositions: Iterable[Transposition],
    parents: FieldSpec = "parents",
    children: FieldSpec = "children",
) -> None:
    """
    Apply transpositions to a DAG encoded as a tree with shared nodes.

    Every entry of each moved node's parent collection is remapped, and so
    is every occurrence of a moved index in the children of its parents.
    """
    _replay(nodes, transpositions, ParentSet(parents), Children(children))
