"""
Order graph construction and checks.

The order graph has one node per storage index and two kinds of edges:
"child" edges from a parent to each of its children, and "sibling" edges
between consecutive entries of a children list. A storage is well ordered
when every edge points to a larger index, and it can be sorted when the
graph is acyclic.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from treesort.accessors import Children, FieldSpec, ParentSet, References, SingleParent

try:
    import networkx as nx
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "Order graph analysis requires networkx. Install with: pip install networkx"
    ) from exc


Edge = Tuple[int, int]


def build_order_graph(nodes: Sequence[Any], children: FieldSpec = "children") -> nx.DiGraph:
    """
    Build the directed order graph of a node storage.

    Args:
        nodes: Node storage.
        children: Accessor for the ordered children indices.

    Returns:
        Directed graph over storage indices. Each node stores the original
        record under "node"; each edge stores "edge_type".
    """
    kids = Children(children)
    graph = nx.DiGraph()
    for idx, node in enumerate(nodes):
        graph.add_node(idx, node=node)

    for idx, node in enumerate(nodes):
        previous: Optional[int] = None
        for c in kids.get_refs(node):
            graph.add_edge(idx, c, edge_type="child")
            if previous is not None and previous != c and not graph.has_edge(previous, c):
                graph.add_edge(previous, c, edge_type="sibling")
            previous = c
    return graph


def is_dag(nodes: Sequence[Any], children: FieldSpec = "children") -> bool:
    """Return True if the storage admits a topological order."""
    return bool(nx.is_directed_acyclic_graph(build_order_graph(nodes, children)))


def find_order_cycle(
    nodes: Sequence[Any], children: FieldSpec = "children"
) -> Optional[List[Edge]]:
    """
    Find one cycle among the child and sibling edges.

    Returns:
        List of (u, v) edges forming the cycle, or None if there is none.
    """
    graph = build_order_graph(nodes, children)
    try:
        cycle = nx.find_cycle(graph)
    except nx.NetworkXNoCycle:
        return None
    return [(int(u), int(v)) for u, v in cycle]


def ordering_violations(
    nodes: Sequence[Any], children: FieldSpec = "children"
) -> List[Tuple[int, int, str]]:
    """
    List edges of the order graph that do not point to a larger index.

    Returns:
        (u, v, edge_type) triples with u >= v.
    """
    graph = build_order_graph(nodes, children)
    return [
        (int(u), int(v), str(d["edge_type"]))
        for u, v, d in graph.edges(data=True)
        if u >= v
    ]


def is_well_ordered(nodes: Sequence[Any], children: FieldSpec = "children") -> bool:
    """Return True if children follow parents and siblings keep their order."""
    return not ordering_violations(nodes, children)


def link_violations(
    nodes: Sequence[Any],
    parent: FieldSpec = "parent",
    children: FieldSpec = "children",
    *,
    multi_parent: bool = False,
) -> List[Edge]:
    """
    Compare parent back-references against the children lists.

    Args:
        nodes: Node storage.
        parent: Accessor for the parent field (single index or collection).
        children: Accessor for the ordered children indices.
        multi_parent: Whether the parent field holds a collection.

    Returns:
        (parent, child) pairs that are present on one side only.
    """
    parents: References = ParentSet(parent) if multi_parent else SingleParent(parent)
    kids = Children(children)

    from_children = set()
    from_parents = set()
    for idx, node in enumerate(nodes):
        for c in kids.get_refs(node):
            from_children.add((idx, c))
        for p in parents.get_refs(node):
            from_parents.add((p, idx))
    return sorted(from_children.symmetric_difference(from_parents))
