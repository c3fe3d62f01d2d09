"""
Visualization of node storages.

Nodes are drawn at their storage index on the x axis and their generation
(distance from a root along child edges) on the y axis, which makes
violations of the topological order easy to spot: in a well ordered
storage every arrow points to the right.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Sequence, Tuple

import matplotlib.pyplot as plt

from treesort.accessors import FieldSpec
from treesort.graph import build_order_graph

try:
    import networkx as nx
except ImportError as exc:  # pragma: no cover
    raise ImportError(
        "Tree visualization requires networkx. Install with: pip install networkx"
    ) from exc


class TreeVisualizer:
    """
    Plots node storages with matplotlib.
    """

    @staticmethod
    def plot_tree(
        nodes: Sequence[Any],
        children: FieldSpec = "children",
        ax: Optional[plt.Axes] = None,
        *,
        label: Optional[Callable[[Any], object]] = None,
        title: Optional[str] = None,
        show_siblings: bool = True,
    ) -> plt.Axes:
        """
        Plot a node storage by storage index and depth.

        Args:
            nodes: Node storage.
            children: Accessor for the ordered children indices.
            ax: Matplotlib axes to plot on. If None, creates new figure.
            label: Optional function mapping a node to its label. Defaults to
                the storage index.
            title: Axes title.
            show_siblings: Whether to draw sibling-order edges.

        Returns:
            Matplotlib axes object.
        """
        if ax is None:
            _, ax = plt.subplots(figsize=(8, 5))

        graph = build_order_graph(nodes, children)
        if graph.number_of_nodes() == 0:
            ax.text(0.5, 0.5, "empty storage", ha="center", va="center", fontsize=12)
            ax.set_title(title or "Tree")
            ax.axis("off")
            return ax

        tree = nx.DiGraph()
        tree.add_nodes_from(graph.nodes())
        tree.add_edges_from(
            (u, v) for u, v, d in graph.edges(data=True) if d["edge_type"] == "child"
        )
        depth: Dict[int, int] = {}
        if nx.is_directed_acyclic_graph(tree):
            for level, generation in enumerate(nx.topological_generations(tree)):
                for idx in generation:
                    depth[idx] = level
        else:
            depth = {idx: 0 for idx in tree.nodes()}

        pos: Dict[int, Tuple[float, float]] = {
            idx: (float(idx), -float(depth[idx])) for idx in graph.nodes()
        }
        child_edges = [
            (u, v) for u, v, d in graph.edges(data=True) if d["edge_type"] == "child"
        ]
        sibling_edges = [
            (u, v) for u, v, d in graph.edges(data=True) if d["edge_type"] == "sibling"
        ]

        nx.draw_networkx_nodes(graph, pos, node_size=500, node_color="#3498db", ax=ax)
        nx.draw_networkx_edges(
            graph,
            pos,
            edgelist=child_edges,
            edge_color="black",
            arrows=True,
            arrowsize=12,
            ax=ax,
        )
        if show_siblings and sibling_edges:
            nx.draw_networkx_edges(
                graph,
                pos,
                edgelist=sibling_edges,
                edge_color="#95a5a6",
                style="dashed",
                arrows=True,
                arrowsize=8,
                connectionstyle="arc3,rad=0.3",
                ax=ax,
            )

        labels: Dict[int, str] = {}
        for idx in graph.nodes():
            if label is None:
                labels[idx] = str(idx)
            else:
                labels[idx] = str(label(nodes[idx]))
        nx.draw_networkx_labels(graph, pos, labels=labels, font_size=9, ax=ax)

        ax.set_title(title or f"Tree ({len(nodes)} nodes)")
        ax.axis("off")
        return ax
