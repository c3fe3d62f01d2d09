"""
In-memory topological sort for trees stored in a list.

Nodes refer to their parent and children by storage index. `sort` and
`sort_dag` rewrite the list in place so that every child is stored after
its parent and siblings keep the order of their parent's children list,
swapping only the nodes that need to move.
"""

from treesort.accessors import Field
from treesort.core import sort, sort_dag
from treesort.graph import (
    build_order_graph,
    find_order_cycle,
    is_dag,
    is_well_ordered,
    link_violations,
    ordering_violations,
)
from treesort.permutation import Permutation
from treesort.solver import OrderingCycleError, Placement, solve
from treesort.swap import apply_transpositions, apply_transpositions_dag

__version__ = "0.1.0"

__all__ = [
    "sort",
    "sort_dag",
    "solve",
    "apply_transpositions",
    "apply_transpositions_dag",
    "Placement",
    "Permutation",
    "Field",
    "OrderingCycleError",
    "build_order_graph",
    "is_dag",
    "is_well_ordered",
    "ordering_violations",
    "find_order_cycle",
    "link_violations",
]
