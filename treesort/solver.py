"""
Placement solver for in-memory topological sorting.

The solver decides the final slot of every node and the transpositions that
realise it, working only on a `Permutation`. Node data is not touched, so
indices stored in the nodes keep their meaning until the plan is applied.

Order constraints are read from the children lists alone:

  - every child is placed after each of its parents;
  - every child is placed after the sibling listed just before it.

A node is ready once all of its constraints are satisfied. For a tree this
means its parent and previous sibling are placed; in a DAG it waits for all
parents. Ready nodes are placed lowest original index first, so an array
that is already well ordered needs no swaps.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from treesort.accessors import Children, FieldSpec
from treesort.permutation import Permutation

logger = logging.getLogger(__name__)

Transposition = Tuple[int, int]


class OrderingCycleError(RuntimeError):
    """
    Raised when the child and sibling constraints contain a cycle.

    Attributes:
        unplaced: Storage indices that could never become ready.
    """

    def __init__(self, message: str, unplaced: Optional[List[int]] = None) -> None:
        super().__init__(message)
        self.unplaced = unplaced or []


@dataclass(frozen=True)
class Placement:
    """
    Result of the solve phase.

    Attributes:
        targets: targets[original] = final storage index.
        transpositions: Slot pairs to swap, in order, to reach `targets`.
        n_nodes: Number of nodes in the storage that was solved.
    """

    targets: np.ndarray
    transpositions: List[Transposition] = field(default_factory=list)
    n_nodes: int = 0

    def __len__(self) -> int:
        return len(self.transpositions)

    def is_identity(self) -> bool:
        return not self.transpositions


def _order_constraints(
    nodes: Sequence[Any], children: Children
) -> Tuple[np.ndarray, List[List[int]]]:
    """
    Count the constraints of each node and list whom each node releases.

    Returns:
        (pending, successors) where pending[v] is the number of constraints
        on v and successors[u] lists the nodes with one constraint on u.
    """
    n = len(nodes)
    pending = np.zeros(n, dtype=np.intp)
    successors: List[List[int]] = [[] for _ in range(n)]
    for u in range(n):
        previous: Optional[int] = None
        for c in children.get_refs(nodes[u]):
            if c < 0 or c >= n:
                raise ValueError(f"Child index {c} of node {u} is out of range")
            pending[c] += 1
            successors[u].append(c)
            # A repeated entry, as in `x * x`, does not order a node after itself.
            if previous is not None and previous != c:
                pending[c] += 1
                successors[previous].append(c)
            previous = c
    return pending, successors


def solve(nodes: Sequence[Any], children: FieldSpec = "children") -> Placement:
    """
    Plan the swaps that put `nodes` into topological order.

    Args:
        nodes: Node storage. It is only read.
        children: Accessor for the ordered children indices of a node.

    Returns:
        Placement with the target slot of every node and the transpositions
        to apply, expressed in storage positions.

    Raises:
        ValueError: If a child index is out of range.
        OrderingCycleError: If the constraints are cyclic, so that no
            topological order exists.
    """
    kids = children if isinstance(children, Children) else Children(children)
    n = len(nodes)
    pending, successors = _order_constraints(nodes, kids)

    ready = [int(u) for u in np.flatnonzero(pending == 0)]
    heapq.heapify(ready)

    tracker = Permutation(n)
    targets = np.empty(n, dtype=np.intp)
    transpositions: List[Transposition] = []
    target = 0
    while ready:
        u = heapq.heappop(ready)
        position = tracker.position_of(u)
        if position != target:
            # Slots below `target` are final, so the node is always further right.
            transpositions.append((target, position))
            tracker.swap(target, position)
        targets[u] = target
        target += 1
        for v in successors[u]:
            pending[v] -= 1
            if pending[v] == 0:
                heapq.heappush(ready, v)

    if target != n:
        unplaced = [int(u) for u in np.flatnonzero(pending > 0)]
        raise OrderingCycleError(
            f"Child and sibling order is cyclic; {len(unplaced)} node(s) cannot be placed",
            unplaced=unplaced,
        )

    logger.debug("Planned %d transposition(s) for %d node(s)", len(transpositions), n)
    return Placement(targets=targets, transpositions=transpositions, n_nodes=n)
