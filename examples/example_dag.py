#!/usr/bin/env python3
"""
Example: Directed Acyclic Graphs

The following is demonstrated:
- Sorting a tree with a node shared between two parents using `sort_dag`
- Checking the DAG precondition up front, since ordered children add
  edges between siblings
"""

import sys
import os
from dataclasses import dataclass, field
from typing import List

# The parent directory is added to the import path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from treesort import OrderingCycleError, find_order_cycle, is_dag, sort_dag


@dataclass
class Node:
    val: str
    parents: List[int] = field(default_factory=list)
    children: List[int] = field(default_factory=list)


print("=" * 60)
print("Example: Directed Acyclic Graphs")
print("=" * 60)

# `d` is shared between `b` and `c`.
nodes = [
    Node("a", parents=[], children=[2, 3]),
    Node("d", parents=[2, 3]),
    Node("b", parents=[0], children=[1]),
    Node("c", parents=[0], children=[1]),
]
print(f"\nIs a DAG: {is_dag(nodes)}")
sort_dag(nodes)
for i, node in enumerate(nodes):
    print(f"  {i}: {node}")
assert [n.val for n in nodes] == ["a", "b", "c", "d"]

# The following tree with shared nodes is not a DAG:
#
#   A
#   |- B
#      |- D
#      |- C
#   |- C
#      |- D
#
# B orders D before C, so D is less than C. Since D is a child of C it must
# also be greater than C.
nodes = [
    Node("A", parents=[], children=[1, 2]),
    Node("B", parents=[0], children=[3, 2]),
    Node("C", parents=[0, 1], children=[3]),
    Node("D", parents=[1, 2]),
]
print(f"\nIs a DAG: {is_dag(nodes)}")
print(f"Cycle: {find_order_cycle(nodes)}")
try:
    sort_dag(nodes)
except OrderingCycleError as exc:
    print(f"sort_dag refused: {exc} (unplaced: {exc.unplaced})")
