#!/usr/bin/env python3
"""
Example: Topological Sort vs. Traversal Order

The following is demonstrated:
- Swapping two children of the root can be enough to order a tree
- Children of a subtree stored early stay early, instead of being pushed
  behind every later sibling as a depth- or breadth-first renumbering would
"""

import sys
import os
from dataclasses import dataclass, field
from typing import List, Optional

# The parent directory is added to the import path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from treesort import solve, sort


@dataclass
class Node:
    val: int
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)


print("=" * 60)
print("Example: Topological Sort vs. Traversal Order")
print("=" * 60)

# Case 1: the children of the root are stored in reverse order.
nodes = [
    Node(0, children=[2, 1]),
    Node(4, parent=0),
    Node(1, parent=0, children=[3, 4]),
    Node(2, parent=2),
    Node(3, parent=2),
]
plan = solve(nodes)
print(f"\nCase 1 transpositions: {plan.transpositions}")
sort(nodes)
print(f"Case 1 values: {[n.val for n in nodes]}")
assert [n.val for n in nodes] == [0, 1, 4, 2, 3]

# Case 2: the children of one sub-root are stored before its later sibling.
nodes = [
    Node(0, children=[4, 3]),
    Node(2, parent=4),
    Node(3, parent=4),
    Node(4, parent=0),
    Node(1, parent=0, children=[1, 2]),
]
plan = solve(nodes)
print(f"\nCase 2 transpositions: {plan.transpositions}")
sort(nodes)
print(f"Case 2 values: {[n.val for n in nodes]}")
assert [n.val for n in nodes] == [0, 1, 2, 3, 4]
