#!/usr/bin/env python3
"""
Example: Prime Factor Tree

The following is demonstrated:
- Storing a tree of equations in a list with index references
- Restoring it to a well-ordered layout with `sort`

Two equations are arranged as a tree, listing the children of each node in
the order of the equation:

    12 = 2 * 6
    6 = 3 * 2

    Tree            i       i'
    --------------------------
    12              3   =>  0
    |- 2            2   =>  1
    |- 6            1   =>  2
       |- 3         4   =>  3
       |- 2         0   =>  4
"""

import sys
import os
from dataclasses import dataclass, field
from typing import List, Optional

# The parent directory is added to the import path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from treesort import is_well_ordered, sort


@dataclass
class Number:
    """A number with the number it was factored from and its prime factors."""

    value: int
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)


print("=" * 60)
print("Example: Prime Factor Tree")
print("=" * 60)

nodes = [
    Number(2, parent=1),
    Number(6, parent=3, children=[4, 0]),
    Number(2, parent=3),
    Number(12, children=[2, 1]),
    Number(3, parent=1),
]

print("\nBefore sorting:")
for i, node in enumerate(nodes):
    print(f"  {i}: {node}")
print(f"  values: {[n.value for n in nodes]}")

sort(nodes)

print("\nAfter sorting:")
for i, node in enumerate(nodes):
    print(f"  {i}: {node}")
print(f"  values: {[n.value for n in nodes]}")

assert [n.value for n in nodes] == [12, 2, 6, 3, 2]
assert is_well_ordered(nodes)
print("\nWell ordered: True")
