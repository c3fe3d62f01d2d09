"""
Group generator used while planning a sort.

Swapping entries of a permutation instead of the nodes themselves makes it
possible to predict where every node ends up without changing the meaning
of the indices stored in the nodes.
"""

from __future__ import annotations

import numpy as np


class Permutation:
    """
    Bijection between original storage indices and current positions.

    Attributes:
        forward: forward[original] = current position.
        inverse: inverse[position] = original index.
    """

    def __init__(self, n: int) -> None:
        n = int(n)
        if n < 0:
            raise ValueError("n must be non-negative")
        self._forward = np.arange(n, dtype=np.intp)
        self._inverse = np.arange(n, dtype=np.intp)

    def __len__(self) -> int:
        return int(self._forward.shape[0])

    @property
    def forward(self) -> np.ndarray:
        view = self._forward.view()
        view.flags.writeable = False
        return view

    @property
    def inverse(self) -> np.ndarray:
        view = self._inverse.view()
        view.flags.writeable = False
        return view

    def swap(self, i: int, j: int) -> None:
        """
        Exchange whatever currently occupies positions `i` and `j`.

        Args:
            i: First position.
            j: Second position.
        """
        a = self._inverse[i]
        b = self._inverse[j]
        self._inverse[i] = b
        self._inverse[j] = a
        self._forward[a] = j
        self._forward[b] = i

    def position_of(self, original: int) -> int:
        """Return the current position of the node originally at `original`."""
        return int(self._forward[original])

    def original_at(self, position: int) -> int:
        """Return the original index of the node now at `position`."""
        return int(self._inverse[position])

    def is_identity(self) -> bool:
        return bool(np.array_equal(self._forward, np.arange(len(self), dtype=np.intp)))

    def __repr__(self) -> str:
        return f"Permutation({self._forward.tolist()})"
