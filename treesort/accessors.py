"""
Accessors for caller-owned node records.

Sorting never assumes a node layout. Instead the caller hands over a
`Field` (or something that can be turned into one) describing how to read
and write the parent and children references of a node. The reference
views defined here present both parent layouts (a single optional index,
or a collection of indices) as a plain list so the swap logic can be shared.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

import numpy as np


Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]
FieldSpec = Union["Field", str, Getter, Tuple[Getter, Setter]]


class Field:
    """
    Read/write access to one reference field of a node.

    Attributes:
        name: Human readable name used in error messages.
    """

    def __init__(
        self,
        getter: Getter,
        setter: Optional[Setter] = None,
        name: Optional[str] = None,
    ) -> None:
        if not callable(getter):
            raise TypeError("getter must be callable")
        if setter is not None and not callable(setter):
            raise TypeError("setter must be callable")
        self._getter = getter
        self._setter = setter
        self.name = name or getattr(getter, "__name__", "field")

    @classmethod
    def attribute(cls, name: str) -> "Field":
        """Access `node.<name>`."""
        name = str(name)
        return cls(
            lambda node: getattr(node, name),
            lambda node, value: setattr(node, name, value),
            name=name,
        )

    @classmethod
    def item(cls, key: Any) -> "Field":
        """Access `node[key]`, for dict-like nodes."""

        def _set(node: Any, value: Any) -> None:
            node[key] = value

        return cls(lambda node: node[key], _set, name=repr(key))

    @property
    def writable(self) -> bool:
        return self._setter is not None

    def get(self, node: Any) -> Any:
        return self._getter(node)

    def set(self, node: Any, value: Any) -> None:
        if self._setter is None:
            raise AttributeError(f"Field {self.name!r} is read-only")
        self._setter(node, value)

    def __repr__(self) -> str:
        return f"Field({self.name!r})"


def as_field(spec: FieldSpec) -> Field:
    """
    Normalize an accessor specification.

    Args:
        spec: A `Field`, an attribute name, a `(getter, setter)` pair, or a
            bare getter. A bare getter is read-only, which is enough when it
            returns a mutable list.

    Returns:
        Field instance.

    Raises:
        TypeError: If spec has none of the supported forms.
    """
    if isinstance(spec, Field):
        return spec
    if isinstance(spec, str):
        return Field.attribute(spec)
    if isinstance(spec, tuple) and len(spec) == 2:
        return Field(spec[0], spec[1])
    if callable(spec):
        return Field(spec)
    raise TypeError(f"Unsupported accessor: {spec!r}")


def exchange(ref: int, i: int, j: int) -> int:
    """
    Map a reference across the transposition of slots `i` and `j`.

    Args:
        ref: Storage index held by some node.
        i: First swapped slot.
        j: Second swapped slot.

    Returns:
        `j` for `i`, `i` for `j`, otherwise `ref` unchanged.
    """
    if ref == i:
        return j
    if ref == j:
        return i
    return ref


class References:
    """
    List view over the index references stored in one field of a node.
    """

    def __init__(self, field: FieldSpec) -> None:
        self.field = as_field(field)

    def get_refs(self, node: Any) -> List[int]:
        return [int(r) for r in self.field.get(node)]

    def set_refs(self, node: Any, refs: Sequence[int]) -> None:
        current = self.field.get(node)
        if isinstance(current, (list, np.ndarray)):
            current[:] = refs
        else:
            self.field.set(node, type(current)(refs))

    def remap(self, node: Any, i: int, j: int) -> None:
        """Exchange references to slots `i` and `j` on a single node."""
        refs = self.get_refs(node)
        if i not in refs and j not in refs:
            return
        self.set_refs(node, [exchange(r, i, j) for r in refs])


class Children(References):
    """Ordered children indices of a node."""


class ParentSet(References):
    """Parent indices of a node in a DAG, stored as any collection of ints."""


class SingleParent(References):
    """A single optional parent index, presented as a list of zero or one refs."""

    def get_refs(self, node: Any) -> List[int]:
        parent = self.field.get(node)
        return [] if parent is None else [int(parent)]

    def set_refs(self, node: Any, refs: Sequence[int]) -> None:
        if len(refs) > 1:
            raise ValueError("A single-parent node cannot hold more than one parent")
        self.field.set(node, int(refs[0]) if refs else None)
