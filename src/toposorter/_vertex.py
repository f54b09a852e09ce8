"""Vertex capabilities and ready-made vertex types.

Two addressing schemes are supported:

- Index-addressed vertices live in a caller-owned sequence. A vertex's
  position is its identity, and ``successors`` holds positions.
- Key-addressed vertices live in a mapping from key to vertex. ``id`` is the
  vertex's key, and ``successors`` holds keys.

An edge ``u -> v`` (``v`` in ``u.successors``) means ``u`` must come before
``v`` in the output order.
"""

from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol


class IndexedVertex(Protocol):
    """A vertex addressed by its position in the sequence being sorted."""

    @property
    def successors(self) -> Sequence[int]: ...


class KeyedVertex[K: Hashable](Protocol):
    """A vertex addressed by an opaque hashable key."""

    @property
    def id(self) -> K: ...

    @property
    def successors(self) -> Sequence[K]: ...


@dataclass(slots=True)
class IndexedNode[T]:
    """Index-addressed vertex carrying an arbitrary value.

    Attributes:
        value: Caller data travelling with the vertex while it is reordered.
        successors: Positions of the vertices that must come after this one.

    """

    value: T
    successors: list[int] = field(default_factory=list)


@dataclass(slots=True)
class KeyedNode[K: Hashable]:
    """Key-addressed vertex.

    Attributes:
        id: The vertex key.
        successors: Keys of the vertices that must come after this one.

    """

    id: K
    successors: list[K] = field(default_factory=list)


def graph_from_vertices[K: Hashable, V: KeyedVertex](vertices: Iterable[V]) -> dict[K, V]:
    """Key an iterable of vertices by their ``id``.

    Raises:
        ValueError: If two vertices share an id.

    """
    graph: dict[K, V] = {}
    for vertex in vertices:
        if vertex.id in graph:
            msg = f"Duplicate vertex id: {vertex.id!r}"
            raise ValueError(msg)
        graph[vertex.id] = vertex
    return graph


def graph_from_dependencies[K: Hashable](dependencies: Mapping[K, Iterable[K]]) -> dict[K, KeyedNode[K]]:
    """Build a keyed graph from ``item -> prerequisites`` relations.

    Each prerequisite gets ``item`` as a successor, so prerequisites sort
    first. Every key mentioned on either side becomes a vertex, in the order
    it is first seen.

    Example:
        >>> graph = graph_from_dependencies({"app": ["lib"], "lib": ["core"]})
        >>> graph["core"].successors
        ['lib']

    """
    graph: dict[K, KeyedNode[K]] = {}
    for item, prerequisites in dependencies.items():
        if item not in graph:
            graph[item] = KeyedNode(item)
        for prerequisite in prerequisites:
            node = graph.get(prerequisite)
            if node is None:
                node = graph[prerequisite] = KeyedNode(prerequisite)
            node.successors.append(item)
    return graph
