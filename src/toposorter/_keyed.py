"""Validation and sorting of key-addressed graphs.

The validator runs in two phases over a mapping from key to vertex:

1. A depth-first traversal builds a candidate order (reverse postorder)
   and records every cycle it meets instead of stopping at the first one.
2. A reach count per vertex (number of successor edges reachable from it,
   counted along every path) classifies roots. Walking the candidate
   order, a vertex whose count is larger than the previous non-cyclic
   vertex's count starts a new component.

Both phases use explicit stacks, so deep chains are fine.
"""

import logging
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass

from ._errors import CycleDetectedError, GraphValidationError, MultipleRootsError, TopoSortError
from ._vertex import KeyedVertex

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KeyedReport[K: Hashable]:
    """Everything the keyed validator found.

    Attributes:
        order: Candidate order, predecessors first. Only meaningful when
            ``success`` is true.
        cyclic: Keys that lie on at least one detected cycle.
        cycles: Each detected cycle as ``[tail, head, ..., tail]``, where
            consecutive keys are edges of the graph.
        roots: Keys classified as roots of separate components.

    """

    order: list[K]
    cyclic: frozenset[K]
    cycles: list[list[K]]
    roots: list[K]

    @property
    def success(self) -> bool:
        """True if there are no cycles and at most one root."""
        return not self.cycles and len(self.roots) <= 1

    def errors(self) -> list[TopoSortError]:
        """One error per cycle, then a multiple-roots error if applicable."""
        errors: list[TopoSortError] = [CycleDetectedError(cycle) for cycle in self.cycles]
        if len(self.roots) > 1:
            errors.append(MultipleRootsError(self.roots))
        return errors

    def raise_for_errors(self) -> None:
        """Raise :class:`GraphValidationError` unless the graph is valid."""
        errors = self.errors()
        if errors:
            raise GraphValidationError(errors)


def _successors[K: Hashable](graph: Mapping[K, KeyedVertex[K]], key: K) -> Sequence[K]:
    # Keys that are only mentioned as successors act as leaves.
    vertex = graph.get(key)
    return vertex.successors if vertex is not None else ()


def _traverse[K: Hashable](graph: Mapping[K, KeyedVertex[K]]) -> tuple[list[K], set[K], list[K]]:
    """Depth-first pass collecting postorder, cyclic keys and cycle chains.

    Chains are recorded back to back in one flat list. Each chain starts and
    ends with the same key and that key does not occur in between, so the
    list can be split on the repeated key.
    """
    postorder: list[K] = []
    visited: set[K] = set()
    cyclic: set[K] = set()
    chains: list[K] = []

    for start in graph:
        if start in visited:
            continue
        visited.add(start)
        path = [start]
        depth = {start: 0}  # key -> index in path
        stack = [iter(_successors(graph, start))]
        while stack:
            key = path[-1]
            for succ in stack[-1]:
                if succ in depth:
                    chain = path[depth[succ] :]
                    cyclic.update(chain)
                    chains.append(key)
                    chains.extend(chain)
                elif succ not in visited:
                    visited.add(succ)
                    depth[succ] = len(path)
                    path.append(succ)
                    stack.append(iter(_successors(graph, succ)))
                    break
            else:
                stack.pop()
                path.pop()
                del depth[key]
                postorder.append(key)

    return postorder, cyclic, chains


def _split_chains[K](chains: list[K]) -> list[list[K]]:
    groups: list[list[K]] = []
    start = 0
    while start < len(chains):
        end = chains.index(chains[start], start + 1)
        groups.append(chains[start : end + 1])
        start = end + 1
    return groups


def _reach_counts[K: Hashable](
    graph: Mapping[K, KeyedVertex[K]],
    postorder: list[K],
    cyclic: set[K],
) -> dict[K, int]:
    """Count successor edges reachable from each non-cyclic key.

    Edges are counted once per path, not once per edge. Cyclic keys are not
    expanded: an edge into one counts as one edge and stops there. Every
    successor of a non-cyclic key finishes before it in ``postorder``.
    """
    reach: dict[K, int] = {}
    for key in postorder:
        if key in cyclic:
            continue
        reach[key] = sum(1 + reach.get(succ, 0) for succ in _successors(graph, key))
    return reach


def validate_graph[K: Hashable](graph: Mapping[K, KeyedVertex[K]]) -> KeyedReport[K]:
    """Sort a keyed graph and report its cycles and root components.

    The input mapping is not modified. Among independent branches, the
    order follows the mapping's iteration order.

    Args:
        graph: Mapping from key to vertex.

    Returns:
        A report; check ``success`` before using ``order``.

    """
    postorder, cyclic, chains = _traverse(graph)
    order = postorder[::-1]
    reach = _reach_counts(graph, postorder, cyclic)

    roots: list[K] = []
    previous = 0
    for key in order:
        if key in cyclic:
            continue
        count = reach[key]
        if count > previous:
            roots.append(key)
        previous = count

    cycles = _split_chains(chains)
    logger.debug(
        "Validated %d vertices: %d cycle(s), %d root(s)",
        len(order),
        len(cycles),
        len(roots),
    )
    return KeyedReport(order=order, cyclic=frozenset(cyclic), cycles=cycles, roots=roots)


def sort_keyed[K: Hashable](graph: Mapping[K, KeyedVertex[K]]) -> list[K]:
    """Return the keys of ``graph`` in topological order.

    Example:
        >>> from toposorter import graph_from_dependencies
        >>> sort_keyed(graph_from_dependencies({"b": ["a"], "c": ["b"]}))
        ['a', 'b', 'c']

    Raises:
        GraphValidationError: If the graph has cycles or several roots. It
            carries one :class:`CycleDetectedError` per cycle and at most one
            :class:`MultipleRootsError`.

    """
    report = validate_graph(graph)
    report.raise_for_errors()
    return report.order
