"""In-place topological sorting of index-addressed vertices.

Both sorters take a mutable sequence whose items expose ``successors`` as
positions in that same sequence, and reorder it so every edge points
forward. Successor positions outside ``range(len(vertices))`` are ignored.

- :func:`sort_bfs` is Kahn's algorithm. It produces the canonical
  breadth-first order, with ties broken by original position.
- :func:`sort_dfs` is an iterative depth-first search that emits reverse
  postorder. It gives *a* valid order, which may differ from BFS.

On a cycle both raise :class:`CycleDetectedError` and leave the sequence
untouched.
"""

import logging
from collections.abc import MutableSequence

from ._errors import CycleDetectedError
from ._options import SortOptions, resolve_options
from ._permute import apply_permutation
from ._vertex import IndexedVertex

logger = logging.getLogger(__name__)


def sort_bfs[V: IndexedVertex](vertices: MutableSequence[V], *, options: SortOptions | None = None) -> None:
    """Sort ``vertices`` in place using Kahn's algorithm.

    Args:
        vertices: The sequence to reorder.
        options: Scratch buffer configuration.

    Raises:
        CycleDetectedError: If the vertices contain a cycle.

    """
    n = len(vertices)
    if n < 2:
        return

    buffers = resolve_options(options).buffers
    in_degree = buffers.int_buffer(n)
    # Output order doubles as the queue; ``head`` marks the next vertex to dequeue.
    order = buffers.int_buffer(0, n)

    for vertex in vertices:
        for w in vertex.successors:
            if 0 <= w < n:
                in_degree[w] += 1

    order.extend(i for i in range(n) if in_degree[i] == 0)

    head = 0
    while head < len(order):
        u = order[head]
        head += 1
        for w in vertices[u].successors:
            if 0 <= w < n:
                in_degree[w] -= 1
                if in_degree[w] == 0:
                    order.append(w)

    if len(order) != n:
        logger.debug("BFS: %d of %d vertices are blocked by a cycle", n - len(order), n)
        raise CycleDetectedError

    pos = in_degree
    for i, v in enumerate(order):
        pos[v] = i
    apply_permutation(vertices, pos)
    logger.debug("BFS: sorted %d vertices", n)


def sort_dfs[V: IndexedVertex](vertices: MutableSequence[V], *, options: SortOptions | None = None) -> None:
    """Sort ``vertices`` in place by reverse depth-first postorder.

    The traversal keeps its own stack, so graph depth is not limited by the
    interpreter's recursion limit. It stops at the first back edge.

    Args:
        vertices: The sequence to reorder.
        options: Scratch buffer configuration.

    Raises:
        CycleDetectedError: If the vertices contain a cycle.

    """
    n = len(vertices)
    if n < 2:
        return

    buffers = resolve_options(options).buffers
    visited = buffers.bool_buffer(n)
    on_stack = buffers.bool_buffer(n)
    order = buffers.int_buffer(0, n)
    stack = buffers.int_buffer(0, n)

    for root in range(n):
        if visited[root]:
            continue
        stack.append(root)
        while stack:
            u = stack[-1]
            if not visited[u]:
                visited[u] = True
                on_stack[u] = True
                for w in vertices[u].successors:
                    if not 0 <= w < n:
                        continue
                    if on_stack[w]:
                        logger.debug("DFS: back edge %d -> %d", u, w)
                        raise CycleDetectedError
                    if not visited[w]:
                        stack.append(w)
                # u stays on the stack until every successor pushed above it
                # has been finished.
                continue
            stack.pop()
            # Stale entries for vertices finished through another path are dropped.
            if on_stack[u]:
                on_stack[u] = False
                order.append(u)

    order.reverse()
    pos = buffers.int_buffer(n)
    for i, v in enumerate(order):
        pos[v] = i
    apply_permutation(vertices, pos)
    logger.debug("DFS: sorted %d vertices", n)
