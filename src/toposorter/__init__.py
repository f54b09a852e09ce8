"""Topological ordering engine for dependency graphs."""

__all__ = [
    "BufferProvider",
    "CycleDetectedError",
    "DefaultBuffers",
    "DocumentError",
    "GraphDocument",
    "GraphValidationError",
    "IndexedNode",
    "IndexedVertex",
    "KeyedNode",
    "KeyedReport",
    "KeyedVertex",
    "MultipleRootsError",
    "SortOptions",
    "TopoSortError",
    "apply_permutation",
    "export_order_to_toml",
    "graph_from_dependencies",
    "graph_from_vertices",
    "load_graph_document",
    "sort_bfs",
    "sort_dfs",
    "sort_keyed",
    "validate_graph",
    "with_buffers",
]

from ._buffers import BufferProvider, DefaultBuffers
from ._errors import (
    CycleDetectedError,
    DocumentError,
    GraphValidationError,
    MultipleRootsError,
    TopoSortError,
)
from ._indexed import sort_bfs, sort_dfs
from ._io import GraphDocument, export_order_to_toml, load_graph_document
from ._keyed import KeyedReport, sort_keyed, validate_graph
from ._options import SortOptions, with_buffers
from ._permute import apply_permutation
from ._vertex import (
    IndexedNode,
    IndexedVertex,
    KeyedNode,
    KeyedVertex,
    graph_from_dependencies,
    graph_from_vertices,
)
