"""Per-call configuration for the index-addressed sorters."""

from dataclasses import dataclass, field

from ._buffers import BufferProvider, DefaultBuffers


@dataclass(frozen=True, slots=True)
class SortOptions:
    """Options accepted by :func:`sort_bfs` and :func:`sort_dfs`.

    Attributes:
        buffers: Where scratch lists come from. Defaults to fresh allocation.

    """

    buffers: BufferProvider = field(default_factory=DefaultBuffers)


def with_buffers(buffers: BufferProvider) -> SortOptions:
    """Shorthand for ``SortOptions(buffers=buffers)``."""
    return SortOptions(buffers=buffers)


def resolve_options(options: SortOptions | None) -> SortOptions:
    return options if options is not None else SortOptions()
