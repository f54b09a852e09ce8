"""Scratch buffer allocation for the index-addressed sorters."""

from typing import Protocol


class BufferProvider(Protocol):
    """Supplies zero-valued scratch lists to the sorters.

    Implementations may hand out pooled lists, but every returned list must
    hold exactly ``length`` zero-valued (``0`` / ``False``) items. Buffers
    requested with ``length=0`` are appended to afterwards, and
    ``capacity_hint`` is the expected number of appends.
    """

    def int_buffer(self, length: int, capacity_hint: int = 0) -> list[int]: ...

    def bool_buffer(self, length: int, capacity_hint: int = 0) -> list[bool]: ...


class DefaultBuffers:
    """Allocates a fresh list on every request.

    Python lists grow on demand, so ``capacity_hint`` is accepted and ignored.
    """

    __slots__ = ()

    def int_buffer(self, length: int, capacity_hint: int = 0) -> list[int]:  # noqa: ARG002
        return [0] * length

    def bool_buffer(self, length: int, capacity_hint: int = 0) -> list[bool]:  # noqa: ARG002
        return [False] * length
