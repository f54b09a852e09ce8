"""Errors raised by the sorters and the keyed graph validator."""

from collections.abc import Iterable, Sequence


def _format_keys(keys: Iterable[object]) -> str:
    return "[" + ", ".join(str(k) for k in keys) + "]"


class TopoSortError(Exception):
    """Base class for every ordering failure."""


class CycleDetectedError(TopoSortError):
    """The graph contains a cycle, so no valid order exists.

    Attributes:
        cycle: The keys forming the cycle as ``[tail, head, ..., tail]``, or
            ``None`` when the sorter that detected it does not track paths
            (the index-addressed sorters fail fast without one).

    """

    def __init__(self, cycle: Sequence[object] | None = None) -> None:
        self.cycle = tuple(cycle) if cycle is not None else None
        msg = "cyclic" if self.cycle is None else f"cyclic: {_format_keys(self.cycle)}"
        super().__init__(msg)


class MultipleRootsError(TopoSortError):
    """The graph decomposes into more than one independently rooted component."""

    def __init__(self, roots: Sequence[object]) -> None:
        self.roots = tuple(roots)
        super().__init__(f"multiple roots: {_format_keys(self.roots)}")


class GraphValidationError(TopoSortError):
    """Aggregate of every problem found by the keyed validator.

    Holds zero or more :class:`CycleDetectedError` followed by at most one
    :class:`MultipleRootsError`.
    """

    def __init__(self, errors: Sequence[TopoSortError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(str(e) for e in self.errors))

    @property
    def cycles(self) -> list[CycleDetectedError]:
        """Cycle errors, one per distinct cycle."""
        return [e for e in self.errors if isinstance(e, CycleDetectedError)]

    @property
    def multiple_roots(self) -> MultipleRootsError | None:
        """The multiple-roots error, if one was found."""
        for e in self.errors:
            if isinstance(e, MultipleRootsError):
                return e
        return None


class DocumentError(TopoSortError):
    """A graph document could not be read or failed validation."""
