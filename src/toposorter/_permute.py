"""In-place permutation by cycle-following swaps."""

from collections.abc import MutableSequence


def apply_permutation[T](seq: MutableSequence[T], pos: MutableSequence[int]) -> None:
    """Move the item at ``seq[i]`` to ``seq[pos[i]]`` for every ``i``.

    Each swap puts one item into its final slot, so at most ``len(seq)``
    swaps happen and no second full-size list is needed. ``pos`` is used
    as scratch and holds ``0..n-1`` in order afterwards. It may be longer
    than ``seq``; only its first ``len(seq)`` slots are read.

    Args:
        seq: The sequence to reorder in place.
        pos: Target index for each current index.

    Raises:
        ValueError: If ``pos`` is not a permutation of ``range(len(seq))``.
            ``seq`` may already be partly reordered when this is raised.

    """
    n = len(seq)
    swaps = 0
    for i in range(n):
        while pos[i] != i:
            j = pos[i]
            if not 0 <= j < n or swaps >= n:
                msg = f"pos is not a permutation of 0..{n - 1}"
                raise ValueError(msg)
            seq[i], seq[j] = seq[j], seq[i]
            pos[i], pos[j] = pos[j], pos[i]
            swaps += 1
