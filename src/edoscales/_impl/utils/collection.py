from __future__ import annotations

from collections.abc import Sequence, Iterator
import typing as t

if t.TYPE_CHECKING:
    from typing import overload

    @overload
    def cycGet[T](seq: Sequence[T], idx: int) -> T: ...

    @overload
    def cycGet[T](seq: Sequence[T], idx: int, increment: T) -> T: ...


__all__ = ["cycGet", "rotate", "rotations"]


def cycGet(seq, idx, increment=None):
    q, r = divmod(idx, len(seq))
    res = seq[r]
    if increment is not None:
        res += increment * q
    return res


def rotate[T](seq: Sequence[T], shift: int) -> tuple[T, ...]:
    """
    Returns the items of `seq` starting from index `shift`, wrapping around to the start.
    `shift` may be negative or exceed the length of `seq`.
    """
    if len(seq) == 0:
        return ()
    shift %= len(seq)
    return (*seq[shift:], *seq[:shift])


def rotations[T](seq: Sequence[T]) -> Iterator[tuple[T, ...]]:
    """Yields all cyclic rotations of `seq`, in increasing order of shift."""
    for shift in range(len(seq)):
        yield rotate(seq, shift)
