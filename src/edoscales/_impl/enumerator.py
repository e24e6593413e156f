"""
Enumeration of the scales of an EDO with a given number of notes.

A scale is a sequence of positive steps adding up to the EDO. Scales that are rotations of
one another (modes of the same scale) are reported only once: the enumeration walks all
compositions in lexicographic order and keeps the first one it meets from each rotation class.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import islice
from typing import Any, Self, overload
import logging
import math
import operator as op
import typing as t

from sympy import divisors, totient

from .pattern import StepPattern, rotationKey
from .config import settings
from .utils.cls import cachedGetter
from .utils.number import resolvePositiveInt

__all__ = [
    "ScaleParamError",
    "checkParams",
    "compositions",
    "scales",
    "countCompositions",
    "countScales",
    "ScaleEnumerator",
]

_logger = logging.getLogger(__name__)


class ScaleParamError(ValueError):
    """Invalid EDO or scale size: not an integer, or less than 1."""


def checkParams(edo: Any, size: Any) -> tuple[int, int]:
    """
    Validates the generation parameters and returns them as plain `int`s.
    """
    try:
        return resolvePositiveInt(edo, "edo"), resolvePositiveInt(size, "size")
    except (TypeError, ValueError) as e:
        raise ScaleParamError(str(e)) from e


def compositions(total: int, parts: int) -> Iterator[tuple[int, ...]]:
    """
    Yields every way to write `total` as an ordered sum of `parts` positive integers, in
    lexicographic order. Nothing is yielded when `parts > total`.

    This is a depth-first search over the steps from left to right, kept on an explicit stack
    (`steps`) instead of the call stack. Every position but the last takes a value from 1 up
    to what still leaves 1 for each later position, and the last position takes the rest.
    """
    if parts < 1 or parts > total:
        return
    steps = [1] * (parts - 1)
    last = total - parts + 1
    while True:
        yield (*steps, last)
        # backtrack to the rightmost step that can still grow
        i = parts - 2
        slack = last - 1
        while i >= 0 and slack == 0:
            slack += steps[i] - 1
            i -= 1
        if i < 0:
            return
        steps[i] += 1
        steps[i + 1 :] = [1] * (parts - 2 - i)
        last = slack


def _uniqueScales(edo: int, size: int) -> Iterator[StepPattern]:
    # the seen set belongs to this run only
    seen: set[str] = set()
    _logger.debug("Generating scales for edo=%d, size=%d", edo, size)
    for steps in compositions(edo, size):
        key = rotationKey(steps)
        if key in seen:
            continue
        seen.add(key)
        yield StepPattern._newHelper(steps)
    _logger.debug("Generated %d scales for edo=%d, size=%d", len(seen), edo, size)


def scales(edo: int, size: int) -> Iterator[StepPattern]:
    """
    Lazily yields one representative of every rotation class of `size`-note scales in `edo`.
    The representative is the first member of the class in lexicographic order of the steps,
    which is not necessarily the rotation that gives the class its key.

    Raises `ScaleParamError` immediately, before anything is generated, if either argument is
    not a positive integer.
    """
    edo, size = checkParams(edo, size)
    return _uniqueScales(edo, size)


def countCompositions(edo: int, size: int) -> int:
    """Number of step sequences before removing rotations, `C(edo - 1, size - 1)`."""
    edo, size = checkParams(edo, size)
    return math.comb(edo - 1, size - 1)


def countScales(edo: int, size: int) -> int:
    """
    Number of scales `scales(edo, size)` yields, computed without enumerating them.

    The scales are the necklaces of `size` beads with positive labels adding up to `edo`. By
    Burnside's lemma, with `d` running over the common divisors of `edo` and `size`:

    $$ N = \\frac{1}{size} \\sum_{d} \\varphi(d) \\binom{edo/d - 1}{size/d - 1} $$
    """
    edo, size = checkParams(edo, size)
    if size > edo:
        return 0
    total = sum(
        int(totient(d)) * math.comb(edo // d - 1, size // d - 1)
        for d in divisors(math.gcd(edo, size))
    )
    return total // size


class ScaleEnumerator(Sequence[StepPattern]):
    """
    The scales of `size` notes in `edo` as a lazy, read-only sequence.

    Nothing is stored: every iteration starts a fresh search, and indexing or paging re-runs
    the search up to the requested position. Two enumerations never share state, so an
    abandoned one can simply be dropped.
    """

    __slots__ = ("_edo", "_size", "_len", "_hash")

    if t.TYPE_CHECKING:  # pragma: no cover

        @overload
        def __getitem__(self, key: int) -> StepPattern: ...

        @overload
        def __getitem__(self, key: slice) -> list[StepPattern]: ...

    def __new__(cls, edo: int, size: int) -> Self:
        edo, size = checkParams(edo, size)
        self = super().__new__(cls)
        self._edo = edo
        self._size = size
        return self

    @property
    def edo(self) -> int:
        return self._edo

    @property
    def size(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[StepPattern]:
        return _uniqueScales(self._edo, self._size)

    @cachedGetter
    def __len__(self) -> int:
        return countScales(self._edo, self._size)

    def __getitem__(self, key: int | slice) -> StepPattern | list[StepPattern]:
        if isinstance(key, slice):
            indices = range(*key.indices(len(self)))
            if len(indices) == 0:
                return []
            lo, hi = min(indices), max(indices)
            items = list(islice(iter(self), lo, hi + 1))
            return [items[i - lo] for i in indices]
        key = op.index(key)
        length = len(self)
        if key < 0:
            key += length
        if key < 0 or key >= length:
            raise IndexError("scale index out of range")
        return next(islice(iter(self), key, None))

    def __reversed__(self) -> Iterator[StepPattern]:
        return reversed(list(self))

    def index(self, value: Any, start: int = 0, stop: int | None = None) -> int:
        start, stop = slice(start, stop).indices(len(self))[:2]
        for i, item in enumerate(islice(iter(self), start, max(start, stop)), start):
            if item == value:
                return i
        raise ValueError(f"{value!r} is not in {self!r}")

    def count(self, value: Any) -> int:
        # representatives are unique
        return int(any(item == value for item in self))

    def page(self, pageNo: int, pageSize: int | None = None) -> tuple[list[StepPattern], bool]:
        """
        Returns the scales on 1-based page `pageNo` and whether any scale follows that page.
        One scale past the page is generated to answer the latter.
        """
        pageNo = resolvePositiveInt(pageNo, "pageNo")
        if pageSize is None:
            pageSize = settings.pageSize
        else:
            pageSize = resolvePositiveInt(pageSize, "pageSize")
        start = (pageNo - 1) * pageSize
        items = list(islice(iter(self), start, start + pageSize + 1))
        return items[:pageSize], len(items) > pageSize

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ScaleEnumerator):
            return NotImplemented
        return self._edo == other._edo and self._size == other._size

    @cachedGetter
    def __hash__(self) -> int:
        return hash((self.__class__, self._edo, self._size))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(edo={self._edo}, size={self._size})"
