from __future__ import annotations

from collections.abc import Iterable, Iterator, Sized
from typing import Any, Self
import logging

from .config import settings
from .utils.number import resolvePositiveInt

__all__ = ["Lookahead", "Pager"]

_logger = logging.getLogger(__name__)

_EMPTY = object()
_NO_DEFAULT = object()
_EXHAUSTED = object()


class Lookahead[T](Iterator[T]):
    """
    Wraps an iterator so that the next item can be inspected without consuming it. At most one
    item is buffered.
    """

    __slots__ = ("_it", "_buf")

    def __init__(self, iterable: Iterable[T]):
        self._it = iter(iterable)
        self._buf = _EMPTY

    def peek(self, default: Any = _NO_DEFAULT) -> T:
        """
        Returns the next item and keeps it for the following `next()` call. When the iterator
        is exhausted, returns `default` if given, otherwise raises `StopIteration`.
        """
        if self._buf is _EMPTY:
            try:
                self._buf = next(self._it)
            except StopIteration:
                if default is _NO_DEFAULT:
                    raise
                return default
        return self._buf

    def hasNext(self) -> bool:
        return self.peek(_EXHAUSTED) is not _EXHAUSTED

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> T:
        if self._buf is not _EMPTY:
            item, self._buf = self._buf, _EMPTY
            return item
        return next(self._it)


class Pager[T]:
    """
    Splits a lazy sequence into pages numbered from 1.

    Items are pulled from `source` only as far as the requested page (plus one item of
    lookahead to tell whether another page follows) and are kept, so going back to an earlier
    page does not pull anything new. Iterating `source` must give a fresh iterator; it is
    iterated only once.
    """

    __slots__ = ("_source", "_pageSize", "_it", "_cache")

    def __init__(self, source: Iterable[T], pageSize: int | None = None):
        if pageSize is None:
            pageSize = settings.pageSize
        else:
            pageSize = resolvePositiveInt(pageSize, "pageSize")
        self._source = source
        self._pageSize = pageSize
        self._it = Lookahead(source)
        self._cache: list[T] = []

    @property
    def pageSize(self) -> int:
        return self._pageSize

    @property
    def totalPages(self) -> int | None:
        """
        Number of pages, or `None` if the length of the source is unknown. An empty source
        still has one (empty) page.
        """
        if not isinstance(self._source, Sized):
            return None
        return max(1, -(-len(self._source) // self._pageSize))

    def _fill(self, count: int) -> None:
        while len(self._cache) < count:
            try:
                self._cache.append(next(self._it))
            except StopIteration:
                break

    def _bounds(self, pageNo: int) -> tuple[int, int]:
        pageNo = resolvePositiveInt(pageNo, "pageNo")
        start = (pageNo - 1) * self._pageSize
        return start, start + self._pageSize

    def page(self, pageNo: int) -> list[T]:
        """Items on page `pageNo`. Pages past the end are empty."""
        start, stop = self._bounds(pageNo)
        self._fill(stop)
        _logger.debug("Page %d: %d items cached", pageNo, len(self._cache))
        return self._cache[start:stop]

    def numbered(self, pageNo: int) -> list[tuple[int, T]]:
        """Items on page `pageNo` along with their 1-based position in the whole sequence."""
        start, _ = self._bounds(pageNo)
        return list(enumerate(self.page(pageNo), start + 1))

    def hasNext(self, pageNo: int) -> bool:
        """Whether at least one item exists after page `pageNo`."""
        _, stop = self._bounds(pageNo)
        self._fill(stop)
        if len(self._cache) > stop:
            return True
        return len(self._cache) == stop and self._it.hasNext()

    def hasPrev(self, pageNo: int) -> bool:
        resolvePositiveInt(pageNo, "pageNo")
        return pageNo > 1
