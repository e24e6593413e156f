from __future__ import annotations

from typing import Callable
from functools import partial
from threading import RLock

__all__ = ["cachedProp", "cachedGetter"]

_DUMMY = object()

type FGet[T, P] = Callable[[T], P]


class _cachedProp[T, P](property):
    def __init__(self, fget=None, fset=None, fdel=None, doc=None, *, key: str = None):
        super().__init__(fget, fset, fdel, doc)
        if key is None:
            key = "_" + fget.__name__
        self._key = key
        self._lock = RLock()

    def __get__(self, instance: T, owner: type[T] = None) -> P:
        if instance is None:
            return self
        with self._lock:
            if (value := getattr(instance, self._key, _DUMMY)) is _DUMMY:
                value = super().__get__(instance, owner)
                setattr(instance, self._key, value)
            return value


def cachedProp(arg1=None, *args, **kwargs):
    """
    A property computed on first access and stored on the instance, by default in a private
    attribute named after the property with a leading underscore, or under `key` when one is
    given.

    **Note**: unlike `functools.cached_property`, this works with slotted classes. Make sure the
    key is listed in `__slots__`.
    """
    if isinstance(arg1, str):
        return partial(_cachedProp, key=arg1)
    elif "key" in kwargs:
        return partial(_cachedProp, key=kwargs.pop("key"))
    return _cachedProp(arg1, *args, **kwargs)


def _cachedGetter[T, P](fget: FGet[T, P], *, key: str = None) -> FGet[T, P]:
    if key is None:
        fname = fget.__name__
        if fname.startswith("__") and fname.endswith("__"):
            # "dunder" method
            key = f"_{fname[2:-2]}"
        else:
            key = f"_{fname}"
    lock = RLock()

    def wrapper(self: T) -> P:
        with lock:
            if (value := getattr(self, key, _DUMMY)) is _DUMMY:
                value = fget(self)
                setattr(self, key, value)
            return value

    wrapper.__name__ = fget.__name__
    wrapper.__doc__ = fget.__doc__
    return wrapper


def cachedGetter(arg1=None, *args, **kwargs):
    """
    Similar to `cachedProp`, but for a plain getter method such as `__hash__`.
    """
    if isinstance(arg1, str):
        return partial(_cachedGetter, key=arg1)
    elif "key" in kwargs:
        return partial(_cachedGetter, key=kwargs.pop("key"))
    return _cachedGetter(arg1, *args, **kwargs)
