from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from numbers import Real
from typing import Self, Any, overload
import typing as t
import warnings

import numpy as np

from .names import KEY_DELIMITER, joinSteps, scaleName, findNamedRotation
from .config import settings
from .utils.cls import cachedProp, cachedGetter
from .utils.collection import cycGet, rotate, rotations
from .utils.number import isInt, resolvePositiveReal

__all__ = ["StepPattern", "rotationKey", "AUDIBLE_RANGE"]

AUDIBLE_RANGE = (20.0, 20000.0)


def rotationKey(steps: Sequence[int], delimiter: str = KEY_DELIMITER) -> str:
    """
    Canonical key of the rotation class of `steps`: the lexicographically smallest text
    rendering among all cyclic rotations. Two step sequences have the same key iff one is a
    rotation of the other.
    """
    if len(steps) == 0:
        return ""
    return min(joinSteps(r, delimiter) for r in rotations(steps))


class StepPattern(Sequence[int]):
    """
    An immutable sequence of positive interval steps, measured in EDO units, which together
    span exactly one octave. The EDO of a pattern is the sum of its steps.

    Compares and hashes equal to the `tuple` of its steps.
    """

    __slots__ = ("_steps", "_key", "_tones", "_degrees", "_hash")

    if t.TYPE_CHECKING:  # pragma: no cover

        @overload
        def __new__(cls, steps: Iterable[int], /) -> Self: ...

        @overload
        def __new__(cls, *steps: int) -> Self: ...

        @overload
        def __getitem__(self, key: int) -> int: ...

        @overload
        def __getitem__(self, key: slice) -> tuple[int, ...]: ...

    def __new__(cls, *args) -> Self:
        if len(args) == 1 and isinstance(args[0], Iterable):
            if isinstance(args[0], cls):
                return args[0]
            steps = tuple(args[0])
        else:
            steps = args
        if len(steps) == 0:
            raise ValueError("A step pattern needs at least one step.")
        for step in steps:
            if not isInt(step):
                raise TypeError(f"steps must be integers, got {step.__class__.__name__}")
            if step < 1:
                raise ValueError(f"steps must be positive, got {step}")
        return cls._newHelper(tuple(map(int, steps)))

    @classmethod
    def _newHelper(cls, steps: tuple[int, ...]) -> Self:
        # no validation, used by the enumerator which only builds valid patterns
        self = super().__new__(cls)
        self._steps = steps
        return self

    @property
    def steps(self) -> tuple[int, ...]:
        return self._steps

    @property
    def edo(self) -> int:
        """Number of equal divisions of the octave the steps add up to."""
        return sum(self._steps)

    @property
    def size(self) -> int:
        """Number of notes in the scale."""
        return len(self._steps)

    @cachedProp
    def key(self) -> str:
        return rotationKey(self._steps)

    def isRotationOf(self, other: Iterable[int]) -> bool:
        other = StepPattern(other)
        return self.size == other.size and self.key == other.key

    def rotate(self, shift: int = 1) -> Self:
        """
        The same scale started from degree `shift`, i.e. the mode of the pattern at that degree.
        """
        return self._newHelper(rotate(self._steps, shift))

    def rotations(self) -> Iterator[Self]:
        for r in rotations(self._steps):
            yield self._newHelper(r)

    @cachedProp
    def tones(self) -> np.ndarray:
        """
        Positions of the scale degrees in EDO units, starting from 0 for the root.
        """
        tones = np.cumsum((0, *self._steps[:-1]))
        tones.flags.writeable = False
        return tones

    def tone(self, idx: int) -> int:
        """
        Position of degree `idx` in EDO units. Indices outside the octave wrap around, adding
        or subtracting one `edo` per octave.
        """
        return int(cycGet(self.tones, idx, self.edo))

    @cachedProp
    def degrees(self) -> np.ndarray:
        """
        Positions reached after each step, reduced into the octave. This is where a circle
        diagram of the EDO highlights the scale, the final position being the root at 0.
        """
        degrees = np.cumsum(self._steps) % self.edo
        degrees.flags.writeable = False
        return degrees

    def freqs(self, base: Real | None = None) -> np.ndarray:
        """
        Frequencies of the root, every following degree and the octave, in Hz. Each step `s`
        multiplies the frequency by `2 ** (s / edo)`.
        """
        if base is None:
            base = settings.baseFreq
        else:
            base = resolvePositiveReal(base, "base")
            if not AUDIBLE_RANGE[0] <= base <= AUDIBLE_RANGE[1]:
                warnings.warn(f"Base frequency {base} Hz is outside the audible range.")
        positions = np.append(self.tones, self.edo)
        return base * np.power(2.0, positions / self.edo)

    def schedule(
        self, base: Real | None = None, duration: Real | None = None
    ) -> list[tuple[float, float]]:
        """
        `(onset, frequency)` pairs for playing the scale upwards from root to octave, one
        note every `duration` seconds.
        """
        if duration is None:
            duration = settings.noteDuration
        else:
            duration = resolvePositiveReal(duration, "duration")
        return [(i * duration, float(f)) for i, f in enumerate(self.freqs(base))]

    @property
    def name(self) -> str | None:
        """Name of this exact pattern if it is a well-known scale."""
        return scaleName(self._steps, None)

    def namedRotation(self) -> tuple[int, str] | None:
        return findNamedRotation(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __getitem__(self, key: int | slice) -> int | tuple[int, ...]:
        return self._steps[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._steps)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._steps)

    def __contains__(self, value: Any) -> bool:
        return value in self._steps

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, StepPattern):
            return self._steps == other._steps
        if isinstance(other, tuple):
            return self._steps == other
        return NotImplemented

    @cachedGetter
    def __hash__(self) -> int:
        return hash(self._steps)

    def __str__(self) -> str:
        return joinSteps(self._steps, ", ")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self!s})"
