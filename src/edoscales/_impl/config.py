"""
Library-wide defaults. Values can be overridden through environment variables, read once
when the package is imported.

| variable | field |
|:-|:-|
| `EDOSCALES_PAGE_SIZE` | `pageSize` |
| `EDOSCALES_BASE_FREQ` | `baseFreq` |
| `EDOSCALES_NOTE_DURATION` | `noteDuration` |
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Self
import os

from .utils.number import resolvePositiveInt, resolvePositiveReal

__all__ = ["Settings", "settings"]

_ENV_PREFIX = "EDOSCALES_"


@dataclass(frozen=True, slots=True)
class Settings:
    pageSize: int = 25
    """Number of scales shown per page."""

    baseFreq: float = 261.63
    """Frequency of the root note in Hz. Defaults to middle C."""

    noteDuration: float = 0.5
    """Time in seconds between two successive notes when a scale is played back."""

    def __post_init__(self):
        object.__setattr__(self, "pageSize", resolvePositiveInt(self.pageSize, "pageSize"))
        object.__setattr__(self, "baseFreq", resolvePositiveReal(self.baseFreq, "baseFreq"))
        object.__setattr__(
            self, "noteDuration", resolvePositiveReal(self.noteDuration, "noteDuration")
        )

    @classmethod
    def fromEnv(cls, environ: Mapping[str, str] | None = None) -> Self:
        if environ is None:
            environ = os.environ
        overrides = {}
        for field, var, parse in (
            ("pageSize", "PAGE_SIZE", int),
            ("baseFreq", "BASE_FREQ", float),
            ("noteDuration", "NOTE_DURATION", float),
        ):
            name = _ENV_PREFIX + var
            if (raw := environ.get(name)) is None:
                continue
            try:
                value = parse(raw)
            except ValueError:
                raise ValueError(f"Invalid value for {name}: {raw!r}") from None
            if not value > 0:
                raise ValueError(f"{name} must be positive, got {raw!r}")
            overrides[field] = value
        return cls(**overrides)

    def replace(self, **changes) -> Self:
        return replace(self, **changes)


settings = Settings.fromEnv()
