from collections.abc import Sequence

import pyrsistent as pyr

from .utils.collection import rotate

__all__ = [
    "KEY_DELIMITER",
    "KNOWN_SCALES",
    "UNKNOWN_SCALE",
    "joinSteps",
    "scaleName",
    "findNamedRotation",
]

KEY_DELIMITER = ","
UNKNOWN_SCALE = "Unknown Scale"


def joinSteps(steps: Sequence[int], delimiter: str = KEY_DELIMITER) -> str:
    """Renders a step sequence as text, e.g. `"2,2,1,2,2,2,1"`."""
    return delimiter.join(map(str, steps))


KNOWN_SCALES = pyr.pmap(
    {
        # 12edo heptatonic
        "2,2,1,2,2,2,1": "Major Scale",
        "2,1,2,2,2,1,2": "Dorian Mode",
        "1,2,2,2,1,2,2": "Phrygian Mode",
        "2,2,2,1,2,2,1": "Lydian Mode",
        "2,2,1,2,2,1,2": "Mixolydian Mode",
        "2,1,2,2,1,2,2": "Natural Minor",
        "1,2,2,1,2,2,2": "Locrian Mode",
        "2,1,2,2,1,3,1": "Harmonic Minor",
        "2,1,2,2,2,2,1": "Melodic Minor",
        "1,3,1,2,1,2,2": "Phrygian Dominant",
        # 12edo others
        "2,2,3,2,3": "Major Pentatonic",
        "3,2,2,3,2": "Minor Pentatonic",
        "2,2,2,2,2,2": "Whole Tone Scale",
        "1,1,1,1,1,1,1,1,1,1,1,1": "Chromatic Scale",
        # 17edo / 19edo diatonic
        "3,3,1,3,3,3,1": "17edo Major Scale",
        "3,3,2,3,3,3,2": "19edo Major Scale",
    }
)
"""Names of well-known step patterns, keyed by the comma-joined steps."""


def scaleName(steps: Sequence[int], default: str = UNKNOWN_SCALE) -> str:
    """Returns the name of exactly this step pattern, or `default` if it has none."""
    return KNOWN_SCALES.get(joinSteps(steps), default)


def findNamedRotation(steps: Sequence[int]) -> tuple[int, str] | None:
    """
    Finds the smallest shift at which a rotation of `steps` is a known scale. Returns
    `(shift, name)`, or `None` when no rotation has a name. A shift of 0 means the pattern
    itself is named.
    """
    for shift in range(len(steps)):
        if (name := KNOWN_SCALES.get(joinSteps(rotate(steps, shift)))) is not None:
            return shift, name
    return None
