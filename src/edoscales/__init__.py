"""
# `edoscales`: Scale Enumeration for Equal Divisions of the Octave

Lists every scale of a given number of notes in an EDO, with modes of the same scale counted
once, together with helpers to name, page through and tune the results.

>>> import edoscales as es
>>> es.ScaleEnumerator(4, 2)[:]
[StepPattern(1, 3), StepPattern(2, 2)]
>>> len(es.ScaleEnumerator(12, 7))
66
"""

import logging

from ._impl import *  # noqa: F401, F403

logging.getLogger(__name__).addHandler(logging.NullHandler())
