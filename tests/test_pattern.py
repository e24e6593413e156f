import unittest
from pathlib import Path
import sys

import numpy as np

DIR = Path(__file__).parent if "__file__" in locals() else Path.cwd()
sys.path.append(str(DIR / "../src"))

import edoscales as es  # noqa: E402

MAJOR = es.StepPattern(2, 2, 1, 2, 2, 2, 1)


class TestStepPattern(unittest.TestCase):
    def test_slots(self):
        self.assertNotIn("__dict__", dir(es.StepPattern))
        with self.assertRaises(AttributeError):
            MAJOR.x = 1  # type: ignore

    def test_new(self):
        p = es.StepPattern(2, 2, 1)
        self.assertEqual(p, es.StepPattern([2, 2, 1]))
        self.assertEqual(p, (2, 2, 1))
        self.assertEqual(hash(p), hash((2, 2, 1)))
        self.assertIs(es.StepPattern(p), p)
        self.assertEqual(es.StepPattern(np.array([3, 4])), (3, 4))
        self.assertEqual(es.StepPattern(12), (12,))
        self.assertNotEqual(p, [2, 2, 1])

    def test_invalid(self):
        with self.assertRaises(ValueError):
            es.StepPattern()
        with self.assertRaises(ValueError):
            es.StepPattern([])
        with self.assertRaises(ValueError):
            es.StepPattern(2, 0, 1)
        with self.assertRaises(TypeError):
            es.StepPattern(1.5, 2)
        with self.assertRaises(TypeError):
            es.StepPattern("12")

    def test_props(self):
        self.assertEqual(MAJOR.edo, 12)
        self.assertEqual(MAJOR.size, 7)
        self.assertEqual(len(MAJOR), 7)
        self.assertEqual(MAJOR.steps, (2, 2, 1, 2, 2, 2, 1))
        self.assertEqual(MAJOR[2], 1)
        self.assertEqual(MAJOR[:3], (2, 2, 1))
        self.assertEqual(list(reversed(MAJOR)), [1, 2, 2, 2, 1, 2, 2])
        self.assertIn(1, MAJOR)
        self.assertNotIn(3, MAJOR)
        self.assertEqual(MAJOR.count(2), 5)

    def test_rotate(self):
        self.assertEqual(MAJOR.rotate(1), (2, 1, 2, 2, 2, 1, 2))
        self.assertEqual(MAJOR.rotate(-1), (1, 2, 2, 1, 2, 2, 2))
        self.assertEqual(MAJOR.rotate(7), MAJOR)
        self.assertEqual(MAJOR.rotate(10), MAJOR.rotate(3))
        rotations = list(MAJOR.rotations())
        self.assertEqual(len(rotations), 7)
        self.assertEqual(rotations[0], MAJOR)
        for r in rotations:
            with self.subTest(r=r):
                self.assertIsInstance(r, es.StepPattern)
                self.assertTrue(r.isRotationOf(MAJOR))
                self.assertEqual(r.key, MAJOR.key)

    def test_isRotationOf(self):
        self.assertTrue(MAJOR.isRotationOf((2, 2, 2, 1, 2, 2, 1)))  # lydian
        self.assertFalse(MAJOR.isRotationOf((2, 1, 2, 2, 1, 3, 1)))  # harmonic minor
        self.assertFalse(es.StepPattern(1, 1).isRotationOf((1, 1, 1)))

    def test_rotationKey(self):
        testData = (
            ((2, 2, 1), "1,2,2"),
            ((1, 2, 2), "1,2,2"),
            ((3,), "3"),
            ((10, 1, 1), "1,1,10"),
            # plain string comparison, not numeric
            ((2, 10), "10,2"),
            ((2, 2, 1, 2, 2, 2, 1), "1,2,2,1,2,2,2"),
        )
        for steps, ans in testData:
            with self.subTest(steps=steps):
                self.assertEqual(es.rotationKey(steps), ans)
        self.assertEqual(es.rotationKey((2, 1), delimiter="-"), "1-2")

    def test_tones(self):
        np.testing.assert_array_equal(MAJOR.tones, [0, 2, 4, 5, 7, 9, 11])
        np.testing.assert_array_equal(es.StepPattern(5).tones, [0])
        with self.assertRaises(ValueError):
            MAJOR.tones[0] = 1  # read-only
        testData = ((0, 0), (3, 5), (6, 11), (7, 12), (8, 14), (-1, -1), (-7, -12))
        for idx, ans in testData:
            with self.subTest(idx=idx):
                self.assertEqual(MAJOR.tone(idx), ans)

    def test_degrees(self):
        np.testing.assert_array_equal(MAJOR.degrees, [2, 4, 5, 7, 9, 11, 0])
        np.testing.assert_array_equal(es.StepPattern(1, 3).degrees, [1, 0])

    def test_freqs(self):
        freqs = MAJOR.freqs(440)
        ans = 440 * 2 ** (np.array([0, 2, 4, 5, 7, 9, 11, 12]) / 12)
        np.testing.assert_allclose(freqs, ans)
        self.assertAlmostEqual(freqs[-1], 880)
        self.assertAlmostEqual(MAJOR.freqs()[0], es.settings.baseFreq)
        np.testing.assert_allclose(
            es.StepPattern(2, 2).freqs(100), [100, 100 * np.sqrt(2), 200]
        )
        with self.assertWarns(UserWarning):
            MAJOR.freqs(5)
        with self.assertRaises(ValueError):
            MAJOR.freqs(-1)
        with self.assertRaises(TypeError):
            MAJOR.freqs("440")

    def test_schedule(self):
        schedule = MAJOR.schedule(440, 0.25)
        self.assertEqual(len(schedule), 8)
        self.assertEqual([onset for onset, _ in schedule], [i * 0.25 for i in range(8)])
        self.assertAlmostEqual(schedule[0][1], 440)
        self.assertAlmostEqual(schedule[-1][1], 880)
        onsets = [onset for onset, _ in MAJOR.schedule()]
        self.assertAlmostEqual(onsets[1], es.settings.noteDuration)

    def test_str(self):
        self.assertEqual(str(es.StepPattern(2, 2, 1)), "2, 2, 1")
        self.assertEqual(repr(es.StepPattern(2, 2, 1)), "StepPattern(2, 2, 1)")


class TestNames(unittest.TestCase):
    def test_scaleName(self):
        self.assertEqual(es.scaleName((2, 2, 1, 2, 2, 2, 1)), "Major Scale")
        self.assertEqual(es.scaleName([2, 1, 2, 2, 1, 3, 1]), "Harmonic Minor")
        self.assertEqual(es.scaleName((1, 1, 10)), "Unknown Scale")
        self.assertIsNone(es.scaleName((1, 1, 10), None))

    def test_name(self):
        self.assertEqual(MAJOR.name, "Major Scale")
        self.assertEqual(es.StepPattern(1, 2, 2, 1, 2, 2, 2).name, "Locrian Mode")
        self.assertIsNone(es.StepPattern(1, 1, 10).name)

    def test_namedRotation(self):
        self.assertEqual(MAJOR.namedRotation(), (0, "Major Scale"))
        self.assertEqual(
            es.StepPattern(2, 3, 2, 2, 3).namedRotation(), (1, "Minor Pentatonic")
        )
        self.assertEqual(
            es.findNamedRotation((1, 2, 1, 2, 2, 1, 3)), (1, "Harmonic Minor")
        )
        self.assertIsNone(es.findNamedRotation((1, 1, 10)))

    def test_table(self):
        for key, name in es.KNOWN_SCALES.items():
            with self.subTest(name=name):
                steps = tuple(map(int, key.split(es.KEY_DELIMITER)))
                self.assertEqual(es.joinSteps(steps), key)
                self.assertEqual(es.scaleName(steps), name)
        with self.assertRaises(TypeError):
            es.KNOWN_SCALES["1,11"] = "x"  # immutable


if __name__ == "__main__":
    unittest.main()
