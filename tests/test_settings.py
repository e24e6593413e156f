import unittest
from dataclasses import FrozenInstanceError
from pathlib import Path
import sys

DIR = Path(__file__).parent if "__file__" in locals() else Path.cwd()
sys.path.append(str(DIR / "../src"))

from edoscales import Settings  # noqa: E402


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        s = Settings()
        self.assertEqual(s.pageSize, 25)
        self.assertAlmostEqual(s.baseFreq, 261.63)
        self.assertAlmostEqual(s.noteDuration, 0.5)
        self.assertEqual(Settings.fromEnv({}), s)

    def test_frozen(self):
        with self.assertRaises(FrozenInstanceError):
            Settings().pageSize = 10  # type: ignore
        self.assertEqual(Settings().replace(pageSize=10).pageSize, 10)

    def test_fromEnv(self):
        s = Settings.fromEnv(
            {
                "EDOSCALES_PAGE_SIZE": "10",
                "EDOSCALES_BASE_FREQ": "440",
                "EDOSCALES_NOTE_DURATION": "0.25",
                "UNRELATED": "x",
            }
        )
        self.assertEqual(s, Settings(pageSize=10, baseFreq=440.0, noteDuration=0.25))
        self.assertIsInstance(s.baseFreq, float)

    def test_fromEnv_invalid(self):
        testData = (
            ("EDOSCALES_PAGE_SIZE", "abc"),
            ("EDOSCALES_PAGE_SIZE", "1.5"),
            ("EDOSCALES_PAGE_SIZE", "0"),
            ("EDOSCALES_BASE_FREQ", "-440"),
            ("EDOSCALES_BASE_FREQ", "nan"),
            ("EDOSCALES_NOTE_DURATION", ""),
        )
        for var, raw in testData:
            with self.subTest(var=var, raw=raw):
                with self.assertRaises(ValueError) as ctx:
                    Settings.fromEnv({var: raw})
                self.assertIn(var, str(ctx.exception))

    def test_invalid(self):
        with self.assertRaises(ValueError):
            Settings(pageSize=0)
        with self.assertRaises(TypeError):
            Settings(pageSize=2.5)
        with self.assertRaises(ValueError):
            Settings(baseFreq=0)
        with self.assertRaises(TypeError):
            Settings(noteDuration="fast")
        self.assertIsInstance(Settings(baseFreq=440).baseFreq, float)


if __name__ == "__main__":
    unittest.main()
