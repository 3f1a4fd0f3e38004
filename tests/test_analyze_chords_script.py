import unittest
import io
import os
import sys
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

# Ensure scripts and chorddepth are in path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)
sys.path.insert(0, os.path.join(ROOT, 'scripts'))

try:
    import analyze_chords
except ImportError:
    from scripts import analyze_chords


def _run(argv, stdin_lines=None):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        if stdin_lines is None:
            code = analyze_chords.main(argv)
        else:
            with patch("builtins.input", side_effect=stdin_lines):
                code = analyze_chords.main(argv)
    return code, out.getvalue(), err.getvalue()


class TestAnalyzeChordsScript(unittest.TestCase):
    def test_default_progression(self):
        code, out, err = _run(["--no-color"])
        self.assertEqual(code, 0)
        self.assertEqual(err, "")
        for sym in ["Fm9", "C/Bb", "G13", "Dbdim7"]:
            self.assertIn(sym, out)
        self.assertIn("6(C)", out)
        self.assertIn("1(D)", out)
        self.assertIn("X(M3)", out)

    def test_quoted_progression_is_split(self):
        code, out, _ = _run(["--no-color", "Am7 D7", "Gmaj7"])
        self.assertEqual(code, 0)
        self.assertIn("Am7", out)
        self.assertIn("Gmaj7", out)

    def test_named_tuning_and_center(self):
        code, out, _ = _run(["--no-color", "--tuning", "guitar", "--center", "G", "D7"])
        self.assertEqual(code, 0)
        self.assertIn("E2 A2 D3 G3 B3 E4", out)
        self.assertIn("6(E)", out)
        self.assertIn("+0", out)

    def test_unknown_root_is_reported(self):
        code, out, err = _run(["--no-color", "H7", "C"])
        self.assertEqual(code, 0)
        self.assertIn("[analyze] unknown root 'H'", err)
        self.assertIn("H7", out)

    def test_bad_tuning(self):
        code, _, err = _run(["--tuning", "E2 Q2", "C"])
        self.assertEqual(code, 1)
        self.assertIn("Error:", err)

    def test_bad_center(self):
        code, _, err = _run(["--center", "H", "C"])
        self.assertEqual(code, 1)
        self.assertIn("invalid", err)

    def test_interactive(self):
        code, out, _ = _run(["--no-color", "--interactive"], ["Fm9 G13", ""])
        self.assertEqual(code, 0)
        self.assertIn("Fm9", out)
        self.assertIn("G13", out)

    def test_interactive_eof(self):
        code, _, _ = _run(["--no-color", "--interactive"], EOFError())
        self.assertEqual(code, 0)

if __name__ == "__main__":
    unittest.main()
