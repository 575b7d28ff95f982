# tests/test_cli.py

import contextlib
import io
import os
import tempfile
import unittest
from unittest import mock

from annotator import cli
from annotator.errors import ArgumentError


class TestCli(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def write_board(self, content: bytes, name: str = "board.txt") -> str:
        path = os.path.join(self.tmp, name)
        with open(path, "wb") as f:
            f.write(content)
        return path

    def run_cli(self, argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = cli.main(argv)
        return code, out.getvalue()

    def test_prints_annotated_board(self):
        path = self.write_board("·*·*·\n··*··\n··*··\n·····\n".encode("utf-8"))
        code, out = self.run_cli([path])
        self.assertEqual(code, 0)
        self.assertEqual(out, "1*3*1\n13*31\n·2*2·\n·111·\n")

    def test_windows_line_endings(self):
        path = self.write_board(b"*.\r\n..\r\n")
        code, out = self.run_cli([path])
        self.assertEqual(code, 0)
        self.assertEqual(out, "*1\n11\n")

    def test_zero_arguments(self):
        with mock.patch("annotator.cli.read_board_file") as read:
            code, out = self.run_cli([])
        read.assert_not_called()
        self.assertEqual(code, 1)
        self.assertTrue(out.startswith("Could not open file:"))
        self.assertEqual(out.count("\n"), 1)

    def test_too_many_arguments(self):
        with mock.patch("annotator.cli.read_board_file") as read:
            code, out = self.run_cli(["a.txt", "b.txt"])
        read.assert_not_called()
        self.assertEqual(code, 1)
        self.assertTrue(out.startswith("Could not open file:"))

    def test_parse_args_raises_argument_error(self):
        with self.assertRaises(ArgumentError):
            cli.parse_args(["a", "b", "c"])
        with self.assertRaises(ArgumentError):
            cli.parse_args([])
        self.assertEqual(cli.parse_args(["board.txt"]).path, "board.txt")
        self.assertEqual(cli.parse_args(["--version"]).path, "--version")

    def test_path_that_looks_like_an_option(self):
        path = self.write_board(b"*.\n", name="-h")
        cwd = os.getcwd()
        os.chdir(os.path.dirname(path))
        try:
            code, out = self.run_cli(["-h"])
        finally:
            os.chdir(cwd)
        self.assertEqual(code, 0)
        self.assertEqual(out, "*1\n")

    def test_missing_file(self):
        code, out = self.run_cli([os.path.join(self.tmp, "missing.txt")])
        self.assertEqual(code, 1)
        self.assertTrue(out.startswith("Could not open file:"))
        self.assertIn("missing.txt", out)

    def test_invalid_shape_prints_no_board(self):
        path = self.write_board(b"*.*\n.*\n")
        code, out = self.run_cli([path])
        self.assertEqual(code, 1)
        self.assertTrue(out.startswith("Failed to parse file into board:"))
        self.assertEqual(out.count("\n"), 1)

    def test_invalid_character(self):
        path = self.write_board(b"*x*\n")
        code, out = self.run_cli([path])
        self.assertEqual(code, 1)
        self.assertTrue(out.startswith("Failed to parse file into board:"))
        self.assertIn("'x'", out)

    def test_empty_file_prints_nothing(self):
        path = self.write_board(b"")
        code, out = self.run_cli([path])
        self.assertEqual(code, 0)
        self.assertEqual(out, "")


if __name__ == "__main__":
    unittest.main()
