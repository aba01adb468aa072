"""CLI argument and config-default behavior tests.

Verifies how ``ils.cli.main`` picks the target directory, merges flags
with persisted defaults, and reports errors.
"""

from __future__ import annotations

import errno
import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from ils import cli, config
from ils.errors import OutputWriteFailure


class _Stdout:
    def __init__(self, tty: bool = False) -> None:
        self.buffer = io.BytesIO()
        self._tty = tty

    def isatty(self) -> bool:
        return self._tty


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()
        self.config_path = self.root / "config" / "ils.json"
        patcher = mock.patch("ils.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.listing = self.root / "listing"
        self.listing.mkdir()
        for name in ("alpha", "beta"):
            (self.listing / name).write_text("x", encoding="utf-8")

    def _run(self, argv: list[str], tty: bool = False, default_path: Path | None = None) -> str:
        stdout = _Stdout(tty=tty)
        with mock.patch.object(sys, "stdout", stdout):
            cli.main(argv, default_path=default_path)
        return stdout.buffer.getvalue().decode("utf-8")

    def test_lists_one_name_per_line_when_not_a_tty(self) -> None:
        output = self._run([str(self.listing)])
        self.assertEqual(sorted(output.splitlines()), ["alpha", "beta"])

    def test_defaults_to_given_default_path(self) -> None:
        output = self._run([], default_path=self.listing)
        self.assertEqual(sorted(output.splitlines()), ["alpha", "beta"])

    def test_defaults_to_current_working_directory(self) -> None:
        previous_cwd = Path.cwd()
        try:
            os.chdir(self.listing)
            output = self._run([])
        finally:
            os.chdir(previous_cwd)
        self.assertEqual(sorted(output.splitlines()), ["alpha", "beta"])

    def test_explicit_width_produces_grid(self) -> None:
        output = self._run([str(self.listing), "--width", "80"])
        self.assertEqual(len(output.splitlines()), 1)
        self.assertEqual(sorted(output.split()), ["alpha", "beta"])

    def test_long_flag_renders_metadata_columns(self) -> None:
        with mock.patch.dict(os.environ, {"LC_TIME": "C"}):
            output = self._run([str(self.listing), "-l"])
        lines = output.splitlines()
        self.assertEqual(len(lines), 2)
        for line in lines:
            self.assertTrue(line.startswith("rw"))
            self.assertTrue(line.endswith(("alpha", "beta")))

    def test_config_default_enables_long_mode(self) -> None:
        config.save_listing_defaults(config.ListingDefaults(long=True))
        output = self._run([str(self.listing)])
        self.assertTrue(all(" 1 " in line for line in output.splitlines()))

    def test_no_color_when_stdout_is_not_a_tty(self) -> None:
        (self.listing / "sub").mkdir()
        output = self._run([str(self.listing)])
        self.assertNotIn("\x1b[", output)

    def test_tty_output_is_colored_unless_disabled(self) -> None:
        (self.listing / "sub").mkdir()
        colored = self._run([str(self.listing), "--width", "80"], tty=True)
        plain = self._run([str(self.listing), "--width", "80", "--no-color"], tty=True)
        self.assertIn("\x1b[", colored)
        self.assertNotIn("\x1b[", plain)

    def test_hyperlink_flag_links_names(self) -> None:
        output = self._run([str(self.listing), "--hyperlink"])
        self.assertIn("\x1b]8;;file://", output)

    def test_save_defaults_persists_effective_choice(self) -> None:
        self._run([str(self.listing), "-l", "--no-color", "--save-defaults"])
        self.assertEqual(
            config.load_listing_defaults(),
            config.ListingDefaults(long=True, color=False, hyperlink=False),
        )

    def test_missing_path_exits_with_message(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run([str(self.root / "missing")])
        self.assertIn("Path not found", str(ctx.exception.code))

    def test_file_path_exits_with_message(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run([str(self.listing / "alpha")])
        self.assertIn("not a directory", str(ctx.exception.code))

    def test_other_scan_errors_exit_with_message(self) -> None:
        error = OSError(errno.ELOOP, "Too many levels of symbolic links")
        with mock.patch("ils.cli.read_directory_entries", side_effect=error):
            with self.assertRaises(SystemExit) as ctx:
                self._run([str(self.listing)])
        self.assertEqual(ctx.exception.code, f"Cannot read directory: {self.listing}: Too many levels of symbolic links")

    def test_write_failure_exits_with_stage(self) -> None:
        with mock.patch("ils.cli.render_listing", side_effect=OutputWriteFailure("grid row")):
            with self.assertRaises(SystemExit) as ctx:
                self._run([str(self.listing)])
        self.assertEqual(ctx.exception.code, "ils: failed to write grid row")

    def test_rejects_non_positive_width(self) -> None:
        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                self._run([str(self.listing), "--width", "0"])


if __name__ == "__main__":
    unittest.main()
