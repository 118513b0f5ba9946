import importlib.util
import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

from wordsearch import cli


WORD_LIST = "\n".join(
    [
        "python", "search", "puzzle", "letter", "grid", "random", "word",
        "seed", "cross", "hidden", "find", "clue", "answer", "board",
    ]
)


class MainTests(unittest.TestCase):
    def run_main(self, argv):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = cli.main(argv)
        return code, stdout.getvalue()

    def test_generates_and_writes_puzzle(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text(WORD_LIST, encoding="utf-8")
            output = Path(tmpdir) / "out puzzle.txt"
            code, printed = self.run_main(
                ["--words-file", str(words), "--output", str(output), "--seed", "42"]
            )
            self.assertEqual(code, 0)
            content = output.read_text(encoding="utf-8")

        self.assertIn("Generated Word Find Grid:", printed)
        self.assertIn("Grid and word list have been written to", printed)
        self.assertIn("Words to find:", printed)
        self.assertTrue(content.startswith("GRID:\n"))
        self.assertIn("\n\nWORDS TO FIND:\n", content)
        listed = content.split("WORDS TO FIND:\n", 1)[1].split()
        self.assertTrue(listed)
        self.assertTrue(set(listed) <= set(WORD_LIST.upper().split()))

    def test_empty_word_file_exits_with_one(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "empty.txt"
            words.write_text("", encoding="utf-8")
            output = Path(tmpdir) / "out.txt"
            code, printed = self.run_main(["--words-file", str(words), "--output", str(output)])
            self.assertEqual(code, 1)
            self.assertFalse(output.exists())
        self.assertEqual(printed, "")

    def test_missing_word_file_exits_with_one(self) -> None:
        code, _ = self.run_main(["--words-file", "/nonexistent/words.txt", "--output", "x.txt"])
        self.assertEqual(code, 1)

    def test_prompts_for_paths_with_spaces(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "word list.txt"
            words.write_text(WORD_LIST, encoding="utf-8")
            output = Path(tmpdir) / "my puzzle.txt"
            with patch("builtins.input", side_effect=[str(words), str(output)]) as prompt:
                code, _ = self.run_main(["--seed", "1"])
            self.assertEqual(code, 0)
            self.assertTrue(output.exists())
        self.assertEqual(prompt.call_count, 2)
        self.assertEqual(prompt.call_args_list[0].args[0], cli.WORDS_PROMPT)

    def test_unwritable_output_does_not_abort(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text(WORD_LIST, encoding="utf-8")
            output = Path(tmpdir) / "no-such-dir" / "out.txt"
            code, printed = self.run_main(
                ["--words-file", str(words), "--output", str(output), "--seed", "3"]
            )
        self.assertEqual(code, 0)
        self.assertNotIn("have been written", printed)
        self.assertIn("Words to find:", printed)

    def test_invalid_word_bounds_are_rejected(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            with redirect_stdout(io.StringIO()), patch("sys.stderr", io.StringIO()):
                cli.main(["--min-words", "5", "--max-words", "2"])
        self.assertEqual(ctx.exception.code, 2)

    def test_unplaced_word_is_still_listed(self) -> None:
        # A 1x1 grid holds only one of the two letters.
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text("a\nb\n", encoding="utf-8")
            output = Path(tmpdir) / "out.txt"
            code, printed = self.run_main(
                [
                    "--words-file", str(words), "--output", str(output),
                    "--size", "1", "--min-words", "2", "--max-words", "2",
                    "--attempts", "1", "--seed", "0",
                ]
            )
            self.assertEqual(code, 0)
            content = output.read_text(encoding="utf-8")
        listed = content.split("WORDS TO FIND:\n", 1)[1].split()
        self.assertEqual(sorted(listed), ["A", "B"])
        shown = printed.split("Words to find:\n", 1)[1].split()
        self.assertEqual(shown, listed)

    def test_log_level_is_case_insensitive(self) -> None:
        args = cli.build_parser().parse_args(["--log-level", "debug"])
        self.assertEqual(args.log_level, "DEBUG")

    def test_unknown_log_level_is_rejected(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            with patch("sys.stderr", io.StringIO()):
                cli.build_parser().parse_args(["--log-level", "chatty"])
        self.assertEqual(ctx.exception.code, 2)

    def test_console_entry_exits_with_main_status(self) -> None:
        with patch.object(cli, "main", return_value=1):
            with self.assertRaises(SystemExit) as ctx:
                cli.cli()
        self.assertEqual(ctx.exception.code, 1)

    def test_package_is_runnable_as_module(self) -> None:
        self.assertIsNotNone(importlib.util.find_spec("wordsearch.__main__"))

    def test_stats_flag_prints_summary(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            words = Path(tmpdir) / "words.txt"
            words.write_text(WORD_LIST, encoding="utf-8")
            output = Path(tmpdir) / "out.txt"
            code, printed = self.run_main(
                ["--words-file", str(words), "--output", str(output), "--seed", "9", "--stats"]
            )
        self.assertEqual(code, 0)
        self.assertIn("--- Puzzle ---", printed)
        self.assertIn("Seed:          9", printed)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
