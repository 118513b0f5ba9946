import io
import logging
import sys
import unittest
from unittest.mock import patch

from wordsearch.utils.logger import configure_logging, get_logger, resolve_level


class ResolveLevelTests(unittest.TestCase):
    def test_names_are_case_insensitive(self) -> None:
        self.assertEqual(resolve_level("info"), logging.INFO)
        self.assertEqual(resolve_level(" Warning "), logging.WARNING)

    def test_numbers_pass_through(self) -> None:
        self.assertEqual(resolve_level(logging.DEBUG), logging.DEBUG)

    def test_unknown_name_raises(self) -> None:
        with self.assertRaises(ValueError):
            resolve_level("chatty")


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._handlers = list(root.handlers)
        self._level = root.level

    def tearDown(self) -> None:
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)

    def test_defaults_to_stderr(self) -> None:
        fake_stderr = io.StringIO()
        with patch.object(sys, "stderr", fake_stderr):
            configure_logging("ERROR")
        root = logging.getLogger()
        self.assertEqual(len(root.handlers), 1)
        self.assertIs(root.handlers[0].stream, fake_stderr)
        self.assertEqual(root.level, logging.ERROR)

    def test_records_use_pipe_format(self) -> None:
        stream = io.StringIO()
        configure_logging("warning", stream=stream)
        get_logger("wordsearch.test").warning("Unable to place word: %s", "OWL")
        line = stream.getvalue().strip()
        self.assertIn("| WARNING | wordsearch.test | Unable to place word: OWL", line)

    def test_level_filters_records(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.WARNING, stream=stream)
        get_logger("wordsearch.test").info("hidden")
        self.assertEqual(stream.getvalue(), "")

    def test_reconfiguring_replaces_handler(self) -> None:
        configure_logging("INFO", stream=io.StringIO())
        configure_logging("INFO", stream=io.StringIO())
        self.assertEqual(len(logging.getLogger().handlers), 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
