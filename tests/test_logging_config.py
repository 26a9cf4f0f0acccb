"""
Tests for the logging configuration module.

This test suite validates:
- ProgressLogger used by the batch command
- setup_logging with and without a log file
- level_from_env reading ITHKUIL_LOG_LEVEL
- log_with_context as used when a word fails to parse
"""
import unittest
import logging
import os
import tempfile
from unittest.mock import patch, MagicMock
from datetime import datetime, timedelta
from ithkuil.logging_config import (
    LOG_LEVEL_ENV,
    ProgressLogger,
    level_from_env,
    log_with_context,
    setup_logging,
)


class TestProgressLogger(unittest.TestCase):
    """Test suite for the ProgressLogger class."""

    def setUp(self):
        self.mock_logger = MagicMock()

    def test_counts_words(self):
        """Tests that update() advances one word at a time by default."""
        progress = ProgressLogger(total=20, desc="Glossing words", logger=self.mock_logger)

        progress.update()
        progress.update()
        self.assertEqual(progress.current, 2)

    def test_logs_every_ten_percent(self):
        """Tests that a log line is written at each 10% step and not in between."""
        progress = ProgressLogger(total=100, logger=self.mock_logger)

        progress.update(5)
        self.assertEqual(self.mock_logger.info.call_count, 0)
        progress.update(10)
        self.assertEqual(self.mock_logger.info.call_count, 1)
        progress.update(3)
        self.assertEqual(self.mock_logger.info.call_count, 1)

    def test_custom_step(self):
        """Tests that a larger step reports less often."""
        progress = ProgressLogger(total=100, logger=self.mock_logger, step=25)

        progress.update(20)
        self.assertEqual(self.mock_logger.info.call_count, 0)
        progress.update(10)
        self.assertEqual(self.mock_logger.info.call_count, 1)
        progress.update(70)
        self.assertEqual(self.mock_logger.info.call_count, 2)

    def test_message_has_description_and_count(self):
        """Tests the shape of the progress message."""
        progress = ProgressLogger(total=40, desc="Glossing words", logger=self.mock_logger)

        progress.update(10)

        logged_message = self.mock_logger.info.call_args[0][0]
        self.assertIn("Glossing words: 10/40 (25%)", logged_message)

    def test_eta_only_while_incomplete(self):
        """Tests that the ETA is shown before completion but not after."""
        progress = ProgressLogger(total=10, logger=self.mock_logger)
        progress.start_time = datetime.now() - timedelta(seconds=10)

        progress.update(5)
        self.assertIn("ETA:", self.mock_logger.info.call_args[0][0])

        progress.update(5)
        self.assertNotIn("ETA:", self.mock_logger.info.call_args[0][0])

    def test_zero_total(self):
        """Tests that an empty batch does not divide by zero."""
        progress = ProgressLogger(total=0, logger=self.mock_logger)

        progress.update(1)

        self.assertIn("(0%)", self.mock_logger.info.call_args[0][0])

    def test_close_completes_progress(self):
        """Tests that close() jumps to the total and logs once more."""
        progress = ProgressLogger(total=100, logger=self.mock_logger)
        progress.update(50)
        calls_before = self.mock_logger.info.call_count

        progress.close()

        self.assertEqual(progress.current, 100)
        self.assertGreater(self.mock_logger.info.call_count, calls_before)


class TestSetupLogging(unittest.TestCase):
    """Test suite for the setup_logging() function."""

    def setUp(self):
        self.root_logger = logging.getLogger()
        self.saved_handlers = self.root_logger.handlers[:]
        self.saved_level = self.root_logger.level
        for handler in self.saved_handlers:
            self.root_logger.removeHandler(handler)

    def tearDown(self):
        for handler in self.root_logger.handlers[:]:
            handler.close()
            self.root_logger.removeHandler(handler)
        for handler in self.saved_handlers:
            self.root_logger.addHandler(handler)
        self.root_logger.setLevel(self.saved_level)

    def test_console_only(self):
        """Tests that log_file=None installs only a console handler."""
        setup_logging(log_file=None, level=logging.WARNING)

        self.assertEqual(len(self.root_logger.handlers), 1)
        self.assertNotIsInstance(self.root_logger.handlers[0], logging.FileHandler)
        self.assertEqual(self.root_logger.level, logging.WARNING)

    def test_file_handler_and_run_separator(self):
        """Tests that a log file gets a handler and the run separator."""
        log_dir = self._tmp_dir()
        log_file = os.path.join(log_dir, "ithkuil.log")

        setup_logging(log_file=log_file, level=logging.INFO)

        file_handlers = [h for h in self.root_logger.handlers if isinstance(h, logging.FileHandler)]
        self.assertEqual(len(file_handlers), 1)
        file_handlers[0].flush()
        with open(log_file, 'r', encoding='utf-8') as f:
            log_content = f.read()
        self.assertIn("=" * 80, log_content)
        self.assertIn("ithkuil run started", log_content)

    def test_run_banner_names_level(self):
        """Tests that the run banner records the level in effect."""
        log_file = os.path.join(self._tmp_dir(), "ithkuil.log")

        setup_logging(log_file=log_file, level=logging.INFO)

        for handler in self.root_logger.handlers:
            handler.flush()
        with open(log_file, 'r', encoding='utf-8') as f:
            self.assertIn("(level INFO)", f.read())

    def test_debug_overrides_level_and_format(self):
        """Tests that debug=True forces DEBUG and adds file/line context."""
        setup_logging(log_file=None, level=logging.WARNING, debug=True)

        self.assertEqual(self.root_logger.level, logging.DEBUG)
        for handler in self.root_logger.handlers:
            self.assertIn("%(filename)s", handler.formatter._fmt)
            self.assertIn("%(lineno)d", handler.formatter._fmt)

    def test_clears_existing_handlers(self):
        """Tests that calling setup_logging twice does not duplicate handlers."""
        setup_logging(log_file=None)
        setup_logging(log_file=None)

        self.assertEqual(len(self.root_logger.handlers), 1)

    def _tmp_dir(self):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        return tmp.name


class TestLevelFromEnv(unittest.TestCase):
    """Test suite for level_from_env()."""

    def test_default_when_unset(self):
        """Tests that the default is returned without the variable."""
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(level_from_env(logging.ERROR), logging.ERROR)

    def test_reads_level_name(self):
        """Tests that level names are case-insensitive."""
        with patch.dict(os.environ, {LOG_LEVEL_ENV: "debug"}):
            self.assertEqual(level_from_env(), logging.DEBUG)

    def test_rejects_unknown_level(self):
        """Tests that an unknown level name is a ValueError."""
        with patch.dict(os.environ, {LOG_LEVEL_ENV: "LOUD"}):
            with self.assertRaises(ValueError):
                level_from_env()


class TestLogWithContext(unittest.TestCase):
    """Test suite for the log_with_context() function."""

    @patch('ithkuil.logging_config.logging.getLogger')
    def test_logs_message_at_level(self, mock_get_logger):
        """Tests that the main message is logged at the given level."""
        mock_logger = MagicMock()
        mock_get_logger.return_value = mock_logger

        log_with_context("No interpretation of 'lk' succeeded", level=logging.INFO)

        mock_logger.log.assert_called_once_with(logging.INFO, "No interpretation of 'lk' succeeded")

    @patch('ithkuil.logging_config.logging.getLogger')
    def test_logs_context_when_debug_enabled(self, mock_get_logger):
        """Tests that each context entry is logged on its own line."""
        mock_logger = MagicMock()
        mock_logger.isEnabledFor.return_value = True
        mock_get_logger.return_value = mock_logger

        log_with_context("Failed", {'tokens': "l k", 'error': "ExpectedVc"})

        messages = " ".join(c[0][0] for c in mock_logger.debug.call_args_list)
        self.assertIn("tokens: l k", messages)
        self.assertIn("error: ExpectedVc", messages)

    @patch('ithkuil.logging_config.logging.getLogger')
    def test_skips_context_when_debug_disabled(self, mock_get_logger):
        """Tests that context is dropped when DEBUG is off."""
        mock_logger = MagicMock()
        mock_logger.isEnabledFor.return_value = False
        mock_get_logger.return_value = mock_logger

        log_with_context("Failed", {'tokens': "l k"}, level=logging.INFO)

        self.assertEqual(mock_logger.debug.call_count, 0)

    @patch('ithkuil.logging_config.logging.getLogger')
    def test_truncates_long_values(self, mock_get_logger):
        """Tests that values over 200 characters are truncated."""
        mock_logger = MagicMock()
        mock_logger.isEnabledFor.return_value = True
        mock_get_logger.return_value = mock_logger

        log_with_context("Failed", {'tokens': "l " * 200})

        last_message = mock_logger.debug.call_args_list[-1][0][0]
        self.assertTrue(last_message.endswith("..."))
        self.assertLess(len(last_message), 250)


if __name__ == '__main__':
    unittest.main()
