""" test loggeria

   isort:skip_file
"""
import logging
import os
import sys
import unittest

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PACKAGE_ROOT not in sys.path:
    sys.path.insert(0, PACKAGE_ROOT)

from frameseq.lib import loggeria


def _record(level):
    return logging.LogRecord("frameseq", level, __file__, 1, "message", None, None)


class LogLevelFilterTest(unittest.TestCase):
    def test_passes_below_error(self):
        f = loggeria.LogLevelFilter()
        self.assertTrue(f.filter(_record(logging.DEBUG)))
        self.assertTrue(f.filter(_record(logging.WARNING)))

    def test_blocks_error_and_above(self):
        f = loggeria.LogLevelFilter()
        self.assertFalse(f.filter(_record(logging.ERROR)))
        self.assertFalse(f.filter(_record(logging.CRITICAL)))


class SetupLoggingTest(unittest.TestCase):
    def setUp(self):
        self.logger = loggeria.get_frameseq_logger()
        self.handlers = list(self.logger.handlers)
        self.level = self.logger.level

    def tearDown(self):
        self.logger.handlers = self.handlers
        self.logger.setLevel(self.level)

    def test_logger_name(self):
        self.assertEqual(self.logger.name, "frameseq")

    def test_setup_is_idempotent(self):
        self.logger.handlers = []
        loggeria.setup_frameseq_logging()
        loggeria.setup_frameseq_logging()
        self.assertEqual(len(self.logger.handlers), 2)

    def test_setup_routes_errors_to_stderr(self):
        self.logger.handlers = []
        loggeria.setup_frameseq_logging()
        out_handler, err_handler = self.logger.handlers
        self.assertIs(out_handler.stream, sys.stdout)
        self.assertIs(err_handler.stream, sys.stderr)
        self.assertEqual(err_handler.level, logging.ERROR)

    def test_setup_uses_formatter(self):
        self.logger.handlers = []
        loggeria.setup_frameseq_logging(console_formatter=loggeria.FORMATTER_VERBOSE)
        for handler in self.logger.handlers:
            self.assertIs(handler.formatter, loggeria.FORMATTER_VERBOSE)

    def test_setup_sets_level(self):
        loggeria.setup_frameseq_logging(logger_level=logging.WARNING)
        self.assertEqual(self.logger.level, logging.WARNING)

    def test_set_log_level(self):
        loggeria.set_frameseq_log_level("ERROR")
        self.assertEqual(self.logger.level, logging.ERROR)

    def test_set_bad_log_level(self):
        with self.assertRaises(AssertionError):
            loggeria.set_frameseq_log_level("LOUD")


if __name__ == "__main__":
    unittest.main()
