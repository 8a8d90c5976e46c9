"""
Unit tests for logging helpers

Tests utilities.py
"""

import logging
import unittest
from magviz.tools import configure_logging, log_exceptions


@log_exceptions
def divide(a, b):
    """Divide two numbers"""
    return a / b


class TestLogExceptions(unittest.TestCase):
    """Test the log_exceptions decorator"""

    def test_passes_result_through(self):
        """Test that a successful call returns normally"""
        self.assertEqual(divide(6, 3), 2)

    def test_logs_and_reraises(self):
        """Test that a failure is logged at ERROR and re-raised"""
        with self.assertLogs(level="ERROR") as logs:
            with self.assertRaises(ZeroDivisionError):
                divide(1, 0)

        self.assertEqual(len(logs.records), 1)
        self.assertIn("divide failed", logs.output[0])

    def test_wraps_metadata(self):
        """Test that the wrapped function keeps its name and docstring"""
        self.assertEqual(divide.__name__, "divide")
        self.assertEqual(divide.__doc__, "Divide two numbers")


class TestConfigureLogging(unittest.TestCase):
    """Test command line logging setup"""

    def setUp(self):
        """Remove root handlers so basicConfig applies"""
        self.root = logging.getLogger()
        self.saved_handlers = self.root.handlers[:]
        self.saved_level = self.root.level
        self.root.handlers = []

    def tearDown(self):
        """Restore root logger state"""
        self.root.handlers = self.saved_handlers
        self.root.setLevel(self.saved_level)

    def test_default_level(self):
        """Test WARNING by default"""
        configure_logging()
        self.assertEqual(self.root.level, logging.WARNING)

    def test_verbose_level(self):
        """Test DEBUG when verbose"""
        configure_logging(verbose=True)
        self.assertEqual(self.root.level, logging.DEBUG)


if __name__ == '__main__':
    unittest.main()
