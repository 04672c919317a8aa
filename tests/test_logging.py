"""
Tests for src/pullout/logging.py
"""

import io
import json
import unittest

import structlog

from src.pullout.logging import get_logger, setup_logging


class TestSetupLogging(unittest.TestCase):
    """Tests for structlog configuration."""

    def tearDown(self):
        structlog.reset_defaults()

    def test_json_output(self):
        stream = io.StringIO()
        setup_logging(json_output=True, log_level="INFO", stream=stream)

        get_logger("tests").info("index_built", students=3)

        line = json.loads(stream.getvalue().strip())
        self.assertEqual(line["event"], "index_built")
        self.assertEqual(line["students"], 3)
        self.assertEqual(line["level"], "info")
        self.assertIn("timestamp", line)

    def test_level_filtering(self):
        stream = io.StringIO()
        setup_logging(json_output=True, log_level="WARNING", stream=stream)

        get_logger("tests").info("hidden")

        self.assertEqual(stream.getvalue(), "")
