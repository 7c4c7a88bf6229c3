# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


"""
Test logging and debug output.
"""
from datever.tests.util import TestBase
import unittest
from datever.utils import logging_
from datever.config import config
from datever.parser import parse
from datever.range_ import DateVersionRange


class TestLogging(TestBase):

    def test_printer(self):
        printer = logging_.get_debug_printer(False)
        self.assertFalse(printer)
        printer("not printed %s", "foo")

        printer = logging_.get_debug_printer()
        self.assertTrue(printer)

        with self.assertLogs("datever", level="DEBUG") as cm:
            printer("Hello %s", "world")
            printer("100%")

        self.assertEqual(cm.output, ["DEBUG:datever:Hello world",
                                     "DEBUG:datever:100%"])

    def test_log_duration(self):
        with self.assertLogs("datever", level="DEBUG") as cm:
            with logging_.log_duration(logging_.get_debug_printer(),
                                       "took %s secs"):
                pass

        self.assertEqual(len(cm.output), 1)
        self.assertTrue(cm.output[0].startswith("DEBUG:datever:took "))

        # disabled printers stay silent
        with self.assertRaises(AssertionError):
            with self.assertLogs("datever", level="DEBUG"):
                with logging_.log_duration(logging_.get_debug_printer(False),
                                           "took %s secs"):
                    pass

    def test_debug_parsing(self):
        self.assertFalse(config.debug_printer("parsing"))

        self.update_settings({"debug_parsing": True})
        with self.assertLogs("datever", level="DEBUG") as cm:
            parse(">=2020")

        self.assertTrue(any("lower_bound:" in x for x in cm.output))
        self.assertTrue(any("Parsed expression in" in x for x in cm.output))

    def test_debug_resolve(self):
        self.update_settings({"debug_resolve": True})
        with self.assertLogs("datever", level="DEBUG") as cm:
            DateVersionRange(">2020")

        self.assertTrue(any("LowerBoundedRangeNode" in x for x in cm.output))
        self.assertTrue(any("YearRangeNode" in x for x in cm.output))


if __name__ == '__main__':
    unittest.main()
