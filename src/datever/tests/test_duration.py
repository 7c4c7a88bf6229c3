# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


"""
unit tests for 'duration' module
"""
import unittest
from datever.tests.util import TestBase
from datever.duration import DateVersionDuration
from datever.exceptions import DateverLogicError, DateverParseError, \
    DateverTypeError


class TestDuration(TestBase):

    def test_construction(self):
        d = DateVersionDuration(month=1, hour=3)
        self.assertEqual(d.month, 1)
        self.assertEqual(d.hour, 3)
        self.assertEqual(d.year, 0)
        self.assertEqual(str(d), "P1MT3H")

        d = DateVersionDuration("P1Y2DT12H")
        self.assertEqual(tuple(d), (1, 0, 2, 12, 0, 0))
        self.assertEqual(str(d), "P1Y2DT12H")

        d = DateVersionDuration({"second": 30, "day": None})
        self.assertEqual(d.as_dict(), {"year": 0, "month": 0, "day": 0,
                                       "hour": 0, "minute": 0, "second": 30})

        self.assertIs(DateVersionDuration(d), d)

    def test_not_normalized(self):
        a = DateVersionDuration({"minute": 70})
        b = DateVersionDuration(hour=1, minute=10)

        self.assertEqual(str(a), "PT70M")
        self.assertNotEqual(a, b)

    def test_zero(self):
        d = DateVersionDuration()
        self.assertFalse(d)
        self.assertEqual(str(d), "PT0S")
        self.assertEqual(DateVersionDuration("PT0S"), d)
        self.assertTrue(DateVersionDuration(second=1))

    def test_repr(self):
        self.assertEqual(repr(DateVersionDuration(year=2, second=5)),
                         "DateVersionDuration('P2YT5S')")

    def test_errors(self):
        self.assertRaises(DateverLogicError, DateVersionDuration, week=1)
        self.assertRaises(DateverLogicError, DateVersionDuration, {"weeks": 1})
        self.assertRaises(DateverLogicError, DateVersionDuration, day=-1)
        self.assertRaises(DateverTypeError, DateVersionDuration, day=1.5)
        self.assertRaises(DateverTypeError, DateVersionDuration, day="1")
        self.assertRaises(DateverTypeError, DateVersionDuration, day=True)
        self.assertRaises(DateverTypeError, DateVersionDuration, 5)
        self.assertRaises(DateverTypeError, DateVersionDuration, "P1D", day=1)

        for s in ("2020", ">2020", "2020+P1D", "P1D || P2D", "1D"):
            self.assertRaises(DateverParseError, DateVersionDuration, s)


if __name__ == '__main__':
    unittest.main()
