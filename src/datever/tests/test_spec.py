# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


"""
unit tests for 'spec' module
"""
import unittest
from datever.tests.util import TestBase
from datever.spec import DateVersionSpec
from datever.range_ import DateVersionRange
from datever.version import DateVersion
from datever.exceptions import DateverLogicError, DateverParseError, \
    DateverTypeError


class TestSpec(TestBase):

    def test_construction(self):
        spec = DateVersionSpec(["2020", "2022"])
        self.assertEqual(len(spec), 2)
        self.assertEqual(list(spec), [DateVersionRange("2020"),
                                      DateVersionRange("2022")])
        self.assertEqual(spec.ranges, tuple(spec))

        self.assertEqual(DateVersionSpec("2020 || 2022"), spec)
        self.assertEqual(DateVersionSpec("2020|2022"), spec)
        self.assertEqual(DateVersionSpec({"ranges": ("2020", "2022")}), spec)
        self.assertEqual(DateVersionSpec(spec), spec)
        self.assertEqual(DateVersionSpec([DateVersionRange("2020"), "2022"]),
                         spec)

        spec = DateVersionSpec(DateVersionRange(">=2020"))
        self.assertEqual(len(spec), 1)
        self.assertEqual(DateVersionSpec(">=2020"), spec)

        spec = DateVersionSpec(">=2020 <2021 || 2023-06 || 2024+P1D")
        self.assertEqual(len(spec), 3)

    def test_construction_errors(self):
        self.assertRaises(DateverLogicError, DateVersionSpec, [])
        self.assertRaises(DateverLogicError, DateVersionSpec, {"ranges": []})

        self.assertRaises(DateverTypeError, DateVersionSpec, {})
        self.assertRaises(DateverTypeError, DateVersionSpec, 2020)
        self.assertRaises(DateverTypeError, DateVersionSpec, {"ranges": "2020"})

        self.assertRaises(DateverParseError, DateVersionSpec, "P1M")
        self.assertRaises(DateverParseError, DateVersionSpec, "2020 || P1M")
        self.assertRaises(DateverParseError, DateVersionSpec, "2020 ||")

        self.assertRaises(DateverLogicError, DateVersionSpec,
                          "2020 || 2021-02-30")

    def test_includes(self):
        spec = DateVersionSpec(["2020", "2022"])

        self.assertFalse(spec.includes("2021-06-01"))
        self.assertTrue(spec.includes("2020-03-01"))
        self.assertTrue(spec.includes(DateVersion("2022-12-31T23:59:59")))
        self.assertTrue(spec.includes(1583020800000))

        self.assertIn("2022-05-05", spec)
        self.assertNotIn("2023", spec)

        # a range must fall entirely within one of the ranges
        self.assertTrue(spec.includes(DateVersionRange("2020-06")))
        self.assertFalse(spec.includes(DateVersionRange("2020..2022")))

    def test_satisfying(self):
        spec = DateVersionSpec("2020 || >=2022")
        candidates = ["2019-06-01", "2020-03-01", "2021-06-01", "2022-02-01",
                      "2020-09-01"]

        self.assertEqual(spec.max_satisfying(candidates),
                         DateVersion("2022-02-01"))
        self.assertEqual(spec.min_satisfying(iter(candidates)),
                         DateVersion("2020-03-01"))
        self.assertEqual(list(spec.iter_satisfying(candidates)),
                         [DateVersion(x) for x in
                          ("2020-03-01", "2022-02-01", "2020-09-01")])

        self.assertIsNone(spec.max_satisfying([]))
        self.assertIsNone(spec.min_satisfying([]))
        self.assertIsNone(spec.max_satisfying(["2019", "2021"]))
        self.assertIsNone(spec.min_satisfying(x for x in ["2021"]))

    def test_str(self):
        spec = DateVersionSpec("2020 || >2022")
        self.assertEqual(str(spec),
                         ">=2020-01-01T00:00:00Z <=2020-12-31T23:59:59Z || "
                         ">2022-12-31T23:59:59Z")
        self.assertEqual(DateVersionSpec(str(spec)), spec)
        self.assertEqual(hash(DateVersionSpec(str(spec))), hash(spec))


if __name__ == '__main__':
    unittest.main()
