# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


from datever._util import _Common, last_satisfying
from datever.exceptions import DateverLogicError, DateverParseError, \
    DateverTypeError
from datever.nodes import ExprOperator, IdentityExpr, MultiOperandExpr
from datever.range_ import DateVersionRange
from datever.version import DateVersion
from collections.abc import Mapping


class DateVersionSpec(_Common):
    """Date version spec.

    A date version spec is a list of one or more date version ranges, combined
    with OR - a version satisfies it if the version is in any of its ranges. In
    text, ranges are separated with "||" (or "|"):

        >>> spec = DateVersionSpec("2020 || >=2022-06")
        >>> "2021-06-01" in spec
        False
        >>> "2022-07-01" in spec
        True
        >>> len(spec)
        2

    Ranges are kept in the order given, and are not merged.
    """
    def __init__(self, value):
        """Create a DateVersionSpec object.

        Args:
            value: One of:
                - str: Expression of one or more ranges, separated by "||";
                - `DateVersionSpec`: Copied;
                - `DateVersionRange`: Spec of just that range;
                - list or tuple of range-like values;
                - mapping with a "ranges" key holding such a list.
        """
        if isinstance(value, DateVersionSpec):
            ranges = value._ranges
        elif isinstance(value, DateVersionRange):
            ranges = (value,)
        elif isinstance(value, str):
            ranges = self._parse(value)
        elif isinstance(value, Mapping):
            if "ranges" not in value:
                raise DateverTypeError("Spec mapping has no 'ranges' key")
            ranges = self._coerce_ranges(value["ranges"])
        elif isinstance(value, (list, tuple)):
            ranges = self._coerce_ranges(value)
        else:
            raise DateverTypeError("Invalid value type for a date version "
                                   "spec: %s" % type(value).__name__)

        if not ranges:
            raise DateverLogicError("Date version spec cannot be empty.")

        self._ranges = tuple(ranges)

    @classmethod
    def _parse(cls, s):
        from datever.parser import parse

        expr = parse(s)
        if isinstance(expr, IdentityExpr):
            return (DateVersionRange._from_expr(expr),)

        if not (isinstance(expr, MultiOperandExpr)
                and expr.operator == ExprOperator.OR):
            raise DateverParseError("Unsupported date version spec "
                                    "expression: %r" % s)

        return tuple(
            DateVersionRange._from_expr(IdentityExpr(x))
            for x in expr.operands
        )

    @classmethod
    def _coerce_ranges(cls, values):
        if isinstance(values, (str, Mapping)):
            raise DateverTypeError("Expected a list of ranges, got %s"
                                   % type(values).__name__)
        return tuple(
            x if isinstance(x, DateVersionRange) else DateVersionRange(x)
            for x in values
        )

    @property
    def ranges(self):
        """Tuple of `DateVersionRange`."""
        return self._ranges

    def includes(self, version):
        """True if any of the ranges includes `version`.

        Args:
            version: Date-version-like value, or a `DateVersionRange` which
                must then lie entirely within one of the ranges.
        """
        if not isinstance(version, DateVersionRange):
            version = DateVersion(version)

        return any(x.includes(version) for x in self._ranges)

    def iter_satisfying(self, candidates):
        """Iterate over the candidates in any of the ranges.

        See `DateVersionRange.iter_satisfying`.
        """
        for candidate in candidates:
            version = DateVersion(candidate)
            if self.includes(version):
                yield version

    def max_satisfying(self, candidates):
        """Get the latest candidate in any of the ranges.

        Args:
            candidates: Iterable of date-version-like values, consumed once.

        Returns:
            `DateVersion`, or None if no candidate satisfies.
        """
        return last_satisfying((DateVersion(x) for x in candidates),
                               self.includes, max)

    def min_satisfying(self, candidates):
        """Get the earliest candidate in any of the ranges.

        See `max_satisfying`.
        """
        return last_satisfying((DateVersion(x) for x in candidates),
                               self.includes, min)

    def __contains__(self, version):
        return self.includes(version)

    def __iter__(self):
        return iter(self._ranges)

    def __len__(self):
        return len(self._ranges)

    def __str__(self):
        return " || ".join(str(x) for x in self._ranges)

    def __eq__(self, other):
        if not isinstance(other, DateVersionSpec):
            return NotImplemented
        return self._ranges == other._ranges

    def __hash__(self):
        return hash(self._ranges)
