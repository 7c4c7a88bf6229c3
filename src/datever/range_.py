# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


from datever._util import _Common, cmp, last_satisfying
from datever.anchors import DateVersionRangeAnchor, resolve_anchors
from datever.config import config
from datever.exceptions import DateverLogicError, DateverParseError, \
    DateverTypeError
from datever.nodes import IdentityExpr
from datever.version import DateVersion
from collections.abc import Mapping
from functools import cmp_to_key


_inf = float("inf")

# one second, in epoch milliseconds
_step = 1000


class DateVersionRange(_Common):
    """Date version range.

    A date version range is a contiguous span of date versions, bounded by a
    lower and/or upper `DateVersionRangeAnchor`. A range can be created from
    an expression string, a single version, or explicit anchors. This is best
    explained by example:

        "2020": every second of 2020;
        "2020-06", "2020-06-15", "2020-06-15T12", "2020-06-15T12:30": every
            second of that month, day, hour or minute;
        "2020-06-15T12:30:00Z": that second only;
        ">=2020", ">2020": from the start of 2020, or from just after the end
            of 2020, onwards;
        "<=2020", "<2020": until the end of 2020, or until just before the
            start of 2020;
        ">=2020 <2022", ">=2020,<2022": from the start of 2020 up to, but
            not including, the last second of 2022;
        "2020..2022": the three years 2020 to 2022 inclusive;
        "2020+P1M": 2020 and the month after it;
        "2020-P1M": 2020 and the month before it.

    Ranges are immutable. The effective bounds are cached as epoch
    milliseconds in `min_epoch` and `max_epoch`, which are -inf/+inf when the
    range is unbounded on that side.

        >>> r = DateVersionRange(">2020")
        >>> r.min_version
        DateVersion('2021-01-01T00:00:00Z')
        >>> DateVersion("2021-06-01") in r
        True
        >>> DateVersionRange(lower="2020-01-01T00:00:00", upper="2020-01-31T23:59:59")
        DateVersionRange('>=2020-01-01T00:00:00Z <=2020-01-31T23:59:59Z')
    """
    def __init__(self, value=None, lower=None, upper=None):
        """Create a DateVersionRange object.

        Args:
            value: One of:
                - str: Range expression, such as "2020", ">=2020-06" or
                  "2020+P1M";
                - `DateVersionRange`: Copied;
                - mapping with "lower" and/or "upper" keys, holding
                  anchor-like values (see `DateVersionRangeAnchor.coerce`);
                - anything else `DateVersion` accepts: a singular range
                  holding just that version.
            lower: Lower anchor-like, if `value` is not given.
            upper: Upper anchor-like, if `value` is not given.
        """
        if value is not None and (lower is not None or upper is not None):
            raise DateverTypeError("Give a range value or anchors, not both")

        if value is None:
            pass
        elif isinstance(value, DateVersionRange):
            lower, upper = value._lower, value._upper
        elif isinstance(value, str):
            lower, upper = resolve_anchors(self._parse(value))
        elif isinstance(value, Mapping):
            if not ("lower" in value or "upper" in value):
                raise DateverTypeError("Range mapping needs a 'lower' or "
                                       "'upper' key")
            lower, upper = value.get("lower"), value.get("upper")
        else:
            lower = upper = DateVersionRangeAnchor(DateVersion(value))

        if lower is not None:
            lower = DateVersionRangeAnchor.coerce(lower)
        if upper is not None:
            upper = DateVersionRangeAnchor.coerce(upper)

        if lower is None and upper is None:
            raise DateverLogicError("Date version range cannot be empty.")

        if lower and upper and lower.version > upper.version:
            raise DateverLogicError(
                "Lower bound cannot be greater than the upper bound: %s > %s"
                % (lower.version, upper.version))

        self._lower = lower
        self._upper = upper

        if lower is None:
            self._min_epoch = -_inf
        else:
            self._min_epoch = lower.version.to_epoch() + (_step if lower.open else 0)

        if upper is None:
            self._max_epoch = _inf
        else:
            self._max_epoch = upper.version.to_epoch() - (_step if upper.open else 0)

        if self._min_epoch > self._max_epoch or self._max_epoch < 0:
            raise DateverLogicError("Date version range contains no versions: "
                                    "%s .. %s" % (lower, upper))

    @classmethod
    def _parse(cls, s):
        from datever.parser import parse

        expr = parse(s)
        if not isinstance(expr, IdentityExpr):
            raise DateverParseError("Not a single date version range: %r "
                                    "(use DateVersionSpec for OR'd ranges)" % s)
        return expr

    @classmethod
    def _from_expr(cls, expr):
        lower, upper = resolve_anchors(expr)
        return cls(lower=lower, upper=upper)

    @classmethod
    def _coerce(cls, value):
        if isinstance(value, DateVersionRange):
            return value
        return cls(value)

    @property
    def lower(self):
        """Lower `DateVersionRangeAnchor`, or None if unbounded."""
        return self._lower

    @property
    def upper(self):
        """Upper `DateVersionRangeAnchor`, or None if unbounded."""
        return self._upper

    @property
    def min_epoch(self):
        """Epoch milliseconds of the first version in the range, or -inf."""
        return self._min_epoch

    @property
    def max_epoch(self):
        """Epoch milliseconds of the last version in the range, or +inf."""
        return self._max_epoch

    @property
    def min_version(self):
        """First `DateVersion` in the range, or None if unbounded."""
        return None if self._lower is None else DateVersion(self._min_epoch)

    @property
    def max_version(self):
        """Last `DateVersion` in the range, or None if unbounded."""
        return None if self._upper is None else DateVersion(self._max_epoch)

    @property
    def singular(self):
        """True if the range contains exactly one version."""
        return self._min_epoch == self._max_epoch

    @property
    def version_count(self):
        """Number of versions (seconds) in the range, or +inf if unbounded."""
        if self._lower is None or self._upper is None:
            return _inf
        return (self._max_epoch - self._min_epoch) // _step + 1

    def compare(self, rhs):
        """Compare to another range.

        A range that ends before `rhs` starts is less than it, and one that
        starts after `rhs` ends is greater. Overlapping ranges are ordered by
        their first version and, if the `range_compare_mode` setting is
        "lexicographic", then by their last version. In the default
        "partial" mode, overlapping ranges that start together compare
        equal here even if they are not equal.

        Returns:
            int: -1, 0 or 1.
        """
        rhs = self._coerce(rhs)

        if self._max_epoch < rhs._min_epoch:
            return -1
        if self._min_epoch > rhs._max_epoch:
            return 1

        result = cmp(self._min_epoch, rhs._min_epoch)
        if not result and config.range_compare_mode == "lexicographic":
            result = cmp(self._max_epoch, rhs._max_epoch)
        return result

    def rcompare(self, rhs):
        """Compare to another range, for descending sorts.

        Like `compare` but inverted, with overlapping ranges ordered by their
        last version instead.
        """
        rhs = self._coerce(rhs)

        if self._max_epoch < rhs._min_epoch:
            return 1
        if self._min_epoch > rhs._max_epoch:
            return -1

        result = cmp(rhs._max_epoch, self._max_epoch)
        if not result and config.range_compare_mode == "lexicographic":
            result = cmp(rhs._min_epoch, self._min_epoch)
        return result

    def equals(self, rhs):
        """True if both ranges contain the same versions."""
        rhs = self._coerce(rhs)
        return (self._min_epoch == rhs._min_epoch
                and self._max_epoch == rhs._max_epoch)

    def contains_version(self, version):
        """True if the version is in this range."""
        epoch = DateVersion(version).to_epoch()
        return self._min_epoch <= epoch <= self._max_epoch

    def includes(self, rhs):
        """True if `rhs` is entirely within this range.

        Args:
            rhs: A `DateVersion` (same as `contains_version`), or any
                range-like value.
        """
        if isinstance(rhs, DateVersion):
            return self.contains_version(rhs)

        rhs = self._coerce(rhs)
        return (rhs._min_epoch >= self._min_epoch
                and rhs._max_epoch <= self._max_epoch)

    def greater_than(self, rhs):
        """True if this range starts after `rhs` ends."""
        rhs = self._coerce(rhs)
        return self._min_epoch > rhs._max_epoch

    def less_than(self, rhs):
        """True if this range ends before `rhs` starts."""
        rhs = self._coerce(rhs)
        return self._max_epoch < rhs._min_epoch

    def intersection(self, rhs):
        """Get the overlap with another range.

        Returns:
            `DateVersionRange` with closed anchors, or None if the ranges do not
            overlap. A side is unbounded only if both ranges are unbounded on
            that side.
        """
        rhs = self._coerce(rhs)
        if self.greater_than(rhs) or self.less_than(rhs):
            return None

        min_epoch = max(self._min_epoch, rhs._min_epoch)
        max_epoch = min(self._max_epoch, rhs._max_epoch)

        lower = None if min_epoch == -_inf else DateVersion(min_epoch)
        upper = None if max_epoch == _inf else DateVersion(max_epoch)
        return DateVersionRange(lower=lower, upper=upper)

    def iter_satisfying(self, candidates):
        """Iterate over the candidates that are within this range.

        Args:
            candidates: Iterable of date-version-like values. It is consumed
                lazily, and only once.

        Returns:
            Iterator of `DateVersion`.
        """
        for candidate in candidates:
            version = DateVersion(candidate)
            if self.contains_version(version):
                yield version

    def max_satisfying(self, candidates):
        """Get the latest candidate within this range.

        Args:
            candidates: Iterable of date-version-like values, consumed once.

        Returns:
            `DateVersion`, or None if no candidate is in the range.
        """
        return last_satisfying((DateVersion(x) for x in candidates),
                               self.contains_version, max)

    def min_satisfying(self, candidates):
        """Get the earliest candidate within this range.

        See `max_satisfying`.
        """
        return last_satisfying((DateVersion(x) for x in candidates),
                               self.contains_version, min)

    @classmethod
    def max(cls, ranges):
        """Get the greatest range, according to `compare`.

        Returns:
            `DateVersionRange`, or None if `ranges` is empty.
        """
        ranges = sorted((cls._coerce(x) for x in ranges),
                        key=cmp_to_key(DateVersionRange.compare))
        return ranges[-1] if ranges else None

    @classmethod
    def min(cls, ranges):
        """Get the smallest range, according to `rcompare`.

        Returns:
            `DateVersionRange`, or None if `ranges` is empty.
        """
        ranges = sorted((cls._coerce(x) for x in ranges),
                        key=cmp_to_key(DateVersionRange.rcompare))
        return ranges[-1] if ranges else None

    def __contains__(self, rhs):
        return self.includes(rhs)

    def __str__(self):
        if self.singular:
            return str(self.min_version)

        parts = []
        if self._lower is not None:
            op = ">" if self._lower.open else ">="
            parts.append(op + str(self._lower.version))
        if self._upper is not None:
            op = "<" if self._upper.open else "<="
            parts.append(op + str(self._upper.version))
        return ' '.join(parts)

    def __eq__(self, other):
        if not isinstance(other, DateVersionRange):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other):
        if not isinstance(other, DateVersionRange):
            return NotImplemented
        return self.compare(other) < 0

    def __gt__(self, other):
        if not isinstance(other, DateVersionRange):
            return NotImplemented
        return self.compare(other) > 0

    def __hash__(self):
        return hash((self._min_epoch, self._max_epoch))
