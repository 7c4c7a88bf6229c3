# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


from datever._util import _Common, cmp, component_names
from datever.duration import DateVersionDuration
from datever.exceptions import DateverLogicError, DateverParseError, \
    DateverTypeError
from dateutil.relativedelta import relativedelta
from datetime import date, datetime, timedelta, timezone
from functools import total_ordering
from collections import namedtuple
import math


_epoch_datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)

_one_millisecond = timedelta(milliseconds=1)


DateVersionDiff = namedtuple("DateVersionDiff",
                             component_names + ("milliseconds",))


def shift_datetime(dt, component, amount):
    """Move a datetime by `amount` units of a calendar component.

    Years and months are calendar-aware. If the day doesn't exist in the
    target month, the excess days roll over into the month after (so Jan 31
    plus one month is Mar 2 in a leap year, Mar 3 otherwise). Other
    components are fixed-length.

    Args:
        dt (`datetime`): Datetime to shift.
        component (str): Component name, eg "month".
        amount (int): Units to shift by, may be negative.

    Returns:
        `datetime`: The shifted datetime.
    """
    offset = relativedelta(**{component + 's': amount})

    try:
        if component in ("year", "month"):
            return (dt.replace(day=1) + offset) + timedelta(days=dt.day - 1)
        return dt + offset
    except (OverflowError, ValueError) as e:
        raise DateverLogicError("Date version out of range: %s %+d %s(s)"
                                % (dt.isoformat(), amount, component),
                                cause=e) from e


@total_ordering
class DateVersion(_Common):
    """A date version.

    A date version is an instant in UTC, truncated to the second. It can be
    created from:

    - a `datetime` (naive datetimes are taken to be UTC; aware datetimes are
      converted to UTC) or a `date` (midnight UTC);
    - a number, which is milliseconds since the Unix epoch (must not be
      negative);
    - a string, either an exact instant such as "2020-03-01T12:30:00Z" or
      "20200301123000", or an implicit-precision range such as "2020-03",
      which gives the first second of the range;
    - another `DateVersion`.

    Date versions are immutable. Arithmetic methods return new instances.
    """
    EPOCH = None

    def __init__(self, value):
        if isinstance(value, DateVersion):
            dt = value._value
        elif isinstance(value, datetime):
            dt = self._from_datetime(value)
        elif isinstance(value, date):
            dt = datetime(value.year, value.month, value.day,
                          tzinfo=timezone.utc)
        elif isinstance(value, bool):
            raise DateverTypeError("Invalid value type for a date version: "
                                   "bool")
        elif isinstance(value, (int, float)):
            dt = self._from_epoch(value)
        elif isinstance(value, str):
            dt = self._from_string(value)
        else:
            raise DateverTypeError("Invalid value type for a date version: %s"
                                   % type(value).__name__)

        if dt < _epoch_datetime:
            raise DateverLogicError("Epoch date cannot be negative: %s"
                                    % dt.isoformat())

        self._value = dt

    @classmethod
    def _from_datetime(cls, value):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        else:
            value = value.astimezone(timezone.utc)
        return value.replace(microsecond=0)

    @classmethod
    def _from_epoch(cls, value):
        if math.isnan(value) or math.isinf(value):
            raise DateverLogicError("Invalid epoch date: %r" % value)
        if value < 0:
            raise DateverLogicError("Epoch date cannot be negative: %r" % value)

        try:
            return _epoch_datetime + timedelta(seconds=int(value // 1000))
        except OverflowError as e:
            raise DateverLogicError("Invalid epoch date: %r" % value,
                                    cause=e) from e

    @classmethod
    def _from_string(cls, value):
        from datever.parser import parse
        from datever.nodes import IdentityExpr, brief_node_types
        from datever.anchors import resolve_anchors

        expr = parse(value)
        if not (isinstance(expr, IdentityExpr)
                and isinstance(expr.value, brief_node_types)):
            raise DateverParseError("Not a date version: %r" % value)

        lower, _ = resolve_anchors(expr.value)
        return lower.version._value

    @classmethod
    def from_components(cls, year, month=1, day=1, hour=0, minute=0, second=0):
        """Create a date version from calendar components.

        Raises:
            `DateverLogicError`: If the components are not a valid date.
        """
        try:
            dt = datetime(year, month, day, hour, minute, second,
                          tzinfo=timezone.utc)
        except (TypeError, ValueError) as e:
            raise DateverLogicError(
                "Invalid date %r: %s"
                % ((year, month, day, hour, minute, second), str(e)),
                cause=e) from e

        return cls(dt)

    def component(self, component):
        """Get a calendar component.

        Args:
            component (str): One of "year", "month", "day", "hour", "minute",
                "second". Months are numbered from 1.

        Returns:
            int: The component value, in UTC.
        """
        self._check_component(component)
        return getattr(self._value, component)

    def increment(self, component, amount=1):
        """Get a later date version.

        Args:
            component (str): Component to increment, eg "month".
            amount (int): Number of units, must be greater than zero.

        Returns:
            `DateVersion`: New date version.
        """
        self._check_component(component)
        self._check_amount(amount)
        return DateVersion(shift_datetime(self._value, component, amount))

    def decrement(self, component, amount=1):
        """Get an earlier date version.

        See `increment`.
        """
        self._check_component(component)
        self._check_amount(amount)
        return DateVersion(shift_datetime(self._value, component, -amount))

    def add_duration(self, duration):
        """Add a duration.

        Components are applied one at a time, year first and second last.

        Args:
            duration: `DateVersionDuration`, or anything that can construct
                one.

        Returns:
            `DateVersion`: New date version.
        """
        return DateVersion(self._apply_duration(duration, 1))

    def minus_duration(self, duration):
        """Subtract a duration.

        Components are applied in the same order as `add_duration`.
        """
        return DateVersion(self._apply_duration(duration, -1))

    def diff(self, other):
        """Get the difference between two date versions.

        Returns:
            `DateVersionDiff`: Signed difference of each calendar component
            (self minus other), and the distance in milliseconds.
        """
        other = DateVersion(other)
        components = [
            getattr(self._value, x) - getattr(other._value, x)
            for x in component_names
        ]
        return DateVersionDiff(*components,
                               milliseconds=self.to_epoch() - other.to_epoch())

    def compare(self, other):
        """Compare to another date version.

        Returns:
            int: -1, 0 or 1.
        """
        other = DateVersion(other)
        return cmp(self._value, other._value)

    def to_epoch(self):
        """Milliseconds since the Unix epoch."""
        return (self._value - _epoch_datetime) // _one_millisecond

    def to_datetime(self):
        """Get the UTC-aware `datetime`."""
        return self._value

    def slugify(self):
        """Get the fixed width "YYYYMMDDhhmmss" form.

        Slugs sort in the same order as the date versions they come from, and
        can be parsed back.
        """
        return self._value.strftime("%Y%m%d%H%M%S")

    def to_iso_string(self):
        return self._value.strftime("%Y-%m-%dT%H:%M:%SZ")

    def _apply_duration(self, duration, sign):
        duration = DateVersionDuration(duration)
        dt = self._value

        for component, amount in zip(component_names, duration):
            if amount:
                dt = shift_datetime(dt, component, sign * amount)
        return dt

    @staticmethod
    def _check_component(component):
        if component not in component_names:
            raise DateverLogicError("Invalid component name %r" % component)

    @staticmethod
    def _check_amount(amount):
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise DateverTypeError("Amount must be an integer, got %r"
                                   % amount)
        if amount <= 0:
            raise DateverLogicError("Amount must be greater than zero.")

    def __str__(self):
        return self.to_iso_string()

    def __eq__(self, other):
        if not isinstance(other, DateVersion):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, DateVersion):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash(self._value)


DateVersion.EPOCH = DateVersion(0)
