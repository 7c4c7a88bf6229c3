# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


from datever._util import component_names, component_fields
from datever.exceptions import DateverLogicError, DateverParseError, \
    DateverTypeError
from collections import namedtuple
from collections.abc import Mapping


_designators = ("Y", "M", "D", "H", "M", "S")


def _node_data(node):
    return dict(
        (name, getattr(node, field))
        for name, field in zip(component_names, component_fields)
    )


class DateVersionDuration(namedtuple("DateVersionDuration", component_names)):
    """Calendar offset, eg "1 month and 3 hours".

    A duration has six non-negative integer components - year, month, day,
    hour, minute and second. Components are never normalized: a duration of
    70 minutes stays 70 minutes, and is not the same duration as 1 hour and
    10 minutes (although adding either to a date version gives the same
    result).

    A duration can be created from keyword arguments, a mapping of component
    name to amount (missing components are zero), or an ISO 8601 style
    duration string:

        >>> DateVersionDuration(month=1, hour=3)
        DateVersionDuration('P1MT3H')
        >>> DateVersionDuration({"minute": 70})
        DateVersionDuration('PT70M')
        >>> DateVersionDuration("P1Y2DT12H")
        DateVersionDuration('P1Y2DT12H')
    """
    __slots__ = ()

    def __new__(cls, value=None, **components):
        if value is not None and components:
            raise DateverTypeError("Give a duration value or component "
                                   "keywords, not both")

        if isinstance(value, DateVersionDuration):
            return value
        elif isinstance(value, Mapping):
            data = dict(value)
        elif isinstance(value, str):
            data = cls._parse(value)
        elif value is None:
            data = components
        else:
            raise DateverTypeError("Invalid value type for a date version "
                                   "duration: %s" % type(value).__name__)

        unknown = set(data) - set(component_names)
        if unknown:
            raise DateverLogicError("Invalid duration component name(s): %s"
                                    % ", ".join(sorted(unknown)))

        amounts = []
        for name in component_names:
            amount = data.get(name)
            if amount is None:
                amount = 0
            elif isinstance(amount, bool) or not isinstance(amount, int):
                raise DateverTypeError("Duration component %r must be an "
                                       "integer, got %r" % (name, amount))
            elif amount < 0:
                raise DateverLogicError("Duration component %r cannot be "
                                        "negative" % name)
            amounts.append(amount)

        return super(DateVersionDuration, cls).__new__(cls, *amounts)

    @classmethod
    def from_node(cls, node):
        """Create a duration from a `nodes.DurationNode`."""
        return cls(_node_data(node))

    @classmethod
    def _parse(cls, s):
        from datever.parser import parse
        from datever.nodes import IdentityExpr, DurationNode

        expr = parse(s)
        if not (isinstance(expr, IdentityExpr)
                and isinstance(expr.value, DurationNode)):
            raise DateverParseError("Not a date version duration: %r" % s)

        return _node_data(expr.value)

    def as_dict(self):
        return dict(zip(component_names, self))

    def __bool__(self):
        return any(self)

    def __str__(self):
        date_part = ''.join(
            "%d%s" % (amount, designator)
            for amount, designator in zip(self[:3], _designators[:3])
            if amount
        )
        time_part = ''.join(
            "%d%s" % (amount, designator)
            for amount, designator in zip(self[3:], _designators[3:])
            if amount
        )

        if not (date_part or time_part):
            return "PT0S"
        if time_part:
            return "P%sT%s" % (date_part, time_part)
        return "P" + date_part

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, str(self))
