# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


"""
Resolution of expression nodes into range anchors.

Every value node denotes a contiguous span of time. `resolve_anchors` turns a
node into the pair of anchors - lower and upper - that bound exactly that
span:

    "2020"            [2020-01-01T00:00:00Z, 2020-12-31T23:59:59Z]
    ">2020"           (2020-12-31T23:59:59Z, ...
    ">=2020-06"       [2020-06-01T00:00:00Z, ...
    "<2020"           ..., 2020-01-01T00:00:00Z)
    "<=2020"          ..., 2020-12-31T23:59:59Z]
    ">2020 <2022"     (2020-01-01T00:00:00Z, 2022-12-31T23:59:59Z)
    "2020+P1M"        [2020-01-01T00:00:00Z, 2021-01-31T23:59:59Z]
    "2020-P1M"        [2019-12-01T00:00:00Z, 2020-12-31T23:59:59Z]

Here '[' and ']' are closed anchors, '(' and ')' open ones.
"""
from datever import nodes
from datever._util import _Common
from datever.config import config
from datever.duration import DateVersionDuration
from datever.exceptions import DateverParseError, DateverTypeError
from datever.version import DateVersion
from collections import namedtuple
from collections.abc import Mapping
import calendar


class DateVersionRangeAnchor(_Common):
    """One end of a date version range.

    A closed anchor includes its version. An open anchor excludes it - the
    effective bound is then one second further inside the range.
    """
    __slots__ = ("_version", "_open")

    def __init__(self, version, open=False):
        self._version = DateVersion(version)
        self._open = bool(open)

    @classmethod
    def coerce(cls, value):
        """Create an anchor from an anchor-like value.

        Args:
            value: One of:
                - `DateVersionRangeAnchor`: returned unchanged;
                - mapping with a "version" key and optional "open" key;
                - anything `DateVersion` accepts, giving a closed anchor.
        """
        if isinstance(value, DateVersionRangeAnchor):
            return value
        elif isinstance(value, Mapping):
            if "version" not in value:
                raise DateverTypeError("Anchor mapping has no 'version' key")
            return cls(value["version"], value.get("open", False))
        else:
            return cls(value)

    @property
    def version(self):
        return self._version

    @property
    def open(self):
        return self._open

    def lower_edge(self):
        """Get the first version included when this is a lower anchor."""
        if self._open:
            return self._version.increment("second")
        return self._version

    def upper_edge(self):
        """Get the last version included when this is an upper anchor."""
        if self._open:
            return self._version.decrement("second")
        return self._version

    def __str__(self):
        s = str(self._version)
        return ("%s (open)" % s) if self._open else s

    def __eq__(self, other):
        return (isinstance(other, DateVersionRangeAnchor)
                and self._version == other._version
                and self._open == other._open)

    def __hash__(self):
        return hash((self._version, self._open))


RangeAnchors = namedtuple("RangeAnchors", ["lower", "upper"])


_brief_range_units = {
    nodes.YearRangeNode: "year",
    nodes.MonthRangeNode: "month",
    nodes.DayRangeNode: "day",
    nodes.HourRangeNode: "hour",
    nodes.MinuteRangeNode: "minute"
}


def _resolve_version(node, minimum):
    anchor = DateVersionRangeAnchor(DateVersion.from_components(*node))
    return RangeAnchors(anchor, anchor)


def _last_components(node):
    fields = node._asdict()
    year = fields["Y"]
    month = fields.get("M", 12)
    day = fields.get("D", calendar.monthrange(year, month)[1])
    return (year, month, day, fields.get("h", 23), fields.get("m", 59), 59)


def _resolve_brief_range(node, minimum):
    start = DateVersion.from_components(*node)

    if minimum:
        unit = _brief_range_units[type(node)]
        upper = DateVersionRangeAnchor(start.increment(unit), open=True)
    else:
        # last second of the unit, without stepping into the next one
        upper = DateVersionRangeAnchor(
            DateVersion.from_components(*_last_components(node)))

    return RangeAnchors(DateVersionRangeAnchor(start), upper)


def _resolve_lower_bounded(node, minimum):
    limits = resolve_anchors(node.bound, minimum)

    if node.anchor.open:
        # ">2020" starts right after the last second of 2020
        edge = limits.upper
        lower = DateVersionRangeAnchor(edge.version, open=not edge.open)
    else:
        lower = limits.lower

    return RangeAnchors(lower, None)


def _resolve_upper_bounded(node, minimum):
    limits = resolve_anchors(node.bound, minimum)

    if node.anchor.open:
        # "<2020" ends right before the first second of 2020
        edge = limits.lower
        upper = DateVersionRangeAnchor(edge.version, open=not edge.open)
    else:
        upper = limits.upper

    return RangeAnchors(None, upper)


def _resolve_fully_bounded(node, minimum):
    # each operand contributes its own outer edge, the operator only decides
    # whether that edge is open
    lower = DateVersionRangeAnchor(
        resolve_anchors(node.lower.bound).lower.version,
        open=node.lower.anchor.open)
    upper = DateVersionRangeAnchor(
        resolve_anchors(node.upper.bound).upper.version,
        open=node.upper.anchor.open)
    return RangeAnchors(lower, upper)


def _resolve_duration_range(node, minimum):
    limits = resolve_anchors(node.anchor_expr, minimum)
    duration = DateVersionDuration.from_node(node.duration)

    if node.side == nodes.DurationSide.LOWER:
        version = limits.upper.upper_edge().add_duration(duration)
        return RangeAnchors(limits.lower, DateVersionRangeAnchor(version))
    else:
        version = limits.lower.lower_edge().minus_duration(duration)
        return RangeAnchors(DateVersionRangeAnchor(version), limits.upper)


_resolvers = {
    nodes.VersionNode: _resolve_version,
    nodes.YearRangeNode: _resolve_brief_range,
    nodes.MonthRangeNode: _resolve_brief_range,
    nodes.DayRangeNode: _resolve_brief_range,
    nodes.HourRangeNode: _resolve_brief_range,
    nodes.MinuteRangeNode: _resolve_brief_range,
    nodes.LowerBoundedRangeNode: _resolve_lower_bounded,
    nodes.UpperBoundedRangeNode: _resolve_upper_bounded,
    nodes.FullyBoundedRangeNode: _resolve_fully_bounded,
    nodes.DurationRangeNode: _resolve_duration_range
}


def resolve_anchors(node, minimum=False):
    """Get the anchors that bound an expression node.

    Args:
        node: Value node, or an `IdentityExpr` wrapping one.
        minimum (bool): If True, implicit-precision ranges resolve their
            upper anchor to the start of the next unit, open, rather than to
            the last second of the unit, closed. Both forms bound the same
            versions.

    Returns:
        `RangeAnchors`: Lower and upper anchor. One of them is None for a
        half-bounded range.

    Raises:
        `DateverParseError`: If the node does not denote a range (eg, a
            duration or an OR expression).
        `DateverLogicError`: If the node holds an invalid date.
    """
    if isinstance(node, nodes.IdentityExpr):
        node = node.value

    resolver = _resolvers.get(type(node))
    if resolver is None:
        raise DateverParseError("Expression is not a date version range: %r"
                                % (node,))

    anchors = resolver(node, minimum)

    printer = config.debug_printer("resolve")
    if printer:
        printer("%-24s%s .. %s", type(node).__name__,
                anchors.lower or "-inf", anchors.upper or "+inf")

    return anchors
