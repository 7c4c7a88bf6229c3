# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


"""
Grammar for date version expressions.

Some example expressions (see `DateVersionRange` for their meaning):

    "2020-03-01T12:30:00Z", "20200301123000"    exact instants
    "2020", "2020-03", "2020-03-01"             implicit-precision ranges
    "2020-03-01T12", "2020-03-01T12:30"
    ">2020", ">=2020-06", "<2021", "<=2021-01"  half-bounded ranges
    ">=2020 <2021", ">=2020,<2021"              fully bounded ranges
    "2020..2022"                                inclusive span
    "2020+P1M", "2020-06-P1Y2DT12H"             duration-relative ranges
    "P1Y2M3DT4H5M6S"                            duration
    "2020 || >=2022-06"                         OR of several ranges

Parse actions build immutable nodes (see `datever.nodes`) rather than
mutating parser state, so the single module level grammar is shared by all
callers.
"""
from datever import nodes
from datever.config import config
from datever.exceptions import DateverParseError, DateverTypeError, \
    ParserLocation
from datever.utils.logging_ import log_duration
from functools import lru_cache
import pyparsing as pp


def _ints(match, names):
    return [int(match.group(x)) for x in names]


def _optional_ints(match, names):
    values = []
    for name in names:
        value = match.group(name)
        values.append(None if value is None else int(value))
    return values


class _DateverGrammar(object):
    def __init__(self):
        def regex(pattern):
            return pp.Regex(pattern, as_match=True)

        # brief values
        instant = regex(
            r"(?P<Y>\d{4})-(?P<M>\d{2})-(?P<D>\d{2})"
            r"T(?P<h>\d{2}):(?P<m>\d{2}):(?P<s>\d{2})Z?")
        compact_instant = regex(
            r"(?P<Y>\d{4})(?P<M>\d{2})(?P<D>\d{2})"
            r"(?P<h>\d{2})(?P<m>\d{2})(?P<s>\d{2})(?!\d)")
        minute = regex(
            r"(?P<Y>\d{4})-(?P<M>\d{2})-(?P<D>\d{2})T(?P<h>\d{2}):(?P<m>\d{2})")
        hour = regex(r"(?P<Y>\d{4})-(?P<M>\d{2})-(?P<D>\d{2})T(?P<h>\d{2})")
        day = regex(r"(?P<Y>\d{4})-(?P<M>\d{2})-(?P<D>\d{2})")
        month = regex(r"(?P<Y>\d{4})-(?P<M>\d{2})")
        year = regex(r"(?P<Y>\d{4})(?!\d)")

        instant.set_parse_action(self._action(self._act_version))
        compact_instant.set_parse_action(self._action(self._act_version))
        minute.set_parse_action(self._action(self._act_minute))
        hour.set_parse_action(self._action(self._act_hour))
        day.set_parse_action(self._action(self._act_day))
        month.set_parse_action(self._action(self._act_month))
        year.set_parse_action(self._action(self._act_year))

        brief = (instant ^ compact_instant ^ minute ^ hour ^ day ^ month
                 ^ year).set_name("date version")

        # duration, eg P1Y2M3DT4H5M6S
        duration = regex(
            r"P(?:(?P<Y>\d+)Y)?(?:(?P<M>\d+)M)?(?:(?P<D>\d+)D)?"
            r"(?:T(?=\d)(?:(?P<h>\d+)H)?(?:(?P<m>\d+)M)?(?:(?P<s>\d+)S)?)?")
        duration.add_condition(self._has_duration_component,
                               message="Expected duration component")
        duration.add_parse_action(self._action(self._act_duration))
        duration.set_name("duration")

        # detailed values
        lower_op = pp.one_of([">", ">="])
        upper_op = pp.one_of(["<", "<="])
        lower_bound = (lower_op + brief).set_parse_action(
            self._action(self._act_lower_bound))
        upper_bound = (upper_op + brief).set_parse_action(
            self._action(self._act_upper_bound))
        bound = (lower_bound + pp.Opt(pp.Suppress(",")) + upper_bound) \
            .set_parse_action(self._action(self._act_bound))
        inclusive_bound = (brief + pp.Suppress("..") + brief) \
            .set_parse_action(self._action(self._act_inclusive_bound))
        duration_bound = (brief + pp.one_of(["+", "-"]) + duration) \
            .set_parse_action(self._action(self._act_duration_bound))

        value = (bound | lower_bound | upper_bound | inclusive_bound
                 | duration_bound | brief | duration)

        or_op = pp.Suppress(pp.one_of(["||", "|"]))
        self.expression = (value + pp.ZeroOrMore(or_op + value)) \
            .set_parse_action(self._action(self._act_expression))

    def parse(self, s):
        return self.expression.parse_string(s, parse_all=True)[0]

    @staticmethod
    def _action(fn):
        def fn_(s, i, tokens):
            result = fn(tokens)
            printer = config.debug_printer("parsing")
            if printer:
                label = fn.__name__.replace("_act_", "")
                printer("%-16s%s", label + ':', s)
                printer("%s%s", (16 + i) * ' ', '^')
                printer("%s%r", 16 * ' ', result)
            return result

        fn_.__name__ = fn.__name__
        return fn_

    @staticmethod
    def _has_duration_component(tokens):
        return any(x is not None for x in tokens[0].groupdict().values())

    @staticmethod
    def _act_version(tokens):
        return nodes.VersionNode(*_ints(tokens[0], "YMDhms"))

    @staticmethod
    def _act_minute(tokens):
        return nodes.MinuteRangeNode(*_ints(tokens[0], "YMDhm"))

    @staticmethod
    def _act_hour(tokens):
        return nodes.HourRangeNode(*_ints(tokens[0], "YMDh"))

    @staticmethod
    def _act_day(tokens):
        return nodes.DayRangeNode(*_ints(tokens[0], "YMD"))

    @staticmethod
    def _act_month(tokens):
        return nodes.MonthRangeNode(*_ints(tokens[0], "YM"))

    @staticmethod
    def _act_year(tokens):
        return nodes.YearRangeNode(*_ints(tokens[0], "Y"))

    @staticmethod
    def _act_duration(tokens):
        return nodes.DurationNode(*_optional_ints(tokens[0], "YMDhms"))

    @staticmethod
    def _act_lower_bound(tokens):
        return nodes.LowerBoundedRangeNode(tokens[1], nodes.AnchorOp(tokens[0]))

    @staticmethod
    def _act_upper_bound(tokens):
        return nodes.UpperBoundedRangeNode(tokens[1], nodes.AnchorOp(tokens[0]))

    @staticmethod
    def _act_bound(tokens):
        return nodes.FullyBoundedRangeNode(tokens[0], tokens[1])

    @staticmethod
    def _act_inclusive_bound(tokens):
        return nodes.FullyBoundedRangeNode(
            nodes.LowerBoundedRangeNode(tokens[0], nodes.AnchorOp.GE),
            nodes.UpperBoundedRangeNode(tokens[1], nodes.AnchorOp.LE))

    @staticmethod
    def _act_duration_bound(tokens):
        return nodes.DurationRangeNode(tokens[0], tokens[2],
                                       nodes.DurationSide(tokens[1]))

    @staticmethod
    def _act_expression(tokens):
        if len(tokens) == 1:
            return nodes.IdentityExpr(tokens[0])
        return nodes.MultiOperandExpr(nodes.ExprOperator.OR, tuple(tokens))


_grammar = _DateverGrammar()
_parse_fn = None


def _parse(s):
    printer = config.debug_printer("parsing")

    try:
        with log_duration(printer, "Parsed expression in %s seconds"):
            return _grammar.parse(s)
    except pp.ParseBaseException as e:
        msg = e.msg
        if msg.startswith("Expected "):
            expected = [msg[len("Expected "):]]
        else:
            expected = [msg]

        found = e.pstr[e.loc] if e.loc < len(e.pstr) else None
        location = ParserLocation(offset=e.loc, line=e.lineno, column=e.col)

        raise DateverParseError(
            "Syntax error in date version expression %r at column %d: %s"
            % (s, e.col, msg),
            cause=e, expected=expected, found=found, location=location
        ) from e


def parse(s):
    """Parse a date version expression.

    Args:
        s (str): Expression text.

    Returns:
        `nodes.IdentityExpr` for a single value, or `nodes.MultiOperandExpr`
        for several values OR'd together.

    Raises:
        `DateverParseError`: The text is not a valid expression.
    """
    global _parse_fn

    if not isinstance(s, str):
        raise DateverTypeError("Expected expression string, got %s"
                               % type(s).__name__)

    if _parse_fn is None:
        size = config.parse_cache_size
        _parse_fn = lru_cache(maxsize=size)(_parse) if size else _parse

    return _parse_fn(s)


def clear_cache():
    """Drop memoized parse results, and re-read the cache size setting on the
    next parse."""
    global _parse_fn
    _parse_fn = None
