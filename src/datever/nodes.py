# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


"""
Expression nodes produced by the parser.

Every node is an immutable namedtuple. Months are 1-based. The set of node
types is closed - `datever.anchors` keeps a resolver for each value node
type, and a node of any other type is rejected.
"""
from collections import namedtuple
from enum import Enum


class AnchorOp(Enum):
    """Comparison operator of a bounded range."""
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="

    @property
    def open(self):
        """True if the operator excludes its operand's boundary."""
        return self in (AnchorOp.GT, AnchorOp.LT)


class DurationSide(Enum):
    """Which side of a duration range the anchor expression sits on."""
    LOWER = "+"
    UPPER = "-"


class ExprOperator(Enum):
    OR = "OR"


# top level expressions

IdentityExpr = namedtuple("IdentityExpr", ["value"])

MultiOperandExpr = namedtuple("MultiOperandExpr", ["operator", "operands"])


# brief values

VersionNode = namedtuple("VersionNode", ["Y", "M", "D", "h", "m", "s"])

YearRangeNode = namedtuple("YearRangeNode", ["Y"])

MonthRangeNode = namedtuple("MonthRangeNode", ["Y", "M"])

DayRangeNode = namedtuple("DayRangeNode", ["Y", "M", "D"])

HourRangeNode = namedtuple("HourRangeNode", ["Y", "M", "D", "h"])

MinuteRangeNode = namedtuple("MinuteRangeNode", ["Y", "M", "D", "h", "m"])


class DurationNode(namedtuple("DurationNode", ["Y", "M", "D", "h", "m", "s"])):
    """Calendar duration. Missing components are None."""
    __slots__ = ()

    def __new__(cls, Y=None, M=None, D=None, h=None, m=None, s=None):
        return super(DurationNode, cls).__new__(cls, Y, M, D, h, m, s)


# detailed values

LowerBoundedRangeNode = namedtuple("LowerBoundedRangeNode", ["bound", "anchor"])

UpperBoundedRangeNode = namedtuple("UpperBoundedRangeNode", ["bound", "anchor"])

FullyBoundedRangeNode = namedtuple("FullyBoundedRangeNode", ["lower", "upper"])

DurationRangeNode = namedtuple("DurationRangeNode",
                               ["anchor_expr", "duration", "side"])


brief_node_types = (
    VersionNode,
    YearRangeNode,
    MonthRangeNode,
    DayRangeNode,
    HourRangeNode,
    MinuteRangeNode
)

detailed_node_types = (
    FullyBoundedRangeNode,
    LowerBoundedRangeNode,
    UpperBoundedRangeNode,
    DurationRangeNode
)

value_node_types = brief_node_types + detailed_node_types + (DurationNode,)
