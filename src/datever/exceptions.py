# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


"""
Exceptions.
"""
from collections import namedtuple


ParserLocation = namedtuple("ParserLocation", ["offset", "line", "column"])


class DateverError(Exception):
    """Base-class datever error."""
    def __init__(self, value=None, cause=None):
        self.value = value
        self.cause = cause

    def __str__(self):
        return str(self.value)


class DateverParseError(DateverError):
    """Text could not be parsed, or parsed into the wrong kind of expression.

    When raised from the grammar front-end, `expected`, `found` and `location`
    describe the failure point.
    """
    def __init__(self, value=None, cause=None, expected=None, found=None,
                 location=None):
        super(DateverParseError, self).__init__(value, cause)
        self.expected = expected
        self.found = found
        self.location = location


class DateverLogicError(DateverError):
    """A structurally valid value violates a domain invariant."""
    pass


class DateverTypeError(DateverError, TypeError):
    """A value of unsupported type was given to a constructor."""
    pass


class ConfigurationError(DateverError):
    """A misconfiguration error."""
    pass
