# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


"""
Date-based versioning.

A date version is an instant in UTC, to the second. Text expressions such as
"2020", ">=2020-06", "2020-01-01T12:00:00", "2020+P1M" or "<2021 || 2023"
denote either a single instant or a range of time, and the classes in this
package compare, intersect and test membership of them.
"""
from datever.utils._version import _datever_version
import sys
import os


__version__ = _datever_version
__license__ = "Apache-2.0"


module_root_path = __path__[0]  # noqa


def _init_logging():
    logging_conf = os.getenv("DATEVER_LOGGING_CONF")
    if logging_conf:
        import logging.config
        logging.config.fileConfig(logging_conf, disable_existing_loggers=False)
        return

    import logging

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)-8s %(message)s",
        datefmt="%X"
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    logger = logging.getLogger("datever")
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)


_init_logging()


from datever.exceptions import DateverError, DateverParseError, \
    DateverLogicError, DateverTypeError  # noqa: E402
from datever.duration import DateVersionDuration  # noqa: E402
from datever.version import DateVersion  # noqa: E402
from datever.range_ import DateVersionRange, DateVersionRangeAnchor  # noqa: E402
from datever.spec import DateVersionSpec  # noqa: E402


__all__ = (
    "DateVersion",
    "DateVersionDuration",
    "DateVersionRange",
    "DateVersionRangeAnchor",
    "DateVersionSpec",
    "DateverError",
    "DateverParseError",
    "DateverLogicError",
    "DateverTypeError",
)
