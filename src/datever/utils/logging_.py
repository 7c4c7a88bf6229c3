# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


from contextlib import contextmanager
import logging
import time


logger = logging.getLogger("datever")


def get_debug_printer(enabled=True):
    return _Printer(enabled, logger.debug)


class _Printer(object):
    def __init__(self, enabled=True, printer_function=None):
        self.printer_function = printer_function if enabled else None

    def __call__(self, msg, *nargs):
        if self.printer_function:
            if nargs:
                msg = msg % nargs
            self.printer_function(msg)

    def __bool__(self):
        return bool(self.printer_function)


@contextmanager
def log_duration(printer, msg):
    """Report how long the body took, through `printer`.

    `msg` must contain a single '%s', which receives the elapsed seconds.
    """
    t1 = time.time()
    yield None

    t2 = time.time()
    secs = t2 - t1
    printer(msg, str(secs))
