"""Runtime assertions that log the failure and stop the application."""

from __future__ import annotations

import inspect

from oxengine.defines import ASSERTIONS_ENABLED
from oxengine.log import info, report_assertion


def abort_program() -> None:
    """Log the abort and exit with status 0."""
    info("aborting the application")
    raise SystemExit(0)


def ox_assert(condition: object, expression: str = "", message: str = "") -> None:
    """Abort the program, after logging where, if condition is false."""
    if not ASSERTIONS_ENABLED or condition:
        return
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is not None:
        file, line = caller.f_code.co_filename, caller.f_lineno
    else:
        file, line = "<unknown>", 0
    del frame, caller
    report_assertion(expression, message, file, line)
    abort_program()