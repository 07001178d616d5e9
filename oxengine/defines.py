"""Build-wide switches and platform detection."""

from __future__ import annotations

import enum
import sys

# The engine is built as a debug version.
DEBUG_ENABLED = True
ASSERTIONS_ENABLED = True

_UNIX_PREFIXES = ("linux", "freebsd", "openbsd", "netbsd", "sunos", "aix", "cygwin")


class Platform(enum.IntEnum):
    """Operating system the application runs on."""

    WINDOWS32 = 0
    WINDOWS64 = 1
    LINUX = 2
    UNIX = 3
    MAC = 4


def detect_platform() -> Platform | None:
    """Return the platform of the running interpreter, or None if unknown.

    Linux is reported as a generic Unix because the Unix check comes first.
    """
    name = sys.platform
    if name == "win32":
        return Platform.WINDOWS32
    if name == "darwin":
        return Platform.MAC
    if name.startswith(_UNIX_PREFIXES):
        return Platform.UNIX
    return None