"""Build version information."""

from __future__ import annotations

import platform
import sys

VERSION = "1.1.1"
GIT_COMMIT = "unknown"
GIT_BRANCH = "unknown"
BUILD_TIME = "unknown"


def python_version() -> str:
    return platform.python_version()


def platform_name() -> str:
    return f"{sys.platform}/{platform.machine() or 'unknown'}"
