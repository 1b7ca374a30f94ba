"""Shared constants, console colors, and log helpers for resources_compiler."""

import os
import sys
from datetime import datetime

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

BYTES_PER_LINE = 32
LARGE_FILE_THRESHOLD = 16 * 1024 * 1024

HEADER_EXTENSION = ".h"
SOURCE_EXTENSION = ".cpp"

EXIT_OK = 0
EXIT_NO_ARGUMENTS = -1
EXIT_NO_OUTPUT = -3
EXIT_IO_FAILURE = -255

# ---------------------------------------------------------------------------
# ANSI colors (disabled on Windows without VT support)
# ---------------------------------------------------------------------------

try:
    os.system("")  # enable VT100 on Windows 10+
    YELLOW = "\033[1m\033[33m"
    CYAN = "\033[1m\033[36m"
    RED = "\033[1m\033[31m"
    RESET = "\033[0m"
except Exception:
    YELLOW = CYAN = RED = RESET = ""

LEVEL_COLORS = {
    "info": CYAN,
    "warning": YELLOW,
    "error": RED,
}


def log(level, message):
    """Print a timestamped, color-tagged diagnostic line."""
    stamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    color = LEVEL_COLORS.get(level, "")
    print(f"[{stamp}] {color}[{level}]{RESET} {message}")
    sys.stdout.flush()


def info(message):
    log("info", message)


def warn(message):
    log("warning", message)


def error(message):
    log("error", message)
