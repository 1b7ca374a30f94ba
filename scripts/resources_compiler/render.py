"""Identifier sanitizing and byte-array literal rendering.

A rendered array looks like:

    constexpr const unsigned char hello_txt[2] = {
    72,105};

Every row holds BYTES_PER_LINE values; the line break comes before the first
value of a row, so the opening brace is always followed by a newline.
"""

import os
import sys

try:
    import numpy as np
except ImportError:
    sys.exit("Missing dependency: numpy, install with: pip install numpy")

from ._common import BYTES_PER_LINE, warn
from .templates import ARRAY_CLOSE, ARRAY_OPEN, ARRAY_SEPARATOR

# "0," .. "255," looked up by byte value
_BYTE_TOKENS = [f"{value}{ARRAY_SEPARATOR}" for value in range(256)]


def sanitize_identifier(file_name: str) -> str:
    """Turn a file name like ``logo.png`` into ``logo_png``."""
    return file_name.replace(".", "_")


def identifier_for_path(path) -> str:
    return sanitize_identifier(os.path.basename(os.fspath(path)))


def render_byte_array(identifier: str, data: bytes) -> str:
    """Render ``data`` as a sized ``constexpr`` array literal named ``identifier``."""
    # uint8 view: values >= 128 stay positive whatever produced the buffer
    values = np.frombuffer(data, dtype=np.uint8)

    parts = [ARRAY_OPEN.format(identifier=identifier, length=values.size)]
    for start in range(0, values.size, BYTES_PER_LINE):
        row = values[start : start + BYTES_PER_LINE].tolist()
        parts.append("\n")
        parts.extend(map(_BYTE_TOKENS.__getitem__, row))
    text = "".join(parts)

    last_separator = text.rfind(ARRAY_SEPARATOR)
    if last_separator == -1:
        warn("end token is not found, so it looks like an error")
        return text + ARRAY_CLOSE
    return text[:last_separator] + ARRAY_CLOSE
