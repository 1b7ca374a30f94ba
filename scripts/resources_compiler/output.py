"""Output path derivation, stale-file cleanup, and document writing."""

import os

from ._common import HEADER_EXTENSION, SOURCE_EXTENSION, error, info


def output_paths(stem):
    """Return (header_path, source_path) for an output stem.

    An extension already present on ``stem`` is replaced, not kept.
    """
    base, _ = os.path.splitext(os.fspath(stem))
    return base + HEADER_EXTENSION, base + SOURCE_EXTENSION


def remove_stale_outputs(paths):
    """Delete any of ``paths`` that already exist."""
    for path in paths:
        if os.path.exists(path):
            info(f"output file exists: we are going to delete it: {path}")
            os.remove(path)


def write_document(document, path):
    """Write ``document`` to ``path``, replacing its content. Returns the byte count."""
    # surrogateescape writes undecodable file-name bytes from argv back verbatim
    data = document.encode("utf-8", errors="surrogateescape")
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError:
        error(f"can't open file for write operation: {path}")
        raise
    info(f"file generated: '{path}', file size: {len(data)}")
    return len(data)
