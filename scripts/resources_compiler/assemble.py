"""Assemble the generated header and source documents."""

from .templates import (
    BANNER,
    HEADER_BOTTOM,
    HEADER_TOP,
    SOURCE_BOTTOM,
    SOURCE_INCLUDE,
    SOURCE_MIDDLE,
    SOURCE_TOP,
)


def assemble_header() -> str:
    """Return the header document; it never depends on the resource set."""
    return "".join([HEADER_TOP, BANNER, HEADER_BOTTOM])


def assemble_source(entries, header_name: str) -> str:
    """Return the source document for ``entries``.

    All arrays come before ``manager::manager()`` and all registrations sit
    inside it, both in the order of ``entries``.
    """
    parts = [SOURCE_INCLUDE.format(header_name=header_name), BANNER, SOURCE_TOP]
    parts.extend(entry.array_literal for entry in entries)
    parts.append(SOURCE_MIDDLE)
    parts.extend(entry.registration for entry in entries)
    parts.append(SOURCE_BOTTOM)
    return "".join(parts)


def assemble(entries, header_name: str) -> tuple[str, str]:
    return assemble_header(), assemble_source(entries, header_name)
