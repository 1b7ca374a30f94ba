"""Per-file compilation: one array literal and one map assignment per resource."""

from dataclasses import dataclass

from ._common import LARGE_FILE_THRESHOLD, info, warn
from .render import identifier_for_path, render_byte_array
from .templates import REGISTRATION


@dataclass
class ResourceEntry:
    identifier: str  # lookup key
    symbol: str  # C++ array name, equal to identifier unless renamed
    source: str
    array_literal: str
    registration: str
    size: int


def build_registration(identifier, symbol=None):
    """Return the map assignment storing array ``symbol`` under key ``identifier``."""
    return REGISTRATION.format(identifier=identifier, symbol=symbol or identifier)


def build_entry(path, symbol=None):
    """Compile one resource file, or return None when the file is empty.

    ``symbol`` overrides the C++ array name; the lookup key is always the
    sanitized file name. Read errors are not handled here, they abort the run.
    """
    with open(path, "rb") as f:
        data = f.read()

    size = len(data)
    if size == 0:
        warn(f"empty file skipped: {path}")
        return None
    if size > LARGE_FILE_THRESHOLD:
        warn(f"we are going to add file: '{path}', with size: {size} bytes to the resources!")

    identifier = identifier_for_path(path)
    symbol = symbol or identifier
    array_literal = render_byte_array(symbol, data)
    registration = build_registration(identifier, symbol)

    increase = len(array_literal) / size
    info(
        f"file: '{path}' added, size in binary: {size}, "
        f"size in source: {len(array_literal)} bytes, increase: {increase:.2f}x"
    )
    return ResourceEntry(identifier, symbol, str(path), array_literal, registration, size)


def unique_symbol(identifier, taken):
    """Return ``identifier``, or ``identifier_N`` with the first free N."""
    if identifier not in taken:
        return identifier
    n = 1
    while f"{identifier}_{n}" in taken:
        n += 1
    return f"{identifier}_{n}"


def compile_resources(paths):
    """Build entries for ``paths`` in order, skipping empty files.

    Files sharing a lookup key are all kept under distinct array names; the
    later assignment wins in the generated map.
    """
    entries = []
    keys = {}
    symbols = set()
    source_size = 0
    for path in paths:
        identifier = identifier_for_path(path)
        entry = build_entry(path, unique_symbol(identifier, symbols))
        if entry is None:
            continue
        if identifier in keys:
            warn(
                f"duplicate resource name '{identifier}': "
                f"'{entry.source}' overrides '{keys[identifier]}'"
            )
        keys[identifier] = entry.source
        symbols.add(entry.symbol)
        source_size += len(entry.array_literal) + len(entry.registration)
        entries.append(entry)

    info(f"{len(entries)} resource(s) compiled, {source_size} bytes of generated source")
    return entries
