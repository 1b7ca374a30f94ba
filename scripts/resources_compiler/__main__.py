"""CLI entry point for resources_compiler package.

Invoke as:  python scripts/resources_compiler --sources=a.png,b.txt --output=gen/resources
"""

# Bootstrap: when run as `python scripts/resources_compiler` (directory path),
# re-execute through runpy so the package machinery resolves relative imports
# correctly and without DeprecationWarning.
if __name__ == "__main__" and not __package__:
    import os
    import runpy
    import sys

    _scripts_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if _scripts_dir not in sys.path:
        sys.path.insert(0, _scripts_dir)
    runpy.run_module("resources_compiler", run_name="__main__", alter_sys=True)
    raise SystemExit(0)  # unreachable, run_module already calls sys.exit()

import argparse
import os
import sys

from ._common import (
    EXIT_IO_FAILURE,
    EXIT_NO_ARGUMENTS,
    EXIT_NO_OUTPUT,
    EXIT_OK,
    RESET,
    YELLOW,
    error,
    warn,
)
from .assemble import assemble
from .entries import compile_resources
from .output import output_paths, remove_stale_outputs, write_document
from .templates import BANNER, HELP_TEXT


def build_parser():
    parser = argparse.ArgumentParser(
        prog="resources_compiler",
        description="Compile binary files into a C++ resources lookup.",
        add_help=False,
        allow_abbrev=False,
    )
    # a bare flag takes its const, so main() warns instead of argparse exiting
    parser.add_argument(
        "--sources",
        action="append",
        nargs="?",
        default=[],
        help="Comma-separated resource files, no spaces (may be repeated)",
    )
    parser.add_argument(
        "--output",
        nargs="?",
        const="",
        help="Output path without extension; .h and .cpp are derived from it",
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show help and exit")
    return parser


def print_help():
    print(f"{YELLOW}{BANNER}{RESET}")
    print(HELP_TEXT)


def split_sources(values):
    """Flatten ``--sources`` values, dropping the empty items between commas."""
    return [item for value in values if value for item in value.split(",") if item]


def generate(sources, output_stem):
    """Compile ``sources`` into ``<output_stem>.h`` and ``<output_stem>.cpp``.

    Existing outputs are deleted before any source is read. OSError
    propagates to the caller.
    """
    header_path, source_path = output_paths(output_stem)
    remove_stale_outputs([header_path, source_path])

    entries = compile_resources(sources)
    header, source = assemble(entries, os.path.basename(header_path))

    write_document(header, header_path)
    write_document(source, source_path)
    return header_path, source_path


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    if not argv:
        error("not enough params")
        print_help()
        return EXIT_NO_ARGUMENTS

    args, unknown = build_parser().parse_known_args(argv)
    if args.help:
        print_help()
        return EXIT_OK

    for argument in unknown:
        warn(f"unknown option: {argument}")
    if None in args.sources:
        warn("option --sources given without a value, ignored")
    if args.output == "":
        warn("option --output given without a value")

    sources = split_sources(args.sources)
    if not sources:
        warn("no source files specified, an empty project will be generated")

    if not args.output:
        error("no output file specified")
        print_help()
        return EXIT_NO_OUTPUT

    try:
        generate(sources, args.output)
    except (OSError, UnicodeError) as e:
        error(f"exception during processing: {e}")
        return EXIT_IO_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
