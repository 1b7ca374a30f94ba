"""resources_compiler: embed binary files into a C++ resources lookup.

Reads each source file, renders its bytes as a constexpr array, and writes a
header/source pair exposing resources::manager::get(name).

Usage:
    python scripts/resources_compiler --sources=logo.png,vert.spv --output=gen/resources

Requires: pip install numpy
"""
