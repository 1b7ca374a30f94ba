import re

import numpy as np
import pytest

from resources_compiler.render import (
    identifier_for_path,
    render_byte_array,
    sanitize_identifier,
)

ARRAY_RE = re.compile(
    r"^constexpr const unsigned char (\w+)\[(\d+)\] = \{(.*)\};\n\n$", re.DOTALL
)


def parse_array(text):
    """Return (name, declared_length, values) from a rendered array."""
    match = ARRAY_RE.match(text)
    assert match, text[:200]
    body = match.group(3).replace("\n", "")
    values = [int(v) for v in body.split(",")] if body else []
    return match.group(1), int(match.group(2)), values


@pytest.mark.parametrize(
    "name, expected",
    [
        ("logo.png", "logo_png"),
        ("a.b.c", "a_b_c"),
        ("Shader.Vert.SPV", "Shader_Vert_SPV"),
        ("no_dots", "no_dots"),
        ("", ""),
    ],
)
def test_sanitize_identifier(name, expected):
    assert sanitize_identifier(name) == expected


def test_sanitize_keeps_length_and_drops_dots():
    name = "archive.tar.gz"
    result = sanitize_identifier(name)
    assert "." not in result
    assert len(result) == len(name)


def test_identifier_for_path_uses_base_name(tmp_path):
    assert identifier_for_path(tmp_path / "assets" / "font.ttf") == "font_ttf"
    assert identifier_for_path("some.dir/hello.txt") == "hello_txt"


def test_render_hello():
    assert render_byte_array("hello_txt", b"Hi") == (
        "constexpr const unsigned char hello_txt[2] = {\n72,105};\n\n"
    )


def test_render_high_bytes_are_unsigned():
    _, length, values = parse_array(render_byte_array("x", bytes([0, 127, 128, 200, 255])))
    assert length == 5
    assert values == [0, 127, 128, 200, 255]


@pytest.mark.parametrize("size", [1, 31, 32, 33, 64, 100, 1000])
def test_render_round_trip(size):
    data = np.random.default_rng(size).integers(0, 255, size, dtype=np.uint8, endpoint=True).tobytes()
    name, length, values = parse_array(render_byte_array("blob_bin", data))
    assert name == "blob_bin"
    assert length == size
    assert bytes(values) == data


def test_render_breaks_line_every_32_values():
    text = render_byte_array("x", bytes(range(70)))
    body = text[text.index("{") + 1 : text.index("}")]
    rows = body.split("\n")
    assert rows[0] == ""
    assert [len(row.rstrip(",").split(",")) for row in rows[1:]] == [32, 32, 6]
    assert not body.endswith(",")


def test_render_empty_applies_fallback(capsys):
    text = render_byte_array("empty", b"")
    assert text == "constexpr const unsigned char empty[0] = {};\n\n"
    assert "end token is not found" in capsys.readouterr().out
