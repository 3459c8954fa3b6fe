from hexhog.utils import render_dump
from hexhog.utils.dump import iter_dump_lines


def test_dump_lines_match_hexdump_layout() -> None:
    lines = list(iter_dump_lines(b"ABC\x00" + bytes(range(0x10, 0x1C)) + b"xyz"))

    assert lines[0] == (
        "00000000  41 42 43 00 10 11 12 13  14 15 16 17 18 19 1A 1B  |ABC.............|"
    )
    assert lines[1].startswith("00000010  78 79 7A ")
    assert lines[1].endswith(" |xyz|")
    assert lines[-1] == "00000013"


def test_empty_dump_has_only_end_offset() -> None:
    assert render_dump(b"") == "00000000\n"


def test_plain_dump_has_no_escape_codes() -> None:
    text = render_dump(b"hello")

    assert "\x1b[" not in text
    assert "|hello|" in text


def test_colour_dump_keeps_content() -> None:
    text = render_dump(b"hello", color=True)

    assert "\x1b[" in text
    assert "68" in text
