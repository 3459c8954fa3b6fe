import pytest

from hexhog.config import (
    COLOR_NAMES,
    Charset,
    ColorScheme,
    Config,
    default_config_path,
    load_config,
    parse_color,
    parse_config,
    parse_glyph,
    rgb_to_xterm,
)
from hexhog.core import ConfigError


def write_config(tmp_path, text: str) -> str:
    path = tmp_path / "config.toml"
    path.write_text(text, encoding="utf-8")
    return str(path)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("red", 1),
        ("Dark Gray", 8),
        ("light-blue", 12),
        ("LIGHT_CYAN", 14),
        ("reset", -1),
        (42, 42),
        ("42", 42),
        ("#000000", 16),
        ("#ffffff", 231),
        ([255, 0, 0], 196),
    ],
)
def test_parse_color_accepts_valid_forms(value, expected) -> None:
    assert parse_color(value) == expected


@pytest.mark.parametrize("value", ["purple-ish", 256, -1, [1, 2], [1, 2, 300], True, 1.5, "#12345"])
def test_parse_color_rejects_invalid(value) -> None:
    with pytest.raises(ConfigError):
        parse_color(value)


def test_rgb_to_xterm_grayscale() -> None:
    assert rgb_to_xterm(128, 128, 128) == 244


def test_parse_glyph() -> None:
    assert parse_glyph("*") == "*"

    with pytest.raises(ConfigError, match="single character"):
        parse_glyph("ab")
    with pytest.raises(ConfigError, match="empty"):
        parse_glyph("")
    with pytest.raises(ConfigError, match="string"):
        parse_glyph(3)


def test_missing_file_gives_defaults(tmp_path) -> None:
    config, errors = load_config(str(tmp_path / "absent.toml"))

    assert config == Config()
    assert errors == []


def test_valid_file_overrides_fields(tmp_path) -> None:
    path = write_config(tmp_path, """
[theme]
null = "red"
select = 17

[charset]
non_ascii = "#"

[editor]
track_appends = true
history_limit = 500
""")

    config, errors = load_config(path)

    assert errors == []
    assert config.colorscheme.null == COLOR_NAMES["red"]
    assert config.colorscheme.select == 17
    assert config.colorscheme.accent == ColorScheme().accent
    assert config.charset.non_ascii == "#"
    assert config.editor.track_appends is True
    assert config.editor.history_limit == 500


def test_bad_field_falls_back_alone(tmp_path) -> None:
    path = write_config(tmp_path, """
[theme]
null = "not-a-colour"
accent = "cyan"

[charset]
null = "too long"
ascii_other = "!"
""")

    config, errors = load_config(path)

    assert config.colorscheme.null == ColorScheme().null
    assert config.colorscheme.accent == COLOR_NAMES["cyan"]
    assert config.charset.null == Charset().null
    assert config.charset.ascii_other == "!"
    assert len(errors) == 2
    assert "theme.null" in errors[0]
    assert "charset.null" in errors[1]


def test_unparseable_file_reports_error(tmp_path) -> None:
    path = write_config(tmp_path, "[theme\nnull = ")

    config, errors = load_config(path)

    assert config == Config()
    assert len(errors) == 1


def test_section_must_be_table() -> None:
    config, errors = parse_config({"theme": "red", "editor": {"history_limit": 0}})

    assert config == Config()
    assert len(errors) == 2


def test_default_path_uses_xdg(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert default_config_path() == str(tmp_path / "hexhog" / "config.toml")


def test_charset_and_color_lookup() -> None:
    charset = Charset()
    scheme = ColorScheme()

    assert charset.get_char(0x41) == "A"
    assert charset.get_char(0x20) == " "
    assert charset.get_char(0x00) == "."
    assert charset.get_char(0x0A) == "·"
    assert charset.get_char(0x7F) == "°"
    assert charset.get_char(0xC3) == "×"
    assert scheme.color_for(0x00) == scheme.null
    assert scheme.color_for(0xFF) == scheme.non_ascii
