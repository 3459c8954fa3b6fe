"""
User configuration: colour theme, glyph charset and editor options.

The configuration lives in a TOML file. A malformed value only affects
its own field, which keeps the default; the problem is collected as a
message and loading carries on.
"""

import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Final, List, Mapping, Optional, Tuple

import toml

from .core.errors import ConfigError
from .utils.hex_utils import ByteType, byte_type

logger = logging.getLogger(__name__)

COLOR_NAMES: Final[Dict[str, int]] = {
    'reset': -1,
    'black': 0,
    'red': 1,
    'green': 2,
    'yellow': 3,
    'blue': 4,
    'magenta': 5,
    'cyan': 6,
    'gray': 7,
    'grey': 7,
    'darkgray': 8,
    'darkgrey': 8,
    'lightred': 9,
    'lightgreen': 10,
    'lightyellow': 11,
    'lightblue': 12,
    'lightmagenta': 13,
    'lightcyan': 14,
    'white': 15,
}


@dataclass
class ColorScheme:
    """Curses colour numbers, -1 meaning the terminal default."""

    null: int = COLOR_NAMES['darkgray']
    ascii_printable: int = COLOR_NAMES['blue']
    ascii_whitespace: int = COLOR_NAMES['cyan']
    ascii_other: int = COLOR_NAMES['yellow']
    non_ascii: int = COLOR_NAMES['green']
    accent: int = COLOR_NAMES['blue']
    primary: int = COLOR_NAMES['white']
    border: int = COLOR_NAMES['white']
    select: int = COLOR_NAMES['darkgray']
    background: int = COLOR_NAMES['reset']

    def color_for(self, value: int) -> int:
        """Colour used to draw a byte value."""

        return getattr(self, byte_type(value).value)


@dataclass
class Charset:
    """Glyphs shown in the text column for bytes without a printable form."""

    null: str = '.'
    ascii_whitespace: str = '·'
    ascii_other: str = '°'
    non_ascii: str = '×'

    def get_char(self, value: int) -> str:
        kind = byte_type(value)

        if kind is ByteType.ASCII_PRINTABLE or value == 0x20:
            return chr(value)

        return getattr(self, kind.value)


@dataclass
class EditorOptions:
    track_appends: bool = False
    history_limit: Optional[int] = None


@dataclass
class Config:
    colorscheme: ColorScheme = field(default_factory=ColorScheme)
    charset: Charset = field(default_factory=Charset)
    editor: EditorOptions = field(default_factory=EditorOptions)


def default_config_path() -> str:
    """Path of the user config file, honouring ``XDG_CONFIG_HOME``."""

    config_home = os.environ.get('XDG_CONFIG_HOME') or os.path.expanduser('~/.config')
    return os.path.join(config_home, 'hexhog', 'config.toml')


def rgb_to_xterm(r: int, g: int, b: int) -> int:
    """Convert an RGB colour to the nearest xterm-256 colour index."""

    if r == g == b:
        if r < 8:
            return 16
        if r > 248:
            return 231
        return round(((r - 8) / 247) * 24) + 232

    color_index = 16
    color_index += 36 * round(r / 255 * 5)
    color_index += 6 * round(g / 255 * 5)
    color_index += round(b / 255 * 5)
    return int(color_index)


def parse_color(value: Any) -> int:
    """
    Parse a colour value from the config file.

    Accepted forms are a colour name, a ``#rrggbb`` string, an integer
    index 0-255 (also as a string) and an ``[r, g, b]`` array.

    Raises:
        ConfigError: If the value is not a valid colour
    """

    if isinstance(value, bool):
        raise ConfigError("Invalid color format")

    if isinstance(value, int):
        if 0 <= value <= 255:
            return value
        raise ConfigError("Invalid color index")

    if isinstance(value, str):
        return _parse_color_string(value)

    if isinstance(value, list):
        if len(value) == 3 and all(
            isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value
        ):
            return rgb_to_xterm(*value)
        raise ConfigError("Invalid color format")

    raise ConfigError("Invalid color format")


def _parse_color_string(value: str) -> int:
    text = value.strip()

    if text.startswith('#'):
        digits = text[1:]
        if len(digits) != 6:
            raise ConfigError("Invalid color name")
        try:
            r, g, b = int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
        except ValueError:
            raise ConfigError("Invalid color name") from None
        return rgb_to_xterm(r, g, b)

    if text.isdigit():
        return parse_color(int(text))

    name = ''.join(c for c in text.lower() if c not in ' -_')
    if name not in COLOR_NAMES:
        raise ConfigError("Invalid color name")

    return COLOR_NAMES[name]


def parse_glyph(value: Any) -> str:
    """Parse a charset glyph, which must be exactly one character."""

    if not isinstance(value, str):
        raise ConfigError("must be a string")

    if not value:
        raise ConfigError("cannot be empty")

    if len(value) != 1:
        raise ConfigError("must be a single character")

    return value


def _apply_table(target: Any, table: Any, section: str, parser, errors: List[str]) -> None:
    if not isinstance(table, Mapping):
        errors.append(f"Section '{section}' must be a table")
        return

    for f in fields(target):
        if f.name not in table:
            continue

        try:
            setattr(target, f.name, parser(table[f.name]))
        except ConfigError as e:
            errors.append(f"Invalid value for field '{section}.{f.name}' - {e}")


def _apply_editor(options: EditorOptions, table: Any, errors: List[str]) -> None:
    if not isinstance(table, Mapping):
        errors.append("Section 'editor' must be a table")
        return

    if 'track_appends' in table:
        value = table['track_appends']
        if isinstance(value, bool):
            options.track_appends = value
        else:
            errors.append("Invalid value for field 'editor.track_appends' - must be true or false")

    if 'history_limit' in table:
        value = table['history_limit']
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            options.history_limit = value
        else:
            errors.append("Invalid value for field 'editor.history_limit' - must be a positive integer")


def parse_config(values: Mapping[str, Any]) -> Tuple[Config, List[str]]:
    """Build a Config from already-parsed TOML values."""

    config = Config()
    errors: List[str] = []

    if 'theme' in values:
        _apply_table(config.colorscheme, values['theme'], 'theme', parse_color, errors)

    if 'charset' in values:
        _apply_table(config.charset, values['charset'], 'charset', parse_glyph, errors)

    if 'editor' in values:
        _apply_editor(config.editor, values['editor'], errors)

    return config, errors


def load_config(path: Optional[str] = None) -> Tuple[Config, List[str]]:
    """
    Load the configuration file.

    Args:
        path: Config file path, defaults to ``default_config_path()``

    Returns:
        The configuration and a list of problems found. A missing file is
        not a problem; an unreadable one gives the default configuration.
    """

    path = path or default_config_path()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            values = toml.load(f)
    except FileNotFoundError:
        logger.debug("No config file at %s, using defaults", path)
        return Config(), []
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Could not read config %s: %s", path, e)
        return Config(), [f"Could not read config {path}: {e}"]

    config, errors = parse_config(values)
    for error in errors:
        logger.warning("%s: %s", path, error)

    return config, errors
