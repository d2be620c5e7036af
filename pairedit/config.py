"""Editor appearance settings: font and colour scheme of the IDE."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

WHITE = "WHITE"
DARK = "DARK"

BASIC_LITERALS_COLOR = "#0080FF"
COMMENT_COLOR = "#009900"
STRINGS_COLOR = "#CD9D2C"
WAVE_UNDERLINE_COLOR = "#FF0000"

WHITE_CODE_TEXT_COLOR = "#000000"
WHITE_LINE_COUNTER_AREA_COLOR = "#C0C0C0"
DARK_CODE_TEXT_COLOR = "#FAF8F2"
DARK_LINE_COUNTER_AREA_COLOR = "#373A38"

_INTEGER = re.compile(r"\s*([+-]?[0-9]+)\s*")


def _to_int(text: str) -> int:
    """Parse a decimal integer the lenient way a settings string is read; 0 on failure."""
    match = _INTEGER.fullmatch(text)
    return int(match.group(1)) if match else 0


@dataclass
class TextColors:
    """Colours used to paint code, comments, literals and the line counter."""

    strings_color: Optional[str] = None
    basic_literals_color: Optional[str] = None
    comment_color: Optional[str] = None
    code_text_color: Optional[str] = None
    line_counter_area_color: Optional[str] = None
    wave_underline_color: Optional[str] = None


@dataclass
class ConfigParams:
    """Font family, font size and colour scheme of an editor."""

    text_colors: TextColors = field(default_factory=TextColors)
    font_style: str = ""
    ide_type: str = ""
    font_size: int = 0

    def set_font_size(self, font_size: str) -> None:
        """Set the size from its textual form; text that is not a number gives 0."""
        self.font_size = _to_int(font_size)

    def set_ide_type(self, ide_type: str) -> None:
        """Choose the colour scheme: "WHITE" or "BLUE" give the light one, anything else dark."""
        colors = self.text_colors
        colors.basic_literals_color = BASIC_LITERALS_COLOR
        colors.comment_color = COMMENT_COLOR
        colors.strings_color = STRINGS_COLOR
        colors.wave_underline_color = WAVE_UNDERLINE_COLOR

        if ide_type in (WHITE, "BLUE"):
            self.ide_type = WHITE
            colors.code_text_color = WHITE_CODE_TEXT_COLOR
            colors.line_counter_area_color = WHITE_LINE_COUNTER_AREA_COLOR
        else:
            self.ide_type = DARK
            colors.code_text_color = DARK_CODE_TEXT_COLOR
            colors.line_counter_area_color = DARK_LINE_COUNTER_AREA_COLOR

    def set_config_params(self, font_style: str, font_size: str, ide_type: str) -> None:
        """Apply font family, font size and colour scheme at once."""
        self.set_font_size(font_size)
        self.font_style = font_style
        self.set_ide_type(ide_type)