"""Text model of a code editor: contents, cursor, per-line tokens, history and zoom."""

from __future__ import annotations

import enum
import hashlib

from pairedit.changes import ChangeManager
from pairedit.config import ConfigParams
from pairedit.lexer import Lexer
from pairedit.tokens import Token

CHANGE_SAVE_TIME = 1000
TAB_SPACE = 4
DEFAULT_ZOOM = 100


class LastRemoveKey(enum.Enum):
    """Which key removed text last: Backspace or Delete."""

    BACK = enum.auto()
    DEL = enum.auto()


def _text_hash(text: str) -> bytes:
    return hashlib.sha256(text.encode("latin-1", errors="replace")).digest()


class CodeDocument:
    """An open source file: its text, cursor, tokens of each line and edit history."""

    def __init__(self, file_name: str = "", text: str = "",
                 config: ConfigParams | None = None) -> None:
        self.file_name = file_name
        self.config = config if config is not None else ConfigParams()
        self.last_remove_key = LastRemoveKey.BACK
        self.current_zoom = DEFAULT_ZOOM
        self.highlighting_start = 0
        self._text = ""
        self._cursor = 0
        self._lexer = Lexer()
        self._tokens: list[list[Token]] = [[]]
        self._lines_count = 1
        self._code = ""
        self._style = self.config.ide_type
        self._begin_text_state = b""
        self._change_manager = ChangeManager(text)
        if text:
            self.set_text(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        """Cursor position as an offset into the text."""
        return self._cursor

    @cursor.setter
    def cursor(self, position: int) -> None:
        self._cursor = max(0, min(position, len(self._text)))

    @property
    def cursor_line(self) -> int:
        """Zero-based number of the line the cursor is on."""
        return self._text.count("\n", 0, self._cursor)

    @property
    def tokens(self) -> list[list[Token]]:
        """Tokens of every line, in line order."""
        return [list(line) for line in self._tokens]

    @property
    def begin_text_state(self) -> bytes:
        return self._begin_text_state

    @begin_text_state.setter
    def begin_text_state(self, state: bytes) -> None:
        self._begin_text_state = bytes(state)

    @property
    def changed_file_info(self) -> tuple[str, str]:
        return self._text, self.file_name

    @property
    def history(self) -> ChangeManager:
        return self._change_manager

    def line_count(self) -> int:
        return self._text.count("\n") + 1

    def _line(self, number: int) -> str:
        lines = self._text.split("\n")
        return lines[number] if 0 <= number < len(lines) else ""

    def set_text(self, text: str) -> None:
        """Replace the whole text; the cursor goes to the start and all lines are re-tokenized."""
        self._text = text
        self._cursor = 0
        self._lexer.clear()
        self._tokens = [self._lexer.lexical_analysis(line) for line in text.split("\n")]
        self._lines_count = self.line_count()
        self.highlighting_start = 0
        self._code = text
        self._style = self.config.ide_type

    def insert_text(self, text: str) -> None:
        """Insert *text* at the cursor and move the cursor past it."""
        position = self._cursor
        self._text = self._text[:position] + text + self._text[position:]
        self._cursor = position + len(text)
        self._text_changed()

    def _text_changed(self) -> None:
        if self._code != self._text or self._style != self.config.ide_type:
            self._style = self.config.ide_type
            self._code = self._text
            self.handle_line_change(self.cursor_line)

    def handle_line_change(self, last_line_with_change: int) -> None:
        """Re-tokenize the lines touched by an edit that ended on *last_line_with_change*."""
        self._lexer.clear()
        change_start = last_line_with_change
        current = self.line_count()
        difference = current - self._lines_count
        self._lines_count = current

        if not self._lexer.was_running:
            last_line_with_change += difference

        if difference >= 0:
            self._handle_lines_addition(change_start, last_line_with_change, difference)
        else:
            self._handle_lines_deletion(last_line_with_change, difference)

    def _handle_lines_addition(self, change_start: int, last: int, difference: int) -> None:
        if difference > 0:
            change_start = max(last - difference, 0)
            if change_start < len(self._tokens):
                del self._tokens[change_start]
        self.highlighting_start = change_start - 1 if change_start > 0 else change_start
        for number in range(change_start, last + 1):
            line_tokens = self._lexer.lexical_analysis(self._line(number))
            if difference or number >= len(self._tokens):
                self._tokens.insert(number, line_tokens)
            else:
                self._tokens[number] = line_tokens

    def _handle_lines_deletion(self, last: int, difference: int) -> None:
        removed = -difference
        line_tokens = self._lexer.lexical_analysis(self._line(last))
        self.highlighting_start = last
        if last < len(self._tokens):
            self._tokens[last] = line_tokens
        else:
            self._tokens.append(line_tokens)
        del self._tokens[last + 1:last + 1 + removed]

    def handle_lines_swap(self, first_line: int, second_line: int) -> None:
        """Exchange the tokens of two lines after the lines themselves were swapped."""
        tokens = self._tokens
        tokens[first_line], tokens[second_line] = tokens[second_line], tokens[first_line]

    def save_state_in_history(self) -> None:
        self._change_manager.write_change(self._text)

    def undo(self) -> None:
        """Go back one change in the history and put the cursor where it was made."""
        self.set_text(self._change_manager.undo())
        self.cursor = self._change_manager.cursor_pos_prev()

    def redo(self) -> None:
        """Re-apply the next change in the history and put the cursor where it was made."""
        self.set_text(self._change_manager.redo())
        self.cursor = self._change_manager.cursor_pos_next()

    def zoom(self, val: int) -> None:
        self.current_zoom += val

    def set_zoom(self, zoom_val: int) -> None:
        self.zoom(zoom_val - self.current_zoom)

    def is_changed(self) -> bool:
        """True if the text differs from the state recorded by set_begin_text_state."""
        return self._begin_text_state != _text_hash(self._text)

    def set_begin_text_state(self) -> None:
        self._begin_text_state = _text_hash(self._text)

    def line_number_area_width(self, char_width: int) -> int:
        """Width of the line counter: one character per digit of the line count."""
        digits = len(str(max(1, self.line_count())))
        return char_width * digits