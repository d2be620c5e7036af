"""Key press handling of the code editor: each key combination maps to a handler."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, replace
from typing import ClassVar, Optional

from pairedit.document import CodeDocument, LastRemoveKey
from pairedit.tokens import State

SINGLE_LINE_COMMENT = "//"
COMMENT_BLOCK_START = "/*"
COMMENT_BLOCK_END = "*/"

MAX_ZOOM_TO_GROW = 150
MIN_ZOOM_TO_SHRINK = 50


class Key(enum.Enum):
    """Keys the editor reacts to; everything else is OTHER."""

    BRACKET_LEFT = enum.auto()
    BRACE_LEFT = enum.auto()
    PAREN_LEFT = enum.auto()
    APOSTROPHE = enum.auto()
    QUOTE_DBL = enum.auto()
    SLASH = enum.auto()
    ASTERISK = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    SPACE = enum.auto()
    ENTER = enum.auto()
    RETURN = enum.auto()
    BACKSPACE = enum.auto()
    DELETE = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    D = enum.auto()
    V = enum.auto()
    Y = enum.auto()
    Z = enum.auto()
    OTHER = enum.auto()


class Modifier(enum.Flag):
    """Keyboard modifiers held while a key is pressed."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    META = enum.auto()
    KEYPAD = enum.auto()


_KEY_TEXT = {
    Key.BRACKET_LEFT: "[",
    Key.BRACE_LEFT: "{",
    Key.PAREN_LEFT: "(",
    Key.APOSTROPHE: "'",
    Key.QUOTE_DBL: '"',
    Key.SLASH: "/",
    Key.ASTERISK: "*",
    Key.PLUS: "+",
    Key.MINUS: "-",
    Key.SPACE: " ",
    Key.D: "d",
    Key.V: "v",
    Key.Y: "y",
    Key.Z: "z",
}

_ENTER_KEYS = frozenset({Key.ENTER, Key.RETURN})
_MOVE_KEYS = frozenset({Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT})


@dataclass(frozen=True)
class KeyEvent:
    """A key press.

    *text* is the text the key produces (for a paste, the pasted text); when left
    out, the key's usual character is used. *selection* is the selected range of
    the document at the time of the press, if any.
    """

    key: Key
    modifiers: Modifier = Modifier.NONE
    text: Optional[str] = None
    selection: Optional[tuple[int, int]] = None

    @property
    def typed_text(self) -> str:
        return self.text if self.text is not None else _KEY_TEXT.get(self.key, "")


def is_not_enter_key(event: KeyEvent) -> bool:
    return event.key not in _ENTER_KEYS


def is_up_down_key(event: KeyEvent) -> bool:
    return event.key in (Key.UP, Key.DOWN)


def autotab(text: str, position: int) -> str:
    """Indentation for *position*: one tab per brace opened and not yet closed before it."""
    before = text[:position]
    return "\t" * max(before.count("{") - before.count("}"), 0)


def is_inside_bracket(text: str, position: int) -> bool:
    """True if the characters around *position* are "{" and "}"."""
    if position == len(text):
        return False
    previous = max(position - 1, 0)
    following = previous + 1
    if previous >= len(text) or following >= len(text):
        return False
    return text[previous] == "{" and text[following] == "}"


def _line_start(text: str, position: int) -> int:
    return text.rfind("\n", 0, position) + 1


def _offset(lines: list[str], line: int, column: int) -> int:
    return sum(len(part) + 1 for part in lines[:line]) + column


def _move_vertical(document: CodeDocument, delta: int) -> None:
    text = document.text
    lines = text.split("\n")
    target = document.cursor_line + delta
    if not 0 <= target < len(lines):
        return
    column = document.cursor - _line_start(text, document.cursor)
    document.cursor = _offset(lines, target, min(column, len(lines[target])))


def _delete(document: CodeDocument, start: int, end: int) -> None:
    text = document.text
    start, end = max(start, 0), min(end, len(text))
    if start >= end:
        document.cursor = start
        return
    document.set_text(text[:start] + text[end:])
    document.cursor = start


def _plain_key_press(document: CodeDocument, event: KeyEvent) -> None:
    """What the text area does by itself with a key press."""
    key = event.key
    if key in _MOVE_KEYS:
        if key is Key.UP:
            _move_vertical(document, -1)
        elif key is Key.DOWN:
            _move_vertical(document, 1)
        elif key is Key.LEFT:
            document.cursor = document.cursor - 1
        else:
            document.cursor = document.cursor + 1
        return

    had_selection = False
    if event.selection is not None:
        start, end = sorted(event.selection)
        had_selection = start != end
        _delete(document, start, end)

    if key is Key.BACKSPACE:
        if not had_selection and document.cursor > 0:
            _delete(document, document.cursor - 1, document.cursor)
    elif key is Key.DELETE:
        if not had_selection:
            _delete(document, document.cursor, document.cursor + 1)
    elif key in _ENTER_KEYS:
        document.insert_text("\n")
    elif Modifier.CONTROL in event.modifiers:
        if key is Key.V and event.text:
            document.insert_text(event.text)
    elif event.typed_text:
        document.insert_text(event.typed_text)


class EventHandler(abc.ABC):
    """Reaction of the editor to one key combination."""

    slash_pressed: ClassVar[bool] = False

    @abc.abstractmethod
    def __call__(self, document: CodeDocument, event: KeyEvent) -> object:
        """Apply the key press to *document*."""

    @staticmethod
    def _insert_symbol(document: CodeDocument, event: KeyEvent, symbol: str) -> None:
        _plain_key_press(document, event)
        document.insert_text(symbol)
        document.cursor = document.cursor - len(symbol)


class DefaultHandler(EventHandler):
    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        _plain_key_press(document, event)


class _ClosingSymbolHandler(EventHandler):
    closing: ClassVar[str] = ""

    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        self._insert_symbol(document, event, self.closing)


class BraceLeftHandler(_ClosingSymbolHandler):
    closing = "}"


class BracketLeftHandler(_ClosingSymbolHandler):
    closing = "]"


class ApostropheHandler(_ClosingSymbolHandler):
    closing = "'"


class QuoteDblHandler(_ClosingSymbolHandler):
    closing = '"'


class ParenLeftHandler(_ClosingSymbolHandler):
    closing = ")"


class ShiftEnterHandler(EventHandler):
    def __call__(self, document: CodeDocument, event: KeyEvent) -> object:
        # The modifiers are masked away, so the press is handled as a plain Enter.
        plain = replace(event, modifiers=event.modifiers & Modifier.META & Modifier.KEYPAD)
        return handle_key(document, plain)


class EnterHandler(EventHandler):
    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        document.save_state_in_history()
        if is_inside_bracket(document.text, document.cursor):
            document.insert_text("\n\n")
            document.insert_text(autotab(document.text, document.cursor)[:-1])
            _move_vertical(document, -1)
            document.insert_text(autotab(document.text, document.cursor))
            return
        _plain_key_press(document, event)
        document.insert_text(autotab(document.text, document.cursor))


class CtrlPlusHandler(EventHandler):
    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        if document.current_zoom <= MAX_ZOOM_TO_GROW:
            document.zoom(1)


class CtrlMinusHandler(EventHandler):
    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        if document.current_zoom >= MIN_ZOOM_TO_SHRINK:
            document.zoom(-1)


class CtrlZHandler(EventHandler):
    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        document.undo()


class CtrlYHandler(EventHandler):
    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        document.redo()


class SlashHandler(EventHandler):
    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        EventHandler.slash_pressed = True
        _plain_key_press(document, event)


class AsteriskHandler(EventHandler):
    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        if EventHandler.slash_pressed:
            self._insert_symbol(document, event, COMMENT_BLOCK_END)
        else:
            _plain_key_press(document, event)
        EventHandler.slash_pressed = False


class SendLexemHandler(EventHandler):
    """Collects the keywords under the cursor, to be looked up in the reference."""

    def __call__(self, document: CodeDocument, event: KeyEvent) -> list[str]:
        position = document.cursor
        found = []
        for line_tokens in document.tokens:
            if position >= len(line_tokens):
                continue
            token = line_tokens[position]
            if token.type is State.KW and token.begin <= position <= token.end:
                found.append(token.name)
        return found


class CtrlUpArrowHandler(EventHandler):
    """Swaps the cursor line with the line above it."""

    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        line = document.cursor_line
        if line <= 0:
            return
        document.handle_lines_swap(line, line - 1)
        lines = document.text.split("\n")
        lines[line], lines[line - 1] = lines[line - 1], lines[line]
        document.set_text("\n".join(lines))
        document.cursor = _offset(lines, line - 1, len(lines[line - 1]))


class CtrlDownArrowHandler(EventHandler):
    """Swaps the cursor line with the line below it."""

    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        line = document.cursor_line
        if line >= document.line_count() - 1:
            return
        document.handle_lines_swap(line, line + 1)
        lines = document.text.split("\n")
        lines[line], lines[line + 1] = lines[line + 1], lines[line]
        document.set_text("\n".join(lines))
        column = min(len(lines[line]), len(lines[line + 1]))
        document.cursor = _offset(lines, line + 1, column)


class CtrlSlashHandler(EventHandler):
    """Toggles a block comment around the selection, or a line comment without one."""

    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        if event.selection is not None and event.selection[0] != event.selection[1]:
            start, finish = sorted(event.selection)
            text = document.text
            begin = text[start:start + len(COMMENT_BLOCK_START)]
            end = text[finish - len(COMMENT_BLOCK_START):finish]
            if begin == COMMENT_BLOCK_START and end == COMMENT_BLOCK_END:
                self._remove_multiline_comment(document, start, finish)
            else:
                self._insert_multiline_comment(document, start, finish)
            return

        line_start = _line_start(document.text, document.cursor)
        document.cursor = line_start
        prefix = document.text[line_start:line_start + len(COMMENT_BLOCK_START)]
        if prefix == SINGLE_LINE_COMMENT:
            _delete(document, line_start, line_start + len(SINGLE_LINE_COMMENT))
        else:
            document.insert_text(SINGLE_LINE_COMMENT)

    @staticmethod
    def _insert_multiline_comment(document: CodeDocument, start: int, end: int) -> None:
        document.cursor = start
        document.insert_text(COMMENT_BLOCK_START)
        document.cursor = end + len(COMMENT_BLOCK_START)
        document.insert_text(COMMENT_BLOCK_END)

    @staticmethod
    def _remove_multiline_comment(document: CodeDocument, start: int, end: int) -> None:
        _delete(document, start, start + len(COMMENT_BLOCK_START))
        tail = end - len(COMMENT_BLOCK_START) - len(COMMENT_BLOCK_END)
        _delete(document, tail, end - len(COMMENT_BLOCK_END))


class SaveChangeInHistoryHandler(EventHandler):
    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        _plain_key_press(document, event)
        document.save_state_in_history()


class CtrlVHandler(EventHandler):
    """Pastes and returns the 1-based first and last lines the paste touched."""

    def __call__(self, document: CodeDocument, event: KeyEvent) -> tuple[int, int]:
        line_start = document.cursor_line + 1
        _plain_key_press(document, event)
        document.save_state_in_history()
        return line_start, document.cursor_line + 1


class RemoveKeyHandler(EventHandler):
    def __call__(self, document: CodeDocument, event: KeyEvent) -> None:
        _plain_key_press(document, event)
        document.last_remove_key = (
            LastRemoveKey.BACK if event.key is Key.BACKSPACE else LastRemoveKey.DEL
        )


_NO_MODIFIER = {
    Key.BRACKET_LEFT: BracketLeftHandler,
    Key.ENTER: EnterHandler,
    Key.RETURN: EnterHandler,
    Key.APOSTROPHE: ApostropheHandler,
    Key.SLASH: SlashHandler,
    Key.BACKSPACE: RemoveKeyHandler,
    Key.DELETE: RemoveKeyHandler,
}

_SHIFT = {
    Key.BRACE_LEFT: BraceLeftHandler,
    Key.PAREN_LEFT: ParenLeftHandler,
    Key.QUOTE_DBL: QuoteDblHandler,
    Key.ASTERISK: AsteriskHandler,
    Key.ENTER: ShiftEnterHandler,
    Key.RETURN: ShiftEnterHandler,
    Key.SPACE: SaveChangeInHistoryHandler,
}

_CONTROL = {
    Key.PLUS: CtrlPlusHandler,
    Key.MINUS: CtrlMinusHandler,
    Key.Z: CtrlZHandler,
    Key.Y: CtrlYHandler,
    Key.SLASH: CtrlSlashHandler,
    Key.D: SendLexemHandler,
    Key.V: CtrlVHandler,
    Key.UP: CtrlUpArrowHandler,
    Key.DOWN: CtrlDownArrowHandler,
}

_KEYPAD = {
    Key.SLASH: SlashHandler,
    Key.ASTERISK: AsteriskHandler,
}


def get_event(event: KeyEvent) -> EventHandler:
    """Choose the handler for *event*; Shift wins over Control, Control over Keypad."""
    if Modifier.SHIFT in event.modifiers:
        table = _SHIFT
    elif Modifier.CONTROL in event.modifiers:
        table = _CONTROL
    elif Modifier.KEYPAD in event.modifiers:
        table = _KEYPAD
    else:
        table = _NO_MODIFIER
    return table.get(event.key, DefaultHandler)()


def handle_key(document: CodeDocument, event: KeyEvent) -> object:
    """Apply *event* to *document* and return what its handler reports, if anything."""
    return get_event(event)(document, event)