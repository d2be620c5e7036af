# pairedit

This is the text-handling core of a small C++ code editor. It does not need a GUI
toolkit. Everything works on plain strings and cursor offsets, so any front end can
drive it.

## Modules

- `pairedit.tokens`: the lexer states (`State`), the frozen `Token` record
  (`name`, `type`, `begin`, `end`) and the C/C++ keyword, operator and whitespace
  tables. You query them with `is_keyword`, `is_operator` and `is_space`.
- `pairedit.lexer`: a state-machine lexer for one line of code. Use `Lexer` with
  `lexical_analysis`, `clear` and `tokens`, or call `tokenize` for a one-off. Each token
  carries the state it ended in: `KW`, `ID`, `NUM`, `FNUM`, `OPER`, `LIT`, `COM` or `UNDEF`.
- `pairedit.changes`: `ChangeManager` is an undo/redo history. Each `IntegralChange`
  keeps only the part of the text that differs between two states.
  - A new change drops any changes that were undone and never redone.
  - When the history grows past 200 entries, the oldest entry is trimmed.
  - `undo` never reverts the first recorded change.
  - `cursor_pos_prev` and `cursor_pos_next` give the position where the change
    just undone or redone was made.
- `pairedit.config`: `ConfigParams` and `TextColors` hold font settings and the colour
  theme.
  - `set_ide_type("WHITE")` or `set_ide_type("BLUE")` selects the light theme. Any
    other value selects the dark theme.
  - `set_font_size` parses its value from text. Text that is not a number gives 0.
- `pairedit.comments`: line comments with `**bold**` and `_italic_` markup.
  - `wrap_selection` puts markers around a selection.
  - `render_comment` removes the markers. It returns a `RenderedComment` with the text
    to show, the `SpecificText` ranges for bold and italic, and the editable text with
    empty markers (`****`, `__`) removed.
  - `classify_submission` tells an empty comment from a non-empty one.
- `pairedit.filemanager`: `FileManager` reads, writes and creates files. It also
  creates and detects a project's `<dir name>.psproj` file, and checks whether a
  header has a `.cpp` file of the same name next to it. Failures raise
  `FileOpeningFailure`. An empty file name raises `IncorrectUserInput`.
- `pairedit.document`: `CodeDocument` is an editor buffer. It holds the text, a cursor
  and the tokens of each line, which are re-lexed on edits. It also provides:
  - undo/redo through its `ChangeManager`;
  - zoom;
  - change detection against a SHA-256 snapshot (`set_begin_text_state`, `is_changed`);
  - the width of the line-number area.
- `pairedit.keyevents`: describe a key press with `KeyEvent`, built from `Key`,
  `Modifier`, an optional text and an optional selection. `get_event` chooses the
  `EventHandler` for it, and `handle_key` applies it to a document. The handlers cover:
  - auto-closing of `[`, `{`, `(`, `'` and `"`;
  - auto-indent on Enter (`autotab`, `is_inside_bracket`);
  - `/*` completion;
  - Ctrl+/ comment toggling;
  - Ctrl+Up and Ctrl+Down line swapping;
  - Ctrl+Z and Ctrl+Y undo/redo;
  - Ctrl+Plus and Ctrl+Minus zoom;
  - paste.

  Two handlers return a value:
  - Ctrl+D returns the keywords found under the cursor.
  - Ctrl+V returns the first and last lines that the paste touched.
- `pairedit.annotations`: `CommentTracker` holds `CommentAnchor` objects, which are
  comments attached to 1-based lines.
  - `add` with an empty text removes the comment from that line.
  - `lines_count_updated` removes comments on deleted lines and moves the comments
    below an edit. Call it when the line count changes.
  - `to_records` exports the comments as plain dicts.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from pairedit.lexer import tokenize
from pairedit.changes import ChangeManager

for token in tokenize("int x = 42;"):
    print(token.name, token.type, token.begin, token.end)

history = ChangeManager("hello")
history.write_change("hello world")
history.write_change("hello world!")
print(history.undo())   # "hello world"
print(history.redo())   # "hello world!"
```

## What it does not do

The package has no window, screen or command-line tool. The caller draws the text,
paints the highlighting and delivers key presses. It stores nothing except the files
written by `FileManager`. Comments are kept in memory and handed out by
`CommentTracker.to_records`. Saving them anywhere else is left to the caller.