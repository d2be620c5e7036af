"""Review comments attached to lines of a document, kept in step with line edits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from pairedit.comments import CommentSubmission, classify_submission
from pairedit.document import LastRemoveKey


@dataclass
class CommentAnchor:
    """A comment written by *user* on the 1-based *line*."""

    line: int
    text: str
    user: str

    @property
    def title(self) -> str:
        return f"Comment to {self.line} line by {self.user}"


class CommentTracker:
    """The comments of one document.

    Comments passed at construction are the ones loaded from storage; the first
    line count update after loading them only marks the loading as finished.
    """

    def __init__(self, comments: Iterable[CommentAnchor] = ()) -> None:
        self._anchors: list[CommentAnchor] = []
        for anchor in comments:
            self._anchors.append(CommentAnchor(anchor.line, anchor.text, anchor.user))
        self._loading = bool(self._anchors)

    @property
    def anchors(self) -> list[CommentAnchor]:
        """The comments in the order they were added."""
        return list(self._anchors)

    @property
    def loading(self) -> bool:
        return self._loading

    def __len__(self) -> int:
        return len(self._anchors)

    def __iter__(self):
        return iter(list(self._anchors))

    def find(self, line: int) -> Optional[CommentAnchor]:
        """The comment on *line*, or None."""
        return next((anchor for anchor in self._anchors if anchor.line == line), None)

    def add(self, line: int, text: str, user: str) -> Optional[CommentAnchor]:
        """Set the comment of *line*; an empty text removes it instead.

        Returns the comment now on the line, or None if it was removed.
        """
        if classify_submission(text) is CommentSubmission.EMPTY:
            self.remove(line)
            return None
        anchor = self.find(line)
        if anchor is not None:
            anchor.text = text
            anchor.user = user
            return anchor
        anchor = CommentAnchor(line, text, user)
        self._anchors.append(anchor)
        return anchor

    def remove(self, line: int) -> bool:
        """Remove the comment on *line*; True if there was one."""
        anchor = self.find(line)
        if anchor is None:
            return False
        self._anchors.remove(anchor)
        return True

    def lines_count_updated(self, current: int, previous: int, cursor_line: int,
                            cursor_at_block_start: bool,
                            last_remove_key: LastRemoveKey) -> None:
        """Follow a change of the document's line count from *previous* to *current*.

        *cursor_line* is the 1-based line of the cursor after the edit and
        *cursor_at_block_start* tells whether the character before the cursor
        starts its line. Comments on deleted lines disappear, those below the
        edit move with their lines.
        """
        if self._loading:
            self._loading = False
            return

        diff = current - previous
        start_line = cursor_line - diff if diff > 0 else cursor_line
        end_line = cursor_line if diff > 0 else cursor_line - diff

        self._remove_deleted(cursor_line, start_line, end_line, diff, last_remove_key)
        self._shift(diff, start_line, cursor_at_block_start)

    def _remove_deleted(self, cursor_line: int, start_line: int, end_line: int,
                        diff: int, last_remove_key: LastRemoveKey) -> None:
        if diff > 0:
            return

        def deleted(anchor: CommentAnchor) -> bool:
            if last_remove_key is LastRemoveKey.DEL:
                # Delete keeps the cursor in place, so only the cursor line's own
                # comment can go when the cursor stays on the start line.
                if cursor_line == start_line and cursor_line != anchor.line:
                    return False
                return start_line <= anchor.line <= end_line
            return start_line < anchor.line <= end_line

        self._anchors = [anchor for anchor in self._anchors if not deleted(anchor)]

    def _shift(self, diff: int, start_line: int, cursor_at_block_start: bool) -> None:
        for anchor in self._anchors:
            if anchor.line == start_line:
                if cursor_at_block_start:
                    anchor.line += diff
            elif anchor.line > start_line:
                anchor.line += diff

    def to_records(self, file_name: str) -> list[dict[str, object]]:
        """The comments as storage records of *file_name*."""
        return [
            {"file": file_name, "line": anchor.line, "text": anchor.text, "user": anchor.user}
            for anchor in self._anchors
        ]