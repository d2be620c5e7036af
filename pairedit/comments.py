"""Line comments with light markup: **bold** and _italic_ spans."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

BOLD_SIGNS = "**"
ITALIC_SIGNS = "_"

_BOLD = re.compile(r"\*\*(?:(?:[^*])|(?:\*[^*])|(?:[^*]\*))*(?:\*)*\*\*")
_ITALIC = re.compile(r"_(.*?)_")


class SpecificTextType(enum.Enum):
    BOLD = enum.auto()
    ITALIC = enum.auto()


@dataclass
class SpecificText:
    """A formatted span [start_index, end_index) of the rendered comment text."""

    start_index: int
    end_index: int
    text_type: SpecificTextType


@dataclass(frozen=True)
class RenderedComment:
    """A comment with its markup stripped.

    *text* is what is shown, *spans* the formatted parts of it, and *edit_text*
    the editable text, which loses empty markers such as "****" or "__".
    """

    text: str
    spans: tuple[SpecificText, ...]
    edit_text: str


class CommentSubmission(enum.Enum):
    EMPTY = enum.auto()
    NOT_EMPTY = enum.auto()


def wrap_selection(text: str, start: int, end: int, signs: str) -> tuple[str, int]:
    """Surround text[start:end] with *signs*; return the new text and the cursor position."""
    start, end = min(start, end), max(start, end)
    wrapped = signs + text[start:end] + signs
    return text[:start] + wrapped + text[end:], start + len(signs)


def classify_submission(text: str) -> CommentSubmission:
    """Tell whether a sent comment is empty (which removes it) or not."""
    return CommentSubmission.EMPTY if not text else CommentSubmission.NOT_EMPTY


def _shift_bold(spans: list[SpecificText], added: SpecificText, one_side: int) -> None:
    # Bold spans are recorded first; later removals shift those that lie after them.
    for span in spans:
        if span.text_type is not SpecificTextType.BOLD:
            break
        if span.start_index > added.start_index:
            span.start_index -= one_side * 2
            span.end_index -= one_side * 2
            if span.end_index < added.end_index:
                span.start_index = added.start_index
                span.end_index = added.end_index


def _strip_markers(
    source: str,
    pattern: re.Pattern[str],
    signs: str,
    text_type: SpecificTextType,
    spans: list[SpecificText],
    edit_text: str,
) -> tuple[str, str]:
    one_side = len(signs)
    view = source
    shift = 0
    for match in pattern.finditer(source):
        start, end = match.start(), match.end()
        if match.group(0) == signs + signs:
            view = view[:start - shift] + view[end - shift:]
            edit_text = view
        else:
            inner = match.group(0)[one_side:len(match.group(0)) - one_side]
            view = view[:start - shift] + inner + view[end - shift:]
        span_start = max(start - shift, 0)
        shift += one_side * 2
        span = SpecificText(span_start, end - shift, text_type)
        spans.append(span)
        _shift_bold(spans, span, one_side)
    return view, edit_text


def render_comment(text: str) -> RenderedComment:
    """Strip bold markers, then italic ones, recording where each formatted span lies."""
    spans: list[SpecificText] = []
    view, edit_text = _strip_markers(text, _BOLD, BOLD_SIGNS, SpecificTextType.BOLD, spans, text)
    view, edit_text = _strip_markers(
        view, _ITALIC, ITALIC_SIGNS, SpecificTextType.ITALIC, spans, edit_text
    )
    return RenderedComment(view, tuple(spans), edit_text)