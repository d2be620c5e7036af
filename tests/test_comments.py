import pytest

from pairedit.comments import (
    BOLD_SIGNS,
    ITALIC_SIGNS,
    CommentSubmission,
    SpecificTextType,
    classify_submission,
    render_comment,
    wrap_selection,
)


def test_wrap_selection_bold():
    text, cursor = wrap_selection("my code here", 3, 7, BOLD_SIGNS)
    assert text == "my **code** here"
    assert cursor == 3 + len(BOLD_SIGNS)


def test_wrap_selection_accepts_reversed_bounds():
    assert wrap_selection("abc", 2, 0, ITALIC_SIGNS) == wrap_selection("abc", 0, 2, ITALIC_SIGNS)


def test_wrap_empty_selection_inserts_both_signs():
    text, cursor = wrap_selection("ab", 1, 1, ITALIC_SIGNS)
    assert text == "a__b"
    assert cursor == 2


def test_classify_submission():
    assert classify_submission("") is CommentSubmission.EMPTY
    assert classify_submission(" ") is CommentSubmission.NOT_EMPTY


def test_plain_text_unchanged():
    rendered = render_comment("nothing special")
    assert rendered.text == "nothing special"
    assert rendered.spans == ()
    assert rendered.edit_text == "nothing special"


def test_bold_span():
    rendered = render_comment("see **code** now")
    assert rendered.text == "see code now"
    (span,) = rendered.spans
    assert span.text_type is SpecificTextType.BOLD
    assert rendered.text[span.start_index:span.end_index] == "code"


def test_italic_span():
    rendered = render_comment("an _idea_ here")
    assert rendered.text == "an idea here"
    (span,) = rendered.spans
    assert span.text_type is SpecificTextType.ITALIC
    assert rendered.text[span.start_index:span.end_index] == "idea"


def test_several_bold_spans_are_located():
    rendered = render_comment("**one** and **two**")
    assert rendered.text == "one and two"
    words = [rendered.text[s.start_index:s.end_index] for s in rendered.spans]
    assert words == ["one", "two"]


def test_bold_then_italic_spans():
    rendered = render_comment("**big** and _slim_")
    assert rendered.text == "big and slim"
    found = {s.text_type: rendered.text[s.start_index:s.end_index] for s in rendered.spans}
    assert found == {SpecificTextType.BOLD: "big", SpecificTextType.ITALIC: "slim"}


def test_bold_inside_italic():
    rendered = render_comment("_**text**_")
    assert rendered.text == "text"
    assert [s.text_type for s in rendered.spans] == [SpecificTextType.BOLD, SpecificTextType.ITALIC]
    for span in rendered.spans:
        assert rendered.text[span.start_index:span.end_index] == "text"


@pytest.mark.parametrize("markup", ["****", "__"])
def test_empty_markers_removed_from_edit_text(markup):
    rendered = render_comment("a" + markup + "b")
    assert rendered.text == "ab"
    assert rendered.edit_text == "ab"
    (span,) = rendered.spans
    assert span.start_index == span.end_index


def test_bold_pass_view_does_not_touch_edit_text():
    rendered = render_comment("**x**")
    assert rendered.edit_text == "**x**"


def test_spans_stay_in_bounds():
    rendered = render_comment("**a** _b_ **c** _d_")
    assert rendered.text == "a b c d"
    for span in rendered.spans:
        assert 0 <= span.start_index <= span.end_index <= len(rendered.text)