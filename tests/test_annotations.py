import pytest

from pairedit.annotations import CommentAnchor, CommentTracker
from pairedit.document import LastRemoveKey


@pytest.fixture
def tracker():
    t = CommentTracker()
    t.add(3, "look here", "ann")
    t.add(5, "and here", "bob")
    return t


def test_add_and_find(tracker):
    anchor = tracker.find(3)
    assert anchor == CommentAnchor(3, "look here", "ann")
    assert tracker.find(4) is None
    assert len(tracker) == 2


def test_add_existing_line_updates(tracker):
    tracker.add(3, "changed", "carl")
    assert len(tracker) == 2
    assert tracker.find(3) == CommentAnchor(3, "changed", "carl")


def test_add_empty_text_removes(tracker):
    assert tracker.add(3, "", "ann") is None
    assert tracker.find(3) is None
    assert len(tracker) == 1


def test_remove(tracker):
    assert tracker.remove(5) is True
    assert tracker.remove(5) is False
    assert [a.line for a in tracker.anchors] == [3]


def test_title_follows_source_wording():
    assert CommentAnchor(7, "x", "ann").title == "Comment to 7 line by ann"


def test_to_records(tracker):
    records = tracker.to_records("main.cpp")
    assert records == [
        {"file": "main.cpp", "line": 3, "text": "look here", "user": "ann"},
        {"file": "main.cpp", "line": 5, "text": "and here", "user": "bob"},
    ]


def test_line_insertion_shifts_comments_below(tracker):
    tracker.add(2, "above", "ann")
    tracker.lines_count_updated(6, 5, 3, False, LastRemoveKey.BACK)
    lines = {a.text: a.line for a in tracker}
    assert lines == {"above": 2, "look here": 4, "and here": 6}


def test_insertion_at_block_start_moves_start_line_comment():
    t = CommentTracker()
    t.add(2, "start", "ann")
    t.lines_count_updated(6, 5, 3, True, LastRemoveKey.BACK)
    assert t.find(3).text == "start"


def test_backspace_join_removes_comment_of_deleted_line(tracker):
    tracker.lines_count_updated(4, 5, 2, False, LastRemoveKey.BACK)
    assert [(a.line, a.text) for a in tracker] == [(4, "and here")]


def test_delete_join_keeps_next_line_comment():
    t = CommentTracker()
    t.add(2, "on cursor line", "ann")
    t.add(3, "next line", "bob")
    t.lines_count_updated(4, 5, 2, False, LastRemoveKey.DEL)
    assert [(a.line, a.text) for a in t] == [(2, "next line")]


def test_first_update_after_loading_is_ignored():
    t = CommentTracker([CommentAnchor(3, "loaded", "ann")])
    assert t.loading is True
    t.lines_count_updated(6, 5, 3, False, LastRemoveKey.BACK)
    assert t.loading is False
    assert t.find(3).text == "loaded"
    t.lines_count_updated(7, 6, 3, False, LastRemoveKey.BACK)
    assert t.find(3) is None
    assert t.find(4).text == "loaded"


def test_loaded_comments_are_copies():
    original = CommentAnchor(3, "loaded", "ann")
    t = CommentTracker([original])
    t.add(3, "edited", "bob")
    assert original.text == "loaded"
    assert t.find(3).text == "edited"


def test_insert_then_remove_lines_round_trip(tracker):
    tracker.lines_count_updated(7, 5, 2, False, LastRemoveKey.BACK)
    tracker.lines_count_updated(5, 7, 0, False, LastRemoveKey.BACK)
    assert [a.line for a in tracker] == [3, 5]
    assert tracker.to_records("f.h")[0]["text"] == "look here"