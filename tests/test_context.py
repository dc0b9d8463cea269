import pytest

from featuredoc.core.errors import AssociationError
from featuredoc.extraction.context import AttachedComment, GroupingComment, NoComment, ParseState


def test_grouping_then_attached_flush_together():
    state = ParseState()
    state.add_grouping(" Section")
    state.add_attached(" first")
    state.add_attached(" second")

    assert state.pending == AttachedComment(" Section\n", " first\n second\n")

    entry = state.flush_entry("foo", 7)
    assert (entry.name, entry.grouping, entry.comment, entry.line_no) == (
        "foo", " Section\n", " first\n second\n", 7
    )
    assert state.pending == NoComment()
    assert state.entries == [entry]


def test_grouping_after_attached_is_rejected():
    state = ParseState()
    state.add_attached(" doc")
    with pytest.raises(AssociationError, match="Cannot mix"):
        state.add_grouping(" group")


def test_grouping_accumulates_without_attached():
    state = ParseState()
    state.add_grouping(" a")
    state.add_grouping("")

    assert state.pending == GroupingComment(" a\n\n")
    assert not state.has_attached
    assert state.take() == (" a\n\n", "")
