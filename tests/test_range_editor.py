import pytest

from clipbal.range_edits import RangeEditor, TextRange


def test_multiple_deletions_single_copy_and_stats():
    text = "abcdef\n123456\nXYZ\n"
    ed = RangeEditor(text)

    ed.add_deletion(2, 5, edit_type="cde")
    start_del = text.index("456")
    ed.add_deletion(start_del, start_del + len("456\n"), edit_type="tail")
    ed.add_char_deletion(0, edit_type="a")

    result, stats = ed.apply_edits()

    assert result == "bf\n123XYZ\n"
    assert stats["edits_applied"] == 3
    assert stats["chars_removed"] == 8
    assert stats["by_type"] == {"cde": 1, "tail": 1, "a": 1}


def test_overlapping_same_width_first_wins():
    ed = RangeEditor("hello world")
    ed.add_deletion(0, 5, edit_type="first")
    ed.add_deletion(1, 6, edit_type="second")
    result, stats = ed.apply_edits()
    assert result == " world"
    assert stats["edits_applied"] == 1


def test_wider_edit_absorbs_narrower():
    ed = RangeEditor("hello world")
    ed.add_char_deletion(1, edit_type="narrow")
    ed.add_deletion(0, 6, edit_type="wide")
    result, _ = ed.apply_edits()
    assert result == "world"
    assert ed.removed_offsets() == [0, 1, 2, 3, 4, 5]


def test_no_edits_returns_original():
    ed = RangeEditor("abc")
    result, stats = ed.apply_edits()
    assert result == "abc"
    assert stats["edits_applied"] == 0


def test_out_of_bounds_edit_fails_validation():
    ed = RangeEditor("abc")
    ed.add_deletion(2, 10, edit_type=None)
    assert ed.validate_edits()
    with pytest.raises(ValueError):
        ed.apply_edits()


def test_invalid_range():
    with pytest.raises(ValueError):
        TextRange(5, 2)


def test_unicode_offsets_are_characters():
    ed = RangeEditor("é(ü)")
    ed.add_char_deletion(1, edit_type="paren")
    result, _ = ed.apply_edits()
    assert result == "éü)"
