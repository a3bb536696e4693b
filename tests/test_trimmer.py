"""
Tests for the delimiter trimmer.
"""

import itertools

from clipbal.delimiters import ClassBalance, DelimiterClass, ScanResult
from clipbal.scanner import scan
from clipbal.trimmer import plan_deletions, select_targets, trim_all, trim_one


def test_zero_count_is_noop():
    assert trim_one("(a))", "(", ")", 0) == "(a))"


def test_negative_count_removes_closers_from_end():
    assert trim_one("a) b) c)", "(", ")", -2) == "a) b c"


def test_positive_count_removes_openers_from_start():
    assert trim_one("((a (b", "(", ")", 2) == "a (b"


def test_early_stop_when_fewer_occurrences_than_count():
    # Silent truncation: delete what exists, no error
    assert trim_one("a)", "(", ")", -3) == "a"
    assert trim_one("(a", "(", ")", 5) == "a"
    assert trim_one("abc", "[", "]", -1) == "abc"


def test_candidates_limit_eligible_occurrences():
    text = 'a) ")"'
    # Without candidates the last ')' (inside the string) would go
    assert trim_one(text, "(", ")", -1) == 'a) ""'
    assert trim_one(text, "(", ")", -1, candidates=[1]) == 'a ")"'


def test_select_targets_ignores_out_of_range_candidates():
    assert select_targets("a)", "(", ")", -1, candidates=[1, 7, -1]) == [1]


def test_trim_all_uses_scanned_offsets():
    text = "\\) text )"
    assert trim_all(text, scan(text)) == "\\) text "


def test_trim_all_without_offsets_searches_literals():
    result = ScanResult((
        ClassBalance(DelimiterClass.PAREN, -1),
        ClassBalance(DelimiterClass.BRACKET, 1),
        ClassBalance(DelimiterClass.CURLY),
    ))
    assert trim_all("[foo)", result) == "foo"
    assert trim_all("a) b) [c", result) == "a) b c"


def test_trim_all_with_empty_offsets_deletes_nothing():
    result = ScanResult((
        ClassBalance(DelimiterClass.PAREN, -1, (), ()),
        ClassBalance(DelimiterClass.BRACKET),
        ClassBalance(DelimiterClass.CURLY),
    ))
    assert trim_all("')'", result) == "')'"


def test_trim_all_all_classes():
    text = "{[(x)]]}})"
    result = scan(text)
    assert [e.count for e in result] == [-1, -1, -1]
    assert trim_all(text, result) == "{[(x)]}"


def test_plan_deletions_reports_types():
    text = "((a]"
    editor = plan_deletions(text, scan(text))
    summary = editor.get_edit_summary()
    assert summary["total_edits"] == 3
    assert summary["edit_types"] == {"paren": 2, "bracket": 1}


def test_class_trims_commute():
    text = "a)] {b ( c} ]) {"
    result = scan(text)
    expected = trim_all(text, result)

    for order in itertools.permutations(list(result)):
        current = text
        for entry in order:
            current = trim_one(current, entry.open, entry.close, entry.count)
        assert current == expected


def test_threading_matches_single_pass():
    text = "((x]] {"
    result = scan(text)
    threaded = text
    for opener, closer, count in result.triples():
        threaded = trim_one(threaded, opener, closer, count)
    assert threaded == trim_all(text, result)
    assert result[DelimiterClass.CURLY].count == 1
