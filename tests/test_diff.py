import pytest

from npdiff.edits import Edit, Line, expand
from npdiff.line_diff import diff, diff_hunks, lines
from npdiff.onp import Change


def hunks(a, b):
    return [
        [hunk.header(), [str(edit) for edit in hunk.edits]] for hunk in diff_hunks(a, b)
    ]


DOC = ["the", "quick", "brown", "fox", "jumps", "over", "the", "lazy", "dog"]


def test_lines_numbers_from_one():
    assert lines("a\nb\n") == [Line(1, "a"), Line(2, "b")]
    assert lines(["x"]) == [Line(1, "x")]


def test_expand_puts_deletions_before_insertions():
    a = lines(["keep", "old", "tail"])
    b = lines(["keep", "new", "newer", "tail"])

    edits = expand([Change(1, 1, 1, 2)], a, b)

    assert [e.ty for e in edits] == ["eql", "del", "ins", "ins", "eql"]
    assert edits[0] == Edit("eql", Line(1, "keep"), Line(1, "keep"))
    assert edits[-1] == Edit("eql", Line(3, "tail"), Line(4, "tail"))


def test_expand_of_no_changes_is_all_context():
    a = lines(["x", "y"])
    edits = expand([], a, lines(["x", "y"]))
    assert [str(e) for e in edits] == [" x", " y"]


def test_diff_of_the_paper_example():
    edits = diff(list("acbdeacbed"), list("acebdabbabed"))
    assert "".join(str(e)[0] for e in edits) == "  +  - - +++  "


def test_identical_documents_have_no_hunks():
    assert hunks(DOC, list(DOC)) == []


def test_it_detects_deletion_at_start():
    changed = ["quick", "brown", "fox", "jumps", "over", "the", "lazy", "dog"]
    expected = [["@@ -1,4 +1,3 @@", ["-the", " quick", " brown", " fox"]]]
    assert hunks(DOC, changed) == expected


def test_it_detects_insertion_at_start():
    changed = ["so", *DOC]
    expected = [["@@ -1,3 +1,4 @@", ["+so", " the", " quick", " brown"]]]
    assert hunks(DOC, changed) == expected


def test_it_detects_change_skipping_start_and_end():
    changed = [
        "the",
        "quick",
        "brown",
        "fox",
        "leaps",
        "right",
        "over",
        "the",
        "lazy",
        "dog",
    ]
    expected = [
        [
            "@@ -2,7 +2,8 @@",
            [
                " quick",
                " brown",
                " fox",
                "-jumps",
                "+leaps",
                "+right",
                " over",
                " the",
                " lazy",
            ],
        ]
    ]
    assert hunks(DOC, changed) == expected


def test_it_puts_nearby_changes_in_same_hunk():
    changed = ["the", "brown", "fox", "jumps", "over", "the", "lazy", "cat"]
    expected = [
        [
            "@@ -1,9 +1,8 @@",
            [
                " the",
                "-quick",
                " brown",
                " fox",
                " jumps",
                " over",
                " the",
                " lazy",
                "-dog",
                "+cat",
            ],
        ]
    ]
    assert hunks(DOC, changed) == expected


def test_it_puts_distant_changes_in_different_hunks():
    changed = ["a", "quick", "brown", "fox", "jumps", "over", "the", "lazy", "cat"]
    expected = [
        ["@@ -1,4 +1,4 @@", ["-the", "+a", " quick", " brown", " fox"]],
        ["@@ -6,4 +6,4 @@", [" over", " the", " lazy", "-dog", "+cat"]],
    ]
    assert hunks(DOC, changed) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ([], ["x"], [["@@ -0,0 +1,1 @@", ["+x"]]]),
        (["x", "y"], [], [["@@ -1,2 +0,0 @@", ["-x", "-y"]]]),
    ],
)
def test_it_reports_an_empty_side_from_zero(a, b, expected):
    assert hunks(a, b) == expected


def test_it_keeps_the_left_edge_for_swapped_lines():
    assert hunks(["a", "b"], ["b", "a"]) == [["@@ -1,2 +1,2 @@", ["-a", " b", "+a"]]]


def test_it_accepts_text_documents():
    assert hunks("one\ntwo\n", "one\n2\n") == [
        ["@@ -1,2 +1,2 @@", [" one", "-two", "+2"]]
    ]
