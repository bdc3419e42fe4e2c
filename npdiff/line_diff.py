from __future__ import annotations

from typing import List, Union

from npdiff.adapters import strings
from npdiff.edits import Edit, Line, expand
from npdiff.hunk import Hunk


def lines(document: Union[str, List[str]]) -> List[Line]:
    if isinstance(document, str):
        doc_lines = document.splitlines()
    else:
        doc_lines = document
    return [Line(i + 1, text) for i, text in enumerate(doc_lines)]


def diff(a: Union[str, List[str]], b: Union[str, List[str]]) -> List[Edit]:
    a_lines, b_lines = lines(a), lines(b)
    changes = strings([ln.text for ln in a_lines], [ln.text for ln in b_lines])
    return expand(changes, a_lines, b_lines)


def diff_hunks(a: Union[str, List[str]], b: Union[str, List[str]]) -> List[Hunk]:
    return Hunk.filter(diff(a, b))
