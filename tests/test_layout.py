from __future__ import annotations

from quizdoc.ingestion.structure import TextFragment
from quizdoc.text.layout import LayoutConfig, assemble_lines, sort_fragments


def frag(text: str, x: float, y: float, height: float = 10.0) -> TextFragment:
    return TextFragment(text=text, x=x, y=y, height=height)


def test_reverse_x_insertion_reads_left_to_right():
    fragments = [frag("c", 30, 100), frag("b", 20, 100), frag("a", 10, 100)]
    lines = assemble_lines(fragments)
    assert [line.text for line in lines] == ["a b c"]


def test_line_grouping_boundary():
    # height 10 -> tolerance 5
    same = assemble_lines([frag("a", 10, 100), frag("b", 20, 104.9)])
    assert [line.text for line in same] == ["a b"]

    split = assemble_lines([frag("a", 10, 100), frag("b", 20, 105.1)])
    assert [line.text for line in split] == ["a", "b"]


def test_rows_come_out_top_to_bottom():
    fragments = [
        frag("third", 10, 140),
        frag("one", 40, 100),
        frag("second", 10, 120),
        frag("first", 10, 100.5),
        frag("row", 60, 120),
    ]
    lines = assemble_lines(fragments)
    assert [line.text for line in lines] == ["first one", "second row", "third"]
    # representative position comes from the leftmost fragment
    assert lines[0].y == 100.5
    assert lines[0].height == 10.0


def test_empty_input_yields_no_lines():
    assert assemble_lines([]) == []


def test_sort_is_stable_for_identical_positions():
    a, b = frag("a", 10, 100), frag("b", 10, 100)
    assert sort_fragments([a, b]) == [a, b]
    assert sort_fragments([b, a]) == [b, a]


def test_custom_tolerance_widens_lines():
    fragments = [frag("a", 10, 100), frag("b", 20, 107)]
    assert len(assemble_lines(fragments)) == 2
    assert len(assemble_lines(fragments, LayoutConfig(line_tolerance=0.8))) == 1
