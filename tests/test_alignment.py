from case_documents.db.models import BoundingBox, ChunkSummary
from case_documents.highlights.alignment import (
    BoxEdges,
    align_overlapping_highlights,
    determine_highlight_alignment_strategy,
    has_horizontal_overlap,
)


def highlight(index, top=None, left=0.0, width=0.0, height=0.0):
    box = None if top is None else BoundingBox(top=top, left=left, width=width, height=height)
    return ChunkSummary(chunk_id=f"c{index}", chunk_type="LAYOUT_TEXT", chunk_index=index, bounding_box=box)


def boxes(highlights):
    return [h.bounding_box for h in highlights]


def test_contained_box_is_dropped():
    outer = highlight(0, top=0, left=0, width=10, height=10)
    inner = highlight(1, top=2, left=2, width=2, height=2)

    result = align_overlapping_highlights([outer, inner])

    assert boxes(result) == [BoundingBox(top=0, left=0, width=10, height=10)]


def test_same_row_boxes_merge_horizontally():
    first = highlight(0, top=0, left=0, width=5, height=5)
    second = highlight(1, top=0, left=3, width=5, height=5)

    result = align_overlapping_highlights([first, second])

    assert boxes(result) == [BoundingBox(top=0, left=0, width=8, height=5)]
    assert result[0].chunk_id == "c0"


def test_merge_extends_to_the_left_as_well():
    first = highlight(0, top=0, left=4, width=4, height=5)
    second = highlight(1, top=1, left=1, width=4, height=3)

    result = align_overlapping_highlights([first, second])

    assert boxes(result) == [BoundingBox(top=0, left=1, width=7, height=5)]


def test_box_hanging_below_is_trimmed_and_kept():
    above = highlight(0, top=0, left=0, width=5, height=5)
    below = highlight(1, top=3, left=0, width=5, height=5)

    result = align_overlapping_highlights([above, below])

    assert boxes(result) == [
        BoundingBox(top=0, left=0, width=5, height=5),
        BoundingBox(top=5, left=0, width=5, height=3),
    ]


def test_trimming_continues_against_later_accepted_boxes():
    first = highlight(0, top=0, left=0, width=5, height=2)
    second = highlight(1, top=2, left=0, width=5, height=2)
    third = highlight(2, top=1, left=0, width=5, height=5)

    result = align_overlapping_highlights([first, second, third])

    assert boxes(result)[2] == BoundingBox(top=4, left=0, width=5, height=2)


def test_degenerate_boxes_are_dropped():
    flat = highlight(0, top=1, left=0, width=5, height=0)
    result = align_overlapping_highlights([flat])
    assert result == []


def test_vertically_contained_box_straddling_the_right_edge_merges():
    tall = highlight(0, top=0, left=0, width=2, height=10)
    wide = highlight(1, top=5, left=1, width=5, height=5)

    result = align_overlapping_highlights([tall, wide])

    assert len(result) == 1
    assert result[0].bounding_box == BoundingBox(top=0, left=0, width=6, height=10)


def test_boxes_in_separate_columns_do_not_interact():
    left = highlight(0, top=0, left=0, width=2, height=5)
    right = highlight(1, top=3, left=3, width=2, height=5)

    result = align_overlapping_highlights([left, right])

    assert boxes(result) == [left.bounding_box, right.bounding_box]


def test_highlights_without_boxes_pass_through():
    loose = highlight(0)
    boxed = highlight(1, top=0, left=0, width=1, height=1)

    result = align_overlapping_highlights([loose, boxed, loose])

    assert result == [loose, boxed, loose]


def test_inputs_are_not_mutated():
    first = highlight(0, top=0, left=0, width=5, height=5)
    second = highlight(1, top=0, left=3, width=5, height=5)
    third = highlight(2, top=3, left=0, width=5, height=5)

    align_overlapping_highlights([first, second, third])

    assert first.bounding_box == BoundingBox(top=0, left=0, width=5, height=5)
    assert third.bounding_box == BoundingBox(top=3, left=0, width=5, height=5)


def test_result_depends_on_order():
    big = highlight(0, top=0, left=0, width=10, height=10)
    small = highlight(1, top=2, left=2, width=2, height=2)

    assert len(align_overlapping_highlights([big, small])) == 1
    assert len(align_overlapping_highlights([small, big])) == 2


def test_box_poking_above_an_earlier_one_is_left_alone():
    # Only the bottom edge of an already placed box clips; the top edge does not.
    lower = highlight(0, top=5, left=0, width=5, height=5)
    upper = highlight(1, top=2, left=0, width=5, height=5)

    result = align_overlapping_highlights([lower, upper])

    assert boxes(result) == [lower.bounding_box, upper.bounding_box]


def test_horizontal_overlap_excludes_touching_edges():
    a = BoxEdges(top=0, left=0, bottom=1, right=1)
    b = BoxEdges(top=0, left=1, bottom=1, right=2)
    c = BoxEdges(top=0, left=0.5, bottom=1, right=2)
    assert not has_horizontal_overlap(a, b)
    assert has_horizontal_overlap(a, c)


def test_alignment_only_runs_when_enabled():
    first = highlight(0, top=0, left=0, width=10, height=10)
    second = highlight(1, top=2, left=2, width=2, height=2)

    assert determine_highlight_alignment_strategy(False, [first, second]) == [first, second]
    assert determine_highlight_alignment_strategy(True, [first, second]) == [first]
