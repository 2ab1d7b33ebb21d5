"""
Overlap resolution for highlighted chunk regions before overlay rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Sequence, TypeVar

from case_documents.db.models import BoundingBox

HighlightT = TypeVar("HighlightT")


@dataclass(frozen=True, slots=True)
class BoxEdges:
    top: float
    left: float
    bottom: float
    right: float

    @classmethod
    def of(cls, box: BoundingBox) -> "BoxEdges":
        return cls(top=box.top, left=box.left, bottom=box.bottom, right=box.right)


def is_inside_box(inner: BoxEdges, outer: BoxEdges) -> bool:
    return (
        inner.top >= outer.top
        and inner.bottom <= outer.bottom
        and inner.left >= outer.left
        and inner.right <= outer.right
    )


def is_vertically_contained(inner: BoxEdges, outer: BoxEdges) -> bool:
    return inner.top >= outer.top and inner.bottom <= outer.bottom


def has_horizontal_overlap(a: BoxEdges, b: BoxEdges) -> bool:
    return a.left < b.right and a.right > b.left


def _bounding_box(highlight: Any) -> BoundingBox | None:
    return getattr(highlight, "bounding_box", None)


def align_overlapping_highlights(highlights: Sequence[HighlightT] = ()) -> list[HighlightT]:
    """
    Resolve overlaps between highlighted regions in a single greedy pass.

    Highlights are taken in the given order (ascending ``chunk_index`` for a
    page) and compared against those already accepted:

    * fully inside an accepted box: dropped;
    * vertically inside an accepted box and overlapping it horizontally:
      the accepted box is widened to cover both, the incoming one is dropped;
    * sharing columns with an accepted box and hanging below its bottom edge:
      the incoming box is clipped to start at that edge and comparison goes on.

    Boxes left with no height are dropped. Highlights without a bounding box
    pass through untouched. Only the bottom edge of an accepted box clips;
    a later box poking above an earlier one is left as is.

    The result depends on input order. Inputs are never mutated.
    """

    output: list[HighlightT] = []

    for highlight in highlights:
        box = _bounding_box(highlight)
        if box is None:
            output.append(highlight)
            continue

        current_box = replace(box)
        current = BoxEdges.of(current_box)
        hidden = False

        for position, accepted in enumerate(output):
            accepted_box = _bounding_box(accepted)
            if accepted_box is None:
                continue
            previous = BoxEdges.of(accepted_box)

            if is_inside_box(current, previous):
                hidden = True
                break

            if is_vertically_contained(current, previous) and has_horizontal_overlap(current, previous):
                merged_left = min(previous.left, current.left)
                merged_right = max(previous.right, current.right)
                output[position] = replace(
                    accepted,
                    bounding_box=replace(accepted_box, left=merged_left, width=merged_right - merged_left),
                )
                hidden = True
                break

            if not has_horizontal_overlap(current, previous):
                continue

            if current.top < previous.bottom < current.bottom:
                next_top = previous.bottom
                current_box = replace(current_box, top=next_top, height=max(0.0, current.bottom - next_top))
                current = BoxEdges.of(current_box)

        if hidden or current_box.height <= 0:
            continue

        output.append(replace(highlight, bounding_box=current_box) if current_box != box else highlight)

    return output


def determine_highlight_alignment_strategy(align: bool, highlights: Sequence[HighlightT] = ()) -> list[HighlightT]:
    """Align only when asked to; otherwise hand the highlights back as they came."""
    if align:
        return align_overlapping_highlights(highlights)
    return list(highlights)
