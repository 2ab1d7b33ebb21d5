"""
Highlight geometry and transport helpers.
"""

from .alignment import align_overlapping_highlights, determine_highlight_alignment_strategy
from .codec import attach_encoded_bounding_boxes, decode_highlight_data, encode_bounding_box
from .emphasis import emphasise_terms

__all__ = [
    "align_overlapping_highlights",
    "attach_encoded_bounding_boxes",
    "decode_highlight_data",
    "determine_highlight_alignment_strategy",
    "emphasise_terms",
    "encode_bounding_box",
]
