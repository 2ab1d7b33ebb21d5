import base64
import json

import pytest

from case_documents.db.models import BoundingBox
from case_documents.highlights.codec import (
    attach_encoded_bounding_boxes,
    decode_highlight_data,
    encode_bounding_box,
)

ZERO = BoundingBox(top=0, left=0, width=0, height=0)


def b64(value) -> str:
    return base64.b64encode(json.dumps(value).encode("utf-8")).decode("ascii")


def test_round_trip():
    box = BoundingBox(top=0.12, left=0.05, width=0.4, height=0.031)
    assert decode_highlight_data(encode_bounding_box(box)) == [box]


def test_encoding_is_a_single_element_array():
    encoded = encode_bounding_box({"top": 1, "left": 2, "width": 3, "height": 4})
    assert json.loads(base64.b64decode(encoded)) == [{"top": 1, "left": 2, "width": 3, "height": 4}]


def test_non_array_payload_degrades_to_zero_box():
    assert decode_highlight_data(b64({"top": 1, "left": 1, "width": 1, "height": 1})) == [ZERO]


@pytest.mark.parametrize("encoded", ["not base64 at all!!", b64("[")[:-2], "", None, base64.b64encode(b"\xff\xfe").decode()])
def test_undecodable_input_degrades_to_zero_box(encoded):
    assert decode_highlight_data(encoded) == [ZERO]


def test_deeply_nested_payload_degrades_to_zero_box():
    nested = "[" * 100000 + "]" * 100000
    encoded = base64.b64encode(nested.encode("ascii")).decode("ascii")
    assert decode_highlight_data(encoded) == [ZERO]


def test_out_of_range_numbers_are_replaced_with_zero_box():
    raw = '[{"top": ' + "9" * 400 + ', "left": 0, "width": 0, "height": 0}]'
    encoded = base64.b64encode(raw.encode("ascii")).decode("ascii")
    assert decode_highlight_data(encoded) == [ZERO]


def test_invalid_elements_are_replaced_individually():
    payload = [
        {"top": "0.5", "left": 0.1, "width": 0.2, "height": 0.3},
        {"top": 0.1, "left": 0.1, "width": 0.2, "height": 0.3, "onclick": "alert(1)"},
        {"top": "abc", "left": 0.1, "width": 0.2, "height": 0.3},
        {"top": True, "left": 0.1, "width": 0.2, "height": 0.3},
        "<script>",
    ]

    decoded = decode_highlight_data(b64(payload))

    assert decoded == [BoundingBox(top=0.5, left=0.1, width=0.2, height=0.3), ZERO, ZERO, ZERO, ZERO]


def test_attach_encoded_bounding_boxes_leaves_inputs_untouched():
    items = [{"chunk_id": "a", "bounding_box": {"top": 1, "left": 1, "width": 1, "height": 1}}, {"chunk_id": "b"}]

    encoded = attach_encoded_bounding_boxes(items)

    assert decode_highlight_data(encoded[0]["bounding_box_base64"]) == [BoundingBox(1, 1, 1, 1)]
    assert "bounding_box_base64" not in encoded[1]
    assert "bounding_box_base64" not in items[0]
