"""
Base64 transport encoding for highlight bounding boxes.

Encoded values travel in URLs, so decoding treats its input as untrusted:
anything malformed degrades to an empty box instead of failing the request.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any, Iterable, Mapping

from case_documents.db.models import BoundingBox

logger = logging.getLogger(__name__)

VALID_KEYS = frozenset({"top", "left", "width", "height"})


def default_box() -> BoundingBox:
    return BoundingBox(top=0.0, left=0.0, width=0.0, height=0.0)


def encode_bounding_box(box: BoundingBox | Mapping[str, Any]) -> str:
    """Encode one box as a one-element JSON array, base64'd."""
    data = box.to_dict() if isinstance(box, BoundingBox) else dict(box)
    payload = json.dumps([data], separators=(",", ":"))
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if number != number:  # NaN
        return None
    return number


def _sanitise(item: Any) -> BoundingBox:
    if not isinstance(item, Mapping):
        return default_box()

    values: dict[str, float] = {}
    for key, value in item.items():
        number = _as_number(value)
        if key not in VALID_KEYS or number is None:
            return default_box()
        values[key] = number
    return BoundingBox(**values)


def decode_highlight_data(encoded: str | None) -> list[BoundingBox]:
    """Decode a value produced by ``encode_bounding_box``. Never raises."""
    try:
        raw = base64.b64decode(encoded or "", validate=False)
        parsed = json.loads(raw.decode("utf-8"))
    except (binascii.Error, ValueError, TypeError, RecursionError) as exc:
        logger.warning("Discarding undecodable highlight data: %s", exc)
        return [default_box()]

    if not isinstance(parsed, list):
        return [default_box()]
    return [_sanitise(item) for item in parsed]


def attach_encoded_bounding_boxes(items: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Copy each item, adding ``bounding_box_base64`` wherever a ``bounding_box`` is present."""
    encoded_items = []
    for item in items:
        copy = dict(item)
        box = copy.get("bounding_box")
        if box is not None:
            copy["bounding_box_base64"] = encode_bounding_box(box)
        encoded_items.append(copy)
    return encoded_items
