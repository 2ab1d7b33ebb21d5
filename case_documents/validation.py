"""
Input validation for identifiers that end up inside index queries.
"""

from __future__ import annotations

import re

from case_documents.errors import InvalidArgument

# YY-7NNNNN or YY-8NNNNN: 2-digit year, 7 = personal injury, 8 = bereavement, 5-digit case id.
CRN_RE = re.compile(r"^\d{2}-[78]\d{5}$")
DOCUMENT_ID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)
PAGE_NUMBER_RE = re.compile(r"^\d+$")


def is_valid_crn(crn: object) -> bool:
    return isinstance(crn, str) and CRN_RE.fullmatch(crn) is not None


def validate_crn(crn: object) -> str:
    """Return the CRN unchanged or raise ``InvalidArgument``."""
    if not crn:
        raise InvalidArgument("Case reference number (crn) is required")
    if not is_valid_crn(crn):
        raise InvalidArgument("Invalid case reference number")
    return crn  # type: ignore[return-value]


def validate_document_id(document_id: object) -> str:
    if not isinstance(document_id, str) or not DOCUMENT_ID_RE.fullmatch(document_id):
        raise InvalidArgument("Invalid document ID format")
    return document_id


def parse_page_number(page_number: object) -> int:
    """
    Coerce a page number to a strictly positive integer.

    Accepts ints, integral floats, and digit-only strings. Anything with a
    fractional part, below 1, or of another type is rejected.
    """

    value: int | None = None
    if isinstance(page_number, bool):
        value = None
    elif isinstance(page_number, int):
        value = page_number
    elif isinstance(page_number, float):
        if page_number.is_integer():
            value = int(page_number)
    elif isinstance(page_number, str):
        stripped = page_number.strip()
        if PAGE_NUMBER_RE.fullmatch(stripped):
            value = int(stripped)

    if value is None or value < 1:
        raise InvalidArgument("Invalid page number")
    return value


def validate_document_params(document_id: object, page_number: object, crn: object) -> tuple[str, int, str]:
    """Validate the identifiers every page-scoped request needs, in request order."""
    return (
        validate_document_id(document_id),
        parse_page_number(page_number),
        validate_crn(crn),
    )
