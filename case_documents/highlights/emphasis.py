"""
Search term emphasis for chunk text shown in result listings.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping, Sequence

DEFAULT_WRAPPER = ("<strong>", "</strong>")


def _wrap(pattern: re.Pattern[str], text: str, wrapper: Sequence[str]) -> tuple[str, int]:
    opening, closing = wrapper
    return pattern.subn(lambda match: f"{opening}{match.group(0)}{closing}", text)


def emphasise_text(text: str, terms: Iterable[str], wrapper: Sequence[str] = DEFAULT_WRAPPER) -> str:
    """
    Wrap each occurrence of every term in ``text``.

    Whole-phrase matches win. A multi-word term with no whole-phrase match
    falls back to wrapping its individual words, so results stay relevant
    without getting crowded.
    """

    for term in terms:
        term = term.strip()
        if not term:
            continue
        text, count = _wrap(re.compile(re.escape(term), re.IGNORECASE), text, wrapper)
        if count:
            continue
        words = [word for word in term.split() if word]
        if len(words) > 1:
            pattern = re.compile("|".join(re.escape(word) for word in words), re.IGNORECASE)
            text, _ = _wrap(pattern, text, wrapper)
    return text


def emphasise_terms(
    hits: Iterable[Mapping[str, Any]],
    terms: Sequence[str],
    wrapper: Sequence[str] = DEFAULT_WRAPPER,
) -> list[dict[str, Any]]:
    """Return copies of serialised hits with ``source.chunk_text`` emphasised."""
    emphasised = []
    for hit in hits:
        copy = dict(hit)
        source = copy.get("source")
        if isinstance(source, Mapping) and source.get("chunk_text"):
            source = dict(source)
            source["chunk_text"] = emphasise_text(source["chunk_text"], terms, wrapper)
            copy["source"] = source
        emphasised.append(copy)
    return emphasised
