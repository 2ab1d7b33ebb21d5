"""
Dataclasses mirroring index documents and the records built from them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from case_documents.errors import InvalidArgument
from case_documents.validation import parse_page_number, validate_crn


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0


@dataclass(slots=True)
class BoundingBox:
    top: float = 0.0
    left: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def right(self) -> float:
        return self.left + self.width

    @classmethod
    def from_source(cls, raw: Mapping[str, Any]) -> "BoundingBox":
        return cls(
            top=_to_float(raw.get("top")),
            left=_to_float(raw.get("left")),
            width=_to_float(raw.get("width")),
            height=_to_float(raw.get("height")),
        )

    def to_dict(self) -> dict[str, float]:
        return {"top": self.top, "left": self.left, "width": self.width, "height": self.height}


def _parse_bounding_box(raw: Any) -> Optional[BoundingBox]:
    if isinstance(raw, BoundingBox):
        return raw
    if isinstance(raw, Mapping):
        return BoundingBox.from_source(raw)
    return None


@dataclass(slots=True)
class Chunk:
    chunk_id: Optional[str]
    chunk_type: Optional[str]
    chunk_index: Optional[int]
    bounding_box: Optional[BoundingBox]
    chunk_text: str = ""
    source_doc_id: Optional[str] = None
    page_number: Optional[int] = None
    case_ref: Optional[str] = None

    @classmethod
    def from_source(cls, source: Mapping[str, Any]) -> "Chunk":
        return cls(
            chunk_id=source.get("chunk_id"),
            chunk_type=source.get("chunk_type"),
            chunk_index=source.get("chunk_index"),
            bounding_box=_parse_bounding_box(source.get("bounding_box")),
            chunk_text=source.get("chunk_text") or "",
            source_doc_id=source.get("source_doc_id"),
            page_number=source.get("page_number"),
            case_ref=source.get("case_ref"),
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["bounding_box"] = self.bounding_box.to_dict() if self.bounding_box else None
        return data


@dataclass(slots=True)
class ChunkSummary:
    """The minimal chunk shape needed for overlay rendering."""

    chunk_id: Optional[str]
    chunk_type: Optional[str]
    chunk_index: Optional[int]
    bounding_box: Optional[BoundingBox]

    @classmethod
    def from_chunk(cls, chunk: Chunk) -> "ChunkSummary":
        return cls(
            chunk_id=chunk.chunk_id,
            chunk_type=chunk.chunk_type,
            chunk_index=chunk.chunk_index,
            bounding_box=chunk.bounding_box,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "chunk_id": self.chunk_id,
            "chunk_type": self.chunk_type,
            "chunk_index": self.chunk_index,
            "bounding_box": self.bounding_box.to_dict() if self.bounding_box else None,
        }


@dataclass(slots=True)
class SearchHit:
    id: str
    source: Chunk
    score: Optional[float] = None

    @classmethod
    def from_hit(cls, hit: Mapping[str, Any]) -> "SearchHit":
        score = hit.get("_score")
        return cls(
            id=str(hit.get("_id", "")),
            source=Chunk.from_source(hit.get("_source") or {}),
            score=float(score) if isinstance(score, (int, float)) else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "score": self.score, "source": self.source.to_dict()}


@dataclass(slots=True)
class PageMetadata:
    source_doc_id: Optional[str]
    page_num: Any
    page_count: Optional[int]
    page_width: Optional[float]
    page_height: Optional[float]
    image_uri: Optional[str]
    text: Optional[str]
    correspondence_type: Optional[str] = None
    page_id: Optional[str] = None

    @classmethod
    def from_source(cls, source: Mapping[str, Any]) -> "PageMetadata":
        return cls(
            source_doc_id=source.get("source_doc_id"),
            page_num=source.get("page_num"),
            page_count=source.get("page_count"),
            page_width=source.get("page_width"),
            page_height=source.get("page_height"),
            image_uri=source.get("s3_page_image_s3_uri"),
            text=source.get("text"),
            correspondence_type=source.get("correspondence_type"),
            page_id=source.get("page_id"),
        )


@dataclass(slots=True)
class PageContent:
    """Rendering view of a page: where its image lives and what it says."""

    correspondence_type: Optional[str]
    page_count: Optional[int]
    page_num: Any
    image_uri: Optional[str]
    text: Optional[str]
    page_width: Optional[float] = None
    page_height: Optional[float] = None


@dataclass(frozen=True, slots=True)
class CombinedMetadata:
    correspondence_type: Optional[str]
    page_count: Optional[int]
    page_num: int
    image_uri: Optional[str]
    text: Optional[str]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class SearchQuery:
    keyword: str
    case_reference_number: str
    page_number: int = 1
    items_per_page: int = 10

    def __post_init__(self) -> None:
        validate_crn(self.case_reference_number)
        if not isinstance(self.keyword, str) or not self.keyword.strip():
            raise InvalidArgument("Search keyword is required")
        object.__setattr__(self, "page_number", parse_page_number(self.page_number))
        try:
            items_per_page = parse_page_number(self.items_per_page)
        except InvalidArgument as exc:
            raise InvalidArgument("Invalid items per page") from exc
        object.__setattr__(self, "items_per_page", items_per_page)

    @property
    def offset(self) -> int:
        return self.items_per_page * (self.page_number - 1)

    @property
    def size(self) -> int:
        return self.items_per_page
