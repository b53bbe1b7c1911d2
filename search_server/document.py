"""
Document metadata: status tags, stored records and ranked results.

DocumentStore keeps one DocumentRecord per id and the ids in ascending
order, so a document can also be addressed by its position.
"""

import bisect
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class DocumentStatus(Enum):
    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"

    @classmethod
    def parse(cls, name: str) -> "DocumentStatus":
        """Look up a status by name, case-insensitive ("actual", "BANNED")."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown document status: {name!r}") from None


@dataclass(frozen=True)
class DocumentRecord:
    """
    Stored per-document metadata.
    - id: document identifier (non-negative int)
    - rating: average of the ratings given at ingestion
    - status: status tag given at ingestion
    """

    id: int
    rating: int
    status: DocumentStatus


@dataclass(frozen=True)
class RankedDocument:
    id: int
    relevance: float
    rating: int

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )


def compute_average_rating(ratings: Iterable[int]) -> int:
    """
    Integer mean of ratings, truncated toward zero; 0 for no ratings.
    [5, 4, 5, 3] -> 4, [-5, -2] -> -3.
    """
    ratings = list(ratings)
    if not ratings:
        return 0
    total = sum(ratings)
    quotient = abs(total) // len(ratings)
    return quotient if total >= 0 else -quotient


class DocumentStore:
    """Records keyed by document id, with ids kept in ascending order."""

    def __init__(self) -> None:
        self._records: dict[int, DocumentRecord] = {}
        self._ids: list[int] = []

    def add(self, record: DocumentRecord) -> None:
        """Insert a record. The caller has already checked the id is new."""
        self._records[record.id] = record
        bisect.insort(self._ids, record.id)

    def get(self, document_id: int) -> DocumentRecord | None:
        return self._records.get(document_id)

    def id_at(self, index: int) -> int:
        """Return the id at a zero-based position in ascending-id order."""
        return self._ids[index]

    def __contains__(self, document_id: int) -> bool:
        return document_id in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)
