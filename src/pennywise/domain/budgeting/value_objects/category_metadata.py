"""Display metadata of a category, as needed by reports."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CategoryMetadata:
    """Name and color of a category, keyed by its id."""

    category_id: UUID
    name: str
    color: str
