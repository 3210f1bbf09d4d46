"""Search result data model."""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from src.models.content import Content


@dataclass(frozen=True)
class ContentSearchResult:
    """One page of content returned by a search or hierarchy call.

    Attributes:
        results: Content items in server order
        start: Offset of the first item
        limit: Maximum number of items the server was asked for
        size: Number of items returned in this page
        total_size: Total number of matches, when the server reports it
        next_link: Relative link to the next page, None on the last page
        base_url: Base URL the links are relative to
    """

    results: Tuple[Content, ...] = ()
    start: int = 0
    limit: Optional[int] = None
    size: int = 0
    total_size: Optional[int] = None
    next_link: Optional[str] = None
    base_url: Optional[str] = None

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[Content]:
        return iter(self.results)

    def __getitem__(self, index: int) -> Content:
        return self.results[index]

    @property
    def is_last_page(self) -> bool:
        return self.next_link is None
