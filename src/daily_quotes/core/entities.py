"""Core domain entities."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Quote:
    """Canonical quote record shared by every source."""
    
    id: str
    content: str
    author: str
    tags: frozenset[str] = field(default_factory=frozenset)
    
    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Quote id cannot be empty")
        if not self.content or not self.content.strip():
            raise ValueError("Quote content cannot be empty")
        if not self.author or not self.author.strip():
            raise ValueError("Quote author cannot be empty")
        if self.tags is None:
            object.__setattr__(self, "tags", frozenset())
        elif not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))
    
    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "content": self.content,
            "author": self.author,
            "tags": sorted(self.tags),
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> "Quote":
        return cls(
            id=data["id"],
            content=data["content"],
            author=data["author"],
            tags=frozenset(data.get("tags") or []),
        )


@dataclass(frozen=True)
class QuoteResult:
    """Outcome of a resolve call.
    
    ``degraded`` is set when the quote came from the local pool instead of
    a live source. ``filter_missed`` is set when a tag filter matched
    nothing in the local pool and an unfiltered pick was served.
    """
    
    quote: Quote
    degraded: bool
    filter_missed: bool = False


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a keyword search; ``quote`` is None when nothing matched."""
    
    quote: Optional[Quote]
    degraded: bool
    
    @property
    def found(self) -> bool:
        return self.quote is not None
