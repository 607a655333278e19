"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Optional

from daily_quotes.core.entities import Quote
from daily_quotes.core.errors import SourceUnavailable


class QuoteSource(ABC):
    """Interface for one upstream quote provider.
    
    Implementations raise SourceUnavailable on any failure, including a
    well-formed but empty result.
    """
    
    name: str = "source"
    supports_search: bool = False
    
    @abstractmethod
    async def fetch_quote(self, constraint: Optional[str] = None) -> Quote:
        """Fetch one random quote, optionally narrowed by tag or keyword."""
        pass
    
    async def search(self, query: str) -> Quote:
        """Server-side keyword search returning the first match."""
        raise SourceUnavailable(self.name, "search is not supported")
