"""Quotable API source (random by tag, server-side search)."""

from typing import Any, Optional

from daily_quotes.adapters.sources.base import HttpQuoteSource
from daily_quotes.core import Quote, SourceUnavailable
from daily_quotes.core.normalization import build_quote


class QuotableSource(HttpQuoteSource):
    """Fetch quotes from api.quotable.io."""
    
    name = "quotable"
    direct_base = "https://api.quotable.io"
    supports_search = True
    
    async def fetch_quote(self, constraint: Optional[str] = None) -> Quote:
        """Random quote, filtered by tag on the server when a constraint is given."""
        params = {"tags": constraint} if constraint else None
        data = await self._get_json("/random", params=params)
        
        # Older deployments answer /random with a one-element list
        if isinstance(data, list):
            if not data:
                raise SourceUnavailable(self.name, "empty result")
            data = data[0]
        
        return self.normalize(self._expect(data, dict, "/random"))
    
    async def search(self, query: str) -> Quote:
        """First hit of a full-text search."""
        data = self._expect(
            await self._get_json("/search/quotes", params={"query": query, "limit": 1}),
            dict,
            "/search/quotes",
        )
        
        results = data.get("results") or []
        if not data.get("count") or not results:
            raise SourceUnavailable(self.name, f"no search results for '{query}'")
        
        return self.normalize(self._expect(results[0], dict, "/search/quotes result"))
    
    def normalize(self, record: Any) -> Quote:
        return build_quote(
            self.name,
            content=record.get("content"),
            author=record.get("author"),
            upstream_id=record.get("_id"),
            tags=record.get("tags"),
        )
