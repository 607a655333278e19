"""DummyJSON quotes source."""

from typing import Any, Optional

from daily_quotes.adapters.sources.base import HttpQuoteSource
from daily_quotes.core import Quote, SourceUnavailable
from daily_quotes.core.normalization import build_quote


class DummyJSONSource(HttpQuoteSource):
    """Fetch quotes from dummyjson.com."""
    
    name = "dummyjson"
    direct_base = "https://dummyjson.com"
    
    async def fetch_quote(self, constraint: Optional[str] = None) -> Quote:
        if not constraint:
            data = self._expect(await self._get_json("/quotes/random"), dict, "/quotes/random")
            return self.normalize(data)
        
        data = self._expect(await self._get_json("/quotes", params={"limit": 0}), dict, "/quotes")
        records = self._expect(data.get("quotes") or [], list, "/quotes items")
        return self._pick(self._normalize_many(records), constraint)
    
    def normalize(self, record: Any) -> Quote:
        if not isinstance(record, dict):
            raise SourceUnavailable(self.name, "quote record is not an object")
        return build_quote(
            self.name,
            content=record.get("quote"),
            author=record.get("author"),
            upstream_id=record.get("id"),
        )
