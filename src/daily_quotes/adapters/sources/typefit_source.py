"""type.fit quotes source."""

from typing import Any, Optional

from daily_quotes.adapters.sources.base import HttpQuoteSource
from daily_quotes.core import Quote, SourceUnavailable
from daily_quotes.core.normalization import build_quote


class TypeFitSource(HttpQuoteSource):
    """Pick from the full type.fit quote list.
    
    Authors come as "Name, type.fit" or just "type.fit"; normalization
    strips the suffix and maps the bare sentinel to "Unknown".
    """
    
    name = "typefit"
    direct_base = "https://type.fit/api"
    
    async def fetch_quote(self, constraint: Optional[str] = None) -> Quote:
        records = self._expect(await self._get_json("/quotes"), list, "/quotes")
        return self._pick(self._normalize_many(records), constraint)
    
    def normalize(self, record: Any) -> Quote:
        if not isinstance(record, dict):
            raise SourceUnavailable(self.name, "quote record is not an object")
        return build_quote(self.name, content=record.get("text"), author=record.get("author"))
