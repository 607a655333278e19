"""ZenQuotes source."""

from typing import Any, Optional

from daily_quotes.adapters.sources.base import HttpQuoteSource
from daily_quotes.core import Quote, SourceUnavailable
from daily_quotes.core.normalization import build_quote

RATE_LIMIT_AUTHOR = "zenquotes.io"


class ZenQuotesSource(HttpQuoteSource):
    """Fetch quotes from zenquotes.io.
    
    The free API has no tag filter, so constrained requests fetch the
    batch endpoint and filter locally. ZenQuotes gives no stable id; ids
    are content hashes.
    """
    
    name = "zenquotes"
    direct_base = "https://zenquotes.io/api"
    
    async def fetch_quote(self, constraint: Optional[str] = None) -> Quote:
        """Random quote, or a random match from the current batch."""
        if not constraint:
            records = self._expect(await self._get_json("/random"), list, "/random")
            quotes = [self.normalize(record) for record in records[:1]]
            return self._pick(quotes, None)
        
        records = self._expect(await self._get_json("/quotes"), list, "/quotes")
        return self._pick(self._normalize_many(records), constraint)
    
    def normalize(self, record: Any) -> Quote:
        if not isinstance(record, dict):
            raise SourceUnavailable(self.name, "quote record is not an object")
        
        # Throttled clients get a pseudo-quote signed by the site itself
        author = str(record.get("a") or "").strip().lower()
        content = str(record.get("q") or "")
        if author == RATE_LIMIT_AUTHOR and content.lower().startswith("too many requests"):
            raise SourceUnavailable(self.name, "rate limited")
        
        return build_quote(self.name, content=record.get("q"), author=record.get("a"))
