"""Shared HTTP plumbing for upstream quote sources."""

import random
from abc import abstractmethod
from typing import Any, Optional

import httpx

from daily_quotes.core import Quote, QuoteSource, SourceUnavailable, filter_quotes


class HttpQuoteSource(QuoteSource):
    """Base for JSON-over-HTTP providers.
    
    Every request gets its own client and a bounded timeout. Transport
    errors, non-2xx statuses and undecodable bodies become SourceUnavailable.
    """
    
    name = "http"
    direct_base = ""
    
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 8.0,
        verify_tls: bool = True,
        rng: Optional[random.Random] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or self.direct_base).rstrip("/")
        self.timeout = timeout
        self.verify_tls = verify_tls
        self.rng = rng or random.Random()
        self.transport = transport
    
    async def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        """GET ``{base_url}{path}`` and decode the JSON body."""
        url = f"{self.base_url}{path}"
        
        async with httpx.AsyncClient(
            timeout=self.timeout,
            verify=self.verify_tls,
            follow_redirects=True,
            transport=self.transport,
            headers={"Accept": "application/json"},
        ) as client:
            try:
                response = await client.get(url, params=params)
            except httpx.HTTPError as e:
                raise SourceUnavailable(self.name, f"request failed: {type(e).__name__}: {e}") from e
        
        if response.status_code != 200:
            raise SourceUnavailable(self.name, f"HTTP {response.status_code} for {path}")
        
        try:
            return response.json()
        except ValueError as e:
            raise SourceUnavailable(self.name, f"malformed JSON body: {e}") from e
    
    def _pick(self, quotes: list[Quote], constraint: Optional[str]) -> Quote:
        """Pick a random quote, narrowing client-side when a constraint is given."""
        if constraint:
            quotes = filter_quotes(quotes, constraint)
        if not quotes:
            detail = f" matching '{constraint}'" if constraint else ""
            raise SourceUnavailable(self.name, f"no quotes{detail}")
        return self.rng.choice(quotes)
    
    def _expect(self, data: Any, kind: type, what: str) -> Any:
        if not isinstance(data, kind):
            raise SourceUnavailable(
                self.name, f"unexpected payload for {what}: {type(data).__name__}"
            )
        return data
    
    def _normalize_many(self, records: list[Any]) -> list[Quote]:
        """Normalize a batch, skipping records that don't normalize."""
        quotes = []
        for record in records:
            try:
                quotes.append(self.normalize(record))
            except SourceUnavailable:
                continue
        return quotes
    
    @abstractmethod
    def normalize(self, record: Any) -> Quote:
        """Map one native record onto a Quote."""
        pass
