"""Business logic use cases."""

import asyncio
import random
from typing import Optional

from daily_quotes.core import (
    ChainExhausted,
    DuplicateCandidate,
    LocalQuotePool,
    Quote,
    QuoteResult,
    QuoteSource,
    RecentHistory,
    SearchResult,
    SourceChain,
    SourceUnavailable,
)
from daily_quotes.observability import get_logger

logger = get_logger(__name__)


class QuoteService:
    """Dedup & fallback policy around the source chain.

    ``resolve`` and ``search`` always produce a result: live sources are
    tried first, the local pool is the last resort. The recent-history
    window is owned by this instance and mutated only by one call at a time.
    """

    def __init__(
        self,
        chain: SourceChain,
        pool: Optional[LocalQuotePool] = None,
        history: Optional[RecentHistory] = None,
        accept_duplicates_when_exhausted: bool = True,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.chain = chain
        self.pool = pool if pool is not None else LocalQuotePool()
        self.history = history if history is not None else RecentHistory()
        self.accept_duplicates_when_exhausted = accept_duplicates_when_exhausted
        self.rng = rng or random.Random()
        self._lock = asyncio.Lock()

    async def resolve(self, tag: Optional[str] = None) -> QuoteResult:
        """Get a quote, optionally narrowed by tag or keyword.

        Returns:
            QuoteResult with ``degraded`` set when served from the local pool
        """
        constraint = (tag or "").strip() or None

        async with self._lock:
            try:
                quote, source = await self.chain.fetch_quote(constraint, accept=self._reject_seen)
            except ChainExhausted as e:
                return self._recover(e, constraint)

            self.history.mark_seen(quote)
            logger.info("quote_resolved", source=source.name, quote_id=quote.id)
            return QuoteResult(quote=quote, degraded=False)

    async def search(self, query: str) -> SearchResult:
        """Find a quote by free text.

        The primary source is asked once if it supports server-side search;
        otherwise the local pool is scanned. A blank query behaves as resolve().
        """
        text = (query or "").strip()
        if not text:
            result = await self.resolve()
            return SearchResult(quote=result.quote, degraded=result.degraded)

        primary = self.chain.primary
        if primary is not None and primary.supports_search:
            try:
                quote = await self._search_upstream(primary, text)
            except SourceUnavailable as e:
                logger.warning("search_failed", source=primary.name, error=e.reason)
            else:
                logger.info("search_resolved", source=primary.name, quote_id=quote.id)
                return SearchResult(quote=quote, degraded=False)

        hits = self.pool.matches(text)
        if not hits:
            logger.info("search_no_results", query=text)
            return SearchResult(quote=None, degraded=True)

        return SearchResult(quote=self.rng.choice(hits), degraded=True)

    async def _search_upstream(self, source: QuoteSource, query: str) -> Quote:
        try:
            return await asyncio.wait_for(source.search(query), timeout=self.chain.timeout)
        except SourceUnavailable:
            raise
        except asyncio.TimeoutError:
            raise SourceUnavailable(source.name, f"search timed out after {self.chain.timeout}s")
        except Exception as e:
            raise SourceUnavailable(source.name, f"{type(e).__name__}: {e}") from e

    def _reject_seen(self, quote: Quote, source: QuoteSource) -> None:
        if self.history.is_seen(quote):
            raise DuplicateCandidate(quote, source.name)

    def _recover(self, exhausted: ChainExhausted, constraint: Optional[str]) -> QuoteResult:
        """Handle a chain that produced nothing acceptable."""
        # Every source that answered repeated itself: the reachable pool is used up
        if self.accept_duplicates_when_exhausted and exhausted.duplicates and not exhausted.failures:
            duplicate = exhausted.duplicates[0]
            self.history.mark_seen(duplicate.quote)
            logger.info("duplicate_accepted", source=duplicate.source, quote_id=duplicate.quote.id)
            return QuoteResult(quote=duplicate.quote, degraded=False)

        logger.info("local_fallback", reason=str(exhausted.last_error), constraint=constraint)
        return self._pick_local(constraint)

    def _pick_local(self, constraint: Optional[str]) -> QuoteResult:
        candidates = self.pool.matches(constraint)
        filter_missed = False

        if not candidates:
            logger.info("local_filter_missed", constraint=constraint)
            candidates = self.pool.matches(None)
            filter_missed = True

        fresh, recent_count = self.history.filter_unseen(candidates)
        if not fresh:
            # Every candidate was served recently
            self.history.reset()
            logger.info("history_reset", skipped=recent_count, **self.history.get_stats())
            fresh = candidates

        quote = self.rng.choice(fresh)
        self.history.mark_seen(quote)
        return QuoteResult(quote=quote, degraded=True, filter_missed=filter_missed)
