"""Source Chain Executor: ordered, short-circuiting attempts over quote sources."""

import asyncio
from typing import Callable, Optional, Sequence

from daily_quotes.core.entities import Quote
from daily_quotes.core.errors import (
    ChainExhausted,
    DuplicateCandidate,
    QuoteError,
    SourceUnavailable,
)
from daily_quotes.core.interfaces import QuoteSource
from daily_quotes.observability import get_logger

logger = get_logger(__name__)

# Raises DuplicateCandidate to reject a candidate
AcceptCheck = Callable[[Quote, QuoteSource], None]

DEFAULT_TIMEOUT = 8.0


class SourceChain:
    """Try sources in priority order until one yields an accepted quote.
    
    Each source gets exactly one attempt per call, bounded by ``timeout``.
    """
    
    def __init__(self, sources: Sequence[QuoteSource], timeout: float = DEFAULT_TIMEOUT) -> None:
        if timeout <= 0:
            raise ValueError("Source timeout must be positive")
        self._sources = tuple(sources)
        self.timeout = timeout
    
    @property
    def sources(self) -> tuple[QuoteSource, ...]:
        return self._sources
    
    @property
    def primary(self) -> Optional[QuoteSource]:
        """Highest-priority source, if any."""
        return self._sources[0] if self._sources else None
    
    async def fetch_quote(
        self,
        constraint: Optional[str] = None,
        accept: Optional[AcceptCheck] = None,
    ) -> tuple[Quote, QuoteSource]:
        """Return the first accepted candidate and the source that produced it.
        
        Raises:
            ChainExhausted: if no source produced an accepted candidate
        """
        attempts: list[QuoteError] = []
        
        for priority, source in enumerate(self._sources, 1):
            logger.debug("source_attempt", source=source.name, priority=priority, constraint=constraint)
            
            try:
                quote = await self._attempt(source, constraint)
                if accept is not None:
                    accept(quote, source)
            except SourceUnavailable as e:
                logger.warning("source_failed", source=source.name, error=e.reason)
                attempts.append(e)
                continue
            except DuplicateCandidate as e:
                logger.debug("source_duplicate", source=source.name, quote_id=e.quote.id)
                attempts.append(e)
                continue
            
            logger.debug("source_succeeded", source=source.name, quote_id=quote.id)
            return quote, source
        
        raise ChainExhausted(attempts)
    
    async def _attempt(self, source: QuoteSource, constraint: Optional[str]) -> Quote:
        """Run one bounded attempt, mapping every failure to SourceUnavailable."""
        try:
            return await asyncio.wait_for(source.fetch_quote(constraint), timeout=self.timeout)
        except SourceUnavailable:
            raise
        except asyncio.TimeoutError:
            raise SourceUnavailable(source.name, f"timed out after {self.timeout}s")
        except Exception as e:
            raise SourceUnavailable(source.name, f"{type(e).__name__}: {e}") from e
