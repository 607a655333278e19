"""Error taxonomy for quote fetching."""

from typing import Optional

from daily_quotes.core.entities import Quote


class QuoteError(Exception):
    """Base class for quote fetching errors."""


class SourceUnavailable(QuoteError):
    """One upstream attempt failed (network, timeout, status, payload, empty result)."""
    
    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class DuplicateCandidate(QuoteError):
    """Candidate quote collides with the recent-history window."""
    
    def __init__(self, quote: Quote, source: str = "") -> None:
        self.quote = quote
        self.source = source
        super().__init__(f"{source or 'source'} returned recently seen quote {quote.id}")


class ChainExhausted(QuoteError):
    """Every source failed or answered with a duplicate."""
    
    def __init__(self, attempts: list[QuoteError]) -> None:
        self.attempts = attempts
        self.failures = [a for a in attempts if isinstance(a, SourceUnavailable)]
        self.duplicates = [a for a in attempts if isinstance(a, DuplicateCandidate)]
        self.last_error: Optional[QuoteError] = attempts[-1] if attempts else None
        detail = str(self.last_error) if self.last_error else "no sources configured"
        super().__init__(
            f"All quote sources exhausted "
            f"({len(self.failures)} failed, {len(self.duplicates)} duplicates). Last error: {detail}"
        )


class PoolConfigurationError(QuoteError):
    """The local quote pool is empty or inconsistent."""
