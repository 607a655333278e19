"""Core domain layer."""

from daily_quotes.core.chain import SourceChain
from daily_quotes.core.entities import Quote, QuoteResult, SearchResult
from daily_quotes.core.errors import (
    ChainExhausted,
    DuplicateCandidate,
    PoolConfigurationError,
    QuoteError,
    SourceUnavailable,
)
from daily_quotes.core.interfaces import QuoteSource
from daily_quotes.core.local_pool import LOCAL_QUOTES, LocalQuotePool
from daily_quotes.core.matching import filter_quotes, matches_query
from daily_quotes.core.recent_history import RecentHistory

__all__ = [
    "Quote",
    "QuoteResult",
    "SearchResult",
    "QuoteSource",
    "SourceChain",
    "RecentHistory",
    "LocalQuotePool",
    "LOCAL_QUOTES",
    "matches_query",
    "filter_quotes",
    "QuoteError",
    "SourceUnavailable",
    "DuplicateCandidate",
    "ChainExhausted",
    "PoolConfigurationError",
]
