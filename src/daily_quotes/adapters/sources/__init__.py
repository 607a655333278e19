"""Source adapters for fetching quotes."""

from daily_quotes.adapters.sources.base import HttpQuoteSource
from daily_quotes.adapters.sources.dummyjson_source import DummyJSONSource
from daily_quotes.adapters.sources.quotable_source import QuotableSource
from daily_quotes.adapters.sources.registry import SOURCE_CLASSES, build_sources
from daily_quotes.adapters.sources.typefit_source import TypeFitSource
from daily_quotes.adapters.sources.zenquotes_source import ZenQuotesSource

__all__ = [
    "HttpQuoteSource",
    "QuotableSource",
    "ZenQuotesSource",
    "DummyJSONSource",
    "TypeFitSource",
    "SOURCE_CLASSES",
    "build_sources",
]
