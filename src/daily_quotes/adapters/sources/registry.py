"""Build the configured source chain."""

import random
from typing import Optional

import httpx

from daily_quotes.adapters.sources.base import HttpQuoteSource
from daily_quotes.adapters.sources.dummyjson_source import DummyJSONSource
from daily_quotes.adapters.sources.quotable_source import QuotableSource
from daily_quotes.adapters.sources.typefit_source import TypeFitSource
from daily_quotes.adapters.sources.zenquotes_source import ZenQuotesSource
from daily_quotes.config import Settings

SOURCE_CLASSES: dict[str, type[HttpQuoteSource]] = {
    cls.name: cls
    for cls in (QuotableSource, ZenQuotesSource, DummyJSONSource, TypeFitSource)
}


def build_sources(
    settings: Settings,
    rng: Optional[random.Random] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> list[HttpQuoteSource]:
    """Instantiate enabled sources in configured priority order."""
    sources = []
    for name in settings.sources.enabled:
        cls = SOURCE_CLASSES[name]
        sources.append(
            cls(
                base_url=settings.transport.base_url_for(name, cls.direct_base),
                timeout=settings.transport.timeout,
                verify_tls=settings.transport.verify_tls,
                rng=rng,
                transport=transport,
            )
        )
    return sources
