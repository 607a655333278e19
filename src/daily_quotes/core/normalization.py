"""Normalization of provider payloads into canonical quotes."""

import hashlib
from typing import Any, Iterable, Optional

from daily_quotes.core.entities import Quote
from daily_quotes.core.errors import SourceUnavailable

UNKNOWN_AUTHOR = "Unknown"

# Placeholder authors some providers emit instead of a real name
AUTHOR_SENTINELS = frozenset({
    "",
    "unknown",
    "type.fit",
    "zenquotes.io",
    "null",
    "none",
})


def normalize_author(raw: Any, sentinels: Iterable[str] = AUTHOR_SENTINELS) -> str:
    """Map provider author values onto a display name.
    
    Sentinel values become ``"Unknown"``. Attribution suffixes such as
    ``"Albert Einstein, type.fit"`` are stripped.
    """
    if raw is None:
        return UNKNOWN_AUTHOR
    
    sentinel_set = {s.lower() for s in sentinels}
    author = str(raw).strip()
    
    if "," in author:
        name, _, suffix = author.rpartition(",")
        if suffix.strip().lower() in sentinel_set:
            author = name.strip()
    
    if author.lower() in sentinel_set:
        return UNKNOWN_AUTHOR
    return author


def normalize_tags(raw: Optional[Iterable[Any]]) -> frozenset[str]:
    """Lowercase, strip and de-duplicate tag labels."""
    if not raw:
        return frozenset()
    if isinstance(raw, str):
        raw = [raw]
    tags = (str(tag).strip().lower() for tag in raw if tag is not None)
    return frozenset(tag for tag in tags if tag)


def synthesize_id(source: str, content: str, author: str) -> str:
    """Stable id for providers that don't supply one."""
    digest = hashlib.sha1(f"{content.strip()}|{author.strip()}".encode("utf-8")).hexdigest()
    return f"{source}:{digest[:12]}"


def build_quote(
    source: str,
    content: Any,
    author: Any,
    upstream_id: Any = None,
    tags: Optional[Iterable[Any]] = None,
) -> Quote:
    """Build a Quote from raw provider fields.
    
    Raises:
        SourceUnavailable: if the payload has no usable content
    """
    if not isinstance(content, str) or not content.strip():
        raise SourceUnavailable(source, "payload has no quote content")
    
    text = content.strip()
    name = normalize_author(author)
    
    if upstream_id is not None and str(upstream_id).strip():
        quote_id = f"{source}:{str(upstream_id).strip()}"
    else:
        quote_id = synthesize_id(source, text, name)
    
    return Quote(id=quote_id, content=text, author=name, tags=normalize_tags(tags))
