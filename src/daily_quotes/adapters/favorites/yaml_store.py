"""Favorites list persisted as a YAML document."""

import random
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import yaml

from daily_quotes.core import Quote
from daily_quotes.observability import get_logger

logger = get_logger(__name__)


class YamlFavoritesStore:
    """Ordered favorites list keyed by quote id, newest first."""
    
    def __init__(self, path: Path) -> None:
        self.path = path
    
    def items(self) -> list[Quote]:
        """Load favorites; a missing or unreadable file is an empty list."""
        if not self.path.exists():
            return []
        
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return [Quote.from_dict(entry) for entry in data.get("favorites", [])]
        except (OSError, yaml.YAMLError, AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("favorites_unreadable", path=str(self.path), error=str(e))
            return []
    
    def contains(self, quote_id: str) -> bool:
        return any(quote.id == quote_id for quote in self.items())
    
    def add(self, quote: Quote) -> None:
        """Add a quote at the front; no-op if already saved."""
        favorites = self.items()
        if any(f.id == quote.id for f in favorites):
            return
        self._save([quote, *favorites])
    
    def remove(self, quote_id: str) -> bool:
        """Remove by id. Returns False if it wasn't saved."""
        favorites = self.items()
        remaining = [f for f in favorites if f.id != quote_id]
        if len(remaining) == len(favorites):
            return False
        self._save(remaining)
        return True
    
    def clear(self) -> None:
        self._save([])
    
    def random_pick(self, rng: Optional[random.Random] = None) -> Optional[Quote]:
        favorites = self.items()
        if not favorites:
            return None
        return (rng or random).choice(favorites)
    
    def _save(self, favorites: list[Quote]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        
        document = {
            "updated_at": datetime.now(timezone.utc).isoformat(),
            "favorites": [quote.to_dict() for quote in favorites],
        }
        
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.dump(document, f, allow_unicode=True, default_flow_style=False, sort_keys=False)
