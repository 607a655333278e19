"""Favorites storage adapters."""

from daily_quotes.adapters.favorites.yaml_store import YamlFavoritesStore

__all__ = ["YamlFavoritesStore"]
