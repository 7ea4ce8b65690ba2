from src.player_catalog.filtering import (
    PlayerFilter,
    SortConfig,
    apply_view,
    filter_players,
    search_players,
    sort_players,
)
from src.player_catalog.ingestion import (
    IngestionError,
    PlayerCatalogIngester,
    catalog_from_records,
    load_catalog,
)
from src.player_catalog.models import Player, PlayerStats

__all__ = [
    "IngestionError",
    "Player",
    "PlayerCatalogIngester",
    "PlayerFilter",
    "PlayerStats",
    "SortConfig",
    "apply_view",
    "catalog_from_records",
    "filter_players",
    "load_catalog",
    "search_players",
    "sort_players",
]
