from .record import CatalogRecord
from .loader import LoadSummary, RecordOutcome
from .catalog import (
    StarResponse, PlanetResponse, PlanetWithStarResponse,
    StarDetailResponse, CatalogStatsResponse
)

__all__ = [
    "CatalogRecord",
    "LoadSummary", "RecordOutcome",
    "StarResponse", "PlanetResponse", "PlanetWithStarResponse",
    "StarDetailResponse", "CatalogStatsResponse"
]
