from .exceptions import CatalogError, MalformedRowError, StoreUnavailableError
from .catalog_loader import CatalogLoader, read_catalog_csv
from .catalog_service import CatalogService

__all__ = [
    "CatalogError", "MalformedRowError", "StoreUnavailableError",
    "CatalogLoader", "read_catalog_csv",
    "CatalogService"
]
