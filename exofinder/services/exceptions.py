class CatalogError(Exception):
    """Base error for the catalog services"""


class MalformedRowError(CatalogError):
    """A source row lacks the host star or planet name"""

    def __init__(self, message: str, row_number: int = None):
        super().__init__(message)
        self.row_number = row_number


class StoreUnavailableError(CatalogError):
    """The backing store failed; the run cannot continue"""
