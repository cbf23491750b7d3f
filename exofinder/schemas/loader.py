from enum import Enum
from pydantic import BaseModel, Field

class RecordOutcome(str, Enum):
    PLANET_INSERTED = "planet_inserted"
    PLANET_SKIPPED = "planet_skipped"
    ROW_SKIPPED = "row_skipped"

class LoadSummary(BaseModel):
    """Counters for one loader run"""
    rows_total: int = Field(default=0, description="Rows read from the source")
    stars_created: int = Field(default=0, description="New star rows")
    stars_reused: int = Field(default=0, description="Rows whose star already existed")
    planets_created: int = Field(default=0, description="New planet rows")
    planets_skipped: int = Field(default=0, description="Duplicate planets skipped")
    rows_skipped: int = Field(default=0, description="Malformed rows skipped")

    @property
    def inserts(self) -> int:
        return self.stars_created + self.planets_created
