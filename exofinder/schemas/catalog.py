from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class StarResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Star id")
    name: str = Field(..., description="Star name")
    spectral_type: str = Field(..., description="Spectral type")
    temperature_k: Optional[float] = Field(None, description="Effective temperature (K)")
    distance_ly: Optional[float] = Field(None, description="Distance (light years)")
    ra: Optional[float] = Field(None, description="Right ascension (deg)")
    dec_deg: Optional[float] = Field(None, description="Declination (deg)")
    v_mag: Optional[float] = Field(None, description="Apparent V magnitude")

class PlanetResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Planet id")
    name: str = Field(..., description="Planet name")
    star_id: int = Field(..., description="Host star id")
    mass_jup: Optional[float] = Field(None, description="Mass (Jupiter masses)")
    radius_jup: Optional[float] = Field(None, description="Radius (Jupiter radii)")
    orbital_period_days: Optional[float] = Field(None, description="Orbital period (days)")
    is_habitable: bool = Field(..., description="Goldilocks heuristic")

class PlanetWithStarResponse(PlanetResponse):
    star_name: str = Field(..., description="Host star name")

class StarDetailResponse(BaseModel):
    star: StarResponse = Field(..., description="The star")
    planets: List[PlanetResponse] = Field(..., description="Planets orbiting the star")

class CatalogStatsResponse(BaseModel):
    total_stars: int = Field(..., description="Number of stars")
    total_planets: int = Field(..., description="Number of planets")
    habitable_planets: int = Field(..., description="Planets flagged habitable")
