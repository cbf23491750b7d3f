from pydantic import BaseModel, Field
from typing import Optional

class CatalogRecord(BaseModel):
    """One parsed source row: a planet and its host star"""
    host_name: str = Field(..., min_length=1, description="Host star name")
    planet_name: str = Field(..., min_length=1, description="Planet name")

    # Star
    spectral_type: str = Field(default="Unknown", description="Spectral type")
    temperature_k: Optional[float] = Field(default=None, description="Effective temperature (K)")
    distance_ly: Optional[float] = Field(default=None, description="Distance (light years)")
    ra: Optional[float] = Field(default=None, description="Right ascension (deg)")
    dec_deg: Optional[float] = Field(default=None, description="Declination (deg)")
    v_mag: Optional[float] = Field(default=None, description="Apparent V magnitude")

    # Planet
    mass_jup: Optional[float] = Field(default=None, description="Mass (Jupiter masses)")
    radius_jup: Optional[float] = Field(default=None, description="Radius (Jupiter radii)")
    orbital_period_days: Optional[float] = Field(default=None, description="Orbital period (days)")
    equilibrium_temp_k: Optional[float] = Field(default=None, description="Equilibrium temperature (K)")
    is_habitable: bool = Field(default=False, description="Goldilocks heuristic")
