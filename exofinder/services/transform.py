"""
Row transforms for the catalog loader.

Maps NASA Exoplanet Archive columns to a CatalogRecord and derives the
light-year distance and the habitability flag.
"""
import math
from typing import Any, Dict, Mapping, Optional

import pandas as pd
from pydantic import ValidationError

from exofinder.schemas import CatalogRecord
from .exceptions import MalformedRowError

# 1 parsec = 3.262 light years
PARSEC_TO_LIGHT_YEARS = 3.262

# Rocky planet in the liquid-water band
HABITABLE_MAX_RADIUS_JUP = 0.25
HABITABLE_MIN_TEMP_K = 200
HABITABLE_MAX_TEMP_K = 320

DEFAULT_SPECTRAL_TYPE = "Unknown"

# Source column -> CatalogRecord field
COLUMN_MAPPING = {
    "hostname": "host_name",
    "pl_name": "planet_name",
    "st_spectype": "spectral_type",
    "st_teff": "temperature_k",
    "sy_dist": "distance_pc",
    "ra": "ra",
    "dec": "dec_deg",
    "sy_vmag": "v_mag",
    "pl_bmassj": "mass_jup",
    "pl_radj": "radius_jup",
    "pl_orbper": "orbital_period_days",
    "pl_eqt": "equilibrium_temp_k",
}

TEXT_FIELDS = {"host_name", "planet_name", "spectral_type"}


def parse_float(value: Any) -> Optional[float]:
    """
    Parse a numeric cell; missing or unparseable values become None.

    Parsing is strict: the whole cell must be a number, so "12abc" is
    missing rather than 12. NaN and infinities are missing too.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    elif pd.isna(value):
        return None

    try:
        number = float(value)
    except (ValueError, TypeError):
        return None

    if not math.isfinite(number):
        return None
    return number


def parse_text(value: Any) -> Optional[str]:
    """
    Strip surrounding whitespace; blank cells become None. Star and planet
    names are stored, and matched for de-duplication, in this stripped form.
    """
    if value is None:
        return None
    if not isinstance(value, str) and pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def parsecs_to_light_years(parsecs: Optional[float]) -> Optional[float]:
    if parsecs is None:
        return None
    return round(parsecs * PARSEC_TO_LIGHT_YEARS, 2)


def is_habitable(radius_jup: Optional[float], equilibrium_temp_k: Optional[float]) -> bool:
    """
    Goldilocks heuristic: small (rocky) planet with an equilibrium
    temperature inside the liquid-water band. Missing inputs are never
    habitable.
    """
    if radius_jup is None or equilibrium_temp_k is None:
        return False
    return (
        radius_jup < HABITABLE_MAX_RADIUS_JUP
        and HABITABLE_MIN_TEMP_K <= equilibrium_temp_k <= HABITABLE_MAX_TEMP_K
    )


def parse_catalog_row(row: Mapping[str, Any], row_number: int = None) -> CatalogRecord:
    """
    Convert one raw source row into a CatalogRecord.

    Raises
    ------
    MalformedRowError
        If the host star name or the planet name is missing.
    """
    values: Dict[str, Any] = {}
    for source_col, field in COLUMN_MAPPING.items():
        raw = row.get(source_col)
        if field in TEXT_FIELDS:
            values[field] = parse_text(raw)
        else:
            values[field] = parse_float(raw)

    missing = [name for name in ("host_name", "planet_name") if values[name] is None]
    if missing:
        raise MalformedRowError(
            f"Row {row_number if row_number is not None else '?'} is missing {', '.join(missing)}",
            row_number=row_number,
        )

    distance_pc = values.pop("distance_pc")
    values["distance_ly"] = parsecs_to_light_years(distance_pc)
    values["spectral_type"] = values["spectral_type"] or DEFAULT_SPECTRAL_TYPE
    values["is_habitable"] = is_habitable(values["radius_jup"], values["equilibrium_temp_k"])

    try:
        return CatalogRecord(**values)
    except ValidationError as exc:
        raise MalformedRowError(str(exc), row_number=row_number) from exc
