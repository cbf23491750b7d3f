from fastapi import APIRouter, HTTPException, Query, Depends
from exofinder.schemas import StarResponse, PlanetResponse, StarDetailResponse
from exofinder.services import CatalogService
from exofinder.database import get_db
from exofinder.settings import Settings, get_settings
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=List[StarResponse])
async def list_stars(
    search: Optional[str] = Query(default=None, description="Case-insensitive substring of the star name"),
    page: int = Query(default=1, ge=1, description="Page number (50 stars per page)"),
    all_stars: bool = Query(default=False, alias="all", description="Return every matching star"),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """
    Lists stars, optionally filtered by name.

    Results are paginated by the configured page size unless `all=true`.
    """
    try:
        catalog = CatalogService(db)
        return catalog.list_stars(
            search=search,
            page=page,
            page_size=settings.page_size,
            all=all_stars
        )
    except SQLAlchemyError as e:
        logger.error("Error fetching stars: %s", e)
        raise HTTPException(status_code=500, detail="Database Error")

@router.get("/{star_id}", response_model=StarDetailResponse)
async def get_star_detail(
    star_id: int,
    db: Session = Depends(get_db)
):
    """
    Gets one star together with every planet orbiting it.
    """
    try:
        result = CatalogService(db).get_star_with_planets(star_id)
    except SQLAlchemyError as e:
        logger.error("Error fetching star %s: %s", star_id, e)
        raise HTTPException(status_code=500, detail="Database Error")

    if result is None:
        raise HTTPException(status_code=404, detail=f"Star {star_id} not found")

    star, planets = result
    return StarDetailResponse(
        star=StarResponse.model_validate(star),
        planets=[PlanetResponse.model_validate(planet) for planet in planets]
    )
