from fastapi import APIRouter, HTTPException, Depends
from exofinder.schemas import PlanetResponse, PlanetWithStarResponse
from exofinder.services import CatalogService
from exofinder.database import get_db
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=List[PlanetWithStarResponse])
async def list_planets(db: Session = Depends(get_db)):
    """
    Lists every planet with the name of its host star.
    """
    try:
        rows = CatalogService(db).list_planets()
    except SQLAlchemyError as e:
        logger.error("Error fetching planets: %s", e)
        raise HTTPException(status_code=500, detail="Database Error")

    return [
        PlanetWithStarResponse(
            **PlanetResponse.model_validate(planet).model_dump(),
            star_name=star_name
        )
        for planet, star_name in rows
    ]
