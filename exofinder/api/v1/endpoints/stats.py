from fastapi import APIRouter, HTTPException, Depends
from exofinder.schemas import CatalogStatsResponse
from exofinder.services import CatalogService
from exofinder.database import get_db
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

router = APIRouter()

@router.get("", response_model=CatalogStatsResponse)
async def get_catalog_stats(db: Session = Depends(get_db)):
    """Star, planet and habitable planet counts"""
    try:
        return CatalogStatsResponse(**CatalogService(db).get_catalog_stats())
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Database Error")
