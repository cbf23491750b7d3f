from fastapi import APIRouter
from exofinder.api.v1.endpoints import (
    stars,
    planets,
    stats
)

api_router = APIRouter(prefix="/v1")

api_router.include_router(
    stars.router,
    prefix="/stars",
    tags=["Stars"]
)

api_router.include_router(
    planets.router,
    prefix="/planets",
    tags=["Planets"]
)

api_router.include_router(
    stats.router,
    prefix="/stats",
    tags=["Catalog Statistics"]
)
