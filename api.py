from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI
from exofinder.api.router import api_router
from exofinder.database import init_database
from exofinder.settings import settings, configure_logging
import logging

configure_logging(settings.log_level)
logger = logging.getLogger("exofinder.api")

app = FastAPI(
    title="ExoFinder Catalog API",
    description="""
    🔭 **Star and planet catalog built from the NASA Exoplanet Archive**

    Read-only access to the catalog loaded by the seeding pipeline (`seeds.py`).

    ## 🛠 **Available Endpoints:**

    - **`/api/v1/stars`** - Search stars by name, 50 per page (`all=true` for everything)
    - **`/api/v1/stars/{star_id}`** - One star with all of its planets
    - **`/api/v1/planets`** - Every planet with its host star name
    - **`/api/v1/stats`** - Catalog counts
    """,
    version="1.0.0",
    docs_url="/docs" if settings.enable_docs else None,
    redoc_url="/redoc" if settings.enable_redoc else None
)

app.add_middleware(
    CORSMiddleware,
    **settings.get_cors_config()
)

app.include_router(api_router, prefix="/api")

# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    logger.info("🚀 Initializing database...")
    init_database()
    logger.info("✅ Database initialized successfully!")

@app.get("/")
async def root():
    return {
        "message": "ExoFinder Backend is Linked Now! 🚀",
        "version": "1.0.0",
        "status": "operational",
        "endpoints": {
            "stars": "/api/v1/stars",
            "star_detail": "/api/v1/stars/{star_id}",
            "planets": "/api/v1/planets",
            "stats": "/api/v1/stats"
        },
        "documentation": "/docs"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level,
        reload=settings.api_reload
    )
