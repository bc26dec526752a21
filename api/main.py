"""List Pages FastAPI Application."""

from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from api.config import get_settings
from api.routers import facets, lists
from config import config
from config.constants import INDEX_TABLE
from config.logging_config import get_logger, setup_logging

settings = get_settings()
setup_logging(log_level=config.app.log_level, log_file=config.app.log_file)
logger = get_logger("api")

STATIC_DIR = Path(__file__).parent / "static"

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="API for list pages filtered by date facets",
)


class CacheHeaderMiddleware(BaseHTTPMiddleware):
    """Middleware to add Cache-Control headers to responses."""

    # Responses that do not depend on the query string
    CACHEABLE_PATHS = {
        "/api/facets/": 300,
        "/static/": 3600,
    }

    # Widgets and list pages vary with the active filters
    UNCACHEABLE_SUFFIXES = ("/widget", "/state", "/default-value-form")

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        if request.method != "GET":
            return response

        path = request.url.path
        max_age = None
        if not path.endswith(self.UNCACHEABLE_SUFFIXES):
            for cacheable_path, age in self.CACHEABLE_PATHS.items():
                if path.startswith(cacheable_path):
                    max_age = age
                    break

        if max_age is not None:
            response.headers["Cache-Control"] = f"public, max-age={max_age}"
        else:
            response.headers["Cache-Control"] = "no-cache"

        return response


app.add_middleware(CacheHeaderMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(facets.router, prefix="/api/facets", tags=["Facets"])
app.include_router(lists.router, prefix="/api/lists", tags=["Lists"])

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "endpoints": {
            "facets": "/api/facets",
            "lists": "/api/lists/{entity_type}/{bundle}",
            "widget_script": "/static/date_widget.js",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    from api.services.database import get_db

    try:
        db = get_db()
        if not db.has_index():
            return {
                "status": "unhealthy",
                "database": "connected",
                "error": f"Table {INDEX_TABLE} not found",
            }
        count = db.fetch_one(f"SELECT COUNT(*) FROM {INDEX_TABLE}")[0]
        return {
            "status": "healthy",
            "database": "connected",
            "indexed_items": count,
        }
    except Exception as e:
        logger.warning(f"Health check failed: {e}")
        return {
            "status": "unhealthy",
            "database": "disconnected",
            "error": str(e),
        }
