"""Application entry point for the Fitness Plan API.

Defines the FastAPI app with CORS, request logging, the error envelope
handlers and the plan/catalog routers. Tables are created and the bundled
catalogs seeded when the app starts serving.
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session

from api.catalog import router as catalog_router
from api.plans import router as plans_router
from core.error_handlers import register_exception_handlers
from core.exceptions import DatabaseError
from core.logger import get_logger
from database import init_db
from database.deps import get_db_read

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Catalog tables ready")
    yield


app = FastAPI(title="Fitness Plan API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log each request with its response status."""
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("%s %s failed", request.method, request.url.path)
        raise
    logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
    return response


@app.get("/health")
def health(db: Session = Depends(get_db_read)):
    """Report service status and catalog database connectivity.

    Raises:
        DatabaseError: If the database cannot be queried.
    """
    try:
        db.execute(text("SELECT 1"))
    except Exception as exc:
        logger.exception("Health check failed")
        raise DatabaseError(f"Database health check failed: {exc}", operation="health")
    return {"status": "healthy", "database": "connected"}


app.include_router(plans_router)
app.include_router(catalog_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
