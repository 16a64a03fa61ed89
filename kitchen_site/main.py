from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import uvicorn

from kitchen_site.api.endpoints import contact, pages
from kitchen_site.core.config import settings
from kitchen_site.core.logging import setup_logging
import logging

setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{settings.PROJECT_NAME} website starting")
    yield
    logger.info(f"{settings.PROJECT_NAME} website shutting down")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Marketing website and contact form for Rakshan Kitchen",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    debug=settings.DEBUG,
)

app.include_router(pages.router, tags=["pages"])

app.include_router(
    contact.router,
    prefix=settings.API_STR,
    tags=["contact"],
)


@app.get(f"{settings.API_STR}/status", tags=["status"])
async def root():
    return {"status": "online", "service": settings.PROJECT_NAME}


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "path": str(request.url)},
    )


if __name__ == "__main__":
    uvicorn.run(
        "kitchen_site.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
