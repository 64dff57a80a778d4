"""
HMPI FastAPI Application

Main entry point for the heavy metal pollution assessment API.
"""
import logging
from datetime import datetime, timezone
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .models.schemas import HealthResponse
from .api.routes import hmpi, quality, standards

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}...")
    yield
    logger.info(f"Shutting down {settings.APP_NAME}...")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
    HMPI API - Heavy Metal Pollution Index for groundwater

    This API provides:
    - Heavy Metal Pollution Index with per-metal sub-indices
    - Water quality categorisation and standards compliance
    - Usage restrictions and treatment options
    - Batch assessment with summary statistics
    - Reference limits, toxicity weights and units
    """,
    debug=settings.DEBUG,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check endpoint
@app.get("/health", response_model=HealthResponse, tags=["Health"])
@app.get("/api/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Check API health status"""
    return HealthResponse(
        status="healthy",
        version=settings.APP_VERSION,
        timestamp=datetime.now(timezone.utc)
    )


@app.get("/", tags=["Root"])
async def root():
    """API root endpoint"""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "health": "/health"
    }


# Include routers
app.include_router(
    hmpi.router,
    prefix=f"{settings.API_V1_PREFIX}/hmpi",
    tags=["HMPI"]
)

app.include_router(
    quality.router,
    prefix=f"{settings.API_V1_PREFIX}/quality",
    tags=["Quality"]
)

app.include_router(
    standards.router,
    prefix=f"{settings.API_V1_PREFIX}/standards",
    tags=["Standards"]
)


# Exception handlers
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "hmpi.app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
