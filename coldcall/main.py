"""
Coldcall - AI Cold Call Objection Engine
Main FastAPI Application
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import settings
from .objection_handler import list_objection_types
from .call_script import list_script_templates
from .objection_routes import router as objection_router
from .call_routes import router as call_router

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# ============ LIFESPAN ============

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{settings.app_name} starting up")
    logger.info(f"Loaded {len(list_objection_types())} objection types, "
                f"{len(list_script_templates())} script templates")
    logger.info(f"Listening on http://{settings.host}:{settings.port}")

    yield

    logger.info(f"{settings.app_name} shutting down")


# ============ APP SETUP ============

app = FastAPI(
    title=settings.app_name,
    description="Objection detection and call scripting for AI outbound sales calls",
    version=__version__,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(objection_router)
app.include_router(call_router)


# ============ HEALTH CHECK ============

@app.get("/health")
async def health_check():
    """Health check endpoint for load balancers"""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": __version__,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("coldcall.main:app", host=settings.host, port=settings.port, reload=settings.debug)
