"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from legal_engine.core.config import get_settings
from legal_engine.legal_pack import LegalPackError, load_pack
from legal_engine.rules import router as rules_router
from legal_engine.exhibit import router as exhibit_router
from legal_engine.render import router as render_router

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting %s...", settings.app_name)
    logger.info("Legal pack directory: %s", settings.pack_dir)

    # Fail fast on a broken pack rather than on the first request
    load_pack(settings.pack_dir)

    yield

    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Legal agreement rules engine for investor-agent deal flow",
        version=API_VERSION,
        lifespan=lifespan,
    )

    cors_origins = settings.cors_origins.split(",") if settings.cors_origins != "*" else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(rules_router)    # /legal/pack, /legal/overlay, /legal/evaluate
    app.include_router(exhibit_router)  # /legal/exhibit-a
    app.include_router(render_router)   # /legal/render

    @app.exception_handler(LegalPackError)
    async def legal_pack_error_handler(request: Request, exc: LegalPackError) -> JSONResponse:
        logger.error("Legal pack unavailable: %s", exc)
        return JSONResponse(status_code=500, content={"detail": "Legal pack unavailable"})

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": API_VERSION,
            "endpoints": {
                "pack": "/legal/pack - Active legal pack summary",
                "overlay": "/legal/overlay/{zip_code} - Local overlay lookup",
                "evaluate": "/legal/evaluate - Rule evaluation for a deal",
                "exhibit-a": "/legal/exhibit-a - Exhibit A normalization",
                "render": "/legal/render - Full contract package",
            },
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
