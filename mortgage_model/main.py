"""
Main FastAPI application entry point.
"""

import logging

from fastapi import FastAPI

from mortgage_model import __version__
from mortgage_model.config import Settings, get_settings
from mortgage_model.api import router as api_router

settings = get_settings()

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Home loan amortization and property investment analysis",
    version=__version__,
    debug=settings.debug,
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": __version__}


def configure_logging(config: Settings) -> None:
    """Attach a console handler to the root logger at the configured level."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(config.log_level.upper())


def run():
    """Serve the app with uvicorn using configured host and port."""
    import uvicorn

    configure_logging(settings)
    uvicorn.run(
        "mortgage_model.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
