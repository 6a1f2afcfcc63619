"""Fieldview API - field detection and template rendering service.

This API exposes the template layer over HTTP:
- Field classification (template suggestion with confidence)
- The installed template configuration
- Rendering of items into display node trees
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fieldview import __version__
from fieldview.api.routes import templates
from fieldview.configuration import (
    configuration_from_env,
    configure_templates,
    get_template_configuration,
)
from fieldview.configuration.builder import CONFIG_ENV_VAR
from fieldview.templates.registry import TEMPLATE_CLASSES

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: install configuration from the environment, if any
    logger.info("Loading template configuration...")
    config = configure_templates(configuration_from_env())
    logger.info(
        f"Smart detection {'enabled' if config.smart_detection.enabled else 'disabled'} "
        f"(auto-apply >= {config.smart_detection.auto_apply_threshold}, "
        f"suggest >= {config.smart_detection.suggestion_threshold})"
    )
    logger.info(f"Loaded {len(TEMPLATE_CLASSES)} template kinds")

    logger.info("Fieldview API ready")
    yield
    # Shutdown
    logger.info("Shutting down Fieldview API")


# Create FastAPI app
app = FastAPI(
    title="Fieldview API",
    description=f"""
## Field Detection and Display Templates

Classifies fields into display templates and renders items into node trees.

### Key Endpoints

- `GET /v1/templates/kinds` - List template kinds
- `GET /v1/templates/configuration` - Get the installed configuration
- `POST /v1/templates/classify` - Suggest a template for one field
- `POST /v1/templates/suggest` - Suggest templates for many fields
- `POST /v1/templates/render` - Render items with a template

Configuration is read at startup from the YAML file named by `{CONFIG_ENV_VAR}`.
""",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /v1 prefix
app.include_router(templates.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "Fieldview API",
        "version": __version__,
        "description": "Field detection and display template service",
        "docs": "/docs",
        "endpoints": {
            "kinds": "/v1/templates/kinds",
            "configuration": "/v1/templates/configuration",
            "classify": "/v1/templates/classify",
            "suggest": "/v1/templates/suggest",
            "render": "/v1/templates/render",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    config = get_template_configuration()
    return {
        "status": "healthy",
        "template_kinds": len(TEMPLATE_CLASSES),
        "smart_detection": config.smart_detection.enabled,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fieldview.api.main:app",
        host="0.0.0.0",
        port=8001,
        reload=True,
    )
