"""Ad Studio — FastAPI Application.

This module is the single entry point for the web backend.  It defines the
``create_app()`` factory, the module-level ``app`` instance served by
uvicorn, all REST API routes, and the ``main()`` CLI function.

Architecture
------------
- **Configuration** comes from :mod:`adstudio.core.config` (environment
  variables and ``.env``).
- **Image generation** is delegated to Runware through
  :class:`~adstudio.core.service.ImageService`, created on startup and kept
  on ``app.state``.
- **Base prompts** live in an in-memory store for the lifetime of the
  process; nothing is persisted.

Endpoints
---------
========  ==============================  ==================================
Method    Path                            Purpose
========  ==============================  ==================================
GET       ``/``                           Health check and endpoint listing
POST      ``/api/images/generate-batch``  Five images from one ad input
POST      ``/api/images/regenerate``      One image from a stored prompt
GET       ``/api/images/models``          Curated model list
========  ==============================  ==================================

Error Mapping
-------------
Request bodies that fail validation are rejected by FastAPI with 422.  An
unknown ``basePromptId`` returns 404.  A failed generation returns 502 with
the underlying message in ``detail``.

Usage
-----
CLI (installed entry point)::

    adstudio

Direct invocation::

    python -m adstudio.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from adstudio import __version__
from adstudio.api.models import AdInput, GeneratedImage, ModelDescriptor, TweakInput
from adstudio.core.config import AdStudioConfig, config
from adstudio.core.errors import AdStudioError, GenerationError, PromptNotFoundError
from adstudio.core.prompt_store import InMemoryPromptStore
from adstudio.core.runware_client import RunwareClient
from adstudio.core.service import ImageService

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------

router = APIRouter(prefix="/api/images", tags=["images"])


def get_image_service(request: Request) -> ImageService:
    """Return the :class:`ImageService` created on application startup."""
    return request.app.state.image_service


@router.post("/generate-batch", response_model=list[GeneratedImage])
async def generate_batch(
    ad_input: AdInput,
    service: ImageService = Depends(get_image_service),
) -> list[GeneratedImage]:
    """Generate five ad images, one per prompt variant.

    Images are returned in variant order.  Each carries ``basePromptId``,
    which the client passes back to ``/regenerate``.

    Raises:
        GenerationError: Mapped to 502 when the Runware call fails.
    """
    return await service.generate_batch(ad_input)


@router.post("/regenerate", response_model=GeneratedImage)
async def regenerate(
    tweak: TweakInput,
    service: ImageService = Depends(get_image_service),
) -> GeneratedImage:
    """Regenerate one image from a stored base prompt and a tweak.

    Raises:
        PromptNotFoundError: Mapped to 404 for an unknown ``basePromptId``.
        GenerationError: Mapped to 502 when the Runware call fails.
    """
    return await service.regenerate(tweak)


@router.get("/models", response_model=list[ModelDescriptor])
async def list_models(
    service: ImageService = Depends(get_image_service),
) -> list[ModelDescriptor]:
    """Return the curated model list."""
    return service.list_models()


# ---------------------------------------------------------------------------
# Exception handlers.
# ---------------------------------------------------------------------------


async def _prompt_not_found_handler(request: Request, exc: PromptNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _generation_error_handler(request: Request, exc: GenerationError) -> JSONResponse:
    return JSONResponse(status_code=502, content={"detail": str(exc)})


async def _ad_studio_error_handler(request: Request, exc: AdStudioError) -> JSONResponse:
    logger.error(f"Unhandled Ad Studio error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


# ---------------------------------------------------------------------------
# Application factory.
# ---------------------------------------------------------------------------


def create_app(
    settings: AdStudioConfig | None = None,
    *,
    service: ImageService | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Configuration to use.  Defaults to the global ``config``.
        service: Pre-built image service.  When omitted, a
            :class:`RunwareClient` and an :class:`InMemoryPromptStore` are
            created on startup and the client is closed on shutdown.

    Returns:
        The configured FastAPI application.
    """
    settings = settings or config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Create the image service on startup and close its client on shutdown."""
        # --- Startup -------------------------------------------------------
        owned_client: RunwareClient | None = None
        if service is None:
            owned_client = RunwareClient.from_config(settings)
            app.state.image_service = ImageService(
                owned_client,
                InMemoryPromptStore(),
                default_model=settings.default_model,
            )
        else:
            app.state.image_service = service

        key_status = "configured" if settings.has_api_key else "missing!"
        logger.info(f"Runware API key: {key_status}")

        yield  # Application runs here.

        # --- Shutdown ------------------------------------------------------
        if owned_client is not None:
            await owned_client.aclose()
            logger.info("Runware client closed on shutdown.")

    app = FastAPI(
        title="Ad Studio",
        description="Business ad image generation backed by the Runware API.",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(PromptNotFoundError, _prompt_not_found_handler)
    app.add_exception_handler(GenerationError, _generation_error_handler)
    app.add_exception_handler(AdStudioError, _ad_studio_error_handler)

    @app.get("/")
    async def index() -> dict:
        """Health check listing the available endpoints."""
        return {
            "message": "Ad Studio API",
            "status": "healthy",
            "version": __version__,
            "endpoints": {
                "generate_batch": "/api/images/generate-batch",
                "regenerate": "/api/images/regenerate",
                "models": "/api/images/models",
                "health": "/",
            },
        }

    app.include_router(router)
    return app


app = create_app()


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~adstudio.core.config.config`.
    This function is registered as the ``adstudio`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Server starting on {config.server_host}:{config.server_port}")

    uvicorn.run(
        "adstudio.api.main:app",
        host=config.server_host,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
