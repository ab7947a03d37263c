"""Configuration management for the Ad Studio backend.

This module provides centralized configuration management using Pydantic
Settings.  Configuration is loaded from environment variables with the
``ADSTUDIO_`` prefix, allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:

1. Environment variables (``ADSTUDIO_*`` prefix)
2. ``.env`` file in the project root
3. Default values defined in :class:`AdStudioConfig`

Two values are also read from their conventional, unprefixed names so that an
existing deployment keeps working: ``RUNWARE_API_KEY`` and ``PORT``.

Example .env file::

    RUNWARE_API_KEY=rw-xxxxxxxx
    ADSTUDIO_REQUEST_TIMEOUT=90
    ADSTUDIO_SERVER_PORT=3001

Global Configuration Instance
------------------------------
A global ``config`` instance is created at module import time and serves as
the single source of truth for the running server.  Tests construct their own
:class:`AdStudioConfig` instances instead of touching the global one.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdStudioConfig(BaseSettings):
    """Main configuration for the Ad Studio backend.

    Attributes
    ----------
    Runware Settings:
        runware_api_key : str
            Bearer credential for the Runware API.  Empty means "not
            configured"; requests will still be attempted and rejected
            upstream.
        runware_api_url : str
            Tasks endpoint that accepts batched task descriptors.
        request_timeout : float
            Client-side timeout in seconds for one outbound call.
        default_model : str
            Model identifier assigned to every generated variant.

    Server Settings:
        server_host : str
            Bind address for uvicorn.
        server_port : int
            Bind port for uvicorn.
        cors_origins : list[str]
            Origins allowed to call the API from a browser.
        log_level : str
            Root logging level used by the CLI entry point.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ADSTUDIO_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Runware settings
    runware_api_key: str = Field(
        default="",
        validation_alias=AliasChoices(
            "runware_api_key", "ADSTUDIO_RUNWARE_API_KEY", "RUNWARE_API_KEY"
        ),
        description="Bearer credential for the Runware API",
    )
    runware_api_url: str = Field(
        default="https://api.runware.ai/v1/tasks",
        description="Runware tasks endpoint",
    )
    request_timeout: float = Field(
        default=120.0,
        gt=0,
        description="Timeout in seconds for one outbound Runware call",
    )
    default_model: str = Field(
        default="runware:101@1",
        description="Model assigned to generated variants",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    server_port: int = Field(
        default=3001,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("server_port", "ADSTUDIO_SERVER_PORT", "PORT"),
        description="Server port",
    )
    cors_origins: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        description="Origins allowed by the CORS middleware",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level for the CLI entry point",
    )

    @property
    def has_api_key(self) -> bool:
        """Whether a Runware credential has been configured."""
        return bool(self.runware_api_key.strip())


# Global configuration instance, loaded from ADSTUDIO_* variables and .env.
config = AdStudioConfig()
