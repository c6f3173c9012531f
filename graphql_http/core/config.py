"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Level of the graphql_http loggers (DEBUG, INFO, WARNING, ERROR).
        access_log: Keep uvicorn's per-request access log at INFO.
        graphql_path: Route serving GraphQL requests.
        schema_file: Path to an SDL file used when no schema is passed
            to ``create_app``.
        default_media_type: Response media type used when the client
            accepts anything.
        rate_limit_enabled: Apply ``rate_limit_default`` to the GraphQL routes.
        rate_limit_default: Per-client limit on the GraphQL routes.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="GRAPHQL_HTTP_"
    )

    project_name: str = "graphql-http"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    access_log: bool = False
    graphql_path: str = "/graphql"
    schema_file: Optional[str] = None
    default_media_type: str = "application/graphql-response+json"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"


settings = Settings()
