"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
demo runs without any configuration at all.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Language Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path at which the GraphQL endpoint is mounted.  GET requests to the
    # same path serve the GraphiQL explorer when it is enabled.
    graphql_path: str = os.getenv("GRAPHQL_PATH", "/graphql")
    graphiql_enabled: bool = os.getenv("GRAPHIQL_ENABLED", "true").lower() in {"1", "true", "yes"}

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  ``*`` allows any origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Optional JSON file with ``frameworks`` and ``languages`` arrays.  When
    # empty the built‑in dataset is used.  Relative paths are resolved
    # against the current working directory.
    dataset_path: str = os.getenv("DATASET_PATH", "")

    # Artificial latency added to the ``languages`` query, in milliseconds.
    # Useful to watch loading states in a client; keep at 0 otherwise.
    response_delay_ms: int = int(os.getenv("RESPONSE_DELAY_MS", "0"))

    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = int(os.getenv("API_PORT", "5000"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
