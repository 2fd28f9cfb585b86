"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so that
the three services can be started locally without any setup: the
catalog talks to the info service on port 8082 and to the rating
service on port 8083.  Tests and embedding code may construct their
own ``Settings`` instance and pass it to ``create_app``.

Credentials for the third‑party movie database are never hardcoded;
they must be supplied through ``TMDB_API_KEY``.
"""

import os
from dataclasses import dataclass


FAILURE_POLICIES = {"fail", "skip", "mark"}
SOURCE_KINDS = {"local", "remote"}
INFO_SOURCES = {"local", "tmdb"}
RATINGS_API_VERSIONS = {"v1", "v2"}
MAX_DETAIL_RETRIES = 2


class ConfigurationError(ValueError):
    """Raised when settings contain an unsupported combination of values."""


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Movie Catalog Services")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Bind address and ports used by ``run.py``.
    host: str = os.getenv("SERVICE_HOST", "0.0.0.0")
    catalog_port: int = int(os.getenv("CATALOG_PORT", "8081"))
    info_port: int = int(os.getenv("INFO_PORT", "8082"))
    rating_port: int = int(os.getenv("RATING_PORT", "8083"))

    # Where the catalog finds its upstream services.
    rating_service_url: str = os.getenv("RATING_SERVICE_URL", "http://localhost:8083")
    info_service_url: str = os.getenv("INFO_SERVICE_URL", "http://localhost:8082")

    # ``remote`` calls the sibling service over HTTP, ``local`` uses the
    # in‑process implementation directly.
    catalog_rating_source: str = os.getenv("CATALOG_RATING_SOURCE", "remote")
    catalog_detail_source: str = os.getenv("CATALOG_DETAIL_SOURCE", "remote")

    # ``v1`` returns user ratings as a bare list, ``v2`` wraps them in
    # a ``{"userId", "ratings"}`` envelope.
    ratings_api_version: str = os.getenv("RATINGS_API_VERSION", "v1")

    # Backing store of the info service: static table or TMDB.
    info_source: str = os.getenv("INFO_SOURCE", "local")
    tmdb_api_key: str = os.getenv("TMDB_API_KEY", "")
    tmdb_base_url: str = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3")

    # Per‑call deadline in seconds for every outbound request.
    upstream_timeout: float = float(os.getenv("UPSTREAM_TIMEOUT", "5.0"))
    # Extra attempts for a detail lookup after a network failure or timeout.
    detail_retries: int = int(os.getenv("DETAIL_RETRIES", "0"))

    catalog_failure_policy: str = os.getenv("CATALOG_FAILURE_POLICY", "fail")
    catalog_max_workers: int = int(os.getenv("CATALOG_MAX_WORKERS", "4"))

    def __post_init__(self) -> None:
        _check_choice("CATALOG_FAILURE_POLICY", self.catalog_failure_policy, FAILURE_POLICIES)
        _check_choice("CATALOG_RATING_SOURCE", self.catalog_rating_source, SOURCE_KINDS)
        _check_choice("CATALOG_DETAIL_SOURCE", self.catalog_detail_source, SOURCE_KINDS)
        _check_choice("INFO_SOURCE", self.info_source, INFO_SOURCES)
        _check_choice("RATINGS_API_VERSION", self.ratings_api_version, RATINGS_API_VERSIONS)
        if not 0 <= self.detail_retries <= MAX_DETAIL_RETRIES:
            raise ConfigurationError(
                f"DETAIL_RETRIES must be between 0 and {MAX_DETAIL_RETRIES}, got {self.detail_retries}"
            )
        if self.catalog_max_workers < 1:
            raise ConfigurationError("CATALOG_MAX_WORKERS must be at least 1")
        if self.upstream_timeout <= 0:
            raise ConfigurationError("UPSTREAM_TIMEOUT must be positive")


def _check_choice(name: str, value: str, allowed: set) -> None:
    if value not in allowed:
        raise ConfigurationError(f"{name} must be one of {sorted(allowed)}, got {value!r}")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables
# should be set before importing this module.
settings = Settings()
