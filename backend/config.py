"""
NPV Sweep Backend Configuration

All settings come from environment variables with local-development defaults.

Variables:
    NPV_ENGINE_URL              Base URL of a remote NPV engine. Unset: compute in-process.
    NPV_SWEEP_MAX_CONCURRENCY   Cap on concurrent NPV calls per sweep. 0: unbounded.
    NPV_COMPUTE_TIMEOUT_S       Per-rate time limit in seconds. Unset: no limit.
    NPV_HTTP_TIMEOUT_S          Timeout of the outbound httpx client (default 30).
    NPV_LOG_LEVEL               Root log level (default INFO).
    NPV_CORS_ORIGINS            Comma-separated allowed origins for the frontend.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

DEFAULT_CORS_ORIGINS = (
    "http://localhost:8501",    # Streamlit default
    "http://127.0.0.1:8501",
    "http://localhost:8502",    # Streamlit alternate
    "http://127.0.0.1:8502",
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    engine_url: Optional[str] = None
    max_concurrency: int = 0
    compute_timeout_s: Optional[float] = None
    http_timeout_s: float = 30.0
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS


def _optional_float(environ: Mapping[str, str], name: str) -> Optional[float]:
    raw = environ.get(name, "").strip()
    if not raw:
        return None
    value = float(raw)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw}")
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from `environ` (defaults to os.environ).

    Raises ValueError on malformed numeric values.
    """
    if environ is None:
        environ = os.environ

    max_concurrency = int(environ.get("NPV_SWEEP_MAX_CONCURRENCY", "0") or 0)
    if max_concurrency < 0:
        raise ValueError(f"NPV_SWEEP_MAX_CONCURRENCY must be >= 0, got {max_concurrency}")

    origins = environ.get("NPV_CORS_ORIGINS", "")
    cors_origins = tuple(o.strip() for o in origins.split(",") if o.strip()) or DEFAULT_CORS_ORIGINS

    return Settings(
        engine_url=environ.get("NPV_ENGINE_URL", "").strip() or None,
        max_concurrency=max_concurrency,
        compute_timeout_s=_optional_float(environ, "NPV_COMPUTE_TIMEOUT_S"),
        http_timeout_s=_optional_float(environ, "NPV_HTTP_TIMEOUT_S") or 30.0,
        log_level=environ.get("NPV_LOG_LEVEL", "INFO").upper(),
        cors_origins=cors_origins,
    )


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, usable as a FastAPI dependency."""
    return load_settings()


def configure_logging(level: str = "INFO") -> None:
    """Install a stream handler on the root logger unless one is already set up."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("npvsweep").setLevel(level)
