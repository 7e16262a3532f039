"""
Compute capability wiring for the FastAPI app.

The lifespan handler in main.py stores the active capability on
`app.state.compute`; routers receive it through the `get_compute` dependency,
which tests override the same way `get_settings` is overridden.
"""

from typing import Optional

import httpx
from fastapi import Request

from .config import Settings
from .engines.compute import RemoteNpvCompute, local_compute
from .engines.sweep import ComputeFn


def build_compute(settings: Settings, client: Optional[httpx.AsyncClient] = None) -> ComputeFn:
    """Remote engine when NPV_ENGINE_URL is configured, in-process otherwise."""
    if settings.engine_url:
        if client is None:
            raise ValueError("A remote NPV engine requires an httpx.AsyncClient")
        return RemoteNpvCompute(settings.engine_url, client)
    return local_compute


def get_compute(request: Request) -> ComputeFn:
    return getattr(request.app.state, "compute", local_compute)
