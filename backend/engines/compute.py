"""
NPV compute capabilities for the sweep orchestrator.

Both callables share the signature (principal, rate, cash_flows) -> NpvOutcome
and never raise for a per-rate problem:

    local_compute       evaluates the formula in-process
    RemoteNpvCompute    POSTs to a remote NPV engine (/api/npv/calculate)
"""

import logging
import math
from typing import Sequence

import httpx
from pydantic import ValidationError

from .. import schemas
from .discounting import compute_npv
from .sweep import ErrorKind, NpvFailure, NpvOutcome, NpvSuccess

logger = logging.getLogger("npvsweep.compute")

CALCULATE_PATH = "/api/npv/calculate"


async def local_compute(principal: float, rate: float, cash_flows: Sequence[float]) -> NpvOutcome:
    try:
        npv = compute_npv(principal, rate, cash_flows)
    except ArithmeticError as e:
        return NpvFailure(rate, ErrorKind.COMPUTATION, f"{type(e).__name__}: {e}")
    if not math.isfinite(npv):
        return NpvFailure(rate, ErrorKind.COMPUTATION, f"non-finite NPV: {npv}")
    return NpvSuccess(rate, npv)


class RemoteNpvCompute:
    """Calls a remote NPV engine over HTTP, one request per rate.

    The httpx client is shared across calls and owned by the caller
    (the FastAPI lifespan handler in production).
    """

    def __init__(self, base_url: str, client: httpx.AsyncClient):
        self.base_url = base_url.rstrip("/")
        self.client = client

    def _url(self) -> str:
        return f"{self.base_url}{CALCULATE_PATH}"

    async def __call__(self, principal: float, rate: float, cash_flows: Sequence[float]) -> NpvOutcome:
        payload = {
            "initialInvestment": principal,
            "discountRate": rate,
            "cashFlows": list(cash_flows),
        }
        try:
            resp = await self.client.post(self._url(), json=payload)
        except httpx.TimeoutException as e:
            return NpvFailure(rate, ErrorKind.TIMEOUT, f"{type(e).__name__}: {e}")
        except httpx.RequestError as e:
            return NpvFailure(rate, ErrorKind.TRANSPORT, f"{type(e).__name__}: {e}")

        if not resp.is_success:
            return NpvFailure(
                rate, ErrorKind.HTTP_STATUS, f"HTTP {resp.status_code}: {resp.text[:200]}"
            )

        try:
            body = schemas.NpvCalculationResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            return NpvFailure(rate, ErrorKind.MALFORMED_RESPONSE, f"{type(e).__name__}: {e}")

        logger.debug("Remote NPV for rate %s: %s", rate, body.npv)
        return NpvSuccess(rate, body.npv)
