"""
NPV Sweep Router — /api/npv/sweep

Evaluates NPV across a discount-rate range. The orchestration lives in
backend/engines/sweep.py; this endpoint converts the request body, injects
the configured compute capability, and serializes the sorted points.

Endpoints:
    POST /api/npv/sweep   — NPV per rate from lower to upper bound
"""

from fastapi import APIRouter, Depends

from .. import schemas
from ..config import Settings, get_settings
from ..engines.sweep import ComputeFn, run_sweep
from ..services import get_compute

router = APIRouter(prefix="/api/npv", tags=["NPV Sweep"])


@router.post("/sweep", response_model=list[schemas.SweepPoint])
async def sweep_npv(
    body: schemas.SweepRequestBody,
    compute: ComputeFn = Depends(get_compute),
    settings: Settings = Depends(get_settings),
):
    """
    Run a discount-rate sweep.

    A non-positive increment or an upper bound below the lower bound returns
    an empty list. Rates whose computation fails are left out of the result
    and logged; the remaining points are returned sorted by rate.
    """
    results = await run_sweep(
        body.to_sweep_request(),
        compute,
        max_concurrency=settings.max_concurrency or None,
        timeout_s=settings.compute_timeout_s,
    )
    return [schemas.SweepPoint(discount_rate=r.rate, npv=r.npv) for r in results]
