"""
NPV Engine Router — /api/npv

Exposes the single-rate NPV formula as a service. Sweeps dispatch to this
endpoint when the backend is configured with a remote NPV engine
(NPV_ENGINE_URL), so it can run as its own deployment.

Endpoints:
    POST /api/npv/calculate   — NPV for one discount rate
"""

import logging
import math

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..engines.discounting import compute_npv

logger = logging.getLogger("npvsweep.api")

router = APIRouter(prefix="/api/npv", tags=["NPV Engine"])


@router.post("/calculate", response_model=schemas.NpvCalculationResponse)
def calculate_npv(body: schemas.NpvCalculationRequest):
    """
    Calculate NPV = -initialInvestment + Σ cashFlows[t-1] / (1 + discountRate)^t.

    Returns 500 when the rate is outside the formula's domain
    (e.g. discountRate == -1) or the result is not a finite number.
    """
    logger.info(
        "Processing NPV calculation request (rate=%s, periods=%d)",
        body.discount_rate, len(body.cash_flows),
    )
    try:
        npv = compute_npv(body.initial_investment, body.discount_rate, body.cash_flows)
    except ArithmeticError as e:
        logger.error("Error processing NPV calculation request: %s", e)
        raise HTTPException(status_code=500, detail=f"Error processing request: {e}")

    if not math.isfinite(npv):
        logger.error("NPV calculation produced a non-finite value for rate %s", body.discount_rate)
        raise HTTPException(status_code=500, detail=f"Error processing request: NPV is {npv}")

    return schemas.NpvCalculationResponse(npv=npv)
