"""
NPV Sweep — Bounds-Sweep Orchestrator

Evaluates NPV across a range of discount rates.

Pipeline:
    1. Enumerate the rate series from (lower, upper, increment).
       An empty series short-circuits: nothing is computed.
    2. Fan out one `compute` call per rate as concurrent asyncio tasks.
       Each call settles into an NpvOutcome (success or failure); a failure
       on one rate never cancels or fails the others.
    3. Join on every task, log each failure, and return the successes
       sorted by rate ascending.

The `compute` capability is injected, so the same orchestration runs against
the in-process engine, the remote NPV service, or a test double.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional, Sequence, Union

from .rates import enumerate_rates

logger = logging.getLogger("npvsweep.sweep")


class ErrorKind(str, Enum):
    """Why a single rate's NPV computation failed."""
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED_RESPONSE = "malformed_response"
    TIMEOUT = "timeout"
    COMPUTATION = "computation"


@dataclass(frozen=True)
class SweepRequest:
    """A validated sweep: rate bounds, increment, and the cash-flow series."""
    lower_rate: float
    upper_rate: float
    increment: float
    principal: float
    cash_flows: tuple[float, ...] = ()

    def __post_init__(self):
        # Accept any sequence but store an immutable copy
        object.__setattr__(self, "cash_flows", tuple(float(cf) for cf in self.cash_flows))


@dataclass(frozen=True)
class NpvSuccess:
    rate: float
    npv: float


@dataclass(frozen=True)
class NpvFailure:
    rate: float
    cause: ErrorKind
    detail: str = ""


NpvOutcome = Union[NpvSuccess, NpvFailure]
ComputeFn = Callable[[float, float, Sequence[float]], Awaitable[NpvOutcome]]


async def _attempt(
    compute: ComputeFn,
    request: SweepRequest,
    rate: float,
    semaphore: Optional[asyncio.Semaphore],
    timeout_s: Optional[float],
) -> NpvOutcome:
    """Run one compute call and settle it into an outcome for `rate`."""
    try:
        if semaphore is None:
            return await asyncio.wait_for(
                compute(request.principal, rate, request.cash_flows), timeout_s
            )
        async with semaphore:
            return await asyncio.wait_for(
                compute(request.principal, rate, request.cash_flows), timeout_s
            )
    except asyncio.TimeoutError:
        return NpvFailure(rate, ErrorKind.TIMEOUT, f"no result within {timeout_s}s")
    except Exception as e:
        return NpvFailure(rate, ErrorKind.COMPUTATION, f"{type(e).__name__}: {e}")


async def run_sweep(
    request: SweepRequest,
    compute: ComputeFn,
    *,
    max_concurrency: Optional[int] = None,
    timeout_s: Optional[float] = None,
) -> list[NpvSuccess]:
    """
    Compute NPV for every rate in the request's range.

    Args:
        request: The sweep parameters and cash flows.
        compute: Async callable (principal, rate, cash_flows) -> NpvOutcome.
        max_concurrency: Cap on in-flight compute calls. None or 0 dispatches
            every rate at once.
        timeout_s: Per-call time limit. None waits indefinitely.

    Returns:
        Successful outcomes sorted by rate ascending. Failed rates are
        omitted and reported through the `npvsweep.sweep` logger.
    """
    rates = enumerate_rates(request.lower_rate, request.upper_rate, request.increment)
    if not rates:
        logger.debug(
            "Empty rate series for bounds [%s, %s] step %s; nothing to compute",
            request.lower_rate, request.upper_rate, request.increment,
        )
        return []

    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None
    outcomes = await asyncio.gather(
        *(_attempt(compute, request, rate, semaphore, timeout_s) for rate in rates)
    )

    successes = []
    for outcome in outcomes:
        if isinstance(outcome, NpvFailure):
            logger.error(
                "Error calculating NPV for discount rate %s: %s (%s)",
                outcome.rate, outcome.cause.value, outcome.detail,
            )
        else:
            successes.append(outcome)

    successes.sort(key=lambda s: s.rate)
    logger.info(
        "Sweep finished: %d of %d rates computed", len(successes), len(rates)
    )
    return successes
