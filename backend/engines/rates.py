"""Discount-rate series generation for NPV sweeps."""

import math


def enumerate_rates(lower: float, upper: float, increment: float) -> list[float]:
    """Return the ascending discount rates from `lower` up to `upper` inclusive.

    A non-positive increment or inverted bounds give an empty series rather
    than an error. Rates are produced by repeated addition and compared to
    `upper` without tolerance, so whether a rate landing near `upper` is
    included depends on float accumulation.
    """
    if increment <= 0 or upper < lower:
        return []
    if not (math.isfinite(lower) and math.isfinite(upper) and math.isfinite(increment)):
        return []

    rates = []
    current = lower
    while current <= upper:
        rates.append(current)
        advanced = current + increment
        # increment below the float spacing at `current`
        if advanced == current:
            break
        current = advanced
    return rates
