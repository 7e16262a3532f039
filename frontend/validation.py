"""Sweep form validation — runs before the request is sent to the backend."""

import math


def validate_form(form: dict) -> dict:
    """
    Check the sweep input form.

    The backend silently returns an empty curve for malformed bounds, so the
    form is where the user gets told why.

    Returns:
        Mapping of field name -> error message. Empty when the form is valid.
        A later rule on the same field replaces an earlier message.
    """
    errors = {}
    lower = form["lower_bound_discount_rate"]
    upper = form["upper_bound_discount_rate"]
    increment = form["discount_rate_increment"]
    cash_flows = form["cash_flows"]

    if lower <= 0:
        errors["lower_bound_discount_rate"] = "Lower bound discount rate must be greater than 0"
    if upper <= 0:
        errors["upper_bound_discount_rate"] = "Upper bound discount rate must be greater than 0"
    if increment <= 0:
        errors["discount_rate_increment"] = "Discount rate increment must be greater than 0"

    if upper <= lower:
        errors["upper_bound_discount_rate"] = "Upper bound must be greater than lower bound"
    if upper - lower < increment:
        errors["discount_rate_increment"] = "Increment must be smaller than the difference between bounds"

    if form["initial_investment"] <= 0:
        errors["initial_investment"] = "Initial investment must be greater than 0"

    if len(cash_flows) == 0:
        errors["cash_flows"] = "At least one cash flow is required"
    if any(cf is None or not math.isfinite(cf) for cf in cash_flows):
        errors["cash_flows"] = "All cash flows must be valid numbers"

    return errors
