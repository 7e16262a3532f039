"""
NPV Sweep — Frontend API Client

Centralized HTTP client for all backend API calls.
All frontend components use this module instead of making direct HTTP requests.

Usage:
    from api_client import api
    points = api.sweep(0.05, 0.15, 0.01, [15000, 20000], 50000)
"""

import os

import requests

# Backend URL — configurable via environment
API_BASE = os.environ.get("NPV_API_BASE", "http://127.0.0.1:8050")


def build_sweep_payload(form: dict) -> dict:
    """Convert a form dict (snake_case) into the camelCase sweep request body."""
    return {
        "lowerBoundDiscountRate": form["lower_bound_discount_rate"],
        "upperBoundDiscountRate": form["upper_bound_discount_rate"],
        "discountRateIncrement": form["discount_rate_increment"],
        "cashFlows": list(form["cash_flows"]),
        "initialInvestment": form["initial_investment"],
    }


class NpvSweepAPI:
    """HTTP client wrapper for the NPV Sweep backend API."""

    def __init__(self, base_url: str = API_BASE):
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _get(self, path: str, params: dict = None) -> dict:
        r = self.session.get(self._url(path), params=params, timeout=30)
        r.raise_for_status()
        return r.json()

    def _post(self, path: str, json_data: dict = None):
        r = self.session.post(self._url(path), json=json_data, timeout=120)
        r.raise_for_status()
        return r.json()

    # ---- Health ----
    def health(self) -> dict:
        return self._get("/health")

    # ---- NPV ----
    def calculate_npv(self, initial_investment: float, discount_rate: float, cash_flows: list) -> float:
        result = self._post("/api/npv/calculate", json_data={
            "initialInvestment": initial_investment,
            "discountRate": discount_rate,
            "cashFlows": list(cash_flows),
        })
        return result["npv"]

    def sweep(self, lower: float, upper: float, increment: float,
              cash_flows: list, initial_investment: float) -> list:
        """Run a discount-rate sweep. Returns [{"discountRate", "npv"}, ...] ascending."""
        return self._post("/api/npv/sweep", json_data=build_sweep_payload({
            "lower_bound_discount_rate": lower,
            "upper_bound_discount_rate": upper,
            "discount_rate_increment": increment,
            "cash_flows": cash_flows,
            "initial_investment": initial_investment,
        }))


# Global API client instance
api = NpvSweepAPI()
