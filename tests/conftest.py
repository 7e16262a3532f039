"""Shared test fixtures for NPV Sweep."""

import asyncio
import math
import sys
import os
import pytest
from fastapi.testclient import TestClient

# Add repository root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from backend.config import Settings, get_settings
from backend.engines.discounting import compute_npv
from backend.engines.sweep import ErrorKind, NpvFailure, NpvSuccess, SweepRequest
from backend.main import app


@pytest.fixture
def client():
    """Test client with the in-process engine and default settings."""
    app.dependency_overrides[get_settings] = lambda: Settings()
    with TestClient(app, raise_server_exceptions=True) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def sample_request():
    """Three-point sweep: 5%, 7.5%, 10%."""
    return SweepRequest(
        lower_rate=0.05,
        upper_rate=0.10,
        increment=0.025,
        principal=1000.0,
        cash_flows=[200.0, 300.0, 400.0],
    )


class FakeCompute:
    """Deterministic compute double.

    Rates close to one of `fail_rates` settle as HTTP_STATUS failures, rates
    close to one of `raise_rates` raise. Higher rates finish first so the
    orchestrator has to re-sort.
    """

    def __init__(self, fail_rates=(), raise_rates=(), delay=0.01):
        self.fail_rates = fail_rates
        self.raise_rates = raise_rates
        self.delay = delay
        self.calls = []
        self.in_flight = 0
        self.peak_in_flight = 0

    @staticmethod
    def _matches(rate, targets):
        return any(math.isclose(rate, t) for t in targets)

    async def __call__(self, principal, rate, cash_flows):
        self.calls.append(rate)
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay / (1 + 10 * len(self.calls)))
        finally:
            self.in_flight -= 1

        if self._matches(rate, self.raise_rates):
            raise RuntimeError("engine crashed")
        if self._matches(rate, self.fail_rates):
            return NpvFailure(rate, ErrorKind.HTTP_STATUS, "HTTP 500: boom")
        return NpvSuccess(rate, compute_npv(principal, rate, cash_flows))


@pytest.fixture
def fake_compute():
    return FakeCompute
