"""Tests for frontend helpers: form validation, API client, charts."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
import requests

from frontend.api_client import NpvSweepAPI, build_sweep_payload
from frontend.components import npv_chart, sweep_table
from frontend.validation import validate_form


def _form(**overrides):
    form = {
        "lower_bound_discount_rate": 0.05,
        "upper_bound_discount_rate": 0.15,
        "discount_rate_increment": 0.01,
        "initial_investment": 50000.0,
        "cash_flows": [15000.0, 20000.0, 25000.0],
    }
    form.update(overrides)
    return form


class TestValidateForm:
    def test_valid_form(self):
        assert validate_form(_form()) == {}

    def test_non_positive_lower_bound(self):
        errors = validate_form(_form(lower_bound_discount_rate=0.0))
        assert errors["lower_bound_discount_rate"] == "Lower bound discount rate must be greater than 0"

    def test_upper_not_above_lower(self):
        errors = validate_form(_form(upper_bound_discount_rate=0.05))
        assert errors["upper_bound_discount_rate"] == "Upper bound must be greater than lower bound"

    def test_upper_relationship_replaces_positivity_message(self):
        errors = validate_form(_form(upper_bound_discount_rate=-0.1))
        assert errors["upper_bound_discount_rate"] == "Upper bound must be greater than lower bound"

    def test_zero_increment(self):
        errors = validate_form(_form(discount_rate_increment=0.0))
        assert errors["discount_rate_increment"] == "Discount rate increment must be greater than 0"

    def test_increment_wider_than_range(self):
        errors = validate_form(_form(discount_rate_increment=0.5))
        assert "smaller than the difference" in errors["discount_rate_increment"]

    def test_initial_investment_required(self):
        errors = validate_form(_form(initial_investment=0.0))
        assert "initial_investment" in errors

    def test_no_cash_flows(self):
        errors = validate_form(_form(cash_flows=[]))
        assert errors["cash_flows"] == "At least one cash flow is required"

    def test_nan_cash_flow(self):
        errors = validate_form(_form(cash_flows=[100.0, float("nan")]))
        assert errors["cash_flows"] == "All cash flows must be valid numbers"


class _FakeResponse:
    def __init__(self, payload, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return self.payload


class TestApiClient:
    def test_sweep_posts_camel_case_body(self, monkeypatch):
        api = NpvSweepAPI("http://backend.test/")
        captured = {}

        def fake_post(url, json=None, timeout=None):
            captured["url"] = url
            captured["json"] = json
            return _FakeResponse([{"discountRate": 0.05, "npv": 10.0}])

        monkeypatch.setattr(api.session, "post", fake_post)
        points = api.sweep(0.05, 0.10, 0.025, [200.0], 1000.0)

        assert points == [{"discountRate": 0.05, "npv": 10.0}]
        assert captured["url"] == "http://backend.test/api/npv/sweep"
        assert captured["json"] == {
            "lowerBoundDiscountRate": 0.05,
            "upperBoundDiscountRate": 0.10,
            "discountRateIncrement": 0.025,
            "cashFlows": [200.0],
            "initialInvestment": 1000.0,
        }

    def test_calculate_npv(self, monkeypatch):
        api = NpvSweepAPI("http://backend.test")
        monkeypatch.setattr(api.session, "post", lambda url, json=None, timeout=None: _FakeResponse({"npv": 42.0}))
        assert api.calculate_npv(1000.0, 0.1, [1100.0]) == 42.0

    def test_http_error_raises(self, monkeypatch):
        api = NpvSweepAPI("http://backend.test")
        monkeypatch.setattr(api.session, "post", lambda url, json=None, timeout=None: _FakeResponse({}, 500))
        with pytest.raises(requests.HTTPError):
            api.sweep(0.05, 0.10, 0.025, [200.0], 1000.0)

    def test_build_payload_copies_cash_flows(self):
        form = _form()
        payload = build_sweep_payload(form)
        payload["cashFlows"].append(1.0)
        assert len(form["cash_flows"]) == 3


class TestCharts:
    POINTS = [
        {"discountRate": 0.05, "npv": 120.0},
        {"discountRate": 0.10, "npv": -15.5},
    ]

    def test_empty_chart(self):
        assert len(npv_chart([]).data) == 0

    def test_chart_plots_percent_rates(self):
        fig = npv_chart(self.POINTS)
        assert len(fig.data) == 1
        assert list(fig.data[0].x) == pytest.approx([5.0, 10.0])
        assert list(fig.data[0].y) == [120.0, -15.5]
        assert fig.layout.title.text == "NPV vs Discount Rate"

    def test_table(self):
        df = sweep_table(self.POINTS)
        assert list(df.columns) == ["Discount Rate (%)", "NPV ($)"]
        assert df["Discount Rate (%)"].tolist() == [5.0, 10.0]

    def test_empty_table(self):
        assert sweep_table([]).empty
