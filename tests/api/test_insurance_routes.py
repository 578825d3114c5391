"""Tests for the insurance API routes."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from src.api.app import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestEstimateRoute:
    def test_regression_scenario(self, client, regression_fields):
        resp = client.post("/api/v1/insurance/estimate", json=regression_fields)
        assert resp.status_code == 200
        data = resp.json()
        assert Decimal(data["annual"]) == Decimal("2233.875")
        assert Decimal(data["monthly"]) == Decimal("186.15625")
        assert Decimal(data["replacement_cost"]) == Decimal("388500")
        assert data["breakdown"]["base_rate_adjustments"] == []
        assert Decimal(data["breakdown"]["occupancy_multiplier"]) == Decimal("1.15")
        assert "Cost per sqft: $210" in data["explanation"]

    def test_missing_sqft(self, client):
        resp = client.post("/api/v1/insurance/estimate", json={"year_built": 1995})
        assert resp.status_code == 422
        assert "sqft" in resp.json()["detail"]["errors"]

    def test_deductible_out_of_set(self, client, regression_fields):
        resp = client.post("/api/v1/insurance/estimate", json={**regression_fields, "deductible": 3000})
        assert resp.status_code == 422
        assert set(resp.json()["detail"]["errors"]) == {"deductible"}

    def test_camel_case_payload(self, client):
        resp = client.post("/api/v1/insurance/estimate", json={
            "sqft": 1500,
            "yearBuilt": 1940,
            "roofAgeYears": 20,
            "occupancy": "owner",
            "construction": "frame",
        })
        assert resp.status_code == 200
        assert len(resp.json()["breakdown"]["base_rate_adjustments"]) == 3

    def test_risk_checkboxes(self, client, regression_fields):
        body = {**regression_fields, "risk_flags": {"flood": "on", "hail": "on"}}
        resp = client.post("/api/v1/insurance/estimate", json=body)
        assert resp.status_code == 200
        assert Decimal(resp.json()["breakdown"]["risk_multiplier"]) == Decimal("1.32")

    @pytest.mark.parametrize("body, field", [
        ({"sqft": True}, "sqft"),
        ({"sqft": [1850]}, "sqft"),
        ({"sqft": {"value": 1850}}, "sqft"),
        ({"sqft": 1850, "occupancy": 5}, "occupancy"),
        ({"sqft": 1850, "risk_flags": "on"}, "risk_flags"),
        ({"sqft": 1850, "year_built": [1995]}, "year_built"),
    ])
    def test_odd_typed_fields_use_field_errors(self, client, body, field):
        resp = client.post("/api/v1/insurance/estimate", json=body)
        assert resp.status_code == 422
        errors = resp.json()["detail"]["errors"]
        assert isinstance(errors, dict)
        assert field in errors

    def test_numeric_checkbox_value(self, client, regression_fields):
        body = {**regression_fields, "risk_flags": {"flood": 2}}
        resp = client.post("/api/v1/insurance/estimate", json=body)
        assert resp.status_code == 200
        assert Decimal(resp.json()["breakdown"]["risk_multiplier"]) == Decimal("1.2")

    def test_huge_sqft_rejected(self, client):
        resp = client.post("/api/v1/insurance/estimate", json={"sqft": "1e999999"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["errors"] == {"sqft": "is too large"}


class TestRedisplayRoute:
    def test_stored_numbers_with_breakdown(self, client):
        resp = client.post("/api/v1/insurance/redisplay", json={
            "insurance_estimate_annual": "2233.88",
            "insurance_estimate_monthly": "186.16",
            "insurance_estimate_inputs": {
                "sqft": 1850,
                "year_built": 1995,
                "occupancy": "rental",
                "roof_age_years": 12,
                "construction": "frame",
                "deductible": 2500,
            },
            "insurance_estimate_updated_at": "2026-03-14T15:30:00Z",
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["available"] is True
        assert Decimal(data["annual"]) == Decimal("2233.88")
        assert Decimal(data["estimate"]["annual"]) == Decimal("2233.875")

    def test_nothing_stored(self, client):
        resp = client.post("/api/v1/insurance/redisplay", json={})
        assert resp.status_code == 200
        assert resp.json() == {"available": False, "annual": None, "monthly": None, "estimate": None}


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
