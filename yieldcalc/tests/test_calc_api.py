from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient


def sofipo_payload(**overrides) -> dict:
    payload = {
        "totalInvestment": 15000,
        "limitBlockA": 10000,
        "rateA": 16,
        "rateB": 7.25,
        "days": 30,
    }
    payload.update(overrides)
    return payload


def test_compound_interest_endpoint_returns_series(client: FlaskClient):
    resp = client.post(
        "/api/calc/compound-interest",
        json={"principal": 1000, "annualRate": 0.15, "days": 3},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert [p["day"] for p in body["points"]] == [0, 1, 2, 3]
    assert body["points"][0] == {"day": 0, "balance": 1000.0, "interestEarned": 0.0}
    assert body["finalBalance"] == body["points"][-1]["balance"]
    assert isclose(body["interestEarned"], body["finalBalance"] - 1000, abs_tol=1e-9)


def test_compound_interest_negative_days_returns_400(client: FlaskClient):
    resp = client.post(
        "/api/calc/compound-interest",
        json={"principal": 100, "annualRate": 0.15, "days": -1},
    )

    assert resp.status_code == 400
    assert resp.get_json() == {"detail": "days must be >= 0", "reason": "negative_days"}


def test_compound_interest_over_day_limit_returns_400(client: FlaskClient):
    resp = client.post(
        "/api/calc/compound-interest",
        json={"principal": 100, "annualRate": 0.15, "days": 401},
    )

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["reason"] == "days_limit"
    assert "400" in body["detail"]


def test_compound_interest_missing_rate_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/compound-interest", json={"days": 5})

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_sofipo_endpoint_returns_rounded_gains(client: FlaskClient):
    resp = client.post("/api/calc/sofipo", json=sofipo_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert set(body) == {
        "principalA",
        "principalB",
        "gainA",
        "gainB",
        "gainTotal",
        "endA",
        "endB",
        "endTotal",
    }
    assert body["principalA"] == 10000
    assert body["principalB"] == 5000
    assert abs(body["gainTotal"] - 162.23) <= 0.061


def test_sofipo_negative_total_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/sofipo", json=sofipo_payload(totalInvestment=-1))

    assert resp.status_code == 400
    assert resp.get_json()["reason"] == "negative_principal"


def test_sofipo_invalid_payload_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/sofipo", json={"totalInvestment": "lots"})

    assert resp.status_code == 422


def test_sofipo_over_day_limit_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/sofipo", json=sofipo_payload(days=2_000_000))

    assert resp.status_code == 400
    body = resp.get_json()
    assert body == {"detail": "days must be <= 400", "reason": "days_limit"}
