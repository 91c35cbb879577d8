from __future__ import annotations

from flask.testing import FlaskClient


def solve_payload(target: str = "amount", **values) -> dict:
    known = {"principal": 1000, "rate": 5, "time": 1, "frequency": 12}
    known.update(values)
    return {"target": target, "values": known}


def test_solve_amount(client: FlaskClient):
    resp = client.post("/api/solve", json=solve_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["target"] == "amount"
    assert body["display"] == "Amount: 1051.16"
    assert round(body["result"]["value"], 2) == 1051.16
    assert body["result"]["error"] is None


def test_solve_rate_accepts_numeric_strings(client: FlaskClient):
    payload = {
        "target": "rate",
        "values": {"amount": "1051.16", "principal": "1000", "time": "1", "frequency": "12"},
    }

    resp = client.post("/api/solve", json=payload)

    assert resp.status_code == 200
    assert resp.get_json()["display"] == "Rate: 5%"


def test_frequency_returns_advisory(client: FlaskClient):
    payload = {
        "target": "frequency",
        "values": {"amount": 2000, "principal": 1000, "rate": 5, "time": 10},
    }

    resp = client.post("/api/solve", json=payload)

    assert resp.status_code == 200
    result = resp.get_json()["result"]
    assert result["value"] is None
    assert result["kind"] == "UnsupportedOperation"
    assert result["message"]


def test_solver_error_returns_422(client: FlaskClient):
    payload = {
        "target": "time",
        "values": {"amount": 1200, "principal": 1000, "rate": 0, "frequency": 12},
    }

    resp = client.post("/api/solve", json=payload)

    assert resp.status_code == 422
    body = resp.get_json()
    assert body["result"]["kind"] == "DomainViolation"
    assert body["display"] == body["result"]["error"]


def test_invalid_field_returns_400(client: FlaskClient):
    resp = client.post("/api/solve", json=solve_payload(principal=-5))

    assert resp.status_code == 400
    assert resp.get_json() == {
        "detail": "Principal (P) must be a positive number.",
        "field": "principal",
    }


def test_missing_field_returns_400(client: FlaskClient):
    payload = {"target": "principal", "values": {"amount": 2000, "rate": 5, "time": 3}}

    resp = client.post("/api/solve", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["field"] == "frequency"


def test_target_value_is_ignored(client: FlaskClient):
    resp = client.post("/api/solve", json=solve_payload(amount="not a number"))

    assert resp.status_code == 200


def test_unknown_target_returns_422(client: FlaskClient):
    resp = client.post("/api/solve", json={"target": "interest", "values": {}})

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_cors_headers_for_allowed_origin(client: FlaskClient):
    resp = client.post(
        "/api/solve",
        json=solve_payload(),
        headers={"Origin": "http://localhost:5173"},
    )

    assert resp.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"


def test_boolean_value_is_rejected(client: FlaskClient):
    resp = client.post("/api/solve", json=solve_payload(principal=True))

    assert resp.status_code == 422
    detail = resp.get_json()["detail"]
    assert detail
    assert all(error["loc"][:2] == ["values", "principal"] for error in detail)
