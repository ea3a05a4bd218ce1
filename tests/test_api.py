import json

from fastapi.testclient import TestClient

from services.api.main import app

from conftest import INTAKE_DIR

client = TestClient(app)


def _intake_payload(name: str) -> dict:
    return json.loads((INTAKE_DIR / f"{name}.json").read_text(encoding="utf-8"))


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_generate_returns_camel_case_document():
    response = client.post("/v1/specs:generate", json=_intake_payload("SESSION-booking-luxe-cuts"))
    assert response.status_code == 200
    body = response.json()
    assert body["subType"] == "booking"
    assert body["fixes"] == []
    assert body["spec"]["businessName"] == "Luxe Cuts"
    components = body["spec"]["pages"][0]["components"]
    assert components[0]["componentId"] == "nav-sticky"
    assert components[0]["content"]["logoText"] == "Luxe Cuts"
    assert "visualConfig" not in components[0]


def test_generate_rejects_incomplete_intake():
    response = client.post("/v1/specs:generate", json={"sessionId": "s1"})
    assert response.status_code == 422


def test_validate_and_fix_round_trip():
    generated = client.post("/v1/specs:generate", json=_intake_payload("SESSION-restaurant-trattoria")).json()
    spec = generated["spec"]
    nav = spec["pages"][0]["components"][0]
    nav["content"]["logoText"] = "Trattoria"
    request = {"spec": spec, "context": {"siteType": "business", "description": "A cozy trattoria"}}

    validated = client.post("/v1/specs:validate", json=request)
    assert validated.status_code == 200
    warnings = validated.json()["warnings"]
    assert validated.json()["subType"] == "restaurant"
    assert any(w["severity"] == "error" and w.get("field") == "logoText" for w in warnings)

    fixed = client.post("/v1/specs:fix", json=request)
    assert fixed.status_code == 200
    body = fixed.json()
    assert body["spec"]["pages"][0]["components"][0]["content"]["logoText"] == "Nonna Rosa"
    assert body["fixes"][0]["rule"] == "business-name"
    assert body["fixes"][0]["componentRef"] == "nav-sticky[0]"
