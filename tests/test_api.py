"""
test_api.py
-----------
FastAPI routes over a service backed by fakeredis.
"""

from unittest.mock import MagicMock

import pytest
import redis
from fastapi.testclient import TestClient

import main
from repo_recognitions import RecognitionRepo
from service_recognitions import RecognitionService


@pytest.fixture
def api(monkeypatch, svc):
    monkeypatch.setattr(main, "svc", svc)
    return TestClient(main.app)


def _post(api, owner, time, amount=100, verified=False, document_type="Passport"):
    body = {
        "time": time,
        "amount": amount,
        "app_id": "A1",
        "document_type": document_type,
        "verified": verified,
    }
    return api.post(f"/owners/{owner}/recognitions", json=body)


def test_health_ok(api):
    assert api.get("/health").json() == {"ok": True}


def test_health_reports_unavailable_store(monkeypatch):
    client = MagicMock()
    client.ping.side_effect = redis.exceptions.ConnectionError("down")
    monkeypatch.setattr(main, "svc", RecognitionService(RecognitionRepo(client)))

    assert TestClient(main.app).get("/health").status_code == 503


def test_save_then_load(api):
    res = _post(api, "O", "2020-08-17T01:00:00Z", amount=100)
    assert res.status_code == 200
    event_id = res.json()["id"]

    loaded = api.get(f"/recognitions/{event_id}").json()
    assert loaded["id"] == event_id
    assert loaded["amount"] == 100
    assert loaded["verified"] is False


def test_day_summaries(api):
    _post(api, "O", "2020-08-17T01:00:00Z", amount=100)
    _post(api, "O", "2020-08-18T01:00:00Z", amount=200, verified=True)
    _post(api, "O", "2020-08-18T01:00:00Z", amount=50)

    days = api.get("/owners/O/days").json()
    assert [(d["amount"], d["success"], d["failed"]) for d in days] == [(100, 0, 1), (250, 1, 1)]

    day = api.get("/owners/O/days/2020-08-18").json()
    assert day["amount"] == 250
    assert len(api.get("/owners/O/recognitions").json()) == 3


def test_missing_records_are_404(api):
    assert api.get("/recognitions/nope").status_code == 404
    assert api.get("/owners/O/days/2020-08-20").status_code == 404


def test_invalid_event_is_400(api):
    assert _post(api, "O", "2020-08-17T01:00:00", amount=1).status_code == 400
    assert _post(api, "O", "2020-08-17T01:00:00Z", document_type="Visa").status_code == 400


def test_seed_creates_demo_scenario(api):
    res = api.post("/seed", params={"owner_id": "seeded"})
    assert res.json() == {"owner_id": "seeded", "inserted": 8}

    days = api.get("/owners/seeded/days").json()
    assert [(d["success"], d["failed"]) for d in days] == [(1, 2), (2, 2), (1, 0)]
