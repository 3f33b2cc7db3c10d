import config
import utils.debug_events as debug_events
from app import create_app


def test_health_and_version():
    client = create_app().test_client()

    health = client.get("/health").get_json()["result"]
    version = client.get("/version").get_json()["result"]

    assert health["name"] == config.APP_NAME
    assert health["store"] == config.DOCUMENT_STORE
    assert set(health) == {"name", "version", "store"}, "health lists only name, version and store"
    assert version == {"name": config.APP_NAME, "version": config.APP_VERSION}


def test_request_id_is_echoed():
    client = create_app().test_client()

    resp = client.get("/version", headers={"X-Request-Id": "rid-1"})

    assert resp.headers["X-Request-Id"] == "rid-1", "incoming request id should be echoed"


def test_unknown_route_uses_error_envelope():
    client = create_app().test_client()

    resp = client.get("/nope")

    assert resp.status_code == 404
    assert resp.get_json()["error"]["status"] == "NOT_FOUND"


def test_debug_routes_hidden_when_disabled(monkeypatch):
    monkeypatch.setattr(config, "DEBUG_CONSOLE_ENABLED", False)
    client = create_app().test_client()

    assert client.get("/debug/events").status_code == 404
    assert client.post("/debug/clear").status_code == 404


def test_debug_events_record_requests(monkeypatch):
    monkeypatch.setattr(config, "DEBUG_CONSOLE_ENABLED", True)
    debug_events.clear_events()
    client = create_app().test_client()

    client.get("/version", headers={"X-Request-Id": "rid-2"})
    events = client.get("/debug/events").get_json()["result"]["events"]

    assert any(e["request_id"] == "rid-2" and e["category"] == "request" for e in events)

    last_id = events[-1]["id"]
    newer = client.get(f"/debug/events?since={last_id}").get_json()["result"]["events"]
    assert all(e["id"] > last_id for e in newer), "since filters older events"

    requests_only = client.get("/debug/events?category=request").get_json()["result"]["events"]
    assert requests_only and all(e["category"] == "request" for e in requests_only), "category filters events"

    cleared = client.post("/debug/clear").get_json()["result"]["cleared"]
    assert cleared > 0, "clear reports how many events it dropped"
    assert debug_events.list_events(last_id + 1000) == []
