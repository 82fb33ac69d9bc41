import httpx
from fastapi.testclient import TestClient

from light_exporter.config import Settings
from light_exporter.main import create_app
from light_exporter.upstream import fetch


def test_smoke_metrics_against_live_target(monkeypatch):
    """Route -> httpx GET -> parser -> exposition, with the controller faked at the transport."""
    target = "http://controller.test/cgi-bin/index.cgi?p=dataget"

    def handler(request):
        assert str(request.url) == target
        return httpx.Response(
            200, content=b"javascript:parent.lightValueSet(3,1,1,77,'x',0,'WTY22473+20.png');\n"
        )

    mock_client = httpx.Client(transport=httpx.MockTransport(handler))
    monkeypatch.setattr(fetch.httpx, "get", mock_client.get)

    client = TestClient(create_app(Settings(target=target)))
    resp = client.get("/metrics", headers={"X-Request-Id": "it-metrics-1"})

    assert resp.status_code == 200
    assert resp.headers.get("X-Request-Id") == "it-metrics-1"
    assert 'light_brightness{index="3",model_number="WTY22473"} 77' in resp.text


def test_smoke_unreachable_target_returns_500(monkeypatch):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    mock_client = httpx.Client(transport=httpx.MockTransport(handler))
    monkeypatch.setattr(fetch.httpx, "get", mock_client.get)

    client = TestClient(create_app(Settings(target="http://controller.test/")))
    resp = client.get("/metrics")

    assert resp.status_code == 500
    assert "failed to get http://controller.test/" in resp.text
