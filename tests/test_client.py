import logging

import pytest
import requests
from urllib3.exceptions import InsecureRequestWarning

from unifi_network_client import UniFiClient
from unifi_network_client.config import normalize_base_url
from unifi_network_client.models import DeviceAction
from unifi_network_client.exceptions import (
    ApiError,
    AuthenticationError,
    RequestError,
    UnexpectedResponseError,
    ValidationError,
)

BASE = "https://192.168.1.1/proxy/network/integration"


def build_client(**kwargs):
    kwargs.setdefault("base_url", "https://192.168.1.1")
    kwargs.setdefault("api_key", "test-api-key")
    return UniFiClient(**kwargs)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("https://192.168.1.1", BASE),
        ("https://192.168.1.1/", BASE),
        ("https://192.168.1.1/proxy/network/integration", BASE),
        ("https://192.168.1.1/proxy/network/integration/", BASE),
        ("https://unifi:8443/custom", "https://unifi:8443/proxy/network/integration/custom"),
    ],
)
def test_base_url_contains_prefix_once(raw, expected):
    assert normalize_base_url(raw) == expected


def test_invalid_base_url_rejected():
    with pytest.raises(ValidationError, match="invalid base URL"):
        build_client(base_url="://invalid")


def test_missing_api_key_rejected():
    with pytest.raises(AuthenticationError, match="API key is required"):
        build_client(api_key="")


def test_headers_sent_on_every_request(requests_mock):
    client = build_client()
    matcher = requests_mock.get(f"{BASE}/v1/info", json={"applicationVersion": "9.0.114"})

    info = client.application_info()

    assert info.application_version == "9.0.114"
    headers = matcher.last_request.headers
    assert headers["X-API-KEY"] == "test-api-key"
    assert headers["Accept"] == "application/json"
    assert headers["Content-Type"] == "application/json"


def test_request_path_with_prefix_is_not_doubled(requests_mock):
    client = build_client(base_url=f"{BASE}/")
    matcher = requests_mock.get(f"{BASE}/v1/sites", json={"data": []})

    client.request("GET", "/proxy/network/integration/v1/sites")

    assert matcher.last_request.path == "/proxy/network/integration/v1/sites"


def test_structured_error_body_is_decoded(requests_mock):
    client = build_client()
    requests_mock.get(
        f"{BASE}/v1/sites/default",
        status_code=404,
        json={
            "statusCode": 404,
            "statusName": "Not Found",
            "message": "X not found",
            "timestamp": "2024-01-01T00:00:00Z",
            "requestPath": "/v1/sites/default",
            "requestId": "abc-123",
        },
    )

    with pytest.raises(ApiError) as excinfo:
        client.sites.get("default")

    err = excinfo.value
    assert err.status_code == 404
    assert err.message == "X not found"
    assert err.request_id == "abc-123"
    assert str(err) == "Not Found: X not found (status: 404, request: /v1/sites/default, id: abc-123)"


def test_undecodable_error_body_falls_back_to_raw_text(requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE}/v1/info", status_code=502, text="Bad Gateway")

    with pytest.raises(RequestError) as excinfo:
        client.application_info()

    assert excinfo.value.status_code == 502
    assert str(excinfo.value) == "API error (status 502): Bad Gateway"
    assert excinfo.value.details == "Bad Gateway"


def test_invalid_success_body_raises(requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE}/v1/info", status_code=200, text="<html>")

    with pytest.raises(UnexpectedResponseError):
        client.application_info()


def test_request_error_includes_root_cause():
    class ExplodingSession:
        def request(self, *args, **kwargs):  # pragma: no cover - helper
            raise requests.exceptions.SSLError("CERTIFICATE_VERIFY_FAILED")

        def close(self):  # pragma: no cover - helper
            pass

    client = build_client(session=ExplodingSession())

    with pytest.raises(RequestError) as excinfo:
        client.sites.list()

    assert "CERTIFICATE_VERIFY_FAILED" in str(excinfo.value)
    assert not isinstance(excinfo.value, ApiError)


def test_timeout_is_reported_as_request_error(requests_mock):
    client = build_client(timeout=2.5)
    requests_mock.get(f"{BASE}/v1/sites", exc=requests.exceptions.ConnectTimeout)

    with pytest.raises(RequestError, match="timed out after 2.5s"):
        client.sites.list()


def test_request_logging_includes_url(caplog, requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE}/v1/sites", json={"data": []})

    with caplog.at_level("INFO", logger="unifi_network_client.client"):
        client.sites.list()

    assert f"UniFi request GET {BASE}/v1/sites" in caplog.text


def test_payload_logging_redacts_api_key(caplog, requests_mock):
    client = build_client(log_payloads=True)
    requests_mock.post(f"{BASE}/v1/sites/default/devices/d1", status_code=200)

    with caplog.at_level("DEBUG", logger="unifi_network_client.client"):
        client.devices.execute_action("default", "d1", DeviceAction(action="restart"))

    assert '"cmd": "restart"' in caplog.text
    assert "***" in caplog.text
    assert "test-api-key" not in caplog.text


def test_payload_logging_off_by_default(caplog, requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE}/v1/sites", json={"data": []})

    with caplog.at_level("DEBUG", logger="unifi_network_client.client"):
        client.sites.list()

    assert "Received response" not in caplog.text


def test_custom_logger_is_used(caplog, requests_mock):
    custom = logging.getLogger("my.app.unifi")
    client = build_client(logger=custom)
    requests_mock.get(f"{BASE}/v1/sites", json={"data": []})

    with caplog.at_level("INFO", logger="my.app.unifi"):
        client.sites.list()

    assert any(record.name == "my.app.unifi" for record in caplog.records)


def test_disables_insecure_warning_when_verify_disabled(monkeypatch):
    captured: list[object] = []

    def fake_disable(warning):  # pragma: no cover - helper
        captured.append(warning)

    monkeypatch.setattr(
        "unifi_network_client.client.urllib3.disable_warnings",
        fake_disable,
    )

    build_client(verify_ssl=False)

    assert captured and captured[0] is InsecureRequestWarning


def test_application_info_rejects_empty_body(requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE}/v1/info", status_code=200, text="")

    with pytest.raises(UnexpectedResponseError, match="empty response body"):
        client.application_info()


def test_payload_logging_includes_error_responses(caplog, requests_mock):
    client = build_client(log_payloads=True)
    requests_mock.get(
        f"{BASE}/v1/sites/default",
        status_code=404,
        json={"statusCode": 404, "statusName": "Not Found", "message": "X not found"},
    )

    with caplog.at_level("DEBUG", logger="unifi_network_client.client"):
        with pytest.raises(ApiError):
            client.sites.get("default")

    assert "Received response: status=404" in caplog.text
    assert "X not found" in caplog.text


def test_request_timeout_override(requests_mock):
    client = build_client(timeout=30.0)
    matcher = requests_mock.get(f"{BASE}/v1/sites", json={"data": []})

    client.request("GET", "/v1/sites", timeout=5.0)
    assert matcher.last_request.timeout == 5.0

    client.request("GET", "/v1/sites")
    assert matcher.last_request.timeout == 30.0
