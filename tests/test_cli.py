import json

from typer.testing import CliRunner

from unifi_network_client.cli import app
from unifi_network_client.models import ApplicationInfo

runner = CliRunner()

URL = "https://192.168.1.1"
BASE = "https://192.168.1.1/proxy/network/integration"
AUTH = ["--url", URL, "--api-key", "test-api-key"]


def test_info_cli(requests_mock):
    requests_mock.get(f"{BASE}/v1/info", json={"applicationVersion": "9.0.114"})

    result = runner.invoke(app, ["info", *AUTH])

    assert result.exit_code == 0
    assert "UniFi Network Version: 9.0.114" in result.stdout


def test_info_cli_reads_env(requests_mock):
    matcher = requests_mock.get(f"{BASE}/v1/info", json={"applicationVersion": "9.0.114"})

    result = runner.invoke(
        app,
        ["info", "--json"],
        env={"UNIFI_URL": URL, "UNIFI_API_KEY": "env-key"},
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"applicationVersion": "9.0.114"}
    assert matcher.last_request.headers["X-API-KEY"] == "env-key"


def test_insecure_flag_disables_verification(monkeypatch):
    captured: dict[str, object] = {}

    class DummyClient:
        def __init__(self, **kwargs):
            captured.update(kwargs)

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

        def application_info(self):
            return ApplicationInfo(application_version="9.0.114")

    monkeypatch.setattr("unifi_network_client.cli.UniFiClient", DummyClient)

    result = runner.invoke(app, ["info", *AUTH], env={"UNIFI_INSECURE": "1"})

    assert result.exit_code == 0
    assert captured["verify_ssl"] is False
    assert captured["base_url"] == URL


def test_sites_list_table(requests_mock):
    requests_mock.get(
        f"{BASE}/v1/sites",
        json={
            "offset": 0,
            "limit": 25,
            "count": 2,
            "totalCount": 2,
            "data": [
                {"_id": "s2", "name": "branch", "desc": "Branch", "role": "admin"},
                {"_id": "s1", "name": "default", "desc": "HQ", "role": "admin"},
            ],
        },
    )

    result = runner.invoke(app, ["sites", "list", *AUTH])

    assert result.exit_code == 0
    assert "Sites" in result.stdout
    assert "branch" in result.stdout
    assert "Showing 2 of 2 sites (offset: 0)" in result.stdout


def test_sites_list_json(requests_mock):
    matcher = requests_mock.get(
        f"{BASE}/v1/sites",
        json={"offset": 0, "limit": 10, "count": 1, "totalCount": 1, "data": [{"_id": "s1", "name": "default"}]},
    )

    result = runner.invoke(app, ["sites", "list", *AUTH, "--json", "--limit", "10"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["totalCount"] == 1
    assert payload["data"][0]["_id"] == "s1"
    assert matcher.last_request.qs == {"limit": ["10"]}


def test_devices_get_includes_type(requests_mock):
    requests_mock.get(
        f"{BASE}/v1/sites/default/devices/d1",
        json={"data": [{"id": "d1", "name": "Core", "features": ["switching"]}]},
    )

    result = runner.invoke(app, ["devices", "get", "--id", "d1", *AUTH])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["type"] == "switching"


def test_devices_action(requests_mock):
    matcher = requests_mock.post(f"{BASE}/v1/sites/lab/devices/d1", status_code=200)

    result = runner.invoke(
        app, ["devices", "action", "--id", "d1", "--action", "restart", "--site", "lab", *AUTH]
    )

    assert result.exit_code == 0
    assert "Successfully executed restart action on device d1" in result.stdout
    assert matcher.last_request.json() == {"cmd": "restart"}


def test_clients_block(requests_mock):
    requests_mock.post(f"{BASE}/v1/sites/default/clients/c1/block", status_code=200)

    result = runner.invoke(app, ["clients", "block", "--id", "c1", *AUTH])

    assert result.exit_code == 0
    assert "Blocked client c1" in result.stdout


def test_vouchers_generate(requests_mock):
    matcher = requests_mock.post(
        f"{BASE}/v1/sites/default/hotspot/vouchers/create",
        status_code=201,
        json={"data": [{"_id": "v1", "name": "Lobby", "code": "11111-22222", "timeLimitMinutes": 480}]},
    )

    result = runner.invoke(
        app,
        ["vouchers", "generate", "--name", "Lobby", "--time-limit", "480", "--count", "1", *AUTH],
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["code"] == "11111-22222"
    assert matcher.last_request.json() == {"count": 1, "name": "Lobby", "timeLimitMinutes": 480}


def test_vouchers_generate_validation_error(requests_mock):
    result = runner.invoke(
        app,
        ["vouchers", "generate", "--name", "Lobby", "--time-limit", "480", "--count", "0", *AUTH],
    )

    assert result.exit_code == 1
    assert "count must be between 1 and 10000" in result.output
    assert requests_mock.call_count == 0


def test_vouchers_delete(requests_mock):
    requests_mock.delete(f"{BASE}/v1/sites/default/hotspot/vouchers/v1", status_code=204)

    result = runner.invoke(app, ["vouchers", "delete", "--id", "v1", *AUTH])

    assert result.exit_code == 0
    assert "Successfully deleted voucher v1" in result.stdout


def test_api_error_reports_status(requests_mock):
    requests_mock.get(
        f"{BASE}/v1/sites/missing",
        status_code=404,
        json={"statusCode": 404, "statusName": "Not Found", "message": "site missing"},
    )

    result = runner.invoke(app, ["sites", "get", "--id", "missing", *AUTH])

    assert result.exit_code == 1
    assert "Not Found: site missing (status: 404" in result.output
    assert "Request failed" not in result.output


def test_undecodable_success_reports_status(requests_mock):
    requests_mock.get(f"{BASE}/v1/info", status_code=200, text="<html>")

    result = runner.invoke(app, ["info", *AUTH])

    assert result.exit_code == 1
    assert "Request failed (status 200): failed to decode response" in result.output


def test_invalid_url_is_a_usage_error():
    result = runner.invoke(app, ["info", "--url", "ftp://controller", "--api-key", "k"])

    assert result.exit_code == 2
    assert "invalid base URL" in result.output
