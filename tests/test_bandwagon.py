"""Tests for the BandwagonHost API client."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from backend.services.bandwagon import BandwagonClient
from backend.services.errors import BandwagonError
from backend.utils.constants import BANDWAGON_SERVICE_INFO_URL, BANDWAGON_USAGE_STATS_URL


def _response(payload):
    resp = MagicMock()
    resp.json.return_value = payload
    resp.raise_for_status.return_value = None
    return resp


@patch("backend.services.bandwagon.requests.get")
def test_service_info_passes_credentials(mock_get):
    mock_get.return_value = _response({"error": 0, "hostname": "vps"})
    client = BandwagonClient(server_id="123", api_key="key")

    assert client.get_service_info() == {"error": 0, "hostname": "vps"}
    mock_get.assert_called_once_with(
        BANDWAGON_SERVICE_INFO_URL, params={"veid": "123", "api_key": "key"}, timeout=10
    )


@patch("backend.services.bandwagon.requests.get")
def test_usage_stats_unwraps_data(mock_get):
    mock_get.return_value = _response({"data": [{"timestamp": 1}], "vm_type": "kvm"})
    client = BandwagonClient(server_id="123", api_key="key")

    assert client.get_usage_stats() == [{"timestamp": 1}]
    assert mock_get.call_args.args[0] == BANDWAGON_USAGE_STATS_URL


@patch("backend.services.bandwagon.requests.get")
def test_api_level_error(mock_get):
    mock_get.return_value = _response({"error": 700005, "message": "Authentication failure"})
    client = BandwagonClient(server_id="123", api_key="bad")

    with pytest.raises(BandwagonError, match="Authentication failure"):
        client.get_service_info()


@patch("backend.services.bandwagon.requests.get")
def test_transport_error(mock_get, caplog):
    mock_get.side_effect = requests.ConnectionError("boom")
    client = BandwagonClient(server_id="123", api_key="key")

    with pytest.raises(BandwagonError):
        client.get_usage_stats()
    assert "boom" in caplog.text


def test_missing_credentials():
    with pytest.raises(BandwagonError, match="not configured"):
        BandwagonClient(server_id="", api_key="").get_service_info()
