"""BandwagonHost (KiwiVM) API client.

Thin proxy over the provider's read-only endpoints. The API answers HTTP 200 for
most failures and reports them through a non-zero ``error`` field.
"""

import logging

import requests

from backend.config import settings
from backend.services.errors import BandwagonError
from backend.utils.constants import (
    BANDWAGON_SERVICE_INFO_URL,
    BANDWAGON_TIMEOUT_SECONDS,
    BANDWAGON_USAGE_STATS_URL,
)

logger = logging.getLogger(__name__)


class BandwagonClient:
    def __init__(self, server_id: str, api_key: str, timeout: float = BANDWAGON_TIMEOUT_SECONDS):
        self.params = {"veid": server_id, "api_key": api_key}
        self.timeout = timeout

    def _get(self, url: str) -> dict:
        if not self.params["veid"] or not self.params["api_key"]:
            raise BandwagonError("BandwagonHost credentials are not configured")
        try:
            response = requests.get(url, params=self.params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"BandwagonHost request to {url} failed: {e}")
            raise BandwagonError()

        if isinstance(data, dict) and data.get("error"):
            logger.error(f"BandwagonHost returned error {data.get('error')}: {data.get('message')}")
            raise BandwagonError(data.get("message") or BandwagonError.default_message)
        return data

    def get_service_info(self) -> dict:
        return self._get(BANDWAGON_SERVICE_INFO_URL)

    def get_usage_stats(self) -> list[dict]:
        return self._get(BANDWAGON_USAGE_STATS_URL).get("data", [])


def get_bandwagon_client() -> BandwagonClient:
    """Dependency building a client from settings."""
    return BandwagonClient(
        server_id=settings.bandwagon_server_id,
        api_key=settings.bandwagon_secret_key,
    )
