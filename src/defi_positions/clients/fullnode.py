"""REST client for the account resources endpoint of a Movement fullnode."""

from __future__ import annotations

import logging
from typing import Any

import backoff
import requests

from ..adapters.base import Resource
from ..constants import CURSOR_HEADER, MAX_PAGE_LIMIT

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = {429, 500, 502, 503, 504}


def _giveup(e: Exception) -> bool:
    """Stop retrying on HTTP errors that a retry cannot fix."""
    return (
        isinstance(e, requests.exceptions.HTTPError)
        and e.response is not None
        and e.response.status_code not in RETRYABLE_STATUS
    )


class FullnodeClient:
    """Client for reading account resources using requests library."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout: float = 10.0,
        max_retries: int = 5,
        page_limit: int = MAX_PAGE_LIMIT,
    ):
        """Initialize fullnode client.

        Args:
            base_url: Fullnode REST base URL, e.g. https://mainnet.movementnetwork.xyz/v1
            api_key: Optional API key sent as a Bearer token
            timeout: Per-request timeout in seconds
            max_retries: Attempts per request, including the first one
            page_limit: Resources requested per page
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_limit = page_limit
        self.session = requests.Session()
        self.session.headers["Accept"] = "application/json"
        if api_key:
            self.session.headers["Authorization"] = f"Bearer {api_key}"
        self._get_with_retry = backoff.on_exception(
            backoff.expo,
            requests.exceptions.RequestException,
            max_tries=max_retries,
            giveup=_giveup,
            jitter=backoff.full_jitter,
        )(self._get)

    def _get(self, url: str, params: dict[str, Any]) -> requests.Response:
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response

    def get_account_resources(self, address: str) -> list[Resource]:
        """Fetch every resource of an account, following the page cursor.

        Args:
            address: Account address

        Returns:
            Resources in the order the fullnode returned them

        Raises:
            requests.HTTPError: If a request still fails after retries
            ValueError: If a page is not a JSON list of resources
        """
        url = f"{self.base_url}/accounts/{address}/resources"
        params: dict[str, Any] = {"limit": self.page_limit}
        resources: list[Resource] = []
        while True:
            try:
                response = self._get_with_retry(url, params)
            except requests.HTTPError as e:
                logger.error("Failed to fetch resources of %s: %s", address, e)
                raise
            page = response.json()
            if not isinstance(page, list):
                raise ValueError(f"Unexpected resources payload for {address}")
            resources.extend(Resource.from_dict(item) for item in page)
            cursor = response.headers.get(CURSOR_HEADER)
            logger.debug(
                "Fetched %d resource(s) of %s (cursor: %s)", len(page), address, cursor
            )
            if not cursor:
                return resources
            params = {"limit": self.page_limit, "start": cursor}

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> FullnodeClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
