"""
HTTP client for the remote commerce backend.
"""
import logging
from typing import Any, Optional

import requests
from django.conf import settings

from shared.domain.exceptions import GatewayUnavailableError

logger = logging.getLogger(__name__)


class CommerceApiClient:
    """Thin JSON-over-HTTP wrapper around a shared requests session."""

    HEADERS = {
        'Content-Type': 'application/json',
        'Accept': 'application/json',
    }

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.COMMERCE_API_BASE_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else settings.COMMERCE_API_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update(self.HEADERS)

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @staticmethod
    def _auth_headers(token: Optional[str]) -> dict:
        if not token:
            return {}
        return {'Authorization': f"Bearer {token}"}

    def get_json(self, path: str, token: Optional[str] = None) -> Any:
        """GET a JSON document."""
        return self._request('GET', path, token=token)

    def post_json(self, path: str, payload: dict, token: Optional[str] = None) -> Any:
        """POST a JSON body and return the decoded JSON response."""
        return self._request('POST', path, payload=payload, token=token)

    def _request(
        self,
        method: str,
        path: str,
        payload: Optional[dict] = None,
        token: Optional[str] = None,
    ) -> Any:
        url = self._url(path)
        try:
            response = self.session.request(
                method,
                url,
                json=payload,
                headers=self._auth_headers(token),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise GatewayUnavailableError(operation=path, detail=str(e)) from e

        if not response.ok:
            detail = self._error_detail(response)
            logger.warning(f"{method} {url} returned {response.status_code}: {detail}")
            raise GatewayUnavailableError(
                operation=path,
                detail=detail,
                status_code=response.status_code,
            )

        if response.status_code == 204 or not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"{method} {url} returned malformed JSON: {e}")
            raise GatewayUnavailableError(operation=path, detail="malformed JSON response") from e

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        """Prefer the backend's own error message over the bare status line."""
        try:
            body = response.json()
        except ValueError:
            return f"API error: {response.status_code}"
        if isinstance(body, dict):
            return str(body.get('detail') or body.get('message') or f"API error: {response.status_code}")
        return f"API error: {response.status_code}"
