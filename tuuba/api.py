"""Minimal JSON client for the PeerTube REST API."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import urlsplit

import requests

from tuuba.errors import InvalidUrl, ParseFailed, RequestFailed


def _is_valid_url(url: str) -> bool:
    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


class Api:
    """Issues GET requests against one instance and decodes JSON bodies."""

    def __init__(self, base_url: str, session: requests.Session | None = None) -> None:
        self.base_url = str(base_url)
        self.session = session if session is not None else requests.Session()

    def __repr__(self) -> str:
        return f"Api(base_url={self.base_url!r})"

    def get(self, path: str) -> Any:
        """Fetch ``base_url + path`` (e.g. "/api/v1/config") and return the decoded JSON."""
        url = f"{self.base_url}{path}"
        if not _is_valid_url(url):
            raise InvalidUrl(url)
        try:
            response = self.session.get(url)
            text = response.text
        except requests.RequestException as exc:
            raise RequestFailed() from exc
        try:
            return json.loads(text)
        except ValueError as exc:
            raise ParseFailed(url) from exc