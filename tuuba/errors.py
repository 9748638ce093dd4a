"""Errors raised while talking to a PeerTube instance."""

from __future__ import annotations


class ApiError(Exception):
    """Base class for every failure of an API call."""


class RequestFailed(ApiError):
    """The HTTP request could not be completed."""

    def __init__(self) -> None:
        super().__init__("Request failed.")


class ParseFailed(ApiError):
    """The response body could not be turned into the expected value."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Couldn't parse response from '{url}'")


class InvalidUrl(ApiError):
    """The request URL is not a valid absolute URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Invalid URL: '{url}'")