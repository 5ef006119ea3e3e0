"""Shared fixtures for unit tests."""

from __future__ import annotations

import io
import json
from email.message import Message
from typing import Any, Dict, List, Optional, Tuple, Union
from urllib.error import HTTPError
from urllib.request import Request

import pytest


class FakeResponse(io.BytesIO):
    """Minimal stand-in for an http.client.HTTPResponse."""

    def __init__(
        self,
        body: bytes = b"",
        status: int = 200,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(body)
        self.status = status
        self.headers = headers or {}


Route = Union[Tuple[int, bytes, Dict[str, str]], BaseException]


class FakeOpener:
    """Opener that answers from a URL → outcome table and records requests.

    Each outcome is either an exception to raise or a
    ``(status, body, headers)`` tuple turned into a fresh FakeResponse.
    """

    def __init__(self, routes: Dict[str, Route]) -> None:
        self.routes = routes
        self.requests: List[Request] = []

    def open(self, request: Request, timeout: Any = None) -> FakeResponse:
        self.requests.append(request)
        outcome = self.routes[request.full_url]
        if isinstance(outcome, BaseException):
            raise outcome
        status, body, headers = outcome
        return FakeResponse(body, status=status, headers=headers)

    @property
    def urls(self) -> List[str]:
        return [r.full_url for r in self.requests]


def http_error(url: str, code: int, headers: Optional[Dict[str, str]] = None) -> HTTPError:
    """Build an HTTPError as urllib raises it for non-2xx answers."""
    hdrs = Message()
    for key, value in (headers or {}).items():
        hdrs[key] = value
    return HTTPError(url, code, "error", hdrs, io.BytesIO(b""))


def release_body(*assets: Tuple[str, str], tag: str = "v0.2.0") -> bytes:
    """Encode a GitHub release document with the given (name, url) assets."""
    return json.dumps(
        {
            "tag_name": tag,
            "assets": [
                {"name": name, "browser_download_url": url} for name, url in assets
            ],
        }
    ).encode("utf-8")


@pytest.fixture
def fake_opener_factory():
    """Return the FakeOpener class for building per-test route tables."""
    return FakeOpener


@pytest.fixture
def make_http_error():
    """Return a builder for urllib HTTPError instances."""
    return http_error


@pytest.fixture
def make_release_body():
    """Return a builder for release JSON bodies."""
    return release_body
