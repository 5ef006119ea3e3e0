"""HTTP download utilities with SSL certificate handling.

Requests go through an opener that uses certifi's CA bundle (standalone
interpreters on macOS cannot reach the system store) and that does not
follow redirects on its own. Redirects are followed explicitly so the
chain can be logged and bounded.
"""

from __future__ import annotations

import http.client
import os
import shutil
import ssl
import tempfile
from pathlib import Path
from typing import Any, Mapping, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urljoin, urlparse
from urllib.request import (
    HTTPRedirectHandler,
    HTTPSHandler,
    OpenerDirector,
    Request,
    build_opener,
)

import certifi

from rip.bootstrap.errors import DownloadError, TooManyRedirectsError
from rip.core.logging import get_logger

LOGGER = get_logger(__name__)

REDIRECT_CODES = frozenset({301, 302})

DEFAULT_MAX_REDIRECTS = 10

CHUNK_SIZE = 64 * 1024

_ALLOWED_SCHEMES = frozenset({"http", "https"})


class _NoRedirectHandler(HTTPRedirectHandler):
    """Surface 3xx responses as HTTPError instead of following them."""

    def redirect_request(self, req, fp, code, msg, headers, newurl):
        return None


def get_ssl_context() -> ssl.SSLContext:
    """Get an SSL context that uses certifi's CA bundle."""
    return ssl.create_default_context(cafile=certifi.where())


def build_download_opener() -> OpenerDirector:
    """Build an opener that verifies TLS with certifi and never auto-redirects."""
    return build_opener(HTTPSHandler(context=get_ssl_context()), _NoRedirectHandler())


def _check_scheme(url: str) -> None:
    scheme = urlparse(url).scheme
    if scheme not in _ALLOWED_SCHEMES:
        raise DownloadError(f"Unsupported URL scheme: {url}")


def open_url(
    url: str,
    *,
    headers: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    opener: Optional[OpenerDirector] = None,
) -> Any:
    """Open a URL, following 301/302 redirects up to ``max_redirects`` hops.

    Args:
        url: The URL to open.
        headers: Headers sent with every request in the chain.
        timeout: Socket timeout in seconds; None waits indefinitely.
        max_redirects: Maximum number of redirects to follow.
        opener: Opener to use; defaults to build_download_opener().

    Returns:
        The open response for the first non-redirect answer. The caller
        must close it.

    Raises:
        DownloadError: On transport failure or a non-200 final status.
        TooManyRedirectsError: If the redirect chain is longer than allowed.
    """
    opener = opener or build_download_opener()
    current = url

    for hop in range(max_redirects + 1):
        _check_scheme(current)
        request = Request(current, headers=dict(headers or {}))

        try:
            response = opener.open(request, timeout=timeout)
        except HTTPError as e:
            if e.code in REDIRECT_CODES:
                location = e.headers.get("Location") if e.headers else None
                e.close()
                current = _redirect_target(current, e.code, location, hop)
                continue
            raise DownloadError(f"HTTP {e.code}", status=e.code) from e
        except URLError as e:
            raise DownloadError(str(e.reason)) from e
        except (OSError, http.client.HTTPException, ValueError) as e:
            raise DownloadError(str(e) or type(e).__name__) from e

        status = getattr(response, "status", 200)
        if status in REDIRECT_CODES:
            location = response.headers.get("Location")
            response.close()
            current = _redirect_target(current, status, location, hop)
            continue
        if status != 200:
            response.close()
            raise DownloadError(f"HTTP {status}", status=status)

        return response

    raise TooManyRedirectsError(
        f"Too many redirects (more than {max_redirects}) starting from {url}"
    )


def _redirect_target(current: str, code: int, location: Optional[str], hop: int) -> str:
    if not location:
        raise DownloadError(f"HTTP {code} redirect without Location header", status=code)
    target = urljoin(current, location)
    LOGGER.debug(f"Redirect {hop + 1}: HTTP {code} -> {target}")
    return target


def download_file(
    url: str,
    dest_path: Path,
    *,
    headers: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    opener: Optional[OpenerDirector] = None,
) -> Path:
    """Stream a URL to ``dest_path``, following redirects.

    The body is written to a temporary file beside ``dest_path`` and moved
    into place only once the whole response has been read, so an
    interrupted download never leaves a file at ``dest_path``.

    Raises:
        DownloadError: If the request or the write fails.
        TooManyRedirectsError: If the redirect chain is longer than allowed.
    """
    try:
        response = open_url(
            url,
            headers=headers,
            timeout=timeout,
            max_redirects=max_redirects,
            opener=opener,
        )
    except TooManyRedirectsError:
        raise
    except DownloadError as e:
        if e.status is not None:
            raise DownloadError(f"Failed to download binary: {e}", status=e.status) from e
        raise DownloadError(f"Download failed: {e}") from e

    temp_path: Optional[Path] = None
    try:
        with response:
            fd, name = tempfile.mkstemp(
                prefix=f".{dest_path.name}.", suffix=".part", dir=dest_path.parent
            )
            temp_path = Path(name)
            with os.fdopen(fd, "wb") as f:
                # mkstemp creates 0600; match a regularly created file.
                os.chmod(temp_path, 0o644)
                shutil.copyfileobj(response, f, CHUNK_SIZE)
        os.replace(temp_path, dest_path)
        temp_path = None
    except (OSError, http.client.HTTPException) as e:
        raise DownloadError(f"Download failed: {e}") from e
    finally:
        if temp_path is not None:
            _remove_partial(temp_path)

    LOGGER.debug(f"Saved {url} to {dest_path}")
    return dest_path


def _remove_partial(path: Path) -> None:
    try:
        path.unlink()
    except OSError:
        pass
