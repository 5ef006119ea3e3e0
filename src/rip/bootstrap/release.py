"""GitHub release metadata for the rip scanner."""

from __future__ import annotations

import http.client
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.request import OpenerDirector

from rip import __version__ as RIP_VERSION
from rip.bootstrap.download import DEFAULT_MAX_REDIRECTS, open_url
from rip.bootstrap.errors import DownloadError, ReleaseMetadataError
from rip.core.logging import get_logger

LOGGER = get_logger(__name__)

GITHUB_REPOSITORY = "saintpetejackboy/rip"
GITHUB_API_URL = "https://api.github.com"
LATEST_RELEASE_URL = f"{GITHUB_API_URL}/repos/{GITHUB_REPOSITORY}/releases/latest"

# The GitHub API rejects requests without a User-Agent.
USER_AGENT = f"rip-python-installer/{RIP_VERSION}"

REQUEST_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/vnd.github+json",
}


@dataclass(frozen=True)
class Asset:
    """A downloadable file attached to a release."""

    name: str
    url: str


@dataclass
class ReleaseMetadata:
    """The parts of a GitHub release document the installer needs."""

    tag_name: str = ""
    assets: List[Asset] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReleaseMetadata":
        """Create from a decoded release JSON document.

        Raises:
            ReleaseMetadataError: If the document is not a release object.
        """
        if not isinstance(data, dict):
            raise ReleaseMetadataError(
                f"Failed to parse release data: expected an object, got {type(data).__name__}"
            )
        raw_assets = data.get("assets", [])
        if not isinstance(raw_assets, list):
            raise ReleaseMetadataError("Failed to parse release data: 'assets' is not a list")

        assets = []
        for item in raw_assets:
            if not isinstance(item, dict):
                continue
            name = item.get("name")
            url = item.get("browser_download_url")
            if isinstance(name, str) and isinstance(url, str):
                assets.append(Asset(name=name, url=url))

        return cls(tag_name=str(data.get("tag_name") or ""), assets=assets)

    def find_asset(self, name: str) -> Optional[Asset]:
        """Return the asset whose name equals ``name`` exactly."""
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None


def parse_release(body: bytes) -> ReleaseMetadata:
    """Decode a release JSON body.

    Raises:
        ReleaseMetadataError: If the body is not valid JSON.
    """
    try:
        data = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ReleaseMetadataError(f"Failed to parse release data: {e}") from e
    return ReleaseMetadata.from_dict(data)


def fetch_latest_release(
    url: str = LATEST_RELEASE_URL,
    *,
    timeout: Optional[float] = None,
    max_redirects: int = DEFAULT_MAX_REDIRECTS,
    opener: Optional[OpenerDirector] = None,
) -> ReleaseMetadata:
    """Fetch metadata for the latest published release.

    Raises:
        DownloadError: If the request fails or returns a non-200 status.
        ReleaseMetadataError: If the response body cannot be parsed.
    """
    LOGGER.debug(f"Fetching release metadata from {url}")
    try:
        with open_url(
            url,
            headers=REQUEST_HEADERS,
            timeout=timeout,
            max_redirects=max_redirects,
            opener=opener,
        ) as response:
            body = response.read()
    except DownloadError as e:
        raise DownloadError(f"Failed to fetch release info: {e}", status=e.status) from e
    except (OSError, http.client.HTTPException) as e:
        raise DownloadError(f"Failed to fetch release info: {e}") from e

    release = parse_release(body)
    LOGGER.debug(f"Release {release.tag_name or '<untagged>'} has {len(release.assets)} asset(s)")
    return release
