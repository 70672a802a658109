"""Minimal GitHub REST client for publishing releases."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import requests

from apizza.release.errors import ReleaseExistsError, ReleaseNotFoundError

logger = logging.getLogger(__name__)

API_BASE = "https://api.github.com"
UPLOAD_BASE = "https://uploads.github.com"


def _is_already_exists(response: requests.Response) -> bool:
    if response.status_code != 422:
        return False
    try:
        payload = response.json()
    except ValueError:
        return False
    return any(err.get("code") == "already_exists" for err in payload.get("errors", []))


class GitHubClient:
    """Release operations for one ``owner/name`` repository."""

    def __init__(
        self,
        repo: str,
        token: str | None,
        *,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.repo = repo
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    def _url(self, path: str) -> str:
        return f"{API_BASE}/repos/{self.repo}{path}"

    def tags(self) -> list[str]:
        """Return every tag name in the repository."""
        names: list[str] = []
        page = 1
        while True:
            response = self._session.get(
                self._url("/tags"),
                params={"per_page": 100, "page": page},
                timeout=self.timeout,
            )
            response.raise_for_status()
            batch = response.json()
            names.extend(t["name"] for t in batch)
            if len(batch) < 100:
                return names
            page += 1

    def create_release(
        self,
        tag: str,
        *,
        title: str | None = None,
        body: str = "",
        draft: bool = False,
        prerelease: bool = False,
    ) -> dict[str, Any]:
        """Create the release for *tag*.

        Raises:
            ReleaseExistsError: A release for *tag* is already published.
        """
        response = self._session.post(
            self._url("/releases"),
            json={
                "tag_name": tag,
                "name": title or tag,
                "body": body,
                "draft": draft,
                "prerelease": prerelease,
            },
            timeout=self.timeout,
        )
        if _is_already_exists(response):
            raise ReleaseExistsError(tag)
        response.raise_for_status()
        release: dict[str, Any] = response.json()
        logger.info("Created release %s (id=%s)", tag, release.get("id"))
        return release

    def upload_asset(self, release: dict[str, Any], path: Path) -> dict[str, Any]:
        """Upload *path* as an asset of *release*."""
        url = f"{UPLOAD_BASE}/repos/{self.repo}/releases/{release['id']}/assets"
        response = self._session.post(
            url,
            params={"name": path.name},
            data=path.read_bytes(),
            headers={"Content-Type": "application/octet-stream"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        logger.info("Uploaded %s", path.name)
        return response.json()

    def release_by_tag(self, tag: str) -> dict[str, Any]:
        """Look up the release for *tag*.

        Raises:
            ReleaseNotFoundError: No release exists for *tag*.
        """
        response = self._session.get(self._url(f"/releases/tags/{tag}"), timeout=self.timeout)
        if response.status_code == 404:
            raise ReleaseNotFoundError(tag)
        response.raise_for_status()
        return response.json()

    def delete_release(self, tag: str) -> None:
        release = self.release_by_tag(tag)
        response = self._session.delete(
            self._url(f"/releases/{release['id']}"), timeout=self.timeout
        )
        if response.status_code == 404:
            raise ReleaseNotFoundError(tag)
        response.raise_for_status()
        logger.info("Deleted release %s", tag)

    def close(self) -> None:
        self._session.close()
