"""GitHub Releases backed release registry."""

from __future__ import annotations

import os
from typing import Any, Dict, Iterable

import requests

from create_tau_app.domain.errors import NoValidReleasesError, RegistryUnavailableError
from create_tau_app.domain.release import ReleaseSet, parse_version
from create_tau_app.ports.release_registry import ReleaseRegistry
from create_tau_app.settings import DEFAULT_API_URL, DEFAULT_TOKEN_ENV

PAGE_SIZE = 100
USER_AGENT = "create-tau-app"


class GitHubReleaseRegistry(ReleaseRegistry):
    def __init__(
        self,
        owner: str,
        repo: str,
        *,
        api_url: str = DEFAULT_API_URL,
        token_env: str | None = DEFAULT_TOKEN_ENV,
        session: requests.Session | None = None,
    ) -> None:
        self._owner = owner
        self._repo = repo
        self._api_url = api_url.rstrip("/")
        self._token_env = token_env
        self._session = session or requests.Session()

    def list_releases(self) -> ReleaseSet:
        versions: Dict[str, str] = {}
        for release in self._iter_releases():
            tag = _accepted_tag(release)
            if tag is None:
                continue
            url = release.get("zipball_url")
            if not isinstance(url, str) or not url:
                continue
            versions[tag] = url
        if not versions:
            raise NoValidReleasesError(
                f"No published releases of {self._owner}/{self._repo} have a semantic version tag."
            )
        return ReleaseSet.from_releases(versions)

    def _iter_releases(self) -> Iterable[dict[str, Any]]:
        url = f"{self._api_url}/repos/{self._owner}/{self._repo}/releases"
        page = 1
        while True:
            items = self._fetch_page(url, page)
            yield from (item for item in items if isinstance(item, dict))
            if len(items) < PAGE_SIZE:
                return
            page += 1

    def _fetch_page(self, url: str, page: int) -> list[Any]:
        try:
            response = self._session.get(
                url,
                params={"per_page": PAGE_SIZE, "page": page},
                headers=self._headers(),
                timeout=30,
            )
        except requests.RequestException as exc:
            raise RegistryUnavailableError(f"Could not query releases: {exc}") from exc
        if response.status_code >= 400:
            raise RegistryUnavailableError(
                f"Release listing failed: {response.status_code} {response.text[:200]}"
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise RegistryUnavailableError(f"Release listing returned invalid JSON: {exc}") from exc
        if not isinstance(payload, list):
            raise RegistryUnavailableError("Release listing did not return a list")
        return payload

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
        }
        token = os.environ.get(self._token_env) if self._token_env else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers


def _accepted_tag(release: dict[str, Any]) -> str | None:
    if release.get("draft") or release.get("prerelease"):
        return None
    tag = release.get("tag_name")
    if not isinstance(tag, str) or parse_version(tag) is None:
        return None
    return tag
