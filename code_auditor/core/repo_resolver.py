"""
Repository Tree Resolver — Turns a repository reference into a list of scannable files.

Three steps, each usable on its own:
  1. parse_reference: owner/repo shorthand or a web URL -> RepoReference
  2. GitHubClient: default branch lookup, recursive tree listing, raw file fetch
  3. filter_supported_files: keep blobs under the base path with a supported extension
"""

from __future__ import annotations

import logging
import re
from typing import Iterable
from urllib.parse import quote, unquote, urlparse

import httpx

from code_auditor.core.errors import BranchResolutionError, TreeFetchError
from code_auditor.models.rule_models import SUPPORTED_EXTENSIONS
from code_auditor.models.scan_models import FileEntry, RepoReference

logger = logging.getLogger("code_auditor.repo_resolver")

_OWNER_REPO = re.compile(r"[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+")


def parse_reference(raw: str, host: str = "github.com") -> RepoReference | None:
    """
    Parse ``owner/repo`` or ``http(s)://<host>/owner/repo[.git][/tree/<ref>[/<path>]]``.

    Returns None for anything else. Never touches the network.
    """
    raw = raw.strip()
    if _OWNER_REPO.fullmatch(raw):
        owner, repo = raw.split("/")
        return RepoReference(owner=owner, repo=repo)

    try:
        url = urlparse(raw)
        hostname = url.hostname
    except ValueError:
        return None
    if url.scheme not in ("http", "https") or hostname != host:
        return None

    parts = [unquote(part) for part in url.path.lstrip("/").split("/")]
    owner = parts[0]
    repo = parts[1].removesuffix(".git") if len(parts) > 1 else ""
    if not owner or not repo:
        return None

    if len(parts) > 3 and parts[2] == "tree" and parts[3]:
        return RepoReference(owner=owner, repo=repo, ref=parts[3], path="/".join(parts[4:]))
    return RepoReference(owner=owner, repo=repo)


def _json_object(response: httpx.Response) -> dict | None:
    """Decoded JSON body when it is an object; None for any other body."""
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def filter_supported_files(entries: Iterable[FileEntry], base_path: str = "") -> list[str]:
    """Paths of blobs under ``base_path`` whose extension is supported, in tree order."""
    base = base_path.strip("/")
    prefix = f"{base}/" if base else ""
    return [
        entry.path
        for entry in entries
        if entry.type == "blob"
        and entry.path.startswith(prefix)
        and entry.path.lower().endswith(SUPPORTED_EXTENSIONS)
    ]


class GitHubClient:
    """
    Async client for the public GitHub REST API and raw content host.

    Every request carries an explicit timeout. An authenticated token is
    optional and only sent to the API host.
    """

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        raw_url: str = "https://raw.githubusercontent.com",
        token: str | None = None,
        timeout: float = 15.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.raw_url = raw_url.rstrip("/")
        self.timeout = timeout
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._api_headers = {"Accept": "application/vnd.github+json"}
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_api(self, path: str, params: dict | None = None) -> httpx.Response:
        return await self._client.get(
            f"{self.api_url}{path}",
            params=params,
            headers=self._api_headers,
            timeout=self.timeout,
        )

    async def fetch_default_branch(self, owner: str, repo: str) -> str:
        """
        Look up the repository's default branch.

        Raises:
            BranchResolutionError: On any transport failure, non-success
                status, or a body that is not a JSON object with a
                ``default_branch`` string.
        """
        try:
            response = await self._get_api(f"/repos/{owner}/{repo}")
        except httpx.HTTPError as e:
            logger.warning(f"Repo metadata request failed for {owner}/{repo}: {e}")
            raise BranchResolutionError(owner, repo) from e

        if not response.is_success:
            logger.warning(
                f"Repo metadata for {owner}/{repo} returned HTTP {response.status_code}"
            )
            raise BranchResolutionError(owner, repo)

        data = _json_object(response)
        branch = data.get("default_branch") if data is not None else None
        if not branch or not isinstance(branch, str):
            logger.warning(f"Repo metadata for {owner}/{repo} has no usable default_branch")
            raise BranchResolutionError(owner, repo)
        return branch

    async def fetch_tree(self, owner: str, repo: str, ref: str) -> list[FileEntry]:
        """
        Recursive tree listing of ``ref``.

        Raises:
            TreeFetchError: With the failure reason as its message. A body
                without a ``tree`` list is "Tree not available".
        """
        try:
            response = await self._get_api(
                f"/repos/{owner}/{repo}/git/trees/{quote(ref, safe='')}",
                params={"recursive": "1"},
            )
        except httpx.HTTPError as e:
            raise TreeFetchError(f"Failed to fetch repository tree: {e}") from e

        if not response.is_success:
            raise TreeFetchError("Failed to fetch repository tree")

        data = _json_object(response)
        tree = data.get("tree") if data is not None else None
        if not isinstance(tree, list):
            raise TreeFetchError("Tree not available")
        if data.get("truncated"):
            logger.warning(f"Tree listing for {owner}/{repo}@{ref} was truncated by the API")

        return [
            FileEntry(path=node["path"], type=node["type"])
            for node in tree
            if isinstance(node, dict)
            and isinstance(node.get("path"), str)
            and isinstance(node.get("type"), str)
        ]

    async def fetch_raw_file(self, owner: str, repo: str, ref: str, path: str) -> str | None:
        """Raw text of one file, or None on a non-success status. Transport errors propagate."""
        response = await self._client.get(
            f"{self.raw_url}/{owner}/{repo}/{quote(ref, safe='/')}/{quote(path, safe='/')}",
            timeout=self.timeout,
        )
        if not response.is_success:
            logger.debug(f"Raw fetch of {path} returned HTTP {response.status_code}")
            return None
        return response.text
