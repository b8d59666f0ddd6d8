"""GitHub REST API wrapper."""

from __future__ import annotations

import logging
from urllib.parse import quote

import requests

from chart_version_gate.config.settings import settings
from chart_version_gate.models import InlineContent, NotInline, RemoteContent
from chart_version_gate.utils.encoding import decode_content

logger = logging.getLogger(__name__)


class GitHubError(Exception):
    """A GitHub API call failed, either at the transport or with a non-2xx status."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class GitHubClient:
    """Thin wrapper around the handful of GitHub REST endpoints the gate needs."""

    def __init__(
        self,
        token: str = "",
        api_url: str | None = None,
        session: requests.Session | None = None,
    ):
        self.token = token
        self.api_url = (api_url or settings.api_url).rstrip("/")
        self._session = session

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            session = requests.Session()
            session.headers.update({
                "Accept": "application/vnd.github+json",
                "User-Agent": settings.user_agent,
                "X-GitHub-Api-Version": settings.api_version,
            })
            if self.token:
                session.headers["Authorization"] = f"token {self.token}"
            self._session = session
        return self._session

    def _get(self, path: str, params: dict | None = None):
        url = f"{self.api_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=settings.request_timeout)
        except requests.RequestException as e:
            raise GitHubError(f"Request to {url} failed: {e}") from e
        if not resp.ok:
            message = resp.reason or ""
            try:
                message = resp.json().get("message", message)
            except ValueError:
                pass
            raise GitHubError(f"{resp.status_code} {message} ({url})", status=resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise GitHubError(f"Invalid JSON from {url}", status=resp.status_code) from e

    @staticmethod
    def _repo_path(owner: str, repo: str) -> str:
        return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"

    def get_ref(self, owner: str, repo: str, ref: str) -> dict:
        """Look up a single git reference such as ``heads/main`` or ``tags/v1``."""
        return self._get(f"{self._repo_path(owner, repo)}/git/ref/{quote(ref, safe='/')}")

    def get_content(self, owner: str, repo: str, path: str, ref: str) -> RemoteContent:
        """Fetch a file from the contents API at the given ref.

        Directory listings, symlinks, submodules and files too large to be
        inlined come back as NotInline.
        """
        data = self._get(
            f"{self._repo_path(owner, repo)}/contents/{quote(path.lstrip('/'), safe='/')}",
            params={"ref": ref},
        )
        if isinstance(data, list):
            return NotInline(kind="dir")
        content = data.get("content")
        if content is None:
            return NotInline(kind=data.get("type", ""))
        # Files over 1 MB come back with an empty body and encoding "none".
        if data.get("encoding") == "none":
            return NotInline(kind="large-file")
        return InlineContent(text=decode_content(content, data.get("encoding", "base64")))

    def get_default_branch(self, owner: str, repo: str) -> str:
        data = self._get(self._repo_path(owner, repo))
        return data.get("default_branch", "")
