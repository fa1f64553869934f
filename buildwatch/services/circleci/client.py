"""
CircleCI v1.1 API client for build lookup and status polling.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from buildwatch.core.exceptions import CircleCIAPIError
from buildwatch.core.logging import get_logger
from .schemas import BuildDetail, BuildSummary

logger = get_logger(__name__)


class CircleCIClient:
    """Read-only client for one CircleCI project."""

    def __init__(self, base_url: str, project: str, token: str, timeout: float = 30.0) -> None:
        if not token:
            raise CircleCIAPIError("CIRCLE_CI_API_TOKEN is not configured")
        self._base_url = base_url.rstrip("/")
        self._project = project
        self._token = token
        self._timeout = timeout

    @property
    def project_url(self) -> str:
        return f"{self._base_url}/{self._project}"

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        url = f"{self.project_url}{path}"
        query = {"circle-token": self._token}
        if params:
            query.update(params)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params=query)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("CircleCI API error %s for %s", exc.response.status_code, url)
            raise CircleCIAPIError(f"CircleCI API error: {exc.response.status_code}") from exc
        except httpx.RequestError as exc:
            logger.error("CircleCI API request to %s failed: %s", url, exc.__class__.__name__)
            raise CircleCIAPIError("CircleCI API request failed") from exc
        except httpx.InvalidURL as exc:
            logger.error("Invalid CircleCI API URL %s: %s", url, exc)
            raise CircleCIAPIError("CircleCI API URL is invalid") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise CircleCIAPIError("CircleCI API returned invalid JSON") from exc

    async def list_builds(self, branch: str, limit: int = 10) -> list[BuildSummary]:
        """
        Fetch the most recent builds on a branch.

        Args:
            branch: Branch name as known to the VCS
            limit: Maximum number of builds to return

        Returns:
            Build summaries in the order CircleCI returned them

        Raises:
            CircleCIAPIError: If the request fails or the payload is malformed
        """
        data = await self._get(
            f"/tree/{quote(branch, safe='')}",
            params={"limit": limit, "shallow": "true"},
        )
        if not isinstance(data, list):
            raise CircleCIAPIError("CircleCI API returned unexpected builds payload")

        try:
            return [BuildSummary.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise CircleCIAPIError("CircleCI API returned malformed build entry") from exc

    async def find_build(self, branch: str, commit_sha: str, limit: int = 10) -> int | None:
        """
        Find the build number for a commit among recent builds on a branch.

        Returns:
            Build number of the first matching entry, or None if not listed yet
        """
        logger.info("Checking CircleCI builds for commit %s", commit_sha)
        for build in await self.list_builds(branch, limit):
            if build.vcs_revision == commit_sha:
                logger.info(
                    "Found build number %s for commit %s (status: %s, url: %s)",
                    build.build_num,
                    commit_sha,
                    build.status,
                    build.build_url,
                )
                return build.build_num
        return None

    async def get_build(self, build_num: int) -> BuildDetail:
        """
        Fetch a single build.

        Raises:
            CircleCIAPIError: If the request fails or the payload is malformed
        """
        data = await self._get(f"/{build_num}")
        if not isinstance(data, dict):
            raise CircleCIAPIError("CircleCI API returned unexpected build payload")

        try:
            return BuildDetail.from_dict(data, build_num)
        except (KeyError, TypeError, ValueError) as exc:
            raise CircleCIAPIError("CircleCI API returned malformed build") from exc

    async def get_build_status(self, build_num: int) -> str:
        """Fetch the current status string of a build."""
        status = (await self.get_build(build_num)).status
        logger.info("Build status is %s", status)
        return status

    async def get_build_url(self, build_num: int) -> str:
        """Fetch the web URL of a build."""
        build_url = (await self.get_build(build_num)).build_url
        logger.info("Build url is %s", build_url)
        return build_url
