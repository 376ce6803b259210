from typing import Any
from urllib.parse import quote
import httpx
from pr_reviewer.errors import TransportError
from .base import GitPlatform


class BitbucketClient(GitPlatform):
    def __init__(
        self,
        username: str,
        app_password: str,
        base_url: str = "https://api.bitbucket.org/2.0",
    ):
        self.username = username
        self.app_password = app_password
        self.api_url = base_url.rstrip("/")

    def _auth(self) -> httpx.BasicAuth:
        return httpx.BasicAuth(self.username, self.app_password)

    def _pr_url(self, workspace: str, repo_slug: str, pr_id: int) -> str:
        return (
            f"{self.api_url}/repositories/{quote(workspace, safe='')}"
            f"/{quote(repo_slug, safe='')}/pullrequests/{pr_id}"
        )

    async def _get(self, url: str) -> httpx.Response:
        # The diff endpoint answers with a redirect to the rendered diff.
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                response = await client.get(url, auth=self._auth(), timeout=30.0)
                response.raise_for_status()
                return response
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Bitbucket returned {e.response.status_code} for {e.request.url}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Bitbucket request to {url} failed: {e!r}") from e

    async def get_pr_info(self, workspace: str, repo_slug: str, pr_id: int) -> dict[str, Any]:
        """Get pull request metadata (title, author, description, ...)."""
        response = await self._get(self._pr_url(workspace, repo_slug, pr_id))
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"Bitbucket returned invalid JSON for PR #{pr_id}") from e

    async def get_pr_diff(self, workspace: str, repo_slug: str, pr_id: int) -> str:
        """Get the raw unified diff of the whole pull request."""
        response = await self._get(f"{self._pr_url(workspace, repo_slug, pr_id)}/diff")
        return response.text
