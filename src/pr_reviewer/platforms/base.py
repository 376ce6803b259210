from abc import ABC, abstractmethod
from typing import Any


class GitPlatform(ABC):
    @abstractmethod
    async def get_pr_info(self, workspace: str, repo_slug: str, pr_id: int) -> dict[str, Any]:
        pass

    @abstractmethod
    async def get_pr_diff(self, workspace: str, repo_slug: str, pr_id: int) -> str:
        pass
