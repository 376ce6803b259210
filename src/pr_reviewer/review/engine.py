# src/pr_reviewer/review/engine.py
import asyncio
import logging
from pr_reviewer.errors import ConfigurationError
from pr_reviewer.models.bitbucket import to_pull_request_info
from pr_reviewer.models.config import RepoTarget
from pr_reviewer.models.review import ReviewReport, ReviewRequest
from pr_reviewer.platforms.base import GitPlatform
from pr_reviewer.providers.base import LLMProvider
from .parser import parse_diff
from .prompts import build_review_prompt


logger = logging.getLogger(__name__)


class ReviewEngine:
    def __init__(self, platform: GitPlatform, provider: LLMProvider, target: RepoTarget):
        self.platform = platform
        self.provider = provider
        self.target = target

    async def run(self, pr_id: int, rules_guide: str) -> ReviewReport:
        """Review one pull request and assemble the report."""
        if not rules_guide or not rules_guide.strip():
            raise ConfigurationError("Review rules guide is empty")

        logger.info(f"Fetching PR #{pr_id} from {self.target}")
        pr_data, diff_text = await self._fetch(pr_id)
        pr_info = to_pull_request_info(pr_id, pr_data)
        logger.info(f"Reviewing PR #{pr_info.id}: {pr_info.title}")

        files = parse_diff(diff_text)
        additions = sum(f.additions for f in files)
        deletions = sum(f.deletions for f in files)
        logger.info(f"Parsed {len(files)} file(s), +{additions}/-{deletions}")
        if not files:
            logger.warning(f"PR #{pr_id} has no file changes in its diff")

        request = ReviewRequest(files=tuple(files), rules_guide=rules_guide)
        prompt = build_review_prompt(request.files)

        logger.info(f"Requesting review for {len(request.files)} file(s)")
        decision = await self.provider.review(prompt, request.rules_guide)
        logger.info(f"Review decision for PR #{pr_info.id}: {decision.decision.value}")

        return ReviewReport(pull_request=pr_info, review=decision)

    async def _fetch(self, pr_id: int) -> tuple[dict, str]:
        """Fetch metadata and diff concurrently; both must succeed."""
        info_task = asyncio.ensure_future(
            self.platform.get_pr_info(self.target.workspace, self.target.repo_slug, pr_id)
        )
        diff_task = asyncio.ensure_future(
            self.platform.get_pr_diff(self.target.workspace, self.target.repo_slug, pr_id)
        )
        try:
            pr_data, diff_text = await asyncio.gather(info_task, diff_task)
        except BaseException:
            for task in (info_task, diff_task):
                task.cancel()
            raise
        return pr_data, diff_text
