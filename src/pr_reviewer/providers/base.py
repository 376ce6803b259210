# src/pr_reviewer/providers/base.py
from abc import ABC, abstractmethod
from pr_reviewer.models.review import ReviewDecision


class LLMProvider(ABC):
    @abstractmethod
    async def review(self, prompt: str, rules_guide: str) -> ReviewDecision:
        """Send one review request to the model and decode its decision."""
        pass
