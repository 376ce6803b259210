# src/pr_reviewer/providers/openai.py
import openai
from openai import AsyncOpenAI
from .base import LLMProvider
from .contract import FUNCTION_NAME, SUBMIT_REVIEW_FUNCTION, build_messages, decode_submission
from pr_reviewer.errors import ProtocolError, TransportError
from pr_reviewer.models.review import ReviewDecision


class OpenAIProvider(LLMProvider):
    """OpenAI-compatible endpoint called through the SDK with the tools API."""

    BASE_URL = "https://api.openai.com/v1"

    def __init__(self, api_key: str, model: str = "gpt-4", base_url: str | None = None):
        self.model = model
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url or self.BASE_URL,
            max_retries=0,
            timeout=60.0,
        )

    @staticmethod
    def base_url_from_endpoint(endpoint: str) -> str:
        """Turn a full .../chat/completions endpoint into an SDK base URL."""
        return endpoint.rstrip("/").removesuffix("/chat/completions")

    async def review(self, prompt: str, rules_guide: str) -> ReviewDecision:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=build_messages(prompt, rules_guide),
                tools=[{"type": "function", "function": SUBMIT_REVIEW_FUNCTION}],
                tool_choice={"type": "function", "function": {"name": FUNCTION_NAME}},
            )
        except openai.APIStatusError as e:
            raise TransportError(
                f"Model endpoint returned {e.status_code}", status_code=e.status_code
            ) from e
        except openai.APIError as e:
            raise TransportError(f"Model endpoint request failed: {e!r}") from e

        if not response.choices:
            raise ProtocolError("Model response has no choices")

        tool_calls = response.choices[0].message.tool_calls or []
        if len(tool_calls) != 1:
            raise ProtocolError(
                f"Expected exactly one {FUNCTION_NAME} call, got {len(tool_calls)}"
            )

        call = tool_calls[0].function
        return decode_submission(call.name, call.arguments)
