# src/pr_reviewer/providers/chat.py
import httpx
from .base import LLMProvider
from .contract import FUNCTION_NAME, SUBMIT_REVIEW_FUNCTION, build_messages, decode_submission
from pr_reviewer.errors import ProtocolError, TransportError
from pr_reviewer.models.review import ReviewDecision


class ChatCompletionsProvider(LLMProvider):
    """Chat-completions endpoint called over plain HTTP with the functions API."""

    API_URL = "https://api.openai.com/v1/chat/completions"

    def __init__(self, api_key: str, model: str = "gpt-4", endpoint: str | None = None):
        self.api_key = api_key
        self.model = model
        self.endpoint = endpoint or self.API_URL

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def review(self, prompt: str, rules_guide: str) -> ReviewDecision:
        payload = {
            "model": self.model,
            "messages": build_messages(prompt, rules_guide),
            "functions": [SUBMIT_REVIEW_FUNCTION],
            "function_call": {"name": FUNCTION_NAME},
        }
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.endpoint,
                    json=payload,
                    headers=self._headers(),
                    timeout=60.0,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"Model endpoint returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Model endpoint request failed: {e!r}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError("Model endpoint returned a non-JSON body") from e

        try:
            message = data["choices"][0]["message"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProtocolError("Model response has no choices") from e

        function_call = message.get("function_call") if isinstance(message, dict) else None
        if not isinstance(function_call, dict):
            raise ProtocolError(f"Model answered without calling {FUNCTION_NAME}")

        return decode_submission(function_call.get("name"), function_call.get("arguments"))
