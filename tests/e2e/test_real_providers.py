# tests/e2e/test_real_providers.py
"""
End-to-end tests with real API calls.

These tests require valid credentials set in environment variables:
- AI_API_KEY: key for the chat-completions endpoint
- AI_ENDPOINT / AI_MODEL: optional, default to OpenAI gpt-4
- BITBUCKET_USERNAME, BITBUCKET_APP_PASSWORD, BITBUCKET_WORKSPACE,
  BITBUCKET_REPO, PR_NUMBER: for the Bitbucket test

Run with: pytest tests/e2e/ -m e2e -v
"""
import os
import pytest
from pr_reviewer.models.review import Decision
from pr_reviewer.platforms.bitbucket import BitbucketClient
from pr_reviewer.providers.chat import ChatCompletionsProvider
from pr_reviewer.providers.openai import OpenAIProvider
from pr_reviewer.review.parser import parse_diff
from pr_reviewer.review.prompts import build_review_prompt


SIMPLE_DIFF = """diff --git a/math.py b/math.py
new file mode 100644
--- /dev/null
+++ b/math.py
@@ -0,0 +1,2 @@
+def add(a, b):
+    return a + b
"""
RULES = "Review Python code for correctness and readability."


def _ai_settings():
    api_key = os.environ.get("AI_API_KEY")
    if not api_key:
        pytest.skip("AI_API_KEY not set")
    endpoint = os.environ.get("AI_ENDPOINT", "https://api.openai.com/v1/chat/completions")
    model = os.environ.get("AI_MODEL", "gpt-4")
    return api_key, endpoint, model


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_chat_completions_real_review():
    api_key, endpoint, model = _ai_settings()
    provider = ChatCompletionsProvider(api_key=api_key, model=model, endpoint=endpoint)

    result = await provider.review(build_review_prompt(parse_diff(SIMPLE_DIFF)), RULES)

    assert result.decision in set(Decision)
    assert f"DECISION: {result.decision.value}" in result.review_text
    print(f"\nDecision: {result.decision.value} ({result.reason})")


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_openai_sdk_real_review():
    api_key, endpoint, model = _ai_settings()
    provider = OpenAIProvider(
        api_key=api_key,
        model=model,
        base_url=OpenAIProvider.base_url_from_endpoint(endpoint),
    )

    result = await provider.review(build_review_prompt(parse_diff(SIMPLE_DIFF)), RULES)

    assert result.decision in set(Decision)


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_bitbucket_real_fetch():
    names = ["BITBUCKET_USERNAME", "BITBUCKET_APP_PASSWORD", "BITBUCKET_WORKSPACE", "BITBUCKET_REPO", "PR_NUMBER"]
    if not all(os.environ.get(name) for name in names):
        pytest.skip("Bitbucket credentials or PR_NUMBER not set")

    client = BitbucketClient(
        username=os.environ["BITBUCKET_USERNAME"],
        app_password=os.environ["BITBUCKET_APP_PASSWORD"],
    )
    workspace = os.environ["BITBUCKET_WORKSPACE"]
    repo = os.environ["BITBUCKET_REPO"]
    pr_id = int(os.environ["PR_NUMBER"])

    info = await client.get_pr_info(workspace, repo, pr_id)
    diff = await client.get_pr_diff(workspace, repo, pr_id)

    assert info["title"]
    assert isinstance(diff, str)
    print(f"\nPR #{pr_id}: {info['title']} ({len(parse_diff(diff))} files)")
