# src/pr_reviewer/providers/__init__.py
from .base import LLMProvider
from .chat import ChatCompletionsProvider
from .openai import OpenAIProvider

__all__ = ["LLMProvider", "ChatCompletionsProvider", "OpenAIProvider"]
