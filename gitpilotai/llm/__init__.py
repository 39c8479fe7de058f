"""LLM Client Package"""

from gitpilotai.config import Config
from gitpilotai.llm.base import (
    ApiError,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    CompletionClient,
    EmptyResponse,
    LLMError,
    NetworkError,
)
from gitpilotai.llm.gpt import OpenAIClient


def get_client(config: Config) -> CompletionClient:
    """Build the completion client for a loaded configuration."""
    return OpenAIClient.from_config(config)


__all__ = [
    "CompletionClient",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "LLMError",
    "NetworkError",
    "ApiError",
    "EmptyResponse",
    "OpenAIClient",
    "get_client",
]
