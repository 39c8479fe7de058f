"""LLM Base Classes and Shared Code"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


class NetworkError(LLMError):
    """The request never got a usable HTTP response."""
    pass


class ApiError(LLMError):
    """The API answered with an error payload."""
    pass


class EmptyResponse(LLMError):
    """The API answered without any choices."""
    pass


@dataclass
class ChatMessage:
    role: str
    content: str

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


@dataclass
class ChatRequest:
    """A chat-completion request holding exactly one user message."""
    model: str
    messages: list[ChatMessage]
    max_tokens: int

    @classmethod
    def from_prompt(cls, prompt: str, model: str, max_tokens: int) -> 'ChatRequest':
        return cls(model=model, messages=[ChatMessage(role="user", content=prompt)], max_tokens=max_tokens)

    def to_dict(self) -> dict:
        return {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
            "max_tokens": self.max_tokens,
        }


@dataclass
class ChatResponse:
    """Decoded chat-completion response body."""
    choices: list[ChatMessage] = field(default_factory=list)
    error: Any = None

    @classmethod
    def from_dict(cls, data: dict) -> 'ChatResponse':
        if not isinstance(data, dict):
            raise ApiError(f"Unexpected response from API: {data!r}")
        if data.get("error") is not None:
            return cls(error=data["error"])
        raw_choices = data.get("choices") or []
        if not isinstance(raw_choices, list):
            raise ApiError(f"Unexpected choices in API response: {raw_choices!r}")
        choices = []
        for choice in raw_choices:
            message = choice.get("message") if isinstance(choice, dict) else None
            if not isinstance(message, dict):
                raise ApiError(f"Unexpected choice in API response: {choice!r}")
            choices.append(ChatMessage(
                role=message.get("role", "assistant"),
                content=message.get("content") or "",
            ))
        return cls(choices=choices)

    def first_content(self) -> str:
        """Content of the first choice, raising for error or empty bodies."""
        if self.error is not None:
            raise ApiError(f"Error from API: {describe_api_error(self.error)}")
        if not self.choices:
            raise EmptyResponse("No response from API")
        return self.choices[0].content


def describe_api_error(error: Any) -> str:
    if isinstance(error, dict):
        message = error.get("message")
        kind = error.get("type") or error.get("code")
        if message and kind:
            return f"{message} ({kind})"
        if message:
            return str(message)
    return str(error)


class CompletionClient(ABC):
    """Abstract base for chat-completion clients."""

    @abstractmethod
    def complete(self, prompt: str) -> str:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
