"""OpenAI Chat Completions Client"""

import http.client
import json
import urllib.error
import urllib.request

from gitpilotai.config import DEFAULT_API_URL, DEFAULT_MAX_TOKENS, DEFAULT_MODEL, Config
from gitpilotai.llm.base import (
    ApiError,
    ChatRequest,
    ChatResponse,
    CompletionClient,
    LLMError,
    NetworkError,
    describe_api_error,
)


class OpenAIClient(CompletionClient):
    """Chat-completions client. One synchronous POST per prompt, no retries."""

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL,
                 max_tokens: int = DEFAULT_MAX_TOKENS, api_url: str = DEFAULT_API_URL):
        if not api_key:
            raise LLMError("No API key configured. Run: gitpilotai config")
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.api_url = api_url

    @classmethod
    def from_config(cls, config: Config) -> 'OpenAIClient':
        return cls(
            api_key=config.api_key,
            model=config.model,
            max_tokens=config.max_tokens,
            api_url=config.api_url,
        )

    @property
    def name(self) -> str:
        return f"OpenAI ({self.model})"

    def _build_request(self, prompt: str) -> urllib.request.Request:
        body = ChatRequest.from_prompt(prompt, self.model, self.max_tokens).to_dict()
        return urllib.request.Request(
            self.api_url,
            data=json.dumps(body).encode('utf-8'),
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {self.api_key}",
            },
            method="POST",
        )

    def _call_api(self, prompt: str) -> dict:
        """Make a single API call and decode the JSON body."""
        req = self._build_request(prompt)
        try:
            with urllib.request.urlopen(req) as response:
                raw = response.read()
        except urllib.error.HTTPError as e:
            raise self._http_error(e)
        except urllib.error.URLError as e:
            raise NetworkError(f"Error sending request to OpenAI: {e.reason}")
        except http.client.HTTPException as e:
            raise NetworkError(f"Incomplete response from OpenAI: {e}")
        except OSError as e:
            raise NetworkError(f"Connection to OpenAI failed: {e}")

        try:
            return json.loads(raw.decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ApiError(f"Error decoding API response: {e}")

    def _http_error(self, e: urllib.error.HTTPError) -> LLMError:
        """Map an HTTP error status to ApiError, using the JSON error body when there is one."""
        try:
            payload = json.loads(e.read().decode('utf-8'))
        except (UnicodeDecodeError, json.JSONDecodeError, OSError):
            payload = None
        if isinstance(payload, dict) and payload.get("error") is not None:
            return ApiError(f"Error from API ({e.code}): {describe_api_error(payload['error'])}")
        if e.code == 401:
            return ApiError("Invalid API key. Check your OPENAI_API_KEY.")
        return ApiError(f"OpenAI error ({e.code}): {e.reason}")

    def complete(self, prompt: str) -> str:
        data = self._call_api(prompt)
        return ChatResponse.from_dict(data).first_content()
