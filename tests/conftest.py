"""Shared fakes for the git runner and the completion client."""

import pytest

from gitpilotai.git import CommandResult, CommandRunner
from gitpilotai.llm import CompletionClient


class FakeRunner(CommandRunner):
    """Answers git commands from a table; unknown commands succeed silently."""

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def run(self, *args):
        self.calls.append(args)
        result = self.responses.get(args, CommandResult(0, ""))
        if isinstance(result, str):
            return CommandResult(0, result)
        return result

    def called(self, *args):
        return args in self.calls

    def calls_starting_with(self, *prefix):
        return [c for c in self.calls if c[:len(prefix)] == prefix]


class FakeClient(CompletionClient):
    """Returns canned replies in order and records every prompt."""

    def __init__(self, *replies, error=None):
        self.replies = list(replies)
        self.error = error
        self.prompts = []

    @property
    def name(self):
        return "Fake (test)"

    def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.replies.pop(0)


@pytest.fixture
def fake_runner():
    """Return a factory for FakeRunner."""
    def _make(responses=None):
        return FakeRunner(responses)
    return _make


@pytest.fixture
def fake_client():
    """Return a factory for FakeClient."""
    def _make(*replies, error=None):
        return FakeClient(*replies, error=error)
    return _make
