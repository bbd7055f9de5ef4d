"""Pytest configuration and shared fixtures."""
import asyncio
import json
from collections.abc import Callable

import httpx
import pytest

from gemrest.llm import CompletionClient, GeminiRestClient

TEST_KEY = "test-key-123"


class ScriptedClient(CompletionClient):
    """Completion client that replays scripted outcomes.

    Each outcome is either a reply string or an exception to raise. When a
    gate is set, complete() waits on it before answering.
    """

    def __init__(
        self,
        outcomes: list[str | BaseException],
        gate: asyncio.Event | None = None,
        on_call: Callable[[str], None] | None = None,
    ) -> None:
        self._outcomes = list(outcomes)
        self.gate = gate
        self.on_call = on_call
        self.prompts: list[str] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "scripted-model"

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.on_call is not None:
            self.on_call(prompt)
        if self.gate is not None:
            await self.gate.wait()
        outcome = self._outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True


def gemini_reply(text: str) -> dict:
    """Build a well-formed generateContent success body."""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def make_gemini_client(
    handler: Callable[[httpx.Request], httpx.Response],
    credential: str | None = TEST_KEY,
    **kwargs,
) -> GeminiRestClient:
    """GeminiRestClient whose HTTP calls go to handler instead of the network."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GeminiRestClient(credential=lambda: credential, http_client=http_client, **kwargs)


class RecordingHandler:
    """MockTransport handler that records requests and returns one canned response."""

    def __init__(self, status: int = 200, body: dict | str | None = None) -> None:
        self.status = status
        self.body = body if body is not None else gemini_reply("hi there")
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, str):
            return httpx.Response(self.status, text=self.body)
        return httpx.Response(self.status, json=self.body)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def scripted_client():
    """Factory for ScriptedClient instances."""
    return ScriptedClient


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every gemrest environment variable."""
    for var in ("GEMINI_API_KEY", "API_KEY", "GEMINI_MODEL", "GEMINI_BASE_URL", "GEMREST_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
