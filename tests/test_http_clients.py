"""Tests for vision client adapters."""

import asyncio
import json

import httpx
import pytest

from calorie_tracker.adapters.completion_vision_client import (
    HttpxCompletionVisionClient,
)
from calorie_tracker.adapters.openai_vision_client import OpenAIVisionClient


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str) -> None:
        self.responses = _FakeResponses(output_text)


def test_openai_vision_client_returns_output_text() -> None:
    fake = _FakeOpenAI('{"name": "Toast"}')
    client = OpenAIVisionClient(client=fake, model="gpt-4o-mini")

    result = asyncio.run(
        client.complete(
            system_prompt="Be a nutritionist",
            user_prompt="What is this?",
            image_data_url="data:image/jpeg;base64,ZmFrZQ==",
        )
    )

    assert result == '{"name": "Toast"}'
    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["model"] == "gpt-4o-mini"
    assert payload["instructions"] == "Be a nutritionist"


def test_openai_vision_client_rejects_empty_output() -> None:
    client = OpenAIVisionClient(client=_FakeOpenAI(""), model="gpt-4o-mini")

    with pytest.raises(RuntimeError):
        asyncio.run(
            client.complete(
                system_prompt="s", user_prompt="u", image_data_url="data:,"
            )
        )


def test_completion_client_posts_messages() -> None:
    seen: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json.loads(request.content.decode()))
        return httpx.Response(200, json={"completion": '{"name": "Soup"}'})

    client = HttpxCompletionVisionClient(
        url="https://llm.example/text/llm/",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    result = asyncio.run(
        client.complete(
            system_prompt="system",
            user_prompt="user",
            image_data_url="data:image/png;base64,aW1n",
        )
    )

    assert result == '{"name": "Soup"}'
    messages = seen[0]["messages"]
    assert messages[0] == {"role": "system", "content": "system"}
    assert messages[1]["content"][1] == {"type": "image", "image": "aW1n"}


def test_completion_client_raises_on_http_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "boom"})

    client = HttpxCompletionVisionClient(
        url="https://llm.example/text/llm/",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(
            client.complete(system_prompt="s", user_prompt="u", image_data_url="x")
        )


def test_completion_client_requires_completion_text() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": []})

    client = HttpxCompletionVisionClient(
        url="https://llm.example/text/llm/",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(RuntimeError):
        asyncio.run(
            client.complete(system_prompt="s", user_prompt="u", image_data_url="x")
        )
