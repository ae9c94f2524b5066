"""Plain HTTP client for a chat-completion style LLM endpoint."""

from dataclasses import dataclass

import httpx

from calorie_tracker.services.vision import VisionClient


@dataclass
class HttpxCompletionVisionClient(VisionClient):
    """Posts chat messages to an endpoint that answers {"completion": "..."}."""

    url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, url: str) -> "HttpxCompletionVisionClient":
        """Create a completion client with a managed httpx session."""
        return cls(url=url, http_client=httpx.AsyncClient())

    async def complete(
        self, *, system_prompt: str, user_prompt: str, image_data_url: str
    ) -> str:
        """Send the prompts and image, returning the completion text."""
        response = await self.http_client.post(
            self.url,
            json={
                "messages": [
                    {"role": "system", "content": system_prompt},
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": user_prompt},
                            {"type": "image", "image": _strip_data_url(image_data_url)},
                        ],
                    },
                ]
            },
            timeout=30,
        )
        response.raise_for_status()
        payload = response.json()
        completion = payload.get("completion") if isinstance(payload, dict) else None
        if not isinstance(completion, str):
            raise RuntimeError("Completion endpoint returned no completion text")
        return completion

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _strip_data_url(data_url: str) -> str:
    """Return the bare base64 payload of a data URL."""
    _, _, encoded = data_url.partition(",")
    return encoded or data_url
