"""OpenAI Responses API client for food image analysis."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from calorie_tracker.services.vision import VisionClient


@dataclass
class OpenAIVisionClient(VisionClient):
    """Vision client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "OpenAIVisionClient":
        """Create an OpenAI vision client."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model)

    async def complete(
        self, *, system_prompt: str, user_prompt: str, image_data_url: str
    ) -> str:
        """Send the prompts and image, returning the text output."""
        response = await self.client.responses.create(
            model=self.model,
            instructions=system_prompt,
            input=[
                {
                    "role": "user",
                    "content": [
                        {"type": "input_text", "text": user_prompt},
                        {"type": "input_image", "image_url": image_data_url},
                    ],
                }
            ],
            text={"format": {"type": "json_object"}},
            store=False,
        )
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return output_text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
