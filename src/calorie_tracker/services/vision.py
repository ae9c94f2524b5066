"""Food image analysis using LLM vision models."""

import base64
import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from calorie_tracker.domain.vision import FALLBACK_ESTIMATE, FoodEstimate

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a nutrition expert that analyzes food images. "
    "Provide the name of the food, estimated calories, protein content in grams, "
    "carbs in grams, and fats in grams. Return ONLY a JSON object with fields: "
    "name, calories (number), protein (number), carbs (number), fats (number)."
)
USER_PROMPT = (
    "What food is in this image? Estimate calories, protein, carbs, and fats content."
)


class FoodAnalysisError(Exception):
    """Raised when the vision model could not be reached; safe to retry."""


class VisionClient(Protocol):
    """Interface for LLM vision completions."""

    async def complete(
        self, *, system_prompt: str, user_prompt: str, image_data_url: str
    ) -> str:
        """Return the model's raw text answer for an image."""


@dataclass
class FoodAnalysisService:
    """Service that prompts a vision model and validates its estimate."""

    client: VisionClient

    async def analyze(self, image_bytes: bytes) -> FoodEstimate:
        """Estimate the nutrition of the food in an image."""
        return await self._analyze_data_url(_to_data_url(image_bytes))

    async def analyze_base64(self, image_base64: str) -> FoodEstimate:
        """Estimate nutrition for a bare base64 image.

        Malformed input raises ``binascii.Error``; callers validate it first.
        """
        return await self.analyze(base64.b64decode(image_base64, validate=True))

    async def _analyze_data_url(self, data_url: str) -> FoodEstimate:
        try:
            raw = await self.client.complete(
                system_prompt=SYSTEM_PROMPT,
                user_prompt=USER_PROMPT,
                image_data_url=data_url,
            )
        except Exception as exc:
            logger.exception("Food image analysis failed")
            raise FoodAnalysisError("Failed to analyze food image") from exc
        return parse_estimate(raw)


def parse_estimate(raw: str) -> FoodEstimate:
    """Parse a model answer, using the fallback estimate when unparsable."""
    try:
        return FoodEstimate.model_validate_json(_strip_code_fence(raw))
    except ValidationError:
        logger.warning("Unparsable food analysis response: %r", raw[:200])
        return FALLBACK_ESTIMATE.model_copy()


def _strip_code_fence(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = cleaned.split("\n", 1)[1] if "\n" in cleaned else ""
        cleaned = cleaned.rsplit("```", 1)[0]
    return cleaned.strip()


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
