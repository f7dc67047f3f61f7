"""Google Gemini adapter for drafting label copy."""

from __future__ import annotations

import logging
from typing import Any

import google.generativeai as genai

from labelcraft.adapters.base import GenerationError, TextGenerationAdapter
from labelcraft.config import settings

logger = logging.getLogger(__name__)


class GeminiAdapter(TextGenerationAdapter):
    """Single request/response call to a Gemini text model."""

    def __init__(self, model: str | None = None, api_key: str | None = None) -> None:
        self._model = model
        self._api_key = api_key

    @property
    def model(self) -> str:
        return self._model or settings.gemini_model

    @property
    def api_key(self) -> str:
        return self._api_key or settings.gemini_api_key

    def _get_model(self) -> Any:
        if not self.api_key:
            raise GenerationError("GEMINI_API_KEY is missing")
        genai.configure(api_key=self.api_key)
        return genai.GenerativeModel(self.model)

    async def generate(self, prompt: str) -> str:
        model = self._get_model()
        try:
            response = await model.generate_content_async(prompt)
        except Exception as exc:
            logger.error("Gemini request failed (model %s): %s", self.model, exc)
            raise GenerationError(f"Gemini request failed: {exc}") from exc

        try:
            text = (response.text or "").strip()
        except ValueError as exc:
            # .text raises when the candidate was blocked or has no parts
            raise GenerationError("Gemini returned no text") from exc

        if not text:
            raise GenerationError("Gemini response was empty")
        return text


gemini = GeminiAdapter()
