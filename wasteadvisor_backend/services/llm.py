"""Client helpers for interacting with a multimodal LLM."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from httpx import RequestError, TimeoutException
from openai import OpenAI
from openai.types.responses import Response

from wasteadvisor_backend.config import DEFAULT_LLM_MODEL
from wasteadvisor_backend.services.encoding import ImagePayload

logger = logging.getLogger(__name__)


@dataclass
class ReportLLMSettings:
    """Configuration required to talk to the report model."""

    api_key: str
    model: str = DEFAULT_LLM_MODEL


class ReportLLMClient:
    """Thin wrapper around the OpenAI Responses API for report requests."""

    def __init__(self, settings: ReportLLMSettings) -> None:
        self._settings = settings
        self._client = OpenAI(api_key=settings.api_key)

    @property
    def model(self) -> str:
        return self._settings.model

    def generate_report(
        self,
        *,
        prompt: str,
        image: ImagePayload | None = None,
    ) -> str:
        """Send the prompt, plus the inline image when given, and return the raw text."""

        user_text = (prompt or "").strip()
        if not user_text:
            raise ValueError("prompt is required")

        parts: list[dict[str, str]] = [{"type": "input_text", "text": user_text}]
        if image is not None:
            parts.append({"type": "input_image", "image_url": image.data_uri})

        try:
            response: Response = self._client.responses.create(
                model=self._settings.model,
                input=[{"role": "user", "content": parts}],
            )
        except TimeoutException as e:
            logger.error("OpenAI / HTTP timeout: %r", e)
            raise
        except RequestError as e:
            logger.error("OpenAI / HTTP network error: %r", e)
            raise
        except Exception:
            logger.exception("OpenAI response error")
            raise

        return response.output_text


def init_report_llm_client(settings: ReportLLMSettings) -> ReportLLMClient:
    """Create a ``ReportLLMClient`` instance from the provided settings."""

    return ReportLLMClient(settings)
