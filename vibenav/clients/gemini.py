"""Gemini client for structured (JSON) text generation."""

import logging

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from .base import ProviderError, ProviderResponse, StructuredRequest

logger = logging.getLogger(__name__)


class GeminiClient:
    """Structured generation via Google's Gemini models."""

    def __init__(self, timeout_seconds: int = 120):
        # Credentials are per call, so the SDK client is built per call too
        self.http_options = types.HttpOptions(timeout=timeout_seconds * 1000)

    def _client(self, credential: str) -> genai.Client:
        return genai.Client(api_key=credential, http_options=self.http_options)

    def schema_for(self, contract) -> dict:
        return contract.to_provider_schema()

    def generate_structured(self, credential: str, request: StructuredRequest) -> ProviderResponse:
        """
        Issue one generate_content call.

        Args:
            credential: API key used for this call only
            request: Model, prompt contents and optional schema constraint

        Returns:
            ProviderResponse with the raw response text (may be None)

        Raises:
            ProviderError: On any SDK or transport failure
        """
        contents = self._build_contents(request)

        config = None
        if request.response_format == "json":
            config = types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=request.schema,
            )

        try:
            response = self._client(credential).models.generate_content(
                model=request.model,
                contents=contents,
                config=config,
            )
        except genai_errors.APIError as e:
            raise ProviderError(e.message or str(e), status=e.code) from e
        except Exception as e:
            raise ProviderError(str(e)) from e

        return ProviderResponse(text=response.text)

    def _build_contents(self, request: StructuredRequest):
        """Plain prompt, or prompt + file as a single multi-part payload."""
        attachment = request.contents.attachment
        if attachment is None:
            return request.contents.text

        logger.info(f"Attaching file ({attachment.mime_type}) to generation request")
        return [
            types.Part.from_text(text=request.contents.text),
            types.Part.from_bytes(data=attachment.raw_bytes(), mime_type=attachment.mime_type),
        ]
