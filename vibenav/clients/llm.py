"""OpenAI client implementing the same structured generation contract."""

import logging

import openai
from openai import OpenAI

from .base import ProviderError, ProviderResponse, StructuredRequest

logger = logging.getLogger(__name__)


class LLMClient:
    """Alternate provider. Uses the OpenAI Responses API, interface is provider-agnostic."""

    def __init__(self, timeout_seconds: int = 120):
        self.timeout_seconds = timeout_seconds

    def schema_for(self, contract) -> dict:
        return contract.to_json_schema()

    def generate_structured(self, credential: str, request: StructuredRequest) -> ProviderResponse:
        """Make one Responses API call and return its output text."""
        client = OpenAI(api_key=credential, timeout=self.timeout_seconds, max_retries=0)

        kwargs = {
            "model": request.model,
            "input": [{"role": "user", "content": self._build_content(request)}],
        }
        if request.response_format == "json":
            if request.schema:
                kwargs["text"] = {
                    "format": {
                        "type": "json_schema",
                        "name": "blueprint",
                        "schema": request.schema,
                        "strict": False,
                    }
                }
            else:
                kwargs["text"] = {"format": {"type": "json_object"}}

        try:
            response = client.responses.create(**kwargs)
        except openai.APIStatusError as e:
            raise ProviderError(e.message, status=e.status_code) from e
        except openai.OpenAIError as e:
            raise ProviderError(str(e)) from e

        usage = response.usage
        if usage:
            logger.info(f"OpenAI usage: input={usage.input_tokens}, output={usage.output_tokens}")

        return ProviderResponse(text=response.output_text)

    def _build_content(self, request: StructuredRequest) -> list[dict]:
        content = [{"type": "input_text", "text": request.contents.text}]

        attachment = request.contents.attachment
        if attachment is not None:
            data_url = f"data:{attachment.mime_type};base64,{attachment.base64_data}"
            if attachment.mime_type.startswith("image/"):
                content.append({"type": "input_image", "image_url": data_url})
            else:
                content.append({"type": "input_file", "filename": "attachment", "file_data": data_url})

        return content
