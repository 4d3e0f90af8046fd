"""Tests for provider clients (SDK calls mocked)."""

from unittest.mock import MagicMock, patch

import pytest
from google.genai import errors as genai_errors
from google.genai import types

from vibenav.clients.base import PromptContents, ProviderError, StructuredRequest
from vibenav.clients.gemini import GeminiClient
from vibenav.clients.llm import LLMClient
from vibenav.models import Attachment
from vibenav.services.schema import SchemaContract


def make_request(attachment=None, response_format="json", schema=None):
    return StructuredRequest(
        model="test-model",
        contents=PromptContents(text="prompt", attachment=attachment),
        response_format=response_format,
        schema=schema,
    )


class TestGeminiClient:

    @patch("vibenav.clients.gemini.genai.Client")
    def test_json_request(self, mock_client_cls):
        mock_client = mock_client_cls.return_value
        mock_client.models.generate_content.return_value = MagicMock(text='{"a": 1}')
        schema = SchemaContract().to_provider_schema()

        response = GeminiClient().generate_structured("key", make_request(schema=schema))

        assert response.text == '{"a": 1}'
        assert mock_client_cls.call_args.kwargs["api_key"] == "key"
        kwargs = mock_client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["contents"] == "prompt"
        assert kwargs["config"].response_mime_type == "application/json"

    @patch("vibenav.clients.gemini.genai.Client")
    def test_text_request_has_no_config(self, mock_client_cls):
        mock_client = mock_client_cls.return_value
        mock_client.models.generate_content.return_value = MagicMock(text="OK")

        GeminiClient().generate_structured("key", make_request(response_format="text"))

        assert mock_client.models.generate_content.call_args.kwargs["config"] is None

    @patch("vibenav.clients.gemini.genai.Client")
    def test_attachment_is_multipart(self, mock_client_cls):
        mock_client = mock_client_cls.return_value
        mock_client.models.generate_content.return_value = MagicMock(text="{}")
        attachment = Attachment.from_bytes(b"\x89PNG", "image/png")

        GeminiClient().generate_structured("key", make_request(attachment=attachment))

        contents = mock_client.models.generate_content.call_args.kwargs["contents"]
        assert len(contents) == 2
        assert contents[0].text == "prompt"
        assert isinstance(contents[1], types.Part)
        assert contents[1].inline_data.mime_type == "image/png"
        assert contents[1].inline_data.data == b"\x89PNG"

    @patch("vibenav.clients.gemini.genai.Client")
    def test_api_error_becomes_provider_error(self, mock_client_cls):
        api_error = genai_errors.ClientError(
            404,
            {"error": {"code": 404, "message": "Requested entity was not found.", "status": "NOT_FOUND"}},
        )
        mock_client_cls.return_value.models.generate_content.side_effect = api_error

        with pytest.raises(ProviderError) as exc_info:
            GeminiClient().generate_structured("key", make_request())

        assert exc_info.value.status == 404
        assert "Requested entity was not found" in exc_info.value.message

    @patch("vibenav.clients.gemini.genai.Client")
    def test_transport_error_becomes_provider_error(self, mock_client_cls):
        mock_client_cls.return_value.models.generate_content.side_effect = TimeoutError("timed out")

        with pytest.raises(ProviderError) as exc_info:
            GeminiClient().generate_structured("key", make_request())

        assert exc_info.value.status is None


class TestLLMClient:

    @patch("vibenav.clients.llm.OpenAI")
    def test_json_schema_format(self, mock_openai_cls):
        mock_openai = mock_openai_cls.return_value
        mock_openai.responses.create.return_value = MagicMock(output_text='{"a": 1}')
        schema = SchemaContract().to_json_schema()

        response = LLMClient().generate_structured("key", make_request(schema=schema))

        assert response.text == '{"a": 1}'
        kwargs = mock_openai.responses.create.call_args.kwargs
        assert kwargs["text"]["format"]["type"] == "json_schema"
        assert kwargs["text"]["format"]["schema"] is schema
        assert kwargs["input"][0]["content"] == [{"type": "input_text", "text": "prompt"}]

    @patch("vibenav.clients.llm.OpenAI")
    def test_text_request_has_no_format(self, mock_openai_cls):
        mock_openai = mock_openai_cls.return_value
        mock_openai.responses.create.return_value = MagicMock(output_text="OK")

        LLMClient().generate_structured("key", make_request(response_format="text"))

        assert "text" not in mock_openai.responses.create.call_args.kwargs

    def test_attachment_content(self):
        client = LLMClient()
        image = make_request(attachment=Attachment("image/png", "aGk="))
        pdf = make_request(attachment=Attachment("application/pdf", "aGk="))

        assert client._build_content(image)[1] == {
            "type": "input_image",
            "image_url": "data:image/png;base64,aGk=",
        }
        assert client._build_content(pdf)[1]["type"] == "input_file"
        assert client._build_content(pdf)[1]["file_data"] == "data:application/pdf;base64,aGk="
