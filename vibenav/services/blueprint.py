"""Blueprint generation service - prompt -> provider -> extract -> validate -> enrich."""

import json
import logging

from ..clients.base import PromptContents, Provider, ProviderError, StructuredRequest
from ..errors import (
    EmptyInputError,
    EmptyResponseError,
    MalformedJsonError,
    MissingCredentialError,
    ProviderAuthError,
    classify_provider_error,
)
from ..models import Blueprint, GenerationRequest
from ..utils import truncate
from .credentials import CredentialSource, UserCredential
from .extractor import extract_json
from .probe import ConnectionProbe
from .prompts import PromptComposer
from .schema import SchemaContract

logger = logging.getLogger(__name__)

EXPECTED_COPY_OPTIONS = 3


class BlueprintGenerator:
    """Generate one blueprint per call. Single request, no retries."""

    def __init__(
        self,
        provider: Provider,
        model: str = "gemini-3-pro-preview",
        composer: PromptComposer | None = None,
        contract: SchemaContract | None = None,
    ):
        self.provider = provider
        self.model = model
        self.composer = composer or PromptComposer()
        self.contract = contract or SchemaContract()

    def generate(self, credential: str | None, request: GenerationRequest) -> Blueprint:
        """
        Generate a blueprint for the request.

        Retrying is the caller's decision: a failed call is never replayed here.

        Raises:
            EmptyInputError: No brand name, text or file (no network call made)
            MissingCredentialError: No credential (no network call made)
            ProviderAuthError / ProviderRateLimitError / ProviderFailureError: Provider failed
            EmptyResponseError: Provider returned no text
            MalformedJsonError: Response text is not JSON
            SchemaViolation: JSON does not match the blueprint contract
        """
        if not request.has_input():
            raise EmptyInputError()
        if not credential:
            raise MissingCredentialError()

        prompt = self.composer.compose(request)
        provider_request = StructuredRequest(
            model=self.model,
            contents=PromptContents(text=prompt, attachment=request.attachment),
            response_format="json",
            schema=self.provider.schema_for(self.contract),
        )

        logger.info(
            f"Generating blueprint with {self.model} "
            f"({len(request.enabled_sections())} sections, profile={request.industry_profile})"
        )
        try:
            response = self.provider.generate_structured(credential, provider_request)
        except ProviderError as e:
            error = classify_provider_error(e)
            logger.error(f"Generation failed ({error.category}): {e}")
            raise error from e

        return self.parse_response(response.text, request)

    def parse_response(self, text: str | None, request: GenerationRequest) -> Blueprint:
        """Post-provider pipeline: extract, parse, validate, enrich."""
        if not text or not text.strip():
            raise EmptyResponseError("Provider returned an empty response")

        json_str = extract_json(text)
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            snippet = truncate(json_str)
            logger.warning(f"Malformed JSON from provider: {e}; snippet: {snippet}")
            raise MalformedJsonError(f"Response is not valid JSON: {e}", snippet=snippet) from e

        self.contract.validate(data)

        # Presentation fields always come from the request
        data["primaryColor"] = request.primary_color
        data["style"] = request.style
        data["industryProfile"] = request.industry_profile
        data["seoKeywords"] = request.seo_keywords

        blueprint = Blueprint.from_dict(data)
        for section in blueprint.sections:
            if len(section.copy_options) != EXPECTED_COPY_OPTIONS:
                logger.warning(
                    f"Section {section.section_id} has {len(section.copy_options)} copy options "
                    f"(expected {EXPECTED_COPY_OPTIONS})"
                )
        return blueprint


class BlueprintService:
    """Ties a credential source to the probe and the generator."""

    def __init__(
        self,
        source: CredentialSource,
        generator: BlueprintGenerator,
        probe: ConnectionProbe,
    ):
        self.source = source
        self.generator = generator
        self.connection = probe

    def probe(self) -> bool:
        # A user credential dropped after an auth failure is re-tested, not lost
        if isinstance(self.source, UserCredential) and not self.source.is_validated:
            return self.source.revalidate()
        return self.connection.probe(self.source.get())

    def generate(self, request: GenerationRequest) -> Blueprint:
        """Generate with the source's credential; drop the credential on auth failure."""
        if not request.has_input():
            raise EmptyInputError()

        credential = self.source.get()
        if not credential:
            raise MissingCredentialError()

        try:
            return self.generator.generate(credential, request)
        except ProviderAuthError:
            self.source.invalidate()
            raise
