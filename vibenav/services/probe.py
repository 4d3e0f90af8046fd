"""Connection probe - cheap check that a credential is usable."""

import logging

from ..clients.base import PromptContents, Provider, StructuredRequest

logger = logging.getLogger(__name__)

PROBE_PROMPT = "Connection Test"


class ConnectionProbe:
    """Verify a credential with one minimal text request before trusting it."""

    def __init__(self, provider: Provider, model: str = "gemini-3-flash-preview"):
        self.provider = provider
        self.model = model

    def probe(self, credential: str | None) -> bool:
        """
        Return True iff the provider answers with non-empty text.

        Never raises: auth, quota and network failures all return False.
        """
        if not credential:
            return False

        request = StructuredRequest(
            model=self.model,
            contents=PromptContents(text=PROBE_PROMPT),
            response_format="text",
        )
        try:
            response = self.provider.generate_structured(credential, request)
        except Exception as e:
            logger.warning(f"Connection test failed: {e}")
            return False

        return bool(response is not None and response.text)
