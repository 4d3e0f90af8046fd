"""Pytest fixtures for blueprint generation tests."""

import json

import pytest

from vibenav.clients.base import ProviderResponse
from vibenav.models import GenerationRequest, SectionConfig
from vibenav.services.vault import CredentialVault


class FakeProvider:
    """Records calls and returns a canned response (or raises)."""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    def schema_for(self, contract):
        return contract.to_provider_schema()

    def generate_structured(self, credential, request):
        self.calls.append((credential, request))
        if self.error is not None:
            raise self.error
        return ProviderResponse(text=self.text)


def minimal_blueprint(**overrides) -> dict:
    data = {
        "brandName": "Test Cafe",
        "brandStory": "A small roastery with a big heart.",
        "seoTitle": "Test Cafe | Specialty Coffee",
        "metaDescription": "Single-origin coffee roasted daily.",
        "globalDesignGuideline": "Warm neutrals, generous whitespace.",
        "sections": [
            {
                "sectionId": "hero",
                "title": "Hero",
                "copyOptions": [
                    {"headline": "Coffee, slowly.", "body": "Roasted every morning."},
                    {"headline": "Your daily ritual", "body": "Crafted by hand."},
                    {"headline": "Taste the origin", "body": "Beans from 6 farms."},
                ],
                "analysis": "Lead with the craft.",
                "visualDirection": {
                    "assetConcept": "Pour-over close-up",
                    "moodDescription": "Quiet morning",
                    "lighting": "Soft window light from the left",
                },
                "motionDirective": {
                    "animation": "fade-up",
                    "buttonStyle": "Rounded, outlined",
                    "typography": "Serif headline",
                },
            }
        ],
    }
    data.update(overrides)
    return data


@pytest.fixture
def blueprint_json():
    return json.dumps(minimal_blueprint(), ensure_ascii=False)


@pytest.fixture
def fake_provider(blueprint_json):
    return FakeProvider(text=blueprint_json)


@pytest.fixture
def cafe_request():
    return GenerationRequest(
        brand_name="Test Cafe",
        free_text="specialty coffee shop",
        selected_sections=[SectionConfig("hero", "Hero", True)],
        primary_color="#112233",
        style="미니멀/모던",
        industry_profile="visual",
    )


@pytest.fixture
def vault(tmp_path):
    return CredentialVault(tmp_path / "vault.json")
