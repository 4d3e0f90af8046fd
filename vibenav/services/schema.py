"""Declarative shape of a valid blueprint response.

One contract drives both the output constraint sent to the provider and the
local validation of the parsed response.
"""

from dataclasses import dataclass
from typing import Any

from jsonschema import Draft202012Validator

from ..errors import SchemaViolation

PROVIDER_TYPES = {"string": "STRING", "array": "ARRAY", "object": "OBJECT"}


@dataclass(frozen=True)
class SchemaField:
    """One node of the contract."""
    name: str
    kind: str                                   # "string", "array" or "object"
    required: bool = False
    fields: tuple["SchemaField", ...] = ()      # object properties
    items: "SchemaField | None" = None          # array element
    description: str = ""


def _string(name: str, required: bool = False, description: str = "") -> SchemaField:
    return SchemaField(name, "string", required=required, description=description)


def _object(name: str, *fields: SchemaField, required: bool = False) -> SchemaField:
    return SchemaField(name, "object", required=required, fields=fields)


def _array(name: str, items: SchemaField, required: bool = False) -> SchemaField:
    return SchemaField(name, "array", required=required, items=items)


SECTION = _object(
    "section",
    _string("sectionId", required=True),
    _string("title", required=True),
    _array(
        "copyOptions",
        _object(
            "copyOption",
            _string("headline", required=True),
            _string("body", required=True),
        ),
        required=True,
    ),
    _string("analysis", required=True),
    _object(
        "visualDirection",
        _string("assetConcept", description="Photo or video concept for the section"),
        _string("moodDescription"),
        _string("lighting"),
        _string("composition"),
        required=True,
    ),
    _object(
        "motionDirective",
        _string("animation", description="One of the named transition styles"),
        _string("buttonStyle"),
        _string("typography"),
        _string("divider"),
        _string("layoutStrategy"),
        _string("compositionAndShapes"),
        required=True,
    ),
    _object(
        "interactionProposal",
        _string("kind"),
        _string("description"),
        _string("userBenefit"),
    ),
    _array(
        "comparisonRows",
        _object("comparisonRow", _string("feature"), _string("ours"), _string("competitor")),
    ),
    _array(
        "faqRows",
        _object("faqRow", _string("question"), _string("answer")),
    ),
)


BLUEPRINT_CONTRACT = _object(
    "blueprint",
    _string("brandName", required=True),
    _string("brandStory", required=True),
    _string("seoTitle", required=True),
    _string("metaDescription", required=True),
    _string("globalDesignGuideline", required=True),
    _array("sections", SECTION, required=True),
    required=True,
)


class SchemaContract:
    """Render a SchemaField tree for providers and validate parsed responses."""

    def __init__(self, root: SchemaField = BLUEPRINT_CONTRACT):
        self.root = root
        self._validator = Draft202012Validator(self._required_schema(root))

    def to_provider_schema(self) -> dict[str, Any]:
        """Gemini response_schema (OpenAPI subset, uppercase types)."""
        return self._provider_node(self.root)

    def to_json_schema(self) -> dict[str, Any]:
        """Full JSON Schema including optional fields."""
        return self._json_node(self.root)

    def validate(self, data: Any) -> None:
        """
        Check required fields are present with the right kind.

        Raises:
            SchemaViolation: Listing every violation found
        """
        errors = []
        for e in sorted(self._validator.iter_errors(data), key=lambda e: list(e.path)):
            path = "$"
            for p in e.path:
                path += f".{p}" if isinstance(p, str) else f"[{p}]"
            errors.append(f"{path}: {e.message}")

        if errors:
            raise SchemaViolation(f"Response does not match blueprint schema ({len(errors)} errors)", errors)

    def _provider_node(self, node: SchemaField) -> dict[str, Any]:
        result: dict[str, Any] = {"type": PROVIDER_TYPES[node.kind]}
        if node.description:
            result["description"] = node.description
        if node.kind == "object":
            result["properties"] = {f.name: self._provider_node(f) for f in node.fields}
            required = [f.name for f in node.fields if f.required]
            if required:
                result["required"] = required
        elif node.kind == "array" and node.items is not None:
            result["items"] = self._provider_node(node.items)
        return result

    def _json_node(self, node: SchemaField) -> dict[str, Any]:
        result: dict[str, Any] = {"type": node.kind}
        if node.description:
            result["description"] = node.description
        if node.kind == "object":
            result["properties"] = {f.name: self._json_node(f) for f in node.fields}
            result["required"] = [f.name for f in node.fields if f.required]
        elif node.kind == "array" and node.items is not None:
            result["items"] = self._json_node(node.items)
        return result

    def _required_schema(self, node: SchemaField) -> dict[str, Any]:
        """Validation schema: only required fields are type-checked, extras are allowed."""
        result: dict[str, Any] = {"type": node.kind}
        if node.kind == "object":
            required = [f for f in node.fields if f.required]
            result["properties"] = {f.name: self._required_schema(f) for f in required}
            result["required"] = [f.name for f in required]
        elif node.kind == "array" and node.items is not None:
            result["items"] = self._required_schema(node.items)
        return result
