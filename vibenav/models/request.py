"""Generation request - input for blueprint generation."""

import base64
import binascii
import mimetypes
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import Any

from PIL import Image, UnidentifiedImageError

INDUSTRY_PROFILES = ("general", "visual")


@dataclass
class SectionConfig:
    """One entry of the section selection list."""

    id: str
    display_name: str
    enabled: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SectionConfig":
        return cls(
            id=data["id"],
            display_name=data.get("displayName") or data.get("name") or data["id"],
            enabled=bool(data.get("enabled", True)),
        )


@dataclass
class Attachment:
    """A single file sent alongside the prompt."""

    mime_type: str
    base64_data: str

    def raw_bytes(self) -> bytes:
        return base64.b64decode(self.base64_data)

    def is_empty(self) -> bool:
        return not self.base64_data

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str) -> "Attachment":
        return cls(mime_type=mime_type, base64_data=base64.b64encode(data).decode("ascii"))

    @classmethod
    def from_file(cls, path: str | Path) -> "Attachment":
        """
        Load a local file as an attachment.

        MIME type is guessed from the extension. Images are opened with Pillow
        so the declared type matches the actual format.

        Raises:
            ValueError: If the file is empty or an image file cannot be decoded.
        """
        path = Path(path)
        data = path.read_bytes()
        if not data:
            raise ValueError(f"Attachment is empty: {path}")

        mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        if mime_type.startswith("image/") or mime_type == "application/octet-stream":
            detected = _detect_image_mime(data)
            if detected:
                mime_type = detected
            elif mime_type.startswith("image/"):
                raise ValueError(f"Attachment is not a readable image: {path}")

        return cls.from_bytes(data, mime_type)


def _detect_image_mime(data: bytes) -> str | None:
    """Return the MIME type Pillow reports for image bytes, or None."""
    try:
        with Image.open(BytesIO(data)) as img:
            img.verify()
            return Image.MIME.get(img.format or "")
    except (UnidentifiedImageError, OSError, SyntaxError):
        return None


@dataclass
class GenerationRequest:
    """Everything the caller supplies for one blueprint generation."""

    free_text: str = ""
    selected_sections: list[SectionConfig] = field(default_factory=list)
    primary_color: str = "#6366f1"
    style: str = ""
    industry_profile: str = "general"  # "general" or "visual"
    brand_name: str = ""
    seo_keywords: str = ""
    attachment: Attachment | None = None
    extra_instructions: str = ""

    def __post_init__(self):
        if self.industry_profile not in INDUSTRY_PROFILES:
            raise ValueError(
                f"Unknown industry profile: {self.industry_profile!r} (expected one of {INDUSTRY_PROFILES})"
            )
        seen = set()
        for section in self.selected_sections:
            if section.id in seen:
                raise ValueError(f"Duplicate section id: {section.id}")
            seen.add(section.id)

    def has_input(self) -> bool:
        """At least one of brand name, free text, or attached file is present."""
        has_file = self.attachment is not None and not self.attachment.is_empty()
        return bool(self.brand_name.strip() or self.free_text.strip() or has_file)

    def enabled_sections(self) -> list[SectionConfig]:
        return [s for s in self.selected_sections if s.enabled]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GenerationRequest":
        """Build a request from a camelCase JSON payload."""
        attachment = None
        file_data = data.get("attachedFile")
        if file_data:
            attachment = Attachment(
                mime_type=file_data["mimeType"],
                base64_data=file_data.get("base64Data") or file_data.get("data") or "",
            )
            try:
                base64.b64decode(attachment.base64_data, validate=True)
            except binascii.Error as e:
                raise ValueError(f"attachedFile is not valid base64: {e}") from e

        return cls(
            free_text=data.get("freeText") or "",
            selected_sections=[SectionConfig.from_dict(s) for s in data.get("selectedSections") or []],
            primary_color=data.get("primaryColor") or "#6366f1",
            style=data.get("style") or "",
            industry_profile=data.get("industryProfile") or "general",
            brand_name=data.get("brandName") or "",
            seo_keywords=data.get("seoKeywords") or "",
            attachment=attachment,
            extra_instructions=data.get("extraInstructions") or "",
        )
