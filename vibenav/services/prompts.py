"""Prompt composition for blueprint generation."""

from ..models.request import GenerationRequest

ROLE = (
    "You are a world-class expert brand strategist and UX architect. "
    "You plan high-converting brand websites section by section."
)

INDUSTRY_BLOCKS = {
    "general": (
        "[General business] Build the copy around logical persuasion and credibility: "
        "expertise, proof points, guarantees and clear benefits. Keep the tone professional."
    ),
    "visual": (
        "[Visual-first business: restaurant / cafe / pension] Every section MUST fill "
        "visualDirection.lighting, visualDirection.composition and visualDirection.assetConcept "
        "with concrete, sensory detail: light direction and temperature, camera angle, framing, "
        "props, textures and colour mood. Generic phrases like 'beautiful photo' are not allowed."
    ),
}

# Controlled vocabulary for motionDirective.animation
ANIMATIONS = [
    ("fade-up", "default entrance for text blocks; calm and readable"),
    ("slide-in", "side-by-side content such as problem/solution or comparisons"),
    ("scale-reveal", "hero visuals and signature products that deserve a moment of focus"),
    ("parallax", "large atmospheric imagery where depth sells the mood"),
    ("stagger", "lists, cards, menus and reviews that should appear one by one"),
    ("marquee", "logos, short testimonials or keywords that loop continuously"),
    ("none", "navigation, footer and dense information where motion distracts"),
]


def _animation_rules() -> str:
    lines = ["motionDirective.animation MUST be one of the following values:"]
    for name, rationale in ANIMATIONS:
        lines.append(f"- {name}: {rationale}")
    return "\n".join(lines)


class PromptComposer:
    """Build the instruction text for one generation. Pure, no I/O."""

    def __init__(self, locale: str = "Korean"):
        self.locale = locale

    def compose(self, request: GenerationRequest) -> str:
        sections = request.enabled_sections()
        section_ids = {s.id for s in sections}

        lines = [
            ROLE,
            "",
            f"Brand name: {request.brand_name.strip() or 'Unspecified'}",
            f"Brand data: {request.free_text.strip() or '(none provided)'}",
            "",
            "Sections to plan, in this order:",
        ]
        lines.extend(f"- {s.id}: {s.display_name}" for s in sections)
        lines.extend([
            "",
            f"Visual style: {request.style}",
            f"Primary color: {request.primary_color}",
        ])
        if request.seo_keywords.strip():
            lines.append(f"SEO keywords: {request.seo_keywords.strip()}")

        lines.extend(["", INDUSTRY_BLOCKS[request.industry_profile], ""])
        lines.extend(self._rules(section_ids, request))
        return "\n".join(lines)

    def _rules(self, section_ids: set[str], request: GenerationRequest) -> list[str]:
        rules = [
            "Rules:",
            "- Write exactly 3 copy options (headline + body) for every section in copyOptions.",
            "- Use the section id above as sectionId and keep the section order.",
        ]
        if "comparison" in section_ids:
            rules.append(
                "- The comparison section MUST include comparisonRows "
                "(feature / ours / competitor), at least 4 rows."
            )
        if "faq" in section_ids:
            rules.append("- The faq section MUST include faqRows (question / answer), at least 4 rows.")
        if request.attachment is not None:
            rules.append("- An attached file contains additional brand material. Use its facts.")
        rules.append("- " + _animation_rules().replace("\n", "\n  "))
        if request.extra_instructions.strip():
            rules.append(f"- Additional instructions: {request.extra_instructions.strip()}")
        rules.extend([
            f"- Write all output text in {self.locale}.",
            "- Respond only with JSON that matches the provided schema.",
        ])
        return rules
