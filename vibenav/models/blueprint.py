"""Blueprint model - structured result of a generation."""

from dataclasses import dataclass, field
from typing import Any


def _str(data: dict, key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _dicts(value: Any) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


@dataclass
class CopyOption:
    headline: str
    body: str


@dataclass
class VisualDirection:
    """Photo/video direction for a section."""
    asset_concept: str = ""
    mood_description: str = ""
    lighting: str | None = None
    composition: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "VisualDirection":
        return cls(
            asset_concept=_str(data, "assetConcept"),
            mood_description=_str(data, "moodDescription"),
            lighting=data.get("lighting") if isinstance(data.get("lighting"), str) else None,
            composition=data.get("composition") if isinstance(data.get("composition"), str) else None,
        )

    def to_dict(self) -> dict:
        result = {"assetConcept": self.asset_concept, "moodDescription": self.mood_description}
        if self.lighting is not None:
            result["lighting"] = self.lighting
        if self.composition is not None:
            result["composition"] = self.composition
        return result


@dataclass
class MotionDirective:
    """Animation, button and type guidance for a section."""
    animation: str = ""
    button_style: str = ""
    typography: str = ""
    divider: str | None = None
    layout_strategy: str | None = None
    composition_and_shapes: str | None = None

    _OPTIONAL = (
        ("divider", "divider"),
        ("layout_strategy", "layoutStrategy"),
        ("composition_and_shapes", "compositionAndShapes"),
    )

    @classmethod
    def from_dict(cls, data: dict) -> "MotionDirective":
        extras = {
            attr: data[key]
            for attr, key in cls._OPTIONAL
            if isinstance(data.get(key), str)
        }
        return cls(
            animation=_str(data, "animation"),
            button_style=_str(data, "buttonStyle"),
            typography=_str(data, "typography"),
            **extras,
        )

    def to_dict(self) -> dict:
        result = {
            "animation": self.animation,
            "buttonStyle": self.button_style,
            "typography": self.typography,
        }
        for attr, key in self._OPTIONAL:
            value = getattr(self, attr)
            if value is not None:
                result[key] = value
        return result


@dataclass
class InteractionProposal:
    """Engagement interaction suggested for a section."""
    kind: str
    description: str
    user_benefit: str


@dataclass
class ComparisonRow:
    feature: str
    ours: str
    competitor: str


@dataclass
class FaqRow:
    question: str
    answer: str


@dataclass
class Section:
    """One content block of the blueprint."""

    section_id: str
    title: str
    copy_options: list[CopyOption]
    analysis: str
    visual_direction: VisualDirection
    motion_directive: MotionDirective
    interaction_proposal: InteractionProposal | None = None
    comparison_rows: list[ComparisonRow] = field(default_factory=list)
    faq_rows: list[FaqRow] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Section":
        interaction = None
        raw_interaction = data.get("interactionProposal")
        if isinstance(raw_interaction, dict):
            interaction = InteractionProposal(
                kind=_str(raw_interaction, "kind"),
                description=_str(raw_interaction, "description"),
                user_benefit=_str(raw_interaction, "userBenefit"),
            )

        visual = data.get("visualDirection")
        motion = data.get("motionDirective")
        return cls(
            section_id=data["sectionId"],
            title=data["title"],
            copy_options=[
                CopyOption(headline=_str(c, "headline"), body=_str(c, "body"))
                for c in _dicts(data.get("copyOptions"))
            ],
            analysis=_str(data, "analysis"),
            visual_direction=VisualDirection.from_dict(visual if isinstance(visual, dict) else {}),
            motion_directive=MotionDirective.from_dict(motion if isinstance(motion, dict) else {}),
            interaction_proposal=interaction,
            comparison_rows=[
                ComparisonRow(
                    feature=_str(r, "feature"),
                    ours=_str(r, "ours"),
                    competitor=_str(r, "competitor"),
                )
                for r in _dicts(data.get("comparisonRows"))
            ],
            faq_rows=[
                FaqRow(question=_str(r, "question"), answer=_str(r, "answer"))
                for r in _dicts(data.get("faqRows"))
            ],
        )

    def to_dict(self) -> dict:
        result = {
            "sectionId": self.section_id,
            "title": self.title,
            "copyOptions": [{"headline": c.headline, "body": c.body} for c in self.copy_options],
            "analysis": self.analysis,
            "visualDirection": self.visual_direction.to_dict(),
            "motionDirective": self.motion_directive.to_dict(),
        }
        if self.interaction_proposal:
            result["interactionProposal"] = {
                "kind": self.interaction_proposal.kind,
                "description": self.interaction_proposal.description,
                "userBenefit": self.interaction_proposal.user_benefit,
            }
        if self.comparison_rows:
            result["comparisonRows"] = [
                {"feature": r.feature, "ours": r.ours, "competitor": r.competitor}
                for r in self.comparison_rows
            ]
        if self.faq_rows:
            result["faqRows"] = [{"question": r.question, "answer": r.answer} for r in self.faq_rows]
        return result


@dataclass
class Blueprint:
    """Full multi-section site plan.

    The last four fields are echoed from the request, never taken from the model.
    """

    brand_name: str
    brand_story: str
    seo_title: str
    meta_description: str
    global_design_guideline: str
    sections: list[Section]
    primary_color: str = ""
    style: str = ""
    industry_profile: str = "general"
    seo_keywords: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Blueprint":
        """Build from a mapping that already passed contract validation."""
        return cls(
            brand_name=data["brandName"],
            brand_story=data["brandStory"],
            seo_title=data["seoTitle"],
            meta_description=data["metaDescription"],
            global_design_guideline=data["globalDesignGuideline"],
            sections=[Section.from_dict(s) for s in data["sections"]],
            primary_color=_str(data, "primaryColor"),
            style=_str(data, "style"),
            industry_profile=_str(data, "industryProfile") or "general",
            seo_keywords=_str(data, "seoKeywords"),
        )

    def to_dict(self) -> dict:
        return {
            "brandName": self.brand_name,
            "brandStory": self.brand_story,
            "seoTitle": self.seo_title,
            "metaDescription": self.meta_description,
            "globalDesignGuideline": self.global_design_guideline,
            "sections": [s.to_dict() for s in self.sections],
            "primaryColor": self.primary_color,
            "style": self.style,
            "industryProfile": self.industry_profile,
            "seoKeywords": self.seo_keywords,
        }
