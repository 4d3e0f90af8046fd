"""Data models."""

from .blueprint import (
    Blueprint,
    ComparisonRow,
    CopyOption,
    FaqRow,
    InteractionProposal,
    MotionDirective,
    Section,
    VisualDirection,
)
from .request import Attachment, GenerationRequest, SectionConfig

__all__ = [
    "Attachment",
    "Blueprint",
    "ComparisonRow",
    "CopyOption",
    "FaqRow",
    "GenerationRequest",
    "InteractionProposal",
    "MotionDirective",
    "Section",
    "SectionConfig",
    "VisualDirection",
]
