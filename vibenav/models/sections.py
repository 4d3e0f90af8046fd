"""Default section catalog and style labels."""

from ..utils import to_slug
from .request import SectionConfig


# 14 sections, all enabled by default
SECTIONS: list[SectionConfig] = [
    SectionConfig("navbar", "1. 네비게이션 바"),
    SectionConfig("hero", "2. 히어로 섹션"),
    SectionConfig("philosophy", "3. 오너의 철학 (신뢰/전문성)"),
    SectionConfig("product-feature", "4. 상품 소개 (비주얼 중심)"),
    SectionConfig("story", "5. 브랜드 스토리 (감성 중심)"),
    SectionConfig("signature-menu", "6. 메뉴/시그니처/객실 상세"),
    SectionConfig("problem-solution", "7. 문제 & 해결"),
    SectionConfig("unique-solution", "8. 우리만의 차별점"),
    SectionConfig("review", "9. 고객 리얼 후기"),
    SectionConfig("cta", "10. 요약 & CTA"),
    SectionConfig("faq", "11. 자주하는 질문"),
    SectionConfig("comparison", "12. 제품/서비스 비교"),
    SectionConfig("gallery", "13. 비주얼 갤러리 (캐러셀/비디오/무드보드)"),
    SectionConfig("footer", "14. 푸터"),
]

STYLES: list[str] = [
    "고급스러움",       # Luxury
    "전문적인/기업형",  # Professional / corporate
    "레트로/빈티지",    # Retro / vintage
    "귀여운/친근한",    # Cute / friendly
    "미니멀/모던",      # Minimal / modern
]


def default_sections() -> list[SectionConfig]:
    """Get a fresh copy of the catalog (safe to mutate)."""
    return [SectionConfig(s.id, s.display_name, s.enabled) for s in SECTIONS]


def add_custom_section(
    sections: list[SectionConfig],
    display_name: str,
    section_id: str | None = None,
) -> list[SectionConfig]:
    """Append a user-defined section. Id defaults to a slug of the name."""
    if not display_name.strip():
        raise ValueError("Section name must not be empty")

    section_id = section_id or to_slug(display_name)
    if not section_id:
        raise ValueError(f"Cannot derive a section id from {display_name!r}")
    if any(s.id == section_id for s in sections):
        raise ValueError(f"Duplicate section id: {section_id}")

    return [*sections, SectionConfig(section_id, display_name.strip(), True)]


def toggle_section(sections: list[SectionConfig], section_id: str) -> list[SectionConfig]:
    """Return a new list with one section's enabled flag flipped."""
    if not any(s.id == section_id for s in sections):
        raise KeyError(section_id)
    return [
        SectionConfig(s.id, s.display_name, not s.enabled) if s.id == section_id else s
        for s in sections
    ]


def enabled_sections(sections: list[SectionConfig]) -> list[SectionConfig]:
    return [s for s in sections if s.enabled]
