import re


def to_slug(text: str) -> str:
    """Convert text to a section id: lowercase, dash separated.

    Example: "Owner Interview" -> "owner-interview"
    """
    slug = re.sub(r"[^\w]+", "-", text.strip().lower())
    return slug.strip("-_")


def truncate(text: str, limit: int = 500) -> str:
    """Shorten text for logs and diagnostics."""
    if len(text) <= limit:
        return text
    return text[:limit] + f"... [{len(text) - limit} more chars]"
