"""Pull a JSON object out of a free-form model response."""

import re

JSON_FENCE = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)


def extract_json(raw_text: str | None) -> str:
    """
    Narrow a model response down to its JSON payload. Never raises.

    First match wins:
    1. Content of a ```json fenced block
    2. Span from the first "{" to the last "}"
    3. The trimmed text itself (so the caller's parse error shows what came back)
    """
    if not raw_text:
        return ""

    match = JSON_FENCE.search(raw_text)
    if match:
        return match.group(1).strip()

    start = raw_text.find("{")
    end = raw_text.rfind("}")
    if start != -1 and end > start:
        return raw_text[start : end + 1].strip()

    return raw_text.strip()
