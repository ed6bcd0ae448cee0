import json
import re
from typing import Optional

from logspark.errors import EmptyResponseError, ParseError
from logspark.models import GeneratedChangelog

PLACEHOLDERS = {
    "markdown": "Error generating markdown",
    "html": "<p>Error generating HTML</p>",
    "plainText": "Error generating plain text",
}

OPENING_FENCE = re.compile(r"^```[^\n{\[]*")
CLOSING_FENCE = re.compile(r"```$")


def strip_code_fences(response_text: str) -> str:
    """Remove a leading ```lang and/or trailing ``` marker from an LLM reply"""
    response_text = response_text.strip()
    response_text = OPENING_FENCE.sub("", response_text, count=1)
    response_text = CLOSING_FENCE.sub("", response_text, count=1)
    return response_text.strip()


def parse_changelog_response(response_text: Optional[str]) -> GeneratedChangelog:
    """
    Turn the model's reply into a GeneratedChangelog.

    An empty reply or one that is not a JSON object fails the call. Once the
    JSON parses, a missing or empty field is replaced by its placeholder
    instead of failing.
    """
    if not response_text or not response_text.strip():
        raise EmptyResponseError("Generation service returned an empty response")

    cleaned = strip_code_fences(response_text)

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        print(f"❌ JSON parsing failed at position {e.pos}: {e.msg}")
        raise ParseError(f"Could not parse LLM response as JSON: {e.msg}") from e

    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

    fields = {}
    for key, placeholder in PLACEHOLDERS.items():
        value = data.get(key)
        if not value:
            print(f"⚠ Response is missing '{key}', using placeholder")
            value = placeholder
        fields[key] = value if isinstance(value, str) else str(value)

    return GeneratedChangelog(**fields)
