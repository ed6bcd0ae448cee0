from logspark.models import ChangelogInput

TEMPLATE_STYLES = {
    "standard": (
        "Use a balanced, professional tone. Write clear and neutral release "
        "notes that any user can follow."
    ),
    "marketing": (
        "Use an exciting, benefit-driven tone. Lead every item with the value "
        "it brings to customers and keep the energy high."
    ),
    "technical": (
        "Use a precise, technical tone. Preserve identifiers, API names, "
        "versions and implementation details exactly as written."
    ),
    "minimal": (
        "Aim for extreme brevity. Use bullet points only, with no "
        "introductory or closing text."
    ),
}

STRUCTURE_RULES = """=== STRUCTURE RULES ===
1. Group the changes under one heading per change type, in the order given below.
2. Leave out any change type that has no changes listed below.
3. Rewrite raw notes and commit fragments as complete, readable sentences.
4. Produce the same changelog in three formats:
   • markdown: Markdown with headings and bullet lists
   • html: a self-contained HTML fragment (no <html> or <body> wrapper)
   • plainText: plain text without any markup"""

OUTPUT_FORMAT = """=== OUTPUT FORMAT ===
Return ONLY a valid JSON object with the keys "markdown", "html" and "plainText".
Each value must be a string. No code blocks, no extra text."""

CHANGELOG_SCHEMA = {
    "type": "object",
    "properties": {
        "markdown": {"type": "string"},
        "html": {"type": "string"},
        "plainText": {"type": "string"},
    },
    "required": ["markdown", "html", "plainText"],
}


def build_prompt(changelog_input: ChangelogInput) -> str:
    """Render the form into the instruction sent to the model.

    Entries with blank content are dropped entirely so their change type is
    never mentioned. User text is embedded as-is.
    """
    style = TEMPLATE_STYLES[changelog_input.template]
    changes = "\n".join(
        f"[{entry.category.upper()}]: {entry.content}"
        for entry in changelog_input.filled_entries()
    )

    return f"""You are a release manager writing the public changelog for a software product.

=== STYLE ===
{style}

{STRUCTURE_RULES}

=== RELEASE ===
Version: {changelog_input.version}
Date: {changelog_input.date}

=== CHANGES ===
{changes}

{OUTPUT_FORMAT}"""
