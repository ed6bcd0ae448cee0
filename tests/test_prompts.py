"""Tests for prompt construction in logspark/prompts.py"""

import pytest

from logspark.models import ChangelogEntry, ChangelogInput
from logspark.prompts import CHANGELOG_SCHEMA, TEMPLATE_STYLES, build_prompt


def make_input(template="standard", entries=None, version="2.1.0", date="2024-05-01"):
    if entries is None:
        entries = [("features", "added dark mode")]
    return ChangelogInput(
        version=version,
        date=date,
        template=template,
        entries=[ChangelogEntry(category=c, content=t) for c, t in entries],
    )


class TestEntryFiltering:
    def test_end_to_end_example(self):
        prompt = build_prompt(
            make_input(
                template="minimal",
                entries=[
                    ("features", "added dark mode"),
                    ("fixes", ""),
                    ("improvements", "faster startup"),
                ],
            )
        )

        assert "[FEATURES]: added dark mode" in prompt
        assert "[IMPROVEMENTS]: faster startup" in prompt
        assert "[FIXES]" not in prompt

    def test_blank_categories_are_never_mentioned(self):
        prompt = build_prompt(
            make_input(
                entries=[
                    ("features", "   "),
                    ("fixes", "fixed crash on login"),
                    ("improvements", "\n\t"),
                    ("breaking", ""),
                ]
            )
        )

        lowered = prompt.lower()
        assert "features" not in lowered
        assert "improvements" not in lowered
        assert "breaking" not in lowered
        assert prompt.count("[FIXES]") == 1

    def test_filled_entries_keep_original_order(self):
        prompt = build_prompt(
            make_input(
                entries=[
                    ("breaking", "dropped python 3.8"),
                    ("features", "export to pdf"),
                    ("fixes", "typo in header"),
                ]
            )
        )

        breaking = prompt.index("[BREAKING]: dropped python 3.8")
        features = prompt.index("[FEATURES]: export to pdf")
        fixes = prompt.index("[FIXES]: typo in header")
        assert breaking < features < fixes

    def test_each_filled_category_appears_once(self):
        prompt = build_prompt(
            make_input(entries=[("features", "a"), ("fixes", "b"), ("improvements", "c")])
        )

        for label in ("[FEATURES]", "[FIXES]", "[IMPROVEMENTS]"):
            assert prompt.count(label) == 1

    def test_content_is_embedded_verbatim(self):
        content = 'feat: add "quotes" & <tags>\nfix: second line {braces}'
        prompt = build_prompt(make_input(entries=[("features", content)]))

        assert f"[FEATURES]: {content}" in prompt


class TestTemplates:
    @pytest.mark.parametrize("template", sorted(TEMPLATE_STYLES))
    def test_only_selected_style_is_included(self, template):
        prompt = build_prompt(make_input(template=template))

        assert TEMPLATE_STYLES[template] in prompt
        for other, style in TEMPLATE_STYLES.items():
            if other != template:
                assert style not in prompt

    def test_four_distinct_styles(self):
        assert set(TEMPLATE_STYLES) == {"standard", "marketing", "technical", "minimal"}
        assert len(set(TEMPLATE_STYLES.values())) == 4


class TestLayout:
    def test_sections_are_ordered(self):
        prompt = build_prompt(make_input(template="technical"))

        style = prompt.index(TEMPLATE_STYLES["technical"])
        rules = prompt.index("=== STRUCTURE RULES ===")
        version = prompt.index("Version: 2.1.0")
        date = prompt.index("Date: 2024-05-01")
        entry = prompt.index("[FEATURES]: added dark mode")
        assert style < rules < version < date < entry

    def test_version_is_not_validated(self):
        prompt = build_prompt(make_input(version="next-big-thing"))

        assert "Version: next-big-thing" in prompt

    def test_build_prompt_is_deterministic(self):
        changelog_input = make_input()

        assert build_prompt(changelog_input) == build_prompt(changelog_input)


def test_schema_requires_three_string_fields():
    assert CHANGELOG_SCHEMA["type"] == "object"
    assert sorted(CHANGELOG_SCHEMA["required"]) == ["html", "markdown", "plainText"]
    for field in ("markdown", "html", "plainText"):
        assert CHANGELOG_SCHEMA["properties"][field] == {"type": "string"}
