"""Tests for prompt rendering."""

from readme_forge.models import License, ProjectData
from readme_forge.prompts import (
    MAX_TOKENS,
    MODEL,
    SYSTEM_PROMPT,
    TEMPERATURE,
    build_prompt,
    build_request,
)


def make_project(**overrides) -> ProjectData:
    data = {
        "name": "Widget",
        "description": "A widget.",
        "tech_stack": ["Go", "Redis"],
        "features": ["Fast", "Small"],
        "installation": "go install ./...",
        "usage": "widget run",
        "license": License.APACHE_2_0,
        "author": "Jane Doe",
        "repository": "https://github.com/jane/widget",
        "live_demo": "https://widget.example",
        "api_key": "secret-key",
    }
    data.update(overrides)
    return ProjectData(**data)


class TestBuildPrompt:
    def test_lists_every_field(self):
        prompt = build_prompt(make_project())

        assert "Project Name: Widget\n" in prompt
        assert "Description: A widget.\n" in prompt
        assert "Tech Stack: Go, Redis\n" in prompt
        assert "Features: Fast, Small\n" in prompt
        assert "Installation Instructions: go install ./...\n" in prompt
        assert "Usage Instructions: widget run\n" in prompt
        assert "License: Apache-2.0\n" in prompt
        assert "Author: Jane Doe\n" in prompt
        assert "Repository: https://github.com/jane/widget\n" in prompt
        assert "Live Demo: https://widget.example\n" in prompt

    def test_field_order(self):
        prompt = build_prompt(make_project())
        labels = [
            "Project Name:",
            "Description:",
            "Tech Stack:",
            "Features:",
            "Installation Instructions:",
            "Usage Instructions:",
            "License:",
            "Author:",
            "Repository:",
            "Live Demo:",
        ]

        positions = [prompt.index(label) for label in labels]

        assert positions == sorted(positions)

    def test_structure_instructions(self):
        prompt = build_prompt(make_project())

        for section in [
            "Attractive header",
            "Badges for tech stack and license",
            "Table of contents",
            "Features section with emojis",
            "Installation and usage instructions",
            "Contributing guidelines",
            "License information",
            "Contact information",
        ]:
            assert section in prompt

    def test_is_deterministic(self):
        assert build_prompt(make_project()) == build_prompt(make_project())

    def test_empty_optional_fields(self):
        project = ProjectData(name="Widget", description="A widget.")

        prompt = build_prompt(project)

        assert "Tech Stack: \n" in prompt
        assert "Features: \n" in prompt
        assert "License: MIT\n" in prompt

    def test_license_given_as_plain_string(self):
        project = make_project()
        project.license = "ISC"

        assert "License: ISC\n" in build_prompt(project)

    def test_api_key_not_in_prompt(self):
        assert "secret-key" not in build_prompt(make_project())


class TestBuildRequest:
    def test_fixed_parameters(self):
        request = build_request(make_project())

        assert request.model == MODEL == "openai/gpt-oss-120b"
        assert request.temperature == TEMPERATURE == 0.7  # noqa: PLR2004
        assert request.max_tokens == MAX_TOKENS == 2000  # noqa: PLR2004

    def test_messages(self):
        project = make_project()
        request = build_request(project)

        assert request.messages[0].role == "system"
        assert request.messages[0].content == SYSTEM_PROMPT
        assert request.messages[1].role == "user"
        assert request.messages[1].content == build_prompt(project)
