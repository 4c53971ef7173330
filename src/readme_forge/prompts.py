"""Prompt template and fixed sampling parameters for README generation."""

from readme_forge.models import ChatCompletionRequest, ChatMessage, ProjectData

MODEL = "openai/gpt-oss-120b"
TEMPERATURE = 0.7
MAX_TOKENS = 2000

SYSTEM_PROMPT = (
    "You are a professional technical writer specializing in creating comprehensive "
    "README.md files for GitHub repositories. Create detailed, well-formatted README "
    "files with proper markdown syntax."
)

README_PROMPT_TEMPLATE = """Create a comprehensive, professional README.md file for a project with the following details:

Project Name: {name}
Description: {description}
Tech Stack: {tech_stack}
Features: {features}
Installation Instructions: {installation}
Usage Instructions: {usage}
License: {license}
Author: {author}
Repository: {repository}
Live Demo: {live_demo}

Please create a modern, well-structured README.md with:
- Attractive header with project title and description
- Badges for tech stack and license
- Table of contents
- Features section with emojis
- Installation and usage instructions
- Contributing guidelines
- License information
- Contact information

Make it visually appealing with proper markdown formatting, emojis, and clear sections. Include placeholder images where appropriate."""  # noqa: E501


def build_prompt(project: ProjectData) -> str:
    """Render the user prompt for ``project``.

    Empty optional fields are rendered as empty values, not omitted.
    """
    return README_PROMPT_TEMPLATE.format(
        name=project.name,
        description=project.description,
        tech_stack=", ".join(project.tech_stack),
        features=", ".join(project.features),
        installation=project.installation,
        usage=project.usage,
        license=project.license_label,
        author=project.author,
        repository=project.repository,
        live_demo=project.live_demo,
    )


def build_request(project: ProjectData) -> ChatCompletionRequest:
    """Build the two-message completion request for ``project``."""
    return ChatCompletionRequest(
        model=MODEL,
        messages=[
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(role="user", content=build_prompt(project)),
        ],
        temperature=TEMPERATURE,
        max_tokens=MAX_TOKENS,
    )
