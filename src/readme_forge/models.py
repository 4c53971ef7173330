"""Data model for project details and generation results."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class License(str, Enum):
    """Licenses offered in the form. MIT is the default."""

    MIT = "MIT"
    APACHE_2_0 = "Apache-2.0"
    GPL_3_0 = "GPL-3.0"
    BSD_3_CLAUSE = "BSD-3-Clause"
    ISC = "ISC"
    LGPL_2_1 = "LGPL-2.1"
    MPL_2_0 = "MPL-2.0"
    AGPL_3_0 = "AGPL-3.0"
    UNLICENSE = "Unlicense"
    PROPRIETARY = "Proprietary"


class GenerationStatus(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    READY = "ready"
    FAILED = "failed"


class ProjectData(BaseModel):
    """Everything the user entered about the project.

    Assignment is not validated; required fields are checked when a
    README is generated.
    """

    model_config = ConfigDict(validate_assignment=False)

    name: str = ""
    description: str = ""
    tech_stack: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    installation: str = ""
    usage: str = ""
    license: License = License.MIT
    author: str = ""
    repository: str = ""
    live_demo: str = ""
    api_key: str = Field(default="", repr=False)

    @property
    def license_label(self) -> str:
        if isinstance(self.license, License):
            return self.license.value
        return str(self.license)


@dataclass
class GenerationResult:
    """Latest generated document and where the controller is in its lifecycle."""

    text: str | None = None
    status: GenerationStatus = GenerationStatus.IDLE

    @property
    def has_text(self) -> bool:
        return self.text is not None


# === Chat completion wire format ===


class ChatMessage(BaseModel):
    role: str
    content: str


class ChatCompletionRequest(BaseModel):
    """Body of an OpenAI-compatible ``/chat/completions`` request."""

    model: str
    messages: list[ChatMessage]
    temperature: float
    max_tokens: int


class ChoiceMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: str | None = None
    content: str | None = None


class Choice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: ChoiceMessage | None = None


class ChatCompletionResponse(BaseModel):
    """Subset of the completion response that is read: the choices."""

    model_config = ConfigDict(extra="ignore")

    choices: list[Choice]

    def first_content(self) -> str | None:
        """Content of the first choice, or None when there is none."""
        if not self.choices or self.choices[0].message is None:
            return None
        return self.choices[0].message.content
