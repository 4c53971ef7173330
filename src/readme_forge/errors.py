"""Errors raised while generating or exporting a README.

Controller errors carry a short ``title`` and a ``message`` meant for the
user; the CLI prints both and keeps the session usable.
"""


class ReadmeForgeError(Exception):
    """Base class for user-visible errors."""

    title = "Error"
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingCredential(ReadmeForgeError):
    title = "API Key Required"
    default_message = "Please enter your Groq API key to generate README"


class IncompleteProject(ReadmeForgeError):
    title = "Missing Information"
    default_message = "Please fill in at least project name and description"


class GenerationFailed(ReadmeForgeError):
    title = "Generation Failed"
    default_message = "Failed to generate README. Please check your API key and try again."


class GenerationInProgress(ReadmeForgeError):
    title = "Generation In Progress"
    default_message = "A README is already being generated"


class TransportError(Exception):
    """The generation endpoint could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ClipboardError(Exception):
    """Writing to the clipboard failed."""
