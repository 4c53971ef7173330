"""Export targets for a generated README: a markdown file and the clipboard."""

import base64
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from rich.console import Console

from readme_forge.errors import ClipboardError

README_FILENAME = "README.md"
MARKDOWN_MEDIA_TYPE = "text/markdown"

# OSC 52: set selection "c" (clipboard) to base64 data, BEL terminated
_OSC52_TEMPLATE = "\x1b]52;c;{payload}\a"


@dataclass(frozen=True)
class MarkdownDocument:
    """A README ready to be saved."""

    content: bytes
    filename: str = README_FILENAME
    media_type: str = MARKDOWN_MEDIA_TYPE

    @classmethod
    def from_text(cls, text: str) -> "MarkdownDocument":
        return cls(content=text.encode("utf-8"))

    def save(self, directory: Path | str) -> Path:
        """Write the document into ``directory`` (created if needed) and return its path."""
        target_dir = Path(directory)
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / self.filename
        target.write_bytes(self.content)
        return target


class Clipboard(Protocol):
    def copy(self, text: str) -> None: ...


class TerminalClipboard:
    """Copies text through the terminal using the OSC 52 escape sequence.

    Works in terminals that support OSC 52 (most modern emulators, tmux with
    ``set-clipboard on``), including over SSH.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)

    def copy(self, text: str) -> None:
        if not self.console.is_terminal:
            raise ClipboardError("Clipboard is only available in an interactive terminal")
        payload = base64.b64encode(text.encode("utf-8")).decode("ascii")
        try:
            self.console.file.write(_OSC52_TEMPLATE.format(payload=payload))
            self.console.file.flush()
        except OSError as e:
            raise ClipboardError(str(e)) from e
