"""GenerationController: form state plus the README generation lifecycle.

Status moves ``idle -> generating -> ready | failed``. ``ready`` and
``failed`` can generate again; a call made while ``generating`` is rejected.
Listeners registered with :meth:`GenerationController.subscribe` receive the
:class:`GenerationResult` after every status change.
"""

from collections.abc import Callable
from typing import Any
import uuid

import structlog

from readme_forge.errors import (
    ClipboardError,
    GenerationFailed,
    GenerationInProgress,
    IncompleteProject,
    MissingCredential,
    TransportError,
)
from readme_forge.export import Clipboard, MarkdownDocument
from readme_forge.logging import bind_generation_id, unbind_generation_id
from readme_forge.models import GenerationResult, GenerationStatus, ProjectData
from readme_forge.prompts import build_request
from readme_forge.store import CREDENTIAL_KEY, KeyValueStore
from readme_forge.transport import GenerationTransport

logger = structlog.get_logger(__name__)

FALLBACK_TEXT = "Failed to generate README"

Listener = Callable[[GenerationResult], None]


def _add_unique(entries: list[str], token: str) -> bool:
    token = token.strip()
    if not token or token in entries:
        return False
    entries.append(token)
    return True


def _remove_first(entries: list[str], token: str) -> bool:
    try:
        entries.remove(token)
    except ValueError:
        return False
    return True


class GenerationController:
    """Owns the project record and turns it into a README."""

    def __init__(
        self,
        store: KeyValueStore,
        transport: GenerationTransport,
        clipboard: Clipboard | None = None,
    ) -> None:
        self.store = store
        self.transport = transport
        self.clipboard = clipboard

        self.project = ProjectData(api_key=store.get(CREDENTIAL_KEY) or "")
        if self.project.api_key:
            logger.debug("credential_restored")

        self.pending_tech = ""
        self.pending_feature = ""
        self.result = GenerationResult()
        self._listeners: list[Listener] = []

    @property
    def status(self) -> GenerationStatus:
        return self.result.status

    # === Subscription ===

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_status(self, status: GenerationStatus) -> None:
        self.result.status = status
        for listener in list(self._listeners):
            listener(self.result)

    # === Form editing ===

    def add_tech_stack_entry(self, token: str | None = None) -> bool:
        """Append a tech stack entry (the staged one if ``token`` is omitted).

        Returns False when the trimmed entry is empty or already listed.
        """
        if not _add_unique(self.project.tech_stack, self.pending_tech if token is None else token):
            return False
        self.pending_tech = ""
        return True

    def add_feature_entry(self, token: str | None = None) -> bool:
        """Append a feature (the staged one if ``token`` is omitted)."""
        if not _add_unique(self.project.features, self.pending_feature if token is None else token):
            return False
        self.pending_feature = ""
        return True

    def remove_tech_stack_entry(self, token: str) -> bool:
        return _remove_first(self.project.tech_stack, token)

    def remove_feature_entry(self, token: str) -> bool:
        return _remove_first(self.project.features, token)

    def update_field(self, name: str, value: Any) -> None:
        """Assign ``value`` to a ProjectData field without validating it."""
        setattr(self.project, name, value)

    # === Generation ===

    def _check_preconditions(self) -> None:
        if self.status is GenerationStatus.GENERATING:
            logger.warning("generation_rejected", reason="in_progress")
            raise GenerationInProgress()
        if not self.project.api_key:
            logger.info("generation_rejected", reason="missing_credential")
            raise MissingCredential()
        if not self.project.name or not self.project.description:
            logger.info("generation_rejected", reason="incomplete_project")
            raise IncompleteProject()

    async def generate(self) -> str:
        """Generate a README from the current project data.

        Returns:
            The generated markdown, also stored in ``self.result``.

        Raises:
            GenerationInProgress: Another generation has not finished yet.
            MissingCredential: No API key was entered.
            IncompleteProject: Name or description is empty.
            GenerationFailed: The endpoint call failed. The previous result
                text is kept.
        """
        self._check_preconditions()

        api_key = self.project.api_key
        self.store.set(CREDENTIAL_KEY, api_key)
        logger.debug("credential_persisted")

        bind_generation_id(uuid.uuid4().hex)
        try:
            request = build_request(self.project)
            self._set_status(GenerationStatus.GENERATING)
            logger.info(
                "generation_started",
                project=self.project.name,
                model=request.model,
                tech_stack_count=len(self.project.tech_stack),
                feature_count=len(self.project.features),
            )

            try:
                content = await self.transport.complete(request, api_key=api_key)
            except TransportError as e:
                logger.error("generation_failed", error=str(e), status_code=e.status_code)
                self._set_status(GenerationStatus.FAILED)
                raise GenerationFailed() from e

            text = content or FALLBACK_TEXT
            self.result.text = text
            self._set_status(GenerationStatus.READY)
            logger.info("generation_succeeded", length=len(text), fallback=not content)
            return text
        finally:
            if self.status is GenerationStatus.GENERATING:
                logger.error("generation_failed", error="unexpected_exception")
                self._set_status(GenerationStatus.FAILED)
            unbind_generation_id()

    # === Export ===

    def export_as_copy(self) -> bool:
        """Copy the README to the clipboard. Returns False if nothing was copied."""
        if not self.result.has_text:
            logger.info("export_skipped", target="clipboard", reason="no_result")
            return False
        if self.clipboard is None:
            logger.info("export_skipped", target="clipboard", reason="no_clipboard")
            return False
        try:
            self.clipboard.copy(self.result.text)
        except ClipboardError as e:
            logger.warning("clipboard_write_failed", error=str(e))
            return False
        return True

    def export_as_file(self) -> MarkdownDocument | None:
        """The README as a ``README.md`` document, or None before the first result."""
        if not self.result.has_text:
            logger.info("export_skipped", target="file", reason="no_result")
            return None
        return MarkdownDocument.from_text(self.result.text)
