"""Shared fakes and fixtures for readme-forge tests."""

from collections.abc import Callable

import pytest

from readme_forge.controller import GenerationController
from readme_forge.errors import ClipboardError
from readme_forge.models import ChatCompletionRequest
from readme_forge.store import MemoryStore


class FakeTransport:
    """In-memory generation transport that records requests."""

    def __init__(
        self,
        content: str | None = "# Widget\n...",
        error: Exception | None = None,
    ):
        self.content = content
        self.error = error
        self.calls: list[tuple[ChatCompletionRequest, str]] = []
        self.on_call: Callable[[], None] | None = None

    async def complete(self, request: ChatCompletionRequest, *, api_key: str) -> str | None:
        self.calls.append((request, api_key))
        if self.on_call is not None:
            self.on_call()
        if self.error is not None:
            raise self.error
        return self.content


class FakeClipboard:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.copied: list[str] = []

    def copy(self, text: str) -> None:
        if self.fail:
            raise ClipboardError("no clipboard")
        self.copied.append(text)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def controller(store, transport, clipboard):
    return GenerationController(store=store, transport=transport, clipboard=clipboard)


@pytest.fixture
def ready_controller(controller):
    """Controller with the minimum fields needed to generate."""
    controller.update_field("name", "Widget")
    controller.update_field("description", "A widget.")
    controller.update_field("api_key", "k1")
    return controller
