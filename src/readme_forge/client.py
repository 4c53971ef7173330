from readme_forge.config import Settings, get_settings
from readme_forge.controller import GenerationController
from readme_forge.export import TerminalClipboard
from readme_forge.store import JsonFileStore
from readme_forge.transport import ChatCompletionClient


def get_transport(settings: Settings) -> ChatCompletionClient:
    return ChatCompletionClient(base_url=settings.api_base_url, timeout=settings.request_timeout)


def get_controller(settings: Settings | None = None) -> GenerationController:
    """Controller wired to the on-disk credential cache, the HTTP API and the terminal."""
    settings = settings or get_settings()
    return GenerationController(
        store=JsonFileStore(settings.credential_store_path),
        transport=get_transport(settings),
        clipboard=TerminalClipboard(),
    )
