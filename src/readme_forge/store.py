"""Key/value stores for the cached API key."""

import json
from pathlib import Path
from typing import Protocol

import structlog

logger = structlog.get_logger(__name__)

# Name of the cell holding the API key
CREDENTIAL_KEY = "groq-api-key"


class KeyValueStore(Protocol):
    def get(self, name: str) -> str | None: ...
    def set(self, name: str, value: str) -> None: ...


class MemoryStore:
    """In-process store, mostly for tests."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, name: str) -> str | None:
        return self.data.get(name)

    def set(self, name: str, value: str) -> None:
        self.data[name] = value


class JsonFileStore:
    """Store backed by a flat JSON object in a file.

    The file and its parent directory are created on the first write.
    A missing or unreadable file reads as empty.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("credential_store_unreadable", path=str(self.path), error=str(e))
            return {}
        if not isinstance(data, dict):
            logger.warning("credential_store_unreadable", path=str(self.path), error="not an object")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, name: str) -> str | None:
        return self._load().get(name)

    def set(self, name: str, value: str) -> None:
        data = self._load()
        data[name] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
