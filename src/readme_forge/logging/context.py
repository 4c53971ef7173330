import structlog


def bind_generation_id(generation_id: str) -> None:
    """Attach a generation ID to every log line in the current context."""
    structlog.contextvars.bind_contextvars(generation_id=generation_id)


def get_generation_id() -> str | None:
    """Get generation ID from current context."""
    return structlog.contextvars.get_contextvars().get("generation_id")


def unbind_generation_id() -> None:
    """Remove the generation ID from the current context."""
    structlog.contextvars.unbind_contextvars("generation_id")
