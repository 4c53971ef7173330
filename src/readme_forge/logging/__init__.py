from .config import setup_logging
from .context import (
    bind_generation_id,
    get_generation_id,
    unbind_generation_id,
)

__all__ = [
    "setup_logging",
    "bind_generation_id",
    "get_generation_id",
    "unbind_generation_id",
]
