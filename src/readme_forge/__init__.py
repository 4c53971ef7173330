"""Generate README.md files from project details with a hosted LLM."""

__version__ = "0.1.0"
