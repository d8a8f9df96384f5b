"""Run command pipelines between files, with optional here-document input."""

__version__ = "0.1.0"
__all__ = ["cli", "command", "errors", "files", "heredoc", "pipeline"]