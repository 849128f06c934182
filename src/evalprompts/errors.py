"""Exceptions raised while loading prompts."""
from __future__ import annotations

__all__ = ["PromptLoadError", "NoPromptsFoundError", "PromptFunctionError"]


class PromptLoadError(Exception):
    """Base class for prompt loading failures."""


class NoPromptsFoundError(PromptLoadError, ValueError):
    """A source resolved to zero prompts."""


class PromptFunctionError(PromptLoadError, RuntimeError):
    """A script-backed prompt function exited with an error."""

    def __init__(self, message: str, *, returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
