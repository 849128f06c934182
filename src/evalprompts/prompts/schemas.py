"""
Prompt record types.
"""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Prompt:
    raw: str
    label: str
    # Set only for prompts backed by a script; called with the render context
    function: Optional[Callable[[dict], Any]] = None


@dataclass(frozen=True)
class PromptPathInfo:
    """A prompt token as written (`raw`) and the absolute path it resolved to."""

    raw: str
    resolved: str

    def to_json(self) -> str:
        return json.dumps(asdict(self), separators=(",", ":"))


class PromptDescriptor(BaseModel):
    """
    Explicitly labelled prompt reference, e.g. ``{"id": "prompts.py:fn", "label": "First"}``.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Path to the prompt source, optionally suffixed with ':functionName'")
    label: str = Field(..., min_length=1, description="Label used verbatim for the loaded prompt")
