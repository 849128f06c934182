"""Prompt loading for evaluation configs.

Exports:
- Prompt, PromptDescriptor, PromptPathInfo
- read_prompts, load_prompt_contents, maybe_filepath
- PromptFunction, PythonScriptFunction, NodeScriptFunction
"""
from __future__ import annotations

__all__ = [
    "Prompt",
    "PromptDescriptor",
    "PromptPathInfo",
    "read_prompts",
    "load_prompt_contents",
    "maybe_filepath",
    "PromptFunction",
    "PythonScriptFunction",
    "NodeScriptFunction",
]

from .functions import NodeScriptFunction, PromptFunction, PythonScriptFunction
from .loader import load_prompt_contents, read_prompts
from .paths import maybe_filepath
from .schemas import Prompt, PromptDescriptor, PromptPathInfo
