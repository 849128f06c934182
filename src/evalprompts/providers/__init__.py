"""Provider helpers.

Exports:
- ProviderOptions, read_provider_prompt_map
"""
from __future__ import annotations

__all__ = ["ProviderOptions", "read_provider_prompt_map", "CUSTOM_FUNCTION_KEY"]

from .prompt_map import CUSTOM_FUNCTION_KEY, read_provider_prompt_map
from .schemas import ProviderOptions
