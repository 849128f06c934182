"""Load the prompt-related sections of an evaluation config file.

Example ``eval.yaml``::

    prompts:
      - prompts/*.txt
      - id: prompts/chat.py:render
        label: Chat
    providers:
      - id: openai:gpt-4o
        prompts: [Chat]
      - anthropic:claude

Prompt paths are resolved relative to the directory holding the file.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from .config import LoaderOptions
from .logging import get_logger
from .prompts import Prompt, read_prompts
from .providers import read_provider_prompt_map


@dataclass(frozen=True)
class PromptSuite:
    prompts: List[Prompt]
    provider_prompt_map: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def labels(self) -> List[str]:
        return [p.label for p in self.prompts]


def load_prompt_suite(path: str | Path, options: Optional[LoaderOptions] = None) -> PromptSuite:
    logger = get_logger(__name__)
    path = Path(path)
    logger.info("Loading evaluation config: %s", path)
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Evaluation config must be a mapping: {path}")
    if "prompts" not in data:
        raise ValueError(f"No 'prompts' section in {path}")

    prompts = read_prompts(data["prompts"], base_path=str(path.parent.resolve()), options=options)
    provider_prompt_map = read_provider_prompt_map(data, prompts)
    logger.info("Loaded %d prompt(s) and %d provider mapping(s) from %s",
                len(prompts), len(provider_prompt_map), path)
    return PromptSuite(prompts=prompts, provider_prompt_map=provider_prompt_map)
