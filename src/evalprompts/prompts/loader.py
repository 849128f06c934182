"""Prompt loading entry points.

`read_prompts` turns whatever the user put under ``prompts:`` (a path, a list of
paths and globs, a path -> label mapping, or labelled descriptors) into a flat
list of `Prompt` records. `load_prompt_contents` handles a single resolved
path: directories, files by extension, and the fallback of treating an input
that does not exist on disk as the prompt text itself.
"""
from __future__ import annotations

import json
import logging
import os
import stat
from dataclasses import asdict
from typing import Any, Dict, List, Mapping, Optional, Sequence, Set, Union

from ..config import LoaderOptions
from ..errors import NoPromptsFoundError
from .parsers import parse_directory, parser_for
from .paths import expand_glob, maybe_filepath, resolve_path, split_function_name, strip_file_scheme
from .schemas import Prompt, PromptDescriptor, PromptPathInfo

PromptInput = Union[str, Mapping[str, str], Sequence[Union[str, Mapping[str, Any], PromptDescriptor]]]

logger = logging.getLogger(__name__)


def load_prompt_contents(
    path_info: PromptPathInfo,
    force_load_from_file: Set[str],
    resolved_path_to_display: Mapping[str, str],
    base_path: str = "",
    options: Optional[LoaderOptions] = None,
) -> List[Prompt]:
    """Load the prompt(s) behind one resolved path.

    Args:
      path_info: the token as written and its resolved location; the resolved
        path may end in ``:functionName`` for script prompts.
      force_load_from_file: resolved paths that must exist (written as ``file://``).
      resolved_path_to_display: override labels keyed by resolved path.
      base_path: directory relative resolved paths are anchored to.
      options: loader settings; defaults to `LoaderOptions()`.

    Raises:
      FileNotFoundError: the path is missing and strict mode or force-load applies.
      NoPromptsFoundError: a JSONL file held no rows.
    """
    options = options or LoaderOptions()
    resolved = path_info.resolved
    if not os.path.isabs(resolved):
        resolved = resolve_path(base_path, resolved)
    prompt_path, function_name = split_function_name(resolved)
    label = resolved_path_to_display.get(path_info.resolved)

    try:
        st = os.stat(prompt_path)
    except (OSError, ValueError):
        if options.strict_files or prompt_path in force_load_from_file:
            raise
        if maybe_filepath(path_info.raw):
            logger.warning('Could not find prompt file: "%s". Treating it as a text prompt.', prompt_path)
        else:
            logger.debug("Treating input as a literal prompt: %.60s", path_info.raw)
        return [Prompt(raw=path_info.raw, label=path_info.raw)]

    if stat.S_ISDIR(st.st_mode):
        return parse_directory(prompt_path, options)
    parser = parser_for(prompt_path)
    logger.debug("Parsing %s with %s (function=%s)", prompt_path, parser.__name__, function_name)
    return parser(prompt_path, path_info, label, function_name, options)


def _descriptor(entry: Union[Mapping[str, Any], PromptDescriptor]) -> PromptDescriptor:
    if isinstance(entry, PromptDescriptor):
        return entry
    return PromptDescriptor.model_validate(dict(entry))


def read_prompts(
    prompt_path_or_globs: PromptInput,
    base_path: str = "",
    options: Optional[LoaderOptions] = None,
) -> List[Prompt]:
    """Resolve prompt paths, globs, mappings or descriptors into prompts.

    Order follows the input, and within a file the document order. Raises
    NoPromptsFoundError if nothing at all was loaded.
    """
    options = options or LoaderOptions()
    logger.debug("Reading prompts from %s", prompt_path_or_globs)

    force_load_from_file: Set[str] = set()
    resolved_path_to_display: Dict[str, str] = {}
    path_infos: List[PromptPathInfo] = []

    def _resolve(raw_path: str) -> str:
        raw_path, forced = strip_file_scheme(raw_path)
        resolved = resolve_path(base_path, raw_path)
        if forced:
            force_load_from_file.add(split_function_name(resolved)[0])
        return resolved

    if isinstance(prompt_path_or_globs, str):
        prompt_path_or_globs = [prompt_path_or_globs]

    if isinstance(prompt_path_or_globs, Mapping):
        for key, display in prompt_path_or_globs.items():
            resolved = _resolve(key)
            resolved_path_to_display[resolved] = display
            path_infos.append(PromptPathInfo(raw=strip_file_scheme(key)[0], resolved=resolved))
    elif isinstance(prompt_path_or_globs, (list, tuple)):
        for entry in prompt_path_or_globs:
            if isinstance(entry, str):
                raw_path = strip_file_scheme(entry)[0]
                for match in expand_glob(_resolve(entry)):
                    path_infos.append(PromptPathInfo(raw=raw_path, resolved=match))
            else:
                # Labelled descriptors are loaded as written, never glob-expanded
                descriptor = _descriptor(entry)
                resolved = _resolve(descriptor.id)
                resolved_path_to_display[resolved] = descriptor.label
                path_infos.append(PromptPathInfo(raw=strip_file_scheme(descriptor.id)[0], resolved=resolved))
    else:
        raise TypeError(f"Unsupported prompt input type: {type(prompt_path_or_globs).__name__}")

    logger.debug("Resolved prompt paths: %s", [asdict(p) for p in path_infos])

    prompts: List[Prompt] = []
    for path_info in path_infos:
        prompts.extend(
            load_prompt_contents(path_info, force_load_from_file, resolved_path_to_display, base_path, options)
        )

    if not prompts:
        raise NoPromptsFoundError(f"There are no prompts in {json.dumps(prompt_path_or_globs, default=str)}")
    logger.info("Loaded %d prompt(s) from %d source(s)", len(prompts), len(path_infos))
    return prompts
