"""Decide which prompts each provider receives."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Sequence

from ..prompts.schemas import Prompt
from .schemas import ProviderOptions

CUSTOM_FUNCTION_KEY = "Custom function"


def _register(ret: Dict[str, List[str]], key: str, options: ProviderOptions, all_prompts: List[str]) -> None:
    prompts = list(options.prompts) if options.prompts is not None else list(all_prompts)
    ret[key] = prompts
    if options.label:
        ret[options.label] = list(prompts)

    unknown = [p for p in prompts if p not in all_prompts]
    if unknown:
        logging.getLogger(__name__).warning(
            "Provider %s references prompt(s) not among the loaded prompts: %s", key, unknown
        )


def read_provider_prompt_map(config: Mapping[str, Any], prompts: Sequence[Prompt]) -> Dict[str, List[str]]:
    """Map each provider id (and label, if any) to the ordered prompt labels it uses.

    `config["providers"]` may be missing, a provider id string, a callable, or a
    list whose entries are id strings, descriptors (``{"id": ..., "prompts": [...]}``)
    or alias maps (``{"alias": {...descriptor...}}``). Providers without their
    own ``prompts`` list receive every prompt.
    """
    providers = config.get("providers")
    if not providers:
        return {}

    all_prompts = [p.label for p in prompts]
    if isinstance(providers, str):
        return {providers: all_prompts}
    if callable(providers):
        return {CUSTOM_FUNCTION_KEY: all_prompts}

    ret: Dict[str, List[str]] = {}
    for provider in providers:
        if isinstance(provider, str):
            ret[provider] = list(all_prompts)
        elif isinstance(provider, ProviderOptions):
            if provider.id is None:
                raise ValueError(f"Provider descriptor requires an id, but got {provider!r}")
            _register(ret, provider.id, provider, all_prompts)
        elif isinstance(provider, Mapping) and "id" in provider:
            options = ProviderOptions.model_validate(dict(provider))
            _register(ret, options.id, options, all_prompts)
        elif isinstance(provider, Mapping) and len(provider) == 1:
            alias, descriptor = next(iter(provider.items()))
            options = ProviderOptions.model_validate(dict(descriptor or {}))
            _register(ret, options.id or alias, options, all_prompts)
        else:
            raise ValueError(f"Unrecognized provider entry: {provider!r}")
    return ret
