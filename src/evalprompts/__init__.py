from .config import Config, LoaderOptions
from .logging import get_logger
from . import prompts as prompts
from . import providers as providers
from .errors import NoPromptsFoundError, PromptFunctionError, PromptLoadError
from .suite import PromptSuite, load_prompt_suite

__all__ = [
    "Config",
    "LoaderOptions",
    "get_logger",
    "prompts",
    "providers",
    "NoPromptsFoundError",
    "PromptFunctionError",
    "PromptLoadError",
    "PromptSuite",
    "load_prompt_suite",
]
