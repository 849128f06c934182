from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import rootutils
import yaml

__all__ = ["Config", "LoaderOptions", "project_root"]

_TRUTHY = {"1", "true", "yes", "on"}


def project_root() -> Path:
    """Return the project root, or the working directory outside a checkout."""
    try:
        return Path(rootutils.find_root(search_from=__file__, indicator=[".git", "pyproject.toml"]))
    except FileNotFoundError:
        return Path.cwd()


class Config:
    def __init__(self, config_path: str = "config.yaml", data: Optional[Dict[str, Any]] = None):
        self._config_path = config_path
        self._config: Dict[str, Any] = data if data is not None else self._load_config()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        return cls(config_path=str(path) if path is not None else "config.yaml")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        return cls(config_path="<memory>", data=data)

    def _load_config(self) -> Dict[str, Any]:
        cfg_file = Path(self._config_path)
        if not cfg_file.is_absolute():
            cfg_file = project_root() / cfg_file
        if not cfg_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {cfg_file}")
        with cfg_file.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def get(self, key_path: str, default: Any = None) -> Any:
        keys = key_path.split(".") if key_path else []
        value: Any = self._config
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    @property
    def general(self) -> Dict[str, Any]:
        return self.get("general", {})

    @property
    def prompts(self) -> Dict[str, Any]:
        return self.get("prompts", {})


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUTHY


@dataclass(frozen=True)
class LoaderOptions:
    """Settings that change how prompt sources are read.

    strict_files: propagate missing-file errors instead of falling back to
      treating the input as a literal prompt.
    delimiter: line that separates prompts inside a text file.
    """

    strict_files: bool = False
    delimiter: str = "---"
    python_executable: str = field(default_factory=lambda: sys.executable)
    node_executable: str = "node"

    @classmethod
    def from_config(cls, cfg: Config) -> "LoaderOptions":
        section = cfg.prompts or {}
        defaults = cls()
        return cls(
            strict_files=_as_bool(section.get("strict_files", defaults.strict_files)),
            delimiter=section.get("delimiter") or defaults.delimiter,
            python_executable=section.get("python_executable") or defaults.python_executable,
            node_executable=section.get("node_executable") or defaults.node_executable,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoaderOptions":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            strict_files=_as_bool(env.get("EVALPROMPTS_STRICT_FILES")),
            delimiter=env.get("EVALPROMPTS_PROMPT_DELIMITER") or defaults.delimiter,
        )
