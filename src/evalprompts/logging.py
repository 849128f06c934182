from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

import yaml

from .config import Config, project_root

__all__ = ["get_logger", "setup"]


_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}


def _coerce_level(level: Union[str, int, None]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        return _LEVELS.get(level.strip().upper(), logging.INFO)
    return logging.INFO


def setup(
    level: Union[str, int, None] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    destination: Optional[str] = None,
    force: bool = True,
) -> None:
    """Configure root logging.

    If `destination` is a directory path (absolute or relative to the project
    root), logs are written to `<destination>/evalprompts.log`. If `destination`
    is empty or equal to "none" (case-insensitive), logs are emitted to stdout.
    """
    resolved_level = _coerce_level(level)
    fmt = fmt or "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    handlers: list[logging.Handler] = []
    dest = (destination or "").strip()
    if dest and dest.lower() not in {"none", "null", "false"}:
        logs_dir = Path(dest)
        if not logs_dir.is_absolute():
            logs_dir = project_root() / logs_dir
        logs_dir.mkdir(parents=True, exist_ok=True)
        log_file = logs_dir / "evalprompts.log"
        handlers = [logging.FileHandler(log_file, encoding="utf-8")]
    else:
        handlers = [logging.StreamHandler(sys.stdout)]

    logging.basicConfig(
        level=resolved_level,
        format=fmt,
        datefmt=datefmt or "%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=force,
    )


_CONFIGURED: bool = False


def _ensure_configured() -> None:
    """Configure logging once from the ``general`` section of config.yaml.

    Does nothing if the host program already installed handlers. A missing or
    unreadable config file leaves the defaults (INFO to stdout) in place.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return
    if logging.getLogger().hasHandlers():
        _CONFIGURED = True
        return
    try:
        general = Config.load().general or {}
    except (OSError, ValueError, yaml.YAMLError) as exc:
        general = {}
        logging.getLogger(__name__).debug("No usable config.yaml for logging: %s", exc)
    if not isinstance(general, dict):
        general = {}
    setup(
        level=general.get("log_level"),
        destination=general.get("logs"),
        force=False,
    )
    _CONFIGURED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger for evalprompts entry points that may run before the host sets up logging.

    Library internals use ``logging.getLogger(__name__)`` directly; entry points
    such as `load_prompt_suite` go through here so a bare script still gets
    output formatted per config.yaml.
    """
    _ensure_configured()
    return logging.getLogger(name or "evalprompts")
