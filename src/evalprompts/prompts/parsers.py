"""Per-file-type prompt parsers.

Each parser takes the file to read, the path info it came from, an optional
override label, an optional function name and the loader options, and returns
the prompts found in document order. `PARSERS` maps extensions to parsers;
anything unlisted is read as plain text.
"""
from __future__ import annotations

import json
import logging
import os
import re
import shutil
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..config import LoaderOptions
from ..errors import NoPromptsFoundError
from .functions import NodeScriptFunction, PythonScriptFunction
from .schemas import Prompt, PromptPathInfo

Parser = Callable[[str, PromptPathInfo, Optional[str], Optional[str], LoaderOptions], List[Prompt]]


def _read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8")


def split_prompts(content: str, delimiter: str = "---") -> List[Prompt]:
    """Split text on lines holding only `delimiter`; one stripped prompt per segment."""
    pattern = re.compile(rf"^[ \t]*{re.escape(delimiter)}[ \t]*$", re.MULTILINE)
    if not content.strip():
        return [Prompt(raw="", label="")]
    segments = [s.strip() for s in pattern.split(content)]
    return [Prompt(raw=s, label=s) for s in segments if s]


def parse_text(path: str, path_info: PromptPathInfo, label: Optional[str],
               function_name: Optional[str], options: LoaderOptions) -> List[Prompt]:
    content = _read_text(path)
    if label:
        # An explicit label names the whole file as one prompt
        return [Prompt(raw=content, label=label)]
    return split_prompts(content, options.delimiter)


def parse_jsonl(path: str, path_info: PromptPathInfo, label: Optional[str],
                function_name: Optional[str], options: LoaderOptions) -> List[Prompt]:
    logger = logging.getLogger(__name__)
    content = _read_text(path)
    rows = [line.strip() for line in re.split(r"\r?\n", content) if line.strip()]
    for row in rows:
        # Rows are kept as written; parsing only rejects malformed lines
        json.loads(row)
    if not rows:
        logger.error("JSONL prompt file has no rows: %s", path)
        raise NoPromptsFoundError(f"There are no prompts in {path_info.to_json()}")
    logger.debug("Parsed %d JSONL prompt row(s) from %s", len(rows), path)
    if not label:
        return [Prompt(raw=row, label=row) for row in rows]
    if len(rows) == 1:
        return [Prompt(raw=rows[0], label=label)]
    return [Prompt(raw=row, label=f"{label}[{i}]") for i, row in enumerate(rows)]


def parse_python(path: str, path_info: PromptPathInfo, label: Optional[str],
                 function_name: Optional[str], options: LoaderOptions) -> List[Prompt]:
    content = _read_text(path)
    fn = PythonScriptFunction(path, function_name, python_executable=options.python_executable)
    return [Prompt(raw=content, label=label or content, function=fn)]


def parse_node(path: str, path_info: PromptPathInfo, label: Optional[str],
               function_name: Optional[str], options: LoaderOptions) -> List[Prompt]:
    source = _read_text(path)
    raw = f"[Function: {function_name or 'default'}] {path}\n{source}"
    fn = NodeScriptFunction(path, function_name, node_executable=options.node_executable)
    if shutil.which(options.node_executable):
        fn.check()
    else:
        logging.getLogger(__name__).debug("%s not found; skipping load check of %s", options.node_executable, path)
    return [Prompt(raw=raw, label=label or raw, function=fn)]


PARSERS: Dict[str, Parser] = {
    ".txt": parse_text,
    ".jsonl": parse_jsonl,
    ".py": parse_python,
    ".js": parse_node,
    ".cjs": parse_node,
    ".mjs": parse_node,
}


def parser_for(path: str) -> Parser:
    return PARSERS.get(Path(path).suffix.lower(), parse_text)


def parse_directory(path: str, options: LoaderOptions) -> List[Prompt]:
    """Read every file directly inside `path` as text. Subdirectories are skipped."""
    logger = logging.getLogger(__name__)
    results: List[Prompt] = []
    for name in sorted(os.listdir(path)):
        child = os.path.join(path, name)
        if not os.path.isfile(child):
            logger.debug("Skipping non-file directory entry: %s", child)
            continue
        results.extend(split_prompts(_read_text(child), options.delimiter))
    logger.debug("Loaded %d prompt(s) from directory %s", len(results), path)
    return results
