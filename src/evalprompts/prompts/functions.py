"""Callable wrappers for prompts that are produced by scripts.

Every wrapper follows the same contract: it is called with a render context
(``{"vars": {...}, "provider": {"id": ..., "label": ...}}``) and returns the
prompt text. Scripts run in a child process at call time. Node modules can
also be imported once at load time with `NodeScriptFunction.check`.
"""
from __future__ import annotations

import json
import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..errors import PromptFunctionError

_PYTHON_RUNNER = """
import importlib.util, json, os, sys
path, name, context = sys.argv[1], sys.argv[2], json.loads(sys.argv[3])
sys.path.insert(0, os.path.dirname(path))
spec = importlib.util.spec_from_file_location("_prompt_module", path)
module = importlib.util.module_from_spec(spec)
spec.loader.exec_module(module)
result = getattr(module, name)(context)
sys.stdout.write(result if isinstance(result, str) else json.dumps(result))
"""

_NODE_RUNNER = """
const { pathToFileURL } = require('url');
const [path, name, context] = process.argv.slice(1);
import(pathToFileURL(path).href).then(async (mod) => {
  const exported = name ? (mod[name] ?? (mod.default && mod.default[name])) : (mod.default ?? mod);
  if (typeof exported !== 'function') {
    throw new Error(`No function ${name || 'default'} exported from ${path}`);
  }
  if (context === undefined) {
    return;
  }
  const result = await exported(JSON.parse(context));
  process.stdout.write(typeof result === 'string' ? result : JSON.stringify(result));
}).catch((err) => {
  console.error(err && err.stack ? err.stack : String(err));
  process.exit(1);
});
"""


class PromptFunction(ABC):
    def __init__(self, path: str | Path, function_name: Optional[str] = None):
        self.path = str(path)
        self.function_name = function_name

    @abstractmethod
    def command(self, context: Dict[str, Any]) -> List[str]:
        ...

    def __call__(self, context: Optional[Dict[str, Any]] = None) -> str:
        logging.getLogger(__name__).debug(
            "Running prompt function %s (entry point=%s)", self.path, self.function_name
        )
        return self._run(self.command(context or {}))

    def _run(self, cmd: List[str]) -> str:
        logger = logging.getLogger(__name__)
        proc = subprocess.run(cmd, capture_output=True, text=True)
        if proc.returncode != 0:
            logger.error("Prompt function %s exited with %d: %s", self.path, proc.returncode, proc.stderr.strip())
            raise PromptFunctionError(
                f"Prompt function {self.path} failed with exit code {proc.returncode}: {proc.stderr.strip()}",
                returncode=proc.returncode,
                stderr=proc.stderr,
            )
        return proc.stdout

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PromptFunction):
            return NotImplemented
        return (type(self), self.path, self.function_name) == (type(other), other.path, other.function_name)

    def __hash__(self) -> int:
        return hash((type(self), self.path, self.function_name))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r}, function_name={self.function_name!r})"


class PythonScriptFunction(PromptFunction):
    def __init__(self, path: str | Path, function_name: Optional[str] = None, python_executable: str = "python"):
        super().__init__(path, function_name)
        self.python_executable = python_executable

    def command(self, context: Dict[str, Any]) -> List[str]:
        payload = json.dumps(context)
        if self.function_name:
            return [self.python_executable, "-c", _PYTHON_RUNNER, self.path, self.function_name, payload]
        # Legacy form: the whole script prints the prompt
        return [self.python_executable, self.path, payload]

    def __call__(self, context: Optional[Dict[str, Any]] = None) -> str:
        output = super().__call__(context)
        if not self.function_name:
            return output.rstrip("\n")
        return output


class NodeScriptFunction(PromptFunction):
    def __init__(self, path: str | Path, function_name: Optional[str] = None, node_executable: str = "node"):
        super().__init__(path, function_name)
        self.node_executable = node_executable

    def command(self, context: Dict[str, Any]) -> List[str]:
        return [self.node_executable, "-e", _NODE_RUNNER, self.path, self.function_name or "", json.dumps(context)]

    def check(self) -> None:
        """Import the module and confirm the export is a function, without calling it.

        Raises PromptFunctionError if the module fails to load or lacks the export.
        """
        self._run([self.node_executable, "-e", _NODE_RUNNER, self.path, self.function_name or ""])
