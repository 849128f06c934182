import json
import shutil
import sys

import pytest

from evalprompts.errors import PromptFunctionError
from evalprompts.prompts import NodeScriptFunction, PythonScriptFunction, read_prompts

requires_node = pytest.mark.skipif(shutil.which("node") is None, reason="node is not installed")


def test_python_named_function(tmp_path):
    script = tmp_path / "prompts.py"
    script.write_text("def render(context):\n    return 'Hello ' + context['vars']['name']\n")

    fn = PythonScriptFunction(script, "render", python_executable=sys.executable)

    assert fn({"vars": {"name": "Ada"}, "provider": {"id": "echo"}}) == "Hello Ada"


def test_python_named_function_returning_messages(tmp_path):
    script = tmp_path / "chat.py"
    script.write_text(
        "def chat(context):\n"
        "    return [{'role': 'user', 'content': context['vars']['q']}]\n"
    )

    out = PythonScriptFunction(script, "chat", python_executable=sys.executable)({"vars": {"q": "hi"}})

    assert json.loads(out) == [{"role": "user", "content": "hi"}]


def test_python_whole_script_receives_context(tmp_path):
    script = tmp_path / "legacy.py"
    script.write_text(
        "import json, sys\n"
        "context = json.loads(sys.argv[1])\n"
        "print('Topic: ' + context['vars']['topic'])\n"
    )

    fn = PythonScriptFunction(script, python_executable=sys.executable)

    assert fn({"vars": {"topic": "cats"}}) == "Topic: cats"


def test_python_failure_raises(tmp_path):
    script = tmp_path / "broken.py"
    script.write_text("raise SystemExit('boom')\n")

    with pytest.raises(PromptFunctionError) as excinfo:
        PythonScriptFunction(script, python_executable=sys.executable)({})
    assert excinfo.value.returncode != 0
    assert "boom" in excinfo.value.stderr


def test_function_equality():
    assert PythonScriptFunction("a.py", "f") == PythonScriptFunction("a.py", "f", python_executable="python3")
    assert PythonScriptFunction("a.py", "f") != PythonScriptFunction("a.py", "g")
    assert PythonScriptFunction("a.js") != NodeScriptFunction("a.js")


@requires_node
def test_node_default_export(tmp_path):
    script = tmp_path / "prompt.js"
    script.write_text("module.exports = (context) => `Hi ${context.vars.name}`;\n")

    assert NodeScriptFunction(script)({"vars": {"name": "Ada"}}) == "Hi Ada"


@requires_node
def test_node_named_export(tmp_path):
    script = tmp_path / "prompts.js"
    script.write_text("module.exports.greet = (context) => 'Hello ' + context.vars.name;\n")

    assert NodeScriptFunction(script, "greet")({"vars": {"name": "Ada"}}) == "Hello Ada"


@requires_node
def test_node_missing_export_raises(tmp_path):
    script = tmp_path / "prompts.js"
    script.write_text("module.exports.greet = () => 'x';\n")

    with pytest.raises(PromptFunctionError):
        NodeScriptFunction(script, "nope")({})


@requires_node
def test_node_check_accepts_existing_export(tmp_path):
    script = tmp_path / "prompts.js"
    script.write_text("module.exports.greet = () => 'x';\n")

    NodeScriptFunction(script, "greet").check()


@requires_node
def test_node_check_reports_missing_export(tmp_path):
    script = tmp_path / "prompts.js"
    script.write_text("module.exports.greet = () => 'x';\n")

    with pytest.raises(PromptFunctionError, match="No function nope"):
        NodeScriptFunction(script, "nope").check()


@requires_node
def test_broken_node_module_fails_at_load_time(tmp_path):
    (tmp_path / "broken.js").write_text("module.exports = (;\n")

    with pytest.raises(PromptFunctionError):
        read_prompts("broken.js", base_path=str(tmp_path))
