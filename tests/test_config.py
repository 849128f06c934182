import logging
import sys

import pytest

from evalprompts import logging as ep_logging
from evalprompts.config import Config, LoaderOptions


def test_config_get_dotted_paths():
    cfg = Config.from_dict({"general": {"log_level": "DEBUG"}, "prompts": {"strict_files": True}})
    assert cfg.get("general.log_level") == "DEBUG"
    assert cfg.get("general.missing", "fallback") == "fallback"
    assert cfg.prompts == {"strict_files": True}


def test_config_load_from_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("prompts:\n  delimiter: '###'\n")
    cfg = Config.load(path)
    assert cfg.get("prompts.delimiter") == "###"


def test_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load(tmp_path / "nope.yaml")


def test_loader_options_from_config():
    cfg = Config.from_dict({"prompts": {"strict_files": "yes", "delimiter": "===", "node_executable": "nodejs"}})
    options = LoaderOptions.from_config(cfg)
    assert options.strict_files is True
    assert options.delimiter == "==="
    assert options.node_executable == "nodejs"
    assert options.python_executable == sys.executable


def test_loader_options_defaults_from_empty_config():
    assert LoaderOptions.from_config(Config.from_dict({})) == LoaderOptions()


def test_loader_options_from_env():
    options = LoaderOptions.from_env({"EVALPROMPTS_STRICT_FILES": "true", "EVALPROMPTS_PROMPT_DELIMITER": "%%%"})
    assert options.strict_files is True
    assert options.delimiter == "%%%"
    assert LoaderOptions.from_env({}).strict_files is False
    assert LoaderOptions.from_env({"EVALPROMPTS_STRICT_FILES": "0"}).strict_files is False


def test_logging_setup_to_directory(tmp_path):
    root = logging.getLogger()
    saved = root.handlers[:]
    saved_level = root.level
    try:
        ep_logging.setup("debug", destination=str(tmp_path / "logs"))
        logging.getLogger("evalprompts.test").debug("hello log")
        for handler in root.handlers:
            handler.flush()
        assert "hello log" in (tmp_path / "logs" / "evalprompts.log").read_text()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved
        root.setLevel(saved_level)


def test_get_logger_survives_malformed_config(tmp_path, monkeypatch):
    (tmp_path / "config.yaml").write_text("general: [unclosed\n")
    root = logging.getLogger()
    monkeypatch.setattr("evalprompts.config.project_root", lambda: tmp_path)
    monkeypatch.setattr(ep_logging, "_CONFIGURED", False)
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    logger = ep_logging.get_logger("evalprompts.test")

    assert logger.name == "evalprompts.test"
    assert ep_logging._CONFIGURED is True
    assert root.level == logging.INFO


def test_get_logger_reads_general_section(tmp_path, monkeypatch):
    (tmp_path / "config.yaml").write_text("general:\n  log_level: DEBUG\n  logs: none\n")
    root = logging.getLogger()
    monkeypatch.setattr("evalprompts.config.project_root", lambda: tmp_path)
    monkeypatch.setattr(ep_logging, "_CONFIGURED", False)
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    ep_logging.get_logger()

    assert root.level == logging.DEBUG
