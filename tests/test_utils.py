import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from tinycli.utils import get_program_invocation, setup_logging, strip_dashes


@pytest.fixture(autouse=True)
def restore_root_logger(monkeypatch):
    """Give each test its own root handler list and restore the level afterwards."""
    root = logging.getLogger()
    level = root.level
    monkeypatch.setattr(root, "handlers", [])
    yield
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()
    root.setLevel(level)


def test_setup_logging_cli_mode():
    setup_logging(mode="cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_setup_logging_json_mode_from_env(monkeypatch):
    monkeypatch.setenv("TINYCLI_LOG_MODE", "json")
    setup_logging()
    handler = logging.getLogger().handlers[0]
    assert isinstance(handler.formatter, JsonFormatter)


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "tinycli.log"
    setup_logging(mode="cli", log_filename=str(log_file), json_log_to_file=True)
    handlers = logging.getLogger().handlers
    assert len(handlers) == 2
    assert isinstance(handlers[1], logging.FileHandler)
    assert isinstance(handlers[1].formatter, JsonFormatter)
    logging.getLogger("tinycli").debug("written to file")
    handlers[1].flush()
    assert "written to file" in log_file.read_text(encoding="UTF-8")


def test_setup_logging_invalid_mode():
    with pytest.raises(ValueError):
        setup_logging(mode="xml")


def test_strip_dashes():
    assert strip_dashes("--verbose") == "verbose"
    assert strip_dashes("-v") == "v"
    assert strip_dashes("plain") == "plain"


def test_get_program_invocation(monkeypatch):
    monkeypatch.setattr("sys.argv", ["/nonexistent/dir/tool.py"])
    monkeypatch.setattr("sys.executable", "/usr/bin/python3")
    assert get_program_invocation() == "python /nonexistent/dir/tool.py"
