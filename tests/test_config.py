import textwrap

import pytest

from tinycli.config import AppConfig, import_handler, load_raw_config, loader
from tinycli.exceptions import ConfigError
from tinycli.mode import DefaultCommandMode

HANDLERS = '''
def build(cmd):
    return "built:" + cmd.flag("output", "dist")


def before(cmd, name):
    return "build" if name == "stub" and cmd.is_set("verbose") else None


def fallback(cmd, name):
    return "fallback:" + name


not_callable = 42
'''


@pytest.fixture
def handlers_module(tmp_path, monkeypatch):
    """Write an importable handlers module and put it on sys.path."""
    (tmp_path / "cli_handlers.py").write_text(HANDLERS, encoding="UTF-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cli_handlers"


def test_load_yaml_config(tmp_path, handlers_module):
    config = tmp_path / "tinycli.yaml"
    config.write_text(
        textwrap.dedent(
            f"""
            program: tool
            version: 2.0.0
            default_command_name: build
            default_command_mode: unmatched
            before: {handlers_module}.before
            fallback: {handlers_module}.fallback
            flags:
              - long: verbose
                short: v
                help: Chatty output
            commands:
              - name: build
                help: Build the project
                function: {handlers_module}.build
                flags:
                  - long: output
                    short: o
                    takes_value: true
              - name: stub
            """
        ),
        encoding="UTF-8",
    )
    app = loader(config)

    assert app.program == "tool"
    assert app.version == "2.0.0"
    assert app.default_command_mode is DefaultCommandMode.UNMATCHED
    assert list(app.commands()) == ["build", "stub"]
    assert list(app.flags()) == ["verbose"]
    assert app.commands()["build"].flags["output"].takes_value is True
    assert app.run(["build", "-o", "out"]) == "built:out"
    assert app.run(["stub"]) == "fallback:stub"
    assert app.run(["stub", "--verbose"]) == "built:dist"
    assert app.run([]) == "built:dist"


def test_load_toml_config(tmp_path, handlers_module):
    config = tmp_path / "tinycli.toml"
    config.write_text(
        textwrap.dedent(
            f"""
            program = "tool"

            [[commands]]
            name = "build"
            function = "{handlers_module}.build"
            """
        ),
        encoding="UTF-8",
    )
    app = loader(config)
    assert app.run(["build"]) == "built:dist"


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_unsupported_config_format(tmp_path):
    config = tmp_path / "tinycli.json"
    config.write_text("{}", encoding="UTF-8")
    with pytest.raises(ValueError):
        loader(config)


def test_config_must_be_a_mapping(tmp_path):
    config = tmp_path / "tinycli.yaml"
    config.write_text("- just\n- a list\n", encoding="UTF-8")
    with pytest.raises(ValueError):
        load_raw_config(config)


def test_config_path_type():
    with pytest.raises(TypeError):
        load_raw_config(42)


def test_import_handler_errors(handlers_module):
    with pytest.raises(ConfigError):
        import_handler("nodots")
    with pytest.raises(ConfigError):
        import_handler("definitely_not_a_module_xyz.handler")
    with pytest.raises(ConfigError):
        import_handler(f"{handlers_module}.missing")
    with pytest.raises(ConfigError):
        import_handler(f"{handlers_module}.not_callable")


def test_app_config_defaults():
    config = AppConfig.model_validate({})
    assert config.commands == []
    assert config.default_command_mode is DefaultCommandMode.EMPTY
    app = config.to_app()
    assert dict(app.commands()) == {}
