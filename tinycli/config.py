# tinycli CLI Scaffold — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for tinycli applications.

A configuration file describes an `App`: its program name, version, default
command, global flags and commands. Handlers are given as dotted import paths.

Example (YAML):
    program: deploy-tool
    version: 1.2.0
    default_command_name: help
    flags:
      - long: verbose
        short: v
    commands:
      - name: build
        help: Build the project
        function: my_project.cli.build
        flags:
          - long: output
            short: o
            takes_value: true
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field

from tinycli.app import App
from tinycli.command import Command
from tinycli.exceptions import ConfigError
from tinycli.flag import Flag
from tinycli.logger import logger
from tinycli.mode import DefaultCommandMode


def import_handler(dotted_path: str) -> Any:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid handler path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        handler = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(f"Module '{module_path}' has no attribute '{attr}'") from error
    if not callable(handler):
        raise ConfigError(f"'{dotted_path}' is not callable.")
    return handler


class RawFlag(BaseModel):
    """Raw flag model for tinycli configuration."""

    long: str
    short: str = ""
    takes_value: bool = False
    help: str = ""
    default: Any = None

    def to_flag(self) -> Flag:
        return Flag(**self.model_dump())


class RawCommand(BaseModel):
    """Raw command model for tinycli configuration."""

    name: str
    function: str | None = None
    help: str = ""
    flags: list[RawFlag] = Field(default_factory=list)

    def to_command(self) -> Command:
        return Command(
            name=self.name,
            function=import_handler(self.function) if self.function else None,
            help=self.help,
            flags=[raw_flag.to_flag() for raw_flag in self.flags],
        )


class AppConfig(BaseModel):
    """tinycli application configuration model."""

    program: str | None = None
    version: str = "0.0.0"
    default_command_name: str = ""
    default_command_mode: DefaultCommandMode = DefaultCommandMode.EMPTY
    before: str | None = None
    fallback: str | None = None
    flags: list[RawFlag] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    def to_app(self) -> App:
        app = App(
            program=self.program,
            version=self.version,
            default_command_name=self.default_command_name,
            default_command_mode=self.default_command_mode,
            before=import_handler(self.before) if self.before else None,
            fallback=import_handler(self.fallback) if self.fallback else None,
        )
        for raw_flag in self.flags:
            app.register_flag(raw_flag.to_flag())
        app.add_commands(raw_command.to_command() for raw_command in self.commands)
        return app


def load_raw_config(file_path: Path | str) -> dict[str, Any]:
    """Read a YAML or TOML configuration file into a dictionary."""
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of commands.\n"
            "Example:\n"
            "program: 'my-cli'\n"
            "commands:\n"
            "  - name: 'build'\n"
            "    help: 'Example command'\n"
            "    function: 'my_module.my_function'"
        )
    return raw_config


def loader(file_path: Path | str) -> App:
    """
    Load a tinycli application from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        App: An application with the configured flags and commands registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or its content is not a mapping.
        ConfigError: If a handler path cannot be imported.
    """
    raw_config = load_raw_config(file_path)
    app = AppConfig.model_validate(raw_config).to_app()
    logger.debug(
        "Loaded %d command(s) and %d flag(s) from '%s'.",
        len(app.commands()),
        len(app.flags()),
        file_path,
    )
    return app
