# tinycli CLI Scaffold — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the Command class for tinycli.

A Command is a named, dispatchable unit: the name is the token that selects it
on the command line, the function is the handler that receives a `Cmd`, and the
command keeps its own flag registry, separate from the application wide flags.
"""
from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tinycli.cmd import Cmd, ExitValue
from tinycli.exceptions import InvalidHandlerError
from tinycli.flag import Flag
from tinycli.logger import logger


class Command(BaseModel):
    """
    Represents one subcommand of an application.

    Attributes:
        name (str): Dispatch key, matched against the first argument.
        function (Callable | None): Handler invoked with the `Cmd` for the run.
        help (str): Help text shown by `App.render_help`.
        flags (dict[str, Flag]): Command scoped flags keyed by long name, in
            registration order. A list of flags is accepted at construction.

    Methods:
        register_flag(): Add a flag scoped to this command.
        __call__(): Invoke the handler.
    """

    name: str
    function: Callable[[Cmd], ExitValue] | None = None
    help: str = ""
    flags: dict[str, Flag] = Field(default_factory=dict)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("function", mode="before")
    @classmethod
    def validate_function(cls, function: Any) -> Any:
        if function is None or callable(function):
            return function
        raise InvalidHandlerError(
            f"Command handler must be callable, got {type(function).__name__}."
        )

    @field_validator("flags", mode="before")
    @classmethod
    def index_flags(cls, flags: Any) -> Any:
        if isinstance(flags, (list, tuple)):
            indexed: dict[str, Flag] = {}
            for flag in flags:
                flag = flag if isinstance(flag, Flag) else Flag.model_validate(flag)
                indexed[flag.long] = flag
            return indexed
        return flags

    def register_flag(self, flag: Flag) -> Flag:
        """Register a flag for this command. A flag with the same long name is replaced."""
        if flag.long in self.flags:
            logger.warning(
                "[Command:%s] Flag '%s' already registered, overwriting.",
                self.name,
                flag.long,
            )
        self.flags[flag.long] = flag
        return flag

    def __call__(self, cmd: Cmd) -> ExitValue:
        if self.function is None:
            raise InvalidHandlerError(f"Command '{self.name}' has no handler.")
        return self.function(cmd)

    @property
    def help_signature(self) -> str:
        """Usage line for the command, including its flags."""
        options = " ".join(f"[{flag.signature}]" for flag in self.flags.values())
        return f"{self.name} {options}".strip()

    def __str__(self) -> str:
        return f"Command(name='{self.name}', help='{self.help}', flags={list(self.flags)})"
