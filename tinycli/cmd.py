# tinycli CLI Scaffold — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Cmd`, the object handed to command handlers, and the callable types
used for dispatch.

A `Cmd` is created once per `App.run` call. It holds the positional arguments
left after flag extraction together with the extracted `Parameters`.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeAlias

from tinycli.args import Args
from tinycli.parameter import Parameters

if TYPE_CHECKING:
    from tinycli.app import App

ExitValue: TypeAlias = int | str | None

Handler: TypeAlias = Callable[["Cmd"], ExitValue]
BeforeHook: TypeAlias = Callable[["Cmd", str], "str | None"]
FallbackHandler: TypeAlias = Callable[["Cmd", str], ExitValue]


class Cmd:
    """
    Positional arguments and extracted flags for a single run.

    Attributes:
        args (Args): Remaining positional tokens.
        parameters (Parameters): One parameter per extracted flag.
        name (str): Command name resolved before the `before` hook ran.
        app (App | None): The application that dispatched this run.
    """

    def __init__(
        self,
        args: Args,
        parameters: Parameters,
        name: str = "",
        app: App | None = None,
    ) -> None:
        self.args: Args = args
        self.parameters: Parameters = parameters
        self.name: str = name
        self.app: App | None = app

    def arg(self, index: int) -> str:
        """Return the positional argument at `index`, or an empty string."""
        return self.args.peek(index)

    def flag(self, name: str, default: Any = None) -> Any:
        return self.parameters.value(name, default)

    def is_set(self, name: str) -> bool:
        return self.parameters.is_set(name)

    def __repr__(self) -> str:
        return f"Cmd(name={self.name!r}, args={self.args!r}, parameters={self.parameters!r})"
