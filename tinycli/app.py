# tinycli CLI Scaffold — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main class for registering and dispatching tinycli commands.

`App` holds the registry of commands and application wide flags, plus the
optional `before` hook and `fallback` handler. `App.run()` takes a raw argument
list and:

- picks the command from the first argument (or the default command)
- extracts every global flag, then every flag of that command
- builds a `Cmd` from what is left
- lets the `before` hook redirect to another command
- calls the resolved handler, or the fallback when there is none

Registries keep insertion order, so flags are always extracted in the order
they were registered.

Example:
    app = App(program="deploy-tool", version="1.0.0")
    app.register_flag(Flag(long="verbose", short="v"))
    app.add_command("build", build, help="Build the project")
    sys.exit(app.run(sys.argv[1:]))
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tinycli.args import Args
from tinycli.cmd import BeforeHook, Cmd, ExitValue, FallbackHandler, Handler
from tinycli.command import Command
from tinycli.console import console as default_console
from tinycli.exceptions import InvalidHandlerError, NoHandlerError, TinyCliError
from tinycli.flag import Flag
from tinycli.logger import logger
from tinycli.mode import DefaultCommandMode
from tinycli.parameter import Parameters
from tinycli.utils import get_program_invocation
from tinycli.version import __version__


@dataclass(frozen=True)
class Dispatch:
    """
    Result of resolving a command name against the registry.

    Attributes:
        name (str): The command name that was looked up.
        command (Command | None): The registered command, if any.
    """

    name: str
    command: Command | None = None

    @property
    def handler(self) -> Handler | None:
        return self.command.function if self.command is not None else None

    @property
    def found(self) -> bool:
        """True when a handler can be invoked for this name."""
        return self.handler is not None


class App:
    """
    Registry of commands and global flags, and the dispatcher that runs them.

    Args:
        program (str | None): Program name used in help output.
        version (str): Version reported by `render_version`.
        default_command_name (str): Command used when no command is given.
        default_command_mode (DefaultCommandMode | str): When the default command
            applies, see `DefaultCommandMode`.
        before (BeforeHook | None): Called as `before(cmd, cmd_name)` ahead of
            dispatch. A non-empty return value names the command to run instead.
        fallback (FallbackHandler | None): Called as `fallback(cmd, cmd_name)`
            when no handler is registered for the resolved name.
        console (Console | None): Console used for help and version output.

    Methods:
        register_command(): Add or replace a command.
        add_command(): Build a command from a handler and register it.
        register_flag(): Add or replace an application wide flag.
        resolve(): Look up the handler for a command name.
        run(): Dispatch a raw argument list.
        render_help(): Print commands and global flags.
        render_version(): Print the program version.
    """

    def __init__(
        self,
        *,
        program: str | None = None,
        version: str = __version__,
        default_command_name: str = "",
        default_command_mode: DefaultCommandMode | str = DefaultCommandMode.EMPTY,
        before: BeforeHook | None = None,
        fallback: FallbackHandler | None = None,
        console: Console | None = None,
    ) -> None:
        self.program: str = program or get_program_invocation()
        self.version: str = version
        self.default_command_name: str = default_command_name
        self.default_command_mode: DefaultCommandMode = DefaultCommandMode(
            default_command_mode
        )
        self._commands: dict[str, Command] = {}
        self._flags: dict[str, Flag] = {}
        self._before: BeforeHook | None = None
        self._fallback: FallbackHandler | None = None
        self.before = before
        self.fallback = fallback
        self.console: Console = console or default_console

    @property
    def before(self) -> BeforeHook | None:
        return self._before

    @before.setter
    def before(self, before: BeforeHook | None) -> None:
        if before is not None and not callable(before):
            raise InvalidHandlerError("Before hook must be a callable.")
        self._before = before

    @property
    def fallback(self) -> FallbackHandler | None:
        return self._fallback

    @fallback.setter
    def fallback(self, fallback: FallbackHandler | None) -> None:
        if fallback is not None and not callable(fallback):
            raise InvalidHandlerError("Fallback must be a callable.")
        self._fallback = fallback

    def commands(self) -> Mapping[str, Command]:
        """Return all registered commands, in registration order."""
        return MappingProxyType(self._commands)

    def flags(self) -> Mapping[str, Flag]:
        """Return all application wide flags, in registration order."""
        return MappingProxyType(self._flags)

    def register_command(self, command: Command) -> Command:
        """Register a command. A command with the same name is replaced."""
        if not isinstance(command, Command):
            raise TinyCliError("command must be an instance of Command.")
        if command.name in self._commands:
            logger.warning(
                "[App] Command '%s' already registered, overwriting.", command.name
            )
        self._commands[command.name] = command
        return command

    def add_command(
        self,
        name: str,
        function: Callable[[Cmd], ExitValue] | None,
        *,
        help: str = "",
        flags: Iterable[Flag] | None = None,
    ) -> Command:
        """Build a `Command` from a handler and register it."""
        command = Command(name=name, function=function, help=help, flags=list(flags or []))
        return self.register_command(command)

    def add_commands(self, commands: Iterable[Command | dict[str, Any]]) -> None:
        """Register a list of Command instances or keyword dicts for `add_command`."""
        for command in commands:
            if isinstance(command, dict):
                self.add_command(**command)
            elif isinstance(command, Command):
                self.register_command(command)
            else:
                raise TinyCliError(
                    "Command must be a dictionary or an instance of Command."
                )

    def register_flag(self, flag: Flag) -> Flag:
        """Register an application wide flag. A flag with the same long name is replaced."""
        if not isinstance(flag, Flag):
            raise TinyCliError("flag must be an instance of Flag.")
        if flag.long in self._flags:
            logger.warning("[App] Flag '%s' already registered, overwriting.", flag.long)
        self._flags[flag.long] = flag
        return flag

    def resolve(self, name: str) -> Dispatch:
        """Look up `name` in the registry without invoking anything."""
        return Dispatch(name=name, command=self._commands.get(name))

    def _select_command(self, args: Args) -> tuple[str, Args]:
        """
        Pick the command name from the first argument.

        A first argument naming a registered command is consumed. Otherwise it stays
        in the positional arguments.
        """
        first = args.peek(0)
        if first and first in self._commands:
            return first, args.drop(0)
        if not first:
            return self.default_command_name, args
        if (
            self.default_command_mode is DefaultCommandMode.UNMATCHED
            and self.default_command_name
        ):
            logger.debug(
                "[App] '%s' is not a command, using default '%s'.",
                first,
                self.default_command_name,
            )
            return self.default_command_name, args
        return first, args

    def run(self, raw_args: Iterable[str] | None = None) -> ExitValue:
        """
        Dispatch `raw_args` to a command handler and return its exit value.

        Flags are extracted once, for the command picked from the arguments. When the
        `before` hook redirects to another command, that command's flags are not
        extracted.

        Raises:
            NoHandlerError: If no handler is registered for the final command name
                and no fallback is configured.
            TypeError: If `raw_args` is a single string instead of a list of tokens.
        """
        args = Args(raw_args)
        cmd_name, args = self._select_command(args)
        dispatch = self.resolve(cmd_name)

        parameters = Parameters()
        for flag in self._flags.values():
            parameter, args = args.extract(flag)
            parameters.add(parameter)
        if dispatch.command is not None:
            for flag in dispatch.command.flags.values():
                parameter, args = args.extract(flag)
                parameters.add(parameter)

        cmd = Cmd(args, parameters, name=cmd_name, app=self)

        if self.before:
            override = self.before(cmd, cmd_name)
            if override:
                logger.debug("[App] Before hook redirected '%s' to '%s'.", cmd_name, override)
                cmd_name = override
                dispatch = self.resolve(cmd_name)

        if dispatch.found:
            logger.debug("[App] Running command '%s'.", cmd_name)
            return dispatch.handler(cmd)

        if self.fallback:
            logger.debug("[App] No handler for '%s', running fallback.", cmd_name)
            return self.fallback(cmd, cmd_name)

        raise NoHandlerError(cmd_name)

    def render_version(self) -> None:
        self.console.print(f"[bold]{escape(self.program)}[/bold] v{self.version}")

    def render_help(self) -> None:
        """Print the program usage, the registered commands and the global flags."""
        self.console.print(
            f"[bold]usage:[/bold] {escape(self.program)} "
            + escape("[command] [flags] [args]")
        )
        if self._commands:
            table = Table(title="Commands", box=box.SIMPLE, title_justify="left")
            table.add_column("Command", style="cyan", no_wrap=True)
            table.add_column("Description")
            for command in self._commands.values():
                name = command.name
                if name == self.default_command_name:
                    name = f"{name} (default)"
                table.add_row(escape(name), escape(command.help))
                for flag in command.flags.values():
                    table.add_row(f"  {flag.signature}", f"[dim]{escape(flag.help)}[/dim]")
            self.console.print(table)
        if self._flags:
            table = Table(title="Global flags", box=box.SIMPLE, title_justify="left")
            table.add_column("Flag", style="cyan", no_wrap=True)
            table.add_column("Description")
            for flag in self._flags.values():
                table.add_row(flag.signature, escape(flag.help))
            self.console.print(table)

    def __str__(self) -> str:
        return (
            f"App(program='{self.program}', commands={list(self._commands)}, "
            f"flags={list(self._flags)})"
        )
