# tinycli CLI Scaffold — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Parameter` and `Parameters`, the result of extracting flags from the
argument stream.

Every registered flag yields exactly one `Parameter` per run, whether or not it
appeared on the command line. `Parameters` keeps them in extraction order:
global flags first, then the flags of the resolved command.

Usage:
    if cmd.parameters.is_set("verbose"):
        ...
    output = cmd.parameters.value("output", "out.txt")
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from tinycli.flag import Flag


@dataclass(frozen=True)
class Parameter:
    """
    The extracted state of a single flag.

    Attributes:
        flag (Flag): The flag this parameter was extracted for.
        present (bool): Whether the flag appeared in the arguments.
        raw (str | None): The captured value token for a value-taking flag.
    """

    flag: Flag
    present: bool = False
    raw: str | None = None

    @classmethod
    def absent(cls, flag: Flag) -> Parameter:
        return cls(flag=flag)

    @property
    def name(self) -> str:
        return self.flag.long

    @property
    def value(self) -> Any:
        """
        Boolean flags report their presence. Value-taking flags report the captured
        value, or the flag default when absent. A value-taking flag given without a
        value reports None.
        """
        if not self.flag.takes_value:
            return self.present
        if not self.present:
            return self.flag.default
        return self.raw


class Parameters:
    """
    Ordered collection of `Parameter` objects keyed by flag long name.

    Global and command flags live in separate namespaces, so two parameters can
    share a name. Lookups return the first one that is present, or the first one
    extracted when none is.
    """

    def __init__(self, parameters: list[Parameter] | None = None) -> None:
        self._parameters: list[Parameter] = list(parameters or [])

    def add(self, parameter: Parameter) -> None:
        self._parameters.append(parameter)

    def get(self, name: str) -> Parameter | None:
        name = name.lstrip("-")
        matches = [parameter for parameter in self._parameters if parameter.name == name]
        for parameter in matches:
            if parameter.present:
                return parameter
        return matches[0] if matches else None

    def is_set(self, name: str) -> bool:
        """Return True if the named flag appeared in the arguments."""
        parameter = self.get(name)
        return parameter.present if parameter else False

    def value(self, name: str, default: Any = None) -> Any:
        """Return the value of the named flag, or `default` if it was never extracted."""
        parameter = self.get(name)
        if parameter is None:
            return default
        value = parameter.value
        return default if value is None else value

    def as_dict(self) -> dict[str, Any]:
        names = dict.fromkeys(parameter.name for parameter in self._parameters)
        return {name: self.value(name) for name in names}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def __repr__(self) -> str:
        return f"Parameters({self.as_dict()!r})"
