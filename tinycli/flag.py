# tinycli CLI Scaffold — (c) 2025 rtj.dev LLC — MIT Licensed
"""flag.py

Defines the Flag model: a command-line switch recognized either application
wide or by a single command.

A flag is matched by its long form (`--name`) or its short alias (`-n`).
Boolean flags only record presence; value-taking flags consume the token that
follows them, or an inline value written as `--name=value`.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from tinycli.exceptions import InvalidFlagError
from tinycli.utils import strip_dashes


class Flag(BaseModel):
    """
    Describes one recognized flag.

    Attributes:
        long (str): Long name, used as the registry key. Leading dashes are removed.
        short (str): Optional short alias. Leading dashes are removed.
        takes_value (bool): Whether the flag consumes a value token.
        help (str): Help text shown by `App.render_help`.
        default (Any): Value reported for a value-taking flag that is absent.
    """

    long: str
    short: str = ""
    takes_value: bool = False
    help: str = ""
    default: Any = None

    model_config = ConfigDict(frozen=True)

    @field_validator("long", mode="before")
    @classmethod
    def normalize_long(cls, long: Any) -> str:
        if not isinstance(long, str):
            raise InvalidFlagError(f"Flag name must be a string, got {long!r}.")
        name = strip_dashes(long)
        if not name or any(char.isspace() or char == "=" for char in name):
            raise InvalidFlagError(f"Invalid flag name: '{long}'.")
        return name

    @field_validator("short", mode="before")
    @classmethod
    def normalize_short(cls, short: Any) -> str:
        if short is None:
            return ""
        if not isinstance(short, str):
            raise InvalidFlagError(f"Flag alias must be a string, got {short!r}.")
        if short and not short.lstrip("-"):
            raise InvalidFlagError(f"Invalid flag alias: '{short}'.")
        alias = strip_dashes(short)
        if any(char.isspace() or char == "=" for char in alias):
            raise InvalidFlagError(f"Invalid flag alias: '{short}'.")
        return alias

    @property
    def long_token(self) -> str:
        return f"--{self.long}"

    @property
    def short_token(self) -> str | None:
        return f"-{self.short}" if self.short else None

    def matches(self, token: str) -> bool:
        """Return True if `token` is this flag written in long or short form."""
        return token == self.long_token or (
            self.short_token is not None and token == self.short_token
        )

    def inline_value(self, token: str) -> str | None:
        """Return the value of a `--name=value` token, or None if it is not one."""
        if not self.takes_value:
            return None
        prefix = f"{self.long_token}="
        if token.startswith(prefix):
            return token[len(prefix) :]
        return None

    @property
    def signature(self) -> str:
        """Usage string such as `--output, -o VALUE`."""
        names = ", ".join(filter(None, [self.long_token, self.short_token]))
        if self.takes_value:
            return f"{names} {self.long.upper().replace('-', '_')}"
        return names

    def __str__(self) -> str:
        return (
            f"Flag(long='{self.long}', short='{self.short}', "
            f"takes_value={self.takes_value})"
        )
