# tinycli CLI Scaffold — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Args`, a view over the remaining unparsed argument tokens.

`Args` never changes in place. `extract()` hands back a new, reduced view and
the caller drops the old one:

    parameter, args = args.extract(flag)
"""
from __future__ import annotations

from typing import Iterable, Iterator

from tinycli.flag import Flag
from tinycli.logger import logger
from tinycli.parameter import Parameter


class Args:
    """Remaining argument tokens, supporting peek-by-index and flag extraction."""

    def __init__(self, tokens: Iterable[str] | None = None) -> None:
        if isinstance(tokens, str):
            raise TypeError("Args expects a list of tokens, not a single string.")
        self._tokens: tuple[str, ...] = tuple(tokens or ())

    @property
    def tokens(self) -> list[str]:
        return list(self._tokens)

    def peek(self, index: int) -> str:
        """Return the token at `index`, or an empty string if out of range."""
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return ""

    def drop(self, index: int) -> Args:
        """Return a view without the token at `index`."""
        if not 0 <= index < len(self._tokens):
            return self
        return Args(self._tokens[:index] + self._tokens[index + 1 :])

    def extract(self, flag: Flag) -> tuple[Parameter, Args]:
        """
        Remove the first occurrence of `flag` from the tokens.

        A value-taking flag also removes the token that follows it, unless the value
        was given inline as `--name=value`. A value-taking flag in last position is
        reported as present without a value.

        Returns:
            tuple[Parameter, Args]: The extracted parameter and the reduced view. When
            the flag is absent the parameter says so and the view is unchanged.
        """
        for index, token in enumerate(self._tokens):
            inline = flag.inline_value(token)
            if inline is not None:
                remaining = self._tokens[:index] + self._tokens[index + 1 :]
                return Parameter(flag, present=True, raw=inline), Args(remaining)

            if not flag.matches(token):
                continue

            if not flag.takes_value:
                remaining = self._tokens[:index] + self._tokens[index + 1 :]
                return Parameter(flag, present=True), Args(remaining)

            if index + 1 >= len(self._tokens):
                logger.warning("[Args] Flag '%s' expects a value but got none.", token)
                return Parameter(flag, present=True), Args(self._tokens[:index])

            value = self._tokens[index + 1]
            remaining = self._tokens[:index] + self._tokens[index + 2 :]
            return Parameter(flag, present=True, raw=value), Args(remaining)

        return Parameter.absent(flag), self

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __getitem__(self, index: int) -> str:
        return self._tokens[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Args):
            return self._tokens == other._tokens
        if isinstance(other, (list, tuple)):
            return list(self._tokens) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Args({list(self._tokens)!r})"
