# tinycli CLI Scaffold — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `DefaultCommandMode`, which decides when `App.default_command_name`
takes over from the first argument.
"""
from enum import Enum


class DefaultCommandMode(Enum):
    """
    Members:
        EMPTY: Use the default command only when the first argument is empty.
        UNMATCHED: Also use it when the first argument is not a registered command.
            That argument is then kept as a positional.
    """

    EMPTY = "empty"
    UNMATCHED = "unmatched"

    @classmethod
    def _missing_(cls, value: object) -> "DefaultCommandMode":
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value
