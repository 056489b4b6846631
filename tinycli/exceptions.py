# tinycli CLI Scaffold — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by tinycli.

Exception Hierarchy:
- TinyCliError
    ├── NoHandlerError
    ├── InvalidHandlerError
    ├── InvalidFlagError
    └── ConfigError

Registering a command or flag twice is not an error: the later registration
wins and a warning is logged. A value-taking flag with nothing after it is
not an error either; it is reported as present without a value.
"""


class TinyCliError(Exception):
    """Base exception for tinycli."""


class NoHandlerError(TinyCliError):
    """Raised when dispatch finds no handler and no fallback is configured."""

    def __init__(self, command_name: str):
        self.command_name = command_name
        super().__init__(
            f"No handler registered for command '{command_name}' "
            "and no fallback configured."
        )


class InvalidHandlerError(TinyCliError):
    """Raised when a handler, before hook or fallback is not callable."""


class InvalidFlagError(TinyCliError):
    """Raised when a flag definition has an unusable long or short name."""


class ConfigError(TinyCliError):
    """Raised when a configuration file references an unimportable handler."""
