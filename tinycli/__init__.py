"""
tinycli CLI Scaffold

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .app import App, Dispatch
from .args import Args
from .cmd import Cmd, ExitValue
from .command import Command
from .flag import Flag
from .mode import DefaultCommandMode
from .parameter import Parameter, Parameters

logger = logging.getLogger("tinycli")


__all__ = [
    "App",
    "Args",
    "Cmd",
    "Command",
    "DefaultCommandMode",
    "Dispatch",
    "ExitValue",
    "Flag",
    "Parameter",
    "Parameters",
]
