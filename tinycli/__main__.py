"""
tinycli CLI Scaffold

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import os
import sys
from pathlib import Path
from typing import Any

from rich.markup import escape

from tinycli.config import loader
from tinycli.console import console
from tinycli.exceptions import TinyCliError
from tinycli.logger import logger
from tinycli.utils import setup_logging


def find_tinycli_config() -> Path | None:
    candidates = [
        Path.cwd() / "tinycli.yaml",
        Path.cwd() / "tinycli.toml",
        Path.cwd() / ".tinycli.yaml",
        Path.cwd() / ".tinycli.toml",
        Path(os.environ.get("TINYCLI_CONFIG", "tinycli.yaml")),
        Path.home() / ".config" / "tinycli" / "tinycli.yaml",
        Path.home() / ".config" / "tinycli" / "tinycli.toml",
    ]
    return next((p for p in candidates if p.exists()), None)


def bootstrap() -> Path | None:
    config_path = find_tinycli_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def main(argv: list[str] | None = None) -> Any:
    setup_logging()
    config_path = bootstrap()
    if not config_path:
        console.print(
            "[red]No tinycli configuration found.[/] Create tinycli.yaml or set "
            "TINYCLI_CONFIG.",
            highlight=False,
        )
        sys.exit(1)

    try:
        app = loader(config_path)
        result = app.run(sys.argv[1:] if argv is None else argv)
    except TinyCliError as error:
        logger.debug("Dispatch failed: %s", error)
        console.print(f"[red]Error:[/] {escape(str(error))}", highlight=False)
        sys.exit(1)
    sys.exit(result)


if __name__ == "__main__":
    main()
