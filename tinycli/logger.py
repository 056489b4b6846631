# tinycli CLI Scaffold — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for tinycli."""
import logging

logger: logging.Logger = logging.getLogger("tinycli")
