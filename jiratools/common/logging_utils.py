"""Logging utilities for consistent logging across modules."""

import logging
import os
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_dir: Optional[str] = None, verbose: bool = False) -> None:
    """Setup logging configuration.

    Warnings always go to stderr (debug output with ``verbose``). A log file
    ``jiratools.log`` is written only when a log directory is configured.
    """
    log_dir = log_dir or os.getenv("JIRATOOLS_LOG_DIR")

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handlers = [stream_handler]

    if log_dir:
        log_path = Path(log_dir).expanduser()
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path / "jiratools.log")
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
    )
