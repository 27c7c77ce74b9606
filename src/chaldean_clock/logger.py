"""Logging setup for the clock.

Debug mode shows every hour and dispatch; otherwise only day changes,
commands and warnings. An optional log file receives the same records.
"""
from pathlib import Path
from typing import Optional
import logging

LOG_FORMAT = "%(asctime)s [%(levelname)5s] %(name)s: %(message)s"


def configure_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    level = logging.DEBUG if debug else logging.INFO
    handlers = [logging.StreamHandler()]
    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
