from __future__ import annotations
import logging
from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "diceroll"

def setup_logging(level: str = "WARNING") -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        # stderr keeps log records out of the roll output on stdout
        handler = RichHandler(console=Console(stderr=True), show_time=False,
                              show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(level.upper())
    return logger

def get_logger(name: str) -> logging.Logger:
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
