# Shared library constants

import logging
import os

# --- Digest Configuration ---
# SHA-512 produces 64 bytes; folding can never ask for more than that.
DIGEST_SIZE = 64
SEED_SEARCH_SPACE = 256

# Two RGB triples are taken from the front of the folded hash when a
# palette is requested.
COLOR_BYTES = 6

# --- Fill Configuration ---
DEFAULT_MIN_FILL = 0.3
DEFAULT_MAX_FILL = 0.9

# --- Logging Configuration ---
LOG_LEVEL_ENV = "RETRICON_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_logger(name: str) -> logging.Logger:
    """Return a ``retricon`` logger with a stream handler attached once."""
    logger = logging.getLogger(f"retricon.{name}")
    if not logger.handlers:
        handler = logging.StreamHandler()

        level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
        logger.setLevel(getattr(logging, level_name, logging.WARNING))

        # Structured formatting
        formatter = logging.Formatter(
            "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def log(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional context."""
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        # Add context to message
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
