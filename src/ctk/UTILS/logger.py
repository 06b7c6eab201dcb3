"""Diagnostic logging for CTK, rendered through the shared rich console."""
import logging

from rich.logging import RichHandler

from .console import console


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Set up the ``ctk`` logger.

    Args:
        verbose: Enable debug-level logging

    Returns:
        The package root logger.
    """
    logger = logging.getLogger("ctk")

    # Only add console handler if not already present
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
