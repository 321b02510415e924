"""Logging configuration for the application."""

import logging


def setup_logging(level: int | str = logging.INFO) -> None:
    """Setup basic logging for the CLI."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
