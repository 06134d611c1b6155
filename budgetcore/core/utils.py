"""Shared utility functions for the budgetcore project."""

import logging
import uuid
from datetime import UTC, date, datetime, timedelta

import colorlog


def get_logger(name: str) -> logging.Logger:
    """Get a logger with a colorized format for the project.

    Only the top-level project logger carries handlers; dotted child loggers propagate to it.
    """
    logger = logging.getLogger(name)
    if "." in name:
        get_logger(name.split(".", 1)[0])
        return logger
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger


def new_id() -> str:
    """Generate a new opaque entity identifier."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Get the current UTC time as an aware datetime."""
    return datetime.now(UTC)


def calendar_day(value: date | datetime) -> date:
    """Reduce a date or datetime to its calendar day, dropping any time-of-day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def shift_days(anchor: date | datetime, days: int) -> date:
    """Move a calendar day by a signed number of whole days."""
    return calendar_day(anchor) + timedelta(days=days)
