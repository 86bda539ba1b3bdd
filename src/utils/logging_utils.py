"""Logging setup shared by the solver, the loader and the command line runner."""

from __future__ import annotations

import logging

LOGGER_NAME = "nonogram"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return the package logger, or one of its children when `name` is given.

    A console handler at INFO level is installed on the package logger the first
    time it is requested and no handler is configured yet.
    """
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        ))
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    if name:
        return root.getChild(name)
    return root


def set_level(level: int | str) -> None:
    get_logger().setLevel(level)
