# Copyright (c) 2024-2025 The gpst developers
#
# This file is part of gpst.
#
# gpst is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# gpst is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with gpst.  If not, see <http://www.gnu.org/licenses/>.

"""Logging configuration for gpst.

gpst only emits `logging.DEBUG` records (from :mod:`gpst.convert`), through
the ``gpst`` logger hierarchy.
The following environment variables configure that logger:

``GPST_LOG_LEVEL``
    The default level, as a name (``DEBUG``) or a number (``10``).
``GPST_LOG_FORMAT``
    The message format of the handler attached by `init_logger`.
``GPST_INIT_LOGGING``
    If ``1``, ``y``, ``yes``, or ``true``, configure the ``gpst`` logger
    when the package is imported.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

from coloredlogs import (
    ColoredFormatter,
    terminal_supports_colors,
)

if TYPE_CHECKING:
    from typing import IO

__all__ = [
    "LOG_FORMAT",
    "get_default_level",
    "init_logger",
    "init_logging_requested",
]

#: The message format for handlers attached by `init_logger`
LOG_FORMAT = os.getenv(
    "GPST_LOG_FORMAT",
    "%(asctime)s:%(name)s:%(levelname)s:%(message)s",
)

_TRUE = ("1", "y", "yes", "true")


def init_logging_requested() -> bool:
    """Return `True` if ``GPST_INIT_LOGGING`` asks for logging at import."""
    return os.getenv("GPST_INIT_LOGGING", "").strip().lower() in _TRUE


def get_default_level() -> int:
    """Return the log level named by ``GPST_LOG_LEVEL``.

    If the variable is not set, `logging.NOTSET` is returned.

    Raises
    ------
    ValueError
        If ``GPST_LOG_LEVEL`` is not a number or a known level name.
    """
    level = os.getenv("GPST_LOG_LEVEL", "").strip().upper()
    if not level:
        return logging.NOTSET
    if level.isdigit():
        return int(level)
    try:
        return logging.getLevelNamesMapping()[level]
    except KeyError as exc:
        msg = f"Unknown GPST_LOG_LEVEL {level!r}"
        raise ValueError(msg) from exc


def init_logger(
    name: str = "gpst",
    level: int | str | None = None,
    *,
    stream: IO = sys.stderr,
    color: bool = True,
) -> logging.Logger:
    """Return the named logger, attaching a `logging.StreamHandler` if needed.

    Parameters
    ----------
    name : `str`, optional
        The name of the logger, defaults to the package logger.

    level : `int`, `str`, optional
        The level to set, defaults to `get_default_level`.

    stream : `io.IOBase`, optional
        The stream to write log messages to.

    color : `bool`, optional
        If `True` (default), use `coloredlogs.ColoredFormatter` when
        ``stream`` is a terminal that supports colours.

    Returns
    -------
    logger : `logging.Logger`
        The logger, with at least one handler attached.
    """
    if level is None:
        level = get_default_level()
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.hasHandlers():
        handler = logging.StreamHandler(stream)
        if color and terminal_supports_colors(stream):
            handler.setFormatter(ColoredFormatter(fmt=LOG_FORMAT))
        else:
            handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
        logger.addHandler(handler)
    return logger
