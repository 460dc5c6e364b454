#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#

"""Logging system configuration."""

import logging
import logging.handlers
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as lib_ver
from json import dumps
from typing import Any, Dict, List

from . import LOGGER

LOG_FORMAT = "[%(levelname)s] [%(asctime)s] %(name)s - %(module)s.%(funcName)s#L%(lineno)d: %(message)s"


def setup_logger(logging_config: Dict[str, Any] | None) -> logging.Logger:
    """
    Set up the package logger from the ``logging`` section of a config file.

    :param logging_config: dict with optional ``level`` and ``logfile`` keys
    :type logging_config: Dict[str, Any]
    """
    logging_config = logging_config or {}
    loglevel = logging_config.get("level", logging.WARNING)
    return initialize(LOGGER, level=loglevel, logfile=logging_config.get("logfile"))


def resolve_level(level: str | int) -> int:
    """Translate a level name ("debug", "INFO", ...) to its numeric value."""
    if isinstance(level, int):
        return level
    mapping = logging.getLevelNamesMapping()
    return mapping.get(str(level).upper(), logging.WARNING)  # unknown level name; default to WARNING


def initialize(logger: logging.Logger = None, level: str | int = logging.WARNING, logfile=None) -> logging.Logger:
    """
    Initialize the logging system.

    :param logger: logger instance; the root logger if not given
    :param level: level name or number
    :param logfile: if given, log to a file rotated at midnight instead of stdout

    :returns: the configured logger
    """
    if not logger:
        logger = logging.getLogger()

    level = resolve_level(level)
    if logfile:
        h = logging.handlers.TimedRotatingFileHandler(logfile, when="midnight", interval=1, backupCount=7)
        _fmt = dict(
            logger="%(name)s",
            level="%(levelname)s",
            asctime="%(asctime)s",
            location="%(module)s.%(funcName)s#L%(lineno)d",
            message="%(message)s",
        )
        f = logging.Formatter(dumps(_fmt), datefmt="%Y-%m-%dT%H:%M:%S")
    else:
        h = logging.StreamHandler(sys.stdout)
        f = logging.Formatter(LOG_FORMAT)
    h.setLevel(logging.DEBUG)  # << This is the level of the handler, not the logger overall
    h.setFormatter(f)
    logger.addHandler(h)
    logger.setLevel(level)  # << This is the level of the logger, not the handler
    if level == logging.DEBUG:
        # werkzeug logs every request at INFO; keep it out of debug sessions
        logging.getLogger("werkzeug").setLevel(logging.WARNING)
    return logger


def versions(mlist: List[str] | None = None, logger=None, level=logging.INFO) -> None:
    """
    Log the versions of the modules in the list mlist.

    :param mlist: list of distribution names

    :returns: None
    """
    if not logger:
        logger = logging.getLogger()
    _v = sys.version.replace("\n", "")
    logger.log(level, f"Python: {_v}")
    if not mlist:
        mlist = ["flask", "litestar", "jinja2"]
    vlist = []
    for m in mlist:
        try:
            vlist.append(f"{m}:{lib_ver(m)}")
        except PackageNotFoundError:
            vlist.append(f"{m}:not installed")
    logger.log(level, " // ".join(vlist))
