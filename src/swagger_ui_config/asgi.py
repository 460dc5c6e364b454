#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#
"""
ASGI server implementation

Typical launch command:

>>> uvicorn swagger_ui_config.asgi:litestar_swagger_ui_app_factory --factory

"""

import logging

import litestar
from litestar.logging import LoggingConfig

from . import LOGGER, log
from .config import MasterConfig, get_config
from .server.controllers import SwaggerUIController


def litestar_swagger_ui_app_factory(cfg: MasterConfig | None = None) -> litestar.Litestar:
    """
    Creates a Litestar ASGI app.

    :param cfg: configuration; read with ``get_config()`` if not given
    :return: A Litestar app, suited for use in ASGI server (uvicorn, gunicorn, etc.)
    :rtype: litestar.Litestar
    """
    _cfg = cfg or get_config()
    level = log.resolve_level(_cfg.logging.get("level", "WARNING"))
    logging_config = LoggingConfig(
        root={"level": logging.getLevelName(level), "handlers": ["queue_listener"]},
        formatters={"standard": {"format": log.LOG_FORMAT}},
        log_exceptions="always",
    )
    router = litestar.Router(path=_cfg.ui.base_path or "/", route_handlers=[SwaggerUIController])
    LOGGER.info(f"Serving Swagger UI at {_cfg.ui.base_path or '/'} with {len(_cfg.ui.urls)} definition(s)")

    return litestar.Litestar(
        route_handlers=[router],
        state=litestar.datastructures.State(state={"cfg": _cfg}),
        logging_config=logging_config,
        openapi_config=None,
    )
