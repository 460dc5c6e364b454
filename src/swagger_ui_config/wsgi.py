#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#
"""
Flask app serving the Swagger UI page.

Typical launch command:

>>> gunicorn 'swagger_ui_config.wsgi:flask_swagger_ui_app_factory()' --bind hostname:port

"""

import flask
from flask_cors import CORS

from . import LOGGER, log
from .config import MasterConfig, get_config
from .server.flask_routers import swagger_ui_blueprint


def flask_swagger_ui_app_factory(cfg: MasterConfig | None = None) -> flask.Flask:
    """
    Creates a Flask WSGI app.

    :param cfg: configuration; read with ``get_config()`` if not given
    :return: A Flask app, suited for use in a WSGI server (gunicorn, etc.)
    """
    _cfg = cfg or get_config()
    if _cfg.logging:
        log.setup_logger(_cfg.logging)

    app = flask.Flask(__name__)
    if not app:
        raise RuntimeError("SWAGGER UI SERVER >> Failed to initialize Flask app")
    app.url_map.strict_slashes = False
    CORS(app)
    app.register_blueprint(swagger_ui_blueprint(_cfg.ui), url_prefix=_cfg.ui.base_path or None)
    app.SWAGGER_UI_CONFIG = _cfg
    LOGGER.info(f"Serving Swagger UI at {_cfg.ui.base_path or '/'} with {len(_cfg.ui.urls)} definition(s)")
    return app
