#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#
"""Flask blueprint serving the Swagger UI page."""

import dataclasses
import http
import logging
import pathlib

import flask
from werkzeug.exceptions import NotFound

from .. import __version__, render
from ..config import SwaggerUIConfig
from ..config.discover import is_definition

JS_MIMETYPE = "application/javascript"


def swagger_ui_blueprint(cfg: SwaggerUIConfig, name: str = "swagger_ui") -> flask.Blueprint:
    """
    Create a blueprint for the UI described by ``cfg``.

    Register it with ``url_prefix=cfg.base_path``.  Only GET is routed; Flask
    answers other methods with 405.
    """
    bp = flask.Blueprint(name, __name__)

    @bp.before_request
    def incoming_request() -> None:
        logging.debug(f"{flask.request.method} {flask.request.url}")

    @bp.after_request
    def update_headers(r: flask.Response) -> flask.Response:
        """Implement simple middlware function to update response headers."""
        r.headers.update({"X-Powered-By": f"swagger-ui-config {__version__} and FLASK"})
        return r

    @bp.route("/", methods=["GET"])
    @bp.route("/index", methods=["GET"])
    @bp.route("/index.html", methods=["GET"])
    def index():
        if cfg.disable_index_template:
            doc_dir = pathlib.Path(cfg.doc_dir).resolve()
            if not (doc_dir / "index.html").is_file():
                raise NotFound(f"No index.html in {cfg.doc_dir}")
            return flask.send_from_directory(doc_dir, "index.html")
        return flask.Response(
            headers={"Content-Type": "text/html; charset=utf-8"},
            status=http.HTTPStatus.OK,
            response=render.render_index(cfg),
        )

    @bp.route("/swagger-initializer.js", methods=["GET"])
    def initializer():
        return flask.Response(
            headers={"Content-Type": JS_MIMETYPE},
            status=http.HTTPStatus.OK,
            response=render.render_initializer(cfg),
        )

    @bp.route("/index.css", methods=["GET"])
    def stylesheet():
        return flask.Response(
            headers={"Content-Type": "text/css"},
            status=http.HTTPStatus.OK,
            response=render.render_css(cfg),
        )

    @bp.route("/about", methods=["GET"])
    def app_info():
        return {
            "name": "swagger-ui-config",
            "version": __version__,
        }

    @bp.route("/about/config", methods=["GET"])
    def app_configuration():
        return dataclasses.asdict(cfg)

    @bp.route("/<path:asset>", methods=["GET"])
    def widget_asset(asset: str):
        """
        Definition files are read from ``doc_dir``.

        Everything else is part of the swagger-ui-dist bundle; send the browser to the CDN copy.
        """
        if is_definition(asset):
            # send_from_directory refuses paths escaping doc_dir and 404s on missing files
            return flask.send_from_directory(pathlib.Path(cfg.doc_dir).resolve(), asset)
        return flask.redirect(cfg.asset_url(asset))

    return bp
