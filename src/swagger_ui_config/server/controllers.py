#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#
"""
Litestar controller serving the Swagger UI page.

Handlers read the configuration from ``state.cfg``, a ``MasterConfig``.
"""

import pathlib

import litestar
import msgspec
from litestar.datastructures import ResponseHeader
from litestar.exceptions import NotFoundException
from litestar.response import File, Redirect, Response

from .. import __version__, render
from ..config import SwaggerUIConfig
from ..config.discover import is_definition

JS_MEDIA_TYPE = "application/javascript"


class AppInfo(msgspec.Struct):
    name: str
    version: str


class SwaggerUIController(litestar.Controller):
    """Controller/route-handler for the UI page, its templated assets and the "about" endpoints."""

    path = "/"
    tags = ["docs"]
    response_headers = [ResponseHeader(name="X-Powered-By", value=f"swagger-ui-config {__version__} and LITESTAR")]

    @litestar.get(["/", "/index", "/index.html"], include_in_schema=False, media_type=litestar.MediaType.HTML)
    async def index(self, state: litestar.datastructures.State) -> Response:
        cfg: SwaggerUIConfig = state.cfg.ui
        if cfg.disable_index_template:
            index_file = pathlib.Path(cfg.doc_dir).resolve() / "index.html"
            if not index_file.is_file():
                raise NotFoundException(f"No index.html in {cfg.doc_dir}")
            return File(path=index_file, content_disposition_type="inline", media_type=litestar.MediaType.HTML)
        return Response(content=render.render_index(cfg), media_type=litestar.MediaType.HTML)

    @litestar.get("/swagger-initializer.js", include_in_schema=False, media_type=JS_MEDIA_TYPE)
    async def initializer(self, state: litestar.datastructures.State) -> str:
        return render.render_initializer(state.cfg.ui)

    @litestar.get("/index.css", include_in_schema=False, media_type="text/css")
    async def stylesheet(self, state: litestar.datastructures.State) -> str:
        return render.render_css(state.cfg.ui)

    @litestar.get("/about", summary="Application name and version", media_type=litestar.MediaType.JSON)
    async def app_info(self) -> AppInfo:
        return AppInfo(name="swagger-ui-config", version=__version__)

    @litestar.get("/about/config", include_in_schema=False, media_type=litestar.MediaType.JSON)
    async def app_configuration(self, state: litestar.datastructures.State) -> SwaggerUIConfig:
        """Display the UI config as JSON."""
        return state.cfg.ui

    @litestar.get("/{asset:path}", include_in_schema=False)
    async def widget_asset(self, request: litestar.Request, state: litestar.datastructures.State) -> Response:
        """
        Definition files are read from ``doc_dir``.

        Everything else is part of the swagger-ui-dist bundle; send the browser to the CDN copy.
        """
        cfg: SwaggerUIConfig = state.cfg.ui
        asset = str(request.path_params["asset"]).lstrip("/")
        if not is_definition(asset):
            return Redirect(path=cfg.asset_url(asset))
        doc_dir = pathlib.Path(cfg.doc_dir).resolve()
        definition = (doc_dir / asset).resolve()
        if not (definition.is_relative_to(doc_dir) and definition.is_file()):
            raise NotFoundException(f"No {asset} in {cfg.doc_dir}")
        return File(path=definition, content_disposition_type="inline")

