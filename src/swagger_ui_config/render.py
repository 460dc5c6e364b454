#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#
"""
Page rendering for the Swagger UI viewer.

The renderer is straight substitution of a ``SwaggerUIConfig`` into the bundled
templates. It does no validation of its own; that is done when the config is
built (see ``swagger_ui_config.config.base``).
"""

from typing import Literal

from . import LOGGER, util
from .config import SwaggerUIConfig

INITIALIZER_TEMPLATE = "swagger-initializer.js"
INDEX_TEMPLATE = "index.html"
CSS_TEMPLATE = "index.css"

PageName = Literal["initializer", "index", "css"]


def render_initializer(cfg: SwaggerUIConfig) -> str:
    """
    Render the script which constructs the viewer widget on page load.

    The widget gets the definition urls, display flags, DOM mount point and the
    fixed validator/preset/plugin/layout settings. ``ui.initOAuth()`` is emitted
    only when ``cfg.oauth`` is set. The constructed widget is passed to the host
    page function named by ``cfg.ui_callback``, if any.

    :param cfg: UI configuration
    :returns: javascript source
    """
    LOGGER.debug(f"Rendering initializer: {len(cfg.urls)} url(s), oauth={cfg.oauth is not None}")
    return util.render_j2_template(INITIALIZER_TEMPLATE, cfg=cfg)


def render_index(cfg: SwaggerUIConfig) -> str:
    """Render the HTML page which loads the widget bundle and the initializer."""
    return util.render_j2_template(INDEX_TEMPLATE, cfg=cfg)


def render_css(cfg: SwaggerUIConfig) -> str:
    return util.render_j2_template(CSS_TEMPLATE, cfg=cfg)


def render_page(cfg: SwaggerUIConfig, page: PageName = "initializer") -> str:
    """Render one of the pages by name."""
    renderers = {
        "initializer": render_initializer,
        "index": render_index,
        "css": render_css,
    }
    try:
        renderer = renderers[page]
    except KeyError:
        raise ValueError(f"Unknown page {page!r}; expected one of {', '.join(renderers)}") from None
    return renderer(cfg)
