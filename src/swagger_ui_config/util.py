#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#
"""Generic util functions used in the code"""

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from . import __version__

THISDIR = Path(__file__).parent.resolve()
TEMPLATES = THISDIR / "templates"


def url_join(*parts: str) -> str:
    """
    Join a URL from a number of parts/fragments.

    Implemented because urllib.parse.urljoin strips subpaths from
    host urls if they are specified.

    Per https://github.com/geopython/pygeoapi/issues/695

    Note that this function ALWAYS removes a trailing / for the output, even if
    your last term in the parts list includes the trailing slash.

    :param parts: list of parts to join
    :returns: str of resulting URL
    """
    return "/".join([str(p).strip().strip("/") for p in parts]).rstrip("/")


@lru_cache(maxsize=1)
def template_environment() -> Environment:
    """
    Jinja2 environment for the bundled templates.

    HTML templates are autoescaped; the javascript and CSS templates are not,
    so values placed in them go through the ``tojson`` filter instead.
    """
    return Environment(
        loader=FileSystemLoader(TEMPLATES),
        autoescape=select_autoescape(enabled_extensions=("html", "htm"), default_for_string=False),
        keep_trailing_newline=True,
    )


def render_j2_template(template: str, **data) -> str:
    """
    Render one of the bundled Jinja2 templates.

    :param template: template name, relative to the templates directory
    :param data: template variables

    :returns: string of rendered template
    """
    tpl = template_environment().get_template(template)
    return tpl.render(version=__version__, **data)
