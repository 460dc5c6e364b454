#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#


"""
Command Line Interface for swagger-ui-config

Renders the Swagger UI pages from a configuration file, lists the definitions
a configuration resolves to, or serves the UI with the Flask development
server.  Implemented with ``click``.

"""

import click

from . import LOGGER, __version__, log
from .config import MasterConfig
from .render import render_page


def _load(config_file: str) -> MasterConfig:
    try:
        return MasterConfig.from_yaml(config_file)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Unable to load configuration from {config_file}: {e}") from e


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="swagger-ui-config")
@click.option("--log-level", default="WARNING", show_default=True, help="Logging level name.")
def cli(log_level):
    """Swagger UI Configuration Command Line Interface."""
    if LOGGER.handlers:
        LOGGER.setLevel(log.resolve_level(log_level))
    else:
        log.initialize(LOGGER, level=log_level)


@cli.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--page",
    "-p",
    type=click.Choice(["initializer", "index", "css"]),
    default="initializer",
    show_default=True,
    help="Which page to render",
)
@click.option(
    "--output-file",
    "-o",
    type=click.File("w", encoding="utf-8"),
    help="Name of output file",
)
def render(config_file, page, output_file):
    """Render a page of the UI."""
    LOGGER.debug("SubCommand: `render` - Render %s", page)
    cfg = _load(config_file)
    content = render_page(cfg.ui, page)

    if output_file is None:
        click.echo(content, nl=False)
    else:
        click.echo(f"Generating {output_file.name}", err=True)
        output_file.write(content)


@cli.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
def urls(config_file):
    """List the API definitions the UI will offer."""
    cfg = _load(config_file)
    if not cfg.ui.urls:
        click.echo("No API definitions configured or discovered.", err=True)
    for u in cfg.ui.urls:
        click.echo(f"{u.name}\t{u.url}")


@cli.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8080, show_default=True, type=int)
def serve(config_file, host, port):
    """Serve the UI with the Flask development server."""
    from .wsgi import flask_swagger_ui_app_factory

    cfg = _load(config_file)
    app = flask_swagger_ui_app_factory(cfg)
    click.echo(f"Swagger UI on http://{host}:{port}{cfg.ui.base_path}/")
    app.run(host=host, port=port)
