#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
#
"""Configuration for running pytest"""

import pathlib
from collections.abc import Generator

import pytest
from click.testing import CliRunner
from litestar.testing import TestClient

from swagger_ui_config.config import DefinitionURL, MasterConfig, OAuthConfig, SwaggerUIConfig

from . import UI_PREFIX

HERE = pathlib.Path(__file__).parent.resolve()


@pytest.fixture
def runner():
    """Runner for cli-related tests."""
    return CliRunner()


@pytest.fixture(scope="session")
def yaml_config_file() -> pathlib.Path:
    """Sample configuration file for tests."""
    return HERE / "data" / "swagger_ui.yml"


@pytest.fixture(scope="session")
def docs_dir() -> pathlib.Path:
    """Directory of sample API definitions (plus a non-definition file and a custom index page)."""
    return HERE / "data" / "docs"


@pytest.fixture(scope="session")
def oauth_env_info() -> dict[str, str]:
    """Environment variables referenced by the sample configuration file."""
    return dict(OAUTH_CLIENT_ID="petstore-docs-client")


@pytest.fixture
def ui_config(docs_dir) -> SwaggerUIConfig:
    """A config with two named definitions, mounted under the test prefix."""
    return SwaggerUIConfig(
        title="Pet Store API",
        doc_dir=str(docs_dir),
        path_prefix=UI_PREFIX,
        urls=[
            DefinitionURL(name="Pet Store", url="/specs/petstore.yaml"),
            DefinitionURL(name="Users", url="/specs/users.json"),
        ],
        oauth=OAuthConfig(client_id="abc", realm="r", app_name="Docs"),
    )


@pytest.fixture
def master_config(ui_config) -> MasterConfig:
    return MasterConfig(ui=ui_config)


@pytest.fixture
def f_client(master_config):
    """A Flask test client for the UI app."""
    from swagger_ui_config.wsgi import flask_swagger_ui_app_factory

    _app = flask_swagger_ui_app_factory(master_config)
    with _app.test_client() as client:
        yield client


@pytest.fixture
def ls_client(master_config) -> Generator[TestClient, None, None]:
    """A Litestar test client for the UI app."""
    from swagger_ui_config.asgi import litestar_swagger_ui_app_factory

    _app = litestar_swagger_ui_app_factory(master_config)
    with TestClient(app=_app) as client:
        yield client
