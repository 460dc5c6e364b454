#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
#

"""
CLI interface testing

Tests "routing" to ensure that subcommands and switches are working as expected,
and that each subcommand produces the page or listing it claims to.
"""

import flask
import pytest

from swagger_ui_config import __version__
from swagger_ui_config.cmdline import cli as ui_cmd


@pytest.fixture
def docs_only_config(tmp_path, docs_dir):
    """A config file with no urls; definitions are discovered in the sample docs directory."""
    _f = tmp_path / "discover.yml"
    _f.write_text(f"swagger_ui:\n  doc_dir: {docs_dir}\n")
    return _f


@pytest.mark.order(60)
@pytest.mark.unittest
def test_cli(runner):
    """Test CLI can be invoked in test context."""
    result = runner.invoke(ui_cmd, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.order(60)
@pytest.mark.unittest
def test_subcommands(runner):
    """Subcommands we expect are present."""
    result = runner.invoke(ui_cmd, ["--help"])
    assert result.exit_code == 0
    for sub in ("render", "urls", "serve"):
        assert sub in result.output


@pytest.mark.order(61)
@pytest.mark.integration
def test_render_initializer(runner, yaml_config_file):
    result = runner.invoke(ui_cmd, ["render", str(yaml_config_file)])
    assert result.exit_code == 0
    assert "SwaggerUIBundle({" in result.stdout
    assert 'name: "Pet Store",' in result.stdout
    assert 'dom_id: "#api-docs",' in result.stdout


@pytest.mark.order(61)
@pytest.mark.integration
def test_render_index(runner, yaml_config_file):
    result = runner.invoke(ui_cmd, ["render", "--page", "index", str(yaml_config_file)])
    assert result.exit_code == 0
    assert '<div id="api-docs"></div>' in result.stdout


@pytest.mark.order(61)
@pytest.mark.integration
def test_render_to_file(runner, yaml_config_file, tmp_path):
    out = tmp_path / "swagger-initializer.js"
    result = runner.invoke(ui_cmd, ["render", str(yaml_config_file), "-o", str(out)])
    assert result.exit_code == 0
    assert 'docExpansion: "none",' in out.read_text()


@pytest.mark.order(62)
@pytest.mark.integration
def test_urls_listing(runner, yaml_config_file):
    result = runner.invoke(ui_cmd, ["urls", str(yaml_config_file)])
    assert result.exit_code == 0
    assert "Pet Store\t/specs/petstore.yaml" in result.stdout
    assert "/specs/users.json\t/specs/users.json" in result.stdout


@pytest.mark.order(62)
@pytest.mark.integration
def test_urls_discovered(runner, docs_only_config):
    result = runner.invoke(ui_cmd, ["urls", str(docs_only_config)])
    assert result.exit_code == 0
    lines = [ln for ln in result.stdout.splitlines() if "\t" in ln]
    assert lines == ["petstore.yaml\tpetstore.yaml", "users.json\tusers.json", "orders.yml\tv2/orders.yml"]


@pytest.mark.order(63)
@pytest.mark.unittest
def test_bad_config_value(runner, tmp_path):
    _f = tmp_path / "bad.yml"
    _f.write_text("swagger_ui:\n  doc_expansion: sideways\n  urls: [/a.json]\n")
    result = runner.invoke(ui_cmd, ["render", str(_f)])
    assert result.exit_code == 1
    assert "Unable to load configuration" in result.output


@pytest.mark.order(63)
@pytest.mark.unittest
def test_missing_config_file(runner, tmp_path):
    result = runner.invoke(ui_cmd, ["render", str(tmp_path / "absent.yml")])
    assert result.exit_code == 2


@pytest.mark.order(64)
@pytest.mark.integration
def test_serve(runner, yaml_config_file, monkeypatch):
    """``serve`` builds the Flask app and hands it to the development server."""
    calls = {}

    def fake_run(self, host=None, port=None, **kwargs):
        calls.update(app=self, host=host, port=port)

    monkeypatch.setattr(flask.Flask, "run", fake_run)
    result = runner.invoke(ui_cmd, ["serve", str(yaml_config_file), "--port", "9090"])
    assert result.exit_code == 0
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 9090
    assert "http://127.0.0.1:9090/docs/" in result.stdout
    assert calls["app"].SWAGGER_UI_CONFIG.ui.path_prefix == "/docs"
