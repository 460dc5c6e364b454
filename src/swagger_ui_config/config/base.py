#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#
"""Base data structures to read in config information."""

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Self

from .. import util
from ..err import ConfigurationError
from . import default
from ._yaml import load_yaml


def as_flag(value: Any, option: str) -> bool:
    """Read a boolean option; ``"true"``/``"false"`` strings come from environment substitution."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ConfigurationError(f"{option} must be true or false; got {value!r}")


@dataclass
class DefinitionURL:

    """A named API definition, shown as one entry in the UI's source selector."""

    name: str
    url: str

    @classmethod
    def coerce(cls, value: Any) -> Self:
        """
        Accept a ``DefinitionURL``, a ``{"name": ..., "url": ...}`` mapping, or a bare url string.

        A bare string is used as both name and url.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(name=value, url=value)
        if isinstance(value, dict):
            if not value.get("url"):
                raise ConfigurationError(f"Definition entry has no url: {value!r}")
            return cls(name=str(value.get("name") or ""), url=str(value["url"]))
        raise ConfigurationError(f"Cannot interpret {value!r} as a definition url")


@dataclass
class OAuthConfig:
    """
    Swagger UI OAuth2 integration.

    See https://swagger.io/docs/open-source-tools/swagger-ui/usage/oauth2/ for further details.
    """

    # The ID of the client sent to the OAuth2 IAM provider.
    client_id: str = ""
    # The OAuth2 realm that the client should operate in. If not applicable, use empty string.
    realm: str = ""
    # The name to display for the application in the authentication popup.
    app_name: str = ""

    @classmethod
    def coerce(cls, value: Any) -> Self | None:
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, dict):
            return cls(
                client_id=str(value.get("client_id") or ""),
                realm=str(value.get("realm") or ""),
                app_name=str(value.get("app_name") or ""),
            )
        raise ConfigurationError(f"Cannot interpret {value!r} as an OAuth configuration")


@dataclass
class SwaggerUIConfig:
    """Everything needed to render and serve one Swagger UI page."""

    title: str = default.TITLE
    doc_dir: str = default.DOC_DIR
    path_prefix: str = default.PATH_PREFIX
    disable_index_template: bool = False
    urls: list[DefinitionURL] = field(default_factory=list)
    doc_expansion: str = default.DOC_EXPANSION
    show_extensions: bool = default.SHOW_EXTENSIONS
    dom_id: str = default.DOM_ID
    deep_linking: bool = default.DEEP_LINKING
    persist_authorization: bool = default.PERSIST_AUTHORIZATION
    syntax_highlight: bool | dict = default.SYNTAX_HIGHLIGHT
    oauth: OAuthConfig | None = None
    ui_callback: str | None = None
    swagger_ui_version: str = default.SWAGGER_UI_VERSION
    cdn_url: str = default.CDN_URL

    def __post_init__(self):
        self.urls = [DefinitionURL.coerce(u) for u in (self.urls or [])]
        for u in self.urls:
            if not u.name:
                u.name = u.url
        self.oauth = OAuthConfig.coerce(self.oauth)
        for name in ("disable_index_template", "show_extensions", "deep_linking", "persist_authorization"):
            setattr(self, name, as_flag(getattr(self, name), name))
        if not isinstance(self.syntax_highlight, dict):
            self.syntax_highlight = as_flag(self.syntax_highlight, "syntax_highlight")
        if self.doc_expansion not in default.DOC_EXPANSION_CHOICES:
            raise ConfigurationError(
                f"doc_expansion must be one of {', '.join(default.DOC_EXPANSION_CHOICES)}; got {self.doc_expansion!r}"
            )
        if not self.dom_id:
            raise ConfigurationError("dom_id must not be empty")

    @property
    def base_path(self) -> str:
        """``path_prefix`` with exactly one leading slash and no trailing slash; empty for the root."""
        return util.url_join("", self.path_prefix)

    def asset_url(self, name: str) -> str:
        """Location of a ``swagger-ui-dist`` file on the CDN."""
        return util.url_join(self.cdn_url, f"swagger-ui-dist@{self.swagger_ui_version}", name)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Self:
        known = {f.name for f in fields(cls)}
        for key in set(d) - known:
            logging.warning("Ignoring unknown swagger_ui option %r", key)
        # None (e.g. an undefined ${VAR}) leaves the default in place
        return new_config(**{k: v for k, v in d.items() if k in known and v is not None})


def new_config(**options) -> SwaggerUIConfig:
    """
    Build a config from keyword options layered over the defaults.

    If no definition urls were given, the ``doc_dir`` is scanned for
    definition files.
    """
    from .discover import discover_definitions

    cfg = SwaggerUIConfig(**options)
    if not cfg.urls:
        cfg.urls = discover_definitions(cfg.doc_dir)
        logging.debug("Discovered %d definition(s) in %s", len(cfg.urls), cfg.doc_dir)
    return cfg


@dataclass
class MasterConfig:
    ui: SwaggerUIConfig
    logging: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def clean_dict(cls, d: dict) -> dict:
        cleaned = {}
        for key, value in d.items():
            if value is not None:
                if isinstance(value, dict):
                    subdict = cls.clean_dict(value)
                    if subdict:
                        cleaned[key] = subdict
                else:
                    cleaned[key] = value
        return cleaned

    @classmethod
    def from_yaml(cls, input: Any) -> Self:
        try:
            cfg = load_yaml(input)
        except OSError as e:
            logging.error("Unable to load configuration: %s", e)
            raise
        ui_section = cls.clean_dict(cfg.get("swagger_ui") or {})
        log_section = cls.clean_dict(cfg.get("logging") or {})
        return cls(ui=SwaggerUIConfig.from_dict(ui_section), logging=log_section)
