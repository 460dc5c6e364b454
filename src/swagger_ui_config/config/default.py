#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#
"""Default values for configuration options."""

CONFIG_ENV_VAR = "SWAGGER_UI_CONFIG"
CONFIG_FILE = "./swagger-ui.yml"

TITLE = "API Doc"
DOC_DIR = "docs"
PATH_PREFIX = ""
DOC_EXPANSION = "list"
DOC_EXPANSION_CHOICES = ("none", "list", "full")
SHOW_EXTENSIONS = True
DOM_ID = "swagger-ui"
DEEP_LINKING = True
PERSIST_AUTHORIZATION = False
SYNTAX_HIGHLIGHT = True

SWAGGER_UI_VERSION = "5.17.14"
CDN_URL = "https://unpkg.com"

DEFINITION_SUFFIXES = (".json", ".yaml", ".yml")
