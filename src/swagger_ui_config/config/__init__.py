#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#
"""Configurator."""

import logging
import os
import pathlib

from . import default
from ._yaml import load_yaml
from .base import DefinitionURL, MasterConfig, OAuthConfig, SwaggerUIConfig, new_config
from .discover import discover_definitions


def get_config() -> MasterConfig:
    if os.getenv(default.CONFIG_ENV_VAR):
        __configfile = pathlib.Path(os.getenv(default.CONFIG_ENV_VAR)).resolve()
    else:
        __configfile = pathlib.Path(default.CONFIG_FILE).resolve()

    logging.info(f"Attempting to read config file from {__configfile}")
    if __configfile.exists():
        _config = MasterConfig.from_yaml(__configfile)
    else:
        raise RuntimeError(f"Config file {__configfile} does not exist.")

    return _config
