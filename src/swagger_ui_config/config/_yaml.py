#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#
"""
Reading the YAML configuration file.

Scalars may reference environment variables as ``${NAME}``.  Substituted
values are always strings; turning ``"true"`` into a flag is left to the
config record, which knows the type of each option.
"""

import logging
import os
import pathlib
import re
from functools import singledispatch
from io import TextIOWrapper
from typing import Any

import yaml

ENV_REFERENCE = re.compile(r"\$\{([^}{]+)\}")


def expand_env(value: str) -> str | None:
    """
    Replace each ``${NAME}`` in ``value`` with the variable's value.

    A value that is nothing but one undefined reference becomes ``None``, so
    the option falls back to its default.  Undefined references inside a longer
    string are left as written.
    """
    whole = ENV_REFERENCE.fullmatch(value)
    if whole and whole.group(1) not in os.environ:
        logging.warning(f"Undefined environment variable {whole.group(1)} in config file.")
        return None

    def _lookup(m: re.Match) -> str:
        if m.group(1) not in os.environ:
            logging.warning(f"Undefined environment variable {m.group(1)} in config file.")
            return m.group(0)
        return os.environ[m.group(1)]

    return ENV_REFERENCE.sub(_lookup, value)


class EnvVarLoader(yaml.SafeLoader):
    """SafeLoader that expands ``${NAME}`` references in plain scalars."""


EnvVarLoader.add_implicit_resolver("!env", re.compile(r".*\$\{[^}{]+\}.*"), None)
EnvVarLoader.add_constructor("!env", lambda loader, node: expand_env(loader.construct_scalar(node)))


@singledispatch
def load_yaml(fromwhere: Any) -> dict[str, Any]:
    """
    Load the configuration from a file name, a path, an open stream, or a dict.

    An empty document loads as an empty dict.
    """
    raise NotImplementedError(f"Unsupported type: {type(fromwhere)}")


@load_yaml.register
def _(fromwhere: TextIOWrapper) -> dict[str, Any]:
    logging.debug(f"Reading YAML from {getattr(fromwhere, 'name', fromwhere.__class__.__name__)}")
    return yaml.load(fromwhere, Loader=EnvVarLoader) or {}  # noqa: S506


@load_yaml.register
def _(fromwhere: pathlib.Path) -> dict[str, Any]:
    if not fromwhere.is_file():
        raise FileNotFoundError(f"Configuration file not found: {fromwhere}")
    with fromwhere.open(encoding="utf-8") as fh:
        return load_yaml(fh)


@load_yaml.register
def _(fromwhere: str) -> dict[str, Any]:
    return load_yaml(pathlib.Path(fromwhere))


@load_yaml.register
def _(fromwhere: dict) -> dict[str, Any]:
    return fromwhere
