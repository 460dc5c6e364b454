#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#
"""Find API definition files in a documentation directory."""

import logging
import pathlib
from collections.abc import Iterator

from . import default
from .base import DefinitionURL


def is_definition(path: str | pathlib.PurePath) -> bool:
    """True if ``path`` names an API definition file, judged by its suffix."""
    return pathlib.PurePosixPath(path).suffix in default.DEFINITION_SUFFIXES


def _walk(directory: pathlib.Path, root: pathlib.Path, seen: set[pathlib.Path]) -> Iterator[DefinitionURL]:
    real = directory.resolve()
    if real in seen:  # symlink cycle
        return
    seen.add(real)
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logging.warning(f"Skipping unreadable directory {directory}: {e}")
        return
    for entry in entries:
        if entry.is_dir():  ## is_dir() follows symlinks
            yield from _walk(entry, root, seen)
        elif is_definition(entry.name):
            yield DefinitionURL(name=entry.name, url=entry.relative_to(root).as_posix())


def discover_definitions(doc_dir: str | pathlib.Path) -> list[DefinitionURL]:
    """
    List the definition files (``.json``, ``.yaml``, ``.yml``) under ``doc_dir``.

    Entries are returned in lexical walk order. Each is named after the file's
    basename; its url is the path relative to ``doc_dir``.

    :param doc_dir: directory to scan
    :returns: list of definitions; empty if the directory does not exist
    """
    root = pathlib.Path(doc_dir)
    if not root.is_dir():
        logging.warning(f"Documentation directory {root} does not exist; no definitions discovered.")
        return []
    return list(_walk(root, root, set()))
