#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# See the full copyright notice in LICENSE.md
#
"""Swagger UI configuration and page rendering."""

__version__ = "1.0.0"

import logging

LOGGER = logging.getLogger(__name__)
