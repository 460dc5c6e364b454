#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
# SPDX-FileCopyrightText: 2024-present USGS
# See the full copyright notice in LICENSE.md
#
"""Custom exceptions."""


class SwaggerUIError(Exception):
    """swagger-ui-config generic error"""

    pass


class ConfigurationError(SwaggerUIError, ValueError):
    """invalid configuration value"""

    pass
