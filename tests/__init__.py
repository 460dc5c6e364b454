#!/usr/bin/env python
# coding: utf-8
# SPDX-License-Identifier: CC0-1.0
#

"""
Test suite for swagger-ui-config package

Most test files begin with a number.  This roughly aligns with the order
of test running. Within the test file, a decorator (``pytest.order()``)
sets the order of test execution.  The number there should be in the range
of the 2-digit number of the file itself.

"""

# prefix the UI is mounted under in the app-level tests
UI_PREFIX = "/docs"

CDN_BASE = "https://unpkg.com/swagger-ui-dist@5.17.14"


# ## Where things are tested:

# - 10_config_test.py      YAML loading, config record, defaults and validation
# - 15_log_test.py         logging setup
# - 20_discovery_test.py   doc_dir scanning
# - 30_render_test.py      initializer / index / css rendering
# - 40_flask_routes_test.py
#    - f"{UI_PREFIX}/", f"{UI_PREFIX}/index.html"
#    - f"{UI_PREFIX}/swagger-initializer.js"
#    - f"{UI_PREFIX}/index.css"
#    - f"{UI_PREFIX}/about", f"{UI_PREFIX}/about/config"
#    - f"{UI_PREFIX}/<definition>.json|yaml|yml"  (served from doc_dir)
#    - f"{UI_PREFIX}/<asset>"  (redirect to CDN)
# - 50_litestar_routes_test.py   same endpoints, ASGI app
# - 60_cli_test.py
