"""Common literal values used across mdtransform.

The placeholder token and the fallback page template live here so the
renderer, the configuration loader, the CLI and the tests all import the same
values without drifting. Intended for internal use within the mdtransform
package.

Examples
--------
>>> from mdtransform import _constants
>>> _constants.PLACEHOLDER in _constants.DEFAULT_TEMPLATE
True
>>> _constants.DEFAULT_TEMPLATE.count(_constants.PLACEHOLDER)
1
"""

PLACEHOLDER = "$$CONTENT$$"

DEFAULT_CONFIG_NAME = "mdtransform.yaml"

DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html>
    <head>
        <meta charset="utf-8">
        <style>
            body {
                width: max(50em, min(500px, 95vw));
                margin: 0 auto;
                font-family: sans-serif;
                font-size: 1.1rem;
            }
            h1 {
                text-align: center;
                font-family: Tahoma, Verdana, Arial, sans-serif;
            }
        </style>
    </head>
    <body>
        $$CONTENT$$
    </body>
</html>
"""
