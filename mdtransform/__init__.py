"""Render Markdown documents into styled HTML pages.

This package exposes the renderer used by the ``mdtransform`` console script
to convert Markdown trees into sibling HTML files and to serve rendered pages
per request. Headings gain URL-safe anchor ids, a ``# TITLE: ...`` heading
becomes the page title block, and the body is spliced into a page template at
``$$CONTENT$$``.

Exports
-------
- ``render``: Render Markdown text into a complete HTML document.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from mdtransform import render
>>> render("## Getting Started!", "<body>$$CONTENT$$</body>")
'<body><h2 id="getting-started">Getting Started!</h2>\\n</body>'
>>> from mdtransform import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .renderer import render

__all__ = ["app", "main", "render"]
