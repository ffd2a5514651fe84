"""Serve rendered Markdown per request.

The request adapter reads a single parameter (``FILE`` by default) naming a
Markdown file, renders it into the page template and answers with HTML. The
parameter is taken from the query string, or from the WSGI environ where
FastCGI and CGI gateways place their request parameters. Unreadable or missing
files produce a plain ``404 Not Found`` response rather than an error page.

Example
-------
>>> app = create_app()
>>> app.test_client().get("/?FILE=missing.md").status_code
404
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from pathlib import Path

from flask import Flask, Response, request

from ._constants import DEFAULT_TEMPLATE
from .renderer import MarkdownRenderer

logger = logging.getLogger(__name__)

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
NOT_FOUND_BODY = "404 Not Found"


def create_app(
    template: str = DEFAULT_TEMPLATE,
    *,
    renderer: MarkdownRenderer | None = None,
    root: Path | None = None,
    parameter: str = "FILE",
) -> Flask:
    """Build the Flask application that renders Markdown files on request.

    Parameters
    ----------
    template : str, optional
        Page template containing ``$$CONTENT$$``, shared read-only by every
        request.
    renderer : MarkdownRenderer, optional
        Renderer shared across requests; defaults to a plain renderer.
    root : Path, optional
        Directory that relative ``FILE`` values are resolved against; the
        process working directory when ``None``.
    parameter : str, optional
        Name of the request parameter carrying the source path.

    Returns
    -------
    Flask
        WSGI application answering ``GET`` requests on any path.
    """
    app = Flask(__name__)
    markdown_renderer = renderer or MarkdownRenderer()

    @app.get("/", defaults={"_subpath": ""})
    @app.get("/<path:_subpath>")
    def render_source(_subpath: str) -> Response:
        source = request.args.get(parameter) or request.environ.get(parameter)
        if not source:
            logger.info("Request for '%s' carried no %s parameter", request.path, parameter)
            return _not_found()

        path = _resolve_source(source, root)
        try:
            markdown_text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.info("Cannot read '%s': %s", path, exc)
            return _not_found()

        html = markdown_renderer.document(markdown_text, template)
        return Response(html, status=HTTPStatus.OK, content_type=HTML_CONTENT_TYPE)

    return app


def _resolve_source(source: str, root: Path | None) -> Path:
    """Return the filesystem path named by the request parameter."""
    path = Path(source)
    if root is not None and not path.is_absolute():
        return root / path
    return path


def _not_found() -> Response:
    return Response(
        NOT_FOUND_BODY, status=HTTPStatus.NOT_FOUND, content_type="text/plain; charset=utf-8"
    )


__all__ = ["create_app"]
