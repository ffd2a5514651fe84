"""Cyclopts CLI entrypoint for rendering Markdown into HTML pages.

The ``mdtransform`` console script defined here converts Markdown files or
whole directory trees into sibling ``.html`` files (``mdtransform convert``)
or serves rendered Markdown per request (``mdtransform serve``). Both commands
share the page template, the optional ``mdtransform.yaml`` configuration and
the ``MDTRANSFORM_*`` environment overrides.

Examples
--------
Convert a docs folder with the built-in template:

>>> from mdtransform.cli import main
>>> main()  # doctest: +SKIP

Convert with a custom template:

>>> from mdtransform.cli import app
>>> app(["convert", "docs", "--template", "page.html"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .batch import BatchConverter
from .config import RenderConfig, load_template, resolve_config
from .renderer import MarkdownRenderer
from .server import create_app

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s: %(message)s"

app = App(
    name="mdtransform",
    help="Transform Markdown files into HTML for a website.",
    config=cyclopts.config.Env("MDTRANSFORM_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


def _prepare(
    config: Path | None, **overrides: object
) -> tuple[RenderConfig, str, MarkdownRenderer]:
    """Resolve settings, then load the template and renderer or exit with status 1."""
    try:
        settings = resolve_config(config).with_overrides(**overrides)
        template = load_template(settings.template_path)
        renderer = MarkdownRenderer(settings.pygments_style)
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc
    return settings, template, renderer


@app.command(help="Render Markdown files or directories to sibling HTML files.")
def convert(
    *paths: typ.Annotated[
        Path, Parameter(help="Markdown files or directories containing .md files")
    ],
    template: typ.Annotated[
        Path | None,
        Parameter(
            name=["--template", "-t"],
            help="HTML template file; must include '$$CONTENT$$'",
        ),
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to an mdtransform.yaml file")
    ] = None,
    pygments_style: typ.Annotated[
        str | None, Parameter(help="Highlight fenced code with this Pygments style")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Log every rendered file")] = False,
) -> None:
    """Convert Markdown inputs into HTML files next to their sources.

    Parameters
    ----------
    *paths : Path
        Markdown files and directories to convert; directories are walked
        recursively.
    template : Path or None, optional
        Template file overriding the configured or built-in template.
    config : Path or None, optional
        Configuration file; ``mdtransform.yaml`` in the working directory is
        used when present.
    pygments_style : str or None, optional
        Enables code highlighting with the named Pygments style.
    verbose : bool, optional
        Log at DEBUG level.

    Raises
    ------
    SystemExit
        With status 1 when no paths are given, the template is unusable, or
        any file failed to convert.
    """
    _configure_logging(verbose=verbose)
    if not paths:
        logger.error("At least one Markdown file or directory is required.")
        raise SystemExit(1)

    _settings, page_template, renderer = _prepare(
        config, template_path=template, pygments_style=pygments_style
    )
    converter = BatchConverter(page_template, renderer=renderer)
    for path in converter.run(paths):
        print(f"wrote {_format_path(path)}")
    if converter.failures:
        raise SystemExit(1)


@app.command(help="Serve rendered Markdown files named by a request parameter.")
def serve(
    *,
    host: typ.Annotated[str | None, Parameter(help="Interface to bind")] = None,
    port: typ.Annotated[int | None, Parameter(help="Port to listen on")] = None,
    root: typ.Annotated[
        Path | None, Parameter(help="Directory relative FILE values resolve against")
    ] = None,
    template: typ.Annotated[
        Path | None,
        Parameter(
            name=["--template", "-t"],
            help="HTML template file; must include '$$CONTENT$$'",
        ),
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to an mdtransform.yaml file")
    ] = None,
    pygments_style: typ.Annotated[
        str | None, Parameter(help="Highlight fenced code with this Pygments style")
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Log every request")] = False,
) -> None:
    """Run the request adapter until interrupted."""
    _configure_logging(verbose=verbose)
    settings, page_template, renderer = _prepare(
        config,
        template_path=template,
        pygments_style=pygments_style,
        server_host=host,
        server_port=port,
        server_root=root,
    )
    server = settings.server
    flask_app = create_app(
        page_template, renderer=renderer, root=server.root, parameter=server.parameter
    )
    logger.info(
        "Serving Markdown on http://%s:%s/?%s=<path>",
        server.host,
        server.port,
        server.parameter,
    )
    flask_app.run(host=server.host, port=server.port)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``mdtransform`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
