"""Convert Markdown files and directory trees into sibling HTML files.

:class:`BatchConverter` walks the paths handed to ``mdtransform convert``,
renders every ``.md`` file it meets with the shared page template, and writes
the result next to the source with an ``.html`` suffix. Anything that is not
Markdown is skipped with a warning, and a file is never written over its own
source. Per-file read or write failures are logged and collected in
:attr:`BatchConverter.failures` so one bad file does not stop the walk.

Example
-------
>>> from pathlib import Path
>>> converter = BatchConverter(DEFAULT_TEMPLATE)
>>> converter.run([Path("docs")])  # doctest: +SKIP
[PosixPath('docs/index.html'), PosixPath('docs/guide/setup.html')]
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ._constants import DEFAULT_TEMPLATE
from .renderer import MarkdownRenderer

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"
HTML_SUFFIX = ".html"


def output_path_for(path: Path) -> Path:
    """Return the HTML path written for the Markdown file at ``path``."""
    return path.with_suffix(HTML_SUFFIX)


class BatchConverter:
    """Render Markdown files found under a set of paths."""

    def __init__(
        self, template: str = DEFAULT_TEMPLATE, *, renderer: MarkdownRenderer | None = None
    ) -> None:
        """Initialize the converter.

        Parameters
        ----------
        template : str, optional
            Page template containing ``$$CONTENT$$``; the caller has already
            checked the placeholder.
        renderer : MarkdownRenderer, optional
            Renderer shared by every file; defaults to a plain renderer.
        """
        self.template = template
        self.renderer = renderer or MarkdownRenderer()
        self.failures: list[tuple[Path, Exception]] = []

    def run(self, paths: cabc.Iterable[Path]) -> list[Path]:
        """Convert every path in order and return the HTML files written."""
        written: list[Path] = []
        for path in paths:
            written.extend(self.convert_path(path))
        return written

    def convert_path(self, path: Path) -> list[Path]:
        """Convert a file, or every Markdown file below a directory.

        Directory entries are visited in sorted order so output is stable.
        A directory reached a second time through a symlink is skipped.
        """
        return self._convert_path(path, set())

    def _convert_path(self, path: Path, visited: set[Path]) -> list[Path]:
        if path.is_dir():
            resolved = path.resolve()
            if resolved in visited:
                logger.warning("Ignoring already visited directory '%s'", path)
                return []
            visited.add(resolved)
            try:
                entries = sorted(path.iterdir())
            except OSError as exc:
                self._record_failure(path, exc)
                return []
            written: list[Path] = []
            for entry in entries:
                written.extend(self._convert_path(entry, visited))
            return written

        if path.is_file():
            if path.suffix != MARKDOWN_SUFFIX:
                logger.warning("Ignoring non-Markdown file '%s'", path)
                return []
            try:
                output = self.convert_file(path)
            except (OSError, UnicodeDecodeError) as exc:
                self._record_failure(path, exc)
                return []
            return [output] if output is not None else []

        logger.warning("Ignoring non-file, non-directory '%s'", path)
        return []

    def convert_file(self, path: Path) -> Path | None:
        """Render ``path`` into its sibling HTML file.

        Returns
        -------
        Path or None
            The written path, or ``None`` when the output would overwrite the
            source file.

        Raises
        ------
        OSError
            If the source cannot be read or the output cannot be written.
        UnicodeDecodeError
            If the source is not valid UTF-8.
        """
        output = output_path_for(path)
        if output == path:
            logger.warning("Output for '%s' would overwrite the original file; ignoring", path)
            return None
        markdown_text = path.read_text(encoding="utf-8")
        output.write_text(self.renderer.document(markdown_text, self.template), encoding="utf-8")
        logger.debug("Rendered '%s' to '%s'", path, output)
        return output

    def _record_failure(self, path: Path, exc: Exception) -> None:
        logger.error("Failed to convert '%s': %s", path, exc)
        self.failures.append((path, exc))


__all__ = ["BatchConverter", "output_path_for"]
