"""Splice rendered HTML bodies into page templates."""

from __future__ import annotations

from mdtransform._constants import PLACEHOLDER


class TemplateError(ValueError):
    """Raised when a page template cannot be used for composition."""


def compose(body: str, template: str) -> str:
    """Return ``template`` with every ``$$CONTENT$$`` placeholder replaced by ``body``.

    Text outside the placeholder is left byte-for-byte unchanged. A template
    without the placeholder comes back untouched; callers check for it first
    with :func:`require_placeholder`.

    >>> compose("<p>hi</p>", "<main>$$CONTENT$$</main>")
    '<main><p>hi</p></main>'
    """
    return template.replace(PLACEHOLDER, body)


def require_placeholder(template: str, source: str = "template") -> str:
    """Return ``template`` unchanged, or raise when it lacks the placeholder.

    Parameters
    ----------
    template : str
        Candidate page template.
    source : str, optional
        Human-readable origin of the template used in the error message.

    Raises
    ------
    TemplateError
        If ``template`` does not contain ``$$CONTENT$$``.
    """
    if PLACEHOLDER not in template:
        msg = f"Template '{source}' does not include '{PLACEHOLDER}'."
        raise TemplateError(msg)
    return template


__all__ = ["PLACEHOLDER", "TemplateError", "compose", "require_placeholder"]
