"""Typed dataclasses describing mdtransform configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


class ConfigError(ValueError):
    """Raised when the configuration file is invalid or incomplete."""


@dc.dataclass(slots=True)
class ServerConfig:
    """Listener settings for the request adapter."""

    host: str = "127.0.0.1"
    port: int = 8000
    root: Path | None = None
    parameter: str = "FILE"


@dc.dataclass(slots=True)
class RenderConfig:
    """Settings shared by the batch converter and the request adapter.

    Attributes
    ----------
    template_path : Path or None
        Page template containing ``$$CONTENT$$``; ``None`` selects the
        built-in template.
    pygments_style : str or None
        Pygments style for fenced code; ``None`` disables highlighting.
    server : ServerConfig
        Request adapter settings.
    """

    template_path: Path | None = None
    pygments_style: str | None = None
    server: ServerConfig = dc.field(default_factory=ServerConfig)

    def with_overrides(self, **overrides: object) -> RenderConfig:
        """Return a copy where every non-``None`` override replaces the stored value.

        Keys prefixed with ``server_`` target :class:`ServerConfig` fields.
        """
        top: dict[str, object] = {}
        server: dict[str, object] = {}
        for key, value in overrides.items():
            if value is None:
                continue
            if key.startswith("server_"):
                server[key.removeprefix("server_")] = value
            else:
                top[key] = value
        return dc.replace(self, server=dc.replace(self.server, **server), **top)


__all__ = ["ConfigError", "RenderConfig", "ServerConfig"]
