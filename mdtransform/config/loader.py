"""Load mdtransform YAML configuration and page templates."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from mdtransform._constants import DEFAULT_CONFIG_NAME, DEFAULT_TEMPLATE
from mdtransform.renderer.template import TemplateError, require_placeholder

from .models import ConfigError, RenderConfig, ServerConfig

logger = logging.getLogger(__name__)


def load_config(path: Path) -> RenderConfig:
    """Load the YAML configuration describing templates and server settings.

    Relative ``template`` and ``server.root`` entries are resolved against the
    directory holding the configuration file.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML file (for example, ``mdtransform.yaml``).

    Returns
    -------
    RenderConfig
        Parsed configuration with defaults applied for missing keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    ConfigError
        If the file cannot be read or parsed, the document is not a
        mapping, or a field has the wrong type.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_config(Path("mdtransform.yaml"))  # doctest: +SKIP
    >>> config.server.port  # doctest: +SKIP
    8000
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)
    if not path.is_file():
        msg = f"Configuration file '{path}' is not a regular file."
        raise ConfigError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except OSError as exc:
        msg = f"Cannot read configuration file '{path}': {exc}"
        raise ConfigError(msg) from exc
    except YAMLError as exc:
        msg = f"Cannot parse configuration file '{path}': {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise ConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.parent

    server_raw = raw.get("server") or {}
    if not isinstance(server_raw, dict):
        msg = f"'server' in '{path}' must be a mapping."
        raise ConfigError(msg)

    return RenderConfig(
        template_path=_optional_path(raw.get("template"), base_dir),
        pygments_style=_optional_str(raw.get("pygments_style")),
        server=_build_server_config(server_raw, base_dir),
    )


def resolve_config(path: Path | None) -> RenderConfig:
    """Load ``path``, or ``mdtransform.yaml`` from the working directory if present.

    An explicit ``path`` must exist; the implicit default file is optional and
    its absence yields the built-in defaults.
    """
    if path is not None:
        return load_config(path)
    default_path = Path(DEFAULT_CONFIG_NAME)
    if default_path.is_file():
        logger.debug("Using configuration file '%s'", default_path)
        return load_config(default_path)
    return RenderConfig()


def load_template(path: Path | None) -> str:
    """Return the page template stored at ``path``, or the built-in template.

    Raises
    ------
    TemplateError
        If the file cannot be read or does not include ``$$CONTENT$$``.
    """
    if path is None:
        return DEFAULT_TEMPLATE
    try:
        template = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Couldn't read template file '{path}': {exc}"
        raise TemplateError(msg) from exc
    return require_placeholder(template, str(path))


def _build_server_config(payload: typ.Mapping[str, typ.Any], base_dir: Path) -> ServerConfig:
    """Build a ServerConfig from the ``server`` mapping, keeping defaults for gaps."""
    base = ServerConfig()
    port = payload.get("port", base.port)
    if isinstance(port, bool) or not isinstance(port, int):
        msg = f"'server.port' must be an integer, got {port!r}."
        raise ConfigError(msg)
    return ServerConfig(
        host=_optional_str(payload.get("host")) or base.host,
        port=port,
        root=_optional_path(payload.get("root"), base_dir),
        parameter=_optional_str(payload.get("parameter")) or base.parameter,
    )


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_path(value: object | None, base_dir: Path) -> Path | None:
    """Return ``value`` as a path anchored at ``base_dir`` when relative."""
    text = _optional_str(value)
    if text is None:
        return None
    candidate = Path(text).expanduser()
    return candidate if candidate.is_absolute() else base_dir / candidate


__all__ = ["load_config", "load_template", "resolve_config"]
