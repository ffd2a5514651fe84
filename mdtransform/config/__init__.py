"""Load and validate mdtransform configuration.

This subpackage parses the optional ``mdtransform.yaml`` file into typed
dataclasses (:class:`RenderConfig`, :class:`ServerConfig`) and reads page
templates, checking that they carry the ``$$CONTENT$$`` placeholder before any
document is rendered.

Examples
--------
>>> from pathlib import Path
>>> from mdtransform.config import load_config, load_template
>>> config = load_config(Path("mdtransform.yaml"))  # doctest: +SKIP
>>> template = load_template(config.template_path)  # doctest: +SKIP
"""

from mdtransform.renderer.template import TemplateError

from .loader import load_config, load_template, resolve_config
from .models import ConfigError, RenderConfig, ServerConfig

__all__ = [
    "ConfigError",
    "RenderConfig",
    "ServerConfig",
    "TemplateError",
    "load_config",
    "load_template",
    "resolve_config",
]
