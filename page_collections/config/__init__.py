"""Configuration models, option builders and the site file loader.

This subpackage turns loosely shaped input (admin-saved option mappings and
the standalone ``site.yaml`` file) into strongly typed dataclasses. The two
entry points are :func:`build_render_options`, which resolves a per-box
option mapping into :class:`RenderOptions`, and :func:`load_site_config`,
which parses a site file into a :class:`SiteConfig`.

Examples
--------
>>> from page_collections.config import build_render_options
>>> from page_collections.host import MarkupSanitizer
>>> build_render_options({}, MarkupSanitizer()).title_tag
'h4'
"""

from .loader import load_site_config
from .models import (
    InlineStyles,
    RenderOptions,
    SiteConfig,
    SiteConfigError,
    SiteSettings,
)
from .options import build_inline_styles, build_render_options

__all__ = [
    "InlineStyles",
    "RenderOptions",
    "SiteConfig",
    "SiteConfigError",
    "SiteSettings",
    "build_inline_styles",
    "build_render_options",
    "load_site_config",
]
