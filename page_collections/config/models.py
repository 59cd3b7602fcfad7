"""Typed dataclasses describing page collection configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .._constants import (
    DEFAULT_CONTENT_LENGTH,
    DEFAULT_LIST_MARKUP,
    DEFAULT_TITLE_TAG,
    PLUGIN_KEY,
)

if typ.TYPE_CHECKING:
    from ..host import ContentRecord


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class InlineStyles:
    """Independent inline style toggles; each defaults to off."""

    align_titles_left: bool = False
    collection_spacing: bool = False
    item_spacing: bool = False
    read_more_button: bool = False


@dc.dataclass(frozen=True, slots=True)
class RenderOptions:
    """Display configuration attached to a collection's display instance.

    Attributes
    ----------
    list_markup : str
        One of ``ul``, ``ol``, ``div`` or ``article``.
    title_tag : str
        One of ``h1`` to ``h6`` or ``span``.
    inline_styles : InlineStyles
        Named style toggles applied at specific nodes.
    link_title : bool
        Wrap item titles in a link to the page.
    show_content : bool
        Emit a truncated content preview for each item.
    content_length : int
        Word limit for the preview, never negative.
    read_more : str
        Sanitized "read more" label; empty disables the link.
    css_class : str
        Sanitized extra class for the collection wrapper.
    element_id : str
        Sanitized ``id`` attribute for the collection wrapper.
    """

    list_markup: str = DEFAULT_LIST_MARKUP
    title_tag: str = DEFAULT_TITLE_TAG
    inline_styles: InlineStyles = dc.field(default_factory=InlineStyles)
    link_title: bool = False
    show_content: bool = False
    content_length: int = DEFAULT_CONTENT_LENGTH
    read_more: str = ""
    css_class: str = ""
    element_id: str = ""


@dc.dataclass(slots=True)
class SiteSettings:
    """Base URLs for the standalone host."""

    base_url: str = "/"
    admin_url: str | None = None


@dc.dataclass(slots=True)
class SiteConfig:
    """Everything the standalone host needs to serve a collection render."""

    site: SiteSettings
    records: list[ContentRecord]
    options: dict[str, dict[str, typ.Any]]
    render: dict[str, typ.Any]
    plugin_key: str = PLUGIN_KEY

    @property
    def membership(self) -> dict[str, typ.Any]:
        """Return the raw membership mapping stored under the plugin key."""
        return self.options.get(self.plugin_key, {})


__all__ = [
    "InlineStyles",
    "RenderOptions",
    "SiteConfig",
    "SiteConfigError",
    "SiteSettings",
]
