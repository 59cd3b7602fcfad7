"""Plugin facade binding the collection components to a host CMS.

:class:`PageCollectionsPlugin` is the object a host registers. It receives the
host's read-only collaborators once and exposes the hooks the host calls:
content type and option declarations for the admin screens, and
:meth:`PageCollectionsPlugin.html` for the frontend.

Examples
--------
>>> from page_collections.host import (
...     ContentRecord,
...     InMemoryContentStore,
...     MappingOptionStore,
...     MarkupSanitizer,
...     SiteUrlBuilder,
... )
>>> plugin = PageCollectionsPlugin(
...     content=InMemoryContentStore(
...         [ContentRecord(id="5", type="page", title="Hi", slug="hi", status="live")]
...     ),
...     options=MappingOptionStore({"PageCollections": {"17": "5"}}),
...     urls=SiteUrlBuilder("/"),
...     sanitizer=MarkupSanitizer(),
... )
>>> "pc-item-1" in plugin.html(17, {})
True
"""

from __future__ import annotations

import typing as typ

from . import admin
from ._constants import COLLECTION_TYPE, LIVE_STATUS, PAGE_TYPE, PLUGIN_KEY
from .config import build_render_options
from .host import (
    InMemoryContentStore,
    MappingOptionStore,
    MarkupSanitizer,
    SiteUrlBuilder,
)
from .renderer import CollectionRenderer
from .resolver import CollectionResolver

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import SiteConfig
    from .host import ContentRecord, ContentStore, OptionStore, TextSanitizer, UrlBuilder


class PageCollectionsPlugin:
    """Curated page lists rendered from editor-maintained ID strings."""

    title = "Page Collection"
    name = "Page Collection"
    type = "box"

    def __init__(
        self,
        *,
        content: ContentStore,
        options: OptionStore,
        urls: UrlBuilder,
        sanitizer: TextSanitizer,
        plugin_key: str = PLUGIN_KEY,
        templates_dir: Path | None = None,
    ) -> None:
        """Wire the plugin to the host collaborators.

        Parameters
        ----------
        content : ContentStore
            Host content records (pages and collections).
        options : OptionStore
            Site-wide option store holding the membership mapping.
        urls : UrlBuilder
            Public and admin URL builder.
        sanitizer : TextSanitizer
            Filter for admin-entered strings and preview text.
        plugin_key : str, optional
            Option key of the membership mapping.
        templates_dir : Path, optional
            Override for the renderer's template directory.
        """
        self.content = content
        self.options = options
        self.urls = urls
        self.sanitizer = sanitizer
        self.resolver = CollectionResolver(content, options, plugin_key=plugin_key)
        self.renderer = CollectionRenderer(
            urls, sanitizer, templates_dir=templates_dir
        )

    @classmethod
    def from_site_config(
        cls, site: SiteConfig, *, templates_dir: Path | None = None
    ) -> PageCollectionsPlugin:
        """Build a plugin over the in-memory host described by a site file."""
        return cls(
            content=InMemoryContentStore(site.records),
            options=MappingOptionStore(site.options),
            urls=SiteUrlBuilder(site.site.base_url, site.site.admin_url),
            sanitizer=MarkupSanitizer(),
            plugin_key=site.plugin_key,
            templates_dir=templates_dir,
        )

    def content_types(self) -> dict[str, dict[str, typ.Any]]:
        """Return the ``page-collection`` content type declaration."""
        return admin.content_types(self.title)

    def site_options(self) -> dict[str, admin.OptionField]:
        """Return the membership fields for the site options screen."""
        return admin.site_options(
            self.get_page_collections_list(), self._live_pages(), self.urls
        )

    def html_options(
        self, base_html: cabc.Mapping[str, admin.OptionField] | None = None
    ) -> dict[str, admin.OptionField]:
        """Return the display option fields of a collection box."""
        return admin.html_options(base_html)

    def get_page_collections_list(self) -> list[ContentRecord]:
        """Return all live page collections."""
        return self.content.get_where(type=COLLECTION_TYPE, status=LIVE_STATUS)

    def get_pages_list(self) -> dict[str, str]:
        """Return live pages as ``{id: "<id> - <title>"}``."""
        return admin.page_reference_labels(self._live_pages())

    def html(
        self,
        current_page_id: object,
        box_options: cabc.Mapping[str, typ.Any] | None = None,
        *,
        depth: int = 0,
    ) -> str:
        """Render the collection attached to ``current_page_id``.

        Parameters
        ----------
        current_page_id : object
            Identifier of the page being rendered.
        box_options : Mapping[str, Any], optional
            Raw display options saved for this collection box.
        depth : int, optional
            Indentation depth, in tabs, of the emitted fragment.

        Returns
        -------
        str
            The HTML fragment, or ``""`` when the page is not a collection or
            none of its members is an eligible page.
        """
        records = self.resolver.resolve(current_page_id)
        if not records:
            return ""
        options = build_render_options(box_options, self.sanitizer)
        return self.renderer.render(records, options, depth=depth)

    def _live_pages(self) -> list[ContentRecord]:
        return self.content.get_where(type=PAGE_TYPE, status=LIVE_STATUS)


__all__ = ["PageCollectionsPlugin"]
