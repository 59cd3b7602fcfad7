"""Render resolved collection pages into an HTML fragment.

The renderer works in two steps. :class:`MarkupPlan` turns
:class:`~page_collections.config.RenderOptions` into concrete markup choices
(which list element, which item and title tags, which inline styles land on
which node). :class:`CollectionRenderer` then builds one
:class:`CollectionItem` per eligible page and feeds both into the
``collection.jinja`` template.

Typical usage pairs the renderer with a resolver:

>>> from page_collections.host import MarkupSanitizer, SiteUrlBuilder
>>> renderer = CollectionRenderer(SiteUrlBuilder("/"), MarkupSanitizer())
>>> renderer.render([], RenderOptions())
''

Templates are read from ``page_collections/templates`` unless a custom
directory is supplied. Rendering has no side effects beyond reading the
template file.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ._constants import NO_HTML, TRUNCATION_MARKER
from .config import RenderOptions

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .host import ContentRecord, TextSanitizer, UrlBuilder

LIST_TAGS = frozenset({"ul", "ol"})
COLLECTION_SPACING_STYLE = "margin:3rem 0;"
ITEM_SPACING_STYLE = "margin-bottom:2.75rem;"
LAST_ITEM_SPACING_STYLE = "margin-bottom:0;"
ALIGN_LEFT_STYLE = "text-align:left;"
READ_MORE_BUTTON_CLASS = "button basic"


def truncate_words(content: str, limit: int) -> tuple[str, bool]:
    """Return the first ``limit`` words of ``content`` and whether it was cut.

    Content within the limit is returned untouched. Truncated content is
    re-joined with single spaces.

    Examples
    --------
    >>> truncate_words("a b c d e", 3)
    ('a b c', True)
    >>> truncate_words("a b c d e", 10)
    ('a b c d e', False)
    """
    words = content.split()
    if len(words) <= limit:
        return content, False
    return " ".join(words[:limit]), True


@dc.dataclass(frozen=True, slots=True)
class MarkupPlan:
    """Concrete markup decisions derived from :class:`RenderOptions`."""

    list_tag: str | None
    item_tag: str
    title_tag: str
    wrapper_style: str
    item_style: str
    title_style: str
    read_more_class: str
    link_title: bool
    show_content: bool
    show_read_more: bool
    content_length: int
    read_more: str
    css_class: str
    element_id: str

    @classmethod
    def from_options(cls, options: RenderOptions) -> MarkupPlan:
        """Translate ``options`` into tag names and per-node styles."""
        styles = options.inline_styles
        list_tag = options.list_markup if options.list_markup in LIST_TAGS else None
        return cls(
            list_tag=list_tag,
            item_tag="li" if list_tag else options.list_markup,
            title_tag=options.title_tag,
            wrapper_style=COLLECTION_SPACING_STYLE if styles.collection_spacing else "",
            item_style=ITEM_SPACING_STYLE if styles.item_spacing else "",
            title_style=ALIGN_LEFT_STYLE if styles.align_titles_left else "",
            read_more_class=READ_MORE_BUTTON_CLASS if styles.read_more_button else "",
            link_title=options.link_title,
            show_content=options.show_content,
            show_read_more=options.show_content and bool(options.read_more),
            content_length=options.content_length,
            read_more=options.read_more,
            css_class=options.css_class,
            element_id=options.element_id,
        )

    def style_for(self, position: int, total: int) -> str:
        """Return the item style, dropping the bottom gap on the last item."""
        if self.item_style and position == total:
            return LAST_ITEM_SPACING_STYLE
        return self.item_style


@dc.dataclass(frozen=True, slots=True)
class CollectionItem:
    """Template data for a single rendered page."""

    position: int
    title: str
    url: str
    text: str
    truncated: bool
    style: str


class CollectionRenderer:
    """Render eligible pages as a page collection fragment."""

    def __init__(
        self,
        urls: UrlBuilder,
        sanitizer: TextSanitizer,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        urls : UrlBuilder
            Builds the link target of each page from its slug.
        sanitizer : TextSanitizer
            Strips markup from preview text before it is embedded.
        templates_dir : Path, optional
            Directory containing ``collection.jinja``. Defaults to
            ``page_collections/templates``.
        """
        self.urls = urls
        self.sanitizer = sanitizer
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("collection.jinja")

    def render(
        self,
        records: cabc.Sequence[ContentRecord],
        options: RenderOptions,
        *,
        depth: int = 0,
    ) -> str:
        """Render ``records`` into HTML, or return ``""`` when there are none.

        Parameters
        ----------
        records : Sequence[ContentRecord]
            Eligible pages in display order.
        options : RenderOptions
            Resolved display options.
        depth : int, optional
            Number of tabs prefixed to every emitted line.

        Returns
        -------
        str
            The fragment, newline terminated, or an empty string.
        """
        if not records:
            return ""
        plan = MarkupPlan.from_options(options)
        items = self.build_items(records, plan)
        html = self.template.render(plan=plan, items=items, marker=TRUNCATION_MARKER)
        return _indent(html, depth)

    def build_items(
        self, records: cabc.Sequence[ContentRecord], plan: MarkupPlan
    ) -> list[CollectionItem]:
        """Return numbered template items for ``records``."""
        total = len(records)
        items: list[CollectionItem] = []
        for position, record in enumerate(records, start=1):
            text, truncated = ("", False)
            if plan.show_content:
                text, truncated = truncate_words(record.content, plan.content_length)
                text = self.sanitizer.text(text, NO_HTML)
            items.append(
                CollectionItem(
                    position=position,
                    title=record.title,
                    url=self.urls.url(record.slug),
                    text=text,
                    truncated=truncated,
                    style=plan.style_for(position, total),
                )
            )
        return items


def _indent(html: str, depth: int) -> str:
    """Prefix each non-empty line with ``depth`` tabs and end with a newline."""
    prefix = "\t" * max(depth, 0)
    lines = [f"{prefix}{line}" if line else line for line in html.splitlines()]
    return "\n".join(lines) + "\n"


__all__ = [
    "CollectionItem",
    "CollectionRenderer",
    "MarkupPlan",
    "truncate_words",
]
