"""Admin-facing declarations for the page collection plugin.

The host CMS builds its option screens from field declarations. This module
produces those declarations: the ``page-collection`` content type, one text
field per live collection on the site options screen, and the display option
fields shown for each collection box in the template editor.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from html import escape

from ._constants import COLLECTION_TYPE, INLINE_STYLE_TOGGLES, LIST_MARKUPS, TITLE_TAGS

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .host import ContentRecord, UrlBuilder

CALLOUT_STYLE = "max-width:720px"
MEMBER_PLACEHOLDER = "3,5"

LIST_MARKUP_LABELS: dict[str, str] = {
    "ul": "Unordered &lt;li&gt; Items",
    "ol": "Ordered &lt;li&gt; Items",
    "div": "&lt;div&gt; Containers",
    "article": "&lt;article&gt; Containers",
}
INLINE_STYLE_LABELS: dict[str, str] = {
    "align_titles_left": "Force left alignment of titles",
    "collection_spacing": "Add space above and below collection",
    "item_spacing": "Add spacing between items",
    "read_more_button": "Style 'Read More' link as 'Basic' button",
}


@dc.dataclass(slots=True)
class OptionField:
    """A single field on a host options screen.

    Attributes
    ----------
    type : str
        Host field type: ``text``, ``select``, ``checkbox`` or ``custom``.
    label : str | None
        Visible label.
    tooltip : str | None
        Help text shown next to the field.
    placeholder : str | None
        Placeholder for text inputs.
    width : str | None
        Host width hint (``small``, ``medium``, ``large``).
    description : str | None
        HTML shown beneath the field.
    html : str | None
        Raw HTML body of a ``custom`` field.
    options : dict[str, str]
        Choices of a ``select`` or ``checkbox`` field.
    """

    type: str
    label: str | None = None
    tooltip: str | None = None
    placeholder: str | None = None
    width: str | None = None
    description: str | None = None
    html: str | None = None
    options: dict[str, str] = dc.field(default_factory=dict)

    def as_dict(self) -> dict[str, typ.Any]:
        """Return the declaration as a plain mapping, omitting unset keys."""
        return {
            field.name: value
            for field in dc.fields(self)
            if (value := getattr(self, field.name)) not in (None, {})
        }


def content_types(name: str = "Page Collection") -> dict[str, dict[str, typ.Any]]:
    """Declare the ``page-collection`` content type.

    Creating a collection works like creating a page and gives the collection
    its own template in the host's template editor.
    """
    return {
        COLLECTION_TYPE: {
            "name": name,
            "environment": ["theme"],
            "url": True,
            "fields": ["title", "page-url", "status", "content"],
            "groups": {"page-url": ["slug", "arrow", "url"]},
        }
    }


def page_reference_labels(pages: cabc.Iterable[ContentRecord]) -> dict[str, str]:
    """Map page IDs to ``"<id> - <title>"`` labels."""
    return {page.id: f"{page.id} - {page.title}" for page in pages}


def site_options(
    collections: cabc.Sequence[ContentRecord],
    pages: cabc.Iterable[ContentRecord],
    urls: UrlBuilder,
) -> dict[str, OptionField]:
    """Build the site options screen: one member-list field per collection.

    Parameters
    ----------
    collections : Sequence[ContentRecord]
        Live ``page-collection`` records.
    pages : Iterable[ContentRecord]
        Live pages listed in the reference block at the bottom of the screen.
    urls : UrlBuilder
        Builds admin links and the public URL of each collection.

    Returns
    -------
    dict[str, OptionField]
        Field declarations keyed by option name; collection fields are keyed
        by collection ID so saved values form the membership mapping.
    """
    content_url = escape(urls.admin_url("content"), quote=True)
    if not collections:
        return {
            "no-collections": OptionField(
                type="custom",
                html=(
                    f'<div class="callout note" style="{CALLOUT_STYLE}">'
                    '<p style="margin-bottom: .25rem;">Please create a new Page '
                    f'Collection from the <a href="{content_url}">Content Types</a> '
                    "page to get started.</p></div>"
                ),
            )
        }

    editor_url = escape(urls.admin_url("theme/editor"), quote=True)
    fields: dict[str, OptionField] = {
        "description": OptionField(
            type="custom",
            html=(
                f'<div style="{CALLOUT_STYLE}">'
                '<p style="margin-bottom: 1.25rem;">Each field represents a Page '
                "Collection. To include pages in a collection, enter "
                "comma-separated page IDs. For example, to include pages with IDs "
                "3 and 5, enter <code>3,5</code>.</p>"
                "<p>For reference, a list of live pages and their IDs are at the "
                "bottom of this page. To create more Page Collections, visit the "
                f'<a href="{content_url}">Content Types</a> page. Control the '
                "display of your Page Collections from the "
                f'<a href="{editor_url}">Template Editor</a>.</p></div>'
            ),
        )
    }
    for collection in collections:
        collection_url = escape(urls.url(collection.slug), quote=True)
        fields[collection.id] = OptionField(
            type="text",
            label=collection.title,
            tooltip="Enter comma-separated page IDs to include in this collection.",
            placeholder=MEMBER_PLACEHOLDER,
            width="large",
            description=(
                f"Page Collection ID: {escape(collection.id)} | "
                f'<a href="{collection_url}" target="_blank">View Page Collection</a>'
            ),
        )

    items = "".join(
        f'<li style="margin:0;">{escape(label)}</li>'
        for label in page_reference_labels(pages).values()
    )
    fields["page-collection-list"] = OptionField(
        type="custom",
        html=(
            '<div id="page-reference" style="max-width:664px;margin-top:2rem;">'
            "<strong>Live Page Reference:</strong>"
            f'<ul style="margin:0;padding:0;">{items}</ul>'
            "</div>"
        ),
    )
    return fields


def default_html_options() -> dict[str, OptionField]:
    """Return the host's generic wrapper ``class``/``id`` fields."""
    return {
        "id": OptionField(type="text", label="HTML id", width="medium"),
        "class": OptionField(type="text", label="HTML class", width="medium"),
    }


def html_options(
    base_html: cabc.Mapping[str, OptionField] | None = None,
) -> dict[str, OptionField]:
    """Declare the display options of a collection box.

    The host's generic ``class``/``id`` fields are merged last, so they
    replace the plugin's own ``class`` declaration while keeping its position.
    """
    base = {
        key: dc.replace(field)
        for key, field in (base_html or default_html_options()).items()
    }
    if "class" in base:
        base["class"].tooltip = (
            "If you would like to add to the existing <code>page-collection</code> "
            "wrapping class, you can do so here. This is useful for adding custom "
            "styles to the collection wrapper."
        )
    if "id" in base:
        base["id"].tooltip = (
            "If you would like to add an ID to the collection wrapper, you can do "
            "so here. Note that the wrapper already has a <code>page-collection</code> "
            "class."
        )

    options: dict[str, OptionField] = {
        "list_markup": OptionField(
            type="select",
            label="List Markup",
            tooltip="Determine the HTML markup for collection.",
            options={key: LIST_MARKUP_LABELS[key] for key in LIST_MARKUPS},
        ),
        "title_tag": OptionField(
            type="select",
            label="Item Title Tags",
            tooltip="Select the HTML tag for item titles.",
            options={tag: tag for tag in TITLE_TAGS},
        ),
        "inline_styles": OptionField(
            type="checkbox",
            label="Inline Styles",
            tooltip=(
                "Make small, convenient adjustments to the collection's "
                "appearance using inline styles."
            ),
            options={key: INLINE_STYLE_LABELS[key] for key in INLINE_STYLE_TOGGLES},
        ),
        "link_title": OptionField(
            type="checkbox",
            label="Link Item Titles",
            tooltip="If checked, item titles will be linked to their respective pages.",
            options={"on": "Link item titles to pages"},
        ),
        "show_content": OptionField(
            type="checkbox",
            label="Show Content",
            tooltip=(
                "If checked, a truncated version of the page content will be "
                "displayed."
            ),
            options={"on": "Show truncated page content"},
        ),
        "content_length": OptionField(
            type="text",
            label="Content Length (word count)",
            tooltip="Number of words to display from the page content.",
            width="small",
        ),
        "read_more": OptionField(
            type="text",
            label="'Read More' Link Text",
            tooltip=(
                "Add a 'Read More' link if truncated content is shown. Leave blank "
                "(or disable 'Show Content') for no link."
            ),
            width="medium",
        ),
        "class": OptionField(
            type="text",
            label="Custom Class",
            tooltip=(
                "Add a custom class to the page collection wrapper for additional "
                "styling."
            ),
            width="medium",
        ),
    }
    options.update(base)
    return options


__all__ = [
    "OptionField",
    "content_types",
    "default_html_options",
    "html_options",
    "page_reference_labels",
    "site_options",
]
