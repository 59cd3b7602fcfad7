"""Translate raw per-box option mappings into :class:`RenderOptions`."""

from __future__ import annotations

import typing as typ

from .._constants import (
    DEFAULT_LIST_MARKUP,
    DEFAULT_TITLE_TAG,
    INLINE_STYLE_TOGGLES,
    LIST_MARKUPS,
    NO_HTML,
    TITLE_TAGS,
)
from .helpers import _choice, _coerce_content_length, _flag, _optional_str, _ticked
from .models import InlineStyles, RenderOptions

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from ..host import TextSanitizer


def build_render_options(
    payload: cabc.Mapping[str, typ.Any] | None,
    sanitizer: TextSanitizer,
) -> RenderOptions:
    """Build render options from the admin-saved option mapping.

    Parameters
    ----------
    payload : Mapping[str, Any] or None
        Raw options as saved by the host's options screen. Keys match the
        fields declared by :func:`page_collections.admin.html_options`.
        Missing or malformed values fall back to their defaults.
    sanitizer : TextSanitizer
        Filter applied to the free-form ``read_more``, ``class`` and ``id``
        strings before they are stored on the result.

    Returns
    -------
    RenderOptions
        Fully resolved options; never raises for bad input.

    Examples
    --------
    >>> from page_collections.host import MarkupSanitizer
    >>> opts = build_render_options(
    ...     {"list_markup": "ol", "inline_styles": {"item_spacing": "1"}},
    ...     MarkupSanitizer(),
    ... )
    >>> opts.list_markup, opts.inline_styles.item_spacing
    ('ol', True)
    """
    raw = dict(payload or {})
    return RenderOptions(
        list_markup=_choice(raw.get("list_markup"), LIST_MARKUPS, DEFAULT_LIST_MARKUP),
        title_tag=_choice(raw.get("title_tag"), TITLE_TAGS, DEFAULT_TITLE_TAG),
        inline_styles=build_inline_styles(raw.get("inline_styles")),
        link_title=_flag(raw.get("link_title")),
        show_content=_flag(raw.get("show_content")),
        content_length=_coerce_content_length(raw.get("content_length")),
        read_more=_sanitized(raw.get("read_more"), sanitizer),
        css_class=_sanitized(raw.get("class"), sanitizer),
        element_id=_sanitized(raw.get("id"), sanitizer),
    )


def build_inline_styles(value: object | None) -> InlineStyles:
    """Return the style toggles ticked in ``value``; unknown names are ignored."""
    ticked = _ticked(value)
    return InlineStyles(**{name: name in ticked for name in INLINE_STYLE_TOGGLES})


def _sanitized(value: object | None, sanitizer: TextSanitizer) -> str:
    text = _optional_str(value)
    if text is None:
        return ""
    return sanitizer.text(text, NO_HTML).strip()


__all__ = ["build_inline_styles", "build_render_options"]
