"""Common literal values used across page_collections.

These constants keep content-type names, option keys, and rendering defaults
centralized so the resolver, renderer, admin declarations, and tests import
the same values without drifting. Intended for internal use within the
page_collections package.

Examples
--------
>>> from page_collections import _constants
>>> _constants.PLUGIN_KEY
'PageCollections'
>>> _constants.TRUNCATION_MARKER.strip()
'[...]'
"""

PLUGIN_KEY = "PageCollections"
COLLECTION_TYPE = "page-collection"
PAGE_TYPE = "page"
LIVE_STATUS = "live"

DEFAULT_LIST_MARKUP = "ul"
DEFAULT_TITLE_TAG = "h4"
DEFAULT_CONTENT_LENGTH = 20
TRUNCATION_MARKER = " [...]"
NO_HTML = "no-html"

LIST_MARKUPS = ("ul", "ol", "div", "article")
TITLE_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6", "span")
INLINE_STYLE_TOGGLES = (
    "align_titles_left",
    "collection_spacing",
    "item_spacing",
    "read_more_button",
)
