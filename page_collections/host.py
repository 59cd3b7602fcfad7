"""Read-only collaborators supplied by the host CMS.

The plugin never reaches for global host state. Instead the content store,
option store, URL builder, and text sanitizer are passed in as objects that
satisfy the protocols below. In-memory implementations back the standalone
CLI and the test suite; a real CMS adapter only needs to provide the same
four methods.

Examples
--------
>>> store = InMemoryContentStore(
...     [ContentRecord(id="5", type="page", title="Hello", slug="hello")]
... )
>>> store.get_by_id(5).title
'Hello'
>>> SiteUrlBuilder("https://example.com/").url("hello")
'https://example.com/hello'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from markupsafe import Markup

from ._constants import NO_HTML

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(frozen=True, slots=True)
class ContentRecord:
    """A content entry owned by the host store.

    Attributes
    ----------
    id : str
        Stable identifier, normalized to a string.
    type : str
        Content type name (``"page"``, ``"page-collection"``, ...).
    title : str
        Human-readable title.
    slug : str
        URL path segment used to build the record's public URL.
    status : str
        Publication status, ``"draft"`` or ``"live"``.
    content : str
        Body text; only used for the preview block.
    """

    id: str
    type: str
    title: str = ""
    slug: str = ""
    status: str = "draft"
    content: str = ""

    @classmethod
    def from_mapping(cls, payload: cabc.Mapping[str, typ.Any]) -> ContentRecord:
        """Build a record from a loosely typed mapping such as a YAML entry."""
        return cls(
            id=str(payload["id"]).strip(),
            type=str(payload.get("type") or ""),
            title=str(payload.get("title") or ""),
            slug=str(payload.get("slug") or ""),
            status=str(payload.get("status") or "draft"),
            content=str(payload.get("content") or ""),
        )


class ContentStore(typ.Protocol):
    """Read accessors for host content records."""

    def get_by_id(self, record_id: object) -> ContentRecord | None:
        """Return the record with ``record_id`` or ``None`` when absent."""
        ...

    def get_where(self, **filters: str) -> list[ContentRecord]:
        """Return records whose attributes equal every given filter value."""
        ...


class OptionStore(typ.Protocol):
    """Site-wide option blobs keyed by plugin name."""

    def option(
        self, key: str, default: cabc.Mapping[str, typ.Any] | None = None
    ) -> cabc.Mapping[str, typ.Any]:
        """Return the stored option mapping for ``key``."""
        ...


class UrlBuilder(typ.Protocol):
    """Canonical URL construction for public and admin pages."""

    def url(self, slug: str) -> str:
        """Return the public URL for a record slug."""
        ...

    def admin_url(self, path: str) -> str:
        """Return the URL of an admin screen."""
        ...


class TextSanitizer(typ.Protocol):
    """Filter applied to admin-entered strings before they reach the page."""

    def text(self, value: str, mode: str = NO_HTML) -> str:
        """Return ``value`` filtered according to ``mode``."""
        ...


class InMemoryContentStore:
    """Content store backed by an ordered list of records."""

    def __init__(self, records: cabc.Iterable[ContentRecord] = ()) -> None:
        self._records: dict[str, ContentRecord] = {}
        for record in records:
            self._records[record.id] = record

    def __len__(self) -> int:
        return len(self._records)

    def get_by_id(self, record_id: object) -> ContentRecord | None:
        """Return the record with ``record_id``, comparing identifiers as text."""
        if record_id is None:
            return None
        return self._records.get(str(record_id).strip())

    def get_where(self, **filters: str) -> list[ContentRecord]:
        """Return records matching every filter, in insertion order."""
        return [
            record
            for record in self._records.values()
            if all(getattr(record, name, None) == value for name, value in filters.items())
        ]


class MappingOptionStore:
    """Option store over a plain mapping of option blobs."""

    def __init__(
        self, options: cabc.Mapping[str, cabc.Mapping[str, typ.Any]] | None = None
    ) -> None:
        self._options = dict(options or {})

    def option(
        self, key: str, default: cabc.Mapping[str, typ.Any] | None = None
    ) -> cabc.Mapping[str, typ.Any]:
        """Return the option blob for ``key`` or ``default`` (empty when unset)."""
        value = self._options.get(key)
        if value is None:
            return default if default is not None else {}
        return value


class SiteUrlBuilder:
    """Join slugs onto a site base URL."""

    def __init__(self, base_url: str = "/", admin_url: str | None = None) -> None:
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        admin_base = admin_url or f"{self.base_url}admin/"
        self.admin_base = admin_base if admin_base.endswith("/") else f"{admin_base}/"

    def url(self, slug: str) -> str:
        """Return the public URL for ``slug``."""
        return f"{self.base_url}{slug.lstrip('/')}"

    def admin_url(self, path: str) -> str:
        """Return the admin URL for ``path``."""
        return f"{self.admin_base}{path.lstrip('/')}"


class MarkupSanitizer:
    """Strip markup from free-form text using :mod:`markupsafe`."""

    def text(self, value: str, mode: str = NO_HTML) -> str:
        """Return ``value`` with tags and comments removed.

        Parameters
        ----------
        value : str
            Raw admin-entered or stored text.
        mode : str, optional
            Filter mode; only ``"no-html"`` is supported.

        Raises
        ------
        ValueError
            If ``mode`` names an unsupported filter.
        """
        if mode != NO_HTML:
            msg = f"Unsupported text filter mode '{mode}'."
            raise ValueError(msg)
        if not value:
            return ""
        return str(Markup(value).striptags())


__all__ = [
    "ContentRecord",
    "ContentStore",
    "InMemoryContentStore",
    "MappingOptionStore",
    "MarkupSanitizer",
    "OptionStore",
    "SiteUrlBuilder",
    "TextSanitizer",
    "UrlBuilder",
]
