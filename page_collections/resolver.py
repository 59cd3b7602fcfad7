"""Resolve a collection's membership string into eligible page records.

Editors type each collection's members as a comma-separated list of page IDs.
This module parses that string once into an ordered, de-duplicated
:data:`MemberIds` tuple and then filters the candidates against the host
content store: a candidate survives only when it exists, is a ``page`` and is
``live``. Anything else is dropped without raising, so a stale or mistyped ID
never breaks the page render.

Examples
--------
>>> parse_member_ids("5,3,5,3")
('5', '3')
>>> format_member_ids(("5", "3"))
'5,3'
"""

from __future__ import annotations

import typing as typ

from ._constants import LIVE_STATUS, PAGE_TYPE, PLUGIN_KEY

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .host import ContentRecord, ContentStore, OptionStore

MemberIds = tuple[str, ...]


def parse_member_ids(raw: object | None) -> MemberIds:
    """Split a comma-separated member string into unique IDs in typed order.

    Segments are stripped of surrounding whitespace and empty segments are
    dropped. The first occurrence of a repeated ID keeps its position.
    """
    if raw is None:
        return ()
    seen: dict[str, None] = {}
    for segment in str(raw).split(","):
        member = segment.strip()
        if member:
            seen.setdefault(member, None)
    return tuple(seen)


def format_member_ids(member_ids: cabc.Iterable[object]) -> str:
    """Serialize member IDs back into the stored comma-separated form."""
    return ",".join(parse_member_ids(",".join(str(item) for item in member_ids)))


def is_eligible(record: ContentRecord | None) -> bool:
    """Return whether ``record`` exists, is a page and is live."""
    return (
        record is not None
        and record.type == PAGE_TYPE
        and record.status == LIVE_STATUS
    )


class CollectionResolver:
    """Look up and filter the pages collected under a collection ID."""

    def __init__(
        self,
        content: ContentStore,
        options: OptionStore,
        *,
        plugin_key: str = PLUGIN_KEY,
    ) -> None:
        """Bind the resolver to the host's content and option stores.

        Parameters
        ----------
        content : ContentStore
            Store queried once per candidate ID.
        options : OptionStore
            Store holding the membership mapping under ``plugin_key``.
        plugin_key : str, optional
            Option key of the membership mapping. Defaults to
            ``"PageCollections"``. Sites migrated from the earlier plugin keep
            their memberships under ``"SCHD_Page_Collections"`` and pass that
            key here.
        """
        self.content = content
        self.options = options
        self.plugin_key = plugin_key

    def membership(self) -> dict[str, str]:
        """Return the membership mapping with collection IDs as strings."""
        stored = self.options.option(self.plugin_key, {}) or {}
        return {
            str(key).strip(): "" if value is None else str(value)
            for key, value in stored.items()
        }

    def candidates(self, collection_id: object) -> MemberIds:
        """Return the parsed, unfiltered member IDs of ``collection_id``."""
        membership = self.membership()
        if not membership:
            return ()
        raw = membership.get(str(collection_id).strip())
        return parse_member_ids(raw)

    def resolve(self, collection_id: object) -> tuple[ContentRecord, ...]:
        """Return the eligible pages of ``collection_id`` in display order.

        An unknown collection, an empty membership mapping, or a collection
        whose members are all missing, unpublished or of another type each
        resolve to an empty tuple.
        """
        eligible: list[ContentRecord] = []
        for member_id in self.candidates(collection_id):
            record = self.content.get_by_id(member_id)
            if not is_eligible(record):
                continue
            eligible.append(record)
        return tuple(eligible)


__all__ = [
    "CollectionResolver",
    "MemberIds",
    "format_member_ids",
    "is_eligible",
    "parse_member_ids",
]
