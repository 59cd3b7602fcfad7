"""Helpers for editing collection membership inside a site file.

The membership mapping lives under ``options.<plugin_key>`` in the site YAML.
``assign_collection_members`` rewrites a single collection's member string in
place using ruamel's round-trip mode, so comments, key order and quoting
elsewhere in the file survive the edit. The stored value is always the
normalized form produced by :func:`page_collections.resolver.format_member_ids`.

Example
-------
.. code-block:: python

    from pathlib import Path
    from page_collections.membership import assign_collection_members

    stored = assign_collection_members(
        config_path=Path("site.yaml"), collection_id="17", members="5, 3, 5"
    )
    print(stored)  # "5,3"
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from ._constants import PLUGIN_KEY
from .resolver import format_member_ids, parse_member_ids

if typ.TYPE_CHECKING:
    from pathlib import Path


class MembershipConfigError(ValueError):
    """Raised when the membership block of a site file cannot be updated."""


def assign_collection_members(
    *,
    config_path: Path,
    collection_id: object,
    members: str | cabc.Iterable[object],
) -> str:
    """Store ``members`` as the member list of ``collection_id``.

    Parameters
    ----------
    config_path : Path
        Site file to update in place.
    collection_id : object
        Collection whose entry is written. An existing entry whose key has the
        same text (``17`` or ``"17"``) is updated rather than duplicated.
    members : str or Iterable[object]
        Comma-separated string or sequence of page IDs. An empty result removes
        the entry.

    Returns
    -------
    str
        The normalized member string that was stored (``""`` when removed).

    Raises
    ------
    MembershipConfigError
        If the document, its ``options`` block, or the membership block is not
        a mapping.
    """
    if isinstance(members, str):
        normalized = format_member_ids(parse_member_ids(members))
    else:
        normalized = format_member_ids(members)

    yaml = _build_roundtrip_yaml()
    with config_path.open("r", encoding="utf-8") as handle:
        document = yaml.load(handle) or CommentedMap()
    if not isinstance(document, CommentedMap):
        msg = "Top-level configuration must be a mapping"
        raise MembershipConfigError(msg)

    plugin_key = str(document.get("plugin_key") or PLUGIN_KEY)
    options = _ensure_mapping(document, "options")
    block = _ensure_mapping(options, plugin_key)
    key = _find_key(block, collection_id)

    if normalized:
        block[key] = normalized
    elif key in block:
        del block[key]

    with config_path.open("w", encoding="utf-8") as handle:
        yaml.dump(document, handle)

    return normalized


def _build_roundtrip_yaml() -> YAML:
    yaml = YAML()
    yaml.preserve_quotes = True
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def _ensure_mapping(parent: CommentedMap, key: str) -> CommentedMap:
    value = parent.get(key)
    if value is None:
        value = CommentedMap()
        parent[key] = value
        return value
    if not isinstance(value, CommentedMap):
        msg = f"'{key}' must be a mapping"
        raise MembershipConfigError(msg)
    return value


def _find_key(block: CommentedMap, collection_id: object) -> object:
    wanted = str(collection_id).strip()
    for existing in block:
        if str(existing).strip() == wanted:
            return existing
    return wanted


__all__ = ["MembershipConfigError", "assign_collection_members"]
