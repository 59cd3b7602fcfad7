"""Load the standalone site file YAML into typed dataclasses."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ruamel.yaml import YAML

from .._constants import PLUGIN_KEY
from ..host import ContentRecord
from .helpers import _as_mapping, _optional_str
from .models import SiteConfig, SiteConfigError, SiteSettings

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML file describing site content, options and render choices.

    Parameters
    ----------
    path : Path
        Filesystem path to the site file (for example, ``site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration: base URLs, content records, option blobs keyed
        by plugin name, and the raw render options mapping.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section has the wrong shape, a content entry lacks an ``id`` or
        ``type``, or two entries share an ``id``.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from page_collections.config import load_site_config
    >>> site = load_site_config(Path("site.yaml"))  # doctest: +SKIP
    >>> site.membership  # doctest: +SKIP
    {'17': '5,3'}
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    site = _build_site_settings(_as_mapping(raw.get("site"), context="site"))
    records = _build_records(raw.get("content"))
    options = _build_options(_as_mapping(raw.get("options"), context="options"))
    render = _as_mapping(raw.get("render"), context="render")
    plugin_key = _optional_str(raw.get("plugin_key")) or PLUGIN_KEY

    return SiteConfig(
        site=site,
        records=records,
        options=options,
        render=render,
        plugin_key=plugin_key,
    )


def _build_site_settings(payload: cabc.Mapping[str, typ.Any]) -> SiteSettings:
    """Build the base URL settings, applying defaults."""
    base = SiteSettings()
    return SiteSettings(
        base_url=_optional_str(payload.get("base_url")) or base.base_url,
        admin_url=_optional_str(payload.get("admin_url")),
    )


def _build_records(payload: object | None) -> list[ContentRecord]:
    """Build content records, rejecting entries without an id or type."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        msg = "'content' must be a list of records."
        raise SiteConfigError(msg)

    records: list[ContentRecord] = []
    seen: set[str] = set()
    for index, entry in enumerate(payload):
        match entry:
            case {"id": record_id, "type": record_type} if (
                _optional_str(record_id) and _optional_str(record_type)
            ):
                pass
            case _:
                msg = f"Content entry #{index} requires an 'id' and a 'type'."
                raise SiteConfigError(msg)
        record = ContentRecord.from_mapping(entry)
        if record.id in seen:
            msg = f"Duplicate content id '{record.id}'."
            raise SiteConfigError(msg)
        seen.add(record.id)
        records.append(record)
    return records


def _build_options(
    payload: cabc.Mapping[str, typ.Any],
) -> dict[str, dict[str, typ.Any]]:
    """Normalize option blobs so nested keys are strings."""
    options: dict[str, dict[str, typ.Any]] = {}
    for key, blob in payload.items():
        mapping = _as_mapping(blob, context=f"options.{key}")
        options[str(key)] = {str(inner): value for inner, value in mapping.items()}
    return options


__all__ = ["load_site_config"]
