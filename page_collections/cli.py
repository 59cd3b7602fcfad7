"""Cyclopts CLI entrypoint for rendering and maintaining page collections.

The ``page-collections`` console script works against a standalone site file
(``site.yaml``) that stands in for the host CMS: it lists content records,
stores the membership mapping under ``options``, and carries the display
options of the collection box under ``render``. Typical usage involves
``page-collections render --page 17`` to preview a collection's markup and
``page-collections assign --page 17 --members 5,3`` to edit its members.

Examples
--------
Render a collection to stdout:

>>> from page_collections.cli import app
>>> app(["render", "--page", "17"])  # doctest: +SKIP

Write the fragment to a file instead:

>>> app(
...     ["render", "--page", "17", "--output", "dist/featured.html"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import PAGE_TYPE
from .config import load_site_config
from .membership import assign_collection_members
from .plugin import PageCollectionsPlugin
from .resolver import is_eligible

DEFAULT_CONFIG = Path("site.yaml")

app = App(
    name="page-collections",
    config=cyclopts.config.Env("PAGE_COLLECTIONS_", command=False),  # type: ignore[unknown-argument]
)

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site file", env_var="PAGE_COLLECTIONS_CONFIG")
]
PageOption = typ.Annotated[str, Parameter(help="Collection (page) identifier")]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_plugin(config: Path) -> PageCollectionsPlugin:
    site = load_site_config(config)
    return PageCollectionsPlugin.from_site_config(site)


@app.command(help="Render a page collection as an HTML fragment.")
def render(
    *,
    page: PageOption,
    config: ConfigOption = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None, Parameter(help="Write the fragment to this file")
    ] = None,
    depth: typ.Annotated[int, Parameter(help="Indent every line by N tabs")] = 0,
) -> None:
    """Render the collection attached to ``page`` using the file's options.

    Parameters
    ----------
    page : str
        Identifier of the collection page to render.
    config : Path, optional
        Site file path (overridable via ``PAGE_COLLECTIONS_CONFIG``).
    output : Path or None, optional
        Destination file. When ``None`` the fragment is printed to stdout.
    depth : int, optional
        Indentation depth of the fragment, in tabs.

    Returns
    -------
    None
        Prints the fragment, or writes it and prints the written path. An
        empty collection prints nothing and writes an empty file.
    """
    site = load_site_config(config)
    plugin = PageCollectionsPlugin.from_site_config(site)
    html = plugin.html(page, site.render, depth=depth)
    if output is None:
        print(html, end="")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(name="list", help="List live collections and the live page reference.")
def list_collections(*, config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Print every live collection with its members, then every live page."""
    plugin = _load_plugin(config)
    collections = plugin.get_page_collections_list()
    if not collections:
        print("no collections")
    for collection in collections:
        members = ",".join(plugin.resolver.candidates(collection.id)) or "-"
        print(f"{collection.id} - {collection.title}: {members}")
    print("Live Page Reference:")
    for label in plugin.get_pages_list().values():
        print(f"  {label}")


@app.command(help="Explain which members of a collection will be rendered.")
def show(*, page: PageOption, config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Print each candidate member of ``page`` with its eligibility."""
    plugin = _load_plugin(config)
    candidates = plugin.resolver.candidates(page)
    if not candidates:
        print(f"{page}: no members")
        return
    for member_id in candidates:
        print(f"{member_id}: {_member_status(plugin, member_id)}")


@app.command(help="Set the member page IDs of a collection in the site file.")
def assign(
    *,
    page: PageOption,
    members: typ.Annotated[str, Parameter(help="Comma-separated page IDs")],
    config: ConfigOption = DEFAULT_CONFIG,
) -> None:
    """Rewrite the membership entry of ``page`` and print the stored value."""
    stored = assign_collection_members(
        config_path=config, collection_id=page, members=members
    )
    if stored:
        print(f"{page}: {stored}")
    else:
        print(f"{page}: removed")


@app.command(help="Print the admin field declarations as JSON.")
def fields(*, config: ConfigOption = DEFAULT_CONFIG) -> None:
    """Dump the content type, site option and html option declarations."""
    plugin = _load_plugin(config)
    payload = {
        "content_types": plugin.content_types(),
        "site_options": {
            key: field.as_dict() for key, field in plugin.site_options().items()
        },
        "html_options": {
            key: field.as_dict() for key, field in plugin.html_options().items()
        },
    }
    print(json.dumps(payload, indent=2))


def _member_status(plugin: PageCollectionsPlugin, member_id: str) -> str:
    record = plugin.content.get_by_id(member_id)
    if is_eligible(record):
        return "ok"
    if record is None:
        return "missing"
    if record.type != PAGE_TYPE:
        return "not a page"
    return "not live"


def main() -> None:
    """Invoke the Cyclopts application behind the ``page-collections`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
