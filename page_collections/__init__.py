"""Curated page collections for a host CMS.

Editors create ``page-collection`` content entries and list the member page
IDs of each one as a comma-separated string. This package resolves those
strings into live pages and renders them as an HTML list whose markup and
styling are chosen per collection box.

Exports
-------
- ``PageCollectionsPlugin``: Facade a host registers with its collaborators.
- ``app``: Cyclopts application behind the ``page-collections`` command.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from page_collections import app
>>> app.name[0]
'page-collections'
"""

from __future__ import annotations

from .cli import app, main
from .plugin import PageCollectionsPlugin

__all__ = ["PageCollectionsPlugin", "app", "main"]
