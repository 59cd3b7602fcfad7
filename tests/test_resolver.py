"""Unit tests for membership parsing and collection resolution.

These tests cover :func:`parse_member_ids` and :class:`CollectionResolver`:
de-duplication in typed order, the eligibility filter (exists, is a page, is
live), and the silent empty result for unknown collections.

Usage
-----
Run ``pytest tests/test_resolver.py -v``. No fixtures are required beyond the
in-memory host collaborators built by ``_resolver``.
"""

from __future__ import annotations

import typing as typ

import pytest

from page_collections.host import ContentRecord, InMemoryContentStore, MappingOptionStore
from page_collections.resolver import (
    CollectionResolver,
    format_member_ids,
    is_eligible,
    parse_member_ids,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from pytest_mock import MockerFixture


def _page(record_id: str, *, status: str = "live", type_: str = "page") -> ContentRecord:
    return ContentRecord(
        id=record_id,
        type=type_,
        title=f"Page {record_id}",
        slug=f"page-{record_id}",
        status=status,
    )


def _resolver(
    membership: cabc.Mapping[object, object] | None,
    records: cabc.Iterable[ContentRecord] = (),
) -> CollectionResolver:
    options = {} if membership is None else {"PageCollections": dict(membership)}
    return CollectionResolver(InMemoryContentStore(records), MappingOptionStore(options))


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("5,3,5,3", ("5", "3")),
        ("5, 3 ,7", ("5", "3", "7")),
        ("5,,3,", ("5", "3")),
        ("", ()),
        (None, ()),
        (42, ("42",)),
    ],
)
def test_parse_member_ids(raw: object, expected: tuple[str, ...]) -> None:
    """Member strings should parse into unique IDs in first-seen order."""
    assert parse_member_ids(raw) == expected, (
        f"expected {expected!r} for {raw!r}, got {parse_member_ids(raw)!r}"
    )


def test_format_member_ids_normalizes_sequences() -> None:
    """Formatting should drop duplicates and blanks from any iterable."""
    assert format_member_ids([5, "3", 5, " ", "7"]) == "5,3,7"


def test_resolve_filters_missing_draft_and_foreign_records() -> None:
    """Only existing, live records of type page should survive resolution."""
    resolver = _resolver(
        {"17": "5,3,99,8"},
        [_page("5"), _page("3", status="draft"), _page("8", type_="page-collection")],
    )
    resolved = resolver.resolve("17")
    assert [record.id for record in resolved] == ["5"], (
        f"expected only page 5 to be eligible, got {[r.id for r in resolved]!r}"
    )


def test_resolve_keeps_typed_order_after_deduplication() -> None:
    """Display order should follow the editor's string, not record order."""
    resolver = _resolver({"17": "9,2,9,4"}, [_page("2"), _page("4"), _page("9")])
    assert [record.id for record in resolver.resolve(17)] == ["9", "2", "4"]


def test_resolve_is_deterministic() -> None:
    """Resolving the same collection twice should give identical results."""
    resolver = _resolver({"17": "5,3"}, [_page("5"), _page("3")])
    assert resolver.resolve("17") == resolver.resolve("17")


@pytest.mark.parametrize(
    "membership",
    [None, {}, {"20": "5"}],
    ids=["no-option", "empty-mapping", "other-collection"],
)
def test_resolve_unknown_collection_is_empty(
    membership: dict[str, str] | None,
) -> None:
    """A page without a membership entry should resolve to nothing."""
    resolver = _resolver(membership, [_page("5")])
    assert resolver.resolve("17") == ()
    assert resolver.candidates("17") == ()


def test_membership_keys_compare_as_text() -> None:
    """Integer keys from YAML should match string page identifiers."""
    resolver = _resolver({17: "5"}, [_page("5")])
    assert resolver.candidates("17") == ("5",)
    assert [record.id for record in resolver.resolve(17)] == ["5"]


def test_candidates_are_unfiltered() -> None:
    """Candidates should include members that resolution would skip."""
    resolver = _resolver({"17": "5,99"}, [_page("5")])
    assert resolver.candidates("17") == ("5", "99")


def test_is_eligible_rejects_none() -> None:
    """A missing record is never eligible."""
    assert not is_eligible(None)
    assert is_eligible(_page("1"))


def test_resolve_looks_up_each_candidate_once(mocker: MockerFixture) -> None:
    """Each de-duplicated candidate should cost exactly one store lookup."""
    store = InMemoryContentStore([_page("5"), _page("3")])
    spy = mocker.spy(store, "get_by_id")
    resolver = CollectionResolver(
        store, MappingOptionStore({"PageCollections": {"17": "5,3,5,99"}})
    )
    resolver.resolve("17")
    looked_up = [call.args[0] for call in spy.call_args_list]
    assert looked_up == ["5", "3", "99"], f"unexpected lookups {looked_up!r}"
