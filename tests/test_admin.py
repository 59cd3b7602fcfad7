"""Unit tests for the admin field declarations and the plugin facade."""

from __future__ import annotations

from bs4 import BeautifulSoup

from page_collections import PageCollectionsPlugin
from page_collections.admin import (
    OptionField,
    content_types,
    html_options,
    page_reference_labels,
    site_options,
)
from page_collections.host import (
    ContentRecord,
    InMemoryContentStore,
    MappingOptionStore,
    MarkupSanitizer,
    SiteUrlBuilder,
)

URLS = SiteUrlBuilder("https://example.com/", "https://example.com/admin/")


def _collection(record_id: str, title: str, *, status: str = "live") -> ContentRecord:
    return ContentRecord(
        id=record_id,
        type="page-collection",
        title=title,
        slug=title.lower(),
        status=status,
    )


def _page(record_id: str, title: str, *, status: str = "live") -> ContentRecord:
    return ContentRecord(
        id=record_id, type="page", title=title, slug=title.lower(), status=status
    )


def _plugin(records: list[ContentRecord], membership: dict[str, str]) -> PageCollectionsPlugin:
    return PageCollectionsPlugin(
        content=InMemoryContentStore(records),
        options=MappingOptionStore({"PageCollections": membership}),
        urls=URLS,
        sanitizer=MarkupSanitizer(),
    )


def test_content_type_declaration() -> None:
    """The page-collection type should be URL-bearing and theme-scoped."""
    declared = content_types()["page-collection"]
    assert declared["name"] == "Page Collection"
    assert declared["environment"] == ["theme"]
    assert declared["url"] is True
    assert declared["fields"] == ["title", "page-url", "status", "content"]
    assert declared["groups"] == {"page-url": ["slug", "arrow", "url"]}


def test_site_options_without_collections_shows_callout() -> None:
    """With no collections the screen should only point at the content page."""
    fields = site_options([], [_page("5", "Hello")], URLS)
    assert list(fields) == ["no-collections"]
    callout = BeautifulSoup(fields["no-collections"].html, "html.parser")
    link = callout.select_one("a")
    assert link["href"] == "https://example.com/admin/content"


def test_site_options_declare_one_field_per_collection() -> None:
    """Each collection should get a text field keyed by its ID."""
    fields = site_options(
        [_collection("17", "Featured"), _collection("20", "Guides")],
        [_page("5", "Hello"), _page("3", "About")],
        URLS,
    )
    assert list(fields) == ["description", "17", "20", "page-collection-list"]
    featured = fields["17"]
    assert featured.type == "text"
    assert featured.label == "Featured"
    assert featured.placeholder == "3,5"
    assert "Page Collection ID: 17" in featured.description
    assert 'href="https://example.com/featured"' in featured.description

    reference = BeautifulSoup(fields["page-collection-list"].html, "html.parser")
    labels = [item.get_text() for item in reference.select("li")]
    assert labels == ["5 - Hello", "3 - About"]


def test_html_options_merge_host_wrapper_fields() -> None:
    """Host class/id fields should replace the plugin class in place."""
    fields = html_options()
    assert list(fields) == [
        "list_markup",
        "title_tag",
        "inline_styles",
        "link_title",
        "show_content",
        "content_length",
        "read_more",
        "class",
        "id",
    ]
    assert fields["class"].label == "HTML class"
    assert "page-collection" in fields["class"].tooltip
    assert "wrapper" in fields["id"].tooltip
    assert list(fields["list_markup"].options) == ["ul", "ol", "div", "article"]
    assert list(fields["title_tag"].options) == [
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "span",
    ]


def test_html_options_do_not_mutate_host_fields() -> None:
    """Tooltips should be applied to copies of the host declarations."""
    host_fields = {"class": OptionField(type="text", label="Class")}
    html_options(host_fields)
    assert host_fields["class"].tooltip is None


def test_option_field_as_dict_omits_unset_keys() -> None:
    """Serialized fields should carry only the keys that were set."""
    field = OptionField(type="checkbox", label="Show", options={"on": "Yes"})
    assert field.as_dict() == {
        "type": "checkbox",
        "label": "Show",
        "options": {"on": "Yes"},
    }


def test_page_reference_labels() -> None:
    """Labels should read '<id> - <title>'."""
    assert page_reference_labels([_page("5", "Hello")]) == {"5": "5 - Hello"}


def test_plugin_lists_only_live_records() -> None:
    """Collection and page lists should ignore drafts."""
    plugin = _plugin(
        [
            _collection("17", "Featured"),
            _collection("18", "Hidden", status="draft"),
            _page("5", "Hello"),
            _page("6", "Draft", status="draft"),
        ],
        {},
    )
    assert [record.id for record in plugin.get_page_collections_list()] == ["17"]
    assert plugin.get_pages_list() == {"5": "5 - Hello"}
    assert "17" in plugin.site_options()


def test_plugin_html_renders_only_live_members() -> None:
    """Only the live page of a mixed collection should be rendered."""
    plugin = _plugin(
        [
            _collection("17", "Featured"),
            _page("5", "Hello"),
            _page("3", "Draft", status="draft"),
        ],
        {"17": "5,3,99"},
    )
    soup = BeautifulSoup(plugin.html(17, {"link_title": {"on": "1"}}), "html.parser")
    items = soup.select(".pc-item")
    assert len(items) == 1, f"expected exactly one item, got {len(items)}"
    assert items[0].select_one("a")["href"] == "https://example.com/hello"


def test_plugin_html_is_empty_for_non_collection_page() -> None:
    """Pages without a membership entry should render nothing."""
    plugin = _plugin([_page("5", "Hello")], {"17": "5"})
    assert plugin.html(5) == ""


def test_plugin_html_spacing_counts_eligible_items_only() -> None:
    """Filtered trailing members should not leave the last item spaced."""
    plugin = _plugin(
        [
            _collection("17", "Featured"),
            _page("5", "Hello"),
            _page("3", "World"),
        ],
        {"17": "5,3,99"},
    )
    html = plugin.html(17, {"inline_styles": {"item_spacing": "1"}})
    soup = BeautifulSoup(html, "html.parser")
    styles = [item.get("style") for item in soup.select(".pc-item")]
    assert styles == ["margin-bottom:2.75rem;", "margin-bottom:0;"], (
        f"expected the last rendered item to drop its spacing, got {styles!r}"
    )


def test_plugin_reads_membership_under_a_custom_key() -> None:
    """Hosts that saved memberships under another option key can point at it."""
    plugin = PageCollectionsPlugin(
        content=InMemoryContentStore([_collection("17", "Featured"), _page("5", "Hello")]),
        options=MappingOptionStore({"SCHD_Page_Collections": {"17": "5"}}),
        urls=URLS,
        sanitizer=MarkupSanitizer(),
        plugin_key="SCHD_Page_Collections",
    )
    soup = BeautifulSoup(plugin.html(17), "html.parser")
    assert [item.get_text(strip=True) for item in soup.select(".pc-item-title")] == [
        "Hello"
    ]
    assert _plugin([_collection("17", "Featured"), _page("5", "Hello")], {}).html(17) == ""


def test_plugin_html_zero_content_length_uses_default_preview() -> None:
    """A stored length of zero should preview the default number of words."""
    page = ContentRecord(
        id="5", type="page", title="Hello", slug="hello", status="live", content="a b c"
    )
    plugin = _plugin([_collection("17", "Featured"), page], {"17": "5"})
    html = plugin.html(17, {"show_content": {"on": "1"}, "content_length": "0"})
    preview = BeautifulSoup(html, "html.parser").select_one(".pc-item-content")
    assert preview is not None, "expected a content preview"
    assert preview.get_text(strip=True) == "a b c"
