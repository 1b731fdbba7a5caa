"""Shared fixtures: the kitchen-sink document exercising every block type."""

import pytest

from mdiu import Document


@pytest.fixture
def kitchen_sink_document() -> Document:
    return (
        Document()
        .h1("title")
        .h2("section")
        .h3("subsection")
        .empty()
        .text("text")
        .link_with_label("one-link", "one link")
        .quote("quote")
        .preformatted("@_@")
        .text("more text")
        .preformatted_with_alt("@_@", "emoticon")
        .list_item("one item")
        .link("no-text")
        .link_with_label("with-text", "with text")
        .list_item("an item")
        .list_item("another item")
    )


@pytest.fixture
def kitchen_sink(kitchen_sink_document):
    return kitchen_sink_document.build()
