"""Tests for heading extraction and page classification."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from article_affix.headings import extract_headings, is_conceptual_page
from article_affix.schemas import HeadingRank


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


class TestHeadingRank:
    """Tests for HeadingRank normalization."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("h1", HeadingRank.H1), ("H2", HeadingRank.H2), (" h4 ", HeadingRank.H4)],
    )
    def test_from_tag_ignores_case(self, name: str, expected: HeadingRank) -> None:
        """Tag names normalize to ranks regardless of case."""
        assert HeadingRank.from_tag(name) is expected

    def test_from_tag_rejects_unknown(self) -> None:
        """Non-heading tags raise ValueError."""
        with pytest.raises(ValueError, match="Not a heading tag"):
            HeadingRank.from_tag("h5")

    def test_root_rank_is_coarsest(self) -> None:
        """H0 orders before every real heading rank."""
        assert min(HeadingRank) is HeadingRank.H0
        assert HeadingRank.H1 < HeadingRank.H4


class TestExtractHeadings:
    """Tests for extract_headings function."""

    def test_collects_direct_headings_in_order(self, make_page) -> None:
        """Only h1-h4 children of the content article are collected."""
        soup = _soup(
            make_page(
                """
                <h1 id="title">Title</h1>
                <p>Intro</p>
                <h3 id="deep">Deep</h3>
                <h2 id="usage">Usage</h2>
                <h5 id="tiny">Tiny</h5>
                <div class="tabGroup"><h2 id="nested">Nested</h2></div>
                """
            )
        )

        records = extract_headings(soup)

        assert [(r.level, r.id) for r in records] == [
            (HeadingRank.H1, "title"),
            (HeadingRank.H3, "deep"),
            (HeadingRank.H2, "usage"),
        ]
        assert [r.href for r in records] == ["#title", "#deep", "#usage"]

    def test_ignores_headings_outside_article(self) -> None:
        """Headings outside <article id="_content"> are not part of the outline."""
        soup = _soup(
            '<body><h1 id="site">Site</h1>'
            '<article id="_content"><h2 id="a">A</h2></article></body>'
        )

        assert [r.id for r in extract_headings(soup)] == ["a"]

    def test_missing_article_yields_no_headings(self) -> None:
        """Pages without the content article have an empty outline."""
        assert extract_headings(_soup("<body><h1>Only</h1></body>")) == []

    def test_missing_id_gives_bare_anchor(self) -> None:
        """A heading without id gets an empty id and a bare '#' target."""
        soup = _soup('<article id="_content"><h2>No id</h2></article>')

        (record,) = extract_headings(soup)

        assert record.id == ""
        assert record.href == "#"

    def test_trailing_xref_provides_href(self) -> None:
        """A trailing cross-reference link becomes the heading's target."""
        soup = _soup(
            '<article id="_content"><h2 id="m">Method '
            '<a class="xref" href="api/Foo.html#Bar">Foo.Bar</a></h2></article>'
        )

        (record,) = extract_headings(soup)

        assert record.href == "api/Foo.html#Bar"
        assert record.text == "Method Foo.Bar"

    def test_xref_class_matches_as_substring(self) -> None:
        """Any class containing 'xref' marks a cross-reference."""
        soup = _soup(
            '<article id="_content"><h3 id="t">Type '
            '<span class="xref-link" href="api/T.html">T</span></h3></article>'
        )

        (record,) = extract_headings(soup)

        assert record.href == "api/T.html"

    def test_non_xref_trailing_element_is_ignored(self) -> None:
        """Ordinary trailing links do not replace the same-page anchor."""
        soup = _soup(
            '<article id="_content"><h2 id="see">See '
            '<a class="external" href="https://example.com">here</a></h2></article>'
        )

        (record,) = extract_headings(soup)

        assert record.href == "#see"

    def test_single_xref_child_is_not_a_cross_reference(self) -> None:
        """A heading whose only child is a link keeps its own anchor."""
        soup = _soup(
            '<article id="_content"><h2 id="only">'
            '<a class="xref" href="api/Only.html">Only</a></h2></article>'
        )

        (record,) = extract_headings(soup)

        assert record.href == "#only"

    def test_text_is_escaped_display_markup(self) -> None:
        """Heading text keeps special characters escaped."""
        soup = _soup('<article id="_content"><h2 id="op">a &lt; b &amp; c</h2></article>')

        (record,) = extract_headings(soup)

        assert record.text == "a &lt; b &amp; c"

    def test_text_keeps_surrounding_whitespace(self) -> None:
        """Whitespace is trimmed at render time, not at extraction."""
        soup = _soup('<article id="_content"><h2 id="w">\n  Spaced  \n</h2></article>')

        (record,) = extract_headings(soup)

        assert record.text == "\n  Spaced  \n"


class TestIsConceptualPage:
    """Tests for is_conceptual_page function."""

    def test_conceptual_marker(self, make_page) -> None:
        """A content column with the Conceptual class is conceptual."""
        assert is_conceptual_page(_soup(make_page("", page_kind="Conceptual")))

    def test_reference_page(self, make_page) -> None:
        """Other content columns are reference pages."""
        assert not is_conceptual_page(_soup(make_page("", page_kind="ManagedReference")))

    def test_marker_must_be_a_whole_class(self, make_page) -> None:
        """Classes that merely contain the marker do not count."""
        assert not is_conceptual_page(_soup(make_page("", page_kind="ConceptualDraft")))

    def test_missing_content_column(self) -> None:
        """Pages without a content column are treated as reference pages."""
        assert not is_conceptual_page(_soup("<body><article id='_content'></article></body>"))
