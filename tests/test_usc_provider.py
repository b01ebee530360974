import pytest

from catalogue_scraper.errors import ExtractError
from catalogue_scraper.models import CourseRef
from catalogue_scraper.providers.United_States import university_of_southern_california as usc
from tests.helpers import listing_html, detail_html

DETAIL_URL = "https://catalogue.usc.edu/ajax/preview_course.php?catoid=12&coid=99&show"


class TestParseCourseLinks:
    def test_single_preview_link(self, provider):
        html = listing_html("preview_course_nopop.php?catoid=12&coid=99")
        assert provider.parse_course_links(html) == [CourseRef(catoid="12", coid="99")]

    def test_page_without_course_links_is_empty(self, provider):
        html = listing_html("content.php?catoid=12&navoid=4245", "/index.php")
        assert provider.parse_course_links(html) == []

    def test_empty_document(self, provider):
        assert provider.parse_course_links("") == []

    def test_links_are_kept_in_document_order(self, provider):
        html = listing_html(
            "preview_course_nopop.php?catoid=12&coid=3",
            "preview_course_nopop.php?catoid=12&coid=1",
            "preview_course_nopop.php?catoid=12&coid=2",
        )
        assert [ref.coid for ref in provider.parse_course_links(html)] == ["3", "1", "2"]

    def test_links_missing_a_parameter_are_skipped(self, provider):
        html = listing_html(
            "preview_course_nopop.php?catoid=12",
            "preview_course_nopop.php?coid=7",
            "preview_course_nopop.php?catoid=12&coid=8",
        )
        assert provider.parse_course_links(html) == [CourseRef(catoid="12", coid="8")]

    def test_values_are_taken_verbatim(self, provider):
        html = listing_html("preview_course_nopop.php?catoid=012&amp;coid=00451&amp;returnto=4245")
        assert provider.parse_course_links(html) == [CourseRef(catoid="012", coid="00451")]

    def test_duplicates_on_one_page_are_kept(self, provider):
        href = "preview_course_nopop.php?catoid=12&coid=5"
        assert len(provider.parse_course_links(listing_html(href, href))) == 2


class TestParseCourseDetails:
    def test_units_and_ge_label(self, provider):
        html = detail_html(
            "CSCI 103L Introduction to Programming",
            "Units: 4",
            "Satisfies New General Education: GE Category I",
        )
        details = provider.parse_course_details(html, DETAIL_URL)

        assert details.url == DETAIL_URL
        assert details.title == "CSCI 103L Introduction to Programming"
        assert details.fields["Units"] == "4"
        assert details.fields["GE satisfied"] == "GE Category I"
        assert "Satisfies New General Education" not in details.fields

    def test_ge_satisfied_defaults_to_empty(self, provider):
        html = detail_html("ACCT 410 Accounting", "Units: 4", "Terms Offered: Fall, Spring")
        details = provider.parse_course_details(html, DETAIL_URL)

        assert details.fields["GE satisfied"] == ""
        assert details.fields["Terms Offered"] == "Fall, Spring"

    def test_value_keeps_everything_after_the_first_colon(self, provider):
        html = detail_html("X", "Registration Restriction: Open only to majors: see advisor")
        details = provider.parse_course_details(html, DETAIL_URL)
        assert details.fields["Registration Restriction"] == "Open only to majors: see advisor"

    def test_lines_without_label_or_value_are_ignored(self, provider):
        html = detail_html("X", "Just a sentence", ": orphan value", "Max Units:", "Units: 2")
        details = provider.parse_course_details(html, DETAIL_URL)
        assert details.fields == {"Units": "2", "GE satisfied": ""}

    def test_later_label_wins(self, provider):
        html = detail_html("X", "Units: 2", "Units: 4")
        assert provider.parse_course_details(html, DETAIL_URL).fields["Units"] == "4"

    def test_only_direct_text_nodes_are_read(self, provider):
        html = detail_html(
            "X",
            "<strong>Prerequisite: CSCI 102</strong>",
            "<!-- Hidden: comment -->",
            "Grading Option: Letter",
        )
        details = provider.parse_course_details(html, DETAIL_URL)
        assert details.fields == {"Grading Option": "Letter", "GE satisfied": ""}

    def test_title_is_trimmed_and_optional(self, provider):
        html = detail_html("  WRIT 150  ", "Units: 4")
        assert provider.parse_course_details(html, DETAIL_URL).title == "WRIT 150"

        no_heading = "<table><tr><td><div></div><div>Units: 4</div></td></tr></table>"
        assert provider.parse_course_details(no_heading, DETAIL_URL).title == ""

    def test_explicit_tbody_is_accepted(self, provider):
        html = "<table><tbody><tr><td><div></div><div><h3>T</h3>Units: 1</div></td></tr></tbody></table>"
        assert provider.parse_course_details(html, DETAIL_URL).fields["Units"] == "1"

    def test_field_values_that_fail_validation_raise_extract_error(self, provider, monkeypatch):
        # pydantic won't turn an int into a str, so the model refuses it
        monkeypatch.setattr(usc, "apply_defaults", lambda fields: {"Units": 4})
        with pytest.raises(ExtractError):
            provider.parse_course_details(detail_html("X", "Units: 4"), DETAIL_URL)

    def test_missing_container_raises(self, provider):
        with pytest.raises(ExtractError):
            provider.parse_course_details("<p>Course not found</p>", DETAIL_URL)


class TestUrls:
    def test_listing_url(self, provider):
        assert provider.listing_url(3) == (
            "https://catalogue.usc.edu/content.php?catoid=12&catoid=12&navoid=4245"
            "&filter%5Bitem_type%5D=3&filter%5Bonly_active%5D=1&filter%5B3%5D=1&filter%5Bcpage%5D=3"
        )

    def test_detail_url(self, provider):
        assert provider.detail_url(CourseRef(catoid="12", coid="99")) == DETAIL_URL


def test_fetch_course_details_sends_ajax_header(provider, fake_session):
    fake_session.routes[DETAIL_URL] = detail_html("T", "Units: 4")

    details = provider.fetch_course_details(CourseRef(catoid="12", coid="99"))

    assert details.fields["Units"] == "4"
    method, url, kwargs = fake_session.calls[0]
    assert method == "GET"
    assert kwargs["headers"] == {"X-Requested-With": "XMLHttpRequest"}
