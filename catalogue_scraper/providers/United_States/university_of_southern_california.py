from catalogue_scraper.providers.base_provider import BaseProvider
from catalogue_scraper.models import CourseRef, CourseDetail
from catalogue_scraper.errors import ExtractError
from catalogue_scraper.labels import split_label, apply_defaults
from catalogue_scraper.config import ScraperConfig
from bs4 import BeautifulSoup, NavigableString
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString
from urllib.parse import urlencode, urlsplit, parse_qs
from types import MappingProxyType
import logging

logger = logging.getLogger(__name__)

# * USC runs Acalog, other Acalog catalogues should only need a different host/catoid/navoid
class UniversityOfSouthernCaliforniaProvider(BaseProvider):
    university_name = "university_of_southern_california"

    # Relative href every course link on a listing page starts with
    preview_link_prefix = "preview_course_nopop.php"
    # Acalog serves the detail as an AJAX fragment and wants to see this header
    detail_headers = MappingProxyType({"X-Requested-With": "XMLHttpRequest"})

    def __init__(self, config: ScraperConfig | None = None, catoid: str = "12", navoid: str = "4245") -> None:
        """
        Initializes the USC provider. No network traffic happens here, so it is safe to build in tests.

        Args:
            catoid (str): The catalogue edition to scrape, 12 is the one the listing filters were written against.
            navoid (str): The navigation id of the 'Course Descriptions' page for that catalogue.
        """
        super().__init__(config)
        self.base_url = "https://catalogue.usc.edu"
        self.catoid = catoid
        self.navoid = navoid

    def listing_url(self, page: int) -> str:
        # The site sends catoid twice and the filters as literal 'filter[...]' keys, we copy it exactly
        query = [
            ("catoid", self.catoid),
            ("catoid", self.catoid),
            ("navoid", self.navoid),
            ("filter[item_type]", "3"),
            ("filter[only_active]", "1"),
            ("filter[3]", "1"),
            ("filter[cpage]", str(page)),
        ]
        return f"{self.base_url}/content.php?{urlencode(query)}"

    def detail_url(self, course: CourseRef) -> str:
        # 'show' has no value, urlencode would turn it into 'show=' so it's appended by hand
        return f"{self.base_url}/ajax/preview_course.php?{urlencode({'catoid': course.catoid, 'coid': course.coid})}&show"

    def _soup(self, html_content: str) -> BeautifulSoup:
        try:
            return BeautifulSoup(html_content, 'lxml')
        # This should never happen, but just in case lxml fails for some reason
        except ParserRejectedMarkup:
            return BeautifulSoup(html_content, 'html.parser')

    def parse_course_links(self, html_content: str) -> list[CourseRef]:
        soup = self._soup(html_content)
        course_links: list[CourseRef] = []

        for anchor in soup.select(f'a[href^="{self.preview_link_prefix}"]'):
            query = parse_qs(urlsplit(anchor["href"]).query)
            catoid = query.get("catoid")
            coid = query.get("coid")
            # Best effort, anything that doesn't look like a course link is ignored
            if not catoid or not coid:
                logger.debug("Skipping link without catoid/coid: %s", anchor["href"])
                continue
            course_links.append(CourseRef(catoid=catoid[0], coid=coid[0]))

        return course_links

    def _find_container(self, soup: BeautifulSoup):
        # lxml doesn't insert <tbody> like a browser does, so accept both shapes
        return (
            soup.select_one("body > table > tbody > tr > td > div:nth-child(2)")
            or soup.select_one("body > table > tr > td > div:nth-child(2)")
        )

    def parse_course_details(self, html_content: str, url: str) -> CourseDetail:
        """
        Parses a course preview fragment. The interesting data is plain text sitting
        directly inside the container div ('Units: 4', 'Terms Offered: Fall, Spring'),
        the labels are wrapped in <strong> on some pages and not on others, so we only
        trust the raw text nodes.
        """
        soup = self._soup(html_content)
        container = self._find_container(soup)
        if container is None:
            raise ExtractError(f"Course container not found in {url}")

        try:
            heading = container.find("h3")
            title = heading.get_text().strip() if heading else ""

            fields: dict[str, str] = {}
            for node in container.children:
                # Comments, CDATA and friends are NavigableStrings too, we only want real text
                if not isinstance(node, NavigableString) or isinstance(node, PreformattedString):
                    continue
                pair = split_label(str(node))
                if pair is None:
                    continue
                label, value = pair
                fields[label] = value

            return CourseDetail(url=url, title=title, fields=apply_defaults(fields))
        # bs4 lookups and the model validation (pydantic errors are ValueErrors) are all that can fail here
        except (AttributeError, KeyError, TypeError, ValueError) as error:
            raise ExtractError(f"Failed to parse course details from {url}") from error
