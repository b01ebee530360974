from catalogue_scraper.config import ScraperConfig
from catalogue_scraper.errors import NetworkError, HTTPStatusError
from catalogue_scraper.models import CourseRef, CourseDetail
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
import logging
import requests
from requests.adapters import HTTPAdapter

logger = logging.getLogger(__name__)

class BaseProvider(ABC):
    """
        Every catalogue !! MUST !! follow this 'standard'
        the engine only ever talks to a provider through these methods, so adding a
        new university means writing a provider and nothing else
    """

    """
        Name specific to this university, used to pick the provider from the command line.
        Current standard is the full name with underscores in place of spaces and fully lowercase
    """
    university_name: str | None = None
    # Extra headers sent with detail requests, override if the catalogue needs something
    detail_headers: Mapping[str, str] = MappingProxyType({})

    def __init__(self, config: ScraperConfig | None = None) -> None:
        self.config = config or ScraperConfig()
        # Never retry, a failed request is logged by the engine and that item is skipped
        adapter = HTTPAdapter(max_retries=0)
        self.session = requests.Session()
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
        self.session.headers.update({"User-Agent": self.config.user_agent})

    def __init_subclass__(cls, **kwargs) -> None:
        """
        This is called whenever a child class is defined and checks whether we have
        a university_name defined for identification or not
        """
        super().__init_subclass__(**kwargs)

        if not cls.university_name:
            raise TypeError(
                f"Class '{cls.__name__}' cannot be defined without a 'university_name'. "
                f"Please set a unique string name for use within the program (e.g., university_name = 'university_of_southern_california')."
            )

    def _request(self, method: str, url: str, *, timeout: float | tuple[float, float] | None = None, allow_redirects: bool = True, **kwargs) -> requests.Response:
        """
        Internal helper to make HTTP requests with consistent error handling.
        Providers should prefer using `_get` due to its consistent error handling.
        """
        if timeout is None:
            timeout = self.config.timeout
        logger.debug("%s %s", method.upper(), url)
        try:
            response = self.session.request(method=method, url=url, timeout=timeout, allow_redirects=allow_redirects, **kwargs)
            response.raise_for_status()
            return response
        except requests.exceptions.Timeout as error:
            raise NetworkError(f"Timeout during {method.upper()} {url}") from error
        except requests.exceptions.ConnectionError as error:
            raise NetworkError(f"Connection error during {method.upper()} {url}") from error
        except requests.exceptions.HTTPError as error:
            status = getattr(error.response, "status_code", None)
            raise HTTPStatusError(status_code=status, url=url) from error
        # Anything else requests can throw (redirect loops, a body cut off half way, ...)
        except requests.exceptions.RequestException as error:
            raise NetworkError(f"Request failed during {method.upper()} {url}") from error

    def _get(self, url: str, *, params: dict | None = None, headers: dict | None = None, timeout: float | tuple[float, float] | None = None, allow_redirects: bool = True) -> requests.Response:
        return self._request("GET", url, params=params, headers=headers, timeout=timeout, allow_redirects=allow_redirects)

    def fetch_course_links(self, page: int) -> list[CourseRef]:
        """
            Fetches one listing page and hands the html to 'parse_course_links'.
            Raises FetchError if the page can't be downloaded.
        """
        response = self._get(self.listing_url(page))
        return self.parse_course_links(response.text)

    def fetch_course_details(self, course: CourseRef) -> CourseDetail:
        """
            Fetches the detail fragment for a course and hands it to 'parse_course_details'.
            Raises FetchError or ExtractError, the engine decides what to do with them.
        """
        url = self.detail_url(course)
        response = self._get(url, headers=dict(self.detail_headers))
        return self.parse_course_details(response.text, url)

    @abstractmethod
    def listing_url(self, page: int) -> str:
        """
            Full url of listing page number 'page' (1 based)
        """
        raise NotImplementedError

    @abstractmethod
    def detail_url(self, course: CourseRef) -> str:
        """
            Full url of the detail page/fragment for a course
        """
        raise NotImplementedError

    @abstractmethod
    def parse_course_links(self, html_content: str) -> list[CourseRef]:
        """
            Takes the html of a listing page and returns every course it links to, in
            document order. A page with no courses returns an empty list, not an error.
        """
        raise NotImplementedError

    @abstractmethod
    def parse_course_details(self, html_content: str, url: str) -> CourseDetail:
        """
            Takes the html of a course detail page and parses it into a CourseDetail.
            This is separate from fetching so the parsing can be tested without a network.
        """
        raise NotImplementedError
