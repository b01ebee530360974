# The ScraperEngine class is the main orchestrator of the scraping process.
# It is responsible for coordinating with the provider to scrape the data.
from catalogue_scraper.providers.base_provider import BaseProvider
from catalogue_scraper.models import CourseRef, ScrapedCourse
from catalogue_scraper.errors import FetchError, ExtractError
from catalogue_scraper.writers import write_json, write_csv
from catalogue_scraper.log import console
from typing import Callable
import logging
import time
import orjson
from rich.progress import Progress, MofNCompleteColumn

logger = logging.getLogger(__name__)

class ScraperEngine:
    """
    The ScraperEngine is responsible for orchestrating the scraping process.
    It takes a provider as input and uses it to scrape the data, one request at a time.
    """
    def __init__(self, provider: BaseProvider, sleep: Callable[[float], None] = time.sleep):
        # This allows the engine to hold the *specific* provider it was given
        self.provider = provider
        self.config = provider.config
        self._sleep = sleep
        self.progress = Progress(
            *Progress.get_default_columns(),
            MofNCompleteColumn(),
            console=console,
            transient=True,
        )

    def _pause(self) -> None:
        # Fixed courtesy delay between requests, not adaptive
        if self.config.request_delay:
            self._sleep(self.config.request_delay)

    def collect_course_refs(self) -> list[CourseRef]:
        """
        Walks listing pages 1..max_pages and gathers every course link in order.
        Duplicates are kept as-is. A page that fails just contributes nothing.
        """
        max_pages = self.config.max_pages
        all_course_links: list[CourseRef] = []

        for page in range(1, max_pages + 1):
            try:
                course_links = self.provider.fetch_course_links(page)
                logger.info("Found %d courses on page %d", len(course_links), page)
                all_course_links.extend(course_links)
            except (FetchError, ExtractError) as error:
                logger.error("Error scraping page %d: %s", page, error)

            logger.info("Scraped page %d of %d", page, max_pages)
            self._pause()

        logger.info("Total courses found: %d", len(all_course_links))
        write_json(self.config.course_ids_path, [ref.model_dump() for ref in all_course_links])
        logger.info("Course links saved to %s", self.config.course_ids_path)

        return all_course_links

    def collect_course_details(self, course_links: list[CourseRef]) -> list[ScrapedCourse]:
        """
        Fetches and parses the details of each course in turn. Courses that fail are
        logged and dropped, they don't get a placeholder in the output.
        """
        all_course_details: list[ScrapedCourse] = []
        total_courses = len(course_links)

        self.progress.start()
        getting_details = self.progress.add_task("[green]Getting course details...", total=total_courses)
        try:
            for processed_count, course in enumerate(course_links, start=1):
                logger.info("Processing course %d/%d: %s-%s", processed_count, total_courses, course.catoid, course.coid)

                try:
                    details = self.provider.fetch_course_details(course)
                except (FetchError, ExtractError) as error:
                    logger.warning("Failed to scrape details for course %s-%s: %s", course.catoid, course.coid, error)
                else:
                    all_course_details.append(ScrapedCourse.join(course, details))
                    logger.info("Successfully scraped: %s", details.title)
                    logger.debug("%s", details.to_record())

                if processed_count % self.config.progress_every == 0:
                    logger.info("Progress: %d/%d courses processed", processed_count, total_courses)

                self.progress.update(getting_details, advance=1)
                self._pause()
        finally:
            self.progress.stop()

        logger.info("Total course details scraped: %d", len(all_course_details))
        write_json(self.config.course_details_path, all_course_details)
        logger.info("Course details saved to %s", self.config.course_details_path)

        preview = [course.to_record() for course in all_course_details[:self.config.preview_count]]
        logger.info("Sample of scraped data:\n%s", orjson.dumps(preview, option=orjson.OPT_INDENT_2).decode())

        return all_course_details

    def run(self) -> list[ScrapedCourse]:
        """
        The main method of the engine, it orchestrates the scraping process.
        1. It gets the course links from every listing page.
        2. It gets the details for each course.
        3. It writes the details out as CSV (the JSON files are written along the way).
        """
        logger.info("Starting to scrape all course pages...")
        course_links = self.collect_course_refs()

        logger.info("Starting to scrape all course details...")
        course_details = self.collect_course_details(course_links)

        write_csv(self.config.course_csv_path, course_details)
        logger.info("Course details saved to %s", self.config.course_csv_path)

        logger.info("Scraping process completed successfully.")
        return course_details
