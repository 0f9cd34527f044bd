"""The breadth-first crawler and its command-line entry point."""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path

from krauler.config import Config, parse_args
from krauler.html_parser import extract_links, normalize_url, sanitize_url_for_filename
from krauler.http_client import fetch_url
from krauler.robots import Robotstxt
from krauler.url_filter import Filter

logger = logging.getLogger(__name__)

MAX_SAVED_PAGES = 100


class Krauler:
    """Crawls a site from its starting URL and stores each page as HTML."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.visited_urls: set[str] = set()
        self.url_queue: deque[str] = deque()
        self.saved_urls: set[str] = set()
        logger.info("Krauler initialized with URL: %s", config.url)

    def run(self) -> None:
        """Crawl until the queue is empty or enough pages are saved.

        Any failure ends the crawl and is logged rather than raised.
        """
        try:
            start = self.config.url
            html = fetch_url(start)
            logger.info("Fetched %d bytes from %s", len(html), start)

            robotstxt = Robotstxt.from_url(start)
            url_filter = Filter(self.config, robotstxt, self.visited_urls)

            self.url_queue.append(start)
            while self.url_queue and len(self.saved_urls) < MAX_SAVED_PAGES:
                url = self.url_queue.popleft()
                content = fetch_url(url)
                self.visited_urls.add(url)
                if self.save_html(url, content):
                    self.saved_urls.add(url)

                for link in extract_links(content):
                    normalized = normalize_url(self.config.url, link)
                    if url_filter.is_allowed(normalized):
                        self.url_queue.append(normalized)
                        logger.debug('Added "%s" to queue', normalized)
                    else:
                        self.visited_urls.add(normalized)
        except Exception as err:
            logger.error("Error: %s", err)

    def save_html(self, url: str, html: str) -> bool:
        """Write a page into the output directory; return whether it worked."""
        filename = f"{self.config.output_dir}/{sanitize_url_for_filename(url)}.html"
        try:
            Path(filename).write_text(html, encoding="utf-8")
        except OSError:
            logger.error("Failed to save HTML to %s", filename)
            return False
        logger.info("Saved HTML to %s", filename)
        return True


def main(argv=None) -> int:
    """Parse arguments, crawl, and return the exit status."""
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] [%(levelname)s] %(message)s")
    config = parse_args(argv)
    Krauler(config).run()
    return 0