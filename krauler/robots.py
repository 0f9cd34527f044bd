"""robots.txt parsing."""

from __future__ import annotations

import logging

from krauler.http_client import fetch_url

logger = logging.getLogger(__name__)

_TRIM_CHARS = " \t\n\r"


def trim(s: str) -> str:
    """Strip spaces, tabs, carriage returns and newlines from both ends."""
    return s.strip(_TRIM_CHARS)


class Robotstxt:
    """Disallow rules per user agent and sitemap locations of a site."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url
        self.sitemaps: set[str] = set()
        self.disallowed: dict[str, set[str]] = {}

    @classmethod
    def from_url(cls, url: str) -> "Robotstxt":
        """Fetch and parse <url>/robots.txt."""
        robots_url = url + "/robots.txt"
        robots = cls(url)
        content = fetch_url(robots_url)
        logger.info("Fetching robots.txt from %s", robots_url)
        try:
            robots.parse_robots(content)
            robots.parse_sitemap()
        except Exception as err:  # a malformed file must not stop the crawl
            logger.error("Failed to parse robots.txt: %s", err)
        return robots

    def parse_robots(self, robots_txt: str) -> None:
        """Read User-agent, Disallow and Sitemap lines into this object."""
        user_agent = ""
        for line in robots_txt.split("\n"):
            if line.startswith("User-agent:"):
                user_agent = trim(line[len("User-agent:"):])
                self.disallowed[user_agent] = set()
            elif line.startswith("Disallow:"):
                if user_agent:
                    self.disallowed[user_agent].add(trim(line[len("Disallow:"):]))
            elif line.startswith("Sitemap:"):
                self.sitemaps.add(line[len("Sitemap:"):])

        for agent, paths in self.disallowed.items():
            logger.debug("User-agent: %s", agent)
            for path in paths:
                logger.debug("  Disallow: %s", path)
        for sitemap in self.sitemaps:
            logger.debug("Sitemap: %s", sitemap)

    def parse_sitemap(self) -> list[str]:
        """Return the listed sitemap URLs, trimmed and sorted."""
        urls = sorted(trim(sitemap) for sitemap in self.sitemaps)
        for url in urls:
            logger.debug("Sitemap listed: %s", url)
        return urls