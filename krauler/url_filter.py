"""Decides which discovered URLs the crawler may visit."""

from __future__ import annotations

import logging
import re
from collections.abc import Set

from krauler.config import Config
from krauler.html_parser import url_join
from krauler.robots import Robotstxt

logger = logging.getLogger(__name__)

IGNORED_SUFFIXES = (".jpg", ".jpeg", ".png", ".gif", ".css", ".js", ".ico", ".svg", ".woff2", ".pdf")

_ESCAPED = frozenset(".?+{}[]()|\\^")


def robots_to_regex(rule: str) -> str:
    """Translate a robots.txt path or agent pattern into a regular expression.

    ``*`` matches any sequence and ``$`` anchors the end; other regex
    metacharacters are escaped. A pattern not ending in ``$`` also matches
    any suffix.
    """
    parts = []
    for c in rule:
        if c == "*":
            parts.append(".*")
        elif c in _ESCAPED:
            parts.append("\\" + c)
        else:
            parts.append(c)
    pattern = "".join(parts)
    if pattern and not pattern.endswith("$"):
        pattern += ".*"
    return pattern


class Filter:
    """Rejects off-site, already visited, static-asset and disallowed URLs."""

    def __init__(self, config: Config, robotstxt: Robotstxt, visited_urls: Set[str]) -> None:
        self.config = config
        self.robotstxt = robotstxt
        self.visited_urls = visited_urls
        self.patterns: set[str] = {f"{config.url}.*{suffix}" for suffix in IGNORED_SUFFIXES}

        matched = False
        for user_agent, paths in robotstxt.disallowed.items():
            agent_pattern = robots_to_regex(user_agent)
            logger.debug('Filter: PATTERN: "%s"', agent_pattern)
            if re.fullmatch(agent_pattern, config.user_agent) is None:
                continue
            matched = True
            logger.debug(
                'Filter: found rules in "%s" for user agent "%s"', agent_pattern, config.user_agent
            )
            for path in paths:
                full_regex = url_join(config.url, robots_to_regex(path))
                self.patterns.add(full_regex)
                logger.debug('Filter: added regex "%s"', full_regex)
        if not matched:
            logger.warning('Filter: no rules found for user agent "%s"', config.user_agent)

        self._compiled = [(p, re.compile(p)) for p in self.patterns]

    def is_allowed(self, url: str) -> bool:
        """Return True if the URL may be queued for crawling."""
        if self.config.url not in url:
            logger.debug('Filter: "%s" not in the domain "%s"', url, self.config.url)
            return False
        if url in self.visited_urls:
            logger.debug('Filter: "%s" visited', url)
            return False
        for source, regex in self._compiled:
            if regex.fullmatch(url):
                logger.debug('Filter: "%s" matched regex "%s"', url, source)
                return False
        return True