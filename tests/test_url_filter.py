import logging
import re

import pytest

from krauler.config import Config
from krauler.robots import Robotstxt
from krauler.url_filter import IGNORED_SUFFIXES, Filter, robots_to_regex

BASE = "example.com"


def make_filter(robots_text="", visited=None, user_agent="Krauler/1.0"):
    config = Config(url=BASE, user_agent=user_agent)
    robots = Robotstxt(BASE)
    robots.parse_robots(robots_text)
    visited = set() if visited is None else visited
    return Filter(config, robots, visited), visited


def test_robots_to_regex_plain_path_gets_open_suffix():
    assert robots_to_regex("/private") == "/private.*"


def test_robots_to_regex_anchor_and_wildcard():
    assert robots_to_regex("/*.php$") == "/.*\\.php$"


def test_robots_to_regex_empty_rule():
    assert robots_to_regex("") == ""


@pytest.mark.parametrize(
    "rule, text, expected",
    [
        ("/admin", "/admin/panel", True),
        ("/admin", "/public", False),
        ("/*.php$", "/index.php", True),
        ("/*.php$", "/index.php?x=1", False),
        ("/a(b)", "/a(b)c", True),
        ("/a+b", "/aab", False),
        ("*", "Anything/2.0", True),
    ],
)
def test_robots_to_regex_semantics(rule, text, expected):
    assert (re.fullmatch(robots_to_regex(rule), text) is not None) is expected


def test_page_in_domain_is_allowed():
    flt, _ = make_filter()
    assert flt.is_allowed("example.com/page.html") is True


def test_url_outside_domain_is_rejected():
    flt, _ = make_filter()
    assert flt.is_allowed("other.org/page.html") is False


def test_visited_url_is_rejected_and_shared_set_is_live():
    flt, visited = make_filter()
    url = "example.com/page.html"
    assert flt.is_allowed(url) is True
    visited.add(url)
    assert flt.is_allowed(url) is False


@pytest.mark.parametrize("suffix", IGNORED_SUFFIXES)
def test_static_assets_are_rejected(suffix):
    flt, _ = make_filter()
    assert flt.is_allowed(f"example.com/assets/file{suffix}") is False


def test_wildcard_agent_rules_apply():
    flt, _ = make_filter("User-agent: *\nDisallow: /private\n")
    assert flt.is_allowed("example.com/private/doc.html") is False
    assert flt.is_allowed("example.com/public/doc.html") is True


def test_rules_for_other_agent_are_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger="krauler"):
        flt, _ = make_filter("User-agent: Googlebot\nDisallow: /private\n")
    assert flt.is_allowed("example.com/private/doc.html") is True
    assert any("no rules found" in r.getMessage() for r in caplog.records)


def test_rules_for_own_agent_apply():
    flt, _ = make_filter("User-agent: Krauler*\nDisallow: /secret-area\n")
    assert flt.is_allowed("example.com/secret-area/x") is False


def test_disallow_pattern_is_joined_with_base():
    flt, _ = make_filter("User-agent: *\nDisallow: /tmp\n")
    assert "example.com/tmp.*" in flt.patterns


def test_no_robots_rules_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="krauler"):
        make_filter("")
    assert any("Krauler/1.0" in r.getMessage() for r in caplog.records)