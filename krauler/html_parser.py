"""Link extraction and URL helpers used by the crawler."""

from __future__ import annotations

from html.parser import HTMLParser

_SCHEMES = ("http://", "https://")

_INVALID_FILENAME_CHARS = frozenset('/\\:*?"<>|#&=%')
_WHITESPACE = frozenset(" \t\n\v\f\r")
MAX_FILENAME_LENGTH = 250  # leaves room for ".html" within 255


class _LinkCollector(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.links: set[str] = set()

    def _collect(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag != "a":
            return
        for name, value in attrs:
            if name == "href":
                self.links.add(value if value is not None else "")
                return

    def handle_starttag(self, tag, attrs):
        self._collect(tag, attrs)

    def handle_startendtag(self, tag, attrs):
        self._collect(tag, attrs)


def extract_links(html: str) -> list[str]:
    """Return the distinct href values of all <a> elements, sorted."""
    collector = _LinkCollector()
    collector.feed(html)
    collector.close()
    return sorted(collector.links)


def _strip_scheme(url: str) -> str:
    for scheme in _SCHEMES:
        if url.startswith(scheme):
            return url[len(scheme):]
    return url


def _drop_one_trailing_slash(url: str) -> str:
    return url[:-1] if url.endswith("/") else url


def url_join(base: str, path: str) -> str:
    """Join a path onto a base, dropping the scheme and redundant slashes."""
    if not path:
        return base

    result = _strip_scheme(base).rstrip("/")
    tail = path.lstrip("/")
    if not tail:
        return result

    result = f"{result}/{tail}"
    if len(result) > 1 and result.endswith("/"):
        result = result[:-1]
    return result


def normalize_url(hostname: str, relative_url: str) -> str:
    """Resolve a link found on a page into a scheme-less absolute URL."""
    url, _, _ = relative_url.partition("#")

    if not url or url == "/":
        return _drop_one_trailing_slash(_strip_scheme(hostname))

    if url.startswith(_SCHEMES):
        return _drop_one_trailing_slash(_strip_scheme(url))

    if url.startswith("//"):
        return _drop_one_trailing_slash(url[2:])

    if url.startswith("/"):
        domain = _strip_scheme(hostname).split("/", 1)[0]
        return _drop_one_trailing_slash(domain + url)

    return url_join(hostname, url)


def sanitize_url_for_filename(url: str) -> str:
    """Turn a URL into a string usable as a file name (without extension)."""
    sanitized = "".join(
        "_" if c in _INVALID_FILENAME_CHARS or c in _WHITESPACE else c for c in url
    )
    if not sanitized:
        sanitized = "index"

    collapsed: list[str] = []
    for c in sanitized:
        if c == "_" and collapsed and collapsed[-1] == "_":
            continue
        collapsed.append(c)
    sanitized = "".join(collapsed)

    if sanitized.startswith("_"):
        sanitized = sanitized[1:]
    if sanitized.endswith("_"):
        sanitized = sanitized[:-1]

    if len(sanitized) > MAX_FILENAME_LENGTH:
        sanitized = sanitized[-MAX_FILENAME_LENGTH:]
    return sanitized