"""Plain HTTP GET with redirect following."""

from __future__ import annotations

import urllib.error
import urllib.request


class FetchError(RuntimeError):
    """Raised when a URL cannot be retrieved."""


def _with_scheme(url: str) -> str:
    if "://" in url:
        return url
    return "http://" + url


def fetch_url(url: str) -> str:
    """Fetch a URL and return the response body as text.

    URLs without a scheme are fetched over http. Redirects are followed.
    HTTP error statuses still yield the body; transport failures raise FetchError.
    """
    try:
        with urllib.request.urlopen(_with_scheme(url)) as response:
            body = response.read()
    except urllib.error.HTTPError as err:
        body = err.read()
        err.close()
    except (urllib.error.URLError, ValueError, OSError) as err:
        raise FetchError(str(err)) from err
    return body.decode("utf-8", errors="replace")