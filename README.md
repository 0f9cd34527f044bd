# krauler

A small, single-threaded web crawler. It starts from one URL and fetches
pages breadth-first. It saves each page as an HTML file and follows the
`<a href>` links it finds, but only those that stay under the starting URL.
It uses only the standard library.

## What it does

- Fetches the starting URL, then `<url>/robots.txt`. It reads the
  `User-agent`, `Disallow` and `Sitemap` lines. A `User-agent` pattern
  (with `*` as a wildcard) may match the crawler's agent name,
  `Krauler/1.0`. The paths disallowed under every such pattern are then
  skipped.
- Skips links to static assets: `.jpg`, `.jpeg`, `.png`, `.gif`, `.css`,
  `.js`, `.ico`, `.svg`, `.woff2` and `.pdf`.
- Skips a link that is already in its set of visited URLs. A link that
  is rejected for any reason is also added to that set.
- Stops when the queue is empty or after 100 saved pages.
- Writes the pages into an `output/` directory under the current
  directory. It creates the directory if it is missing. If the directory
  already exists, it removes everything in it at start-up.
- Builds each file name from the page URL. Unsafe characters become
  single underscores, and the name is cut to its last 250 characters. For
  example, `example.com/docs/page` is saved as `example.com_docs_page.html`.
- Ends the crawl on the first fetch failure. This includes a missing
  robots.txt host. The error is logged, not raised.

Links are reduced to scheme-less form (`example.com/about`) and fetched
over `http://`. A link is only followed if it contains the starting URL as
given. Pass the starting URL without a scheme, for example
`krauler --url example.com`, if you want links to be followed.

## Installation

```
pip install .
```

## Usage

```
krauler --url example.com
```

| Option | Default | Meaning |
| --- | --- | --- |
| `-u`, `--url` | (required) | Starting URL |
| `-d`, `--depth` | `1` | Maximum crawl depth; must be at least 1 |
| `-t`, `--threads` | `4` | Number of threads |
| `-v`, `--verbose` | off | Log at debug level |
| `-e`, `--ethical` | on | Ethical crawling |
| `-m`, `--sitemap` | off | Follow sitemap |
| `-h`, `--help` | | Print help and exit |

The on/off options can be given alone to switch them on. They also take a
value: `true`/`false`, `yes`/`no` or `1`/`0`, for example `--ethical false`.

If you run the command without `--url`, it prints the help text and exits
with status 0. A malformed option prints an error and exits with status 1.

## What it does not do

- `--depth` is checked, but it does not limit the crawl.
- `--threads` is accepted but not used. Crawling is always single-threaded.
- `--sitemap` is accepted but not used. Sitemap URLs in robots.txt are
  listed, not fetched.
- `--ethical` only changes a log message. The robots.txt rules are always
  applied.
- It sends no custom `User-Agent` header. It does no rate limiting and
  does not resume an earlier crawl.

## Library use

```python
from krauler.config import Config
from krauler.crawler import Krauler

config = Config(url="example.com")
config.validate()             # raises krauler.config.ConfigError on bad values
config.prepare_output_dir()
Krauler(config).run()
```

The other modules can be used on their own:

```python
from krauler.html_parser import extract_links, normalize_url, sanitize_url_for_filename
from krauler.robots import Robotstxt
from krauler.url_filter import robots_to_regex

extract_links('<a href="/about">About</a>')          # ['/about']
normalize_url("https://example.com", "/about#team")  # 'example.com/about'
sanitize_url_for_filename("example.com/about")       # 'example.com_about'
robots_to_regex("/private*")                         # '/private.*.*'

robots = Robotstxt("example.com")
robots.parse_robots("User-agent: *\nDisallow: /private\n")
robots.disallowed                                    # {'*': {'/private'}}
```

`krauler.http_client.fetch_url` returns a page body as text. It raises
`krauler.http_client.FetchError` when the host cannot be reached.

## Running the tests

```
pip install ".[test]"
pytest
```