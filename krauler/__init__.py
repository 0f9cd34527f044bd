"""A simple web crawler that applies robots.txt rules and saves pages as HTML files."""

__version__ = "0.1.0"
__all__ = ["config", "crawler", "html_parser", "http_client", "robots", "url_filter"]