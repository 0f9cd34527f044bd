"""Crawler configuration and command-line parsing."""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class ConfigError(RuntimeError):
    """Raised when a configuration value is invalid."""


@dataclass
class Config:
    """Settings for one crawl."""

    url: str
    max_depth: int = 1
    verbose: bool = True
    help: bool = False
    ethical: bool = True
    output_dir: str = "output"
    user_agent: str = "Krauler/1.0"

    def validate(self) -> None:
        """Log the settings, check them and set the package log level."""
        logger.info("Parsed configuration: ")
        logger.info("  URL: %s", self.url)
        logger.info("  Max Depth: %s", self.max_depth)
        logger.info("  Verbose: %s", self.verbose)
        logger.info("  Help: %s", self.help)
        logger.info("  Ethical: %s", self.ethical)
        if self.help:
            logger.info("  Help requested")
        if not self.url:
            logger.error("URL is required")
            raise ConfigError("URL is required")
        if self.max_depth < 1:
            logger.error("Max depth must be at least 1")
            raise ConfigError("Max depth must be at least 1")

        package_logger = logging.getLogger("krauler")
        package_logger.setLevel(logging.DEBUG if self.verbose else logging.INFO)

        if self.ethical:
            logger.info("Ethical crawling enabled")
        else:
            logger.warning("Ethical crawling disabled")

    def prepare_output_dir(self) -> Path:
        """Create the output directory, or empty it if it already exists."""
        path = Path(self.output_dir)
        if not path.exists():
            path.mkdir()
            logger.info("Created output directory: %s", self.output_dir)
        else:
            logger.info("Output directory already exists: %s, clearing", self.output_dir)
            for entry in path.iterdir():
                if entry.is_dir() and not entry.is_symlink():
                    shutil.rmtree(entry)
                else:
                    entry.unlink()
        return path


class _OptionsError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise _OptionsError(message)


def _parse_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def _build_parser() -> _Parser:
    parser = _Parser(
        prog="krauler", description="A simple modular web crawler", add_help=False
    )
    parser.add_argument("-u", "--url", help="Starting URL")
    parser.add_argument("-d", "--depth", type=int, default=1, help="Max crawl depth")
    parser.add_argument("-t", "--threads", type=int, default=4, help="Number of threads")
    for short, long, default, text in (
        ("-v", "--verbose", False, "Enable verbose output"),
        ("-e", "--ethical", True, "Enable ethical crawling"),
        ("-m", "--sitemap", False, "Follow sitemap"),
        ("-h", "--help", False, "Print help"),
    ):
        parser.add_argument(
            short, long, nargs="?", const=True, default=default, type=_parse_bool, help=text
        )
    return parser


def parse_args(argv=None) -> Config:
    """Parse command-line arguments into a validated Config.

    Prints help and exits with status 0 when asked for help or when no URL
    is given; exits with status 1 on malformed options.
    """
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except _OptionsError as err:
        print(f"Error parsing options: {err}", file=sys.stderr)
        raise SystemExit(1) from err

    if args.help or args.url is None:
        print(parser.format_help())
        raise SystemExit(0)

    config = Config(
        url=args.url,
        max_depth=args.depth,
        verbose=args.verbose,
        help=args.help,
        ethical=args.ethical,
    )
    config.validate()
    config.prepare_output_dir()
    return config