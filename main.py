#!/usr/bin/env python3
"""
Post Browser - Main entry point
"""
import argparse
import sys

from simple_logger import LogLevel, Slogger
from post_browser.config import load_config
from post_browser.errors import ConfigError
from post_browser.ui.app import PostBrowserApp


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Browse published posts by category")
    parser.add_argument("--config", help="Path to a JSON config file")
    parser.add_argument("--db", help="SQLite database to read posts from")
    parser.add_argument(
        "--address",
        help="Listing address to open, e.g. /blog/page/2?category=python",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if args.db:
        config["sqlite"]["db_path"] = args.db

    Slogger.configure(
        log_path=config["log"]["path"],
        min_level=LogLevel[str(config["log"]["level"]).upper()],
    )
    Slogger.log("Starting Post Browser application...")

    app = PostBrowserApp(config, initial_address=args.address)
    try:
        app.run()
    finally:
        app.container.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
