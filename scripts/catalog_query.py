#!/usr/bin/env python3
"""
Command-line access to the Avgle catalog API.

Runs one client operation and prints the decoded response as JSON.

Usage:
    python3 scripts/catalog_query.py categories
    python3 scripts/catalog_query.py collections --page 1 --limit 20
    python3 scripts/catalog_query.py videos --page 2
    python3 scripts/catalog_query.py search "SSNI-388" [--page N]
    python3 scripts/catalog_query.py jav "SSNI-388" [--page N]
    python3 scripts/catalog_query.py video 374462

Exit codes:
    0: Request succeeded and the response was printed
    1: The request failed (network, decode, not found, invalid argument)
    2: Invalid command line
"""

import os
import sys
import argparse

# Add project root to path so the script runs from a checkout
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from avgle import AvgleError, create_client_from_config
from utils.logging_config import setup_logging, get_logger

try:
    from config import CATALOG_QUERY_LOG_FILE
except ImportError:
    CATALOG_QUERY_LOG_FILE = None

logger = get_logger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Query the Avgle video catalog API')
    parser.add_argument('--base-url', type=str, default=None,
                        help='API base URL (default: AVGLE_BASE_URL from config.py or the public API)')
    parser.add_argument('--timeout', type=float, default=None,
                        help='Request timeout in seconds')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Log level (DEBUG, INFO, WARNING, ERROR)')
    parser.add_argument('--log-file', type=str, default=CATALOG_QUERY_LOG_FILE,
                        help='Also write logs to this file')

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('categories', help='List all video categories')

    collections = subparsers.add_parser('collections', help='List video collections')
    collections.add_argument('--page', type=str, default='', help='Page number (default: 0)')
    collections.add_argument('--limit', type=str, default='', help='Collections per page (default: 50)')

    videos = subparsers.add_parser('videos', help='List videos')
    videos.add_argument('--page', type=str, default='', help='Page number (default: 0)')

    search = subparsers.add_parser('search', help='Search videos')
    search.add_argument('query', type=str)
    search.add_argument('--page', type=str, default='', help='Page number (default: 0)')

    jav = subparsers.add_parser('jav', help='Search JAV videos')
    jav.add_argument('query', type=str)
    jav.add_argument('--page', type=str, default='', help='Page number (default: 0)')

    video = subparsers.add_parser('video', help='Look up a single video by VID')
    video.add_argument('vid', type=str)

    return parser.parse_args(argv)


def run_command(client, args):
    """Dispatch the parsed command to the matching client operation."""
    if args.command == 'categories':
        return client.get_categories()
    if args.command == 'collections':
        return client.get_collections(args.page, args.limit)
    if args.command == 'videos':
        return client.get_videos(args.page)
    if args.command == 'search':
        return client.search_videos(args.query, args.page)
    if args.command == 'jav':
        return client.search_javs(args.query, args.page)
    if args.command == 'video':
        return client.get_video_by_vid(args.vid)
    raise ValueError(f"unknown command: {args.command}")


def main(argv=None, client=None):
    args = parse_arguments(argv)
    setup_logging(args.log_file, args.log_level)

    overrides = {}
    if args.base_url:
        overrides['base_url'] = args.base_url
    if args.timeout is not None:
        overrides['timeout'] = args.timeout

    try:
        if client is None:
            client = create_client_from_config(**overrides)
        resp = run_command(client, args)
    except AvgleError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    if not resp.success:
        logger.warning(f"{args.command}: API reported success=false")
    print(resp.to_json(indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
