#!/usr/bin/env python3
"""
Load the Groupie Trackers feeds and write a tour page as JSON.

Pages:
- Artist listing (default), optionally searched by exact artist name and
  flattened into concerts sorted by city ("ville"), date, genre or name ("nom")
- Artist detail (--artist ID)
"""

import argparse
from pathlib import Path

from tracker import config
from tracker.pages import build_detail_page, build_index_page, parse_artist_id
from tracker.pipeline.build import load_catalog
from tracker.pipeline.io import format_log_entry, save_log, save_page


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Build artist and concert pages from the Groupie Trackers API")
    parser.add_argument("--sort", default=None, help="Flatten concerts and sort by: ville/city, date, genre, nom/name")
    parser.add_argument("--search", default=None, help="Keep only the artist with this exact name (case-insensitive)")
    parser.add_argument("--artist", default=None, help="Write the detail page for this artist id instead of the listing")
    parser.add_argument("--output", default=str(config.OUTPUT_PATH), help="Path to write the page JSON")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    log_lines = []

    def log(message, level="INFO"):
        """Log a message to both console and log buffer."""
        print(message)
        log_lines.append(format_log_entry(message, level))

    log(f"Loading artists from {config.API_BASE_URL}...")
    feed_metrics = {}
    catalog = load_catalog(log_func=lambda message: log(message, "WARNING"), metrics=feed_metrics)

    log("")
    log("=" * 48)
    log("FEED SUMMARY")
    log("=" * 48)
    log(f"{'Feed':<14} {'Records':>8} {'Errors':>7} {'Time':>10}")
    log("-" * 48)
    for name, m in feed_metrics.items():
        log(f"{name:<14} {m.record_count:>8} {m.errors:>7} {m.duration_ms:>8.0f}ms")
    log("=" * 48)
    log(f"Artists loaded: {len(catalog)}")

    if args.artist is not None:
        artist_id = parse_artist_id(args.artist)
        page = build_detail_page(catalog, artist_id)
        log(f"Detail page for artist {artist_id}: {page.artist_name or '(no data)'}")
    else:
        page = build_index_page(catalog, sort_by=args.sort, query=args.search)
        if page.concerts is not None:
            log(f"{len(page.concerts)} concerts sorted by {args.sort}")
        elif args.sort:
            log(f"Unknown sort '{args.sort}', showing artists only", "WARNING")
        if args.search:
            log(f"{len(page.artists)} artist(s) matching '{args.search}'")

    output_path = save_page(page, Path(args.output))
    log(f"Page saved to {output_path}")

    save_log(log_lines)
    return page


if __name__ == "__main__":
    main()
