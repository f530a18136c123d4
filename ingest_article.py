"""
Diffbot Article API – ingestion script.

Extracts one or more article URLs and saves the raw JSON responses.

API Endpoint: GET http://api.diffbot.com/v2/article?token=...&url=...

Usage:
    python ingest_article.py URL [URL ...] [--fields tags,meta] [--comments]

Output: article_raw/{date}/{slug}.json
"""

import argparse
import hashlib
import json
import logging
import re
from datetime import datetime
from pathlib import Path
from urllib.parse import urlsplit

import requests

from article.analyze import Analyze
from common.exceptions import DiffbotError

RAW_DIR = Path("article_raw")
SLUG_MAX_LENGTH = 80


def slug_for_url(url: str) -> str:
    """
    File-system safe name for a URL (host + path, non-alphanumerics as '_').
    URLs with a query string get a short hash of the full URL appended.
    """
    parts = urlsplit(url)
    slug = re.sub(r"[^A-Za-z0-9]+", "_", f"{parts.netloc}{parts.path}").strip("_")
    slug = slug[:SLUG_MAX_LENGTH] or "article"
    if parts.query:
        slug = f"{slug}_{hashlib.sha1(url.encode()).hexdigest()[:8]}"
    return slug


def build_request(url: str, fields: str | None = None, comments: bool = False) -> Analyze:
    request = Analyze(url)
    if fields:
        request.with_fields(fields)
    if comments:
        request.with_comments()
    return request


def ingest_article(
    url: str,
    fields: str | None = None,
    comments: bool = False,
    skip_existing: bool = False,
    date_str: str | None = None,
    raw_dir: Path = RAW_DIR,
) -> bool:
    """
    Extract one URL and save raw JSON.

    Args:
        url: Article URL to extract
        fields: Optional comma-separated field selection
        comments: If True, ask for the comment count
        skip_existing: If True, skip if output file already exists
        date_str: Override date string for output path (default: today)
        raw_dir: Root directory for raw output

    Returns:
        True on success, False otherwise.
    """
    if date_str is None:
        date_str = datetime.now().strftime("%Y-%m-%d")

    out_path = raw_dir / date_str / f"{slug_for_url(url)}.json"

    if skip_existing and out_path.exists():
        print(f"Skipping (already exists): {out_path}")
        return True

    try:
        data = build_request(url, fields, comments).fetch_raw()
    except DiffbotError as e:
        print(f"Error: {e}")
        return False
    except requests.exceptions.RequestException as e:
        print(f"Error: Request failed: {e}")
        return False

    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w") as f:
        json.dump(data, f, indent=2)

    print(f"Ingested {url} to {out_path}")
    return True


def main():
    """Main entry point: extract every URL given on the command line."""
    parser = argparse.ArgumentParser(description="Extract articles with the Diffbot Article API.")
    parser.add_argument("urls", nargs="+", help="Article URLs to extract")
    parser.add_argument("--fields", help="Comma-separated optional fields (e.g. tags,meta)")
    parser.add_argument("--comments", action="store_true", help="Include the comment count")
    parser.add_argument("--skip-existing", action="store_true", help="Skip URLs already ingested today")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)

    print(f"=== Diffbot Article Ingestion: {datetime.now().isoformat()} ===")
    failed = 0
    for url in args.urls:
        if not ingest_article(url, args.fields, args.comments, args.skip_existing):
            failed += 1

    if failed:
        print(f"Ingestion finished with {failed} failure(s).")
        exit(1)
    print("Ingestion completed successfully.")


if __name__ == "__main__":
    main()
