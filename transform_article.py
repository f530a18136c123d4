"""
Diffbot Article API – transform raw to slim.

Usage:
    python transform_article.py [--overwrite]
"""

import argparse

from article.transform import transform_all


def main():
    parser = argparse.ArgumentParser(description="Transform raw Article API JSON to slim NDJSON.")
    parser.add_argument("--overwrite", action="store_true", help="Rewrite existing slim files")
    args = parser.parse_args()
    _, failed = transform_all(overwrite=args.overwrite)
    if failed:
        exit(1)


if __name__ == "__main__":
    main()
