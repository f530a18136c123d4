"""
Diffbot Article API – transform raw to slim.

Reads raw JSON from article_raw/, decodes each result into an Article,
extracts analysis-ready fields, writes validated NDJSON to
article_slim/{date}/{name}.ndjson.
"""

import json
from pathlib import Path

from pydantic import ValidationError

from article.models import Article, SlimArticle

RAW_DIR = Path("article_raw")
SLIM_DIR = Path("article_slim")


def primary_image_url(article: Article) -> str | None:
    """URL of the image flagged primary, else the first image, else None."""
    images = article.images or []
    for image in images:
        if image.primary:
            return image.url
    return images[0].url if images else None


def extract_slim_article(article: Article) -> dict:
    """
    Extract analysis-ready fields from a decoded Article.
    Includes media counts and the comment count.
    """
    return {
        "url": article.url,
        "resolved_url": article.resolved_url,
        "title": article.title,
        "author": article.author,
        "date": article.date,
        "human_language": article.human_language,
        "type": article.type.value if article.type else None,
        "num_pages": article.num_pages,
        "tags": article.tags,
        "image_count": len(article.images or []),
        "video_count": len(article.videos or []),
        "primary_image_url": primary_image_url(article),
        "comment_count": article.comments.count if article.comments else None,
    }


def transform_file(raw_path: Path, overwrite: bool = False, slim_dir: Path = SLIM_DIR) -> bool:
    """
    Read raw JSON, decode and validate, write slim NDJSON.

    The raw file holds one Article API response or a list of them.

    Args:
        raw_path: Path to raw JSON file
        overwrite: If True, overwrite existing slim file
        slim_dir: Root directory for slim output

    Returns:
        True on success, False otherwise.
    """
    date_str = raw_path.parent.name
    slim_path = slim_dir / date_str / f"{raw_path.stem}.ndjson"

    if not raw_path.exists():
        print(f"Skipping (raw file not found): {raw_path}")
        return False

    if slim_path.exists() and not overwrite:
        print(f"Skipping (slim already exists): {slim_path}")
        return True

    print(f"Transforming: {raw_path}")

    try:
        with open(raw_path) as f:
            raw_data = json.load(f)
    except json.JSONDecodeError as e:
        print(f"Skipping (unreadable JSON): {raw_path}: {e}")
        return False

    docs = raw_data if isinstance(raw_data, list) else [raw_data]

    slim_path.parent.mkdir(parents=True, exist_ok=True)
    skipped = 0
    with open(slim_path, "w") as f:
        for doc in docs:
            try:
                article = Article.model_validate(doc)
                slim = SlimArticle.model_validate(extract_slim_article(article))
                f.write(slim.model_dump_json() + "\n")
            except ValidationError as e:
                skipped += 1
                url = doc.get("url") if isinstance(doc, dict) else None
                print(f"  Validation error (skipping) url={url!r}: {e}")

    written = len(docs) - skipped
    if skipped:
        print(f"Transformed {written} articles ({skipped} skipped) -> {slim_path}")
    else:
        print(f"Transformed {written} articles -> {slim_path}")

    return True


def transform_all(
    overwrite: bool = False, raw_dir: Path = RAW_DIR, slim_dir: Path = SLIM_DIR
) -> tuple[int, int]:
    """
    Transform all raw files found under raw_dir into slim_dir.

    Returns:
        (succeeded, failed) file counts.
    """
    raw_files = sorted(raw_dir.glob("*/*.json"))

    if not raw_files:
        print(f"No raw files found in {raw_dir}. Run article ingest first.")
        return 0, 0

    print(f"Found {len(raw_files)} raw file(s) to transform.")
    success = 0
    failed = 0

    for raw_path in raw_files:
        if transform_file(raw_path, overwrite=overwrite, slim_dir=slim_dir):
            success += 1
        else:
            failed += 1

    print(f"\nTransformation complete: {success} succeeded, {failed} failed.")
    return success, failed
