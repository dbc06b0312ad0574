"""
Entry point for the WordPress export parser.

Usage:
  python main.py --config config/export_config.json
  python main.py --input docs/site.wordpress.xml --save-images none \
    --timezone Europe/Lisbon --frontmatter-fields "title,date,id:post_id"
"""

from __future__ import annotations

import argparse
import sys

from wp_export.export_tool import WordPressExportTool
from wp_export.utils.errors import ExportError

CONFIG_FILE = "config/export_config.json"


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse a WordPress export into posts with frontmatter and images.",
    )
    parser.add_argument("--config", default=CONFIG_FILE, help="JSON configuration file")
    parser.add_argument("--input", help="Export file path or http(s) URL")
    parser.add_argument(
        "--save-images",
        choices=["none", "attached", "scraped", "all"],
        help="Which images to collect for each post",
    )
    parser.add_argument("--timezone", help="IANA timezone used to read post dates")
    parser.add_argument(
        "--frontmatter-fields",
        help='Comma separated fields, each "key" or "key:alias"',
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main function to run the WordPress export parser.
    """
    args = parse_args(argv)
    overrides = {
        "input": args.input,
        "saveImages": args.save_images,
        "timezone": args.timezone,
        "frontmatterFields": args.frontmatter_fields,
    }

    try:
        tool = WordPressExportTool(overrides, config_file=args.config)
        tool.log_message("Starting WordPress export parsing.")
        posts = tool.parse()
    except ExportError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    image_count = sum(len(post.image_urls) for post in posts)
    covers = sum(1 for post in posts if post.cover_image)
    tool.log_message(f"{len(posts)} posts ready, {image_count} images, {covers} cover images.")
    tool.log_message("Parsing finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
