#!/usr/bin/env python
"""
Parse every part header in an LDraw directory and print classification stats.

Usage:
    python scripts/scan_library.py [--dir C:\\LDraw\\ldraw\\parts] [--workers 4]
"""

import sys
import argparse
import json
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from datparser.config import get_parts_dir
from datparser.library import scan_library, get_stats


def main():
    parser = argparse.ArgumentParser(description="Scan LDraw part headers.")
    parser.add_argument("--dir", type=Path, default=None, help="Directory of .dat files (default: LDRAW_PATH/parts)")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes")
    parser.add_argument("--output", type=Path, default=None, help="Write all records to this JSON file")
    args = parser.parse_args()

    parts_dir = args.dir or get_parts_dir()
    if not parts_dir.exists():
        print(f"ERROR: Parts directory not found: {parts_dir}")
        sys.exit(1)

    print("=" * 60)
    print("LDraw Header Scan")
    print("=" * 60)

    records = scan_library(parts_dir, workers=args.workers)
    stats = get_stats(records)

    print()
    print(f"{'TYPE':40s}  COUNT")
    for part_type, count in stats["types"].items():
        print(f"{part_type:40s}  {count:5d}")
    print()
    print(f"Total parts: {stats['total']} ({stats['with_parent']} with a parent)")
    print("=" * 60)

    if args.output:
        args.output.write_text(json.dumps(
            {part_id: r.to_dict() for part_id, r in records.items()}, indent=2
        ))
        print(f"[INFO] Saved {len(records)} records to {args.output}")


if __name__ == "__main__":
    main()
