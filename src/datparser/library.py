"""
Batch parsing of a whole LDraw library directory.
"""

from collections import Counter
from multiprocessing import Pool, cpu_count
from pathlib import Path
from typing import Iterator, Mapping, Optional

from datparser.errors import DatParserError
from datparser.loader import load_part
from datparser.record import ModelRecord


def iter_part_files(directory: Path) -> Iterator[Path]:
    for path in sorted(Path(directory).iterdir()):
        if path.is_file() and path.suffix in ('.dat', '.DAT'):
            yield path


def process_part(part_path: str) -> tuple[str, Optional[dict], Optional[str]]:
    """Wrapper for multiprocessing (returns dict for pickling)."""
    try:
        record = load_part(Path(part_path))
    except DatParserError as e:
        return part_path, None, str(e)
    return part_path, record.to_dict(), None


def scan_library(directory: Path, workers: Optional[int] = None) -> dict[str, ModelRecord]:
    """
    Parse every part file in directory, keyed by record id.
    Files without a Name: line are keyed by their file stem.
    """
    part_paths = [str(p) for p in iter_part_files(directory)]
    if workers is None:
        workers = max(1, cpu_count() - 1)

    records: dict[str, ModelRecord] = {}

    def collect(results):
        for part_path, data, error in results:
            if error:
                print(f"[WARN] Skipping {part_path}: {error}")
                continue
            record = ModelRecord.from_dict(data)
            records[record.id or Path(part_path).stem] = record

    if workers == 1:
        collect(map(process_part, part_paths))
    else:
        with Pool(workers) as pool:
            collect(pool.imap_unordered(process_part, part_paths, chunksize=100))

    print(f"[INFO] Parsed {len(records)} of {len(part_paths)} part files in {directory}")
    return records


def get_stats(records: Mapping[str, ModelRecord]) -> dict:
    """Get library statistics."""
    types = Counter(r.type or "Unknown" for r in records.values())
    categories = Counter(r.category or "Unknown" for r in records.values())
    return {
        "total": len(records),
        "with_parent": sum(1 for r in records.values() if r.parent),
        "types": dict(types.most_common()),
        "categories": dict(categories.most_common()),
    }


def children_of(records: Mapping[str, ModelRecord], parent_id: str) -> list[str]:
    """Ids of records (aliases, prints, moved parts) that point at parent_id."""
    return sorted(part_id for part_id, r in records.items() if r.parent == parent_id)
