"""
Post-scan classification of LDraw part records.

Part numbering conventions:
https://www.ldraw.org/library/tracker/ref/numberfaq/
"""

import re
from typing import Optional

from datparser.record import ModelRecord

# Types whose single sub-file reference is the part they stand for
SINGLE_PARENT_TYPES = {
    "Part Alias",
    "Shortcut Physical_Colour",
    "Shortcut Alias",
    "Part Physical_Colour",
}

# nnnDnn: part with a sticker applied
STICKER_RE = re.compile(r"d[a-z0-9][a-z0-9]$")
# nnnPxx: printed version of nnn
PRINTED_RE = re.compile(r"^(.+)p[0-9a-z]{1,3}$")
# ~Moved to <new number>  (LDraw header specification, Appendix II)
MOVED_RE = re.compile(r"^~Moved to (.+)$")


def is_sticker(name: Optional[str], part_id: Optional[str]) -> bool:
    if name and name.startswith("Sticker"):
        return True
    return bool(part_id and STICKER_RE.search(part_id))


def get_printed_model_parent_number(part_id: Optional[str]) -> Optional[str]:
    if not part_id:
        return None
    match = PRINTED_RE.match(part_id)
    return match.group(1) if match else None


def get_obsolete_model_parent_number(name: Optional[str]) -> Optional[str]:
    if not name:
        return None
    match = MOVED_RE.match(name)
    return match.group(1) if match else None


def resolve(record: ModelRecord) -> ModelRecord:
    """Assign the final type and parent of a fully scanned record."""
    if is_sticker(record.name, record.id):
        return record.with_classification("Sticker", record.parent)

    if len(record.subparts) == 1 and record.type in SINGLE_PARENT_TYPES:
        return record.with_classification(record.type, next(iter(record.subparts)))

    parent = get_printed_model_parent_number(record.id)
    if parent:
        return record.with_classification("Printed", parent)

    parent = get_obsolete_model_parent_number(record.name)
    if parent:
        return record.with_classification("Alias", parent)

    if record.name and record.name.startswith("~") and record.type != "Alias":
        return record.with_classification("Obsolete/Subpart", record.parent)

    return record
