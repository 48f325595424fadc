"""
Header field grammars for LDraw part files.

Each grammar takes the body of a meta line (the text after the leading
"0 ") and returns None when it does not apply, or a list of FieldUpdate
when it does. The order of HEADER_GRAMMARS is the dispatch priority.

LDraw.org Standards: Official Library Header Specification
(https://www.ldraw.org/article/398.html)
"""

import re
from typing import Callable, NamedTuple, Optional

from datparser.record import Revision


class FieldUpdate(NamedTuple):
    field: str
    value: object
    once: bool = False  # write-once field, first writer wins


Grammar = Callable[[str], Optional[list[FieldUpdate]]]

# 0 <CategoryName> <PartDescription>
FIRST_LINE_STRIP = "=_~"
NAME_STRIP = "=_"
MULTI_SPACE_RE = re.compile(r" {2,}")

# 0 Name: <Filename>.dat
NAME_RE = re.compile(r"^Name: (.*)\.dat$")

# 0 !LDRAW_ORG Part|Subpart|Primitive|48_Primitive|Shortcut (qualifiers) ORIGINAL|UPDATE YYYY-RR
LDRAW_ORG_TYPE_RE = re.compile(r"^!LDRAW_ORG (.*)( UPDATE| ORIGINAL)(.*)$")
LDRAW_ORG_DATE_RE = re.compile(r"^!LDRAW_ORG (.*)( UPDATE | ORIGINAL )(.*)$")
REVISION_RE = re.compile(r"^([1-2][0-9]{3})-([0-9]{2})$")

# Sub-file reference:  1 <colour> x y z a b c d e f g h i <file>
# LDraw.org Standards: File Format 1.0.2 (https://www.ldraw.org/article/218.html)
IDENTITY_REFERENCE_RE = re.compile(r"^1 16 0 0 0 -1 0 0 0 1 0 0 0 1 (.*)\.(dat|DAT)$")
REFERENCE_RE = re.compile(r"^1(.*) (.*)\.(dat|DAT)$")


def parse_first_line(line: str) -> list[FieldUpdate]:
    """The description line. Always applies, but only to the first meta line."""
    line = line.strip()
    tokens = line.lstrip(FIRST_LINE_STRIP).split()
    name = MULTI_SPACE_RE.sub(" ", line.lstrip(NAME_STRIP).lstrip())
    updates = [FieldUpdate("name", name, once=True)]
    if tokens:
        updates.append(FieldUpdate("category", tokens[0]))
    return updates


def parse_category(line: str) -> Optional[list[FieldUpdate]]:
    if not line.startswith("!CATEGORY "):
        return None
    return [FieldUpdate("category", line[len("!CATEGORY "):].strip())]


def parse_keywords(line: str) -> Optional[list[FieldUpdate]]:
    if not line.startswith("!KEYWORDS "):
        return None
    return [FieldUpdate("keywords", line[len("!KEYWORDS "):].split(", "))]


def parse_name(line: str) -> Optional[list[FieldUpdate]]:
    if not line.startswith("Name: "):
        return None
    # Only lowercase .dat is stripped here, references also accept .DAT
    match = NAME_RE.match(line)
    part_id = match.group(1) if match else line[len("Name: "):]
    return [FieldUpdate("id", part_id, once=True)]


def parse_author(line: str) -> Optional[list[FieldUpdate]]:
    if not line.startswith("Author: "):
        return None
    return [FieldUpdate("author", line[len("Author: "):])]


def parse_ldraw_org(line: str) -> Optional[list[FieldUpdate]]:
    if not line.startswith("!LDRAW_ORG "):
        return None

    match = LDRAW_ORG_TYPE_RE.match(line)
    # Unofficial files carry no ORIGINAL/UPDATE token
    part_type = match.group(1) if match else line[len("!LDRAW_ORG "):]
    updates = [FieldUpdate("type", part_type)]

    match = LDRAW_ORG_DATE_RE.match(line)
    if match:
        revision = parse_revision(match.group(3))
        if revision:
            updates.append(FieldUpdate("modified", revision))
    return updates


def parse_revision(token: str) -> Optional[Revision]:
    match = REVISION_RE.match(token)
    if not match:
        return None
    return Revision(year=int(match.group(1)), revision=match.group(2))


HEADER_GRAMMARS: list[Grammar] = [
    parse_category,
    parse_keywords,
    parse_name,
    parse_author,
    parse_ldraw_org,
]


def get_referenced_model_number(line: str) -> Optional[str]:
    """
    Return the id of the file referenced by a type 1 line.

    The conventional placeholder placement (colour 16 at the origin with
    the X axis mirrored) is not a structural dependency and yields None.
    """
    if IDENTITY_REFERENCE_RE.match(line):
        return None
    match = REFERENCE_RE.match(line)
    if match:
        return match.group(2)
    return None
