from typing import Iterable, Optional

from datparser.errors import ParseError
from datparser.grammars import (
    HEADER_GRAMMARS,
    FieldUpdate,
    get_referenced_model_number,
    parse_first_line,
)
from datparser.record import ModelRecord, RecordBuilder
from datparser.resolver import resolve

META = 0
REFERENCE = 1


def classify_line(line: str) -> Optional[tuple[int, str]]:
    """
    Return (line_type, body) for meta and sub-file reference lines.

    Meta bodies have the leading "0 " removed, reference lines are returned
    whole. Geometry and blank lines give None.
    """
    line = line.strip()
    if line.startswith("0 "):
        return META, line[2:]
    if line.startswith("1 "):
        return REFERENCE, line
    return None


def match_header(body: str) -> Optional[list[FieldUpdate]]:
    """Apply the first header grammar that matches the meta body."""
    for grammar in HEADER_GRAMMARS:
        updates = grammar(body)
        if updates is not None:
            return updates
    return None


def apply_updates(builder: RecordBuilder, updates: list[FieldUpdate]) -> None:
    for update in updates:
        if update.once:
            builder.set_once(update.field, update.value)
        else:
            builder.overwrite(update.field, update.value)


class DatParser:
    """
    Parses the header of a single LDraw .dat file into a ModelRecord.

    A parser instance holds the state of one scan, use a new one per file.
    """

    def __init__(self, source: str = "<stream>"):
        self.source = source
        self.builder = RecordBuilder()
        self._seen_meta = False

    def feed(self, line: str) -> None:
        classified = classify_line(line)
        if classified is None:
            return

        line_type, body = classified
        if line_type == META:
            if not self._seen_meta:
                self._seen_meta = True
                updates = parse_first_line(body)
            else:
                updates = match_header(body)
            if updates:
                apply_updates(self.builder, updates)

        elif line_type == REFERENCE:
            part_id = get_referenced_model_number(body)
            if part_id is not None:
                self.builder.add_subpart(part_id)

    def parse(self, lines: Iterable[str]) -> ModelRecord:
        try:
            for line in lines:
                self.feed(line)
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(self.source) from e
        return resolve(self.builder.build())


def parse_lines(lines: Iterable[str], source: str = "<stream>") -> ModelRecord:
    """
    Parse an iterable of lines (an open file, a list, ...) into a ModelRecord.
    Raises ParseError if the source fails while being read.
    """
    return DatParser(source).parse(lines)


def parse_text(text: str) -> ModelRecord:
    return parse_lines(text.splitlines())
