from .errors import DatParserError, SourceNotFoundError, ParseError
from .record import ModelRecord, Revision, RecordBuilder
from .parser import DatParser, parse_lines, parse_text
from .resolver import resolve
from .loader import load_part, resolve_part_path
from .library import scan_library, get_stats, children_of


def parse(part) -> ModelRecord:
    """
    Parse the header of an LDraw part, given a file path or a library id.
    """
    return load_part(part)
