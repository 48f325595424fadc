from pathlib import Path, PurePosixPath
from typing import Optional, TextIO, Union

from datparser import config
from datparser.errors import SourceNotFoundError
from datparser.parser import parse_lines
from datparser.record import ModelRecord


def resolve_part_path(part_id: str) -> Optional[Path]:
    """
    Find <part_id>.dat in the configured LDraw directories.
    Sub-part ids like s\\3001s01 use backslashes in reference lines.
    Ids that are absolute or climb out with .. never resolve.
    """
    test_id = part_id.replace('\\', '/')
    if test_id.lower().endswith('.dat'):
        test_id = test_id[:-4]

    pure = PurePosixPath(test_id)
    if not test_id or pure.is_absolute() or '..' in pure.parts:
        return None

    for base in config.get_search_dirs():
        for candidate in (base / f"{test_id}.dat", base / f"{test_id}.DAT"):
            if candidate.is_file():
                return candidate

    return None


def find_source(part: Union[str, Path], library_only: bool = False) -> Path:
    """
    Accept either a path to an existing file or a library part id.
    With library_only, only ids found in the LDraw library are accepted.
    """
    if not library_only:
        path = Path(part)
        if path.is_file():
            return path

    resolved = resolve_part_path(str(part))
    if not resolved:
        raise SourceNotFoundError(str(part))
    return resolved


def open_part(part: Union[str, Path], library_only: bool = False) -> TextIO:
    path = find_source(part, library_only=library_only)
    try:
        return open(path, 'r', encoding=config.ENCODING, errors='replace')
    except OSError as e:
        raise SourceNotFoundError(str(part)) from e


def load_part(part: Union[str, Path], library_only: bool = False) -> ModelRecord:
    """
    Load and parse one part file.

    Raises SourceNotFoundError before parsing when the file is missing and
    ParseError when reading fails part way through.
    """
    with open_part(part, library_only=library_only) as f:
        return parse_lines(f, source=str(part))
