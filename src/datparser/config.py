from pathlib import Path
import os

# Default to C:\LDraw\ldraw if not specified
LDRAW_PATH = Path(os.environ.get("LDRAW_PATH", r"C:\LDraw\ldraw"))

# Official files are UTF-8, older unofficial ones are often latin-1
ENCODING = os.environ.get("DATPARSER_ENCODING", "utf-8")

def get_parts_dir() -> Path:
    return LDRAW_PATH / "parts"

def get_p_dir() -> Path:
    return LDRAW_PATH / "p"

def get_search_dirs() -> list[Path]:
    """Directories searched for <part_id>.dat, in priority order."""
    dirs = [
        get_parts_dir(),
        get_parts_dir() / "s",
        get_p_dir(),
        get_p_dir() / "48",
        LDRAW_PATH / "models",
    ]
    unofficial = LDRAW_PATH / "unofficial"
    if unofficial.exists():
        dirs += [unofficial / "parts", unofficial / "parts" / "s", unofficial / "p"]
    return dirs
