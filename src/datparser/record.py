from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Revision:
    """Release token from a !LDRAW_ORG line, e.g. 1996-01.

    The two digit part is a release counter within the year, not a month,
    so it is kept as text and never validated as a calendar date.
    """
    year: int
    revision: str

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.revision}"


@dataclass(frozen=True)
class ModelRecord:
    id: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = None
    keywords: tuple[str, ...] = ()
    author: Optional[str] = None
    type: Optional[str] = None
    modified: Optional[Revision] = None
    subparts: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))
    parent: Optional[str] = None

    def to_dict(self) -> dict:
        """JSON-ready representation."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "keywords": list(self.keywords),
            "author": self.author,
            "type": self.type,
            "modified": str(self.modified) if self.modified else None,
            "subparts": dict(self.subparts),
            "parent": self.parent,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ModelRecord":
        modified = None
        if data.get("modified"):
            year, revision = data["modified"].split("-", 1)
            modified = Revision(int(year), revision)
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            category=data.get("category"),
            keywords=tuple(data.get("keywords") or ()),
            author=data.get("author"),
            type=data.get("type"),
            modified=modified,
            subparts=MappingProxyType(dict(data.get("subparts") or {})),
            parent=data.get("parent"),
        )

    def with_classification(self, part_type: Optional[str], parent: Optional[str]) -> "ModelRecord":
        return replace(self, type=part_type, parent=parent)


# Fields a header line may assign. parent is only ever set by the resolver.
SCAN_FIELDS = {"id", "name", "category", "keywords", "author", "type", "modified"}
WRITE_ONCE_FIELDS = {"id", "name"}


class RecordBuilder:
    """
    Mutable record used while scanning a file.

    Two update disciplines are exposed: set_once() keeps the first value
    written and overwrite() keeps the last. Write-once fields refuse
    overwrite() so a later header line can never replace them.
    """

    def __init__(self):
        self._values: dict[str, Any] = {}
        self.subparts: dict[str, int] = {}

    def get(self, name: str) -> Any:
        return self._values.get(name)

    def set_once(self, name: str, value: Any) -> bool:
        """Assign value unless the field already holds one. Returns True if assigned."""
        self._check(name)
        if self._values.get(name) is not None:
            return False
        self._values[name] = value
        return True

    def overwrite(self, name: str, value: Any) -> None:
        self._check(name)
        if name in WRITE_ONCE_FIELDS:
            raise ValueError(f"{name} is write-once, use set_once()")
        self._values[name] = value

    def add_subpart(self, part_id: str) -> None:
        self.subparts[part_id] = self.subparts.get(part_id, 0) + 1

    def build(self) -> ModelRecord:
        values = dict(self._values)
        if "keywords" in values:
            values["keywords"] = tuple(values["keywords"])
        return ModelRecord(subparts=MappingProxyType(dict(self.subparts)), **values)

    def _check(self, name: str) -> None:
        if name not in SCAN_FIELDS:
            raise KeyError(f"Unknown header field: {name}")
