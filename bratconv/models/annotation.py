from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Entity:
    id: int
    begin: int
    end: int
    type_name: str


@dataclass(frozen=True)
class Relation:
    """
    Directed link between two entities.
    head/tail spans are copied from the entity map when the record is resolved,
    so a relation never needs the map again.
    """

    id: int
    name: str
    head_id: int
    tail_id: int
    head_begin: int
    head_end: int
    tail_begin: int
    tail_end: int


@dataclass(frozen=True)
class Schema:
    entity_types: frozenset[str]
    relation_types: frozenset[str]


@dataclass
class ParsedAnnotations:
    entities: dict[int, Entity] = field(default_factory=dict)
    relations: list[Relation] = field(default_factory=list)


@dataclass(frozen=True)
class DocumentPair:
    doc_id: str
    ann_path: Path
    txt_path: Path
    is_test: bool


@dataclass(frozen=True)
class ConvertedDocument:
    doc_id: str
    is_test: bool
    acharya: str
    standoff: str
    entity_count: int
    relation_count: int


@dataclass(frozen=True)
class ConversionResult:
    acharya: str
    documents: list[ConvertedDocument]
