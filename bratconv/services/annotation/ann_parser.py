from __future__ import annotations

import logging
import re
from collections.abc import Collection
from typing import Final

from bratconv.core.config import settings
from bratconv.core.errors import (
    ERR_BAD_FORMAT,
    ERR_BAD_FORMAT_TAB,
    ERR_DISCONTINUOUS_NOT_SUPPORTED,
    ERR_TXT_ANN_BAD_FORMAT,
    FormatError,
    UnsupportedFeature,
)
from bratconv.models.annotation import Entity, ParsedAnnotations, Relation
from bratconv.services.text.lines import iter_lines

logger = logging.getLogger(__name__)

ENTITY_PREFIX: Final[str] = "T"
RELATION_PREFIX: Final[str] = "R"

# R3<TAB>works_for Arg1:T1 Arg2:T2
RELATION_RE: Final[re.Pattern[str]] = re.compile(
    r"R(\d+)\s+(\w+) Arg1:T(\d+) Arg2:T(\d+)", re.ASCII
)
INT_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+", re.ASCII)


def _to_int(token: str) -> int:
    if not INT_RE.fullmatch(token):
        raise FormatError(f"{ERR_BAD_FORMAT}invalid offset {token!r}")
    return int(token)


def get_annotation_number(record: str) -> int:
    """
    Annotation number of a record, e.g. 12 for "T12<TAB>PERSON 0 4<TAB>John".
    """
    head = record.split("\t", 1)[0]
    suffix = head[1:]
    if not suffix or not INT_RE.fullmatch(suffix):
        raise FormatError(ERR_TXT_ANN_BAD_FORMAT)

    return int(suffix)


def parse_entities(ann_text: str, entity_types: Collection[str]) -> dict[int, Entity]:
    """
    Collect text-bound annotations (T lines) whose type is whitelisted.

        - ann_text: full .ann content
        - entity_types: entity names declared in annotation.conf

    Other record kinds (R, E, A, #...) are ignored here.
    """
    entities: dict[int, Entity] = {}

    for line in iter_lines(ann_text):
        if not line.startswith(ENTITY_PREFIX):
            continue

        fields = line.split("\t")
        if len(fields) != 3:
            raise FormatError(ERR_BAD_FORMAT_TAB)

        # "PERSON 0 4;7 9" -> fragmented span
        if ";" in fields[1]:
            raise UnsupportedFeature(ERR_DISCONTINUOUS_NOT_SUPPORTED)

        type_and_span = fields[1].split(" ")
        if len(type_and_span) != 3:
            raise FormatError(f"{ERR_BAD_FORMAT}expected <type> <begin> <end>")

        type_name, begin_raw, end_raw = type_and_span
        if type_name.strip() not in entity_types:
            continue

        begin = _to_int(begin_raw)
        end = _to_int(end_raw)
        ann_no = get_annotation_number(line)

        entities[ann_no] = Entity(id=ann_no, begin=begin, end=end, type_name=type_name)

    return entities


def parse_relations(
    ann_text: str,
    entity_map: dict[int, Entity],
    relation_types: Collection[str] | None = None,
    strict: bool | None = None,
) -> list[Relation]:
    """
    Collect R lines in file order and resolve their arguments against entity_map.

    relation_types is informational: unknown names are logged, not dropped.
    An argument missing from entity_map resolves to a zero span, or raises
    FormatError when strict (defaults to settings.STRICT_RELATIONS).
    """
    if strict is None:
        strict = settings.STRICT_RELATIONS

    relations: list[Relation] = []

    for line in iter_lines(ann_text):
        if not line.startswith(RELATION_PREFIX):
            continue

        m = RELATION_RE.search(line)
        if m is None:
            continue

        rel_no, name, arg1, arg2 = int(m.group(1)), m.group(2), int(m.group(3)), int(m.group(4))

        if relation_types is not None and name not in relation_types:
            logger.debug("Relation R%d uses undeclared type %r", rel_no, name)

        head = entity_map.get(arg1)
        tail = entity_map.get(arg2)
        for arg_no, ent in ((arg1, head), (arg2, tail)):
            if ent is not None:
                continue
            if strict:
                raise FormatError(f"relation R{rel_no} references unknown entity T{arg_no}")
            logger.warning("Relation R%d references unknown entity T%d", rel_no, arg_no)

        relations.append(
            Relation(
                id=rel_no,
                name=name,
                head_id=arg1,
                tail_id=arg2,
                head_begin=head.begin if head else 0,
                head_end=head.end if head else 0,
                tail_begin=tail.begin if tail else 0,
                tail_end=tail.end if tail else 0,
            )
        )

    return relations


def parse_annotations(
    ann_text: str,
    entity_types: Collection[str],
    relation_types: Collection[str] | None = None,
    strict_relations: bool | None = None,
) -> ParsedAnnotations:
    # Relations need every entity first, so the buffer is scanned twice
    entities = parse_entities(ann_text, entity_types)
    relations = parse_relations(ann_text, entities, relation_types, strict=strict_relations)

    return ParsedAnnotations(entities=entities, relations=relations)
