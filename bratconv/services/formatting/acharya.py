from __future__ import annotations

import json
from typing import Any

from bratconv.core.config import settings
from bratconv.models.annotation import Entity, Relation
from bratconv.services.text.offsets import substring


def is_test_document(doc_id: str, prefix: str | None = None) -> bool:
    """
    Test documents are marked by their file name, e.g. "t_report_01".
    """
    if prefix is None:
        prefix = settings.TEST_DOC_PREFIX
    return doc_id.startswith(prefix)


def _acharya_record(
    text: str,
    entities: dict[int, Entity],
    relations: list[Relation],
    doc_id: str,
    is_test: bool,
) -> str:
    record: dict[str, Any] = {"id": doc_id}
    if is_test:
        record["test"] = True

    record["Data"] = text
    record["Entities"] = [[e.begin, e.end, e.type_name] for e in entities.values()]
    record["Relations"] = [
        {
            "head": [r.head_begin, r.head_end],
            "tail": [r.tail_begin, r.tail_end],
            "name": r.name,
        }
        for r in relations
    ]

    # json escapes "\n" inside strings but keeps U+2028/U+2029 raw,
    # both count as line breaks for splitlines() and JS readers
    out = json.dumps(record, ensure_ascii=False, separators=(",", ":"))
    out = out.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")
    return out + "\n"


def _standoff_block(text: str, entities: dict[int, Entity], relations: list[Relation]) -> str:
    lines: list[str] = []

    for e in entities.values():
        covered = substring(text, e.begin, e.end)
        lines.append(f"T{e.id}\t{e.type_name} {e.begin} {e.end}\t{covered}")

    for r in relations:
        lines.append(f"R{r.id}\t{r.name} Arg1:T{r.head_id} Arg2:T{r.tail_id}\t")

    return "\n".join(lines)


def format_document(
    text: str,
    entities: dict[int, Entity],
    relations: list[Relation],
    doc_id: str,
    is_test: bool,
) -> tuple[str, str]:
    """
    Build both output representations of one document.

    Returns (acharya, standoff):
        - acharya: one JSON object terminated by a newline
        - standoff: regenerated T/R lines, newline separated, no trailing newline

    Raises RangeError when an entity span does not fit the text.
    """
    standoff = _standoff_block(text, entities, relations)
    acharya = _acharya_record(text, entities, relations, doc_id, is_test)

    return acharya, standoff
